"""
lexilookup - French word lookups for writers

Look up synonyms, antonyms, dictionary definitions and verb conjugations,
browse them in a refreshable result view and replace the word you were
editing with the one you picked.
"""

__version__ = "1.0.0"
__author__ = "lexilookup Contributors"
