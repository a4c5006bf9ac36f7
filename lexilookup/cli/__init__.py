"""Command-line interface for lexilookup."""
