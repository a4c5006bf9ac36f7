"""PyQt6 editor front end for lexilookup."""
