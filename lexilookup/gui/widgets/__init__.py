"""Widgets of the lexilookup editor."""

from .result_dialog import ResultDialog

__all__ = ["ResultDialog"]
