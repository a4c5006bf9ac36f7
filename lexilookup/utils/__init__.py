"""Utility functions for lexilookup."""

from .text_utils import (
    conjugated_form,
    html_to_text,
    mask_matches,
    quote_term,
)

__all__ = [
    "conjugated_form",
    "html_to_text",
    "mask_matches",
    "quote_term",
]
