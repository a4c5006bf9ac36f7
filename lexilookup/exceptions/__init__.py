"""Custom exceptions for lexilookup."""

from .base import LexiLookupException
from .checker import CheckerError, SetupError
from .lookup import ExtractionEmpty, NetworkError, NotFoundError
from .view import InactiveViewError, OriginGoneError

__all__ = [
    "LexiLookupException",
    "NetworkError",
    "NotFoundError",
    "ExtractionEmpty",
    "OriginGoneError",
    "InactiveViewError",
    "CheckerError",
    "SetupError",
]
