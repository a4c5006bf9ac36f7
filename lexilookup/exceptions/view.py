"""Result view related exceptions."""

from .base import LexiLookupException


class OriginGoneError(LexiLookupException):
    """Raised when the surface that requested a lookup no longer exists."""

    pass


class InactiveViewError(LexiLookupException):
    """Raised when acting on a result view that is closed or shows no result."""

    pass
