"""External checker related exceptions."""

from .base import LexiLookupException


class CheckerError(LexiLookupException):
    """Raised when the external checker cannot run or fails."""

    pass


class SetupError(LexiLookupException):
    """Raised when setup checks fail (missing Grammalecte install, etc)."""

    pass
