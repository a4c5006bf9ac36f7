"""Interface protocols for lexilookup."""

from .clipboard import Clipboard
from .content_fetcher import ContentFetcher
from .lookup_pipeline import LookupPipeline
from .presenter import PresenterProtocol
from .surface import RangeMarker, Surface

__all__ = [
    "Clipboard",
    "ContentFetcher",
    "LookupPipeline",
    "PresenterProtocol",
    "RangeMarker",
    "Surface",
]
