"""Business logic services for lexilookup."""

from .checker_service import CheckerService, parse_diagnostics
from .conjugation_service import ConjugationService
from .content_fetcher import HttpContentFetcher
from .definition_paginator import DefinitionPaginator, balanced_element_end
from .grammalecte_install import GrammalecteInstall
from .record_extractor import RecordExtractor
from .upstream_checker import UpstreamVersionChecker

__all__ = [
    "HttpContentFetcher",
    "RecordExtractor",
    "DefinitionPaginator",
    "balanced_element_end",
    "CheckerService",
    "parse_diagnostics",
    "ConjugationService",
    "GrammalecteInstall",
    "UpstreamVersionChecker",
]
