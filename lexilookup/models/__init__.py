"""Data models for lexilookup."""

from .diagnostic import Diagnostic, DiagnosticKind
from .lookup import LookupKind, LookupSession, RawPage
from .records import ConjugationRecord, DefinitionRecord, ExtractedRecord, SynonymRecord
from .rendering import RenderedContent, TokenSpan, ViewState

__all__ = [
    "LookupKind",
    "LookupSession",
    "RawPage",
    "SynonymRecord",
    "DefinitionRecord",
    "ConjugationRecord",
    "ExtractedRecord",
    "ViewState",
    "TokenSpan",
    "RenderedContent",
    "Diagnostic",
    "DiagnosticKind",
]
