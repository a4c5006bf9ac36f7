"""Result views, pipelines and the surfaces they act on."""

from .clipboard import TokenClipboard
from .pipelines import ConjugationPipeline, DefinitionPipeline, SynonymPipeline, create_pipeline
from .renderers import NO_RESULT, render_conjugation, render_definitions, render_synonyms
from .replace_coordinator import ReplaceCoordinator
from .result_view import ResultView
from .surface import FileSurface, SurfaceHandle, TextSurface, word_bounds

__all__ = [
    "ResultView",
    "ReplaceCoordinator",
    "SynonymPipeline",
    "DefinitionPipeline",
    "ConjugationPipeline",
    "create_pipeline",
    "render_synonyms",
    "render_definitions",
    "render_conjugation",
    "NO_RESULT",
    "TextSurface",
    "FileSurface",
    "SurfaceHandle",
    "word_bounds",
    "TokenClipboard",
]
