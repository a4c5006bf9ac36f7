"""Refreshable result view shared by every lookup kind."""

from __future__ import annotations

import logging

from lexilookup.config import LookupConfig, create_default_config
from lexilookup.exceptions import LexiLookupException, NotFoundError
from lexilookup.interfaces import Clipboard, LookupPipeline
from lexilookup.models import LookupKind, LookupSession, RenderedContent, ViewState

from .pipelines import create_pipeline
from .renderers import NO_RESULT
from .surface import SurfaceHandle

logger = logging.getLogger(__name__)


class ResultView:
    """Stateful display of one lookup session.

    The view owns its session and a pipeline chosen from the session's
    kind. It goes IDLE -> LOADING -> RENDERED or ERROR, and can be
    refreshed any number of times. Only one pipeline run is in flight at a
    time: a refresh requested while LOADING is ignored.

    Failures never escape the view; they are turned into a message shown
    in place of the content.
    """

    def __init__(self, session: LookupSession, pipeline: LookupPipeline):
        """Initialize an idle view.

        Args:
            session: The lookup this view displays
            pipeline: Pipeline serving session.kind
        """
        if pipeline.kind is not session.kind:
            raise ValueError(f"Pipeline for {pipeline.kind} cannot serve a {session.kind} lookup")
        self.session = session
        self._pipeline = pipeline
        self.state = ViewState.IDLE
        self.content = RenderedContent()
        self.error_message: str | None = None
        self.is_open = True
        self.run_count = 0

    @classmethod
    def open(
        cls,
        kind: LookupKind,
        term: str,
        origin: SurfaceHandle | None = None,
        pipeline: LookupPipeline | None = None,
        config: LookupConfig | None = None,
    ) -> ResultView:
        """Create a view for (kind, term) and run its pipeline once.

        Args:
            kind: Lookup kind
            term: Word to look up
            origin: Handle on the surface that requested the lookup
            pipeline: Pipeline to use (built from config if omitted)
            config: Configuration used to build the default pipeline

        Returns:
            The view, in RENDERED or ERROR state

        Raises:
            ValueError: If term is empty
        """
        session = LookupSession(kind=kind, term=term, origin=origin)
        if pipeline is None:
            pipeline = create_pipeline(kind, config or create_default_config())
        view = cls(session, pipeline)
        view._load()
        return view

    @property
    def kind(self) -> LookupKind:
        return self.session.kind

    @property
    def term(self) -> str:
        return self.session.term

    @property
    def title(self) -> str:
        return str(self.session)

    @property
    def text(self) -> str:
        """What the view currently displays."""
        if self.state is ViewState.ERROR:
            return self.error_message or ""
        if self.state is ViewState.RENDERED:
            return self.content.text
        return ""

    def refresh(self) -> bool:
        """Re-run the pipeline for the same (kind, term).

        Returns:
            True if the pipeline ran, False if the call was ignored because
            a run is already in flight or the view is closed
        """
        if self.state is ViewState.LOADING:
            logger.debug(f"Refresh ignored, {self.title} is still loading")
            return False
        if not self.is_open:
            return False
        self._load()
        return True

    def select_token_at(self, position: int) -> str | None:
        """Return the token rendered at position, if any.

        Only lookups rendering discrete tokens (synonyms, conjugations) in
        RENDERED state have tokens; headings, placeholders and blank lines
        select nothing.
        """
        if self.state is not ViewState.RENDERED or not self.kind.has_tokens:
            return None
        return self.content.token_at(position)

    def copy_token_at(self, position: int, clipboard: Clipboard) -> str | None:
        """Copy the token at position to clipboard and return it."""
        token = self.select_token_at(position)
        if token is not None:
            clipboard.copy(token)
        return token

    def close(self) -> None:
        self.is_open = False

    def _load(self) -> None:
        self.state = ViewState.LOADING
        self.run_count += 1
        term = self.term

        try:
            record = self._pipeline.run(term)
            content = self._pipeline.render(term, record)
        except NotFoundError:
            self._fail(f"{NO_RESULT} pour « {term} »")
        except LexiLookupException as e:
            logger.warning(f"Lookup failed for {term}: {e}")
            self._fail(str(e))
        except Exception:
            logger.exception(f"Unexpected error while looking up {term}")
            self._fail(f"Erreur inattendue pendant la recherche de « {term} »")
        else:
            self.content = content
            self.error_message = None
            self.state = ViewState.RENDERED

    def _fail(self, message: str) -> None:
        self.error_message = message
        self.state = ViewState.ERROR

    def __repr__(self) -> str:
        return f"ResultView(kind={self.kind.value}, term='{self.term}', state={self.state.value})"
