"""Replace the looked-up word in its originating surface."""

import logging

from lexilookup.exceptions import InactiveViewError, OriginGoneError
from lexilookup.interfaces import Clipboard
from lexilookup.models import ViewState

from .clipboard import TokenClipboard
from .result_view import ResultView

logger = logging.getLogger(__name__)


class ReplaceCoordinator:
    """Substitute a token picked in a result view for the word it was looked up for.

    The coordinator reads the token and writes to the origin surface; it
    never changes the view's content. Replaced tokens are also copied so
    the user can insert them again elsewhere.
    """

    def __init__(self, clipboard: Clipboard | None = None):
        """Initialize the coordinator.

        Args:
            clipboard: Where replaced tokens are copied (a private one if omitted)
        """
        self.clipboard = clipboard if clipboard is not None else TokenClipboard()

    def apply(self, view: ResultView, token: str) -> None:
        """Replace the origin's word or selection with token and close the view.

        Args:
            view: Result view the token was selected in
            token: Replacement text

        Raises:
            InactiveViewError: If the view is closed or not showing a result
            OriginGoneError: If the origin surface was closed, is read-only or
                no longer holds the looked-up word; the view is left open
                and unchanged
        """
        if not view.is_open or view.state is not ViewState.RENDERED:
            raise InactiveViewError(f"{view.title} n'affiche aucun résultat utilisable")

        origin = view.session.origin
        if origin is None:
            raise OriginGoneError("Cette recherche n'a pas de document d'origine")

        origin.assert_writable()

        replaced = origin.word()
        origin.replace(token)
        self.clipboard.copy(token)
        view.close()
        logger.info(f"Replaced '{replaced}' with '{token}'")

    def apply_at(self, view: ResultView, position: int) -> str | None:
        """Replace with the token rendered at position, if there is one.

        Returns:
            The token used, or None if position selects no token
        """
        token = view.select_token_at(position)
        if token is None:
            return None
        self.apply(view, token)
        return token
