"""Null presenter for testing (no output)."""

from lexilookup.models import Diagnostic
from lexilookup.views import ResultView


class NullPresenter:
    """Present output to nowhere (testing implementation)."""

    def show_info(self, message: str) -> None:
        """Display an informational message (no-op)."""
        pass

    def show_success(self, message: str) -> None:
        """Display a success message (no-op)."""
        pass

    def show_warning(self, message: str) -> None:
        """Display a warning message (no-op)."""
        pass

    def show_error(self, message: str) -> None:
        """Display an error message (no-op)."""
        pass

    def show_view(self, view: ResultView) -> None:
        """Display a result view (no-op)."""
        pass

    def show_tokens(self, view: ResultView) -> None:
        """Display the selectable tokens of a view (no-op)."""
        pass

    def show_diagnostics(self, diagnostics: list[Diagnostic]) -> None:
        """Display checker diagnostics (no-op)."""
        pass
