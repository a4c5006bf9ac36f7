"""Console presenter for CLI output."""

from lexilookup.models import Diagnostic, ViewState
from lexilookup.views import ResultView


class ConsolePresenter:
    """Present output to console (CLI implementation)."""

    def show_info(self, message: str) -> None:
        """Display an informational message."""
        print(message)

    def show_success(self, message: str) -> None:
        """Display a success message."""
        print(f"[OK] {message}")

    def show_warning(self, message: str) -> None:
        """Display a warning message."""
        print(f"[WARN] {message}")

    def show_error(self, message: str) -> None:
        """Display an error message."""
        print(f"[ERROR] {message}")

    def show_view(self, view: ResultView) -> None:
        """Display a result view, or its error message."""
        if view.state is ViewState.ERROR:
            self.show_error(view.text)
            return
        print(view.text)

    def show_tokens(self, view: ResultView) -> None:
        """Display the selectable tokens of a view as a numbered list."""
        tokens = view.content.tokens if view.state is ViewState.RENDERED else []
        if not tokens:
            print("(aucun mot à choisir)")
            return
        for i, token in enumerate(tokens, 1):
            print(f"{i:3d}. {token}")

    def show_diagnostics(self, diagnostics: list[Diagnostic]) -> None:
        """Display checker diagnostics."""
        if not diagnostics:
            self.show_success("Aucune erreur détectée")
            return

        print(f"\n{len(diagnostics)} diagnostic(s):")
        for diagnostic in diagnostics:
            print(f"  {diagnostic}")
