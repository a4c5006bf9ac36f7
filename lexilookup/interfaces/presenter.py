"""Presenter protocol for output abstraction."""

from typing import TYPE_CHECKING, Protocol

from lexilookup.models import Diagnostic

if TYPE_CHECKING:
    from lexilookup.views import ResultView


class PresenterProtocol(Protocol):
    """Interface for presenting output to user (CLI, GUI, etc).

    This protocol abstracts all output operations, allowing the same
    lookup logic to work with different presentation layers.
    """

    def show_info(self, message: str) -> None:
        """Display an informational message.

        Args:
            message: The informational message to display
        """
        ...

    def show_success(self, message: str) -> None:
        """Display a success message.

        Args:
            message: The success message to display
        """
        ...

    def show_warning(self, message: str) -> None:
        """Display a warning message.

        Args:
            message: The warning message to display
        """
        ...

    def show_error(self, message: str) -> None:
        """Display an error message.

        Args:
            message: The error message to display
        """
        ...

    def show_view(self, view: "ResultView") -> None:
        """Display the current content (or error) of a result view.

        Args:
            view: The result view to display
        """
        ...

    def show_tokens(self, view: "ResultView") -> None:
        """Display the selectable tokens of a result view.

        Args:
            view: The result view whose tokens are listed
        """
        ...

    def show_diagnostics(self, diagnostics: list[Diagnostic]) -> None:
        """Display checker diagnostics.

        Args:
            diagnostics: Diagnostics in document order
        """
        ...
