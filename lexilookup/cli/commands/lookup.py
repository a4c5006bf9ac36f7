"""CLI commands for synonym, definition and conjugation lookups."""

from lexilookup.cli.commands import load_config
from lexilookup.models import ViewState
from lexilookup.presenters import ConsolePresenter
from lexilookup.views import ResultView, TokenClipboard


def lookup_command(args) -> int:
    """Execute a lookup subcommand.

    Args:
        args: Parsed command-line arguments (word, kind, interactive)

    Returns:
        Exit code (0 = success, 1 = failure)
    """
    config = load_config(args)
    presenter = ConsolePresenter()

    try:
        view = ResultView.open(args.kind, args.word, config=config)
    except ValueError as e:
        presenter.show_error(str(e))
        return 1

    presenter.show_view(view)

    if args.interactive:
        _interactive_loop(view, presenter)

    return 0 if view.state is ViewState.RENDERED else 1


def _interactive_loop(view: ResultView, presenter: ConsolePresenter) -> None:
    """Let the user refresh the view or copy its tokens until they quit."""
    clipboard = TokenClipboard()
    while view.is_open:
        try:
            command = input("\n[g] actualiser, [l] liste, [c N] copier, [q] quitter > ").strip()
        except EOFError:
            break

        if command == "q":
            view.close()
        elif command == "g":
            view.refresh()
            presenter.show_view(view)
        elif command == "l":
            presenter.show_tokens(view)
        elif command.startswith("c "):
            tokens = view.content.tokens if view.state is ViewState.RENDERED else []
            try:
                token = tokens[int(command[2:]) - 1]
            except (ValueError, IndexError):
                presenter.show_warning("Numéro de mot invalide")
                continue
            clipboard.copy(token)
            presenter.show_success(f"Copié : {token}")
        else:
            presenter.show_warning(f"Commande inconnue : {command}")
