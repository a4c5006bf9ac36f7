"""CLI command replacing a word in a file with a lookup result."""

from pathlib import Path

from lexilookup.cli.commands import load_config
from lexilookup.exceptions import OriginGoneError
from lexilookup.models import LookupKind, ViewState
from lexilookup.presenters import ConsolePresenter
from lexilookup.views import FileSurface, ReplaceCoordinator, ResultView, SurfaceHandle


def replace_command(args) -> int:
    """Execute the replace subcommand.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 = success, 1 = failure)
    """
    config = load_config(args)
    presenter = ConsolePresenter()

    path = Path(args.file)
    if not path.exists():
        presenter.show_error(f"File not found: {path}")
        return 1

    try:
        surface = FileSurface(path)
        surface.set_cursor(surface.offset_of(args.line, args.column))
    except (OSError, UnicodeDecodeError, ValueError) as e:
        presenter.show_error(str(e))
        return 1

    origin = SurfaceHandle.capture(surface)
    word = origin.word()
    if not word:
        presenter.show_error(f"No word at {args.line}:{args.column}")
        return 1

    kind = LookupKind(args.kind)
    view = ResultView.open(kind, word, origin=origin, config=config)
    presenter.show_view(view)
    if view.state is not ViewState.RENDERED or not view.content.tokens:
        return 1

    token = _choose_token(view, args.pick, presenter)
    if token is None:
        return 1

    coordinator = ReplaceCoordinator()
    try:
        coordinator.apply(view, token)
    except OriginGoneError as e:
        presenter.show_error(str(e))
        return 1

    if args.dry_run:
        presenter.show_info(surface.text)
    else:
        surface.save()
        presenter.show_success(f"« {word} » remplacé par « {token} » dans {path}")
    return 0


def _choose_token(view: ResultView, pick: int | None, presenter: ConsolePresenter) -> str | None:
    tokens = view.content.tokens
    presenter.show_tokens(view)

    if pick is None:
        try:
            pick = int(input("Numéro du mot à utiliser > "))
        except (EOFError, ValueError):
            presenter.show_error("Aucun mot choisi")
            return None

    if not 1 <= pick <= len(tokens):
        presenter.show_error(f"Choose a number between 1 and {len(tokens)}")
        return None
    return tokens[pick - 1]
