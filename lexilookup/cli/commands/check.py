"""CLI command running the Grammalecte checker."""

from pathlib import Path

from lexilookup.cli.commands import load_config
from lexilookup.exceptions import LexiLookupException
from lexilookup.presenters import ConsolePresenter
from lexilookup.services import CheckerService, GrammalecteInstall


def check_command(args) -> int:
    """Execute the check subcommand.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 = no diagnostics, 1 = diagnostics found or failure)
    """
    overrides = {"enable_spelling": False} if args.no_spelling else {}
    config = load_config(args, **overrides)
    presenter = ConsolePresenter()

    path = Path(args.file)
    if not path.exists():
        presenter.show_error(f"File not found: {path}")
        return 1

    try:
        GrammalecteInstall(config).validate()
        diagnostics = CheckerService(config).check_file(path)
    except LexiLookupException as e:
        presenter.show_error(str(e))
        return 1

    presenter.show_diagnostics(diagnostics)
    return 1 if diagnostics else 0
