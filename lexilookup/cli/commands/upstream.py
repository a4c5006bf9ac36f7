"""CLI command checking for Grammalecte updates."""

from lexilookup.cli.commands import load_config
from lexilookup.presenters import ConsolePresenter
from lexilookup.services import GrammalecteInstall, HttpContentFetcher, UpstreamVersionChecker


def upstream_command(args) -> int:
    """Execute the check-upstream subcommand.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 = check done or not due, 1 = check failed)
    """
    config = load_config(args)
    presenter = ConsolePresenter()

    install = GrammalecteInstall(config)
    checker = UpstreamVersionChecker(config, HttpContentFetcher(config), install)

    if not args.force and not checker.is_check_due():
        presenter.show_info("Last check is recent, use --force to check anyway")
        return 0

    result = checker.check_for_update()
    if result is None:
        presenter.show_error(f"Could not read releases from {config.upstream_url}")
        return 1

    update_available, latest, url = result
    current = install.installed_version() or "non installé"
    if update_available:
        presenter.show_warning(f"Grammalecte {latest} est disponible ({current} installé) : {url}")
    else:
        presenter.show_success(f"Grammalecte {current} est à jour")
    return 0
