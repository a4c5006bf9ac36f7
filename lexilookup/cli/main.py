"""Main CLI entry point for lexilookup."""

import argparse
import logging
import sys

from lexilookup import __version__
from lexilookup.cli.commands import check, lookup, replace, upstream
from lexilookup.models import LookupKind


def _add_common_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--timeout",
        type=float,
        default=None,
        help="Network timeout in seconds (default: from configuration)",
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="lexilookup",
        description="Synonyms, definitions and conjugations for French writers",
        epilog="Use 'lexilookup <command> --help' for command-specific help",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", help="Show debug logging")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # lexilookup synonyms|define|conjugate <word>
    for name, kind, help_text in (
        ("synonyms", LookupKind.SYNONYM, "Find synonyms and antonyms of a word"),
        ("define", LookupKind.DEFINITION, "Show the dictionary definition of a word"),
        ("conjugate", LookupKind.CONJUGATION, "Show the conjugation table of a verb"),
    ):
        lookup_parser = subparsers.add_parser(name, help=help_text, description=help_text)
        lookup_parser.add_argument("word", help="Word to look up")
        lookup_parser.add_argument(
            "-i",
            "--interactive",
            action="store_true",
            help="Keep the result open: refresh it or copy tokens",
        )
        _add_common_options(lookup_parser)
        lookup_parser.set_defaults(kind=kind)

    # lexilookup replace <file> --line L --column C
    replace_parser = subparsers.add_parser(
        "replace",
        help="Replace a word in a file with a synonym or conjugated form",
        description="Look up the word at LINE:COLUMN and replace it with the chosen result",
    )
    replace_parser.add_argument("file", help="UTF-8 text file to edit")
    replace_parser.add_argument("--line", type=int, required=True, help="1-based line number")
    replace_parser.add_argument("--column", type=int, required=True, help="1-based column")
    replace_parser.add_argument(
        "--kind",
        choices=["synonym", "conjugation"],
        default="synonym",
        help="Source of replacement words (default: synonym)",
    )
    replace_parser.add_argument(
        "--pick", type=int, default=None, help="Number of the token to use (prompt if omitted)"
    )
    replace_parser.add_argument(
        "--dry-run", action="store_true", help="Print the result instead of saving the file"
    )
    _add_common_options(replace_parser)

    # lexilookup check <file>
    check_parser = subparsers.add_parser(
        "check",
        help="Check grammar and spelling with Grammalecte",
        description="Run the Grammalecte checker on a text file and list its diagnostics",
    )
    check_parser.add_argument("file", help="UTF-8 text file to check")
    check_parser.add_argument(
        "--no-spelling", action="store_true", help="Only report grammar diagnostics"
    )

    # lexilookup check-upstream
    upstream_parser = subparsers.add_parser(
        "check-upstream",
        help="Check for a newer Grammalecte release",
        description="Compare the installed Grammalecte with the latest published release",
    )
    upstream_parser.add_argument(
        "--force", action="store_true", help="Check even if the last check is recent"
    )
    _add_common_options(upstream_parser)

    return parser


def main(argv=None):
    """Main CLI entry point with subcommands."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    # Dispatch to appropriate command
    if args.command in ("synonyms", "define", "conjugate"):
        return lookup.lookup_command(args)
    elif args.command == "replace":
        return replace.replace_command(args)
    elif args.command == "check":
        return check.check_command(args)
    elif args.command == "check-upstream":
        return upstream.upstream_command(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
