"""Check a French text file with Grammalecte.

Prints one diagnostic per line on stdout:

    grammaire|LINE|COLUMN|MESSAGE
    orthographe|LINE|COLUMN|MESSAGE

Lines and columns are 1-based.
"""

import argparse
import sys

import grammalecte


def check_text(checker, text: str, spelling: bool):
    """Yield (category, line, column, message) for every error in text."""
    for lineno, line in enumerate(text.splitlines(), 1):
        if not line.strip():
            continue
        gramm_errors, spell_errors = checker.getParagraphErrors(line)
        for error in gramm_errors:
            yield ("grammaire", lineno, error["nStart"] + 1, error["sMessage"])
        if not spelling:
            continue
        for error in spell_errors:
            message = f"« {error['sValue']} » : mot inconnu du dictionnaire"
            yield ("orthographe", lineno, error["nStart"] + 1, message)


def main():
    parser = argparse.ArgumentParser(description="Grammalecte diagnostics")
    parser.add_argument("file", help="UTF-8 text file to check")
    parser.add_argument("-S", "--no-spelling", action="store_true", help="Skip spelling errors")
    parser.add_argument(
        "-d", "--disable", action="append", default=[], help="Grammar rule id to ignore"
    )
    args = parser.parse_args()

    checker = grammalecte.GrammarChecker("fr")
    for rule in args.disable:
        checker.gce.ignoreRule(rule)

    with open(args.file, encoding="utf-8") as f:
        text = f.read()

    for category, line, column, message in check_text(checker, text, not args.no_spelling):
        print(f"{category}|{line}|{column}|{message}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
