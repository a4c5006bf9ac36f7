"""Service wrapping the external Grammalecte checker."""

import logging
import os
import subprocess
import tempfile
from pathlib import Path

from lexilookup.config import LookupConfig
from lexilookup.exceptions import CheckerError
from lexilookup.helpers import CHECK_SCRIPT
from lexilookup.models import Diagnostic, DiagnosticKind
from lexilookup.utils import mask_matches

logger = logging.getLogger(__name__)

FIELD_SEPARATOR = "|"


def parse_diagnostics(output: str) -> list[Diagnostic]:
    """Parse the checker's line protocol.

    Each line reads "category|line|column|message". Lines whose category
    is neither "grammaire" nor "orthographe", or whose numeric fields do not
    parse, are ignored. The message is everything after the third
    separator and may itself contain "|".

    Args:
        output: Raw checker stdout

    Returns:
        Diagnostics in output order
    """
    diagnostics = []
    for raw_line in output.splitlines():
        fields = raw_line.split(FIELD_SEPARATOR, 3)
        if len(fields) != 4:
            continue

        category, line, column, message = fields
        try:
            kind = DiagnosticKind(category)
        except ValueError:
            continue

        try:
            diagnostics.append(Diagnostic(kind, int(line), int(column), message.strip()))
        except ValueError:
            logger.debug(f"Ignoring malformed diagnostic line: {raw_line!r}")

    return diagnostics


class CheckerService:
    """Run the external checker on a text and collect its diagnostics."""

    def __init__(self, config: LookupConfig):
        """Initialize the checker service.

        Args:
            config: Configuration for the Grammalecte install and checker options
        """
        self.config = config

    @property
    def script(self) -> Path:
        return self.config.checker_script or CHECK_SCRIPT

    def build_command(self, file_path: Path) -> list[str]:
        """Build the checker command line for a file."""
        command = [self.config.python_executable, str(self.script)]
        if not self.config.enable_spelling:
            command.append("-S")
        for rule in self.config.disabled_rules:
            command.extend(["-d", rule])
        command.append(str(file_path))
        return command

    def child_environment(self) -> dict[str, str]:
        """Environment for the child process with Grammalecte on its path.

        Only the child's environment is changed; the current process is
        left untouched.
        """
        env = dict(os.environ)
        paths = [str(self.config.grammalecte_dir)]
        if env.get("PYTHONPATH"):
            paths.append(env["PYTHONPATH"])
        env["PYTHONPATH"] = os.pathsep.join(paths)
        env["PYTHONIOENCODING"] = "utf-8"
        return env

    def check_text(self, text: str) -> list[Diagnostic]:
        """Check a text and return its diagnostics.

        Regions matching the configured filters (code blocks, markup
        keywords...) are blanked before checking so they are not reported.

        Args:
            text: Text to check

        Returns:
            Diagnostics in document order

        Raises:
            CheckerError: If the checker cannot run or exits abnormally
        """
        masked = mask_matches(text, self.config.checker_filters)

        with tempfile.TemporaryDirectory(prefix="lexilookup_") as tmp:
            file_path = Path(tmp) / "input.txt"
            file_path.write_text(masked, encoding="utf-8")
            output = self._run(self.build_command(file_path))

        return parse_diagnostics(output)

    def check_file(self, path: Path) -> list[Diagnostic]:
        """Check a UTF-8 text file.

        Raises:
            CheckerError: If the file cannot be read or the checker fails
        """
        try:
            text = Path(path).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise CheckerError(f"Cannot read {path}: {e}") from e
        return self.check_text(text)

    def _run(self, command: list[str]) -> str:
        logger.debug(f"Running checker: {' '.join(command)}")
        try:
            proc = subprocess.run(
                command,
                capture_output=True,
                text=True,
                encoding="utf-8",
                env=self.child_environment(),
                timeout=self.config.checker_timeout,
            )
        except FileNotFoundError as e:
            raise CheckerError(f"Python interpreter not found: {command[0]}") from e
        except subprocess.TimeoutExpired as e:
            raise CheckerError(f"Checker timed out after {self.config.checker_timeout}s") from e

        if proc.returncode != 0:
            logger.error(f"Checker failed: {proc.stderr.strip()}")
            raise CheckerError(proc.stderr.strip() or f"Checker exited with code {proc.returncode}")

        return proc.stdout
