"""Service producing verb conjugation tables through Grammalecte."""

import logging
import subprocess

from lexilookup.config import LookupConfig
from lexilookup.exceptions import CheckerError, NotFoundError
from lexilookup.helpers import CONJUGATE_SCRIPT
from lexilookup.models import ConjugationRecord

from .checker_service import CheckerService

logger = logging.getLogger(__name__)

# Exit status of the helper when the word is not a known verb
NOT_A_VERB = 3


class ConjugationService:
    """Ask the external checker for the conjugation table of a verb."""

    def __init__(self, config: LookupConfig):
        self.config = config
        self._checker = CheckerService(config)

    def conjugate(self, verb: str) -> ConjugationRecord:
        """Return the conjugation table of verb.

        Args:
            verb: Infinitive of the verb

        Returns:
            Record holding the formatted table

        Raises:
            NotFoundError: If Grammalecte does not know the verb
            CheckerError: If the helper cannot run
        """
        command = [self.config.python_executable, str(CONJUGATE_SCRIPT), verb]
        try:
            proc = subprocess.run(
                command,
                capture_output=True,
                text=True,
                encoding="utf-8",
                env=self._checker.child_environment(),
                timeout=self.config.checker_timeout,
            )
        except FileNotFoundError as e:
            raise CheckerError(f"Python interpreter not found: {command[0]}") from e
        except subprocess.TimeoutExpired as e:
            raise CheckerError("Conjugation helper timed out") from e

        if proc.returncode == NOT_A_VERB:
            raise NotFoundError(verb)
        if proc.returncode != 0:
            logger.error(f"Conjugation failed for {verb}: {proc.stderr.strip()}")
            raise CheckerError(proc.stderr.strip() or f"Helper exited with code {proc.returncode}")

        return ConjugationRecord(verb=verb, table=proc.stdout.rstrip("\n"))
