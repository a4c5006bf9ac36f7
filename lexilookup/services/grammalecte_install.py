"""Location and validation of the Grammalecte install."""

import logging
import re
from pathlib import Path

from lexilookup.config import LookupConfig
from lexilookup.exceptions import SetupError

logger = logging.getLogger(__name__)

_VERSION_ASSIGNMENT = re.compile(r"""^\s*version\s*=\s*["']([0-9][0-9.]*)["']""", re.MULTILINE)
_VERSIONED_DIR = re.compile(r"Grammalecte-fr-v([0-9][0-9.]*[0-9])")


class GrammalecteInstall:
    """The Grammalecte package the external checker runs with."""

    def __init__(self, config: LookupConfig):
        self.config = config

    @property
    def package_dir(self) -> Path:
        return self.config.grammalecte_dir / "grammalecte"

    def is_installed(self) -> bool:
        return (self.package_dir / "__init__.py").exists()

    def validate(self) -> None:
        """Check that the install can be used.

        Raises:
            SetupError: If the grammalecte package is missing
        """
        if not self.is_installed():
            raise SetupError(
                f"Grammalecte not found in {self.config.grammalecte_dir}. "
                f"Download Grammalecte-fr from {self.config.upstream_url} and unzip it there."
            )

    def installed_version(self) -> str | None:
        """Return the installed version, or None if it cannot be determined."""
        engine = self.package_dir / "fr" / "gc_engine.py"
        if engine.exists():
            try:
                match = _VERSION_ASSIGNMENT.search(engine.read_text(encoding="utf-8"))
            except OSError as e:
                logger.warning(f"Cannot read {engine}: {e}")
                match = None
            if match:
                return match.group(1)

        match = _VERSIONED_DIR.search(self.config.grammalecte_dir.resolve().name)
        return match.group(1) if match else None
