"""Helper scripts executed with the Grammalecte interpreter.

These scripts are not imported by lexilookup: they run in a child process
whose PYTHONPATH points at the Grammalecte install.
"""

from pathlib import Path

HELPERS_DIR = Path(__file__).parent

CHECK_SCRIPT = HELPERS_DIR / "grammalecte_check.py"
CONJUGATE_SCRIPT = HELPERS_DIR / "grammalecte_conjugate.py"

__all__ = ["HELPERS_DIR", "CHECK_SCRIPT", "CONJUGATE_SCRIPT"]
