"""Configuration classes for lexilookup."""

import sys
from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class LookupConfig:
    """Immutable configuration for lookup and checker operations.

    The configuration is passed explicitly to every service that needs it;
    nothing in the package reads process-wide settings behind its back.
    """

    # Remote sources
    crisco_url: str = "https://crisco4.unicaen.fr"
    cnrtl_url: str = "https://www.cnrtl.fr"
    request_timeout: float = 10.0  # Seconds before a fetch is abandoned
    user_agent: str = "lexilookup/1.0"

    # Grammalecte install
    python_executable: str = field(default_factory=lambda: sys.executable)
    grammalecte_dir: Path = field(
        default_factory=lambda: Path.home() / ".lexilookup" / "grammalecte"
    )
    checker_script: Path | None = None  # None = use the bundled helper
    checker_timeout: float = 30.0

    # Checker settings
    enable_spelling: bool = True
    disabled_rules: list[str] = field(default_factory=list)
    checker_filters: list[str] = field(
        default_factory=lambda: [
            r"(?ims)^[ \t]*#\+begin_src.*?#\+end_src",
            r"(?im)^[ \t]*#\+[a-z_]+:.*$",
            r"(?ims)^```.*?^```",
            r"`[^`\n]+`",
        ]
    )

    # Upstream version check
    upstream_url: str = "https://grammalecte.net/index.html"
    upstream_check_delay_days: int = 7  # 0 = never check
    state_file: Path = field(default_factory=lambda: Path.home() / ".lexilookup" / "state.json")

    def __post_init__(self):
        """Convert string paths to Path objects if needed."""
        if isinstance(self.grammalecte_dir, str):
            object.__setattr__(self, "grammalecte_dir", Path(self.grammalecte_dir))
        if isinstance(self.checker_script, str):
            object.__setattr__(
                self, "checker_script", Path(self.checker_script) if self.checker_script else None
            )
        if isinstance(self.state_file, str):
            object.__setattr__(self, "state_file", Path(self.state_file))

    @property
    def synonyms_base_url(self) -> str:
        """Base URL of the synonym dictionary pages."""
        return f"{self.crisco_url.rstrip('/')}/des/synonymes"

    @property
    def definition_base_url(self) -> str:
        """Base URL of the definition pages."""
        return f"{self.cnrtl_url.rstrip('/')}/definition"
