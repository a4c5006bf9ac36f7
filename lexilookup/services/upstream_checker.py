"""Periodic check for newer Grammalecte releases."""

import json
import logging
import re
from datetime import datetime, timedelta
from urllib.parse import urljoin

from lexilookup.config import LookupConfig
from lexilookup.exceptions import NetworkError
from lexilookup.interfaces import ContentFetcher

from .grammalecte_install import GrammalecteInstall

logger = logging.getLogger(__name__)

_RELEASE_LINK = re.compile(r"""href=["']([^"']*Grammalecte-fr-v([0-9][0-9.]*[0-9])\.zip)["']""")

STATE_KEY = "last_upstream_check"


class UpstreamVersionChecker:
    """Compare the installed Grammalecte version with the latest release.

    The check runs at most once every `upstream_check_delay_days` days; a
    delay of 0 disables it. The time of the last check is kept in the
    state file.
    """

    def __init__(
        self,
        config: LookupConfig,
        fetcher: ContentFetcher,
        install: GrammalecteInstall | None = None,
    ):
        """Initialize the upstream checker.

        Args:
            config: Configuration providing the release page and delay
            fetcher: Fetcher for the release page
            install: Install to compare against (built from config if omitted)
        """
        self.config = config
        self.fetcher = fetcher
        self.install = install or GrammalecteInstall(config)

    def is_check_due(self, now: datetime | None = None) -> bool:
        """Whether the delay since the last check has elapsed."""
        delay = self.config.upstream_check_delay_days
        if delay <= 0:
            return False

        last = self.last_check()
        if last is None:
            return True

        now = now or datetime.now()
        return now - last >= timedelta(days=delay)

    def maybe_check(self, now: datetime | None = None) -> tuple[bool, str, str] | None:
        """Run check_for_update if a check is due, else return None."""
        if not self.is_check_due(now):
            return None
        return self.check_for_update(now)

    def check_for_update(self, now: datetime | None = None) -> tuple[bool, str, str] | None:
        """Fetch the release page and compare versions.

        Returns:
            Tuple of (update_available, latest_version, download_url) if the
            check succeeds, or None if the page cannot be fetched or parsed.
        """
        try:
            page = self.fetcher.fetch(self.config.upstream_url)
        except NetworkError:
            logger.debug("Failed to check for Grammalecte updates", exc_info=True)
            return None

        self._record_check(now or datetime.now())

        releases = [(m.group(2), m.group(1)) for m in _RELEASE_LINK.finditer(page.body)]
        if not releases:
            logger.debug(f"No release link found on {self.config.upstream_url}")
            return None

        latest_version, link = max(releases, key=lambda release: self._parse(release[0]))
        download_url = urljoin(self.config.upstream_url, link)

        current = self.install.installed_version()
        update_available = current is None or self._is_newer(latest_version, current)
        return (update_available, latest_version, download_url)

    def last_check(self) -> datetime | None:
        """Return the time of the previous check, if recorded."""
        try:
            with self.config.state_file.open("r", encoding="utf-8") as f:
                state = json.load(f)
            return datetime.fromisoformat(state[STATE_KEY])
        except FileNotFoundError:
            return None
        except (OSError, json.JSONDecodeError, KeyError, TypeError, ValueError) as e:
            logger.warning(f"Ignoring unreadable state file {self.config.state_file}: {e}")
            return None

    def _record_check(self, when: datetime) -> None:
        state = {}
        try:
            with self.config.state_file.open("r", encoding="utf-8") as f:
                state = json.load(f)
        except (OSError, json.JSONDecodeError):
            pass

        state[STATE_KEY] = when.isoformat()
        try:
            self.config.state_file.parent.mkdir(parents=True, exist_ok=True)
            with self.config.state_file.open("w", encoding="utf-8") as f:
                json.dump(state, f, indent=2)
        except OSError as e:
            logger.warning(f"Could not save state file: {e}")

    @staticmethod
    def _parse(version: str) -> tuple[int, ...]:
        try:
            return tuple(int(x) for x in version.split("."))
        except (ValueError, AttributeError):
            return ()

    @staticmethod
    def _is_newer(latest: str, current: str) -> bool:
        """Compare two version strings.

        Args:
            latest: Latest version string (e.g. "2.1.2")
            current: Current version string (e.g. "2.1.1")

        Returns:
            True if latest is newer than current.
        """
        try:
            latest_parts = tuple(int(x) for x in latest.split("."))
            current_parts = tuple(int(x) for x in current.split("."))
            return latest_parts > current_parts
        except (ValueError, AttributeError):
            return False
