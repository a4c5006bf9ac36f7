"""Tests for upstream_checker module."""

import json
from datetime import datetime, timedelta
from unittest.mock import MagicMock

import pytest

from lexilookup.config import LookupConfig
from lexilookup.exceptions import SetupError
from lexilookup.services import GrammalecteInstall, UpstreamVersionChecker

RELEASE_URL = "https://grammalecte.test/index.html"
RELEASE_PAGE = (
    "<html><body>"
    '<a href="zip/Grammalecte-fr-v2.1.1.zip">ancienne</a>'
    '<a href="zip/Grammalecte-fr-v2.1.10.zip">Télécharger</a>'
    '<a href="zip/Grammalecte-fr-v2.1.2.zip">autre</a>'
    "</body></html>"
)
NOW = datetime(2024, 5, 1, 12, 0)


def _install(version):
    install = MagicMock(spec=GrammalecteInstall)
    install.installed_version.return_value = version
    return install


class TestIsNewer:
    """Tests for version comparison logic."""

    def test_newer_major(self):
        assert UpstreamVersionChecker._is_newer("3.0.0", "2.1.1") is True

    def test_newer_patch(self):
        assert UpstreamVersionChecker._is_newer("2.1.2", "2.1.1") is True

    def test_numeric_not_lexical(self):
        assert UpstreamVersionChecker._is_newer("2.1.10", "2.1.9") is True

    def test_same_version(self):
        assert UpstreamVersionChecker._is_newer("2.1.1", "2.1.1") is False

    def test_older_version(self):
        assert UpstreamVersionChecker._is_newer("2.0.0", "2.1.1") is False

    def test_invalid_version(self):
        assert UpstreamVersionChecker._is_newer("abc", "2.1.1") is False


class TestIsCheckDue:
    """Tests for the check delay."""

    def test_zero_delay_never_checks(self, temp_dir, fake_fetcher):
        config = LookupConfig(
            upstream_url=RELEASE_URL, upstream_check_delay_days=0, state_file=temp_dir / "s.json"
        )
        checker = UpstreamVersionChecker(config, fake_fetcher, _install("2.1.1"))

        assert checker.is_check_due(NOW) is False
        assert checker.maybe_check(NOW) is None
        assert fake_fetcher.requested == []

    def test_first_run_is_due(self, test_config, fake_fetcher):
        checker = UpstreamVersionChecker(test_config, fake_fetcher, _install("2.1.1"))
        assert checker.is_check_due(NOW) is True

    def test_recent_check_not_due(self, test_config, fake_fetcher):
        test_config.state_file.write_text(
            json.dumps({"last_upstream_check": (NOW - timedelta(days=2)).isoformat()})
        )
        checker = UpstreamVersionChecker(test_config, fake_fetcher, _install("2.1.1"))

        assert checker.is_check_due(NOW) is False

    def test_old_check_is_due(self, test_config, fake_fetcher):
        test_config.state_file.write_text(
            json.dumps({"last_upstream_check": (NOW - timedelta(days=7)).isoformat()})
        )
        checker = UpstreamVersionChecker(test_config, fake_fetcher, _install("2.1.1"))

        assert checker.is_check_due(NOW) is True

    def test_corrupt_state_file(self, test_config, fake_fetcher):
        test_config.state_file.write_text("{not json")
        checker = UpstreamVersionChecker(test_config, fake_fetcher, _install("2.1.1"))

        assert checker.last_check() is None
        assert checker.is_check_due(NOW) is True


class TestCheckForUpdate:
    """Tests for UpstreamVersionChecker.check_for_update."""

    def test_update_available(self, test_config, fake_fetcher):
        fake_fetcher.pages[RELEASE_URL] = RELEASE_PAGE
        checker = UpstreamVersionChecker(test_config, fake_fetcher, _install("2.1.1"))

        result = checker.check_for_update(NOW)

        assert result == (
            True,
            "2.1.10",
            "https://grammalecte.test/zip/Grammalecte-fr-v2.1.10.zip",
        )
        assert checker.last_check() == NOW

    def test_up_to_date(self, test_config, fake_fetcher):
        fake_fetcher.pages[RELEASE_URL] = RELEASE_PAGE
        checker = UpstreamVersionChecker(test_config, fake_fetcher, _install("2.1.10"))

        update_available, latest, _ = checker.check_for_update(NOW)

        assert update_available is False
        assert latest == "2.1.10"

    def test_not_installed_reports_update(self, test_config, fake_fetcher):
        fake_fetcher.pages[RELEASE_URL] = RELEASE_PAGE
        checker = UpstreamVersionChecker(test_config, fake_fetcher, _install(None))

        assert checker.check_for_update(NOW)[0] is True

    def test_network_error_returns_none(self, test_config, fake_fetcher):
        checker = UpstreamVersionChecker(test_config, fake_fetcher, _install("2.1.1"))

        assert checker.check_for_update(NOW) is None
        assert checker.last_check() is None

    def test_no_release_link(self, test_config, fake_fetcher):
        fake_fetcher.pages[RELEASE_URL] = "<html>maintenance</html>"
        checker = UpstreamVersionChecker(test_config, fake_fetcher, _install("2.1.1"))

        assert checker.check_for_update(NOW) is None

    def test_maybe_check_records_time(self, test_config, fake_fetcher):
        fake_fetcher.pages[RELEASE_URL] = RELEASE_PAGE
        checker = UpstreamVersionChecker(test_config, fake_fetcher, _install("2.1.1"))

        assert checker.maybe_check(NOW) is not None
        assert checker.maybe_check(NOW + timedelta(hours=1)) is None
        assert fake_fetcher.requested == [RELEASE_URL]


class TestGrammalecteInstall:
    """Tests for GrammalecteInstall class."""

    def test_version_from_engine(self, test_config):
        engine = test_config.grammalecte_dir / "grammalecte" / "fr" / "gc_engine.py"
        engine.parent.mkdir(parents=True)
        (engine.parent.parent / "__init__.py").write_text("")
        engine.write_text('lang = "fr"\nversion = "2.1.1"\n')

        install = GrammalecteInstall(test_config)

        assert install.is_installed() is True
        assert install.installed_version() == "2.1.1"

    def test_version_from_directory_name(self, temp_dir):
        config = LookupConfig(grammalecte_dir=temp_dir / "Grammalecte-fr-v2.0.3")
        assert GrammalecteInstall(config).installed_version() == "2.0.3"

    def test_missing_install(self, test_config):
        install = GrammalecteInstall(test_config)

        assert install.installed_version() is None
        with pytest.raises(SetupError):
            install.validate()
