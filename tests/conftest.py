"""Pytest configuration and shared fixtures."""

import pytest

from lexilookup.config import LookupConfig
from lexilookup.exceptions import NetworkError
from lexilookup.models import RawPage
from lexilookup.presenters import NullPresenter


@pytest.fixture
def temp_dir(tmp_path):
    """Provide a temporary directory for test files."""
    return tmp_path


@pytest.fixture
def test_config(temp_dir):
    """Provide a test configuration with temporary paths and fake hosts."""
    return LookupConfig(
        crisco_url="https://crisco.test",
        cnrtl_url="https://cnrtl.test",
        request_timeout=1.0,
        python_executable="python3",
        grammalecte_dir=temp_dir / "grammalecte",
        state_file=temp_dir / "state.json",
        upstream_url="https://grammalecte.test/index.html",
    )


@pytest.fixture
def null_presenter():
    """Provide a null presenter for testing (no output)."""
    return NullPresenter()


class FakeFetcher:
    """A real ContentFetcher implementation serving pages from a dict.

    Unknown URLs and URLs listed in `failures` raise NetworkError.
    """

    def __init__(self, pages=None):
        self.pages = dict(pages or {})
        self.failures = set()
        self.requested = []

    def fetch(self, url: str, page_index: int = 0) -> RawPage:
        self.requested.append(url)
        if url in self.failures or url not in self.pages:
            raise NetworkError(url, "connection refused")
        return RawPage(url=url, body=self.pages[url], page_index=page_index)


@pytest.fixture
def fake_fetcher():
    """Provide an empty fake fetcher; tests register pages on it."""
    return FakeFetcher()


def build_synonym_page(synonyms, antonyms, end_markers=True):
    """Build a CRISCO-like page with the given synonym and antonym lists."""

    def section(list_name, words):
        links = ",\n".join(f'<a href="/des/synonymes/{w}">{w}</a>' for w in words)
        end = f"<!--Fin liste des {list_name}-->" if end_markers else ""
        return (
            f'<div><i class="titre">{len(words)} {list_name}</i>\n'
            f"<table><tr><td>{links}</td></tr></table>\n{end}</div>\n"
        )

    return (
        "<html><head><title>CRISCO</title></head><body>\n"
        '<a href="/accueil">Accueil</a>\n'
        + section("synonymes", synonyms)
        + section("antonymes", antonyms)
        + '<a href="/contact">Contact</a>\n</body></html>'
    )


def build_definition_page(term, content, page_count=None):
    """Build a CNRTL-like page; content=None omits the definition anchor."""
    tabs = ""
    if page_count is not None:
        tabs = "".join(
            f"<li><a href=\"#\" onclick=\"return sendRequest(5,'/definition/{term}//{i}');\">"
            f"{term} {i}</a></li>"
            for i in range(page_count + 1)
        )
    body = f'<div id="lexicontent">{content}</div>' if content is not None else "<p>Rien</p>"
    return (
        "<html><body>\n"
        f'<div id="vtoolbar"><ul>{tabs}</ul></div>\n'
        f'<div id="contentbox">{body}<div id="footer">pied de page</div></div>\n'
        "</body></html>"
    )


@pytest.fixture
def synonym_page():
    """Provide the synonym page builder."""
    return build_synonym_page


@pytest.fixture
def definition_page():
    """Provide the definition page builder."""
    return build_definition_page
