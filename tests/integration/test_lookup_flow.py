"""Integration tests for lookups from a document to a replacement."""

import pytest

from lexilookup.exceptions import OriginGoneError
from lexilookup.models import LookupKind, ViewState
from lexilookup.views import (
    ReplaceCoordinator,
    ResultView,
    SurfaceHandle,
    TextSurface,
    TokenClipboard,
    create_pipeline,
)

SYNONYM_URL = "https://crisco.test/des/synonymes/maison"
DEFINITION_URL = "https://cnrtl.test/definition/maison"


class TestSynonymFlow:
    """Open a synonym view on a document word and replace it."""

    @pytest.fixture
    def pipeline(self, test_config, fake_fetcher, synonym_page):
        fake_fetcher.pages[SYNONYM_URL] = synonym_page(
            ["logis", "demeure", "foyer"], ["rue"]
        )
        return create_pipeline(LookupKind.SYNONYM, test_config, fetcher=fake_fetcher)

    def test_open_pick_replace(self, pipeline):
        surface = TextSurface("Il rentre à la maison ce soir.")
        origin = SurfaceHandle.capture(surface, surface.text.index("maison") + 3)
        clipboard = TokenClipboard()

        view = ResultView.open(LookupKind.SYNONYM, origin.word(), origin=origin, pipeline=pipeline)
        assert view.state is ViewState.RENDERED

        token = ReplaceCoordinator(clipboard).apply_at(view, view.text.index("demeure"))

        assert token == "demeure"
        assert surface.text == "Il rentre à la demeure ce soir."
        assert clipboard.latest == "demeure"
        assert view.is_open is False

    def test_refresh_then_replace(self, pipeline, fake_fetcher):
        surface = TextSurface("maison")
        origin = SurfaceHandle.capture(surface, 0)
        view = ResultView.open(LookupKind.SYNONYM, "maison", origin=origin, pipeline=pipeline)

        view.refresh()
        ReplaceCoordinator().apply(view, view.content.tokens[-1])

        assert fake_fetcher.requested == [SYNONYM_URL, SYNONYM_URL]
        assert surface.text == "rue"

    def test_origin_closed_while_view_open(self, pipeline):
        surface = TextSurface("la maison")
        origin = SurfaceHandle.capture(surface, 4)
        view = ResultView.open(LookupKind.SYNONYM, "maison", origin=origin, pipeline=pipeline)
        surface.close()

        with pytest.raises(OriginGoneError):
            ReplaceCoordinator().apply_at(view, view.text.index("logis"))

        assert view.state is ViewState.RENDERED
        assert view.is_open is True
        assert view.refresh() is True


class TestDefinitionFlow:
    """Definition views gather every page and expose no tokens."""

    def test_paginated_definition(self, test_config, fake_fetcher, definition_page):
        fake_fetcher.pages[DEFINITION_URL] = definition_page(
            "maison", "<b>MAISON</b>, subst. fém.", page_count=2
        )
        fake_fetcher.pages[f"{DEFINITION_URL}/1"] = definition_page("maison", "Sens figuré")
        fake_fetcher.pages[f"{DEFINITION_URL}/2"] = definition_page("maison", "Locutions")
        pipeline = create_pipeline(LookupKind.DEFINITION, test_config, fetcher=fake_fetcher)

        view = ResultView.open(LookupKind.DEFINITION, "maison", pipeline=pipeline)

        assert view.state is ViewState.RENDERED
        text = view.text
        assert text.index("MAISON") < text.index("Sens figuré") < text.index("Locutions")
        assert "pied de page" not in text
        assert view.select_token_at(text.index("MAISON")) is None

    def test_missing_page_fails_whole_lookup(self, test_config, fake_fetcher, definition_page):
        fake_fetcher.pages[DEFINITION_URL] = definition_page("maison", "MAISON", page_count=2)
        fake_fetcher.pages[f"{DEFINITION_URL}/1"] = definition_page("maison", "Sens figuré")
        pipeline = create_pipeline(LookupKind.DEFINITION, test_config, fetcher=fake_fetcher)

        view = ResultView.open(LookupKind.DEFINITION, "maison", pipeline=pipeline)

        assert view.state is ViewState.ERROR
        assert "Sens figuré" not in view.text

    def test_unknown_word(self, test_config, fake_fetcher, definition_page):
        fake_fetcher.pages["https://cnrtl.test/definition/xyzzy"] = definition_page("xyzzy", None)
        pipeline = create_pipeline(LookupKind.DEFINITION, test_config, fetcher=fake_fetcher)

        view = ResultView.open(LookupKind.DEFINITION, "xyzzy", pipeline=pipeline)

        assert view.state is ViewState.ERROR
        assert "Aucun résultat" in view.text
