"""Tests for result_view module."""

from unittest.mock import MagicMock

import pytest

from lexilookup.exceptions import CheckerError, NetworkError, NotFoundError
from lexilookup.models import (
    ConjugationRecord,
    LookupKind,
    RenderedContent,
    SynonymRecord,
    ViewState,
)
from lexilookup.views import NO_RESULT, ResultView, SynonymPipeline, TokenClipboard
from lexilookup.views.renderers import render_synonyms

SYNONYM_URL = "https://crisco.test/des/synonymes/maison"


class CountingPipeline:
    """A real LookupPipeline that records runs and can misbehave on demand."""

    def __init__(self, kind=LookupKind.SYNONYM, records=None, error=None):
        self.kind = kind
        self.records = list(records or [SynonymRecord(["logis"], [])])
        self.error = error
        self.runs = 0
        self.on_run = None

    def run(self, term):
        self.runs += 1
        if self.on_run:
            self.on_run()
        if self.error:
            raise self.error
        return self.records[min(self.runs, len(self.records)) - 1]

    def render(self, term, record):
        if isinstance(record, SynonymRecord):
            return render_synonyms(term, record)
        return RenderedContent(text=record.table)


class TestOpen:
    """Tests for ResultView.open."""

    def test_renders_on_open(self):
        pipeline = CountingPipeline()
        view = ResultView.open(LookupKind.SYNONYM, "maison", pipeline=pipeline)

        assert view.state is ViewState.RENDERED
        assert "logis" in view.text
        assert pipeline.runs == 1

    def test_with_real_pipeline(self, test_config, fake_fetcher, synonym_page):
        fake_fetcher.pages[SYNONYM_URL] = synonym_page(["logis", "foyer"], ["rue"])
        pipeline = SynonymPipeline(test_config, fake_fetcher)

        view = ResultView.open(LookupKind.SYNONYM, "maison", pipeline=pipeline)

        assert view.content.tokens == ["logis", "foyer", "rue"]
        assert view.title == "Synonymes de maison"

    def test_empty_term_rejected(self):
        with pytest.raises(ValueError):
            ResultView.open(LookupKind.SYNONYM, "  ", pipeline=CountingPipeline())

    def test_pipeline_kind_must_match(self):
        with pytest.raises(ValueError):
            ResultView.open(
                LookupKind.DEFINITION, "maison", pipeline=CountingPipeline(LookupKind.SYNONYM)
            )

    def test_not_found_becomes_error_state(self):
        pipeline = CountingPipeline(LookupKind.DEFINITION, error=NotFoundError("xyzzy"))

        view = ResultView.open(LookupKind.DEFINITION, "xyzzy", pipeline=pipeline)

        assert view.state is ViewState.ERROR
        assert NO_RESULT in view.text
        assert "Traceback" not in view.text

    def test_network_error_message_shown(self):
        pipeline = CountingPipeline(error=NetworkError("https://crisco.test", "refused"))

        view = ResultView.open(LookupKind.SYNONYM, "maison", pipeline=pipeline)

        assert view.state is ViewState.ERROR
        assert "refused" in view.text

    def test_checker_error_contained(self):
        pipeline = CountingPipeline(LookupKind.CONJUGATION, error=CheckerError("no python"))

        view = ResultView.open(LookupKind.CONJUGATION, "manger", pipeline=pipeline)

        assert view.state is ViewState.ERROR
        assert view.text == "no python"

    def test_unexpected_error_contained(self):
        pipeline = CountingPipeline(error=RuntimeError("boom"))

        view = ResultView.open(LookupKind.SYNONYM, "maison", pipeline=pipeline)

        assert view.state is ViewState.ERROR
        assert "maison" in view.text

    def test_fetch_error_on_real_pipeline(self, test_config, fake_fetcher):
        view = ResultView.open(
            LookupKind.SYNONYM, "maison", pipeline=SynonymPipeline(test_config, fake_fetcher)
        )
        assert view.state is ViewState.ERROR


class TestRefresh:
    """Tests for ResultView.refresh."""

    def test_refresh_reruns_pipeline(self):
        pipeline = CountingPipeline()
        view = ResultView.open(LookupKind.SYNONYM, "maison", pipeline=pipeline)

        assert view.refresh() is True
        assert pipeline.runs == 2

    def test_refresh_replaces_content(self):
        pipeline = CountingPipeline(
            records=[SynonymRecord(["ancien"], []), SynonymRecord(["nouveau"], [])]
        )
        view = ResultView.open(LookupKind.SYNONYM, "maison", pipeline=pipeline)
        view.refresh()

        assert view.content.tokens == ["nouveau"]
        assert "ancien" not in view.text

    def test_nested_refresh_is_noop(self):
        pipeline = CountingPipeline()
        view = ResultView.open(LookupKind.SYNONYM, "maison", pipeline=pipeline)
        nested_results = []
        pipeline.on_run = lambda: nested_results.append(view.refresh())

        view.refresh()

        assert nested_results == [False]
        assert pipeline.runs == 2
        assert view.state is ViewState.RENDERED

    def test_refresh_while_loading_is_ignored(self):
        pipeline = CountingPipeline()
        view = ResultView.open(LookupKind.SYNONYM, "maison", pipeline=pipeline)
        view.state = ViewState.LOADING

        assert view.refresh() is False
        assert pipeline.runs == 1

    def test_refresh_recovers_from_error(self):
        pipeline = CountingPipeline(error=NetworkError("u", "down"))
        view = ResultView.open(LookupKind.SYNONYM, "maison", pipeline=pipeline)
        pipeline.error = None

        view.refresh()

        assert view.state is ViewState.RENDERED
        assert view.error_message is None

    def test_closed_view_does_not_refresh(self):
        pipeline = CountingPipeline()
        view = ResultView.open(LookupKind.SYNONYM, "maison", pipeline=pipeline)
        view.close()

        assert view.refresh() is False
        assert pipeline.runs == 1


class TestSelectToken:
    """Tests for ResultView.select_token_at and copy_token_at."""

    def test_select_token(self):
        view = ResultView.open(LookupKind.SYNONYM, "maison", pipeline=CountingPipeline())

        assert view.select_token_at(view.text.index("logis") + 2) == "logis"

    def test_select_outside_tokens(self):
        view = ResultView.open(LookupKind.SYNONYM, "maison", pipeline=CountingPipeline())

        assert view.select_token_at(0) is None
        assert view.select_token_at(10_000) is None

    def test_no_tokens_in_error_state(self):
        view = ResultView.open(
            LookupKind.SYNONYM, "maison", pipeline=CountingPipeline(error=NotFoundError("maison"))
        )
        assert view.select_token_at(0) is None

    def test_definitions_have_no_tokens(self):
        pipeline = CountingPipeline(
            LookupKind.DEFINITION, records=[ConjugationRecord("x", "- ligne")]
        )
        view = ResultView.open(LookupKind.DEFINITION, "x", pipeline=pipeline)
        view.content = RenderedContent(text="- ligne", spans=[])

        assert view.select_token_at(3) is None

    def test_copy_token(self):
        view = ResultView.open(LookupKind.SYNONYM, "maison", pipeline=CountingPipeline())
        clipboard = TokenClipboard()

        token = view.copy_token_at(view.text.index("logis"), clipboard)

        assert token == "logis"
        assert clipboard.latest == "logis"

    def test_copy_nothing(self):
        view = ResultView.open(LookupKind.SYNONYM, "maison", pipeline=CountingPipeline())
        clipboard = MagicMock()

        assert view.copy_token_at(0, clipboard) is None
        clipboard.copy.assert_not_called()
