"""Tests for checker_service module."""

import os
import subprocess
from unittest.mock import MagicMock, patch

import pytest

from lexilookup.config import create_default_config
from lexilookup.exceptions import CheckerError
from lexilookup.models import Diagnostic, DiagnosticKind
from lexilookup.services import CheckerService, parse_diagnostics


class TestParseDiagnostics:
    """Tests for parse_diagnostics function."""

    def test_grammar_and_spelling(self):
        output = (
            "grammaire|3|5|Accord de genre erroné\n"
            "orthographe|4|1|Mot inconnu : « maisonn »\n"
        )

        diagnostics = parse_diagnostics(output)

        assert diagnostics == [
            Diagnostic(DiagnosticKind.GRAMMAR, 3, 5, "Accord de genre erroné"),
            Diagnostic(DiagnosticKind.SPELLING, 4, 1, "Mot inconnu : « maisonn »"),
        ]

    def test_severity_mapping(self):
        grammar, spelling = parse_diagnostics("grammaire|1|1|a\northographe|1|2|b\n")

        assert grammar.as_tuple() == ("warning", 1, 1, "a")
        assert spelling.as_tuple() == ("info", 1, 2, "b")

    def test_message_may_contain_separator(self):
        (diagnostic,) = parse_diagnostics("grammaire|1|2|choix a|b")
        assert diagnostic.message == "choix a|b"

    def test_unknown_category_ignored(self):
        assert parse_diagnostics("typographie|1|1|Espace insécable\n") == []

    def test_malformed_lines_ignored(self):
        output = "Traceback (most recent call last):\ngrammaire|x|1|msg\ngrammaire|1\n\n"
        assert parse_diagnostics(output) == []

    def test_empty_output(self):
        assert parse_diagnostics("") == []


class TestCheckerService:
    """Tests for CheckerService class."""

    @pytest.fixture
    def completed(self):
        def make(stdout="", returncode=0, stderr=""):
            proc = MagicMock()
            proc.stdout = stdout
            proc.stderr = stderr
            proc.returncode = returncode
            return proc

        return make

    def test_build_command_default(self, test_config, temp_dir):
        command = CheckerService(test_config).build_command(temp_dir / "in.txt")

        assert command[0] == "python3"
        assert command[1].endswith("grammalecte_check.py")
        assert command[-1] == str(temp_dir / "in.txt")
        assert "-S" not in command

    def test_build_command_options(self, temp_dir):
        config = create_default_config(enable_spelling=False, disabled_rules=["esp_milieu_ligne"])

        command = CheckerService(config).build_command(temp_dir / "in.txt")

        assert "-S" in command
        assert command[command.index("-d") + 1] == "esp_milieu_ligne"

    def test_child_environment_does_not_touch_process(self, test_config):
        before = os.environ.get("PYTHONPATH")

        env = CheckerService(test_config).child_environment()

        assert env["PYTHONPATH"].split(os.pathsep)[0] == str(test_config.grammalecte_dir)
        assert os.environ.get("PYTHONPATH") == before

    def test_check_text_parses_output(self, test_config, completed):
        with patch("lexilookup.services.checker_service.subprocess.run") as run:
            run.return_value = completed("grammaire|1|5|Accord\n")
            diagnostics = CheckerService(test_config).check_text("Les maison.")

        assert [d.message for d in diagnostics] == ["Accord"]

    def test_check_text_masks_filtered_regions(self, test_config, completed):
        written = {}

        def fake_run(command, **kwargs):
            with open(command[-1], encoding="utf-8") as f:
                written["text"] = f.read()
            return completed()

        text = "Du texte.\n```\ncode ici\n```\nFin `x`."
        with patch("lexilookup.services.checker_service.subprocess.run", side_effect=fake_run):
            CheckerService(test_config).check_text(text)

        assert len(written["text"]) == len(text)
        assert "code" not in written["text"]
        assert written["text"].count("\n") == text.count("\n")
        assert written["text"].startswith("Du texte.")

    def test_nonzero_exit_raises(self, test_config, completed):
        with patch("lexilookup.services.checker_service.subprocess.run") as run:
            run.return_value = completed(returncode=1, stderr="ImportError: grammalecte")
            with pytest.raises(CheckerError, match="grammalecte"):
                CheckerService(test_config).check_text("texte")

    def test_missing_interpreter(self, test_config):
        with patch(
            "lexilookup.services.checker_service.subprocess.run", side_effect=FileNotFoundError()
        ):
            with pytest.raises(CheckerError, match="python3"):
                CheckerService(test_config).check_text("texte")

    def test_timeout(self, test_config):
        with patch(
            "lexilookup.services.checker_service.subprocess.run",
            side_effect=subprocess.TimeoutExpired("python3", 30),
        ):
            with pytest.raises(CheckerError, match="timed out"):
                CheckerService(test_config).check_text("texte")

    def test_check_file_unreadable(self, test_config, temp_dir):
        with pytest.raises(CheckerError):
            CheckerService(test_config).check_file(temp_dir / "absent.txt")
