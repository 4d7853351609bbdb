"""Unit tests for the terminal oracle (start_kit.oracle)."""

from __future__ import annotations

import pytest
from conftest import console_text

from start_kit.oracle import Choice, RichOracle

CHOICES = [Choice(label="First - one", value="first"), Choice(label="Second - two", value="second")]


class TestRichOracleChoice:
    @pytest.mark.unit
    def test_returns_value_of_selected_number(self, console, monkeypatch):
        monkeypatch.setattr("start_kit.oracle.Prompt.ask", lambda *args, **kwargs: "2")
        assert RichOracle(console).ask_choice("Pick one", CHOICES) == "second"

    @pytest.mark.unit
    def test_lists_labels(self, console, monkeypatch):
        monkeypatch.setattr("start_kit.oracle.Prompt.ask", lambda *args, **kwargs: "1")
        RichOracle(console).ask_choice("Pick one", CHOICES)
        out = console_text(console)
        assert "Pick one" in out
        assert "1) First - one" in out
        assert "2) Second - two" in out

    @pytest.mark.unit
    def test_default_is_offered_by_number(self, console, monkeypatch):
        seen = {}

        def fake_ask(*args, **kwargs):
            seen.update(kwargs)
            return kwargs["default"]

        monkeypatch.setattr("start_kit.oracle.Prompt.ask", fake_ask)
        assert RichOracle(console).ask_choice("Pick one", CHOICES, default="second") == "second"
        assert seen["default"] == "2"
        assert seen["choices"] == ["1", "2"]

    @pytest.mark.unit
    def test_no_choices(self, console):
        with pytest.raises(ValueError):
            RichOracle(console).ask_choice("Pick one", [])


@pytest.mark.unit
def test_confirm_passes_default(console, monkeypatch):
    seen = {}

    def fake_confirm(message, **kwargs):
        seen["message"] = message
        seen.update(kwargs)
        return True

    monkeypatch.setattr("start_kit.oracle.Confirm.ask", fake_confirm)
    assert RichOracle(console).ask_confirm("Overwrite?", default=False) is True
    assert seen["message"] == "Overwrite?"
    assert seen["default"] is False


@pytest.mark.unit
def test_warn_prints_message(console):
    RichOracle(console).warn("Project name is required")
    assert "Project name is required" in console_text(console)
