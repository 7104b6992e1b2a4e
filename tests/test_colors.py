"""Tests for taskcanvas.colors -- environment-controlled ANSI styling."""

from __future__ import annotations

import pytest

from taskcanvas.colors import bold, colors_enabled, cyan, hyperlink, red


class TestColorsEnabled:
    def test_no_color_disables(self) -> None:
        assert colors_enabled() is False
        assert red("x") == "x"

    def test_force_color_enables(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("FORCE_COLOR", "1")
        assert colors_enabled() is True
        assert red("x") == "\x1b[31mx\x1b[0m"
        assert bold("x") == "\x1b[1mx\x1b[0m"

    def test_force_color_wins_over_no_color(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("FORCE_COLOR", "1")
        monkeypatch.setenv("NO_COLOR", "1")
        assert cyan("x").startswith("\x1b[36m")


class TestHyperlink:
    def test_defaults_text_to_url(self) -> None:
        assert hyperlink("https://a.b") == "\x1b]8;;https://a.b\x07https://a.b\x1b]8;;\x07"

    def test_custom_text(self) -> None:
        assert hyperlink("https://a.b", "site") == "\x1b]8;;https://a.b\x07site\x1b]8;;\x07"
