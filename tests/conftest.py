"""Shared fixtures: plain (uncoloured) output and a fresh virtual terminal."""

from __future__ import annotations

import pytest

from .virtual_terminal import VirtualTerminal


@pytest.fixture(autouse=True)
def plain_output(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("FORCE_COLOR", raising=False)
    monkeypatch.delenv("TASKCANVAS_WRITE_LOG", raising=False)
    monkeypatch.setenv("NO_COLOR", "1")


@pytest.fixture
def terminal() -> VirtualTerminal:
    return VirtualTerminal()
