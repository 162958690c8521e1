"""Shared fixtures for the Warden test suite."""

from __future__ import annotations

import io
from dataclasses import dataclass
from typing import List

import pytest
from rich.console import Console

from warden.config.settings import Settings, get_settings


@dataclass
class CapturedConsole:
    """A rich console writing to an in-memory buffer."""

    console: Console
    buffer: io.StringIO

    @property
    def lines(self) -> List[str]:
        return [line.rstrip() for line in self.buffer.getvalue().splitlines()]

    @property
    def text(self) -> str:
        return self.buffer.getvalue()


def _captured() -> CapturedConsole:
    buffer = io.StringIO()
    console = Console(file=buffer, width=120, color_system=None, highlight=False)
    return CapturedConsole(console=console, buffer=buffer)


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    """Each test sees settings built from its own environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def output() -> CapturedConsole:
    return _captured()


@pytest.fixture
def diagnostics() -> CapturedConsole:
    return _captured()


@pytest.fixture
def settings() -> Settings:
    return Settings()
