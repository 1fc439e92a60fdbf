"""Shared pytest fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest
from toy_highlighter import ToyHighlighter

from costura.config import HarnessConfig

MARKUP_ROOT = Path(__file__).parent / "fixtures" / "markup"


@pytest.fixture
def toy_highlighter() -> ToyHighlighter:
    return ToyHighlighter()


@pytest.fixture
def markup_root() -> Path:
    return MARKUP_ROOT


@pytest.fixture
def toy_config() -> HarnessConfig:
    """Config exempting the fixture whose string crosses a newline."""
    return HarnessConfig(exceptions={"toyc": ["multiline-string"]})
