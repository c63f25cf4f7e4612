"""Test setup for pagetree."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from pagetree.catalog import DEFAULT_CATALOG  # noqa: E402
from pagetree.schemas import ComponentNode  # noqa: E402


@pytest.fixture
def paragraph():
    """Factory for paragraph nodes of the default catalog."""

    def make(level: int, name: str) -> ComponentNode:
        return ComponentNode(level=level, kind=DEFAULT_CATALOG.paragraph(name))

    return make


@pytest.fixture
def modifier():
    """Factory for modifier nodes of the default catalog."""

    def make(level: int, name: str) -> ComponentNode:
        return ComponentNode(level=level, kind=DEFAULT_CATALOG.modifier(name), is_modifier=True)

    return make
