"""Check context selectors against a saved HTML snapshot of the page."""

from __future__ import annotations

from typing import Iterable

from pagetree.config import PAGETREE_SNAPSHOT_PARSER
from pagetree.exceptions import SnapshotError

try:
    from bs4 import BeautifulSoup
    from soupsieve import SelectorSyntaxError
except ImportError as exc:  # pragma: no cover - runtime dependency check
    raise SnapshotError(
        "BeautifulSoup4 is required for snapshot matching (pip install beautifulsoup4)."
    ) from exc


def count_matches(
    soup: BeautifulSoup,
    selector: str,
) -> int:
    """Return how many elements of ``soup`` the selector addresses."""
    try:
        return len(soup.select(selector))
    except SelectorSyntaxError as exc:
        raise SnapshotError(f"Invalid selector {selector!r}: {exc}") from exc


def match_selectors(
    html: str,
    selectors: Iterable[str],
    *,
    parser: str = PAGETREE_SNAPSHOT_PARSER,
) -> dict[str, int]:
    """Count the elements each selector addresses in ``html``.

    A context selector is expected to address exactly one element; zero means
    the component is missing from the snapshot, more than one means the
    selector is ambiguous.
    """
    soup = BeautifulSoup(html, parser)
    return {selector: count_matches(soup, selector) for selector in selectors}
