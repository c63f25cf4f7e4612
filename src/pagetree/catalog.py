"""Component kind catalogs."""

from __future__ import annotations

import logging
import tomllib
from pathlib import Path
from typing import Iterable

from pydantic import ValidationError

from pagetree.config import PAGETREE_CATALOG_PATH
from pagetree.exceptions import ConfigurationError, UnknownNodeKind
from pagetree.schemas import NodeCategory, NodeKind

logger = logging.getLogger(__name__)


class NodeCatalog:
    """Lookup of the paragraph and modifier kinds a document may use."""

    def __init__(self, kinds: Iterable[NodeKind]) -> None:
        self._paragraphs: dict[str, NodeKind] = {}
        self._modifiers: dict[str, NodeKind] = {}
        for kind in kinds:
            target = self._modifiers if kind.is_modifier else self._paragraphs
            target[kind.name] = kind

    def paragraph(self, name: str) -> NodeKind:
        try:
            return self._paragraphs[name]
        except KeyError:
            raise UnknownNodeKind(f"Unknown paragraph kind: [{name}]", name) from None

    def modifier(self, name: str) -> NodeKind:
        try:
            return self._modifiers[name]
        except KeyError:
            raise UnknownNodeKind(f"Unknown modifier kind: [{name}]", name) from None

    @property
    def kinds(self) -> list[NodeKind]:
        return [*self._paragraphs.values(), *self._modifiers.values()]

    def __contains__(self, name: object) -> bool:
        return name in self._paragraphs or name in self._modifiers

    def __len__(self) -> int:
        return len(self._paragraphs) + len(self._modifiers)


def _paragraph(name: str, template: str) -> NodeKind:
    return NodeKind(name=name, category=NodeCategory.PARAGRAPH, template=template)


def _modifier(name: str, template: str) -> NodeKind:
    return NodeKind(name=name, category=NodeCategory.MODIFIER, template=template)


# Sample selectors; real projects point PAGETREE_CATALOG_PATH at their own.
DEFAULT_CATALOG = NodeCatalog(
    [
        _paragraph("CONTAINER", ".container:nth-child({index})"),
        # A container holds a single layout, so the index is not used.
        _paragraph("LAYOUT", ".layout"),
        _paragraph("IMAGE", ".image-component:nth-child({index})"),
        _paragraph("CAROUSEL", ".carousel:nth-child({index})"),
        _paragraph("CAROUSEL_ITEM", ".carousel-item:nth-child({index})"),
        _paragraph("YOUTUBE_VIDEO", ".youtube-video:nth-child({index})"),
        _modifier("ABSOLUTE_HEIGHT_MODIFIER", ".absolute-height-modifier"),
        _modifier("COLORS_MODIFIER", ".colors-modifier"),
    ]
)


def load_catalog(path: Path) -> NodeCatalog:
    """Load a catalog from a TOML file.

    The file holds two tables mapping identifiers to selector templates::

        [paragraphs]
        CONTAINER = ".container:nth-child({index})"

        [modifiers]
        COLORS_MODIFIER = ".colors-modifier"

    Args:
        path: Path to the TOML file.

    Returns:
        The loaded catalog.

    Raises:
        ConfigurationError: If the file cannot be read or a kind is invalid.
    """
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as exc:
        raise ConfigurationError(f"Cannot read catalog {path}: {exc}") from exc

    kinds: list[NodeKind] = []
    try:
        for name, template in data.get("paragraphs", {}).items():
            kinds.append(_paragraph(name, template))
        for name, template in data.get("modifiers", {}).items():
            kinds.append(_modifier(name, template))
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid kind in catalog {path}: {exc}") from exc

    if not kinds:
        raise ConfigurationError(f"Catalog {path} defines no component kinds")
    logger.debug("Loaded %d component kinds from %s", len(kinds), path)
    return NodeCatalog(kinds)


def get_catalog(path: Path | None = None) -> NodeCatalog:
    """Return the catalog at ``path``, the configured one, or the defaults."""
    path = path or PAGETREE_CATALOG_PATH
    if path is None:
        return DEFAULT_CATALOG
    return load_catalog(path)
