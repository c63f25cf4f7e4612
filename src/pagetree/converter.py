"""Convert tree-view documents to the table view, and read and write table text."""

from __future__ import annotations

import re
from typing import Iterable

from pagetree.exceptions import UnrecognizedLine
from pagetree.grammar import TABLE_DEPTH_MARKER, TREE_DEPTH_MARKER
from pagetree.schemas import TableRow
from pagetree.schemas.table import ROOT_LEVEL_CONFIG_IDENTIFIER

_PARAGRAPH_RE = re.compile(r"(?P<level>-+) (?P<kind>[A-Z_]+)(?P<inline> >> (?P<config>.*))?")
_MODIFIER_RE = re.compile(r"(?P<level>-+)@ (?P<kind>[A-Z_]+)")
_CONFIGURATION_RE = re.compile(r"(?P<level>-*)\* (?P<config>.*)")
_HEADER_COMPONENT_CELL = "component"


def convert_tree_to_table(lines: Iterable[str]) -> list[TableRow]:
    """Convert tree-view lines to table rows.

    Covers every kind of line:

    - a root level configuration opens the table with a ``<`` row, later
      root level configurations continue it in rows without a component
    - a paragraph (with its inline configuration, if any) gets its own row
    - a modifier gets its own row
    - the first configuration of a component without inline configuration
      shares the component's row, further ones get rows without a component

    Raises:
        UnrecognizedLine: If a line has none of the tree-view shapes.
    """
    rows: list[TableRow] = []
    for line in lines:
        match = _PARAGRAPH_RE.fullmatch(line)
        if match:
            rows.append(
                TableRow(
                    component=f"{_to_table_level(match.group('level'))} {match.group('kind')}",
                    configuration=match.group("config") or "",
                )
            )
            continue

        match = _MODIFIER_RE.fullmatch(line)
        if match:
            rows.append(TableRow(component=f"{_to_table_level(match.group('level'))}@ {match.group('kind')}"))
            continue

        match = _CONFIGURATION_RE.fullmatch(line)
        if not match:
            raise UnrecognizedLine(f"The provided line from the component tree is not valid: [{line}]", line)
        config = match.group("config")
        if not match.group("level"):
            component = ROOT_LEVEL_CONFIG_IDENTIFIER if not rows else ""
            rows.append(TableRow(component=component, configuration=config))
        elif rows and not rows[-1].configuration:
            rows[-1] = rows[-1].model_copy(update={"configuration": config})
        else:
            rows.append(TableRow(configuration=config))
    return rows


def _to_table_level(level: str) -> str:
    return level.replace(TREE_DEPTH_MARKER, TABLE_DEPTH_MARKER)


def render_table(rows: Iterable[TableRow]) -> str:
    """Render rows as ``| component | configuration |`` lines."""
    return "\n".join(f"| {row.component} | {row.configuration} |" for row in rows)


def parse_table(text: str) -> list[TableRow]:
    """Read ``| component | configuration |`` lines into rows.

    Blank lines and a ``| Component | Configuration |`` header are skipped.
    The configuration cell keeps any ``|`` it contains.

    Raises:
        UnrecognizedLine: If a non-blank line is not framed by ``|``.
    """
    rows: list[TableRow] = []
    for line in text.splitlines():
        stripped = line.strip()
        if not stripped:
            continue
        if len(stripped) < 2 or not (stripped.startswith("|") and stripped.endswith("|")):
            raise UnrecognizedLine(f"The table row is not framed by '|': [{line}]", line)
        component, _, configuration = stripped[1:-1].partition("|")
        component = component.strip()
        if not rows and component.lower() == _HEADER_COMPONENT_CELL:
            continue
        rows.append(TableRow(component=component, configuration=configuration.strip()))
    return rows
