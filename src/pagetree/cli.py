"""Command line interface for pagetree."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from pagetree.assembly import assemble_table, assemble_tree_view
from pagetree.catalog import get_catalog
from pagetree.config import PAGETREE_LOG_LEVEL
from pagetree.converter import convert_tree_to_table, parse_table, render_table
from pagetree.exceptions import PagetreeError
from pagetree.selectors import context_selector_for

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pagetree",
        description="Build component trees from tree-view or table documents and address their nodes.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log assembly steps")
    subparsers = parser.add_subparsers(dest="command", required=True)

    selectors = subparsers.add_parser("selectors", help="Print the context selector of every component")
    selectors.add_argument("document", help="Document path, or - for stdin")
    selectors.add_argument("--table", action="store_true", help="Read the document as a table")
    selectors.add_argument("--catalog", type=Path, help="TOML catalog of component kinds")
    selectors.add_argument("--snapshot", type=Path, help="HTML snapshot to count selector matches in")

    convert = subparsers.add_parser("convert", help="Convert a tree-view document to a table")
    convert.add_argument("document", help="Document path, or - for stdin")
    convert.add_argument("-o", "--output", default="-", help="Output path, or - for stdout")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else PAGETREE_LOG_LEVEL,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        text = _read_document(args.document)
        if args.command == "convert":
            _write_output(args.output, render_table(convert_tree_to_table(text.splitlines())) + "\n")
        else:
            _print_selectors(text, table=args.table, catalog_path=args.catalog, snapshot=args.snapshot)
    except (PagetreeError, OSError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


def _print_selectors(
    text: str,
    *,
    table: bool,
    catalog_path: Path | None,
    snapshot: Path | None,
) -> None:
    catalog = get_catalog(catalog_path)
    if table:
        tree, _ = assemble_table(parse_table(text), catalog=catalog)
    else:
        tree, _ = assemble_tree_view(text, catalog=catalog)

    selectors = [(node, context_selector_for(tree, node)) for node in tree]
    counts: dict[str, int] = {}
    if snapshot is not None:
        from pagetree.snapshot import match_selectors

        counts = match_selectors(
            snapshot.read_text(encoding="utf-8"), [selector for _, selector in selectors]
        )

    for node, selector in selectors:
        line = f"{node}\t{selector}"
        if snapshot is not None:
            line += f"\t{counts[selector]} match(es)"
        print(line)


def _read_document(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    return Path(source).read_text(encoding="utf-8")


def _write_output(target: str, content: str) -> None:
    if target == "-":
        sys.stdout.write(content)
        return
    Path(target).write_text(content, encoding="utf-8")
    logger.info("Wrote %s", target)
