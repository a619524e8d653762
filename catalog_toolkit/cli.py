from __future__ import annotations

"""Command-line front-end for inspecting catalog index files."""

import argparse
import logging
import sys
from typing import List, Optional

from catalog_toolkit.core.importers import IndexImporter, IndexImportError
from catalog_toolkit.core.index import Index
from catalog_toolkit.core.models import Document
from catalog_toolkit.core.uri import absolute_url, strip_hash
from catalog_toolkit.logging_config import setup_logging
from catalog_toolkit.version import get_app_version

__all__ = ["build_parser", "main"]

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="catalog-index",
        description="Inspect a catalog index (JSON descriptor list).",
    )
    parser.add_argument("--version", action="version", version=get_app_version())
    parser.add_argument("--base-url", default=None,
                        help="Base for resolving descriptor urls (overrides config).")

    sub = parser.add_subparsers(dest="command", required=True)

    p_list = sub.add_parser("list", help="Print the flat, depth-first document list.")
    p_list.add_argument("file")

    p_tree = sub.add_parser("tree", help="Print the document tree.")
    p_tree.add_argument("file")

    p_find = sub.add_parser("find", help="Print the positions of documents with a url.")
    p_find.add_argument("file")
    p_find.add_argument("url")

    return parser


def _print_list(index: Index) -> int:
    for position, doc in enumerate(index.get_documents()):
        print(f"{position}\t{doc.url}")
    return 0


def _print_tree(nodes: List[Document], depth: int = 0) -> None:
    for doc in nodes:
        label = doc.url if not doc.title else f"{doc.url}  ({doc.title})"
        print(f"{'  ' * depth}{label}")
        if doc.has_children():
            _print_tree(doc.children, depth + 1)


def _find(index: Index, url: str) -> int:
    url = strip_hash(absolute_url(url, index.base_url))
    positions = index.document_positions.get(url, [])
    if not positions:
        print(f"No document with url {url}", file=sys.stderr)
        return 1
    for position in positions:
        print(position)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging()

    try:
        index = IndexImporter().import_index(args.file, base_url=args.base_url)
    except IndexImportError as exc:
        logger.error("Import failed: %s", exc)
        print(f"error: {exc}", file=sys.stderr)
        return 2

    if args.command == "list":
        return _print_list(index)
    if args.command == "tree":
        _print_tree(index.children)
        return 0
    return _find(index, args.url)
