from __future__ import annotations

"""Document index: the table of contents of a catalog.

The :class:`Index` is the root of a tree of :class:`Document` nodes parsed
from a nested descriptor list. A flat, depth-first view of the tree is kept
in an :class:`IndexCache` which is only rebuilt by :meth:`Index.update`;
structural edits (``parse``, ``append_child``) leave it stale until then.

Queries come in two flavours:

- cache reads: ``get_document_by_index``, ``get_number_of_documents``,
  ``get_documents``;
- live queries that re-walk the current tree: ``get`` and
  ``get_document_index``.

Examples
--------

    index = Index()
    index.parse('[{"url": "/a", "children": [{"url": "/b"}]}]')
    index.update()
    index.get_documents()            # [Document('/a'), Document('/b')]
    index.document_positions["/b"]   # [1]

"""

import json
import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterable, List, Optional, Union

from catalog_toolkit.core.models import Document, TreeNode
from catalog_toolkit.core.uri import absolute_url, strip_hash

__all__ = ["Index", "IndexCache", "IndexEvents"]

logger = logging.getLogger(__name__)

Listener = Callable[[Dict[str, Any]], None]


def _reject_constant(name: str) -> None:
    """Refuse ``NaN`` and ``Infinity``, which strict JSON does not allow."""
    raise ValueError(f"Invalid JSON constant: {name}")


class IndexEvents:
    """Names of the events fired by :class:`Index`."""

    UPDATED = "catalog.index.updated"


@dataclass
class IndexCache:
    """Flat depth-first view of an index as of the last rebuild.

    Attributes
    ----------
    documents
        Every document in pre-order.
    document_map
        Url -> documents found at that url, in traversal order.
    document_positions
        Url -> flat positions of those documents.
    """

    documents: List[Document] = field(default_factory=list)
    document_map: Dict[str, List[Document]] = field(default_factory=dict)
    document_positions: Dict[str, List[int]] = field(default_factory=dict)

    def add(self, doc: Document) -> None:
        """Record *doc* at the next flat position."""
        position = len(self.documents)
        self.documents.append(doc)
        self.document_map.setdefault(doc.url, []).append(doc)
        self.document_positions.setdefault(doc.url, []).append(position)


class Index(TreeNode):
    """Root of the document tree plus its flat cache.

    Parameters
    ----------
    base_url : str, default=""
        Base against which descriptor urls are resolved.
    """

    events = IndexEvents

    def __init__(self, base_url: str = "") -> None:
        super().__init__()
        self.base_url = base_url
        self._cache = IndexCache()
        self._listeners: Dict[str, List[Listener]] = {}
        self._logger = logging.getLogger(f"{__name__}.Index")

    # -------------------------------------------------------------------------
    # Cache views
    # -------------------------------------------------------------------------

    @property
    def documents(self) -> List[Document]:
        return self._cache.documents

    @property
    def document_map(self) -> Dict[str, List[Document]]:
        return self._cache.document_map

    @property
    def document_positions(self) -> Dict[str, List[int]]:
        return self._cache.document_positions

    # -------------------------------------------------------------------------
    # Listeners
    # -------------------------------------------------------------------------

    def add_listener(self, event: str, callback: Listener) -> None:
        """Register *callback* for *event*. Callbacks receive the payload dict."""
        self._listeners.setdefault(event, []).append(callback)

    def remove_listener(self, event: str, callback: Listener) -> None:
        callbacks = self._listeners.get(event, [])
        if callback in callbacks:
            callbacks.remove(callback)

    def _fire(self, event: str, payload: Dict[str, Any]) -> None:
        # Listener errors propagate to the caller.
        for callback in list(self._listeners.get(event, [])):
            callback(payload)

    # -------------------------------------------------------------------------
    # Parsing
    # -------------------------------------------------------------------------

    def parse_entry(self, entry: Any) -> Optional[Document]:
        """Build a :class:`Document` (and its subtree) from a raw descriptor.

        Returns None, after logging a warning, when the entry has no usable
        url.
        """
        url = entry.get("url") if isinstance(entry, dict) else None
        if not url:
            logger.warning("Ignored document index entry without URL")
            return None
        if not isinstance(url, str):
            logger.warning("Ignored document index entry with non-string URL: %r", url)
            return None

        try:
            url = strip_hash(absolute_url(url, self.base_url))
        except ValueError as exc:
            logger.warning("Ignored document index entry with invalid URL %r: %s", url, exc)
            return None

        doc = Document(url, dict(entry))

        children = entry.get("children")
        if children and isinstance(children, list):
            for child in children:
                doc.append_child(self.parse_entry(child))

        return doc

    def parse(self, index: Union[str, bytes, List[Any], None]) -> List[Document]:
        """Parse a descriptor list (or its JSON encoding) into the tree.

        The parsed top-level documents are appended to this index and
        returned. Malformed input yields an empty list and a warning. The
        cache is not refreshed; call :meth:`update` afterwards.
        """
        if not index:
            return []

        if isinstance(index, (str, bytes)):
            try:
                index = json.loads(index, parse_constant=_reject_constant)
            except (ValueError, RecursionError) as exc:
                logger.warning("Tried to parse TOC index file, but failed: %s", exc)
                return []

        if not isinstance(index, list):
            logger.warning("Document index should be an array of objects.")
            return []

        parsed = [self.parse_entry(entry) for entry in index]
        return [self.append_child(doc) for doc in parsed if doc is not None]

    # -------------------------------------------------------------------------
    # Traversal and cache
    # -------------------------------------------------------------------------

    def walk(self, nodes: Iterable[TreeNode], fn: Callable[[Any], Any]) -> bool:
        """Depth-first pre-order walk over *nodes* and their descendants.

        The whole traversal, siblings and ancestors' siblings included, stops
        as soon as *fn* returns exactly ``False``. Any other return value
        continues into the node's children.

        Returns False if the walk was stopped, True otherwise.
        """
        for node in nodes:
            if fn(node) is False or not self.walk(node.children, fn):
                return False
        return True

    def update(self) -> None:
        """Rebuild the flat cache from the tree and fire ``UPDATED``.

        Call this after modifying the tree.
        """
        cache = IndexCache()
        self.walk(self.children, cache.add)
        self._cache = cache

        self._logger.debug(
            "Index updated: %d documents, %d distinct urls",
            len(cache.documents), len(cache.document_map),
        )
        self._fire(IndexEvents.UPDATED, {"index": self})

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def get_document_by_index(self, index: int) -> Optional[Document]:
        """Return the cached document at flat position *index*, or None."""
        if 0 <= index < len(self.documents):
            return self.documents[index]
        return None

    def get_number_of_documents(self) -> int:
        return len(self.documents)

    def get_document_index(self, doc: Union[Document, str]) -> int:
        """Return the live pre-order position of *doc*, or -1.

        The walk is never cut short, so with duplicate urls the position of
        the last match is returned.
        """
        result = -1
        position = 0

        def visit(d: Document) -> None:
            nonlocal result, position
            if d.equals(doc):
                result = position
            position += 1

        self.walk(self.children, visit)
        return result

    def get_documents(self) -> List[Document]:
        """Return the cached flat document list. Do not mutate it."""
        return self.documents

    def get(self, url: str) -> List[Document]:
        """Return every document in the live tree matching *url*."""
        result: List[Document] = []

        def visit(doc: Document) -> None:
            if doc.equals(url):
                result.append(doc)

        self.walk(self.children, visit)
        return result
