from __future__ import annotations

"""Tree data structures shared across the catalog core.

This package exposes the node types the index is built from. It is
intentionally free of I/O so that the contained objects can be reused in any
context (unit-tests, CLI, embedding applications, etc.).
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union

__all__ = ["TreeNode", "Document"]


@dataclass(eq=False)
class TreeNode:
    """Ordered tree node.

    ``children`` order is significant: it defines traversal order. ``parent``
    is a non-owning back-reference maintained by :meth:`append_child`.
    """

    children: List["TreeNode"] = field(default_factory=list, init=False)
    parent: Optional["TreeNode"] = field(default=None, init=False, repr=False)

    def append_child(self, node: Optional[TreeNode]) -> Optional[TreeNode]:
        """Append *node* and return it for chaining.

        ``None`` is returned unchanged and nothing is appended, so the result
        of a failed parse can be passed straight in.
        """
        if node is None:
            return node
        node.parent = self
        self.children.append(node)
        return node

    def has_children(self) -> bool:
        """Return True if this node has child nodes."""
        return len(self.children) > 0


@dataclass(eq=False)
class Document(TreeNode):
    """A catalog entry identified by its canonical url.

    Attributes
    ----------
    url
        Absolute url with the fragment removed.
    meta
        Shallow copy of every field of the descriptor this document was
        parsed from, ``url`` and ``children`` included.
    """

    url: str
    meta: Dict[str, Any] = field(default_factory=dict)

    @property
    def title(self) -> Optional[str]:
        return self.meta.get("title")

    def get(self, key: str, default: Any = None) -> Any:
        """Return metadata field *key*, or *default* when absent."""
        return self.meta.get(key, default)

    def equals(self, other: Union[Document, str]) -> bool:
        """Return True if *other* (a Document or a url) has the same url."""
        if isinstance(other, Document):
            return self.url == other.url
        return self.url == other

    def __eq__(self, other: object) -> bool:
        if isinstance(other, (Document, str)):
            return self.equals(other)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.url)

    def __repr__(self) -> str:
        return f"Document(url={self.url!r}, children={len(self.children)})"
