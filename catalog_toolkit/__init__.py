"""Top-level package for Catalog Toolkit.

Front-ends (CLI, reader applications) should only depend on the public API
exposed here rather than importing internal modules directly.
"""

from .core.index import Index, IndexEvents  # re-export for convenience
from .core.models import Document, TreeNode
from .core.settings import Settings

__all__: list[str] = [
    "Document",
    "Index",
    "IndexEvents",
    "Settings",
    "TreeNode",
]
