from __future__ import annotations

"""Import functionality for catalog index sources.

Key components:
- IndexImporter: Loads JSON index files from disk into an Index
"""

from .index_importer import IndexImporter, IndexImportError

__all__ = ["IndexImporter", "IndexImportError"]
