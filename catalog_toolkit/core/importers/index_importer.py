from __future__ import annotations

"""Importer for catalog index files stored on the local filesystem.

Reads a JSON descriptor list from disk and turns it into an up-to-date
:class:`Index`. Only file-level problems are errors here; a file whose
content is not a valid descriptor list yields an empty index, following the
parse contract of :class:`Index`.
"""

import logging
from pathlib import Path
from typing import Optional, Union

from catalog_toolkit.config import ConfigManager
from catalog_toolkit.core.index import Index

logger = logging.getLogger(__name__)

__all__ = ["IndexImporter", "IndexImportError"]


class IndexImportError(Exception):
    """Exception raised when an index file cannot be read."""

    def __init__(self, message: str, file_path: Optional[Path] = None, cause: Optional[Exception] = None):
        self.file_path = file_path
        self.cause = cause
        super().__init__(message)


class IndexImporter:
    """Load index files (``.json``) into :class:`Index` objects."""

    SUPPORTED_EXTENSIONS = (".json",)

    def __init__(self):
        self.logger = logging.getLogger(f"{__name__}.IndexImporter")

    def can_import(self, file_path: Union[str, Path]) -> bool:
        """Check if this importer can handle the given file.

        Args:
            file_path: Path to the file to check

        Returns:
            True if file exists and has a supported extension, False otherwise
        """
        file_path = Path(file_path)
        if not file_path.exists() or not file_path.is_file():
            return False
        return file_path.suffix.lower() in self.SUPPORTED_EXTENSIONS

    def import_index(self, file_path: Union[str, Path], base_url: Optional[str] = None) -> Index:
        """Read *file_path* and return a parsed, updated Index.

        Args:
            file_path: Path to the JSON index file
            base_url: Base for resolving descriptor urls; defaults to the
                configured ``index.base_url``

        Returns:
            Index whose cache reflects the parsed tree

        Raises:
            IndexImportError: If the file is missing, unsupported or unreadable
        """
        file_path = Path(file_path)
        if not self.can_import(file_path):
            raise IndexImportError(f"File is not a readable index file: {file_path}", file_path)

        try:
            text = file_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise IndexImportError(f"Failed to read index file: {e}", file_path, e)

        if base_url is None:
            base_url = ConfigManager().get_index_config().get("base_url") or ""

        index = Index(base_url=base_url)
        top_level = index.parse(text)
        index.update()

        self.logger.debug("Imported %s: %d top-level entries, %d documents",
                          file_path, len(top_level), index.get_number_of_documents())
        return index
