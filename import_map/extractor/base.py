"""Abstract base import extractor."""

from __future__ import annotations

import abc
from pathlib import Path

from import_map.models import ImportDeclaration


class BaseImportExtractor(abc.ABC):
    """Base class for per-format import extractors."""

    extensions: tuple[str, ...]

    @abc.abstractmethod
    def extract_from_text(self, text: str) -> list[ImportDeclaration]:
        """Return the import declarations found in *text*."""

    def extract(
        self,
        file_path: Path,
        *,
        source: str | None = None,
    ) -> list[ImportDeclaration]:
        """Extract imports from *file_path*, reading it unless *source* is given."""
        if source is None:
            source = self._read_source(file_path)
        return self.extract_from_text(source)

    def _read_source(self, path: Path) -> str:
        return path.read_text(encoding="utf-8", errors="replace")
