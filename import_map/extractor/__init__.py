"""Extractor registry."""

from __future__ import annotations

from dataclasses import replace
from pathlib import Path

from import_map.extractor.base import BaseImportExtractor
from import_map.extractor.script_extractor import ScriptImportExtractor
from import_map.extractor.vue_extractor import VueImportExtractor
from import_map.models import ImportDeclaration

_EXTRACTORS: dict[str, BaseImportExtractor] = {}
for _extractor in (ScriptImportExtractor(), VueImportExtractor()):
    for _ext in _extractor.extensions:
        _EXTRACTORS[_ext] = _extractor

SUPPORTED_EXTENSIONS: frozenset[str] = frozenset(_EXTRACTORS)


def get_extractor(file_path: Path) -> BaseImportExtractor:
    extractor = _EXTRACTORS.get(Path(file_path).suffix.lower())
    if extractor is None:
        raise ValueError(f"No import extractor for file type: {Path(file_path).suffix or file_path}")
    return extractor


def extract_imports(
    file_path: Path | str,
    *,
    source: str | None = None,
    detect_type_only: bool = True,
) -> list[ImportDeclaration]:
    """Extract the import declarations of one file.

    Args:
        file_path: File to scan; its extension selects the extractor.
        source: Pre-read file text to avoid a disk read.
        detect_type_only: When False every declaration is reported as runtime.
    """
    path = Path(file_path)
    imports = get_extractor(path).extract(path, source=source)
    if not detect_type_only:
        imports = [replace(imp, type_only=False) for imp in imports]
    return imports


__all__ = [
    "BaseImportExtractor",
    "ScriptImportExtractor",
    "VueImportExtractor",
    "SUPPORTED_EXTENSIONS",
    "extract_imports",
    "get_extractor",
]
