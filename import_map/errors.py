"""Error types and the per-file error sink threaded through the pipeline."""

from __future__ import annotations

import logging
from typing import Iterator

from import_map.models import FileError

logger = logging.getLogger(__name__)


class AnalysisError(ValueError):
    """Fatal error that aborts the whole analysis (e.g. missing working directory)."""


class ErrorCollector:
    """Accumulates per-file failures so one bad file never aborts a run."""

    def __init__(self):
        self._errors: list[FileError] = []

    def record(self, file: str, message: str) -> None:
        logger.error("%s: %s", file, message)
        self._errors.append(FileError(file=str(file), error=message))

    @property
    def errors(self) -> list[FileError]:
        return list(self._errors)

    def clear(self) -> None:
        self._errors.clear()

    def __len__(self) -> int:
        return len(self._errors)

    def __bool__(self) -> bool:
        return bool(self._errors)

    def __iter__(self) -> Iterator[FileError]:
        return iter(list(self._errors))
