"""Source tree traversal with include/exclude globs and a file-size limit."""

from __future__ import annotations

import fnmatch
import logging
import os
from pathlib import Path

from import_map.errors import AnalysisError, ErrorCollector
from import_map.models import AnalysisConfig

logger = logging.getLogger(__name__)


def glob_match(rel_path: str, pattern: str) -> bool:
    """Match a POSIX relative path against a glob, one segment at a time.

    ``*`` and ``?`` never cross a ``/``; a ``**`` segment matches zero or
    more whole segments.
    """
    return _match_segments(rel_path.split("/"), pattern.split("/"))


def _match_segments(parts: list[str], patterns: list[str]) -> bool:
    if not patterns:
        return not parts
    head, rest = patterns[0], patterns[1:]
    if head == "**":
        return any(_match_segments(parts[i:], rest) for i in range(len(parts) + 1))
    return bool(parts) and fnmatch.fnmatchcase(parts[0], head) and _match_segments(parts[1:], rest)


class FileScanner:
    """Collect the files of a directory tree that an analysis should read."""

    def __init__(
        self,
        include: list[str],
        exclude: list[str] | None = None,
        max_file_size: int | None = None,
        errors: ErrorCollector | None = None,
    ):
        self.include = list(include)
        self.exclude = list(exclude or [])
        self.max_file_size = max_file_size
        self.errors = errors if errors is not None else ErrorCollector()
        self._dir_excludes = [p[:-3] for p in self.exclude if p.endswith("/**")]

    @classmethod
    def from_config(cls, config: AnalysisConfig, errors: ErrorCollector | None = None) -> FileScanner:
        return cls(
            include=config.include,
            exclude=config.exclude,
            max_file_size=config.max_file_size,
            errors=errors,
        )

    def scan(self, directory: Path) -> list[Path]:
        """Return absolute paths of matching files under *directory*, sorted."""
        root = Path(directory).resolve()
        if not root.is_dir():
            raise AnalysisError(f"Working directory does not exist: {root}")

        files: list[Path] = []
        for dirpath, dirnames, filenames in os.walk(root):
            rel_dir = Path(dirpath).relative_to(root).as_posix()
            rel_dir = "" if rel_dir == "." else rel_dir + "/"

            dirnames[:] = sorted(
                d for d in dirnames if not self._skip_dir(rel_dir + d)
            )
            for name in filenames:
                rel = rel_dir + name
                if not self._wanted(rel):
                    continue
                path = Path(dirpath) / name
                if self._within_size(path):
                    files.append(path)

        files.sort()
        logger.debug("Scanned %s: %d matching files", root, len(files))
        return files

    def _skip_dir(self, rel_dir: str) -> bool:
        return any(glob_match(rel_dir, p) for p in self._dir_excludes)

    def _wanted(self, rel_path: str) -> bool:
        if not any(glob_match(rel_path, p) for p in self.include):
            return False
        return not any(glob_match(rel_path, p) for p in self.exclude)

    def _within_size(self, path: Path) -> bool:
        if self.max_file_size is None:
            return True
        try:
            size = path.stat().st_size
        except OSError as e:
            self.errors.record(str(path), f"Failed to stat file: {e}")
            return False
        if size > self.max_file_size:
            logger.debug("Skipping %s (%d bytes > %d)", path, size, self.max_file_size)
            return False
        return True
