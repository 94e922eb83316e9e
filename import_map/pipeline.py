"""Pipeline orchestrator: scan -> extract -> resolve -> build -> detect -> stats."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Callable, Iterable, Sequence

from import_map.analysis.cycles import circular_dependency_stats, find_circular_dependencies
from import_map.analysis.graph_builder import DependencyGraphBuilder
from import_map.analysis.resolver import DEFAULT_EXTENSIONS, is_resolved, resolve_import_path
from import_map.errors import ErrorCollector
from import_map.extractor import extract_imports
from import_map.models import (
    AnalysisConfig,
    AnalysisResult,
    AnalysisStats,
    Dependency,
    DependencyGraph,
    ResolvedImports,
)
from import_map.scanner import FileScanner

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[str, int, int], None]


def run_scan(
    config: AnalysisConfig,
    errors: ErrorCollector | None = None,
    progress: ProgressCallback | None = None,
) -> list[Path]:
    """Stage 1: Find the files to analyze."""
    if progress:
        progress("Scanning", 0, 1)
    files = FileScanner.from_config(config, errors).scan(config.working_dir)
    if progress:
        progress("Scanning", 1, 1)
    logger.info("Found %d files to analyze", len(files))
    return files


def resolve_file_imports(
    file_path: Path | str,
    *,
    source: str | None = None,
    detect_type_only: bool = True,
    extensions: Sequence[str] = DEFAULT_EXTENSIONS,
) -> ResolvedImports:
    """Extract and resolve one file's imports, dropping unresolved relative targets."""
    source_id = os.path.abspath(file_path)
    resolved: list[Dependency] = []
    for imp in extract_imports(file_path, source=source, detect_type_only=detect_type_only):
        target = resolve_import_path(source_id, imp.path, extensions)
        if not is_resolved(target):
            logger.debug("Unresolved import %r in %s", imp.path, source_id)
            continue
        resolved.append(Dependency(target=target, type_only=imp.type_only))
    return ResolvedImports(source=source_id, imports=resolved)


def extract_all_imports(
    files: Iterable[Path],
    errors: ErrorCollector,
    *,
    detect_type_only: bool = True,
    extensions: Sequence[str] = DEFAULT_EXTENSIONS,
    progress: ProgressCallback | None = None,
) -> list[ResolvedImports]:
    """Stage 2: Extract and resolve imports per file; failures go to *errors*."""
    files = list(files)
    results: list[ResolvedImports] = []
    for i, file_path in enumerate(files):
        if progress:
            progress("Extracting", i, len(files))
        logger.debug("Analyzing %s", file_path)
        try:
            results.append(resolve_file_imports(
                file_path,
                detect_type_only=detect_type_only,
                extensions=extensions,
            ))
        except (OSError, ValueError) as e:
            errors.record(str(file_path), f"Failed to analyze: {e}")

    if progress:
        progress("Extracting", len(files), len(files))
    logger.info("Extracted imports from %d files", len(results))
    return results


def compute_stats(graph: DependencyGraph) -> AnalysisStats:
    cycles = circular_dependency_stats(graph.circular_dependencies or ())
    return AnalysisStats(
        total_files=len(graph.nodes),
        total_dependencies=len(graph.links),
        circular_dependencies=cycles.total,
        runtime_circular_dependencies=cycles.runtime,
        type_only_circular_dependencies=cycles.type_only,
    )


def analyze_files(
    files: Iterable[Path],
    errors: ErrorCollector | None = None,
    *,
    detect_type_only: bool = True,
    extensions: Sequence[str] = DEFAULT_EXTENSIONS,
    progress: ProgressCallback | None = None,
) -> AnalysisResult:
    """Run extraction, graph assembly and cycle detection over *files*."""
    if errors is None:
        errors = ErrorCollector()

    resolved = extract_all_imports(
        files, errors,
        detect_type_only=detect_type_only,
        extensions=extensions,
        progress=progress,
    )

    if progress:
        progress("Building graph", 0, 1)
    graph = DependencyGraphBuilder().build(resolved)
    logger.info("Built graph with %d nodes and %d links", len(graph.nodes), len(graph.links))

    graph = find_circular_dependencies(graph)
    stats = compute_stats(graph)
    if progress:
        progress("Building graph", 1, 1)

    _log_stats(stats, errors)
    return AnalysisResult(graph=graph, stats=stats, errors=errors.errors)


def run_analysis(
    config: AnalysisConfig,
    progress: ProgressCallback | None = None,
    errors: ErrorCollector | None = None,
) -> AnalysisResult:
    """Run the full analysis pipeline for *config*.

    Raises AnalysisError when the working directory is missing; every other
    failure is recorded per file in the result's ``errors``.
    """
    if errors is None:
        errors = ErrorCollector()
    logger.info("Starting import map analysis of %s", config.working_dir)

    files = run_scan(config, errors, progress)
    return analyze_files(
        files, errors,
        detect_type_only=config.detect_type_only_imports,
        extensions=config.extensions,
        progress=progress,
    )


def _log_stats(stats: AnalysisStats, errors: ErrorCollector) -> None:
    logger.info(
        "Analysis complete: %d files, %d dependencies",
        stats.total_files, stats.total_dependencies,
    )
    if stats.circular_dependencies:
        logger.warning(
            "Found %d circular dependencies (%d runtime, %d type-only)",
            stats.circular_dependencies,
            stats.runtime_circular_dependencies,
            stats.type_only_circular_dependencies,
        )
    else:
        logger.info("No circular dependencies found")
    if errors:
        logger.warning("Encountered %d errors during analysis", len(errors))
