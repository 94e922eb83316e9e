"""Graph construction and cycle analysis."""

from __future__ import annotations

from import_map.analysis.cycles import (
    circular_dependency_stats,
    detect_circular_dependencies,
    find_circular_dependencies,
    mark_circular_elements,
)
from import_map.analysis.graph_builder import DependencyGraphBuilder, merge_type_only
from import_map.analysis.resolver import (
    DEFAULT_EXTENSIONS,
    EXTERNAL_PREFIX,
    file_group,
    is_external,
    is_resolved,
    node_label,
    resolve_import_path,
)

__all__ = [
    "DEFAULT_EXTENSIONS",
    "EXTERNAL_PREFIX",
    "DependencyGraphBuilder",
    "circular_dependency_stats",
    "detect_circular_dependencies",
    "file_group",
    "find_circular_dependencies",
    "is_external",
    "is_resolved",
    "mark_circular_elements",
    "merge_type_only",
    "node_label",
    "resolve_import_path",
]
