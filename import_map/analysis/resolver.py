"""Import path resolution and node classification."""

from __future__ import annotations

import os
from typing import Sequence

from import_map.models import NodeGroup

EXTERNAL_PREFIX = "external:"

DEFAULT_EXTENSIONS: tuple[str, ...] = (".ts", ".tsx", ".vue", ".js", ".jsx")

# First match wins
_GROUP_MARKERS: tuple[tuple[str, NodeGroup], ...] = (
    ("/components/", NodeGroup.COMPONENTS),
    ("/stores/", NodeGroup.STORES),
    ("/services/", NodeGroup.SERVICES),
    ("/views/", NodeGroup.VIEWS),
    ("/composables/", NodeGroup.COMPOSABLES),
    ("/utils/", NodeGroup.UTILS),
    ("/types/", NodeGroup.TYPES),
)


def is_external(node_id: str) -> bool:
    return node_id.startswith(EXTERNAL_PREFIX)


def resolve_import_path(
    from_file: str | os.PathLike,
    import_path: str,
    extensions: Sequence[str] = DEFAULT_EXTENSIONS,
) -> str:
    """Map *import_path*, as declared in *from_file*, to a node identity.

    Bare specifiers become ``external:<specifier>``. Relative paths are
    joined to the declaring file's directory, normalised, and probed with
    each extension, then as ``<dir>/index<ext>``. When nothing exists on
    disk the normalised candidate is returned as-is.
    """
    if not import_path.startswith("."):
        return f"{EXTERNAL_PREFIX}{import_path}"

    from_dir = os.path.dirname(os.fspath(from_file))
    resolved = os.path.abspath(os.path.join(from_dir, import_path))
    if os.path.isfile(resolved):
        return resolved

    for ext in extensions:
        if os.path.isfile(resolved + ext):
            return resolved + ext

    for ext in extensions:
        index_file = os.path.join(resolved, f"index{ext}")
        if os.path.isfile(index_file):
            return index_file

    return resolved


def is_resolved(target: str) -> bool:
    """External targets are always admitted; relative ones only if the file exists."""
    return is_external(target) or os.path.isfile(target)


def file_group(node_id: str) -> NodeGroup:
    if is_external(node_id):
        return NodeGroup.EXTERNAL
    normalized = node_id.replace("\\", "/")
    for marker, group in _GROUP_MARKERS:
        if marker in normalized:
            return group
    return NodeGroup.OTHER


def node_label(node_id: str) -> str:
    if is_external(node_id):
        return node_id[len(EXTERNAL_PREFIX):]
    return os.path.basename(node_id)
