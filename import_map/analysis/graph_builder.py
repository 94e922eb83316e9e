"""Dependency graph builder: folds per-file import lists into one node/link graph."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable

from import_map.analysis.resolver import file_group, node_label
from import_map.models import (
    DependencyGraph,
    GraphLink,
    GraphNode,
    NodeGroup,
    ResolvedImports,
)

logger = logging.getLogger(__name__)


@dataclass
class _NodeAcc:
    label: str
    group: NodeGroup
    size: int = 0


@dataclass
class _LinkAcc:
    value: int
    type_only: bool


class DependencyGraphBuilder:
    """Build a dependency graph from resolved imports.

    Links are keyed by ``(source, target)``. Repeated imports bump the
    link's ``value``; a single runtime import makes the link runtime for
    good, whatever order the imports arrive in.
    """

    def build(self, files: Iterable[ResolvedImports]) -> DependencyGraph:
        nodes: dict[str, _NodeAcc] = {}
        links: dict[tuple[str, str], _LinkAcc] = {}
        seen_sources: set[str] = set()

        for item in files:
            if item.source in seen_sources:
                logger.warning("Skipping duplicate source file: %s", item.source)
                continue
            seen_sources.add(item.source)

            self._ensure_node(nodes, item.source)

            for dep in item.imports:
                target = self._ensure_node(nodes, dep.target)

                key = (item.source, dep.target)
                link = links.get(key)
                if link is None:
                    links[key] = _LinkAcc(value=1, type_only=dep.type_only)
                else:
                    link.value += 1
                    link.type_only = merge_type_only(link.type_only, dep.type_only)

                target.size += 1

        return DependencyGraph(
            nodes=tuple(
                GraphNode(id=node_id, label=acc.label, group=acc.group, size=acc.size)
                for node_id, acc in nodes.items()
            ),
            links=tuple(
                GraphLink(source=source, target=target, value=acc.value, type_only=acc.type_only)
                for (source, target), acc in links.items()
            ),
        )

    @staticmethod
    def _ensure_node(nodes: dict[str, _NodeAcc], node_id: str) -> _NodeAcc:
        node = nodes.get(node_id)
        if node is None:
            node = _NodeAcc(label=node_label(node_id), group=file_group(node_id))
            nodes[node_id] = node
        return node


def merge_type_only(existing: bool, new: bool) -> bool:
    """Runtime dominance: the merged link stays type-only only if both sides are."""
    return existing and new
