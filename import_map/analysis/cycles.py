"""Circular dependency detection, annotation and statistics."""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Iterable, Iterator, Mapping, Sequence

from import_map.models import (
    CircularDependency,
    CycleEdge,
    CycleStats,
    Dependency,
    DependencyGraph,
)

logger = logging.getLogger(__name__)


def detect_circular_dependencies(
    dependencies: Mapping[str, Sequence[Dependency]],
) -> list[CircularDependency]:
    """Detect cycles with a three-colour DFS started from every unvisited key.

    Fully visited nodes are never re-entered, so each entry point yields at
    most one cycle through a node: overlapping cycles that share an already
    explored node are not all enumerated.
    """
    cycles: list[CircularDependency] = []
    visited: set[str] = set()
    visiting: set[str] = set()
    path: list[str] = []
    # Explicit stack of (node, remaining dependencies); import chains can be
    # deeper than the interpreter's recursion limit.
    stack: list[tuple[str, Iterator[Dependency]]] = []

    # First adjacency entry wins for a repeated (source, target) pair.
    edge_type_only: dict[tuple[str, str], bool] = {}
    for source, deps in dependencies.items():
        for dep in deps:
            edge_type_only.setdefault((source, dep.target), dep.type_only)

    def enter(node_id: str) -> None:
        visiting.add(node_id)
        path.append(node_id)
        stack.append((node_id, iter(dependencies.get(node_id, ()))))

    for root in dependencies:
        if root in visited:
            continue
        enter(root)
        while stack:
            node_id, remaining = stack[-1]
            dep = next(remaining, None)
            if dep is None:
                stack.pop()
                path.pop()
                visiting.discard(node_id)
                visited.add(node_id)
            elif dep.target in visiting:
                start = path.index(dep.target)
                cycles.append(_close_cycle(path[start:] + [dep.target], edge_type_only))
            elif dep.target not in visited:
                enter(dep.target)

    return cycles


def _close_cycle(
    chain: list[str],
    edge_type_only: Mapping[tuple[str, str], bool],
) -> CircularDependency:
    edges = tuple(CycleEdge(source=s, target=t) for s, t in zip(chain, chain[1:]))
    # An edge missing from the adjacency counts as runtime.
    type_only = all(edge_type_only.get((e.source, e.target), False) for e in edges)
    return CircularDependency(chain=tuple(chain), edges=edges, type_only=type_only)


def mark_circular_elements(graph: DependencyGraph) -> DependencyGraph:
    """Return a copy of *graph* with cycle members flagged on nodes and links."""
    if not graph.circular_dependencies:
        return graph

    cycles = graph.circular_dependencies
    circular_nodes: set[str] = set()
    circular_links: set[tuple[str, str]] = set()
    for cycle in cycles:
        circular_nodes.update(cycle.chain)
        circular_links.update((e.source, e.target) for e in cycle.edges)

    nodes = tuple(
        replace(
            node,
            in_cycle=True,
            cycle_chains=tuple(c.chain for c in cycles if node.id in c.chain),
        )
        if node.id in circular_nodes else node
        for node in graph.nodes
    )
    links = tuple(
        replace(link, is_circular=True)
        if (link.source, link.target) in circular_links else link
        for link in graph.links
    )
    return replace(graph, nodes=nodes, links=links)


def find_circular_dependencies(graph: DependencyGraph) -> DependencyGraph:
    """Detect cycles on *graph*'s links and return the annotated graph."""
    cycles = detect_circular_dependencies(graph.adjacency())
    stats = circular_dependency_stats(cycles)
    logger.debug(
        "Found %d circular dependencies (%d runtime, %d type-only)",
        stats.total, stats.runtime, stats.type_only,
    )
    return mark_circular_elements(replace(graph, circular_dependencies=tuple(cycles)))


def circular_dependency_stats(cycles: Iterable[CircularDependency]) -> CycleStats:
    cycles = list(cycles)
    type_only = sum(1 for c in cycles if c.type_only)
    return CycleStats(total=len(cycles), runtime=len(cycles) - type_only, type_only=type_only)
