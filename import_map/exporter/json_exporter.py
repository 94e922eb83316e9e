"""Serialize graphs and error logs to JSON."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Iterable

from import_map.models import DependencyGraph, FileError, GraphLink, GraphNode


def _node_to_dict(node: GraphNode) -> dict:
    d: dict = {
        "id": node.id,
        "label": node.label,
        "group": node.group.value,
        "size": node.size,
    }
    if node.in_cycle:
        d["in_cycle"] = True
        d["cycle_chains"] = [list(chain) for chain in node.cycle_chains]
    return d


def _link_to_dict(link: GraphLink) -> dict:
    d: dict = {
        "source": link.source,
        "target": link.target,
        "value": link.value,
        "type_only": link.type_only,
    }
    if link.is_circular:
        d["is_circular"] = True
    return d


def graph_to_dict(graph: DependencyGraph) -> dict:
    """Convert *graph* to the ``{nodes, links, circular_dependencies}`` tree."""
    data: dict = {
        "nodes": [_node_to_dict(n) for n in graph.nodes],
        "links": [_link_to_dict(link) for link in graph.links],
    }
    if graph.circular_dependencies is not None:
        data["circular_dependencies"] = [
            {
                "chain": list(cycle.chain),
                "edges": [{"source": e.source, "target": e.target} for e in cycle.edges],
                "type_only": cycle.type_only,
            }
            for cycle in graph.circular_dependencies
        ]
    return data


def graph_to_json(graph: DependencyGraph, indent: int | None = 2) -> str:
    return json.dumps(graph_to_dict(graph), indent=indent)


def write_graph_json(graph: DependencyGraph, path: Path) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(graph_to_json(graph) + "\n", encoding="utf-8")
    return path


def write_errors_json(errors: Iterable[FileError], path: Path) -> Path:
    data = [{"file": e.file, "error": e.error} for e in errors]
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    return path
