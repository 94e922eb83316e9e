"""Render a DependencyGraph to a standalone HTML visualization."""

from __future__ import annotations

from pathlib import Path
from string import Template

from import_map.analysis.cycles import circular_dependency_stats
from import_map.exporter.json_exporter import graph_to_json
from import_map.models import DependencyGraph

_TEMPLATE_PATH = Path(__file__).with_name("template.html")


def generate_html(graph: DependencyGraph) -> str:
    template = Template(_TEMPLATE_PATH.read_text(encoding="utf-8"))
    stats = circular_dependency_stats(graph.circular_dependencies or ())
    # Keep the embedded JSON from closing its <script> element early.
    data_json = graph_to_json(graph, indent=None).replace("</", "<\\/")
    return template.safe_substitute(
        TOTAL_NODES=len(graph.nodes),
        TOTAL_LINKS=len(graph.links),
        RUNTIME_CIRCULAR=stats.runtime,
        TYPE_CIRCULAR=stats.type_only,
        GRAPH_DATA=data_json,
    )


def write_html(graph: DependencyGraph, output_path: Path) -> Path:
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(generate_html(graph), encoding="utf-8")
    return output_path
