"""Markdown text report."""

from __future__ import annotations

from collections import Counter

from import_map.models import CircularDependency, DependencyGraph

_MAX_RUNTIME = 20
_MAX_TYPE_ONLY = 10


def _cycle_section(title: str, cycles: list[CircularDependency], limit: int) -> list[str]:
    lines = [f"## {title} ({len(cycles)})", ""]
    for i, cycle in enumerate(cycles[:limit], 1):
        lines.append(f"{i}. {' → '.join(cycle.chain)}")
    if len(cycles) > limit:
        lines.append(f"... and {len(cycles) - limit} more")
    lines.append("")
    return lines


def generate_text_report(graph: DependencyGraph) -> str:
    """Summarize *graph*: totals, cycles by kind, and files per group."""
    cycles = list(graph.circular_dependencies or ())
    runtime = [c for c in cycles if not c.type_only]
    type_only = [c for c in cycles if c.type_only]

    lines = [
        "# Import Map Analysis Report",
        "",
        "## Summary",
        f"- **Total Files**: {len(graph.nodes)}",
        f"- **Total Dependencies**: {len(graph.links)}",
        f"- **Circular Dependencies**: {len(cycles)}",
        f"  - Runtime: {len(runtime)}",
        f"  - Type-only: {len(type_only)}",
        "",
    ]

    if runtime:
        lines += _cycle_section("Runtime Circular Dependencies", runtime, _MAX_RUNTIME)
    if type_only:
        lines += _cycle_section("Type-only Circular Dependencies", type_only, _MAX_TYPE_ONLY)

    groups = Counter(node.group.value for node in graph.nodes)
    lines += ["## File Distribution by Category", ""]
    for group, count in sorted(groups.items(), key=lambda kv: (-kv[1], kv[0])):
        lines.append(f"- **{group}**: {count} files")

    return "\n".join(lines) + "\n"
