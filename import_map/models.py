"""Data models for the import-map pipeline."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from pathlib import Path


class NodeGroup(enum.Enum):
    EXTERNAL = "external"
    COMPONENTS = "components"
    STORES = "stores"
    SERVICES = "services"
    VIEWS = "views"
    COMPOSABLES = "composables"
    UTILS = "utils"
    TYPES = "types"
    OTHER = "other"


@dataclass(frozen=True)
class ImportDeclaration:
    """An import target as written in the source file."""
    path: str
    type_only: bool = False


@dataclass(frozen=True)
class Dependency:
    """A resolved import: one entry of a node's adjacency list."""
    target: str
    type_only: bool = False


@dataclass
class ResolvedImports:
    """One source file's contribution to the graph builder."""
    source: str
    imports: list[Dependency] = field(default_factory=list)


@dataclass(frozen=True)
class GraphNode:
    id: str
    label: str
    group: NodeGroup
    size: int = 0  # number of incoming imports
    in_cycle: bool = False
    cycle_chains: tuple[tuple[str, ...], ...] = ()


@dataclass(frozen=True)
class GraphLink:
    source: str
    target: str
    value: int = 1  # import statements contributing to this link
    type_only: bool = False
    is_circular: bool = False


@dataclass(frozen=True)
class CycleEdge:
    source: str
    target: str


@dataclass(frozen=True)
class CircularDependency:
    """A closed chain of imports; ``chain[0] == chain[-1]``."""
    chain: tuple[str, ...]
    edges: tuple[CycleEdge, ...] = ()
    type_only: bool = False


@dataclass(frozen=True)
class DependencyGraph:
    nodes: tuple[GraphNode, ...] = ()
    links: tuple[GraphLink, ...] = ()
    circular_dependencies: tuple[CircularDependency, ...] | None = None

    def get_node(self, node_id: str) -> GraphNode | None:
        for node in self.nodes:
            if node.id == node_id:
                return node
        return None

    def get_link(self, source: str, target: str) -> GraphLink | None:
        for link in self.links:
            if link.source == source and link.target == target:
                return link
        return None

    def adjacency(self) -> dict[str, list[Dependency]]:
        """Source -> outgoing dependencies, in link order."""
        deps: dict[str, list[Dependency]] = {}
        for link in self.links:
            deps.setdefault(link.source, []).append(
                Dependency(target=link.target, type_only=link.type_only)
            )
        return deps


@dataclass(frozen=True)
class CycleStats:
    total: int = 0
    runtime: int = 0
    type_only: int = 0


@dataclass(frozen=True)
class AnalysisStats:
    total_files: int = 0
    total_dependencies: int = 0
    circular_dependencies: int = 0
    runtime_circular_dependencies: int = 0
    type_only_circular_dependencies: int = 0


@dataclass(frozen=True)
class FileError:
    file: str
    error: str


@dataclass
class AnalysisResult:
    """Result of a full analysis run. The graph may be partial when errors is non-empty."""
    graph: DependencyGraph
    stats: AnalysisStats
    errors: list[FileError] = field(default_factory=list)


@dataclass
class AnalysisConfig:
    """Configuration for the analysis pipeline."""
    include: list[str] = field(default_factory=lambda: [
        "**/*.ts", "**/*.tsx", "**/*.vue", "**/*.js", "**/*.jsx",
    ])
    exclude: list[str] = field(default_factory=lambda: [
        "node_modules/**", "dist/**", "dist-ssr/**", "build/**",
        ".git/**", ".nx/**", "test-results/**", "playwright-report/**",
        "blob-report/**", "playwright/.cache/**", "temp/**",
        "storybook-static/**", "**/coverage/**",
        "**/*.test.*", "**/*.spec.*", "**/*.d.ts", "**/*.min.js",
        "**/*.log", "**/*.timestamp*",
    ])
    working_dir: Path = field(default_factory=lambda: Path("."))
    output_dir: Path = field(default_factory=lambda: Path("."))
    generate_visualization: bool = True
    max_file_size: int = 1024 * 1024  # bytes
    detect_type_only_imports: bool = True
    extensions: list[str] = field(default_factory=lambda: [
        ".ts", ".tsx", ".vue", ".js", ".jsx",
    ])
