"""Tests for graph assembly and link merging."""

import itertools

from import_map.analysis.graph_builder import DependencyGraphBuilder, merge_type_only
from import_map.models import Dependency, NodeGroup, ResolvedImports


def _build(*files):
    return DependencyGraphBuilder().build(files)


def test_build_empty():
    graph = _build()
    assert graph.nodes == ()
    assert graph.links == ()
    assert graph.circular_dependencies is None


def test_source_without_imports_is_a_node():
    graph = _build(ResolvedImports(source="/p/src/a.ts"))
    assert [n.id for n in graph.nodes] == ["/p/src/a.ts"]
    assert graph.nodes[0].label == "a.ts"
    assert graph.nodes[0].size == 0


def test_nodes_and_links():
    graph = _build(
        ResolvedImports("/p/src/components/A.vue", [
            Dependency("/p/src/stores/b.ts"),
            Dependency("external:vue"),
        ]),
        ResolvedImports("/p/src/stores/b.ts", [Dependency("external:vue")]),
    )
    ids = [n.id for n in graph.nodes]
    assert ids == ["/p/src/components/A.vue", "/p/src/stores/b.ts", "external:vue"]

    vue = graph.get_node("external:vue")
    assert vue.label == "vue"
    assert vue.group == NodeGroup.EXTERNAL
    assert vue.size == 2
    assert graph.get_node("/p/src/components/A.vue").group == NodeGroup.COMPONENTS
    assert len(graph.links) == 3


def test_duplicate_imports_merge_into_one_link():
    graph = _build(ResolvedImports("/p/a.ts", [
        Dependency("/p/b.ts", type_only=True),
        Dependency("/p/b.ts", type_only=False),
        Dependency("/p/b.ts", type_only=True),
    ]))
    assert len(graph.links) == 1
    link = graph.get_link("/p/a.ts", "/p/b.ts")
    assert link.value == 3
    assert link.type_only is False
    assert graph.get_node("/p/b.ts").size == 3


def test_type_only_link_stays_type_only():
    graph = _build(ResolvedImports("/p/a.ts", [
        Dependency("/p/b.ts", type_only=True),
        Dependency("/p/b.ts", type_only=True),
    ]))
    assert graph.get_link("/p/a.ts", "/p/b.ts").type_only is True


def test_runtime_dominance_is_order_independent():
    flags = [True, True, False, True]
    for order in set(itertools.permutations(flags)):
        graph = _build(ResolvedImports("/p/a.ts", [Dependency("/p/b.ts", f) for f in order]))
        assert graph.get_link("/p/a.ts", "/p/b.ts").type_only is False


def test_merge_type_only():
    assert merge_type_only(True, True) is True
    assert merge_type_only(True, False) is False
    assert merge_type_only(False, True) is False
    assert merge_type_only(False, False) is False


def test_duplicate_source_folded_once():
    graph = _build(
        ResolvedImports("/p/a.ts", [Dependency("/p/b.ts")]),
        ResolvedImports("/p/a.ts", [Dependency("/p/b.ts"), Dependency("/p/c.ts")]),
    )
    assert graph.get_link("/p/a.ts", "/p/b.ts").value == 1
    assert graph.get_link("/p/a.ts", "/p/c.ts") is None


def test_adjacency_follows_links():
    graph = _build(ResolvedImports("/p/a.ts", [
        Dependency("/p/b.ts", type_only=True),
        Dependency("external:vue"),
    ]))
    assert graph.adjacency() == {
        "/p/a.ts": [Dependency("/p/b.ts", True), Dependency("external:vue", False)],
    }
