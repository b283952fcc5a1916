from __future__ import annotations

import random

import pytest

from bpm_reducer.core.errors import DanglingEdgeReference, InvalidGraph, MissingAnchor
from bpm_reducer.core.models import Edge, ProcessGraph
from bpm_reducer.core.reducer import DiagramReducer, reduce_diagram

KEPT = {"Start", "End", "HumanTask"}


def test_linear_chain_drops_service_tasks(make_graph) -> None:
    graph = make_graph(
        [("0", "Start"), ("1", "ServiceTask"), ("2", "HumanTask"), ("3", "ServiceTask"), ("4", "HumanTask"), ("5", "End")],
        [("0", "1"), ("1", "2"), ("2", "3"), ("3", "4"), ("4", "5")],
    )

    reduced = reduce_diagram(graph)

    assert reduced.node_ids == ["0", "2", "4", "5"]
    assert reduced.edge_pairs == [("0", "2"), ("2", "4"), ("4", "5")]


def test_no_human_tasks_connects_start_to_end(make_graph) -> None:
    graph = make_graph(
        [("0", "Start"), ("1", "ServiceTask"), ("2", "ServiceTask"), ("3", "End")],
        [("0", "1"), ("1", "2"), ("2", "3")],
    )

    reduced = reduce_diagram(graph)

    assert reduced.node_ids == ["0", "3"]
    assert reduced.edge_pairs == [("0", "3")]


def test_branching_keeps_fan_out_and_fan_in(make_graph) -> None:
    graph = make_graph(
        [
            ("0", "Start"),
            ("1", "ServiceTask"),
            ("2", "HumanTask"),
            ("3", "Gateway"),
            ("4", "HumanTask"),
            ("5", "HumanTask"),
            ("6", "Gateway"),
            ("7", "ServiceTask"),
            ("8", "End"),
        ],
        [("0", "1"), ("1", "2"), ("2", "3"), ("3", "4"), ("3", "5"), ("4", "6"), ("5", "6"), ("6", "7"), ("7", "8")],
    )

    reduced = reduce_diagram(graph)

    assert reduced.node_ids == ["0", "2", "4", "5", "8"]
    assert reduced.edge_pairs == [("0", "2"), ("2", "4"), ("2", "5"), ("4", "8"), ("5", "8")]


def test_disconnected_human_task_is_kept_without_edges(make_graph) -> None:
    graph = make_graph(
        [("0", "Start"), ("1", "ServiceTask"), ("2", "ServiceTask"), ("3", "End"), ("9", "HumanTask")],
        [("0", "1"), ("1", "2"), ("2", "3")],
    )

    result = DiagramReducer().analyze(graph)

    assert result.graph.node_ids == ["0", "9", "3"]
    assert result.graph.edge_pairs == [("0", "3")]
    assert all("9" not in pair for pair in result.graph.edge_pairs)
    assert [n.id for n in result.unreachable_tasks] == ["9"]


def test_pass_through_cycle_terminates(make_graph) -> None:
    graph = make_graph(
        [("0", "Start"), ("1", "ServiceTask"), ("2", "HumanTask"), ("3", "ServiceTask"), ("4", "ServiceTask"), ("5", "End")],
        [("0", "1"), ("1", "2"), ("2", "3"), ("3", "1"), ("3", "4"), ("4", "5")],
    )

    reduced = reduce_diagram(graph)

    assert reduced.node_ids == ["0", "2", "5"]
    assert reduced.edge_pairs == [("0", "2"), ("2", "5")]


def test_cycle_made_only_of_pass_through_nodes(make_graph) -> None:
    graph = make_graph(
        [("s", "Start"), ("a", "ServiceTask"), ("b", "Gateway"), ("e", "End")],
        [("s", "a"), ("a", "b"), ("b", "a"), ("a", "a")],
    )

    reduced = reduce_diagram(graph)

    assert reduced.node_ids == ["s", "e"]
    assert reduced.edge_pairs == []


def test_reduced_diagram_is_a_fixed_point(make_graph) -> None:
    graph = make_graph(
        [("s", "Start"), ("h1", "HumanTask"), ("h2", "HumanTask"), ("e", "End")],
        [("s", "h1"), ("s", "h2"), ("h1", "h2"), ("h1", "e"), ("h2", "e")],
    )

    once = reduce_diagram(graph)
    twice = reduce_diagram(once)

    assert once.node_ids == graph.node_ids
    assert once.edge_pairs == graph.edge_pairs
    assert twice == once


def test_duplicate_edges_collapse(make_graph) -> None:
    graph = make_graph(
        [("s", "Start"), ("g", "Gateway"), ("e", "End")],
        [("s", "g"), ("s", "g"), ("g", "e"), ("s", "e")],
    )
    assert reduce_diagram(graph).edge_pairs == [("s", "e")]


def test_node_order_follows_declaration_not_position(make_graph) -> None:
    graph = make_graph(
        [("e", "End"), ("h2", "HumanTask"), ("t", "ServiceTask"), ("h1", "HumanTask"), ("s", "Start")],
        [("s", "h1"), ("h1", "t"), ("t", "h2"), ("h2", "e")],
    )
    reduced = reduce_diagram(graph)

    assert reduced.node_ids == ["s", "h2", "h1", "e"]
    # Edges follow reduced-node order: h2's edge before h1's.
    assert reduced.edge_pairs == [("s", "h1"), ("h2", "e"), ("h1", "h2")]


def test_end_node_contributes_no_outgoing_edges(make_graph) -> None:
    graph = make_graph(
        [("s", "Start"), ("h", "HumanTask"), ("e", "End")],
        [("s", "e"), ("e", "h")],
    )
    assert reduce_diagram(graph).edge_pairs == [("s", "e")]


def test_dangling_edges_are_dead_ends_by_default(make_graph) -> None:
    graph = make_graph(
        [("s", "Start"), ("a", "ServiceTask"), ("e", "End")],
        [("s", "a"), ("a", "ghost"), ("a", "e")],
    )

    result = DiagramReducer().analyze(graph)

    assert result.graph.edge_pairs == [("s", "e")]
    assert result.dangling_edges == (Edge("a", "ghost"),)


def test_strict_mode_rejects_dangling_edges(make_graph) -> None:
    graph = make_graph(
        [("s", "Start"), ("e", "End")],
        [("s", "e"), ("ghost", "e")],
    )

    with pytest.raises(DanglingEdgeReference) as excinfo:
        reduce_diagram(graph, strict_edge_references=True)

    assert excinfo.value.context == {"source": "ghost", "target": "e", "missing_id": "ghost"}


def test_reduce_rejects_absent_edges() -> None:
    with pytest.raises(InvalidGraph):
        reduce_diagram(ProcessGraph(nodes=[], edges=None))


def test_reduce_propagates_index_failures(make_graph) -> None:
    with pytest.raises(MissingAnchor):
        reduce_diagram(make_graph([("h", "HumanTask"), ("e", "End")], []))


def test_reduce_does_not_mutate_input(make_graph) -> None:
    graph = make_graph(
        [("s", "Start"), ("t", "ServiceTask"), ("e", "End")],
        [("s", "t"), ("t", "e")],
    )
    nodes_before, edges_before = list(graph.nodes), list(graph.edges)

    reduce_diagram(graph)

    assert list(graph.nodes) == nodes_before
    assert list(graph.edges) == edges_before


def _random_diagram(make_graph, rng: random.Random, size: int) -> ProcessGraph:
    types = ["Start", "End"] + [
        rng.choice(["HumanTask", "ServiceTask", "Gateway"]) for _ in range(size - 2)
    ]
    rng.shuffle(types)
    nodes = [(str(i), t) for i, t in enumerate(types)]
    edges = [
        (str(rng.randrange(size)), str(rng.randrange(size))) for _ in range(size * 2)
    ]
    return make_graph(nodes, edges)


def _expected_edges(graph: ProcessGraph) -> set[tuple[str, str]]:
    # Fixed-point closure: grow each kept node's reach through pass-through nodes only.
    types = {n.id: n.type for n in graph.nodes}
    succ: dict[str, set[str]] = {}
    for e in graph.edges:
        succ.setdefault(e.source, set()).add(e.target)

    expected: set[tuple[str, str]] = set()
    for origin, node_type in types.items():
        if node_type not in KEPT or node_type == "End":
            continue
        reach = set(succ.get(origin, ()))
        while True:
            grown = set(reach)
            for n in reach:
                if types[n] not in KEPT:
                    grown |= succ.get(n, set())
            if grown == reach:
                break
            reach = grown
        expected |= {(origin, t) for t in reach if types[t] in KEPT and t != origin}
    return expected


@pytest.mark.parametrize("seed", range(25))
def test_random_diagrams_match_frontier_definition(make_graph, seed: int) -> None:
    rng = random.Random(seed)
    graph = _random_diagram(make_graph, rng, size=rng.randint(3, 12))

    reduced = reduce_diagram(graph)
    human_tasks = [n for n in graph.nodes if n.type == "HumanTask"]

    assert len(reduced.nodes) == 2 + len(human_tasks)
    assert set(reduced.edge_pairs) == _expected_edges(graph)
    assert len(reduced.edge_pairs) == len(set(reduced.edge_pairs))
    # Determinism: same input, same output order.
    assert reduce_diagram(graph) == reduced
