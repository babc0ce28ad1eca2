"""Tests for detecting cycles before a dependency edge is committed."""

from __future__ import annotations

import pytest

from uses.domain.cycles import NO_CYCLE, Cycle, NoCycle, detect
from uses.domain.graph import DependencyGraph

from tests.builders import make_graph


def test_unrelated_dag_has_no_cycle() -> None:
    graph = make_graph(("A", "B"), ("B", "C"), ("X", "Y"))

    assert detect("A", "X", graph) == NO_CYCLE
    assert detect("C", "Y", graph) == NoCycle()


def test_destination_outside_graph_is_a_dead_end() -> None:
    graph = make_graph(("A", "B"))

    assert detect("A", "Unknown", graph) == NO_CYCLE


def test_non_participant_dependency_is_a_dead_end() -> None:
    """``B`` only appears as a destination, so it never leads anywhere."""

    graph = make_graph(("C", "B"))

    assert detect("A", "C", graph) == NO_CYCLE


def test_direct_back_edge_reports_empty_path() -> None:
    graph = make_graph(("B", "A"))

    assert detect("A", "B", graph) == Cycle(path=())


def test_self_dependency_is_a_cycle(graph: DependencyGraph) -> None:
    assert detect("A", "A", graph) == Cycle(path=())


def test_transitive_cycle_reports_chain_from_destination() -> None:
    graph = make_graph(("B", "C"), ("C", "D"), ("D", "A"))

    assert detect("A", "B", graph) == Cycle(path=("B", "C", "D"))


def test_end_to_end_chain_matches_declaration_order() -> None:
    graph = make_graph(("Order", "Payment"), ("Payment", "Ledger"))

    assert detect("Ledger", "Order", graph) == Cycle(path=("Order", "Payment"))


def test_edges_among_disjoint_nodes_are_inert() -> None:
    graph = make_graph(("X", "Y"), ("Y", "Z"), ("Z", "X"), ("A", "P"))

    assert detect("A", "B", graph) == NO_CYCLE
    assert detect("P", "Q", graph) == NO_CYCLE


def test_first_declared_route_wins() -> None:
    graph = make_graph(
        ("B", "C"),
        ("B", "D"),
        ("C", "E"),
        ("E", "A"),
        ("D", "A"),
    )

    assert detect("A", "B", graph) == Cycle(path=("B", "C", "E"))


def test_dead_end_branch_is_backtracked() -> None:
    graph = make_graph(("B", "C"), ("C", "Leaf"), ("B", "D"), ("D", "A"))

    assert detect("A", "B", graph) == Cycle(path=("B", "D"))


def test_terminates_when_a_cycle_was_already_committed() -> None:
    graph = make_graph(("B", "C"), ("C", "B"))

    assert detect("A", "B", graph) == NO_CYCLE


def test_reaches_source_past_an_existing_cycle() -> None:
    graph = make_graph(("B", "C"), ("C", "B"), ("C", "A"))

    assert detect("A", "B", graph) == Cycle(path=("B", "C"))


def test_redeclaring_a_committed_edge_is_checked_again() -> None:
    graph = make_graph(("B", "A"), ("A", "B"))

    assert detect("A", "B", graph) == Cycle(path=())


def test_long_chain_does_not_recurse() -> None:
    edges = [(f"N{i}", f"N{i + 1}") for i in range(5000)]
    graph = make_graph(*edges, ("N5000", "Start"))

    result = detect("Start", "N0", graph)

    assert isinstance(result, Cycle)
    assert len(result.path) == 5001


@pytest.mark.parametrize("result, expected", [(NO_CYCLE, False), (Cycle(), True)])
def test_results_are_truthy_only_for_cycles(result: object, expected: bool) -> None:
    assert bool(result) is expected
