"""Tests for the network graph builder."""

import math

import pytest

from app.models.voting import NodeType
from app.services.analytics.aggregation import aggregate_options
from app.services.analytics.network import build_network_graph


@pytest.fixture
def aggregates(options, votes):
    return aggregate_options(options, votes)


class TestNetworkGraph:
    def test_node_counts(self, votes, aggregates):
        graph = build_network_graph(votes, aggregates, 700, 500)

        assert len([n for n in graph.nodes if n.type is NodeType.OPTION]) == 2
        assert len([n for n in graph.nodes if n.type is NodeType.VOTER]) == 3

    def test_edge_count_matches_positive_allocations(self, votes, aggregates):
        graph = build_network_graph(votes, aggregates, 700, 500)
        positive = sum(1 for v in votes for c in v.allocations.values() if c > 0)
        assert len(graph.edges) == positive == 5

    def test_edges_reference_nodes(self, votes, aggregates):
        graph = build_network_graph(votes, aggregates, 700, 500)
        ids = {n.id for n in graph.nodes}
        assert all(e.source in ids and e.target in ids for e in graph.edges)

    def test_edge_fields(self, votes, aggregates):
        graph = build_network_graph(votes, aggregates, 700, 500)
        edge = graph.edges[0]

        assert edge.id == "inv-1_A"
        assert edge.source == "voter_inv-1"
        assert edge.target == "option_A"
        assert edge.weight == 80
        assert edge.submitted_at == votes[0].submitted_at

    def test_zero_and_unknown_allocations_produce_no_edge(self, options, make_vote):
        votes = [make_vote("inv-1", {"A": 0, "B": 3, "ghost": 9})]
        graph = build_network_graph(votes, aggregate_options(options, votes), 700, 500)

        assert [e.id for e in graph.edges] == ["inv-1_B"]
        assert all(e.weight > 0 for e in graph.edges)

    def test_option_layout(self, votes, aggregates):
        graph = build_network_graph(votes, aggregates, 700, 500)
        first, second = graph.nodes[0], graph.nodes[1]
        radius = 500 / 6

        assert first.id == "option_A"
        assert first.label == "Park"
        assert first.x == pytest.approx(350 + radius)
        assert first.y == pytest.approx(250)
        assert second.x == pytest.approx(350 - radius)
        assert second.y == pytest.approx(250)
        assert first.total_credits == 110
        assert first.vote_count == 2

    def test_voter_layout(self, votes, aggregates):
        graph = build_network_graph(votes, aggregates, 700, 500)
        voters = [n for n in graph.nodes if n.type is NodeType.VOTER]
        radius = 500 / 3

        for i, node in enumerate(voters):
            angle = 2 * math.pi * i / 3
            assert node.x == pytest.approx(350 + math.cos(angle) * radius)
            assert node.y == pytest.approx(250 + math.sin(angle) * radius)
        assert voters[0].label == "Voter 1"
        assert voters[0].credits == 100
        assert voters[0].submitted_at == votes[0].submitted_at

    def test_canvas_size(self, votes, aggregates):
        graph = build_network_graph(votes, aggregates, 300, 900)
        assert graph.nodes[0].x == pytest.approx(150 + 300 / 6)
        assert graph.nodes[0].y == pytest.approx(450)

    def test_deterministic(self, votes, aggregates):
        assert build_network_graph(votes, aggregates) == build_network_graph(votes, aggregates)

    def test_no_voters(self, aggregates):
        graph = build_network_graph([], aggregates)
        assert graph.nodes == [] and graph.edges == []

    def test_no_options(self, votes):
        graph = build_network_graph(votes, [])
        assert graph.nodes == [] and graph.edges == []
