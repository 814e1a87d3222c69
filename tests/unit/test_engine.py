"""Tests for the analytics engine."""

from datetime import datetime, timezone

import pytest

from app.models.voting import AnomalyKind
from app.services.analytics import engine as engine_module
from app.services.analytics.engine import AnalyticsEngine, EventSnapshot
from app.services.analytics.errors import AnalyticsComputationError
from helpers import formulas


@pytest.fixture
def snapshot(event, options, votes):
    return EventSnapshot(event=event, options=tuple(options), votes=tuple(votes))


class TestEngine:
    def test_example_event(self, snapshot):
        result = AnalyticsEngine(workers=4).compute(snapshot)

        assert result.event.id == "evt-1"
        assert result.voting.total_votes == 3
        assert [a.total_credits for a in result.option_performance] == [110, 90]
        assert len(result.network_graph.edges) == 5
        assert result.cluster_analysis.summary.total_clusters == 2
        assert [b.vote_count for b in result.participation_over_time] == [2, 1]
        assert result.anomalies == []

    def test_sequential_matches_parallel(self, snapshot):
        assert AnalyticsEngine(workers=1).compute(snapshot) == AnalyticsEngine(workers=4).compute(snapshot)

    def test_empty_event(self, event):
        result = AnalyticsEngine().compute(EventSnapshot(event=event, options=(), votes=()))

        assert result.option_performance == []
        assert result.voting.total_votes == 0
        assert result.network_graph.nodes == [] and result.network_graph.edges == []
        assert result.cluster_analysis.clusters == []
        assert result.cluster_analysis.summary.diversity == 0
        assert result.participation_over_time == []
        assert result.individual_votes == []

    def test_options_without_votes(self, event, options):
        result = AnalyticsEngine().compute(EventSnapshot(event=event, options=tuple(options), votes=()))

        assert [(a.option_id, a.total_credits, a.quadratic_score) for a in result.option_performance] == [
            ("A", 0, 0.0),
            ("B", 0, 0.0),
        ]

    def test_individual_votes_hash_ip(self, snapshot):
        listed = AnalyticsEngine().compute(snapshot).individual_votes

        assert listed[0].ip_hash == formulas.hash_string("10.0.0.1")
        assert listed[0].ip_hash != "10.0.0.1"
        assert listed[1].ip_hash is None
        assert listed[0].voter_id == "inv-1"
        assert listed[0].submitted_at == datetime(2024, 3, 1, 10, 5, tzinfo=timezone.utc)

    def test_anomalous_vote_listed_unmodified(self, event, options, make_vote):
        vote = make_vote("inv-1", {"A": 4, "ghost": 6}, total=99)
        result = AnalyticsEngine().compute(EventSnapshot(event=event, options=tuple(options), votes=(vote,)))

        assert {a.kind for a in result.anomalies} == {AnomalyKind.UNKNOWN_OPTION, AnomalyKind.TOTAL_MISMATCH}
        assert result.individual_votes[0].allocations == {"A": 4, "ghost": 6}
        assert result.individual_votes[0].total_credits == 99
        assert sum(a.total_credits for a in result.option_performance) == 4
        assert result.cluster_analysis.clusters[0].pattern == "A"

    @pytest.mark.parametrize("workers", [1, 4])
    def test_stage_failure(self, snapshot, monkeypatch, workers):
        def broken(votes):
            raise ZeroDivisionError("boom")

        monkeypatch.setattr(engine_module, "bucketize", broken)

        with pytest.raises(AnalyticsComputationError) as exc:
            AnalyticsEngine(workers=workers).compute(snapshot)
        assert exc.value.stage == "timeline"
        assert isinstance(exc.value.__cause__, ZeroDivisionError)
