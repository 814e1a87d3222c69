"""Analytics engine - runs all stages over one event snapshot and merges results."""

from collections.abc import Callable, Sequence
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Any

from loguru import logger

import settings
from app.models.event import Event, InviteStats, Option, ProposalStats
from app.models.voting import EventAnalytics, IndividualVote, VoteRecord
from app.services.analytics.aggregation import aggregate_options, find_anomalies, voting_stats
from app.services.analytics.clusters import analyze_clusters
from app.services.analytics.errors import AnalyticsComputationError
from app.services.analytics.network import build_network_graph
from app.services.analytics.timeline import bucketize
from helpers import formulas


@dataclass(frozen=True)
class EventSnapshot:
    """Everything read from the store for one analytics request."""

    event: Event
    options: tuple[Option, ...]
    votes: tuple[VoteRecord, ...]
    proposals: ProposalStats = field(default_factory=ProposalStats)
    invites: InviteStats = field(default_factory=InviteStats)


def individual_votes(votes: Sequence[VoteRecord]) -> list[IndividualVote]:
    """Vote records for auditing, allocations as stored and IPs hashed."""
    return [
        IndividualVote(
            id=v.id,
            voter_id=v.invite_code,
            allocations=dict(v.allocations),
            total_credits=v.total_credits_used,
            submitted_at=v.submitted_at,
            ip_hash=formulas.hash_string(v.ip_address) if v.ip_address else None,
        )
        for v in votes
    ]


def _run_stage(name: str, fn: Callable[[], Any]) -> Any:
    try:
        return fn()
    except Exception as e:
        logger.error("Analytics stage {} failed: {}", name, e)
        raise AnalyticsComputationError(name, e) from e


class AnalyticsEngine:
    """Computes event analytics from a snapshot. Holds no state between calls."""

    def __init__(self, width: int | None = None, height: int | None = None, workers: int | None = None):
        self.width = width or settings.CANVAS_WIDTH
        self.height = height or settings.CANVAS_HEIGHT
        self.workers = workers or settings.ANALYTICS_WORKERS

    def _run_parallel(self, stages: dict[str, Callable[[], Any]]) -> dict[str, Any]:
        """Run independent stages, sequentially when workers == 1."""
        if self.workers <= 1:
            return {name: _run_stage(name, fn) for name, fn in stages.items()}

        with ThreadPoolExecutor(max_workers=self.workers, thread_name_prefix="analytics") as pool:
            futures = {name: pool.submit(_run_stage, name, fn) for name, fn in stages.items()}
            try:
                return {name: future.result() for name, future in futures.items()}
            except AnalyticsComputationError:
                for future in futures.values():
                    future.cancel()
                raise

    def compute(self, snapshot: EventSnapshot) -> EventAnalytics:
        """Aggregate options, then build graph, clusters and timeline concurrently."""
        options, votes = snapshot.options, snapshot.votes
        known = frozenset(o.id for o in options)

        anomalies = _run_stage("integrity", lambda: find_anomalies(options, votes))
        aggregates = _run_stage("aggregation", lambda: aggregate_options(options, votes))

        results = self._run_parallel(
            {
                "stats": lambda: voting_stats(votes),
                "network": lambda: build_network_graph(votes, aggregates, self.width, self.height),
                "clusters": lambda: analyze_clusters(votes, known),
                "timeline": lambda: bucketize(votes),
                "individual_votes": lambda: individual_votes(votes),
            }
        )

        logger.info(
            "Computed analytics for event {}: {} options, {} votes, {} clusters",
            snapshot.event.id,
            len(aggregates),
            len(votes),
            results["clusters"].summary.total_clusters,
        )
        return EventAnalytics(
            event=snapshot.event,
            voting=results["stats"],
            option_performance=aggregates,
            network_graph=results["network"],
            cluster_analysis=results["clusters"],
            participation_over_time=results["timeline"],
            individual_votes=results["individual_votes"],
            anomalies=anomalies,
            proposals=snapshot.proposals,
            invites=snapshot.invites,
        )
