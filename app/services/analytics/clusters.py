"""Cluster analysis - voters grouped by allocation signature."""

from collections import defaultdict
from collections.abc import Collection, Sequence

from loguru import logger

from app.models.voting import ClusterAnalysis, ClusterGroup, ClusterSummary, VoteRecord
from helpers import formulas


def analyze_clusters(votes: Sequence[VoteRecord], known_option_ids: Collection[str] | None = None) -> ClusterAnalysis:
    """Partition voters by the set of options they funded.

    Amounts do not matter, only which options got > 0 credits. Voters who
    funded nothing share the empty-pattern cluster. Option ids outside
    ``known_option_ids`` are left out of signatures.
    """
    if not votes:
        return ClusterAnalysis()

    groups: dict[str, list[VoteRecord]] = defaultdict(list)
    for vote in votes:
        groups[formulas.allocation_signature(vote.allocations, known_option_ids)].append(vote)

    clusters = []
    for i, (pattern, members) in enumerate(groups.items()):
        total = sum(v.total_credits_used for v in members)
        clusters.append(
            ClusterGroup(
                id=f"cluster_{i}",
                pattern=pattern,
                voter_count=len(members),
                total_credits=total,
                avg_credits=total / len(members),
                percentage=len(members) / len(votes) * 100,
                voters=[v.invite_code for v in members],
            )
        )

    # sorted() is stable: equal sizes keep first-seen order
    clusters = sorted(clusters, key=lambda c: c.voter_count, reverse=True)

    summary = ClusterSummary(
        total_clusters=len(clusters),
        largest_cluster=clusters[0].voter_count,
        diversity=formulas.safe_ratio(len(clusters), len(votes)),
    )
    logger.debug("Found {} clusters for {} voters", len(clusters), len(votes))
    return ClusterAnalysis(clusters=clusters, summary=summary)
