"""Aggregation - per-option credit totals and quadratic scores."""

from collections.abc import Sequence

from loguru import logger

from app.models.event import Option
from app.models.voting import AnomalyKind, IntegrityAnomaly, OptionAggregate, VoteRecord, VotingStats
from helpers import formulas


def find_anomalies(options: Sequence[Option], votes: Sequence[VoteRecord]) -> list[IntegrityAnomaly]:
    """List contributions that option aggregation leaves out.

    Records are reported, never corrected.
    """
    known = {o.id for o in options}
    anomalies: list[IntegrityAnomaly] = []

    for vote in votes:
        for option_id, credits in vote.allocations.items():
            if not formulas.is_credit_amount(credits):
                anomalies.append(
                    IntegrityAnomaly(
                        vote_id=vote.id,
                        invite_code=vote.invite_code,
                        kind=AnomalyKind.INVALID_CREDITS,
                        option_id=option_id,
                        detail=f"{credits!r} is not a whole number of credits",
                    )
                )
            elif credits < 0:
                anomalies.append(
                    IntegrityAnomaly(
                        vote_id=vote.id,
                        invite_code=vote.invite_code,
                        kind=AnomalyKind.NEGATIVE_CREDITS,
                        option_id=option_id,
                        detail=f"{credits} credits",
                    )
                )
            elif credits > 0 and option_id not in known:
                anomalies.append(
                    IntegrityAnomaly(
                        vote_id=vote.id,
                        invite_code=vote.invite_code,
                        kind=AnomalyKind.UNKNOWN_OPTION,
                        option_id=option_id,
                        detail=f"{credits} credits on unknown option",
                    )
                )

        allocated = formulas.total_credits(vote.allocations)
        if allocated != vote.total_credits_used:
            anomalies.append(
                IntegrityAnomaly(
                    vote_id=vote.id,
                    invite_code=vote.invite_code,
                    kind=AnomalyKind.TOTAL_MISMATCH,
                    detail=f"total_credits_used={vote.total_credits_used}, allocations sum={allocated}",
                )
            )

    if anomalies:
        logger.warning("Found {} integrity anomalies in {} votes", len(anomalies), len(votes))
    return anomalies


def aggregate_options(options: Sequence[Option], votes: Sequence[VoteRecord]) -> list[OptionAggregate]:
    """One aggregate per option, in option order, zero-vote options included."""
    totals = {o.id: OptionAggregate(option_id=o.id, title=o.title) for o in options}

    for vote in votes:
        for option_id, credits in vote.funded().items():
            agg = totals.get(option_id)
            if agg is None:
                continue
            agg.total_credits += credits
            agg.vote_count += 1

    for agg in totals.values():
        agg.quadratic_score = formulas.quadratic_score(agg.total_credits)

    logger.debug("Aggregated {} options over {} votes", len(totals), len(votes))
    return list(totals.values())


def voting_stats(votes: Sequence[VoteRecord]) -> VotingStats:
    """Participation summary over ``total_credits_used``."""
    if not votes:
        return VotingStats()

    used = [v.total_credits_used for v in votes]
    return VotingStats(
        total_votes=len(votes),
        unique_voters=len({v.invite_code for v in votes}),
        avg_credits_used=sum(used) / len(used),
        max_credits_used=max(used),
        min_credits_used=min(used),
    )
