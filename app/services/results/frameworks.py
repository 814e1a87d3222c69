"""Decision frameworks - turn option scores into selections or pool shares."""

from collections.abc import Mapping, Sequence
from typing import Any

import numpy as np

from app.models.event import Option
from app.models.results import (
    BinaryResults,
    Distribution,
    OptionTally,
    ProportionalResults,
    RankedOption,
    ThresholdMode,
)
from app.models.voting import VoteRecord
from helpers import formulas


class UnknownFrameworkError(ValueError):
    """Event decision framework type is not supported."""


class UnknownThresholdModeError(ValueError):
    """Binary selection threshold mode is not supported."""


def gini_coefficient(values: Sequence[float]) -> float:
    """Gini coefficient: 0 = perfect equality, 1 = maximal inequality."""
    if len(values) == 0:
        return 0.0

    arr = np.sort(np.asarray(values, dtype=float))
    total = arr.sum()
    if total == 0:
        return 0.0

    n = len(arr)
    ranks = np.arange(1, n + 1)
    return float(2 * np.sum(ranks * arr) / (n * total) - (n + 1) / n)


def tally_votes(options: Sequence[Option], votes: Sequence[VoteRecord]) -> list[OptionTally]:
    """Per-option quadratic votes in option order.

    Every voter's credits are square-rooted on their own and then summed, so
    many small backers outweigh one large one. Only positive integer credits
    to known options count.
    """
    tallies = {o.id: OptionTally(option_id=o.id, title=o.title) for o in options}

    for vote in votes:
        for option_id, credits in vote.funded().items():
            tally = tallies.get(option_id)
            if tally is None:
                continue
            tally.votes += formulas.quadratic_score(credits)
            tally.voters += 1

    return list(tallies.values())


def binary_selection(tallies: Sequence[OptionTally], config: Mapping[str, Any]) -> BinaryResults:
    """Rank options by quadratic votes and select those passing the threshold."""
    try:
        mode = ThresholdMode(config.get("threshold_mode"))
    except ValueError as e:
        raise UnknownThresholdModeError(f"Unknown threshold mode: {config.get('threshold_mode')}") from e

    ranked = sorted(tallies, key=lambda t: t.votes, reverse=True)
    scores = [t.votes for t in ranked]
    margin = None

    if mode is ThresholdMode.TOP_N:
        n = int(config.get("top_n_count", 1))
        selected = set(range(min(n, len(ranked))))
        if 0 < n < len(ranked):
            margin = scores[n - 1] - scores[n]
    elif mode is ThresholdMode.PERCENTAGE:
        threshold = (scores[0] if scores else 0.0) * float(config.get("percentage_threshold", 0)) / 100
        selected = {i for i, s in enumerate(scores) if s >= threshold}
    elif mode is ThresholdMode.ABSOLUTE_VOTES:
        threshold = float(config.get("absolute_vote_threshold", 0))
        selected = {i for i, s in enumerate(scores) if s >= threshold}
    else:
        average = sum(scores) / len(scores) if scores else 0.0
        selected = {i for i, s in enumerate(scores) if s >= average}

    results = [
        RankedOption(
            option_id=t.option_id,
            title=t.title,
            votes=t.votes,
            rank=i + 1,
            selected=i in selected,
        )
        for i, t in enumerate(ranked)
    ]
    chosen = [r for r in results if r.selected]

    return BinaryResults(
        threshold_mode=mode,
        selected_options=chosen,
        not_selected_options=[r for r in results if not r.selected],
        selected_count=len(chosen),
        selection_margin=margin,
    )


def proportional_distribution(tallies: Sequence[OptionTally], config: Mapping[str, Any]) -> ProportionalResults:
    """Split the resource pool proportionally to quadratic votes.

    An optional minimum share applies to every option with positive votes;
    amounts are scaled back down when the minimums over-allocate the pool.
    """
    pool = float(config.get("total_pool_amount", 0))
    resource_name = config.get("resource_name", "")
    resource_symbol = config.get("resource_symbol", "")
    total_votes = sum(t.votes for t in tallies)

    if total_votes == 0:
        return ProportionalResults(
            resource_name=resource_name,
            resource_symbol=resource_symbol,
            total_pool=pool,
            distributions=[
                Distribution(
                    option_id=t.option_id,
                    title=t.title,
                    votes=0.0,
                    allocation_amount=0.0,
                    allocation_percentage=0.0,
                )
                for t in tallies
            ],
        )

    amounts = [t.votes / total_votes * pool for t in tallies]

    min_pct = config.get("minimum_allocation_percentage")
    if config.get("minimum_allocation_enabled") and min_pct:
        floor = float(min_pct) / 100 * pool
        amounts = [
            max(amount, floor) if t.votes > 0 else amount for t, amount in zip(tallies, amounts)
        ]

    allocated = sum(amounts)
    if allocated > pool:
        amounts = [amount * pool / allocated for amount in amounts]

    distributions = sorted(
        (
            Distribution(
                option_id=t.option_id,
                title=t.title,
                votes=t.votes,
                allocation_amount=amount,
                allocation_percentage=amount / pool * 100 if pool else 0.0,
            )
            for t, amount in zip(tallies, amounts)
        ),
        key=lambda d: d.allocation_amount,
        reverse=True,
    )

    return ProportionalResults(
        resource_name=resource_name,
        resource_symbol=resource_symbol,
        total_pool=pool,
        distributions=distributions,
        total_allocated=sum(d.allocation_amount for d in distributions),
        gini_coefficient=gini_coefficient([d.allocation_amount for d in distributions]),
    )
