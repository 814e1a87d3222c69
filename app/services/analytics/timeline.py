"""Participation timeline - votes per UTC hour."""

from collections.abc import Sequence
from datetime import datetime

from loguru import logger

from app.models.voting import TimelineBucket, VoteRecord
from helpers import formulas


def bucketize(votes: Sequence[VoteRecord]) -> list[TimelineBucket]:
    """Hourly buckets, ascending. Hours without votes get no bucket."""
    buckets: dict[datetime, TimelineBucket] = {}
    skipped = 0

    for vote in votes:
        if vote.submitted_at is None:
            skipped += 1
            continue
        start = formulas.truncate_to_hour(vote.submitted_at)
        bucket = buckets.setdefault(start, TimelineBucket(bucket_start=start))
        bucket.vote_count += 1
        bucket.total_credits += vote.total_credits_used

    if skipped:
        logger.warning("{} votes without submission time left out of timeline", skipped)

    return [buckets[start] for start in sorted(buckets)]
