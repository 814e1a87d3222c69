"""Tests for the participation timeline."""

from datetime import datetime, timedelta, timezone

from app.services.analytics.timeline import bucketize

UTC = timezone.utc


class TestTimeline:
    def test_hourly_buckets(self, votes):
        buckets = bucketize(votes)

        assert [(b.bucket_start, b.vote_count, b.total_credits) for b in buckets] == [
            (datetime(2024, 3, 1, 10, tzinfo=UTC), 2, 180),
            (datetime(2024, 3, 1, 13, tzinfo=UTC), 1, 20),
        ]

    def test_sparse_no_zero_buckets(self, votes):
        starts = [b.bucket_start for b in bucketize(votes)]
        assert datetime(2024, 3, 1, 11, tzinfo=UTC) not in starts
        assert datetime(2024, 3, 1, 12, tzinfo=UTC) not in starts

    def test_strictly_ascending(self, make_vote):
        base = datetime(2024, 3, 1, tzinfo=UTC)
        votes = [make_vote(f"v{i}", {"A": 1}, submitted_at=base + timedelta(minutes=37 * i)) for i in range(20, 0, -1)]
        starts = [b.bucket_start for b in bucketize(votes)]

        assert starts == sorted(starts)
        assert len(starts) == len(set(starts))
        assert sum(b.vote_count for b in bucketize(votes)) == 20

    def test_offsets_normalised_to_utc(self, make_vote):
        cest = timezone(timedelta(hours=2))
        votes = [
            make_vote("v1", {"A": 1}, submitted_at=datetime(2024, 3, 1, 12, 10, tzinfo=cest)),
            make_vote("v2", {"A": 2}, submitted_at=datetime(2024, 3, 1, 10, 50, tzinfo=UTC)),
        ]
        buckets = bucketize(votes)

        assert len(buckets) == 1
        assert buckets[0].vote_count == 2

    def test_votes_without_timestamp_skipped(self, make_vote):
        votes = [make_vote("v1", {"A": 1}), make_vote("v2", {"A": 1}, submitted_at=datetime(2024, 1, 1, tzinfo=UTC))]
        assert [b.vote_count for b in bucketize(votes)] == [1]

    def test_no_votes(self):
        assert bucketize([]) == []
