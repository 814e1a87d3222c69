"""Tests for the CSV report."""

from datetime import datetime, timezone

import pytest

from app.models.event import Event, Option, OptionId
from app.services.analytics.engine import AnalyticsEngine, EventSnapshot
from app.services.export.report import build_report


@pytest.fixture
def analytics(event, options, votes):
    return AnalyticsEngine(workers=1).compute(EventSnapshot(event=event, options=tuple(options), votes=tuple(votes)))


class TestReport:
    def test_metrics_block(self, analytics):
        lines = build_report(analytics).splitlines()

        assert lines[0] == "Metric,Value"
        assert "Event,Community Budget" in lines
        assert "Total Votes,3" in lines
        assert "Average Credits Used,66.67" in lines
        assert "Diversity,0.67" in lines

    def test_option_table(self, analytics):
        blocks = build_report(analytics).split("\n\n")
        rows = blocks[1].splitlines()

        assert len(blocks) == 2
        assert rows[0] == "Option,Credits,Votes,Quadratic Score"
        assert rows[1] == "Park,110,2,10.49"
        assert rows[2] == "Library,90,3,9.49"

    def test_two_decimal_scores(self, event, make_vote):
        options = (Option(id=OptionId("A"), event_id="evt-1", title="Square", position=0),)
        result = AnalyticsEngine(workers=1).compute(
            EventSnapshot(event=event, options=options, votes=(make_vote("v1", {"A": 16}),))
        )
        assert "Square,16,1,4.00" in build_report(result).splitlines()

    def test_titles_quoted(self, make_vote):
        event = Event(id="evt-2", title="Parks, roads", created_at=datetime(2024, 1, 1, tzinfo=timezone.utc))
        options = (Option(id=OptionId("A"), event_id="evt-2", title='Bike "lanes", north', position=0),)
        result = AnalyticsEngine(workers=1).compute(EventSnapshot(event=event, options=options, votes=()))
        lines = build_report(result).splitlines()

        assert 'Event,"Parks, roads"' in lines
        assert '"Bike ""lanes"", north",0,0,0.00' in lines

    def test_empty_event(self, event):
        result = AnalyticsEngine(workers=1).compute(EventSnapshot(event=event, options=(), votes=()))
        blocks = build_report(result).split("\n\n")

        assert blocks[1].strip() == "Option,Credits,Votes,Quadratic Score"
        assert "Diversity,0.00" in blocks[0].splitlines()
