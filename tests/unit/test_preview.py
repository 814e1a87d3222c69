"""Tests for the allocation preview."""

import math

import pytest

from app.services.analytics.aggregation import aggregate_options
from app.services.voting.preview import InvalidAllocationError, preview_allocation
from helpers import formulas


class TestPreview:
    def test_votes_and_budget(self):
        preview = preview_allocation({"A": 16, "B": 9}, max_credits=100)

        assert preview.votes == {"A": 4.0, "B": 3.0}
        assert preview.used == 25
        assert preview.remaining == 75
        assert preview.valid is True

    def test_over_budget(self):
        preview = preview_allocation({"A": 80, "B": 30}, max_credits=100)
        assert preview.valid is False
        assert preview.remaining == -10

    def test_exact_budget(self):
        assert preview_allocation({"A": 100}, max_credits=100).valid is True

    def test_negative_credits_rejected(self):
        with pytest.raises(InvalidAllocationError, match="A"):
            preview_allocation({"A": -1, "B": 2}, max_credits=100)

    def test_budget_must_be_positive(self):
        with pytest.raises(InvalidAllocationError):
            preview_allocation({"A": 1}, max_credits=0)

    def test_empty(self):
        preview = preview_allocation({}, max_credits=10)
        assert preview.votes == {}
        assert preview.used == 0


class TestSharedFormula:
    def test_same_score_as_aggregation(self, options, make_vote):
        allocations = {"A": 37, "B": 2}
        preview = preview_allocation(allocations, max_credits=100)
        aggregates = aggregate_options(options, [make_vote("inv-1", allocations)])

        assert {a.option_id: a.quadratic_score for a in aggregates} == preview.votes

    def test_both_paths_use_one_function(self, options, make_vote, monkeypatch):
        monkeypatch.setattr(formulas, "quadratic_score", lambda credits: credits * 1000.0)

        preview = preview_allocation({"A": 2}, max_credits=10)
        aggregates = aggregate_options(options, [make_vote("inv-1", {"A": 2})])

        assert preview.votes["A"] == 2000.0
        assert aggregates[0].quadratic_score == 2000.0

    def test_formula_is_square_root(self):
        assert formulas.quadratic_score(37) == math.sqrt(37)
