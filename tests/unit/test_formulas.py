"""Tests for formulas module."""

import math
import re
from datetime import datetime, timedelta, timezone

from helpers import formulas


class TestQuadratic:
    def test_zero(self):
        assert formulas.quadratic_score(0) == 0

    def test_perfect_squares(self):
        assert formulas.quadratic_score(1) == 1.0
        assert formulas.quadratic_score(100) == 10.0

    def test_monotonic(self):
        scores = [formulas.quadratic_score(c) for c in range(0, 500)]
        assert all(a <= b for a, b in zip(scores, scores[1:]))

    def test_diminishing_returns(self):
        assert formulas.quadratic_score(4) == 2 * formulas.quadratic_score(1)

    def test_votes_per_option(self):
        assert formulas.quadratic_votes({"A": 9, "B": 0}) == {"A": 3.0, "B": 0.0}

    def test_total_credits(self):
        assert formulas.total_credits({"A": 9, "B": 16}) == 25
        assert formulas.total_credits({}) == 0

    def test_total_skips_non_credit_values(self):
        assert formulas.total_credits({"A": 9, "B": 2.5, "C": "4", "D": True}) == 9

    def test_credit_amounts(self):
        assert formulas.is_credit_amount(0)
        assert formulas.is_credit_amount(-3)
        assert not formulas.is_credit_amount(2.0)
        assert not formulas.is_credit_amount("5")
        assert not formulas.is_credit_amount(True)
        assert not formulas.is_credit_amount(None)


class TestSignature:
    def test_sorted_and_joined(self):
        assert formulas.allocation_signature({"B": 5, "A": 1}) == "A,B"

    def test_amounts_ignored(self):
        assert formulas.allocation_signature({"A": 90, "B": 1}) == formulas.allocation_signature({"A": 1, "B": 90})

    def test_zero_credits_left_out(self):
        assert formulas.allocation_signature({"A": 0, "B": 3}) == "B"

    def test_empty(self):
        assert formulas.allocation_signature({}) == ""
        assert formulas.allocation_signature({"A": 0}) == ""

    def test_unknown_options_left_out(self):
        assert formulas.allocation_signature({"A": 1, "X": 5}, known={"A", "B"}) == "A"

    def test_non_credit_values_left_out(self):
        assert formulas.allocation_signature({"A": 2.5, "B": "3", "C": 1}) == "C"


class TestTruncateToHour:
    def test_utc(self):
        moment = datetime(2024, 3, 1, 10, 59, 59, 999, tzinfo=timezone.utc)
        assert formulas.truncate_to_hour(moment) == datetime(2024, 3, 1, 10, tzinfo=timezone.utc)

    def test_naive_taken_as_utc(self):
        assert formulas.truncate_to_hour(datetime(2024, 3, 1, 10, 30)) == datetime(2024, 3, 1, 10, tzinfo=timezone.utc)

    def test_offset_converted_to_utc(self):
        moment = datetime(2024, 3, 1, 12, 15, tzinfo=timezone(timedelta(hours=2)))
        assert formulas.truncate_to_hour(moment) == datetime(2024, 3, 1, 10, tzinfo=timezone.utc)


class TestHash:
    def test_known_values(self):
        assert formulas.hash_string("") == "0"
        assert formulas.hash_string("a") == "61"
        assert formulas.hash_string("ab") == "c21"

    def test_deterministic(self):
        assert formulas.hash_string("192.168.1.10") == formulas.hash_string("192.168.1.10")

    def test_different_inputs(self):
        assert formulas.hash_string("192.168.1.10") != formulas.hash_string("192.168.1.11")

    def test_non_negative_hex_within_32_bits(self):
        for value in ["10.0.0.1", "2001:db8::ff00:42:8329", "x" * 200, "ünïcødé"]:
            digest = formulas.hash_string(value)
            assert re.fullmatch(r"[0-9a-f]+", digest)
            assert int(digest, 16) <= 2**31


class TestSafeRatio:
    def test_zero_denominator(self):
        assert formulas.safe_ratio(3, 0) == 0.0

    def test_ratio(self):
        assert math.isclose(formulas.safe_ratio(2, 3), 2 / 3)
