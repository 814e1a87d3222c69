"""Helpers package - pure functions shared by preview, aggregation and export."""

from helpers import formulas

__all__ = ["formulas"]
