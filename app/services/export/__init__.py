"""Export services - tabular reports."""

from app.services.export.report import build_report

__all__ = ["build_report"]
