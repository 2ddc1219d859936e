"""Use cases for moderation reports."""

from .report_post import REPORT_REASONS, list_reports, report_post

__all__ = ["REPORT_REASONS", "list_reports", "report_post"]
