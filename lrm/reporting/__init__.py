"""CSV/HTML reports for reconciliation results."""

from .generator import write_comparison_reports, write_matches_report

__all__ = ["write_comparison_reports", "write_matches_report"]
