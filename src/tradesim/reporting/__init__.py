"""Report writers."""

from tradesim.reporting.report import (
    breakdown_rows,
    summary_to_dict,
    write_breakdown_csv,
    write_summary_report,
)

__all__ = [
    "breakdown_rows",
    "summary_to_dict",
    "write_breakdown_csv",
    "write_summary_report",
]
