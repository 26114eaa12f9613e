"""Plain-text exports for taxready."""

from taxready.reports.accountant_summary import AccountantSummaryGenerator
from taxready.reports.checklist import ChecklistExportGenerator

__all__ = [
    "AccountantSummaryGenerator",
    "ChecklistExportGenerator",
]
