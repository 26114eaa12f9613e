"""Accountant review summary generator."""

from pathlib import Path

from jinja2 import Environment, FileSystemLoader

from taxready.models.reports import CompletenessReport
from taxready.reports.checklist import money

TEMPLATE_DIR = Path(__file__).parent / "templates"


class AccountantSummaryGenerator:
    """Generates the summary handed to a tax agent for review.

    Lists every suggestion, including dismissed ones, so the reviewer can see
    what the client chose not to act on.
    """

    def __init__(self, review_ready_score: int = 80) -> None:
        self.env = Environment(loader=FileSystemLoader(str(TEMPLATE_DIR)))
        self.env.filters["money"] = money
        self.review_ready_score = review_ready_score

    def render(self, report: CompletenessReport) -> str:
        """Render accountant summary."""
        suggestions = report.export_data.suggestions or report.optimization_suggestions
        template = self.env.get_template("accountant_summary.txt")
        return template.render(
            report=report,
            review_ready=report.score.overall >= self.review_ready_score,
            outstanding=[s for s in suggestions if s.is_outstanding],
            implemented=[s for s in suggestions if s.implemented and not s.dismissed],
            dismissed=[s for s in suggestions if s.dismissed],
        )
