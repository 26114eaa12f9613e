"""Completeness checklist export generator."""

from decimal import Decimal
from pathlib import Path

from jinja2 import Environment, FileSystemLoader

from taxready.models.reports import CompletenessReport

TEMPLATE_DIR = Path(__file__).parent / "templates"


def money(value: Decimal) -> str:
    return f"${value:,.2f}"


class ChecklistExportGenerator:
    """Generates the plain-text completeness checklist a user can print or share."""

    def __init__(self) -> None:
        self.env = Environment(loader=FileSystemLoader(str(TEMPLATE_DIR)))
        self.env.filters["money"] = money

    def render(self, report: CompletenessReport) -> str:
        """Render checklist export. Not-applicable items are left out."""
        template = self.env.get_template("checklist.txt")
        return template.render(report=report)
