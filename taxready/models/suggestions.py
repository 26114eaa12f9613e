"""Optimization opportunity and suggestion models.

Opportunities come from an external recommendation component; any producer
that supplies this shape is accepted. Suggestions wrap an opportunity with the
session-scoped implemented/dismissed flags.
"""

from decimal import Decimal

from pydantic import BaseModel

from taxready.models.enums import SuggestionPriority


class OptimizationOpportunity(BaseModel):
    id: str
    title: str
    priority: SuggestionPriority
    estimated_tax_savings: Decimal = Decimal("0")
    action_link: str | None = None
    description: str = ""
    category: str = ""
    # True when the producing optimizer already knows the action was taken.
    implemented: bool = False


class OptimizationSuggestion(BaseModel):
    id: str
    opportunity_id: str
    title: str
    description: str = ""
    priority: SuggestionPriority
    category: str = ""
    estimated_tax_savings: Decimal = Decimal("0")
    action_link: str | None = None
    implemented: bool = False
    dismissed: bool = False

    @property
    def is_outstanding(self) -> bool:
        """Still actionable: neither implemented nor dismissed."""
        return not self.implemented and not self.dismissed
