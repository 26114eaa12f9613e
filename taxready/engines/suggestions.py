"""Turn optimization opportunities into session-aware suggestions."""

import logging
from collections.abc import Iterable
from typing import Any

from pydantic import BaseModel, Field

from taxready.models.enums import OverrideKind
from taxready.models.overrides import InconsistentOverride, OverrideStore
from taxready.models.suggestions import OptimizationOpportunity, OptimizationSuggestion

logger = logging.getLogger(__name__)


class SuggestionSet(BaseModel):
    """Every suggestion (for audit/export) plus the subset shown to the user."""

    all: list[OptimizationSuggestion] = Field(default_factory=list)
    visible: list[OptimizationSuggestion] = Field(default_factory=list)
    issues: list[InconsistentOverride] = Field(default_factory=list)


def as_opportunity(source: Any) -> OptimizationOpportunity:
    """Accept an OptimizationOpportunity, a dict, or any object exposing the same attributes."""
    if isinstance(source, OptimizationOpportunity):
        return source
    if isinstance(source, dict):
        return OptimizationOpportunity.model_validate(source)
    return OptimizationOpportunity.model_validate(source, from_attributes=True)


class SuggestionFilter:
    """Applies implemented/dismissed overrides to a batch of opportunities."""

    def build(
        self,
        opportunities: Iterable[Any],
        overrides: OverrideStore | None = None,
    ) -> SuggestionSet:
        overrides = overrides or OverrideStore()
        suggestions = []
        for opportunity in map(as_opportunity, opportunities):
            suggestions.append(
                OptimizationSuggestion(
                    id=f"opt-{opportunity.id}",
                    opportunity_id=opportunity.id,
                    title=opportunity.title,
                    description=opportunity.description,
                    priority=opportunity.priority,
                    category=opportunity.category,
                    estimated_tax_savings=opportunity.estimated_tax_savings,
                    action_link=opportunity.action_link,
                    implemented=(
                        opportunity.implemented or opportunity.id in overrides.implemented_ids
                    ),
                    dismissed=opportunity.id in overrides.dismissed_ids,
                )
            )

        return SuggestionSet(
            all=suggestions,
            visible=[s for s in suggestions if not s.dismissed],
            issues=self._stale_overrides(suggestions, overrides),
        )

    @staticmethod
    def _stale_overrides(
        suggestions: list[OptimizationSuggestion], overrides: OverrideStore
    ) -> list[InconsistentOverride]:
        known = {s.opportunity_id for s in suggestions}
        issues = []
        for kind, ids in (
            (OverrideKind.IMPLEMENTED, overrides.implemented_ids),
            (OverrideKind.DISMISSED, overrides.dismissed_ids),
        ):
            for opportunity_id in sorted(ids - known):
                logger.warning(
                    "Ignoring %s override for unknown opportunity %s", kind.value, opportunity_id
                )
                issues.append(
                    InconsistentOverride(
                        kind=kind,
                        target_id=opportunity_id,
                        reason="No optimization opportunity with this id",
                    )
                )
        return issues
