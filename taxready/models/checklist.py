"""Checklist and missing-document models.

Both are derived fresh on every report generation and never persisted by the
engine. A manual override may replace an item's computed status.
"""

from decimal import Decimal

from pydantic import BaseModel, Field

from taxready.models.enums import (
    CategoryKind,
    CategoryPriority,
    ChecklistStatus,
    DocumentPriority,
)


class ChecklistItem(BaseModel):
    """Substantiation status of one income or deduction category."""

    id: str
    code: str
    kind: CategoryKind
    category: str
    title: str
    description: str
    required: bool
    priority: CategoryPriority = CategoryPriority.MEDIUM
    status: ChecklistStatus
    action_needed: str | None = None
    action_link: str | None = None
    claimed_amount: Decimal = Decimal("0")
    documents_attached: int = 0
    document_types: list[str] = Field(default_factory=list)
    prefill_available: bool = False
    ato_reference: str = ""
    overridden: bool = False

    @property
    def is_outstanding(self) -> bool:
        return self.status in (ChecklistStatus.MISSING, ChecklistStatus.PARTIAL)

    @property
    def counts_as_required(self) -> bool:
        """Required, and not marked as not applicable to this taxpayer."""
        return self.required and self.status != ChecklistStatus.NOT_APPLICABLE


class ChecklistResult(BaseModel):
    income_checks: list[ChecklistItem] = Field(default_factory=list)
    deduction_checks: list[ChecklistItem] = Field(default_factory=list)

    @property
    def all_items(self) -> list[ChecklistItem]:
        return [*self.income_checks, *self.deduction_checks]


class MissingDocument(BaseModel):
    """A supporting document the return still needs."""

    id: str
    document_type: str
    description: str = ""
    expected_source: str = ""
    detection_reason: str
    priority: DocumentPriority
    pattern_based: bool = False
    category_code: str | None = None
