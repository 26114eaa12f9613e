"""Shared test fixtures for taxready."""

from decimal import Decimal

import pytest

from taxready.engines.completeness import CompletenessChecker
from taxready.models.checklist import ChecklistItem
from taxready.models.enums import (
    CategoryKind,
    CategoryPriority,
    ChecklistStatus,
    SuggestionPriority,
)
from taxready.models.inputs import IncomeEntry, UserTaxProfile
from taxready.models.suggestions import OptimizationOpportunity


@pytest.fixture
def checker() -> CompletenessChecker:
    return CompletenessChecker()


@pytest.fixture
def profile() -> UserTaxProfile:
    return UserTaxProfile(tax_year=2025, occupation="Software Engineer")


@pytest.fixture
def salary_only() -> dict[str, IncomeEntry]:
    return {"SALARY": IncomeEntry(amount=Decimal("80000"), document_count=1)}


@pytest.fixture
def critical_opportunity() -> OptimizationOpportunity:
    return OptimizationOpportunity(
        id="super-contribution",
        title="Make a concessional super contribution",
        priority=SuggestionPriority.CRITICAL,
        estimated_tax_savings=Decimal("1200"),
        action_link="/deductions/d10",
    )


@pytest.fixture
def make_item():
    """Factory for ChecklistItem with sensible defaults."""

    def _make(
        code: str = "SALARY",
        status: ChecklistStatus = ChecklistStatus.COMPLETE,
        kind: CategoryKind = CategoryKind.INCOME,
        required: bool = False,
        priority: CategoryPriority = CategoryPriority.MEDIUM,
        amount: str = "0",
        documents: int = 0,
    ) -> ChecklistItem:
        return ChecklistItem(
            id=f"{kind.value}-{code}",
            code=code,
            kind=kind,
            category="Income" if kind == CategoryKind.INCOME else "Deductions",
            title=code,
            description=f"Check {code}",
            required=required,
            priority=priority,
            status=status,
            claimed_amount=Decimal(amount),
            documents_attached=documents,
        )

    return _make
