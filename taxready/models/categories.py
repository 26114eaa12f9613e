"""Tax category catalogue models.

One TaxCategoryDefinition per ATO income category or deduction label
(D1-D15). Definitions are reference data: frozen and never mutated at runtime.
"""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

from taxready.models.enums import CategoryKind, CategoryPriority, TaxTreatment


class TaxCategoryDefinition(BaseModel):
    """A single catalogue entry for an income or deduction category."""

    model_config = ConfigDict(frozen=True)

    code: str
    kind: CategoryKind
    name: str
    required: bool = False
    tax_treatment: TaxTreatment = TaxTreatment.TAXABLE
    prefill_available: bool = False
    estimated_reporting_percentage: int = 0
    priority: CategoryPriority = CategoryPriority.MEDIUM
    document_types: tuple[str, ...] = ()
    expected_source: str = ""
    action_link: str = ""
    ato_reference: str = ""
    typical_max: Decimal | None = None
    # Name of a UserTaxProfile flag that makes this category required.
    required_when: str | None = None

    @property
    def item_id(self) -> str:
        return f"{self.kind.value}-{self.code}"


class TaxCategoryCatalogue(BaseModel):
    """The full set of income and deduction categories, in display order."""

    model_config = ConfigDict(frozen=True)

    income: tuple[TaxCategoryDefinition, ...] = Field(default_factory=tuple)
    deductions: tuple[TaxCategoryDefinition, ...] = Field(default_factory=tuple)

    def get(self, kind: CategoryKind, code: str) -> TaxCategoryDefinition | None:
        pool = self.income if kind == CategoryKind.INCOME else self.deductions
        for definition in pool:
            if definition.code == code:
                return definition
        return None

    def by_item_id(self, item_id: str) -> TaxCategoryDefinition | None:
        for definition in (*self.income, *self.deductions):
            if definition.item_id == item_id:
                return definition
        return None
