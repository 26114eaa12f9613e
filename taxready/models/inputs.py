"""Caller-supplied input models: taxpayer profile and per-category entries."""

from decimal import Decimal

from pydantic import BaseModel, Field

from taxready.models.enums import EmploymentType, InvestmentType, WorkArrangement
from taxready.models.suggestions import OptimizationOpportunity


class UserTaxProfile(BaseModel):
    """Facts about the taxpayer that drive category relevance and risk."""

    tax_year: int = 2025
    occupation: str = ""
    employment_type: EmploymentType = EmploymentType.FULL_TIME
    work_arrangement: WorkArrangement = WorkArrangement.OFFICE
    has_investments: bool = False
    investment_types: list[InvestmentType] = Field(default_factory=list)
    has_rental_property: bool = False
    has_vehicle: bool = False
    is_studying: bool = False
    age: int | None = None
    # None means "not stated"; the Medicare levy surcharge only applies on an explicit False.
    has_private_health_insurance: bool | None = None
    previous_year_lodged: bool = False
    excluded_categories: set[str] = Field(default_factory=set)

    @property
    def is_self_employed(self) -> bool:
        return self.employment_type in (
            EmploymentType.CONTRACTOR,
            EmploymentType.SELF_EMPLOYED,
        )

    @property
    def works_from_home(self) -> bool:
        return self.work_arrangement in (WorkArrangement.REMOTE, WorkArrangement.HYBRID)

    @property
    def holds_crypto(self) -> bool:
        return InvestmentType.CRYPTO in self.investment_types


class IncomeEntry(BaseModel):
    """Recorded amount and substantiation for one income category."""

    amount: Decimal = Decimal("0")
    document_count: int = 0
    workpaper_complete: bool | None = None
    prior_year_amount: Decimal | None = None


class DeductionEntry(BaseModel):
    """Recorded claim and substantiation for one deduction label (D1-D15)."""

    amount: Decimal = Decimal("0")
    document_count: int = 0
    workpaper_complete: bool | None = None
    prior_year_amount: Decimal | None = None


class TaxOffset(BaseModel):
    name: str
    amount: Decimal


class CompletenessRequest(BaseModel):
    """Everything generate_report needs, in one JSON-loadable document."""

    profile: UserTaxProfile = Field(default_factory=UserTaxProfile)
    income_data: dict[str, IncomeEntry] = Field(default_factory=dict)
    deduction_data: dict[str, DeductionEntry] = Field(default_factory=dict)
    opportunities: list[OptimizationOpportunity] = Field(default_factory=list)
    tax_withheld: Decimal = Decimal("0")
    offsets: list[TaxOffset] = Field(default_factory=list)
