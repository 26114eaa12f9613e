"""Report output models."""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, Field

from taxready.models.checklist import ChecklistItem, MissingDocument
from taxready.models.enums import ColorStatus, FactorImpact, RiskLevel
from taxready.models.inputs import TaxOffset
from taxready.models.overrides import InconsistentOverride
from taxready.models.suggestions import OptimizationSuggestion


class CompletenessScore(BaseModel):
    overall: int
    income_score: int
    deductions_score: int
    documents_score: int
    optimization_score: int
    color_status: ColorStatus
    missing_items_count: int
    required_items_count: int = 0
    completed_items_count: int = 0


class TaxEstimate(BaseModel):
    tax_year: int
    # Income
    gross_income: Decimal
    total_deductions: Decimal
    taxable_income: Decimal
    # Liability
    tax_payable: Decimal
    medicare_levy: Decimal
    medicare_levy_surcharge: Decimal = Decimal("0")
    # Credits
    tax_withheld: Decimal
    offsets: list[TaxOffset] = Field(default_factory=list)
    total_offsets: Decimal = Decimal("0")
    # Outcome: exactly one of these is non-zero (both zero at break-even)
    estimated_refund: Decimal
    estimated_tax_owing: Decimal

    @property
    def total_liability(self) -> Decimal:
        return self.tax_payable + self.medicare_levy + self.medicare_levy_surcharge


class RiskFactor(BaseModel):
    factor: str
    impact: FactorImpact
    description: str
    score_delta: int = 0


class RiskAssessment(BaseModel):
    level: RiskLevel
    score: int
    factors: list[RiskFactor] = Field(default_factory=list)
    review_likelihood: str
    recommendations: list[str] = Field(default_factory=list)


class ExportData(BaseModel):
    checklist_data: str = ""
    summary_data: str = ""
    # Complete suggestion set, dismissed ones included, for audit.
    suggestions: list[OptimizationSuggestion] = Field(default_factory=list)


class NextAction(BaseModel):
    title: str
    description: str
    link: str | None = None


class CompletenessReport(BaseModel):
    tax_year: int
    generated_at: datetime
    income_checks: list[ChecklistItem]
    deduction_checks: list[ChecklistItem]
    missing_documents: list[MissingDocument]
    optimization_suggestions: list[OptimizationSuggestion]
    score: CompletenessScore
    tax_estimate: TaxEstimate
    risk_assessment: RiskAssessment
    estimated_completion_time: int
    export_data: ExportData = Field(default_factory=ExportData)
    override_issues: list[InconsistentOverride] = Field(default_factory=list)

    @property
    def all_items(self) -> list[ChecklistItem]:
        return [*self.income_checks, *self.deduction_checks]
