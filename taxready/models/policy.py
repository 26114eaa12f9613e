"""Tunable scoring and risk policy.

Every weight and threshold the scorer, planner and risk assessor use lives
here with its default. Callers override a value by constructing the model
(or, from the CLI, by passing a JSON policy file).
"""

from decimal import Decimal

from pydantic import BaseModel, Field, model_validator

from taxready.models.enums import CategoryPriority, DocumentPriority


class ScoreWeights(BaseModel):
    """Share of each sub-score in the overall score. Must sum to 1."""

    income: Decimal = Decimal("0.25")
    deductions: Decimal = Decimal("0.25")
    documents: Decimal = Decimal("0.25")
    optimization: Decimal = Decimal("0.25")

    @model_validator(mode="after")
    def _weights_sum_to_one(self) -> "ScoreWeights":
        total = self.income + self.deductions + self.documents + self.optimization
        if abs(total - Decimal("1")) > Decimal("0.0001"):
            raise ValueError(f"score weights must sum to 1, got {total}")
        if min(self.income, self.deductions, self.documents, self.optimization) < 0:
            raise ValueError("score weights must not be negative")
        return self


DEFAULT_DOCUMENT_PENALTIES: dict[DocumentPriority, int] = {
    DocumentPriority.HIGH: 10,
    DocumentPriority.MEDIUM: 5,
    DocumentPriority.LOW: 2,
}

# High-priority deduction categories count double toward the deductions score.
DEFAULT_DEDUCTION_WEIGHTS: dict[CategoryPriority, int] = {
    CategoryPriority.HIGH: 2,
    CategoryPriority.MEDIUM: 1,
    CategoryPriority.LOW: 1,
}


class ReadinessPolicy(BaseModel):
    """Gate for isReadyForLodgment."""

    min_overall_score: int = 80
    max_missing_items: int = 2


class ScoringPolicy(BaseModel):
    weights: ScoreWeights = Field(default_factory=ScoreWeights)
    document_penalties: dict[DocumentPriority, int] = Field(
        default_factory=lambda: dict(DEFAULT_DOCUMENT_PENALTIES)
    )
    deduction_weights: dict[CategoryPriority, int] = Field(
        default_factory=lambda: dict(DEFAULT_DEDUCTION_WEIGHTS)
    )
    green_threshold: int = 80
    amber_threshold: int = 50
    readiness: ReadinessPolicy = Field(default_factory=ReadinessPolicy)
    minutes_per_outstanding_item: int = 5


class RiskThresholds(BaseModel):
    """Heuristic constants for the risk rule table."""

    base_score: int = 50
    high_level_score: int = 70
    medium_level_score: int = 40
    high_income: Decimal = Decimal("180000")
    high_deduction_ratio: Decimal = Decimal("0.15")
    conservative_deduction_ratio: Decimal = Decimal("0.05")
    # A claim above typical_max x multiplier is flagged as unusually large.
    large_claim_multiplier: Decimal = Decimal("1.0")
    home_office_claim: Decimal = Decimal("1000")
    home_office_min_documents: int = 3
    missing_documents_count: int = 3


class EnginePolicy(BaseModel):
    """Bundle loaded from a policy JSON file."""

    scoring: ScoringPolicy = Field(default_factory=ScoringPolicy)
    risk: RiskThresholds = Field(default_factory=RiskThresholds)
    include_low_income_offset: bool = False
