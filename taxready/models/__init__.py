"""Data models for taxready."""

from taxready.models.categories import TaxCategoryCatalogue, TaxCategoryDefinition
from taxready.models.checklist import ChecklistItem, ChecklistResult, MissingDocument
from taxready.models.enums import (
    CategoryKind,
    CategoryPriority,
    ChecklistStatus,
    ColorStatus,
    DocumentPriority,
    EmploymentType,
    FactorImpact,
    InvestmentType,
    OverrideKind,
    RiskLevel,
    SuggestionPriority,
    TaxTreatment,
    WorkArrangement,
)
from taxready.models.franking import (
    AnnualFrankingSummary,
    DividendEntry,
    FrankingCalculation,
    TaxBracket,
    TaxImpactResult,
)
from taxready.models.inputs import (
    CompletenessRequest,
    DeductionEntry,
    IncomeEntry,
    TaxOffset,
    UserTaxProfile,
)
from taxready.models.overrides import InconsistentOverride, OverrideStore
from taxready.models.policy import (
    EnginePolicy,
    ReadinessPolicy,
    RiskThresholds,
    ScoreWeights,
    ScoringPolicy,
)
from taxready.models.reports import (
    CompletenessReport,
    CompletenessScore,
    ExportData,
    NextAction,
    RiskAssessment,
    RiskFactor,
    TaxEstimate,
)
from taxready.models.suggestions import OptimizationOpportunity, OptimizationSuggestion

__all__ = [
    "AnnualFrankingSummary",
    "CategoryKind",
    "CategoryPriority",
    "ChecklistItem",
    "ChecklistResult",
    "ChecklistStatus",
    "ColorStatus",
    "CompletenessReport",
    "CompletenessRequest",
    "CompletenessScore",
    "DeductionEntry",
    "DividendEntry",
    "DocumentPriority",
    "EmploymentType",
    "EnginePolicy",
    "ExportData",
    "FactorImpact",
    "FrankingCalculation",
    "InconsistentOverride",
    "IncomeEntry",
    "InvestmentType",
    "MissingDocument",
    "NextAction",
    "OptimizationOpportunity",
    "OptimizationSuggestion",
    "OverrideKind",
    "OverrideStore",
    "ReadinessPolicy",
    "RiskAssessment",
    "RiskFactor",
    "RiskLevel",
    "RiskThresholds",
    "ScoreWeights",
    "ScoringPolicy",
    "SuggestionPriority",
    "TaxBracket",
    "TaxCategoryCatalogue",
    "TaxCategoryDefinition",
    "TaxEstimate",
    "TaxImpactResult",
    "TaxOffset",
    "TaxTreatment",
    "UserTaxProfile",
    "WorkArrangement",
]
