"""Completeness, scoring and tax computation engines."""

from taxready.engines.completeness import CompletenessChecker
from taxready.engines.documents import MissingDocumentDetector
from taxready.engines.estimator import TaxEstimator
from taxready.engines.evaluator import ChecklistEvaluator
from taxready.engines.overrides import apply_status_overrides
from taxready.engines.risk import DEFAULT_RULES, RiskAssessor, RiskContext, RiskRule
from taxready.engines.scoring import calculate_score
from taxready.engines.suggestions import SuggestionFilter, SuggestionSet

__all__ = [
    "DEFAULT_RULES",
    "ChecklistEvaluator",
    "CompletenessChecker",
    "MissingDocumentDetector",
    "RiskAssessor",
    "RiskContext",
    "RiskRule",
    "SuggestionFilter",
    "SuggestionSet",
    "TaxEstimator",
    "apply_status_overrides",
    "calculate_score",
]
