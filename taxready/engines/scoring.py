"""Completeness scoring.

Four sub-scores, each an integer in [0, 100]:
  - income: share of required income categories that are complete
  - deductions: priority-weighted share of applicable deduction categories
    that are complete
  - documents: 100 less a penalty per missing document, by priority
  - optimization: share of live (non-dismissed) suggestions implemented

The overall score is their weighted average (ScoreWeights) and drives the
red/amber/green status. Empty inputs score 100, never NaN.
"""

from decimal import ROUND_HALF_UP, Decimal

from taxready.models.checklist import ChecklistItem, MissingDocument
from taxready.models.enums import ChecklistStatus, ColorStatus
from taxready.models.policy import ScoringPolicy
from taxready.models.reports import CompletenessScore
from taxready.models.suggestions import OptimizationSuggestion

FULL = Decimal("100")


def _to_int(score: Decimal) -> int:
    return int(score.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def _clamp(score: Decimal) -> Decimal:
    return max(Decimal("0"), min(FULL, score))


def income_score(income_checks: list[ChecklistItem]) -> Decimal:
    required = [i for i in income_checks if i.counts_as_required]
    if not required:
        return FULL
    complete = sum(1 for i in required if i.status == ChecklistStatus.COMPLETE)
    return FULL * complete / len(required)


def deductions_score(
    deduction_checks: list[ChecklistItem], policy: ScoringPolicy
) -> Decimal:
    applicable = [i for i in deduction_checks if i.status != ChecklistStatus.NOT_APPLICABLE]
    total = sum(policy.deduction_weights.get(i.priority, 1) for i in applicable)
    if not total:
        return FULL
    complete = sum(
        policy.deduction_weights.get(i.priority, 1)
        for i in applicable
        if i.status == ChecklistStatus.COMPLETE
    )
    return FULL * complete / total


def documents_score(
    missing_documents: list[MissingDocument], policy: ScoringPolicy
) -> Decimal:
    penalty = sum(policy.document_penalties.get(d.priority, 0) for d in missing_documents)
    return _clamp(FULL - penalty)


def optimization_score(suggestions: list[OptimizationSuggestion]) -> Decimal:
    live = [s for s in suggestions if not s.dismissed]
    if not live:
        return FULL
    implemented = sum(1 for s in live if s.implemented)
    return FULL * implemented / len(live)


def color_for(overall: int, policy: ScoringPolicy) -> ColorStatus:
    if overall >= policy.green_threshold:
        return ColorStatus.GREEN
    if overall >= policy.amber_threshold:
        return ColorStatus.AMBER
    return ColorStatus.RED


def calculate_score(
    income_checks: list[ChecklistItem],
    deduction_checks: list[ChecklistItem],
    missing_documents: list[MissingDocument],
    suggestions: list[OptimizationSuggestion],
    policy: ScoringPolicy | None = None,
) -> CompletenessScore:
    """Score a checklist. Dismissed suggestions are ignored even if passed in."""
    policy = policy or ScoringPolicy()
    weights = policy.weights

    income = income_score(income_checks)
    deductions = deductions_score(deduction_checks, policy)
    documents = documents_score(missing_documents, policy)
    optimization = optimization_score(suggestions)

    overall = _clamp(
        income * weights.income
        + deductions * weights.deductions
        + documents * weights.documents
        + optimization * weights.optimization
    )
    overall_int = _to_int(overall)

    items = [*income_checks, *deduction_checks]
    return CompletenessScore(
        overall=overall_int,
        income_score=_to_int(income),
        deductions_score=_to_int(deductions),
        documents_score=_to_int(documents),
        optimization_score=_to_int(optimization),
        color_status=color_for(overall_int, policy),
        missing_items_count=sum(
            1 for i in items if i.required and i.status == ChecklistStatus.MISSING
        ),
        required_items_count=sum(1 for i in items if i.counts_as_required),
        completed_items_count=sum(1 for i in items if i.status == ChecklistStatus.COMPLETE),
    )
