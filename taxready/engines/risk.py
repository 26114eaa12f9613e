"""ATO review risk assessment.

A table of independent rules, each looking at the assembled report inputs and
either firing (adding a factor and moving the score) or staying silent. The
score starts at a base value, collects each fired rule's delta and is clamped
to [0, 100]. All thresholds come from RiskThresholds so callers can tune them;
rules can be appended to or replaced in the table without touching the scorer.

These are product heuristics for prompting the user to double-check, not ATO
audit criteria.
"""

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from decimal import Decimal

from taxready.engines.catalogue import DEFAULT_CATALOGUE
from taxready.models.categories import TaxCategoryCatalogue
from taxready.models.checklist import ChecklistItem, MissingDocument
from taxready.models.enums import CategoryKind, ChecklistStatus, FactorImpact, RiskLevel
from taxready.models.inputs import UserTaxProfile
from taxready.models.policy import RiskThresholds
from taxready.models.reports import RiskAssessment, RiskFactor, TaxEstimate

logger = logging.getLogger(__name__)

REVIEW_LIKELIHOOD = {
    RiskLevel.HIGH: "Elevated - Review documentation carefully",
    RiskLevel.MEDIUM: "Standard - Normal review probability",
    RiskLevel.LOW: "Low - Unlikely to be reviewed",
}


@dataclass
class RiskContext:
    """Everything a risk rule may look at."""

    profile: UserTaxProfile
    income_checks: list[ChecklistItem]
    deduction_checks: list[ChecklistItem]
    missing_documents: list[MissingDocument]
    estimate: TaxEstimate
    thresholds: RiskThresholds = field(default_factory=RiskThresholds)
    catalogue: TaxCategoryCatalogue = DEFAULT_CATALOGUE

    @property
    def missing_required_income(self) -> list[ChecklistItem]:
        return [
            i for i in self.income_checks
            if i.required and i.status == ChecklistStatus.MISSING
        ]

    @property
    def deduction_ratio(self) -> Decimal:
        """Claimed deductions as a share of gross income (0 with no income)."""
        if self.estimate.gross_income <= 0:
            return Decimal("0")
        return self.estimate.total_deductions / self.estimate.gross_income

    def deduction(self, code: str) -> ChecklistItem | None:
        for item in self.deduction_checks:
            if item.code == code:
                return item
        return None


@dataclass(frozen=True)
class RiskRule:
    """One heuristic. check returns the factor description when the rule fires."""

    factor: str
    impact: FactorImpact
    delta: int
    check: Callable[[RiskContext], str | None]


# ---------------------------------------------------------------------------
# Default rule checks
# ---------------------------------------------------------------------------

def _high_income(ctx: RiskContext) -> str | None:
    limit = ctx.thresholds.high_income
    if ctx.estimate.taxable_income > limit:
        return f"Income over ${limit:,.0f} has higher scrutiny"
    return None


def _missing_income(ctx: RiskContext) -> str | None:
    missing = ctx.missing_required_income
    if missing:
        return f"{len(missing)} required income sources not reported"
    return None


def _high_deduction_ratio(ctx: RiskContext) -> str | None:
    ratio = ctx.deduction_ratio
    if ratio > ctx.thresholds.high_deduction_ratio:
        return f"Deductions are {ratio * 100:.1f}% of income"
    return None


def _large_claims(ctx: RiskContext) -> str | None:
    flagged = []
    for item in ctx.deduction_checks:
        if item.status == ChecklistStatus.NOT_APPLICABLE:
            continue
        definition = ctx.catalogue.get(CategoryKind.DEDUCTION, item.code)
        if definition is None or definition.typical_max is None:
            continue
        if item.claimed_amount > definition.typical_max * ctx.thresholds.large_claim_multiplier:
            flagged.append(item.code)
    if flagged:
        return f"Claims above the typical range: {', '.join(flagged)}"
    return None


def _limited_home_office_records(ctx: RiskContext) -> str | None:
    item = ctx.deduction("D5")
    if (
        item is not None
        and item.claimed_amount > ctx.thresholds.home_office_claim
        and item.documents_attached < ctx.thresholds.home_office_min_documents
    ):
        return "High WFH claim with limited receipts"
    return None


def _many_missing_documents(ctx: RiskContext) -> str | None:
    count = len(ctx.missing_documents)
    if count > ctx.thresholds.missing_documents_count:
        return f"{count} documents not provided"
    return None


def _crypto(ctx: RiskContext) -> str | None:
    if ctx.profile.holds_crypto:
        return "Cryptocurrency requires accurate record keeping"
    return None


def _rental_property(ctx: RiskContext) -> str | None:
    if ctx.profile.has_rental_property:
        return "Rental properties are commonly reviewed"
    return None


def _previous_lodgment(ctx: RiskContext) -> str | None:
    if ctx.profile.previous_year_lodged:
        return "Previous tax return lodged on time"
    return None


def _conservative_claims(ctx: RiskContext) -> str | None:
    if ctx.deduction_ratio < ctx.thresholds.conservative_deduction_ratio:
        return "Deduction ratio is conservative"
    return None


DEFAULT_RULES: tuple[RiskRule, ...] = (
    RiskRule("High Income", FactorImpact.NEGATIVE, 10, _high_income),
    RiskRule("Missing Income", FactorImpact.NEGATIVE, 15, _missing_income),
    RiskRule("High Deduction Ratio", FactorImpact.NEGATIVE, 10, _high_deduction_ratio),
    RiskRule("Unusually Large Claim", FactorImpact.NEGATIVE, 10, _large_claims),
    RiskRule("Limited WFH Documentation", FactorImpact.NEGATIVE, 10, _limited_home_office_records),
    RiskRule("Missing Documents", FactorImpact.NEGATIVE, 10, _many_missing_documents),
    RiskRule("Crypto Investments", FactorImpact.NEUTRAL, 5, _crypto),
    RiskRule("Rental Property", FactorImpact.NEUTRAL, 5, _rental_property),
    RiskRule("Previous Lodgment", FactorImpact.POSITIVE, -10, _previous_lodgment),
    RiskRule("Conservative Claims", FactorImpact.POSITIVE, -5, _conservative_claims),
)


class RiskAssessor:
    """Runs the rule table and grades the result."""

    def __init__(self, rules: Sequence[RiskRule] = DEFAULT_RULES) -> None:
        self.rules = tuple(rules)

    def assess(self, ctx: RiskContext) -> RiskAssessment:
        thresholds = ctx.thresholds
        score = thresholds.base_score
        factors = []
        for rule in self.rules:
            description = rule.check(ctx)
            if description is None:
                continue
            logger.debug("Risk rule %r fired (%+d): %s", rule.factor, rule.delta, description)
            factors.append(
                RiskFactor(
                    factor=rule.factor,
                    impact=rule.impact,
                    description=description,
                    score_delta=rule.delta,
                )
            )
            score += rule.delta

        score = max(0, min(100, score))
        if score >= thresholds.high_level_score:
            level = RiskLevel.HIGH
        elif score >= thresholds.medium_level_score:
            level = RiskLevel.MEDIUM
        else:
            level = RiskLevel.LOW

        return RiskAssessment(
            level=level,
            score=score,
            factors=factors,
            review_likelihood=REVIEW_LIKELIHOOD[level],
            recommendations=self._recommendations(ctx),
        )

    @staticmethod
    def _recommendations(ctx: RiskContext) -> list[str]:
        recommendations = []
        if ctx.missing_documents:
            recommendations.append("Upload all missing documents before lodging")
        if ctx.deduction_ratio > ctx.thresholds.high_deduction_ratio:
            recommendations.append("Ensure high deduction claims are well documented")
        if ctx.missing_required_income:
            recommendations.append("Verify all income sources are reported")
        if not recommendations:
            recommendations.append("No risk factors require action")
        return recommendations
