"""Completeness report orchestration.

generate_report runs the whole pipeline on a snapshot of the inputs:

    evaluate categories -> apply status overrides -> detect missing documents
    -> build suggestions -> score -> estimate tax -> assess risk -> exports

Nothing here catches: an invalid input anywhere aborts the report. The
checker holds configuration only, so one instance can serve any number of
calls; scheduling (debounce, on-demand refresh) is the caller's business.
"""

import logging
from collections.abc import Iterable
from datetime import datetime
from decimal import Decimal
from typing import Any

from taxready.engines.catalogue import DEFAULT_CATALOGUE
from taxready.engines.documents import MissingDocumentDetector
from taxready.engines.estimator import TaxEstimator
from taxready.engines.evaluator import ChecklistEvaluator
from taxready.engines.overrides import apply_status_overrides
from taxready.engines.risk import DEFAULT_RULES, RiskAssessor, RiskContext, RiskRule
from taxready.engines.scoring import calculate_score
from taxready.engines.suggestions import SuggestionFilter
from taxready.models.categories import TaxCategoryCatalogue
from taxready.models.inputs import (
    CompletenessRequest,
    DeductionEntry,
    IncomeEntry,
    TaxOffset,
    UserTaxProfile,
)
from taxready.models.overrides import OverrideStore
from taxready.models.policy import EnginePolicy
from taxready.models.reports import CompletenessReport, CompletenessScore, ExportData
from taxready.reports.accountant_summary import AccountantSummaryGenerator
from taxready.reports.checklist import ChecklistExportGenerator

logger = logging.getLogger(__name__)


class CompletenessChecker:
    """Builds lodgment-readiness reports."""

    def __init__(
        self,
        catalogue: TaxCategoryCatalogue = DEFAULT_CATALOGUE,
        policy: EnginePolicy | None = None,
        risk_rules: Iterable[RiskRule] = DEFAULT_RULES,
    ) -> None:
        self.catalogue = catalogue
        self.policy = policy or EnginePolicy()
        self.evaluator = ChecklistEvaluator(catalogue)
        self.detector = MissingDocumentDetector(catalogue)
        self.suggestion_filter = SuggestionFilter()
        self.estimator = TaxEstimator(self.policy.include_low_income_offset)
        self.risk_assessor = RiskAssessor(tuple(risk_rules))
        self.checklist_export = ChecklistExportGenerator()
        self.summary_export = AccountantSummaryGenerator(
            self.policy.scoring.readiness.min_overall_score
        )

    def generate_report(
        self,
        profile: UserTaxProfile,
        income_data: dict[str, IncomeEntry],
        deduction_data: dict[str, DeductionEntry],
        opportunities: Iterable[Any] = (),
        tax_withheld: Decimal = Decimal("0"),
        offsets: list[TaxOffset] | None = None,
        overrides: OverrideStore | None = None,
        generated_at: datetime | None = None,
    ) -> CompletenessReport:
        """Produce a full report. overrides are re-applied from scratch on every call."""
        # Work on a snapshot so later mutation by the caller cannot leak in.
        profile = profile.model_copy(deep=True)
        income_data = {code: e.model_copy() for code, e in income_data.items()}
        deduction_data = {code: e.model_copy() for code, e in deduction_data.items()}
        overrides = overrides.model_copy(deep=True) if overrides else OverrideStore()

        # --- Checklist ---
        checklist = self.evaluator.evaluate(profile, income_data, deduction_data)
        checklist, override_issues = apply_status_overrides(checklist, overrides)

        # --- Documents and suggestions ---
        missing_documents = self.detector.detect(
            profile, checklist.all_items, income_data, deduction_data
        )
        suggestions = self.suggestion_filter.build(opportunities, overrides)
        override_issues.extend(suggestions.issues)

        # --- Score, estimate, risk ---
        score = calculate_score(
            checklist.income_checks,
            checklist.deduction_checks,
            missing_documents,
            suggestions.visible,
            self.policy.scoring,
        )
        estimate = self.estimator.estimate(
            profile,
            checklist.income_checks,
            checklist.deduction_checks,
            tax_withheld,
            offsets,
        )
        risk = self.risk_assessor.assess(
            RiskContext(
                profile=profile,
                income_checks=checklist.income_checks,
                deduction_checks=checklist.deduction_checks,
                missing_documents=missing_documents,
                estimate=estimate,
                thresholds=self.policy.risk,
                catalogue=self.catalogue,
            )
        )

        outstanding = sum(1 for i in checklist.all_items if i.is_outstanding)
        completion_minutes = (
            (outstanding + len(missing_documents))
            * self.policy.scoring.minutes_per_outstanding_item
        )

        report = CompletenessReport(
            tax_year=profile.tax_year,
            generated_at=generated_at or datetime.now(),
            income_checks=checklist.income_checks,
            deduction_checks=checklist.deduction_checks,
            missing_documents=missing_documents,
            optimization_suggestions=suggestions.visible,
            score=score,
            tax_estimate=estimate,
            risk_assessment=risk,
            estimated_completion_time=completion_minutes,
            export_data=ExportData(suggestions=suggestions.all),
            override_issues=override_issues,
        )
        report = report.model_copy(
            update={
                "export_data": ExportData(
                    checklist_data=self.checklist_export.render(report),
                    summary_data=self.summary_export.render(report),
                    suggestions=suggestions.all,
                )
            }
        )

        logger.info(
            "Completeness report FY%d: score %d (%s), %d missing items, %d missing documents, risk %s",
            report.tax_year,
            score.overall,
            score.color_status.value,
            score.missing_items_count,
            len(missing_documents),
            risk.level.value,
        )
        return report

    def generate_report_from_request(
        self,
        request: CompletenessRequest,
        overrides: OverrideStore | None = None,
        generated_at: datetime | None = None,
    ) -> CompletenessReport:
        return self.generate_report(
            request.profile,
            request.income_data,
            request.deduction_data,
            request.opportunities,
            request.tax_withheld,
            request.offsets,
            overrides=overrides,
            generated_at=generated_at,
        )

    def rescore(self, report: CompletenessReport) -> CompletenessScore:
        """Recompute the score of an existing report, e.g. after editing items."""
        return calculate_score(
            report.income_checks,
            report.deduction_checks,
            report.missing_documents,
            report.optimization_suggestions,
            self.policy.scoring,
        )
