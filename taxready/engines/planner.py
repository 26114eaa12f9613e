"""Next-action planning and readiness checks over a finished report.

All functions accept None for "no report yet" and answer conservatively
(no action, not ready, no issues, no items).
"""

from taxready.models.checklist import ChecklistItem
from taxready.models.enums import (
    ChecklistStatus,
    ColorStatus,
    DocumentPriority,
    SuggestionPriority,
)
from taxready.models.policy import ReadinessPolicy
from taxready.models.reports import CompletenessReport, NextAction

STATUS_LABELS = {
    ChecklistStatus.COMPLETE: "Complete",
    ChecklistStatus.PARTIAL: "Partial",
    ChecklistStatus.MISSING: "Missing",
    ChecklistStatus.NOT_APPLICABLE: "Not Applicable",
}


def next_action(
    report: CompletenessReport | None,
    readiness: ReadinessPolicy | None = None,
) -> NextAction | None:
    """The single most valuable thing the user should do next.

    Cascade, first match wins: missing required income, high-priority missing
    document, partially complete item, critical outstanding suggestion, ready
    for review, keep going.
    """
    if report is None:
        return None
    readiness = readiness or ReadinessPolicy()

    for item in report.income_checks:
        if item.required and item.status == ChecklistStatus.MISSING:
            return NextAction(
                title=f"Add {item.title}",
                description=item.action_needed or "This required income source is missing",
                link=item.action_link,
            )

    for doc in report.missing_documents:
        if doc.priority == DocumentPriority.HIGH:
            return NextAction(
                title=f"Upload {doc.document_type}",
                description=doc.detection_reason,
                link="/upload",
            )

    for item in report.all_items:
        if item.status == ChecklistStatus.PARTIAL:
            return NextAction(
                title=f"Complete {item.title}",
                description=item.action_needed or "Additional information needed",
                link=item.action_link,
            )

    for suggestion in report.optimization_suggestions:
        if suggestion.priority == SuggestionPriority.CRITICAL and suggestion.is_outstanding:
            return NextAction(
                title=suggestion.title,
                description=f"Potential tax savings: ${suggestion.estimated_tax_savings:,}",
                link=suggestion.action_link,
            )

    if report.score.overall >= readiness.min_overall_score:
        return NextAction(
            title="Ready for Review",
            description="Your tax return is ready for final review and lodgment",
        )

    return NextAction(
        title="Continue Adding Information",
        description=(
            f"Complete {report.score.missing_items_count} remaining items "
            "to improve your score"
        ),
    )


def is_ready_for_lodgment(
    report: CompletenessReport | None,
    readiness: ReadinessPolicy | None = None,
) -> bool:
    if report is None:
        return False
    readiness = readiness or ReadinessPolicy()
    required_complete = all(
        i.status == ChecklistStatus.COMPLETE
        for i in report.income_checks
        if i.counts_as_required
    )
    return (
        report.score.overall >= readiness.min_overall_score
        and required_complete
        and report.score.missing_items_count <= readiness.max_missing_items
    )


def has_critical_issues(report: CompletenessReport | None) -> bool:
    if report is None:
        return False
    return report.score.color_status == ColorStatus.RED or any(
        i.required and i.status == ChecklistStatus.MISSING for i in report.income_checks
    )


def incomplete_items(report: CompletenessReport | None) -> list[ChecklistItem]:
    if report is None:
        return []
    return [i for i in report.all_items if i.is_outstanding]


def high_priority_items(report: CompletenessReport | None) -> list[ChecklistItem]:
    """Required items that are still missing or partial."""
    if report is None:
        return []
    return [i for i in report.all_items if i.required and i.is_outstanding]


def items_by_category(report: CompletenessReport | None, category: str) -> list[ChecklistItem]:
    """Items whose display category ("Income" or "Deductions") matches."""
    if report is None:
        return []
    return [i for i in report.all_items if i.category == category]
