"""Apply manual checklist status overrides to freshly evaluated items."""

import logging

from taxready.models.checklist import ChecklistItem, ChecklistResult
from taxready.models.enums import ChecklistStatus, OverrideKind
from taxready.models.overrides import InconsistentOverride, OverrideStore

logger = logging.getLogger(__name__)


def _override_item(item: ChecklistItem, status: ChecklistStatus) -> ChecklistItem:
    if status in (ChecklistStatus.COMPLETE, ChecklistStatus.NOT_APPLICABLE):
        action = None
    else:
        action = item.action_needed or "Marked incomplete"
    return item.model_copy(
        update={"status": status, "action_needed": action, "overridden": True}
    )


def apply_status_overrides(
    checklist: ChecklistResult,
    overrides: OverrideStore | None,
) -> tuple[ChecklistResult, list[InconsistentOverride]]:
    """Replace computed statuses with the user's manual ones.

    Returns a new ChecklistResult; the input is left untouched. Applying the
    same store twice gives the same result. Overrides naming an item id that
    is not in the checklist are reported, not raised.
    """
    if overrides is None or not overrides.manual_status:
        return checklist, []

    def _apply(items: list[ChecklistItem]) -> list[ChecklistItem]:
        return [
            _override_item(item, overrides.manual_status[item.id])
            if item.id in overrides.manual_status
            else item
            for item in items
        ]

    result = ChecklistResult(
        income_checks=_apply(checklist.income_checks),
        deduction_checks=_apply(checklist.deduction_checks),
    )

    known_ids = {item.id for item in checklist.all_items}
    issues = []
    for item_id in sorted(overrides.manual_status):
        if item_id not in known_ids:
            logger.warning("Ignoring status override for unknown checklist item %s", item_id)
            issues.append(
                InconsistentOverride(
                    kind=OverrideKind.STATUS,
                    target_id=item_id,
                    reason="No checklist item with this id",
                )
            )
    return result, issues
