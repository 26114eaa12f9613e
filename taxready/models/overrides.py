"""Caller-owned override state.

The OverrideStore holds the user's manual corrections for a session: forced
checklist statuses and implemented/dismissed opportunity ids. The engine only
reads it; the caller mutates it between report generations and decides
whether to persist it (it round-trips through JSON).
"""

from pydantic import BaseModel, Field

from taxready.models.enums import ChecklistStatus, OverrideKind


class InconsistentOverride(BaseModel):
    """An override that references an id absent from the current report."""

    kind: OverrideKind
    target_id: str
    reason: str


class OverrideStore(BaseModel):
    manual_status: dict[str, ChecklistStatus] = Field(default_factory=dict)
    implemented_ids: set[str] = Field(default_factory=set)
    dismissed_ids: set[str] = Field(default_factory=set)

    # --- checklist items ---

    def set_status(self, item_id: str, status: ChecklistStatus) -> None:
        self.manual_status[item_id] = status

    def mark_complete(self, item_id: str) -> None:
        self.set_status(item_id, ChecklistStatus.COMPLETE)

    def mark_incomplete(self, item_id: str) -> None:
        self.set_status(item_id, ChecklistStatus.MISSING)

    def clear_status(self, item_id: str) -> None:
        self.manual_status.pop(item_id, None)

    # --- optimization suggestions (keyed by opportunity id) ---

    def implement(self, opportunity_id: str) -> None:
        self.implemented_ids.add(opportunity_id)

    def dismiss(self, opportunity_id: str) -> None:
        self.dismissed_ids.add(opportunity_id)

    def restore(self, opportunity_id: str) -> None:
        """Undo a dismissal."""
        self.dismissed_ids.discard(opportunity_id)

    def clear(self) -> None:
        self.manual_status.clear()
        self.implemented_ids.clear()
        self.dismissed_ids.clear()

    @property
    def is_empty(self) -> bool:
        return not (self.manual_status or self.implemented_ids or self.dismissed_ids)
