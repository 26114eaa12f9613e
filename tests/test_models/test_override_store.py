"""Tests for the caller-owned override store."""

from taxready.models.enums import ChecklistStatus
from taxready.models.overrides import OverrideStore


class TestStatusOverrides:
    def test_mark_and_clear(self):
        store = OverrideStore()
        store.mark_complete("income-SALARY")
        store.mark_incomplete("deduction-D5")
        assert store.manual_status == {
            "income-SALARY": ChecklistStatus.COMPLETE,
            "deduction-D5": ChecklistStatus.MISSING,
        }
        store.clear_status("income-SALARY")
        store.clear_status("not-there")
        assert list(store.manual_status) == ["deduction-D5"]

    def test_latest_status_wins(self):
        store = OverrideStore()
        store.mark_complete("income-SALARY")
        store.set_status("income-SALARY", ChecklistStatus.NOT_APPLICABLE)
        assert store.manual_status["income-SALARY"] == ChecklistStatus.NOT_APPLICABLE


class TestSuggestionOverrides:
    def test_implement_dismiss_restore(self):
        store = OverrideStore()
        store.implement("super")
        store.dismiss("wfh")
        store.dismiss("wfh")
        assert store.implemented_ids == {"super"}
        assert store.dismissed_ids == {"wfh"}
        store.restore("wfh")
        store.restore("never-dismissed")
        assert store.dismissed_ids == set()

    def test_clear(self):
        store = OverrideStore()
        assert store.is_empty
        store.implement("super")
        store.mark_complete("income-SALARY")
        assert not store.is_empty
        store.clear()
        assert store.is_empty


class TestPersistence:
    def test_json_round_trip(self):
        store = OverrideStore()
        store.mark_complete("deduction-D3")
        store.implement("super")
        store.dismiss("wfh")
        restored = OverrideStore.model_validate_json(store.model_dump_json())
        assert restored == store
        assert restored.manual_status["deduction-D3"] is ChecklistStatus.COMPLETE

    def test_loads_lists_as_sets(self):
        store = OverrideStore.model_validate(
            {"implemented_ids": ["a", "a", "b"], "manual_status": {"income-SALARY": "partial"}}
        )
        assert store.implemented_ids == {"a", "b"}
        assert store.manual_status["income-SALARY"] == ChecklistStatus.PARTIAL
