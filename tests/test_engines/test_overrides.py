"""Tests for applying manual checklist status overrides."""

from taxready.engines.evaluator import ChecklistEvaluator
from taxready.engines.overrides import apply_status_overrides
from taxready.models.enums import ChecklistStatus, OverrideKind
from taxready.models.overrides import OverrideStore


class TestApplyStatusOverrides:
    def test_no_store_returns_input(self, profile):
        checklist = ChecklistEvaluator().evaluate(profile, {}, {})
        result, issues = apply_status_overrides(checklist, None)
        assert result is checklist
        assert issues == []

    def test_mark_complete(self, profile):
        checklist = ChecklistEvaluator().evaluate(profile, {}, {})
        store = OverrideStore()
        store.mark_complete("income-SALARY")
        result, issues = apply_status_overrides(checklist, store)
        salary = result.income_checks[0]
        assert salary.status == ChecklistStatus.COMPLETE
        assert salary.action_needed is None
        assert salary.overridden
        assert issues == []
        # Input left untouched
        assert checklist.income_checks[0].status == ChecklistStatus.MISSING

    def test_mark_incomplete(self, profile, salary_only):
        checklist = ChecklistEvaluator().evaluate(profile, salary_only, {})
        store = OverrideStore()
        store.mark_incomplete("income-SALARY")
        result, _ = apply_status_overrides(checklist, store)
        assert result.income_checks[0].status == ChecklistStatus.MISSING
        assert result.income_checks[0].action_needed == "Marked incomplete"

    def test_idempotent(self, profile, salary_only):
        checklist = ChecklistEvaluator().evaluate(profile, salary_only, {})
        store = OverrideStore()
        store.set_status("deduction-D3", ChecklistStatus.PARTIAL)
        store.mark_complete("income-DIVIDENDS")
        once, _ = apply_status_overrides(checklist, store)
        twice, _ = apply_status_overrides(once, store)
        assert once == twice

    def test_unknown_id_reported(self, profile, caplog):
        checklist = ChecklistEvaluator().evaluate(profile, {}, {})
        store = OverrideStore()
        store.mark_complete("income-LOTTERY")
        with caplog.at_level("WARNING"):
            result, issues = apply_status_overrides(checklist, store)
        assert len(issues) == 1
        assert issues[0].kind == OverrideKind.STATUS
        assert issues[0].target_id == "income-LOTTERY"
        assert "income-LOTTERY" in caplog.text
        assert result == checklist
