"""Tests for CLI commands."""

import json

import pytest
from typer.testing import CliRunner

from taxready.cli import app
from taxready.models.overrides import OverrideStore

runner = CliRunner()


@pytest.fixture
def salary_input(tmp_path):
    path = tmp_path / "return.json"
    path.write_text(
        json.dumps(
            {
                "profile": {"tax_year": 2025, "occupation": "Software Engineer"},
                "income_data": {"SALARY": {"amount": "80000", "document_count": 1}},
                "tax_withheld": "18000",
            }
        )
    )
    return path


@pytest.fixture
def empty_input(tmp_path):
    path = tmp_path / "empty.json"
    path.write_text(json.dumps({"profile": {"tax_year": 2025}}))
    return path


class TestCLI:
    def test_help(self):
        result = runner.invoke(app, ["--help"])
        assert result.exit_code == 0
        assert "taxready" in result.output

    @pytest.mark.parametrize("command", ["check", "bracket", "franking", "overrides"])
    def test_command_help(self, command):
        result = runner.invoke(app, [command, "--help"])
        assert result.exit_code == 0


class TestCheck:
    def test_dashboard(self, salary_input):
        result = runner.invoke(app, ["check", str(salary_input)])
        assert result.exit_code == 0, result.output
        assert "=== Tax Return Completeness: FY2025 ===" in result.output
        assert "Completeness score: 100/100 (green)" in result.output
        assert "Missing required items: 0" in result.output
        assert "Ready for lodgment: yes" in result.output
        assert "Estimated Refund:      $    1,612.00" in result.output
        assert "Next: Ready for Review" in result.output

    def test_missing_salary(self, empty_input):
        result = runner.invoke(app, ["check", str(empty_input)])
        assert result.exit_code == 0, result.output
        assert "Ready for lodgment: no" in result.output
        assert "Estimated time to complete: 10 minutes" in result.output
        assert "Next: Add Salary/Wages" in result.output

    def test_json_output(self, salary_input):
        result = runner.invoke(app, ["check", str(salary_input), "--json"])
        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["score"]["overall"] == 100
        assert data["tax_estimate"]["estimated_refund"] == "1612.00"

    def test_checklist_export(self, salary_input):
        result = runner.invoke(app, ["check", str(salary_input), "--export", "checklist"])
        assert result.exit_code == 0, result.output
        assert result.output.startswith("TAX RETURN COMPLETENESS CHECKLIST - FY 2025")
        assert "[COMPLETE] Salary/Wages - $80,000.00 (1 docs)" in result.output

    def test_summary_export(self, salary_input):
        result = runner.invoke(app, ["check", str(salary_input), "--export", "summary"])
        assert result.exit_code == 0, result.output
        assert "Client Review Ready: YES" in result.output

    def test_policy_file(self, salary_input, tmp_path):
        policy = tmp_path / "policy.json"
        policy.write_text(json.dumps({"scoring": {"readiness": {"min_overall_score": 101}}}))
        result = runner.invoke(app, ["check", str(salary_input), "--policy", str(policy)])
        assert result.exit_code == 0, result.output
        assert "Ready for lodgment: no" in result.output

    def test_invalid_export(self, salary_input):
        result = runner.invoke(app, ["check", str(salary_input), "--export", "pdf"])
        assert result.exit_code == 1
        assert "Invalid export 'pdf'" in result.output

    def test_missing_input(self, tmp_path):
        result = runner.invoke(app, ["check", str(tmp_path / "nope.json")])
        assert result.exit_code == 1
        assert "Input file not found" in result.output

    def test_malformed_input(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text('{"income_data": {"SALARY": {"amount": "lots"}}}')
        result = runner.invoke(app, ["check", str(path)])
        assert result.exit_code == 1
        assert "Invalid input file bad.json" in result.output

    def test_unknown_category(self, tmp_path):
        path = tmp_path / "unknown.json"
        path.write_text(json.dumps({"deduction_data": {"D99": {"amount": "10"}}}))
        result = runner.invoke(app, ["check", str(path)])
        assert result.exit_code == 1
        assert "D99" in result.output

    def test_negative_withheld(self, tmp_path):
        path = tmp_path / "negative.json"
        path.write_text(json.dumps({"tax_withheld": "-5"}))
        result = runner.invoke(app, ["check", str(path)])
        assert result.exit_code == 1
        assert "tax_withheld" in result.output

    def test_missing_overrides_file(self, salary_input, tmp_path):
        result = runner.invoke(
            app, ["check", str(salary_input), "--overrides", str(tmp_path / "nope.json")]
        )
        assert result.exit_code == 1
        assert "Overrides file not found" in result.output


class TestBracket:
    def test_bracket(self):
        result = runner.invoke(app, ["bracket", "80000"])
        assert result.exit_code == 0, result.output
        assert "Tax year: 2025" in result.output
        assert "Marginal bracket: 30% bracket (30%)" in result.output
        assert "Tax payable:   $   14,788.00" in result.output
        assert "Medicare levy: $    1,600.00" in result.output

    def test_older_year(self):
        result = runner.invoke(app, ["bracket", "100000", "--year", "2024"])
        assert result.exit_code == 0, result.output
        assert "32.5% bracket (32.5%)" in result.output

    def test_unsupported_year(self):
        result = runner.invoke(app, ["bracket", "80000", "--year", "1999"])
        assert result.exit_code == 1
        assert "1999" in result.output


class TestFranking:
    def test_all_rates(self):
        result = runner.invoke(app, ["franking", "700"])
        assert result.exit_code == 0, result.output
        assert "Franking credit:    $    300.00" in result.output
        assert "Grossed-up dividend:$  1,000.00" in result.output
        assert "0%: tax $0.00, net refund $300.00" in result.output
        assert "30%: tax $300.00, net payable $0.00" in result.output
        assert "45%: tax $450.00, net payable $150.00" in result.output

    def test_single_income(self):
        result = runner.invoke(app, ["franking", "700", "--income", "30000"])
        assert result.exit_code == 0, result.output
        assert "16%: tax $160.00, net refund $140.00" in result.output
        assert "45%" not in result.output

    def test_partial_franking(self):
        result = runner.invoke(app, ["franking", "1000", "--percent", "50"])
        assert result.exit_code == 0, result.output
        assert "Unfranked amount:   $    500.00" in result.output
        assert "Franking credit:    $    214.29" in result.output

    def test_invalid_percent(self):
        result = runner.invoke(app, ["franking", "700", "--percent", "120"])
        assert result.exit_code == 1
        assert "franking_percentage" in result.output


class TestOverrides:
    def test_mark_writes_file(self, tmp_path):
        path = tmp_path / "overrides.json"
        result = runner.invoke(app, ["overrides", "mark", "income-SALARY", "--file", str(path)])
        assert result.exit_code == 0, result.output
        assert "Marked income-SALARY as complete" in result.output
        store = OverrideStore.model_validate_json(path.read_text())
        assert store.manual_status == {"income-SALARY": "complete"}

    def test_invalid_status(self, tmp_path):
        path = tmp_path / "overrides.json"
        result = runner.invoke(
            app, ["overrides", "mark", "income-SALARY", "-s", "done", "-f", str(path)]
        )
        assert result.exit_code == 1
        assert "Invalid status 'done'" in result.output
        assert not path.exists()

    def test_unmark(self, tmp_path):
        path = tmp_path / "overrides.json"
        runner.invoke(app, ["overrides", "mark", "income-SALARY", "-f", str(path)])
        result = runner.invoke(app, ["overrides", "unmark", "income-SALARY", "-f", str(path)])
        assert result.exit_code == 0, result.output
        assert OverrideStore.model_validate_json(path.read_text()).is_empty

    def test_implement_dismiss_restore(self, tmp_path):
        path = tmp_path / "overrides.json"
        runner.invoke(app, ["overrides", "implement", "super", "-f", str(path)])
        result = runner.invoke(app, ["overrides", "dismiss", "wfh", "-f", str(path)])
        assert "Dismissed wfh" in result.output
        store = OverrideStore.model_validate_json(path.read_text())
        assert store.implemented_ids == {"super"}
        assert store.dismissed_ids == {"wfh"}

        result = runner.invoke(app, ["overrides", "dismiss", "wfh", "--restore", "-f", str(path)])
        assert "Restored wfh" in result.output
        assert OverrideStore.model_validate_json(path.read_text()).dismissed_ids == set()

    def test_clear(self, tmp_path):
        path = tmp_path / "overrides.json"
        runner.invoke(app, ["overrides", "implement", "super", "-f", str(path)])
        result = runner.invoke(app, ["overrides", "clear", "-f", str(path)])
        assert result.exit_code == 0, result.output
        assert f"Cleared all overrides in {path}" in result.output
        assert OverrideStore.model_validate_json(path.read_text()).is_empty

    def test_check_applies_saved_overrides(self, empty_input, tmp_path):
        path = tmp_path / "overrides.json"
        runner.invoke(app, ["overrides", "mark", "income-SALARY", "-f", str(path)])
        runner.invoke(app, ["overrides", "dismiss", "ghost", "-f", str(path)])
        result = runner.invoke(app, ["check", str(empty_input), "--overrides", str(path)])
        assert result.exit_code == 0, result.output
        assert "Completeness score: 100/100 (green)" in result.output
        assert "Warning: stale dismissed override 'ghost'" in result.output
