"""Tests for the static category catalogue."""

from decimal import Decimal

from taxready.engines.catalogue import DEFAULT_CATALOGUE
from taxready.models.enums import CategoryKind, CategoryPriority, TaxTreatment


class TestCatalogue:
    def test_counts(self):
        assert len(DEFAULT_CATALOGUE.income) == 14
        assert len(DEFAULT_CATALOGUE.deductions) == 15

    def test_deduction_codes_in_order(self):
        assert [d.code for d in DEFAULT_CATALOGUE.deductions] == [f"D{n}" for n in range(1, 16)]

    def test_codes_unique(self):
        codes = [d.code for d in (*DEFAULT_CATALOGUE.income, *DEFAULT_CATALOGUE.deductions)]
        assert len(codes) == len(set(codes))

    def test_only_salary_required(self):
        required = [d.code for d in DEFAULT_CATALOGUE.income if d.required]
        assert required == ["SALARY"]

    def test_every_category_lists_documents(self):
        for definition in (*DEFAULT_CATALOGUE.income, *DEFAULT_CATALOGUE.deductions):
            assert definition.document_types, f"{definition.code} has no documents"

    def test_deductions_have_typical_max(self):
        for definition in DEFAULT_CATALOGUE.deductions:
            assert definition.typical_max is not None and definition.typical_max > 0

    def test_get_and_item_id(self):
        d5 = DEFAULT_CATALOGUE.get(CategoryKind.DEDUCTION, "D5")
        assert d5.name == "Other Work Expenses"
        assert d5.item_id == "deduction-D5"
        assert d5.action_link == "/deductions/d5"
        assert d5.typical_max == Decimal("2000")
        assert DEFAULT_CATALOGUE.by_item_id("income-SALARY").code == "SALARY"

    def test_kind_mismatch_returns_none(self):
        assert DEFAULT_CATALOGUE.get(CategoryKind.INCOME, "D1") is None

    def test_super_income_is_concessional(self):
        for code in ("SUPER_PENSION", "SUPER_LUMPSUM", "EMPLOYMENT_TERMINATION"):
            definition = DEFAULT_CATALOGUE.get(CategoryKind.INCOME, code)
            assert definition.tax_treatment == TaxTreatment.CONCESSIONAL
            assert definition.priority == CategoryPriority.LOW

    def test_prefill_sources(self):
        prefilled = {d.code for d in DEFAULT_CATALOGUE.income if d.prefill_available}
        assert {"SALARY", "DIVIDENDS", "INTEREST", "TRUST_DISTRIBUTIONS", "GOVERNMENT_PAYMENTS"} <= prefilled
        assert "RENTAL" not in prefilled
