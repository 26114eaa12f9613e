"""Tests for dividend imputation (franking credit) calculations."""

from datetime import date
from decimal import Decimal

import pytest

from taxready.engines.calculator import (
    annual_franking_summary,
    franking_from_dividend,
    tax_impact,
    tax_impact_at_all_rates,
    tax_impact_at_rate,
)
from taxready.exceptions import InvalidInputError
from taxready.models.franking import DividendEntry


class TestFrankingFromDividend:
    def test_fully_franked(self):
        calc = franking_from_dividend(Decimal("700"), Decimal("100"))
        assert calc.franked_amount == Decimal("700.00")
        assert calc.unfranked_amount == Decimal("0.00")
        assert calc.franking_credit == Decimal("300.00")
        assert calc.grossed_up_dividend == Decimal("1000.00")

    def test_partially_franked(self):
        calc = franking_from_dividend(Decimal("1000"), Decimal("50"))
        assert calc.franked_amount == Decimal("500.00")
        assert calc.unfranked_amount == Decimal("500.00")
        # 500 x 0.3 / 0.7 = 214.2857...
        assert calc.franking_credit == Decimal("214.29")
        assert calc.grossed_up_dividend == Decimal("1214.29")

    def test_unfranked(self):
        calc = franking_from_dividend(Decimal("250"), Decimal("0"))
        assert calc.franking_credit == Decimal("0.00")
        assert calc.grossed_up_dividend == Decimal("250.00")

    @pytest.mark.parametrize(
        "amount,percent",
        [("123.45", "37"), ("0.01", "50"), ("999.99", "100"), ("5000", "72.5")],
    )
    def test_split_adds_back_to_dividend(self, amount, percent):
        calc = franking_from_dividend(Decimal(amount), Decimal(percent))
        assert calc.franked_amount + calc.unfranked_amount == Decimal(amount)
        assert calc.grossed_up_dividend == calc.dividend_amount + calc.franking_credit

    @pytest.mark.parametrize("amount", ["70", "700", "1400", "3500"])
    def test_fully_franked_credit_is_three_sevenths(self, amount):
        calc = franking_from_dividend(Decimal(amount), Decimal("100"))
        assert calc.franking_credit == (Decimal(amount) * 3 / 7).quantize(Decimal("0.01"))

    def test_custom_company_rate(self):
        calc = franking_from_dividend(Decimal("750"), Decimal("100"), Decimal("0.25"))
        assert calc.franking_credit == Decimal("250.00")

    def test_negative_dividend_rejected(self):
        with pytest.raises(InvalidInputError) as exc_info:
            franking_from_dividend(Decimal("-1"), Decimal("100"))
        assert exc_info.value.field == "dividend_amount"

    @pytest.mark.parametrize("percent", ["-0.01", "100.01", "150"])
    def test_percentage_out_of_range_rejected(self, percent):
        with pytest.raises(InvalidInputError):
            franking_from_dividend(Decimal("100"), Decimal(percent))


class TestTaxImpact:
    def test_break_even_at_company_rate(self):
        impact = tax_impact_at_rate(Decimal("1000"), Decimal("300"), Decimal("0.30"))
        assert impact.tax_on_grossed_up == Decimal("300.00")
        assert impact.net_tax_position == Decimal("0.00")
        assert impact.effective_tax_rate == Decimal("30.00")
        assert not impact.is_refund

    def test_excess_credit_refunded_at_zero_rate(self):
        impact = tax_impact_at_rate(Decimal("1000"), Decimal("300"), Decimal("0"))
        assert impact.net_tax_position == Decimal("-300.00")
        assert impact.is_refund

    def test_top_rate_pays_top_up(self):
        impact = tax_impact(Decimal("1000"), Decimal("300"), Decimal("200000"), 2025)
        assert impact.marginal_rate == Decimal("0.45")
        assert impact.net_tax_position == Decimal("150.00")

    def test_marginal_rate_from_total_income(self):
        impact = tax_impact(Decimal("1000"), Decimal("300"), Decimal("100000"), 2025)
        assert impact.marginal_rate == Decimal("0.30")

    def test_zero_grossed_up(self):
        impact = tax_impact_at_rate(Decimal("0"), Decimal("0"), Decimal("0.37"))
        assert impact.effective_tax_rate == Decimal("0")

    def test_all_rates(self):
        impacts = tax_impact_at_all_rates(Decimal("1000"), Decimal("300"), 2025)
        assert [i.marginal_rate for i in impacts] == [
            Decimal("0"), Decimal("0.16"), Decimal("0.30"), Decimal("0.37"), Decimal("0.45"),
        ]


class TestAnnualFrankingSummary:
    def test_totals_for_year(self):
        entries = [
            DividendEntry(company_name="BHP", dividend_amount=Decimal("700"), tax_year=2025,
                          date_received=date(2024, 9, 20)),
            DividendEntry(company_name="CBA", dividend_amount=Decimal("1000"),
                          franking_percentage=Decimal("50"), tax_year=2025),
            DividendEntry(company_name="WES", dividend_amount=Decimal("400"), tax_year=2024),
        ]
        summary = annual_franking_summary(entries, 2025)
        assert summary.entry_count == 2
        assert summary.total_dividends == Decimal("1700.00")
        assert summary.total_franking_credits == Decimal("514.29")
        assert summary.total_grossed_up_dividends == Decimal("2214.29")
        assert len(summary.tax_impact_at_rates) == 5

    def test_empty(self):
        summary = annual_franking_summary([], 2025)
        assert summary.entry_count == 0
        assert summary.total_dividends == Decimal("0")
