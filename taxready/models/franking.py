"""Bracket and dividend imputation (franking credit) models."""

from datetime import date
from decimal import Decimal

from pydantic import BaseModel, ConfigDict


class TaxBracket(BaseModel):
    """One marginal bracket. max_income is exclusive; None for the top bracket."""

    model_config = ConfigDict(frozen=True)

    min_income: Decimal
    max_income: Decimal | None
    rate: Decimal
    description: str

    def contains(self, income: Decimal) -> bool:
        if income < self.min_income:
            return False
        return self.max_income is None or income < self.max_income


class FrankingCalculation(BaseModel):
    dividend_amount: Decimal
    franking_percentage: Decimal
    franked_amount: Decimal
    unfranked_amount: Decimal
    franking_credit: Decimal
    grossed_up_dividend: Decimal


class TaxImpactResult(BaseModel):
    marginal_rate: Decimal
    tax_on_grossed_up: Decimal
    franking_credit_offset: Decimal
    # Positive = additional tax payable, negative = refundable excess credit.
    net_tax_position: Decimal
    effective_tax_rate: Decimal

    @property
    def is_refund(self) -> bool:
        return self.net_tax_position < 0


class DividendEntry(BaseModel):
    company_name: str
    dividend_amount: Decimal
    franking_percentage: Decimal = Decimal("100")
    date_received: date | None = None
    tax_year: int


class AnnualFrankingSummary(BaseModel):
    tax_year: int
    entry_count: int
    total_dividends: Decimal
    total_franking_credits: Decimal
    total_grossed_up_dividends: Decimal
    tax_impact_at_rates: list[TaxImpactResult]
