"""Progressive income tax and dividend imputation arithmetic.

Stateless primitives, usable on their own by what-if tools:
  - Marginal bracket lookup and progressive tax on taxable income
  - Medicare levy (with low-income shade-in) and Medicare levy surcharge
  - Low income tax offset
  - Franking credit, grossed-up dividend and the net tax position of a
    franked dividend at the taxpayer's marginal rate

Invalid inputs raise InvalidInputError. Values are never clamped.
"""

from decimal import ROUND_HALF_UP, Decimal

from taxready.engines.rates import (
    COMPANY_TAX_RATE,
    DEFAULT_TAX_YEAR,
    LITO_CUTOUT,
    LITO_FIRST_RATE,
    LITO_FIRST_STEP,
    LITO_MAX,
    LITO_SECOND_BASE,
    LITO_SECOND_RATE,
    LITO_SECOND_STEP,
    MEDICARE_LEVY_LOW_INCOME_THRESHOLD,
    MEDICARE_LEVY_RATE,
    MEDICARE_LEVY_SHADE_IN_RATE,
    MEDICARE_LEVY_SURCHARGE_TIERS,
    RESIDENT_BRACKETS,
)
from taxready.exceptions import InvalidInputError, UnsupportedTaxYearError
from taxready.models.franking import (
    AnnualFrankingSummary,
    DividendEntry,
    FrankingCalculation,
    TaxBracket,
    TaxImpactResult,
)

CENT = Decimal("0.01")
ZERO = Decimal("0")
HUNDRED = Decimal("100")


def to_cents(amount: Decimal) -> Decimal:
    """Round to cents using standard (half-up) rounding."""
    return amount.quantize(CENT, rounding=ROUND_HALF_UP)


def _require_non_negative(field: str, value: Decimal) -> None:
    if value < ZERO:
        raise InvalidInputError(field, f"must be 0 or greater, got {value}")


def brackets_for_year(tax_year: int) -> list[TaxBracket]:
    brackets = RESIDENT_BRACKETS.get(tax_year)
    if not brackets:
        raise UnsupportedTaxYearError(tax_year)
    return brackets


# ---------------------------------------------------------------------------
# Income tax
# ---------------------------------------------------------------------------

def bracket_for(income: Decimal, tax_year: int = DEFAULT_TAX_YEAR) -> TaxBracket:
    """Return the marginal bracket *income* falls into.

    Boundary income belongs to the bracket whose min_income equals it.
    """
    _require_non_negative("income", income)
    brackets = brackets_for_year(tax_year)
    for bracket in reversed(brackets):
        if income >= bracket.min_income:
            return bracket
    return brackets[0]


def progressive_tax(income: Decimal, tax_year: int = DEFAULT_TAX_YEAR) -> Decimal:
    """Tax on *income*: the slice of income in each bracket times that bracket's rate."""
    _require_non_negative("income", income)
    tax = ZERO
    for bracket in brackets_for_year(tax_year):
        if income <= bracket.min_income:
            break
        upper = income if bracket.max_income is None else min(income, bracket.max_income)
        tax += (upper - bracket.min_income) * bracket.rate
    return to_cents(tax)


def medicare_levy(taxable_income: Decimal, tax_year: int = DEFAULT_TAX_YEAR) -> Decimal:
    """Medicare levy with the low-income reduction.

    Nil at or below the threshold; above it the levy is the lesser of the full
    rate on all taxable income and the shade-in rate on the excess.
    """
    _require_non_negative("taxable_income", taxable_income)
    threshold = MEDICARE_LEVY_LOW_INCOME_THRESHOLD.get(tax_year)
    if threshold is None:
        raise UnsupportedTaxYearError(tax_year)
    if taxable_income <= threshold:
        return ZERO
    full = taxable_income * MEDICARE_LEVY_RATE
    shaded = (taxable_income - threshold) * MEDICARE_LEVY_SHADE_IN_RATE
    return to_cents(min(full, shaded))


def medicare_levy_surcharge(
    taxable_income: Decimal,
    has_private_health_insurance: bool | None,
    tax_year: int = DEFAULT_TAX_YEAR,
) -> Decimal:
    """Surcharge for taxpayers without private hospital cover.

    Only applied when cover is explicitly absent (False); unknown (None) is
    treated as covered.
    """
    _require_non_negative("taxable_income", taxable_income)
    if has_private_health_insurance is not False:
        return ZERO
    tiers = MEDICARE_LEVY_SURCHARGE_TIERS.get(tax_year)
    if tiers is None:
        raise UnsupportedTaxYearError(tax_year)
    rate = ZERO
    for lower_bound, tier_rate in tiers:
        if taxable_income > lower_bound:
            rate = tier_rate
    return to_cents(taxable_income * rate)


def low_income_tax_offset(taxable_income: Decimal) -> Decimal:
    """Low income tax offset (LITO), phased out between $37,500 and $66,667."""
    _require_non_negative("taxable_income", taxable_income)
    if taxable_income <= LITO_FIRST_STEP:
        offset = LITO_MAX
    elif taxable_income <= LITO_SECOND_STEP:
        offset = LITO_MAX - (taxable_income - LITO_FIRST_STEP) * LITO_FIRST_RATE
    elif taxable_income < LITO_CUTOUT:
        offset = LITO_SECOND_BASE - (taxable_income - LITO_SECOND_STEP) * LITO_SECOND_RATE
    else:
        offset = ZERO
    return to_cents(max(offset, ZERO))


# ---------------------------------------------------------------------------
# Dividend imputation
# ---------------------------------------------------------------------------

def franking_from_dividend(
    amount: Decimal,
    percent: Decimal,
    company_tax_rate: Decimal = COMPANY_TAX_RATE,
) -> FrankingCalculation:
    """Split a cash dividend into franked/unfranked parts and compute its credit.

    credit = franked amount x rate / (1 - rate); at 30% that is franked x 3/7.
    """
    _require_non_negative("dividend_amount", amount)
    if percent < ZERO or percent > HUNDRED:
        raise InvalidInputError(
            "franking_percentage", f"must be between 0 and 100, got {percent}"
        )
    if company_tax_rate < ZERO or company_tax_rate >= Decimal("1"):
        raise InvalidInputError(
            "company_tax_rate", f"must be in [0, 1), got {company_tax_rate}"
        )

    franked = to_cents(amount * percent / HUNDRED)
    unfranked = to_cents(amount - franked)
    credit = to_cents(franked * company_tax_rate / (Decimal("1") - company_tax_rate))
    return FrankingCalculation(
        dividend_amount=amount,
        franking_percentage=percent,
        franked_amount=franked,
        unfranked_amount=unfranked,
        franking_credit=credit,
        grossed_up_dividend=to_cents(amount + credit),
    )


def tax_impact_at_rate(
    grossed_up_dividend: Decimal,
    franking_credit: Decimal,
    marginal_rate: Decimal,
) -> TaxImpactResult:
    _require_non_negative("grossed_up_dividend", grossed_up_dividend)
    _require_non_negative("franking_credit", franking_credit)
    tax_on_grossed_up = to_cents(grossed_up_dividend * marginal_rate)
    net_position = to_cents(tax_on_grossed_up - franking_credit)
    if grossed_up_dividend == ZERO:
        effective = ZERO
    else:
        effective = to_cents(tax_on_grossed_up / grossed_up_dividend * HUNDRED)
    return TaxImpactResult(
        marginal_rate=marginal_rate,
        tax_on_grossed_up=tax_on_grossed_up,
        franking_credit_offset=franking_credit,
        net_tax_position=net_position,
        effective_tax_rate=effective,
    )


def tax_impact(
    grossed_up_dividend: Decimal,
    franking_credit: Decimal,
    total_taxable_income: Decimal,
    tax_year: int = DEFAULT_TAX_YEAR,
) -> TaxImpactResult:
    """Net tax position of a franked dividend at the taxpayer's marginal rate.

    *total_taxable_income* must already include the grossed-up dividend.
    """
    rate = bracket_for(total_taxable_income, tax_year).rate
    return tax_impact_at_rate(grossed_up_dividend, franking_credit, rate)


def tax_impact_at_all_rates(
    grossed_up_dividend: Decimal,
    franking_credit: Decimal,
    tax_year: int = DEFAULT_TAX_YEAR,
) -> list[TaxImpactResult]:
    """One result per distinct marginal rate, lowest rate first."""
    rates = sorted({b.rate for b in brackets_for_year(tax_year)})
    return [tax_impact_at_rate(grossed_up_dividend, franking_credit, r) for r in rates]


def annual_franking_summary(
    entries: list[DividendEntry], tax_year: int
) -> AnnualFrankingSummary:
    """Total a year's dividends and credits; entries for other years are ignored."""
    in_year = [e for e in entries if e.tax_year == tax_year]
    calculations = [
        franking_from_dividend(e.dividend_amount, e.franking_percentage) for e in in_year
    ]
    total_dividends = sum((c.dividend_amount for c in calculations), ZERO)
    total_credits = sum((c.franking_credit for c in calculations), ZERO)
    total_grossed_up = sum((c.grossed_up_dividend for c in calculations), ZERO)
    return AnnualFrankingSummary(
        tax_year=tax_year,
        entry_count=len(in_year),
        total_dividends=to_cents(total_dividends),
        total_franking_credits=to_cents(total_credits),
        total_grossed_up_dividends=to_cents(total_grossed_up),
        tax_impact_at_rates=tax_impact_at_all_rates(
            total_grossed_up, total_credits, tax_year
        ),
    )
