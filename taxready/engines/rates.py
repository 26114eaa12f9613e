"""Australian individual income tax rate tables.

Resident brackets, Medicare levy, Medicare levy surcharge, the low income tax
offset and the company tax rate used for franking credits. Keyed by tax year,
where the year is the one the financial year ends in (2025 = FY2024-25).
Never hardcode rates in computation functions.

Sources:
  - ATO "Individual income tax rates" (resident) for 2023-24 to 2025-26
  - ATO "Medicare levy reduction for low-income earners"
  - ATO "Medicare levy surcharge income, thresholds and rates"
  - ATO "Low income tax offset"
"""

from decimal import Decimal

from taxready.models.franking import TaxBracket

DEFAULT_TAX_YEAR = 2025


def _bracket(low: str, high: str | None, rate: str, description: str) -> TaxBracket:
    return TaxBracket(
        min_income=Decimal(low),
        max_income=Decimal(high) if high is not None else None,
        rate=Decimal(rate),
        description=description,
    )


# ---------------------------------------------------------------------------
# Resident marginal brackets: sorted, non-overlapping, exhaustive.
# min_income inclusive, max_income exclusive, top bracket unbounded.
# ---------------------------------------------------------------------------
_STAGE_THREE_BRACKETS = [
    _bracket("0", "18200", "0", "Tax-free threshold"),
    _bracket("18200", "45000", "0.16", "16% bracket"),
    _bracket("45000", "135000", "0.30", "30% bracket"),
    _bracket("135000", "190000", "0.37", "37% bracket"),
    _bracket("190000", None, "0.45", "45% bracket"),
]

RESIDENT_BRACKETS: dict[int, list[TaxBracket]] = {
    2024: [
        _bracket("0", "18200", "0", "Tax-free threshold"),
        _bracket("18200", "45000", "0.19", "19% bracket"),
        _bracket("45000", "120000", "0.325", "32.5% bracket"),
        _bracket("120000", "180000", "0.37", "37% bracket"),
        _bracket("180000", None, "0.45", "45% bracket"),
    ],
    2025: _STAGE_THREE_BRACKETS,
    2026: _STAGE_THREE_BRACKETS,
}

# ---------------------------------------------------------------------------
# Company tax rate used to gross franked dividends back up.
# ---------------------------------------------------------------------------
COMPANY_TAX_RATE = Decimal("0.30")

# ---------------------------------------------------------------------------
# Medicare levy: 2% of taxable income, nil at or below the low-income
# threshold, shaded in at 10c per dollar above it.
# ---------------------------------------------------------------------------
MEDICARE_LEVY_RATE = Decimal("0.02")
MEDICARE_LEVY_SHADE_IN_RATE = Decimal("0.10")
MEDICARE_LEVY_LOW_INCOME_THRESHOLD: dict[int, Decimal] = {
    2024: Decimal("26000"),
    2025: Decimal("27222"),
    2026: Decimal("27222"),
}

# ---------------------------------------------------------------------------
# Medicare levy surcharge (singles): (lower bound exclusive, rate)
# Applies to the whole taxable income once a tier is reached.
# ---------------------------------------------------------------------------
MEDICARE_LEVY_SURCHARGE_TIERS: dict[int, list[tuple[Decimal, Decimal]]] = {
    2024: [
        (Decimal("93000"), Decimal("0.01")),
        (Decimal("108000"), Decimal("0.0125")),
        (Decimal("144000"), Decimal("0.015")),
    ],
    2025: [
        (Decimal("97000"), Decimal("0.01")),
        (Decimal("113000"), Decimal("0.0125")),
        (Decimal("151000"), Decimal("0.015")),
    ],
    2026: [
        (Decimal("101000"), Decimal("0.01")),
        (Decimal("118000"), Decimal("0.0125")),
        (Decimal("158000"), Decimal("0.015")),
    ],
}

# ---------------------------------------------------------------------------
# Low income tax offset (unchanged since 2022-23)
# ---------------------------------------------------------------------------
LITO_MAX = Decimal("700")
LITO_FIRST_STEP = Decimal("37500")
LITO_FIRST_RATE = Decimal("0.05")
LITO_SECOND_STEP = Decimal("45000")
LITO_SECOND_BASE = Decimal("325")
LITO_SECOND_RATE = Decimal("0.015")
LITO_CUTOUT = Decimal("66667")
