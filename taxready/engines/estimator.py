"""Tax payable and refund estimation from the evaluated checklist.

Implements:
  - Gross income from every applicable income category
  - Deductions from claims that are complete or partially substantiated
  - Resident progressive tax, Medicare levy and Medicare levy surcharge
  - Offsets (caller supplied, plus LITO when enabled) against the liability
"""

from decimal import Decimal

from taxready.engines.calculator import (
    ZERO,
    low_income_tax_offset,
    medicare_levy,
    medicare_levy_surcharge,
    progressive_tax,
    to_cents,
)
from taxready.exceptions import InvalidInputError
from taxready.models.checklist import ChecklistItem
from taxready.models.enums import ChecklistStatus
from taxready.models.inputs import TaxOffset, UserTaxProfile
from taxready.models.reports import TaxEstimate

LOW_INCOME_TAX_OFFSET_NAME = "Low income tax offset"


class TaxEstimator:
    """Estimates Australian resident tax payable and the refund or amount owing."""

    def __init__(self, include_low_income_offset: bool = False) -> None:
        self.include_low_income_offset = include_low_income_offset

    def estimate(
        self,
        profile: UserTaxProfile,
        income_checks: list[ChecklistItem],
        deduction_checks: list[ChecklistItem],
        tax_withheld: Decimal = ZERO,
        offsets: list[TaxOffset] | None = None,
    ) -> TaxEstimate:
        if tax_withheld < ZERO:
            raise InvalidInputError("tax_withheld", f"must be 0 or greater, got {tax_withheld}")
        offsets = list(offsets or [])
        for offset in offsets:
            if offset.amount < ZERO:
                raise InvalidInputError(
                    "offsets", f"{offset.name!r} must be 0 or greater, got {offset.amount}"
                )

        tax_year = profile.tax_year

        # --- Income and deductions ---
        gross_income = sum(
            (i.claimed_amount for i in income_checks
             if i.status != ChecklistStatus.NOT_APPLICABLE),
            ZERO,
        )
        total_deductions = sum(
            (d.claimed_amount for d in deduction_checks
             if d.status in (ChecklistStatus.COMPLETE, ChecklistStatus.PARTIAL)),
            ZERO,
        )
        taxable_income = max(gross_income - total_deductions, ZERO)

        # --- Liability ---
        tax_payable = progressive_tax(taxable_income, tax_year)
        levy = medicare_levy(taxable_income, tax_year)
        surcharge = medicare_levy_surcharge(
            taxable_income, profile.has_private_health_insurance, tax_year
        )

        # --- Offsets ---
        if self.include_low_income_offset:
            lito = low_income_tax_offset(taxable_income)
            if lito > ZERO:
                offsets.append(TaxOffset(name=LOW_INCOME_TAX_OFFSET_NAME, amount=lito))
        total_offsets = sum((o.amount for o in offsets), ZERO)

        # --- Outcome ---
        liability = tax_payable + levy + surcharge
        credits = tax_withheld + total_offsets
        return TaxEstimate(
            tax_year=tax_year,
            gross_income=to_cents(gross_income),
            total_deductions=to_cents(total_deductions),
            taxable_income=to_cents(taxable_income),
            tax_payable=tax_payable,
            medicare_levy=levy,
            medicare_levy_surcharge=surcharge,
            tax_withheld=to_cents(tax_withheld),
            offsets=offsets,
            total_offsets=to_cents(total_offsets),
            estimated_refund=to_cents(max(credits - liability, ZERO)),
            estimated_tax_owing=to_cents(max(liability - credits, ZERO)),
        )
