"""Static income and deduction category catalogue.

Mirrors the ATO individual tax return: income categories by type and the
D1-D15 deduction/offset labels. Reference data only; never mutated at runtime.

Sources:
  - ATO Individual tax return instructions 2025
  - ATO "Deductions you can claim" guidance (typical claim ranges are
    product estimates used for the unusual-claim risk rule)
"""

from decimal import Decimal

from taxready.models.categories import TaxCategoryCatalogue, TaxCategoryDefinition
from taxready.models.enums import CategoryKind, CategoryPriority, TaxTreatment

_ATO_INCOME = "https://www.ato.gov.au/individuals/income-deductions-offsets-and-records/income-you-must-declare"
_ATO_DEDUCTIONS = "https://www.ato.gov.au/individuals-and-families/income-deductions-offsets-and-records/deductions-you-can-claim"


def _income(
    code: str,
    name: str,
    documents: tuple[str, ...],
    priority: CategoryPriority,
    reporting_pct: int,
    *,
    required: bool = False,
    prefill: bool = False,
    treatment: TaxTreatment = TaxTreatment.TAXABLE,
    source: str = "",
    reference: str = "",
    required_when: str | None = None,
) -> TaxCategoryDefinition:
    return TaxCategoryDefinition(
        code=code,
        kind=CategoryKind.INCOME,
        name=name,
        required=required,
        tax_treatment=treatment,
        prefill_available=prefill,
        estimated_reporting_percentage=reporting_pct,
        priority=priority,
        document_types=documents,
        expected_source=source,
        action_link="/income",
        ato_reference=reference,
        required_when=required_when,
    )


def _deduction(
    code: str,
    name: str,
    documents: tuple[str, ...],
    priority: CategoryPriority,
    reporting_pct: int,
    typical_max: str,
    *,
    source: str = "Your records",
    slug: str = "",
    required_when: str | None = None,
) -> TaxCategoryDefinition:
    return TaxCategoryDefinition(
        code=code,
        kind=CategoryKind.DEDUCTION,
        name=name,
        estimated_reporting_percentage=reporting_pct,
        priority=priority,
        document_types=documents,
        expected_source=source,
        action_link=f"/deductions/{code.lower()}",
        ato_reference=f"{_ATO_DEDUCTIONS}/{slug}" if slug else _ATO_DEDUCTIONS,
        typical_max=Decimal(typical_max),
        required_when=required_when,
    )


INCOME_CATEGORIES: tuple[TaxCategoryDefinition, ...] = (
    _income(
        "SALARY", "Salary/Wages",
        ("PAYG Payment Summary", "Income Statement (myGov)"),
        CategoryPriority.HIGH, 95,
        required=True, prefill=True, source="Employer, myGov",
        reference=f"{_ATO_INCOME}/salary-and-wages",
    ),
    _income(
        "DIVIDENDS", "Dividends",
        ("Dividend Statements", "Computershare Statements", "Link Market Services"),
        CategoryPriority.HIGH, 25,
        prefill=True, source="Computershare, Link Market Services",
        reference=f"{_ATO_INCOME}/dividends",
    ),
    _income(
        "INTEREST", "Interest Income",
        ("Bank Interest Summaries", "Term Deposit Statements"),
        CategoryPriority.HIGH, 60,
        prefill=True, source="Your banks",
        reference=f"{_ATO_INCOME}/interest",
    ),
    _income(
        "RENTAL", "Rental Income",
        ("Property Manager Statements", "Lease Agreements"),
        CategoryPriority.HIGH, 15,
        source="Property manager", reference=f"{_ATO_INCOME}/rental-income",
        required_when="has_rental_property",
    ),
    _income(
        "CAPITAL_GAINS", "Capital Gains",
        ("Contract Notes", "Settlement Statements", "Broker Statements"),
        CategoryPriority.HIGH, 10,
        source="Broker, exchanges", reference=f"{_ATO_INCOME}/capital-gains",
    ),
    _income(
        "FREELANCE", "Freelance/Business Income",
        ("Invoices", "Payment Summaries", "Business Statements"),
        CategoryPriority.MEDIUM, 12,
        source="Your business records", required_when="is_self_employed",
    ),
    _income(
        "TRUST_DISTRIBUTIONS", "Trust Distributions",
        ("Trust Distribution Statements", "AMIT Statements"),
        CategoryPriority.MEDIUM, 8,
        prefill=True, source="Trustee, fund manager",
    ),
    _income(
        "FOREIGN_INCOME", "Foreign Income",
        ("Foreign Income Statements", "Foreign Tax Documents"),
        CategoryPriority.MEDIUM, 5,
        source="Overseas payers",
    ),
    _income(
        "GOVERNMENT_PAYMENTS", "Government Payments",
        ("Centrelink Payment Summaries", "myGov Statements"),
        CategoryPriority.MEDIUM, 20,
        prefill=True, source="Services Australia",
    ),
    _income(
        "SUPER_PENSION", "Superannuation Pension",
        ("Super Fund Payment Summaries",),
        CategoryPriority.LOW, 8,
        prefill=True, treatment=TaxTreatment.CONCESSIONAL, source="Super fund",
    ),
    _income(
        "SUPER_LUMPSUM", "Superannuation Lump Sum",
        ("Super Fund Benefit Statements",),
        CategoryPriority.LOW, 5,
        prefill=True, treatment=TaxTreatment.CONCESSIONAL, source="Super fund",
    ),
    _income(
        "EMPLOYMENT_TERMINATION", "Employment Termination",
        ("ETP Payment Summary", "Redundancy Letter"),
        CategoryPriority.LOW, 3,
        prefill=True, treatment=TaxTreatment.CONCESSIONAL, source="Former employer",
    ),
    _income(
        "ROYALTIES", "Royalties",
        ("Royalty Statements", "License Agreements"),
        CategoryPriority.LOW, 2,
        source="Licensees",
    ),
    _income(
        "OTHER", "Other Income",
        ("Supporting Documentation",),
        CategoryPriority.LOW, 3,
    ),
)

DEDUCTION_CATEGORIES: tuple[TaxCategoryDefinition, ...] = (
    _deduction(
        "D1", "Car Expenses", ("Car Expense Records", "Vehicle Logbook"),
        CategoryPriority.HIGH, 30, "5000",
        slug="cars-transport-and-travel", required_when="has_vehicle",
    ),
    _deduction(
        "D2", "Travel Expenses", ("Travel Receipts",),
        CategoryPriority.HIGH, 10, "3000", slug="cars-transport-and-travel",
    ),
    _deduction(
        "D3", "Clothing & Laundry", ("Clothing and Laundry Receipts",),
        CategoryPriority.MEDIUM, 25, "800", slug="clothing-and-laundry",
    ),
    _deduction(
        "D4", "Self-Education", ("Course Fee Receipts", "Enrolment Statement"),
        CategoryPriority.MEDIUM, 8, "3000",
        source="Education provider", slug="self-education-expenses",
        required_when="is_studying",
    ),
    _deduction(
        "D5", "Other Work Expenses", ("Work Expense Receipts", "Home Office Records"),
        CategoryPriority.HIGH, 45, "2000",
        source="Utility bills, internet receipts", slug="home-office-expenses",
    ),
    _deduction(
        "D6", "Low Value Pool", ("Low Value Pool Asset Register",),
        CategoryPriority.LOW, 3, "1500",
    ),
    _deduction(
        "D7", "Investment Deductions", ("Investment Expense Statements",),
        CategoryPriority.MEDIUM, 12, "2000",
        source="Broker, lender", slug="investments",
    ),
    _deduction(
        "D8", "Gifts & Donations", ("Donation Receipts",),
        CategoryPriority.MEDIUM, 35, "1000",
        source="Registered charities", slug="gifts-and-donations",
    ),
    _deduction(
        "D9", "Cost of Managing Tax", ("Tax Agent Invoices",),
        CategoryPriority.HIGH, 40, "500",
        source="Tax agent", slug="cost-of-managing-tax-affairs",
    ),
    _deduction(
        "D10", "Personal Super Contributions", ("Notice of Intent Acknowledgement",),
        CategoryPriority.MEDIUM, 6, "30000", source="Super fund",
    ),
    _deduction(
        "D11", "Foreign Tax Offset", ("Foreign Tax Statements",),
        CategoryPriority.LOW, 3, "5000", source="Overseas payers",
    ),
    _deduction(
        "D12", "NRAS Offset", ("NRAS Certificate",),
        CategoryPriority.LOW, 1, "10000", source="Approved participant",
    ),
    _deduction(
        "D13", "ESVCLP Offset", ("ESVCLP Statement",),
        CategoryPriority.LOW, 1, "200000", source="Partnership manager",
    ),
    _deduction(
        "D14", "Early Stage Investor Offset", ("ESIC Investment Statement",),
        CategoryPriority.LOW, 1, "200000", source="Investee company",
    ),
    _deduction(
        "D15", "Exploration Credit Offset", ("Exploration Credit Statement",),
        CategoryPriority.LOW, 1, "50000", source="Exploration company",
    ),
)

DEFAULT_CATALOGUE = TaxCategoryCatalogue(
    income=INCOME_CATEGORIES,
    deductions=DEDUCTION_CATEGORIES,
)
