"""Missing supporting document detection.

Two sources of missing documents:
  - Checklist items still partial or missing: the category's primary
    supporting document is requested.
  - Patterns in the data: documents the taxpayer very likely holds but has not
    provided, e.g. last year's dividend payer sending a statement again.

The result holds one entry per document type, highest priority first.
"""

from decimal import Decimal

from taxready.engines.catalogue import DEFAULT_CATALOGUE
from taxready.models.categories import TaxCategoryCatalogue
from taxready.models.checklist import ChecklistItem, MissingDocument
from taxready.models.enums import CategoryPriority, ChecklistStatus, DocumentPriority
from taxready.models.inputs import DeductionEntry, IncomeEntry, UserTaxProfile

PRIORITY_RANK = {
    DocumentPriority.HIGH: 0,
    DocumentPriority.MEDIUM: 1,
    DocumentPriority.LOW: 2,
}

# Pattern thresholds
PRIOR_INTEREST_MIN = Decimal("100")
VEHICLE_LOGBOOK_CLAIM = Decimal("2000")
VEHICLE_LOGBOOK_MIN_DOCUMENTS = 2
HOME_OFFICE_MIN_DOCUMENTS = 3


def _money(amount: Decimal) -> str:
    return f"${amount:,.0f}"


class MissingDocumentDetector:
    """Derives the list of supporting documents still outstanding."""

    def __init__(self, catalogue: TaxCategoryCatalogue = DEFAULT_CATALOGUE) -> None:
        self.catalogue = catalogue

    def detect(
        self,
        profile: UserTaxProfile,
        items: list[ChecklistItem],
        income_data: dict[str, IncomeEntry],
        deduction_data: dict[str, DeductionEntry],
    ) -> list[MissingDocument]:
        found = self._from_items(items)
        found.extend(self._from_patterns(profile, items, income_data, deduction_data))
        return self._collapse(found)

    def _from_items(self, items: list[ChecklistItem]) -> list[MissingDocument]:
        documents = []
        for item in items:
            if not item.is_outstanding or not item.document_types:
                continue
            definition = self.catalogue.get(item.kind, item.code)
            if item.required:
                priority = DocumentPriority.HIGH
            elif item.priority == CategoryPriority.LOW:
                priority = DocumentPriority.LOW
            else:
                priority = DocumentPriority.MEDIUM

            if item.status == ChecklistStatus.MISSING:
                reason = f"{item.title} has not been reported"
            else:
                reason = f"{item.title} is not fully substantiated"

            documents.append(
                MissingDocument(
                    id=f"missing-{item.id}",
                    document_type=item.document_types[0],
                    description=f"Supporting documents for {item.title}",
                    expected_source=definition.expected_source if definition else "",
                    detection_reason=reason,
                    priority=priority,
                    category_code=item.code,
                )
            )
        return documents

    def _from_patterns(
        self,
        profile: UserTaxProfile,
        items: list[ChecklistItem],
        income_data: dict[str, IncomeEntry],
        deduction_data: dict[str, DeductionEntry],
    ) -> list[MissingDocument]:
        by_code = {item.code: item for item in items}

        def settled(code: str) -> bool:
            # Excluded by the user, or manually confirmed complete.
            item = by_code.get(code)
            if code in profile.excluded_categories:
                return True
            return item is not None and item.overridden and item.status == ChecklistStatus.COMPLETE

        documents = []

        dividends = income_data.get("DIVIDENDS")
        if (
            dividends is not None
            and dividends.prior_year_amount
            and dividends.prior_year_amount > 0
            and dividends.amount == 0
            and not settled("DIVIDENDS")
        ):
            documents.append(
                MissingDocument(
                    id="missing-dividends",
                    document_type="Dividend Statements",
                    description="Expected dividend income based on previous year",
                    expected_source="Computershare, Link Market Services",
                    detection_reason=(
                        f"Last year you reported {_money(dividends.prior_year_amount)} in dividends"
                    ),
                    priority=DocumentPriority.HIGH,
                    pattern_based=True,
                    category_code="DIVIDENDS",
                )
            )

        interest = income_data.get("INTEREST")
        if (
            interest is not None
            and interest.prior_year_amount is not None
            and interest.prior_year_amount > PRIOR_INTEREST_MIN
            and interest.amount == 0
            and not settled("INTEREST")
        ):
            documents.append(
                MissingDocument(
                    id="missing-interest",
                    document_type="Bank Interest Summaries",
                    description="Expected interest income based on previous year",
                    expected_source="Your banks",
                    detection_reason=(
                        f"Last year you earned {_money(interest.prior_year_amount)} in interest"
                    ),
                    priority=DocumentPriority.MEDIUM,
                    pattern_based=True,
                    category_code="INTEREST",
                )
            )

        car = deduction_data.get("D1")
        if (
            car is not None
            and car.amount > VEHICLE_LOGBOOK_CLAIM
            and car.document_count < VEHICLE_LOGBOOK_MIN_DOCUMENTS
            and not settled("D1")
        ):
            documents.append(
                MissingDocument(
                    id="missing-logbook",
                    document_type="Vehicle Logbook",
                    description="Logbook required for vehicle expense claims over $2,000",
                    expected_source="Your records",
                    detection_reason="Vehicle expenses over $2,000 require logbook documentation",
                    priority=DocumentPriority.HIGH,
                    pattern_based=True,
                    category_code="D1",
                )
            )

        if profile.works_from_home and not settled("D5"):
            home_office = deduction_data.get("D5")
            records = home_office.document_count if home_office else 0
            if records < HOME_OFFICE_MIN_DOCUMENTS:
                documents.append(
                    MissingDocument(
                        id="missing-wfh",
                        document_type="WFH Expense Records",
                        description="Work from home expense documentation",
                        expected_source="Utility bills, internet receipts",
                        detection_reason="You work from home but have limited WFH documentation",
                        priority=DocumentPriority.MEDIUM,
                        pattern_based=True,
                        category_code="D5",
                    )
                )

        capital_gains = by_code.get("CAPITAL_GAINS")
        if profile.holds_crypto and not (
            capital_gains is not None and capital_gains.status == ChecklistStatus.COMPLETE
        ):
            documents.append(
                MissingDocument(
                    id="missing-crypto",
                    document_type="Cryptocurrency Transaction Records",
                    description="All crypto buy/sell/trade transactions",
                    expected_source="Exchanges, wallets",
                    detection_reason="Crypto investments require complete transaction history",
                    priority=DocumentPriority.HIGH,
                    pattern_based=True,
                    category_code="CAPITAL_GAINS",
                )
            )

        return documents

    @staticmethod
    def _collapse(documents: list[MissingDocument]) -> list[MissingDocument]:
        """Keep one entry per document type, then sort high to low.

        The highest priority wins; on a tie a pattern detection replaces the
        generic item request since its reason is more specific.
        """
        best: dict[str, MissingDocument] = {}
        for doc in documents:
            current = best.get(doc.document_type)
            if current is None:
                best[doc.document_type] = doc
                continue
            rank, current_rank = PRIORITY_RANK[doc.priority], PRIORITY_RANK[current.priority]
            if rank < current_rank or (
                rank == current_rank and doc.pattern_based and not current.pattern_based
            ):
                best[doc.document_type] = doc
        return sorted(best.values(), key=lambda d: PRIORITY_RANK[d.priority])
