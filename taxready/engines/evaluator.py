"""Category completeness evaluation.

Turns the taxpayer profile and the recorded income/deduction entries into one
checklist item per catalogue category, each with a completeness status and
the action still needed. Pure: the same inputs always give the same items.
"""

from decimal import Decimal

from taxready.engines.catalogue import DEFAULT_CATALOGUE
from taxready.exceptions import InvalidInputError, UnknownCategoryError
from taxready.models.categories import TaxCategoryCatalogue, TaxCategoryDefinition
from taxready.models.checklist import ChecklistItem, ChecklistResult
from taxready.models.enums import CategoryKind, ChecklistStatus
from taxready.models.inputs import DeductionEntry, IncomeEntry, UserTaxProfile

_CATEGORY_LABELS = {
    CategoryKind.INCOME: "Income",
    CategoryKind.DEDUCTION: "Deductions",
}

Entry = IncomeEntry | DeductionEntry


class ChecklistEvaluator:
    """Evaluates every catalogue category against the recorded data."""

    def __init__(self, catalogue: TaxCategoryCatalogue = DEFAULT_CATALOGUE) -> None:
        self.catalogue = catalogue

    def evaluate(
        self,
        profile: UserTaxProfile,
        income_data: dict[str, IncomeEntry],
        deduction_data: dict[str, DeductionEntry],
    ) -> ChecklistResult:
        self._validate(CategoryKind.INCOME, income_data)
        self._validate(CategoryKind.DEDUCTION, deduction_data)

        return ChecklistResult(
            income_checks=[
                self._evaluate_category(d, income_data.get(d.code), profile)
                for d in self.catalogue.income
            ],
            deduction_checks=[
                self._evaluate_category(d, deduction_data.get(d.code), profile)
                for d in self.catalogue.deductions
            ],
        )

    def is_required(
        self, definition: TaxCategoryDefinition, profile: UserTaxProfile
    ) -> bool:
        """Catalogue requirement, or promoted by a profile flag (e.g. has_vehicle -> D1)."""
        if definition.required:
            return True
        if definition.required_when:
            return bool(getattr(profile, definition.required_when, False))
        return False

    def _validate(self, kind: CategoryKind, data: dict[str, Entry]) -> None:
        for code, entry in data.items():
            if self.catalogue.get(kind, code) is None:
                raise UnknownCategoryError(code, kind.value)
            if entry.amount < 0:
                raise InvalidInputError(
                    f"{kind.value}_data.{code}.amount",
                    f"must be 0 or greater, got {entry.amount}",
                )
            if entry.document_count < 0:
                raise InvalidInputError(
                    f"{kind.value}_data.{code}.document_count",
                    f"must be 0 or greater, got {entry.document_count}",
                )

    def _evaluate_category(
        self,
        definition: TaxCategoryDefinition,
        entry: Entry | None,
        profile: UserTaxProfile,
    ) -> ChecklistItem:
        required = (
            definition.code not in profile.excluded_categories
            and self.is_required(definition, profile)
        )
        status, action = self._status_for(definition, entry, required, profile)

        if definition.kind == CategoryKind.DEDUCTION:
            title = f"{definition.code}: {definition.name}"
            description = f"Check {definition.name.lower()} deductions"
        else:
            title = definition.name
            description = f"Check {definition.name.lower()} documentation"

        return ChecklistItem(
            id=definition.item_id,
            code=definition.code,
            kind=definition.kind,
            category=_CATEGORY_LABELS[definition.kind],
            title=title,
            description=description,
            required=required,
            priority=definition.priority,
            status=status,
            action_needed=action,
            action_link=definition.action_link or None,
            claimed_amount=entry.amount if entry else Decimal("0"),
            documents_attached=entry.document_count if entry else 0,
            document_types=list(definition.document_types),
            prefill_available=definition.prefill_available,
            ato_reference=definition.ato_reference,
        )

    def _status_for(
        self,
        definition: TaxCategoryDefinition,
        entry: Entry | None,
        required: bool,
        profile: UserTaxProfile,
    ) -> tuple[ChecklistStatus, str | None]:
        if definition.code in profile.excluded_categories:
            return ChecklistStatus.NOT_APPLICABLE, None

        if entry is None:
            if required:
                return ChecklistStatus.MISSING, self._missing_action(definition)
            return ChecklistStatus.NOT_APPLICABLE, None

        has_documents = entry.document_count > 0
        if entry.amount == 0:
            if not has_documents:
                return ChecklistStatus.MISSING, self._missing_action(definition)
            return ChecklistStatus.PARTIAL, "Enter the amount shown on your documents"

        if not self._is_substantiated(definition, entry):
            if definition.kind == CategoryKind.DEDUCTION and entry.workpaper_complete is False:
                return ChecklistStatus.PARTIAL, "Complete workpaper"
            return ChecklistStatus.PARTIAL, "Upload supporting documents"

        return ChecklistStatus.COMPLETE, None

    @staticmethod
    def _is_substantiated(definition: TaxCategoryDefinition, entry: Entry) -> bool:
        if definition.kind == CategoryKind.DEDUCTION and entry.workpaper_complete is not None:
            return entry.workpaper_complete
        return entry.document_count >= 1

    @staticmethod
    def _missing_action(definition: TaxCategoryDefinition) -> str:
        if definition.kind == CategoryKind.INCOME:
            return "Add income details"
        return "Record the claim amount"
