"""Custom exceptions for taxready."""


class TaxComputationError(Exception):
    """Base exception for tax computation errors."""


class InvalidInputError(TaxComputationError):
    """Raised when an input value violates the calculation contract."""

    def __init__(self, field: str, message: str):
        self.field = field
        super().__init__(f"Invalid input for '{field}': {message}")


class UnknownCategoryError(InvalidInputError):
    """Raised when income or deduction data references an unknown category code."""

    def __init__(self, code: str, kind: str):
        self.code = code
        self.kind = kind
        super().__init__(f"{kind}_data", f"unknown {kind} category code {code!r}")


class UnsupportedTaxYearError(TaxComputationError):
    """Raised when no rate table exists for the requested tax year."""

    def __init__(self, tax_year: int):
        self.tax_year = tax_year
        super().__init__(f"No rate tables for tax year {tax_year}")
