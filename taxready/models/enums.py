"""Enumerations for taxready."""

from enum import StrEnum


class CategoryKind(StrEnum):
    INCOME = "income"
    DEDUCTION = "deduction"


class ChecklistStatus(StrEnum):
    COMPLETE = "complete"
    PARTIAL = "partial"
    MISSING = "missing"
    NOT_APPLICABLE = "not_applicable"


class CategoryPriority(StrEnum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class DocumentPriority(StrEnum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class SuggestionPriority(StrEnum):
    CRITICAL = "critical"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class ColorStatus(StrEnum):
    RED = "red"
    AMBER = "amber"
    GREEN = "green"


class RiskLevel(StrEnum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class FactorImpact(StrEnum):
    POSITIVE = "positive"
    NEGATIVE = "negative"
    NEUTRAL = "neutral"


class TaxTreatment(StrEnum):
    TAXABLE = "taxable"
    TAX_FREE = "tax_free"
    CONCESSIONAL = "concessional"
    DEFERRED = "deferred"
    EXEMPT = "exempt"


class EmploymentType(StrEnum):
    FULL_TIME = "full-time"
    PART_TIME = "part-time"
    CASUAL = "casual"
    CONTRACTOR = "contractor"
    SELF_EMPLOYED = "self-employed"


class WorkArrangement(StrEnum):
    OFFICE = "office"
    HYBRID = "hybrid"
    REMOTE = "remote"
    MIXED = "mixed"


class InvestmentType(StrEnum):
    SHARES = "shares"
    PROPERTY = "property"
    CRYPTO = "crypto"
    BONDS = "bonds"
    OTHER = "other"


class OverrideKind(StrEnum):
    STATUS = "status"
    IMPLEMENTED = "implemented"
    DISMISSED = "dismissed"
