"""Inventory register records produced by the import pipeline."""

from dataclasses import asdict, dataclass, field
from decimal import Decimal
from typing import Any

from tax_inventory.domain.value_objects import ComplianceLevel, WarningSeverity


@dataclass(frozen=True, slots=True)
class ValidationWarning:
    """Advisory finding attached to an item or election."""

    field: str
    message: str
    severity: WarningSeverity
    irs_reference: str | None = None

    @property
    def is_error(self) -> bool:
        return self.severity == WarningSeverity.ERROR


@dataclass
class ParsedInventoryItem:
    """Validated, depreciation-annotated inventory record.

    Attributes:
        id: Receipt reference when supplied, otherwise a generated internal ID
        product_name: Item description
        acquisition_date: ISO date the item was acquired/ordered
        cost_basis: Cost or Estimated Tax Value (ETV)
        source: Where the item came from (Amazon Vine, Temu, ...)
        receipt_reference: Order number or receipt reference
        asin: Amazon ASIN or SKU
        category: Free-text category used for property classification
        quantity: Number of units
        donation_eligible_date: ISO date after the donation holding period
        depreciation_class: Display name of the MACRS property class
        first_year_depreciation: First-year total deduction
        depreciated_value_year1: Book value at the end of the first year
        compliance_level: Documentation completeness tier
        validation_warnings: Advisory findings
        selected: Whether the item is pre-selected for saving
    """

    id: str
    product_name: str
    acquisition_date: str
    cost_basis: Decimal
    source: str
    receipt_reference: str
    asin: str | None = None
    category: str | None = None
    quantity: int = 1
    donation_eligible_date: str = ""
    depreciation_class: str = ""
    first_year_depreciation: Decimal = Decimal("0")
    depreciated_value_year1: Decimal = Decimal("0")
    compliance_level: ComplianceLevel = ComplianceLevel.MINIMAL
    validation_warnings: list[ValidationWarning] = field(default_factory=list)
    selected: bool = True

    @property
    def has_errors(self) -> bool:
        return any(w.is_error for w in self.validation_warnings)

    @property
    def dedup_key(self) -> str:
        """Natural key: ASIN when present, else product name plus date."""
        if self.asin:
            return self.asin
        return f"{self.product_name}-{self.acquisition_date}"

    def to_dict(self) -> dict[str, Any]:
        """Serialize for the persistence collaborator (JSON-safe values)."""
        data = asdict(self)
        data["cost_basis"] = str(self.cost_basis)
        data["first_year_depreciation"] = str(self.first_year_depreciation)
        data["depreciated_value_year1"] = str(self.depreciated_value_year1)
        data["compliance_level"] = self.compliance_level.value
        data["validation_warnings"] = [
            {
                "field": w.field,
                "message": w.message,
                "severity": w.severity.value,
                "irs_reference": w.irs_reference,
            }
            for w in self.validation_warnings
        ]
        return data
