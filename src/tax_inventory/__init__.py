from tax_inventory.domain.depreciation import (
    AssetElection,
    DepreciationElection,
    TaxYearRule,
    YearlyDepreciationResult,
)
from tax_inventory.domain.inventory import ParsedInventoryItem, ValidationWarning
from tax_inventory.domain.value_objects import (
    ComplianceLevel,
    PropertyClass,
    WarningSeverity,
)
from tax_inventory.services.aggregation import combined_schedule
from tax_inventory.services.depreciation import depreciation_schedule
from tax_inventory.services.inventory_import import parse_inventory_content
from tax_inventory.services.item_validator import validate_item
from tax_inventory.services.property_classifier import classify_property

__all__ = [
    "AssetElection",
    "ComplianceLevel",
    "DepreciationElection",
    "ParsedInventoryItem",
    "PropertyClass",
    "TaxYearRule",
    "ValidationWarning",
    "WarningSeverity",
    "YearlyDepreciationResult",
    "classify_property",
    "combined_schedule",
    "depreciation_schedule",
    "parse_inventory_content",
    "validate_item",
]

__version__ = "0.1.0"
