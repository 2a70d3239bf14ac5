from tax_inventory.domain.compliance import (
    COMPLIANCE_LEVELS,
    IMPORT_FIELDS,
    VALIDATION_RULES,
    ComplianceRequirement,
    ImportField,
    ValidationRule,
)
from tax_inventory.domain.depreciation import (
    AssetElection,
    CombinedSchedule,
    CombinedYearTotal,
    DepreciationElection,
    TaxYearRule,
    TrailingGroupSummary,
    YearlyDepreciationResult,
)
from tax_inventory.domain.inventory import ParsedInventoryItem, ValidationWarning
from tax_inventory.domain.macrs_tables import (
    MACRS_TABLES,
    PROPERTY_CLASS_INFO,
    PropertyClassInfo,
    get_macrs_table,
)
from tax_inventory.domain.tax_rules import DEFAULT_TAX_YEAR, TAX_YEAR_RULES
from tax_inventory.domain.value_objects import (
    ComplianceLevel,
    FieldType,
    PropertyClass,
    WarningSeverity,
)

__all__ = [
    "AssetElection",
    "COMPLIANCE_LEVELS",
    "CombinedSchedule",
    "CombinedYearTotal",
    "ComplianceLevel",
    "ComplianceRequirement",
    "DEFAULT_TAX_YEAR",
    "DepreciationElection",
    "FieldType",
    "IMPORT_FIELDS",
    "ImportField",
    "MACRS_TABLES",
    "PROPERTY_CLASS_INFO",
    "ParsedInventoryItem",
    "PropertyClass",
    "PropertyClassInfo",
    "TAX_YEAR_RULES",
    "TaxYearRule",
    "TrailingGroupSummary",
    "VALIDATION_RULES",
    "ValidationRule",
    "ValidationWarning",
    "WarningSeverity",
    "YearlyDepreciationResult",
    "get_macrs_table",
]
