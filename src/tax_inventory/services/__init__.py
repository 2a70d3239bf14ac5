from tax_inventory.services.aggregation import (
    combined_schedule,
    trailing_group_comparison,
)
from tax_inventory.services.depreciation import (
    ItemDepreciation,
    bonus_depreciation_schedule,
    compare_elections,
    depreciation_schedule,
    item_depreciation,
    schedule_for_election,
    section_179_full_expense,
)
from tax_inventory.services.inventory_import import (
    InventoryImportService,
    deduplicate,
    donation_eligible_date,
    generate_internal_id,
    parse_inventory_content,
)
from tax_inventory.services.item_validator import (
    determine_compliance_level,
    validate_election,
    validate_item,
)
from tax_inventory.services.property_classifier import (
    ClassificationRule,
    PropertyClassifier,
    classify_property,
)
from tax_inventory.services.tax_rules import (
    active_tax_rules,
    get_tax_year_rule,
    load_tax_rules,
    section_179_limit,
)

__all__ = [
    "ClassificationRule",
    "InventoryImportService",
    "ItemDepreciation",
    "PropertyClassifier",
    "active_tax_rules",
    "bonus_depreciation_schedule",
    "classify_property",
    "combined_schedule",
    "compare_elections",
    "deduplicate",
    "depreciation_schedule",
    "determine_compliance_level",
    "donation_eligible_date",
    "generate_internal_id",
    "get_tax_year_rule",
    "item_depreciation",
    "load_tax_rules",
    "parse_inventory_content",
    "schedule_for_election",
    "section_179_full_expense",
    "section_179_limit",
    "trailing_group_comparison",
    "validate_election",
    "validate_item",
]
