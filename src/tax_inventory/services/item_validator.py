"""Advisory validation of inventory records and depreciation elections.

Validation never raises: every finding is returned as a ValidationWarning
so a partially filled record can still be previewed and saved.
"""

from collections.abc import Mapping
from decimal import Decimal, InvalidOperation
from typing import Any

from tax_inventory.domain.compliance import (
    ACQUISITION_DATE_REFERENCE,
    APPRAISAL_THRESHOLD,
    BONUS_DEPRECIATION_REFERENCE,
    COMPLIANCE_LEVELS,
    COST_BASIS_REFERENCE,
    FORM_8283_THRESHOLD,
    SECTION_179_REFERENCE,
)
from tax_inventory.domain.depreciation import DepreciationElection, TaxYearRule
from tax_inventory.domain.inventory import ValidationWarning
from tax_inventory.domain.value_objects import ComplianceLevel, WarningSeverity
from tax_inventory.services.tax_rules import get_tax_year_rule


def _field(item: Any, name: str) -> Any:
    if isinstance(item, Mapping):
        return item.get(name)
    return getattr(item, name, None)


def _amount(value: Any) -> Decimal | None:
    if value is None or value == "":
        return None
    try:
        amount = value if isinstance(value, Decimal) else Decimal(str(value))
    except InvalidOperation:
        return None
    return amount if amount.is_finite() else None


def validate_item(item: Any) -> list[ValidationWarning]:
    """Validate an inventory record and return its warnings.

    Works on raw parser records, ParsedInventoryItem instances or plain
    mappings; missing attributes count as missing fields.

    Args:
        item: Record to validate.

    Returns:
        Warnings in a stable order: required fields first, then the donation
        filing thresholds.
    """
    warnings: list[ValidationWarning] = []

    if not _field(item, "product_name"):
        warnings.append(
            ValidationWarning(
                field="product_name",
                message="Product name is required",
                severity=WarningSeverity.ERROR,
            )
        )

    if not _field(item, "acquisition_date"):
        warnings.append(
            ValidationWarning(
                field="acquisition_date",
                message="Acquisition date required for depreciation calculations",
                severity=WarningSeverity.WARNING,
                irs_reference=ACQUISITION_DATE_REFERENCE,
            )
        )

    cost_basis = _amount(_field(item, "cost_basis"))
    if cost_basis is None or cost_basis <= 0:
        warnings.append(
            ValidationWarning(
                field="cost_basis",
                message="Cost basis required for tax deductions",
                severity=WarningSeverity.WARNING,
                irs_reference=COST_BASIS_REFERENCE,
            )
        )
        return warnings

    if FORM_8283_THRESHOLD.amount is not None and cost_basis >= FORM_8283_THRESHOLD.amount:
        warnings.append(
            ValidationWarning(
                field="cost_basis",
                message=f"Items over ${FORM_8283_THRESHOLD.amount} require Form 8283 for donation",
                severity=WarningSeverity.INFO,
                irs_reference=FORM_8283_THRESHOLD.irs_reference,
            )
        )

    if APPRAISAL_THRESHOLD.amount is not None and cost_basis >= APPRAISAL_THRESHOLD.amount:
        warnings.append(
            ValidationWarning(
                field="cost_basis",
                message=f"Items over ${APPRAISAL_THRESHOLD.amount} require qualified appraisal",
                severity=WarningSeverity.WARNING,
                irs_reference=APPRAISAL_THRESHOLD.irs_reference,
            )
        )

    return warnings


def determine_compliance_level(item: Any) -> ComplianceLevel:
    """Highest compliance tier whose required fields are all present."""
    for requirement in reversed(COMPLIANCE_LEVELS):
        if all(_field(item, name) for name in requirement.required):
            return requirement.level
    return COMPLIANCE_LEVELS[0].level


def validate_election(
    election: DepreciationElection,
    rule: TaxYearRule | None = None,
) -> list[ValidationWarning]:
    """Report out-of-range depreciation elections.

    The schedule calculator clamps these values; this surfaces the same
    conditions so a caller can show them before computing.

    Args:
        election: Election to check.
        rule: Tax-year rule for the Section 179 limit; defaults to the rule
            for the election's purchase year.

    Returns:
        Error warnings for impossible values, a warning when Section 179
        exceeds the year's dollar limit.
    """
    rule = rule or get_tax_year_rule(election.purchase_year)
    warnings: list[ValidationWarning] = []

    cost = election.original_cost
    section_179 = election.section_179_amount
    bonus = election.bonus_depreciation_percent

    if cost < 0:
        warnings.append(
            ValidationWarning(
                field="original_cost",
                message="Original cost cannot be negative",
                severity=WarningSeverity.ERROR,
                irs_reference=COST_BASIS_REFERENCE,
            )
        )

    if section_179 < 0:
        warnings.append(
            ValidationWarning(
                field="section_179_amount",
                message="Section 179 amount cannot be negative",
                severity=WarningSeverity.ERROR,
                irs_reference=SECTION_179_REFERENCE,
            )
        )
    elif section_179 > max(cost, Decimal("0")):
        warnings.append(
            ValidationWarning(
                field="section_179_amount",
                message="Section 179 amount cannot exceed the original cost",
                severity=WarningSeverity.ERROR,
                irs_reference=SECTION_179_REFERENCE,
            )
        )

    if section_179 > rule.section_179_limit:
        warnings.append(
            ValidationWarning(
                field="section_179_amount",
                message=(
                    f"Section 179 amount exceeds the {rule.tax_year} limit of "
                    f"${rule.section_179_limit:,}"
                ),
                severity=WarningSeverity.WARNING,
                irs_reference=SECTION_179_REFERENCE,
            )
        )

    if bonus < 0 or bonus > 100:
        warnings.append(
            ValidationWarning(
                field="bonus_depreciation_percent",
                message="Bonus depreciation percent must be between 0 and 100",
                severity=WarningSeverity.ERROR,
                irs_reference=BONUS_DEPRECIATION_REFERENCE,
            )
        )

    return warnings
