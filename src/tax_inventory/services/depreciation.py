"""MACRS depreciation schedule calculator.

Computes year-by-year depreciation for a single asset honoring Section 179
expensing and bonus depreciation:

1. Section 179 is taken off the cost first.
2. Bonus depreciation applies to the basis remaining after Section 179.
3. Regular MACRS percentages apply to what is left after bonus.

The first year's total deduction includes the Section 179 and bonus amounts.
The schedule stops after the first year whose ending book value is zero.
No currency rounding is performed; callers round for display.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from dateutil.parser import isoparse  # type: ignore[import-untyped]

from tax_inventory.domain.depreciation import (
    DepreciationElection,
    TaxYearRule,
    YearlyDepreciationResult,
)
from tax_inventory.domain.macrs_tables import PROPERTY_CLASS_INFO, get_macrs_table
from tax_inventory.domain.value_objects import PropertyClass
from tax_inventory.logging_config import get_logger
from tax_inventory.services.property_classifier import classify_property
from tax_inventory.services.tax_rules import get_tax_year_rule

logger = get_logger(__name__)

ZERO = Decimal("0")
HUNDRED = Decimal("100")

# Category assumed when an imported item has none
DEFAULT_ITEM_CATEGORY = "equipment"


def _decimal(value: Decimal | int | float | str) -> Decimal:
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def _clamp_election(
    cost: Decimal, section_179_amount: Decimal, bonus_percent: Decimal
) -> tuple[Decimal, Decimal, Decimal]:
    """Clamp out-of-range elections into their legal ranges.

    Negative cost becomes 0, Section 179 is bounded by [0, cost] and the
    bonus percent by [0, 100]. Each adjustment is logged.
    """
    clamped_cost = max(ZERO, cost)
    clamped_179 = min(max(ZERO, section_179_amount), clamped_cost)
    clamped_bonus = min(max(ZERO, bonus_percent), HUNDRED)

    if (clamped_cost, clamped_179, clamped_bonus) != (cost, section_179_amount, bonus_percent):
        logger.warning(
            "election_clamped",
            original_cost=str(cost),
            section_179_amount=str(section_179_amount),
            bonus_percent=str(bonus_percent),
            clamped_cost=str(clamped_cost),
            clamped_section_179_amount=str(clamped_179),
            clamped_bonus_percent=str(clamped_bonus),
        )
    return clamped_cost, clamped_179, clamped_bonus


def depreciation_schedule(
    cost: Decimal | int | float | str,
    purchase_year: int,
    property_class: PropertyClass | str = PropertyClass.FIVE_YEAR,
    section_179_amount: Decimal | int | float | str = ZERO,
    bonus_percent: Decimal | int | float | str = ZERO,
) -> list[YearlyDepreciationResult]:
    """Compute the full depreciation schedule for one asset.

    Args:
        cost: Original cost basis.
        purchase_year: Tax year the asset was placed in service.
        property_class: MACRS class (unknown keys use the 5-year table).
        section_179_amount: Section 179 expense elected in the first year.
        bonus_percent: Bonus depreciation rate (0-100) on basis after 179.

    Returns:
        One YearlyDepreciationResult per tax year, in order.
    """
    original_cost, section_179, bonus_rate = _clamp_election(
        _decimal(cost), _decimal(section_179_amount), _decimal(bonus_percent)
    )
    table = get_macrs_table(property_class)

    basis_after_179 = original_cost - section_179
    bonus_amount = basis_after_179 * bonus_rate / HUNDRED
    macrs_basis = basis_after_179 - bonus_amount

    results: list[YearlyDepreciationResult] = []
    cumulative = ZERO

    for index, percent in enumerate(table):
        regular = macrs_basis * percent / HUNDRED
        year_179 = section_179 if index == 0 else ZERO
        year_bonus = bonus_amount if index == 0 else ZERO
        total = regular + year_179 + year_bonus

        cumulative += total
        ending_book_value = max(ZERO, original_cost - cumulative)

        results.append(
            YearlyDepreciationResult(
                year=purchase_year + index,
                depreciation_percent=percent,
                depreciation_amount=regular,
                section_179_amount=year_179,
                bonus_amount=year_bonus,
                total_deduction=total,
                cumulative_depreciation=cumulative,
                ending_book_value=ending_book_value,
            )
        )

        if ending_book_value <= ZERO:
            break

    return results


def schedule_for_election(election: DepreciationElection) -> list[YearlyDepreciationResult]:
    """Compute the schedule for a DepreciationElection value object."""
    return depreciation_schedule(
        election.original_cost,
        election.purchase_year,
        election.property_class,
        election.section_179_amount,
        election.bonus_depreciation_percent,
    )


def section_179_full_expense(
    cost: Decimal | int | float | str,
    purchase_year: int,
    property_class: PropertyClass | str = PropertyClass.FIVE_YEAR,
    tax_year: int | None = None,
    rules: Mapping[int, TaxYearRule] | None = None,
) -> list[YearlyDepreciationResult]:
    """Expense as much of the cost as the Section 179 limit allows.

    Cost above the tax year's limit is recovered through regular MACRS.
    The tax year defaults to the purchase year.
    """
    original_cost = _decimal(cost)
    rule = get_tax_year_rule(tax_year if tax_year is not None else purchase_year, rules)
    deductible = min(max(ZERO, original_cost), rule.section_179_limit)
    return depreciation_schedule(
        original_cost, purchase_year, property_class, section_179_amount=deductible
    )


def bonus_depreciation_schedule(
    cost: Decimal | int | float | str,
    purchase_year: int,
    bonus_percent: Decimal | int | float | str = HUNDRED,
    property_class: PropertyClass | str = PropertyClass.FIVE_YEAR,
) -> list[YearlyDepreciationResult]:
    """Schedule with bonus depreciation only (100% by default)."""
    return depreciation_schedule(cost, purchase_year, property_class, ZERO, bonus_percent)


def compare_elections(
    cost: Decimal | int | float | str,
    purchase_year: int,
    property_class: PropertyClass | str = PropertyClass.FIVE_YEAR,
    tax_year: int | None = None,
    rules: Mapping[int, TaxYearRule] | None = None,
) -> dict[str, list[YearlyDepreciationResult]]:
    """Regular MACRS, full Section 179 and the tax year's bonus side by side."""
    rule = get_tax_year_rule(tax_year if tax_year is not None else purchase_year, rules)
    return {
        "macrs": depreciation_schedule(cost, purchase_year, property_class),
        "section_179": section_179_full_expense(
            cost, purchase_year, property_class, rule.tax_year, rules
        ),
        "bonus": bonus_depreciation_schedule(
            cost, purchase_year, rule.bonus_depreciation_percent, property_class
        ),
    }


@dataclass(frozen=True, slots=True)
class ItemDepreciation:
    """Depreciation fields derived for an imported inventory item."""

    property_class: PropertyClass
    depreciation_class: str
    first_year_depreciation: Decimal
    depreciated_value_year1: Decimal


def _purchase_year(acquisition_date: date | str | None, today: date) -> int:
    if isinstance(acquisition_date, date):
        return acquisition_date.year
    if acquisition_date:
        try:
            return isoparse(acquisition_date).year
        except ValueError:
            pass
    return today.year


def item_depreciation(
    cost_basis: Decimal | int | float | str,
    category: str | None,
    acquisition_date: date | str | None,
    bonus_percent: Decimal | int | float | str = HUNDRED,
    today: date | None = None,
) -> ItemDepreciation:
    """Derive the depreciation class and first-year figures for an item.

    Items without a category are classified as equipment. An unparseable or
    missing acquisition date uses the current year.
    """
    property_class = classify_property(category or DEFAULT_ITEM_CATEGORY)
    year = _purchase_year(acquisition_date, today or date.today())
    basis = _decimal(cost_basis)

    schedule = depreciation_schedule(basis, year, property_class, ZERO, bonus_percent)
    if schedule:
        first_year = schedule[0].total_deduction
        remaining = schedule[0].ending_book_value
    else:
        first_year, remaining = max(ZERO, basis), ZERO

    return ItemDepreciation(
        property_class=property_class,
        depreciation_class=PROPERTY_CLASS_INFO[property_class].name,
        first_year_depreciation=first_year,
        depreciated_value_year1=remaining,
    )
