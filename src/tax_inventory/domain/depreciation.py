"""Depreciation value objects: elections, yearly schedule rows and aggregates."""

from dataclasses import dataclass, field
from decimal import Decimal

from tax_inventory.domain.value_objects import PropertyClass


def _to_decimal(value: Decimal | int | float | str) -> Decimal:
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


@dataclass(frozen=True, slots=True)
class TaxYearRule:
    """Statutory limits for one tax year."""

    tax_year: int
    section_179_limit: Decimal
    section_179_phaseout_start: Decimal
    bonus_depreciation_percent: Decimal
    bonus_description: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "section_179_limit", _to_decimal(self.section_179_limit))
        object.__setattr__(
            self, "section_179_phaseout_start", _to_decimal(self.section_179_phaseout_start)
        )
        object.__setattr__(
            self, "bonus_depreciation_percent", _to_decimal(self.bonus_depreciation_percent)
        )


@dataclass(frozen=True, slots=True)
class DepreciationElection:
    """Per-asset depreciation inputs.

    Attributes:
        original_cost: Depreciable cost basis (>= 0)
        purchase_year: Tax year the asset was placed in service
        property_class: MACRS recovery class
        section_179_amount: Amount expensed under Section 179 (0..original_cost)
        bonus_depreciation_percent: Bonus rate applied after Section 179 (0..100)
    """

    original_cost: Decimal
    purchase_year: int
    property_class: PropertyClass = PropertyClass.FIVE_YEAR
    section_179_amount: Decimal = Decimal("0")
    bonus_depreciation_percent: Decimal = Decimal("0")

    def __post_init__(self) -> None:
        object.__setattr__(self, "original_cost", _to_decimal(self.original_cost))
        object.__setattr__(self, "section_179_amount", _to_decimal(self.section_179_amount))
        object.__setattr__(
            self, "bonus_depreciation_percent", _to_decimal(self.bonus_depreciation_percent)
        )
        object.__setattr__(self, "property_class", PropertyClass.from_key(self.property_class))


@dataclass(frozen=True, slots=True)
class AssetElection:
    """A named election, the input unit for multi-asset aggregation."""

    name: str
    election: DepreciationElection

    @property
    def original_cost(self) -> Decimal:
        return self.election.original_cost


@dataclass(frozen=True, slots=True)
class YearlyDepreciationResult:
    """One row of a depreciation schedule.

    depreciation_amount is the regular MACRS portion only; section_179_amount
    and bonus_amount are non-zero in the first year only. total_deduction is
    the sum of the three.
    """

    year: int
    depreciation_percent: Decimal
    depreciation_amount: Decimal
    section_179_amount: Decimal
    bonus_amount: Decimal
    total_deduction: Decimal
    cumulative_depreciation: Decimal
    ending_book_value: Decimal


@dataclass
class CombinedYearTotal:
    """Aggregated depreciation for one tax year across several assets."""

    total_depreciation: Decimal = Decimal("0")
    total_cumulative: Decimal = Decimal("0")
    total_book_value: Decimal = Decimal("0")


@dataclass
class CombinedSchedule:
    """Per-asset schedules plus their by-year aggregate."""

    per_asset: dict[str, list[YearlyDepreciationResult]] = field(default_factory=dict)
    combined: dict[int, CombinedYearTotal] = field(default_factory=dict)
    total_original_cost: Decimal = Decimal("0")

    @property
    def years(self) -> list[int]:
        return sorted(self.combined)


@dataclass
class TrailingGroupSummary:
    """Depreciation overview for a named group of similar products."""

    group_name: str
    asset_count: int
    total_cost: Decimal
    first_year_deduction: Decimal
    schedule: CombinedSchedule
