"""IRS MACRS percentage tables (Pub 946, Appendix A, Table A-1).

GDS, half-year convention. 3/5/7/10-year property uses 200% declining
balance; 15-year property uses 150% declining balance. Percentages are
expressed out of 100 and each table sums to 100.00.
"""

from dataclasses import dataclass
from decimal import Decimal
from types import MappingProxyType

from tax_inventory.domain.value_objects import PropertyClass


def _table(*percentages: str) -> tuple[Decimal, ...]:
    return tuple(Decimal(p) for p in percentages)


MACRS_3_YEAR = _table("33.33", "44.45", "14.81", "7.41")

MACRS_5_YEAR = _table("20.00", "32.00", "19.20", "11.52", "11.52", "5.76")

MACRS_7_YEAR = _table(
    "14.29", "24.49", "17.49", "12.49", "8.93", "8.92", "8.93", "4.46"
)

MACRS_10_YEAR = _table(
    "10.00", "18.00", "14.40", "11.52", "9.22", "7.37",
    "6.55", "6.55", "6.56", "6.55", "3.28",
)

MACRS_15_YEAR = _table(
    "5.00", "9.50", "8.55", "7.70", "6.93", "6.23", "5.90", "5.90",
    "5.91", "5.90", "5.91", "5.90", "5.91", "5.90", "5.91", "2.95",
)

MACRS_TABLES: MappingProxyType[PropertyClass, tuple[Decimal, ...]] = MappingProxyType(
    {
        PropertyClass.THREE_YEAR: MACRS_3_YEAR,
        PropertyClass.FIVE_YEAR: MACRS_5_YEAR,
        PropertyClass.SEVEN_YEAR: MACRS_7_YEAR,
        PropertyClass.TEN_YEAR: MACRS_10_YEAR,
        PropertyClass.FIFTEEN_YEAR: MACRS_15_YEAR,
    }
)


def get_macrs_table(property_class: PropertyClass | str | None) -> tuple[Decimal, ...]:
    """Return the percentage table for a property class.

    Unknown keys fall back to the 5-year table.
    """
    return MACRS_TABLES[PropertyClass.from_key(property_class)]


@dataclass(frozen=True, slots=True)
class PropertyClassInfo:
    name: str
    description: str
    examples: tuple[str, ...]


PROPERTY_CLASS_INFO: MappingProxyType[PropertyClass, PropertyClassInfo] = MappingProxyType(
    {
        PropertyClass.THREE_YEAR: PropertyClassInfo(
            name="3-Year Property",
            description="Special tools, certain manufacturing equipment",
            examples=("Tractor units for over-the-road use", "Race horses over 2 years old"),
        ),
        PropertyClass.FIVE_YEAR: PropertyClassInfo(
            name="5-Year Property",
            description="Computers, office equipment, vehicles, scientific equipment",
            examples=(
                "Computers",
                "Printers",
                "Telescopes",
                "Automobiles",
                "Light trucks",
                "Vending equipment",
            ),
        ),
        PropertyClass.SEVEN_YEAR: PropertyClassInfo(
            name="7-Year Property",
            description="Office furniture, agricultural machinery, appliances",
            examples=(
                "Tractors",
                "Farm equipment",
                "Office furniture",
                "Kitchen appliances",
                "Air fryers",
            ),
        ),
        PropertyClass.TEN_YEAR: PropertyClassInfo(
            name="10-Year Property",
            description="Vessels, single-purpose agricultural structures",
            examples=("Boats", "Barges", "Fruit-bearing trees"),
        ),
        PropertyClass.FIFTEEN_YEAR: PropertyClassInfo(
            name="15-Year Property",
            description="Land improvements, retail motor fuel outlets",
            examples=("Fences", "Roads", "Bridges", "Landscaping"),
        ),
    }
)
