"""Built-in tax-year rules for Section 179 and bonus depreciation.

2025 onward reflects the OBBBA changes ($2.5M Section 179 limit, $4M
phase-out threshold, 100% bonus for property acquired after Jan 19, 2025).
Years after 2025 follow the scheduled bonus phase-down.
"""

from decimal import Decimal
from types import MappingProxyType

from tax_inventory.domain.depreciation import TaxYearRule

DEFAULT_TAX_YEAR = 2025

TAX_YEAR_RULES: MappingProxyType[int, TaxYearRule] = MappingProxyType(
    {
        2024: TaxYearRule(
            tax_year=2024,
            section_179_limit=Decimal("1220000"),
            section_179_phaseout_start=Decimal("3050000"),
            bonus_depreciation_percent=Decimal("60"),
            bonus_description="60% Bonus",
        ),
        2025: TaxYearRule(
            tax_year=2025,
            section_179_limit=Decimal("2500000"),
            section_179_phaseout_start=Decimal("4000000"),
            bonus_depreciation_percent=Decimal("100"),
            bonus_description="100% Bonus (OBBBA restored)",
        ),
        2026: TaxYearRule(
            tax_year=2026,
            section_179_limit=Decimal("2500000"),
            section_179_phaseout_start=Decimal("4000000"),
            bonus_depreciation_percent=Decimal("20"),
            bonus_description="20% Bonus (scheduled)",
        ),
        2027: TaxYearRule(
            tax_year=2027,
            section_179_limit=Decimal("2500000"),
            section_179_phaseout_start=Decimal("4000000"),
            bonus_depreciation_percent=Decimal("0"),
            bonus_description="No Bonus (scheduled phase-out)",
        ),
    }
)
