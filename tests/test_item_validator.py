"""Tests for item validation, compliance levels and election checks."""

from decimal import Decimal

import pytest

from tax_inventory.domain.depreciation import DepreciationElection
from tax_inventory.domain.tax_rules import TAX_YEAR_RULES
from tax_inventory.domain.value_objects import ComplianceLevel, WarningSeverity
from tax_inventory.parsers.inventory_parsers import RawInventoryRecord
from tax_inventory.services.item_validator import (
    determine_compliance_level,
    validate_election,
    validate_item,
)


def make_record(**overrides) -> RawInventoryRecord:
    defaults = {
        "product_name": "Stand mixer",
        "acquisition_date": "2025-01-15",
        "cost_basis": Decimal("120.00"),
    }
    defaults.update(overrides)
    return RawInventoryRecord(**defaults)


class TestValidateItem:
    """Tests for validate_item."""

    def test_complete_record_has_no_warnings(self) -> None:
        """A complete low-cost record is clean."""
        assert validate_item(make_record()) == []

    def test_empty_record(self) -> None:
        """An empty record reports name, date and cost."""
        warnings = validate_item(RawInventoryRecord())

        assert [(w.field, w.severity) for w in warnings] == [
            ("product_name", WarningSeverity.ERROR),
            ("acquisition_date", WarningSeverity.WARNING),
            ("cost_basis", WarningSeverity.WARNING),
        ]
        assert warnings[0].is_error
        assert warnings[1].irs_reference == "IRS Pub 946"
        assert warnings[2].irs_reference == "IRS Pub 551"

    @pytest.mark.parametrize("cost", [Decimal("0"), Decimal("-5"), None])
    def test_missing_or_non_positive_cost(self, cost) -> None:
        """Missing or non-positive cost is a warning."""
        warnings = validate_item(make_record(cost_basis=cost))

        assert [w.field for w in warnings] == ["cost_basis"]
        assert warnings[0].severity == WarningSeverity.WARNING

    def test_form_8283_threshold(self) -> None:
        """500 dollars triggers the Form 8283 notice."""
        warnings = validate_item(make_record(cost_basis=Decimal("500")))

        assert len(warnings) == 1
        assert warnings[0].severity == WarningSeverity.INFO
        assert "Form 8283" in warnings[0].message
        assert warnings[0].irs_reference == "Form 8283 - Noncash Charitable Contributions"

    def test_appraisal_threshold(self) -> None:
        """5000 dollars also requires an appraisal."""
        warnings = validate_item(make_record(cost_basis=Decimal("5000")))

        assert [w.severity for w in warnings] == [WarningSeverity.INFO, WarningSeverity.WARNING]
        assert "qualified appraisal" in warnings[1].message
        assert warnings[1].irs_reference == "IRS Pub 561"

    def test_just_below_threshold(self) -> None:
        """Just under 500 dollars gives no notice."""
        assert validate_item(make_record(cost_basis=Decimal("499.99"))) == []

    def test_accepts_mappings(self) -> None:
        """Plain mappings are validated like records."""
        warnings = validate_item({"product_name": "Lamp", "cost_basis": "15.00"})

        assert [w.field for w in warnings] == ["acquisition_date"]

    def test_non_numeric_cost_in_mapping(self) -> None:
        """Non-numeric cost counts as missing."""
        warnings = validate_item({"product_name": "Lamp", "acquisition_date": "2025-01-01", "cost_basis": "n/a"})

        assert [w.field for w in warnings] == ["cost_basis"]


class TestDetermineComplianceLevel:
    """Tests for determine_compliance_level."""

    def test_name_only_is_minimal(self) -> None:
        """A name alone is minimal."""
        record = RawInventoryRecord(product_name="Lamp")

        assert determine_compliance_level(record) == ComplianceLevel.MINIMAL

    def test_date_and_cost_make_standard(self) -> None:
        """Date and cost reach standard."""
        assert determine_compliance_level(make_record()) == ComplianceLevel.STANDARD

    def test_source_and_receipt_make_full(self) -> None:
        """Source and receipt reach full."""
        record = make_record(source="Temu", receipt_reference="PO-1138")

        assert determine_compliance_level(record) == ComplianceLevel.FULL

    def test_source_without_receipt_stays_standard(self) -> None:
        """Source without a receipt stays standard."""
        assert determine_compliance_level(make_record(source="Temu")) == ComplianceLevel.STANDARD

    def test_zero_cost_is_not_present(self) -> None:
        """Zero cost does not count as present."""
        record = make_record(cost_basis=Decimal("0"))

        assert determine_compliance_level(record) == ComplianceLevel.MINIMAL

    def test_missing_name_falls_to_lowest_tier(self) -> None:
        """Without a name nothing above minimal applies."""
        record = make_record(product_name=None, source="Temu", receipt_reference="PO-1")

        assert determine_compliance_level(record) == ComplianceLevel.MINIMAL

    def test_levels_are_ordered(self) -> None:
        """Compliance levels compare by rank."""
        assert ComplianceLevel.MINIMAL < ComplianceLevel.STANDARD < ComplianceLevel.FULL


class TestValidateElection:
    """Tests for validate_election."""

    def test_valid_election(self, laptop_election: DepreciationElection) -> None:
        """A legal election has no warnings."""
        assert validate_election(laptop_election) == []

    def test_section_179_above_cost(self) -> None:
        """Section 179 above cost is an error."""
        election = DepreciationElection(
            original_cost=Decimal("1000"), purchase_year=2025, section_179_amount=Decimal("1500")
        )

        warnings = validate_election(election)

        assert [(w.field, w.severity) for w in warnings] == [
            ("section_179_amount", WarningSeverity.ERROR)
        ]

    def test_negative_values(self) -> None:
        """Each negative input is reported."""
        election = DepreciationElection(
            original_cost=Decimal("-1"),
            purchase_year=2025,
            section_179_amount=Decimal("-1"),
            bonus_depreciation_percent=Decimal("-5"),
        )

        fields = [w.field for w in validate_election(election)]

        assert fields == ["original_cost", "section_179_amount", "bonus_depreciation_percent"]

    def test_bonus_above_hundred(self) -> None:
        """Bonus above 100 cites IRC 168(k)."""
        election = DepreciationElection(
            original_cost=Decimal("1000"),
            purchase_year=2025,
            bonus_depreciation_percent=Decimal("120"),
        )

        warnings = validate_election(election)

        assert warnings[0].field == "bonus_depreciation_percent"
        assert warnings[0].irs_reference == "IRC §168(k)"

    def test_section_179_above_annual_limit(self) -> None:
        """Section 179 above the annual limit is a warning."""
        election = DepreciationElection(
            original_cost=Decimal("4000000"),
            purchase_year=2024,
            section_179_amount=Decimal("1500000"),
        )

        warnings = validate_election(election, TAX_YEAR_RULES[2024])

        assert len(warnings) == 1
        assert warnings[0].severity == WarningSeverity.WARNING
        assert "$1,220,000" in warnings[0].message
