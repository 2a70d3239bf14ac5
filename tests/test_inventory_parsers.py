"""Tests for the Vine and tabular inventory line parsers."""

from decimal import Decimal

import pytest

from tax_inventory.parsers.format_detection import VINE_SOURCE
from tax_inventory.parsers.inventory_parsers import (
    UNKNOWN_PRODUCT,
    InventoryParser,
    InventoryParserFactory,
    RawInventoryRecord,
    TabularParser,
    VineParser,
)


# ===== RawInventoryRecord Tests =====


class TestRawInventoryRecord:
    """Tests for RawInventoryRecord."""

    def test_all_fields_optional(self) -> None:
        """A record can be built with no fields."""
        record = RawInventoryRecord()

        assert record.product_name is None
        assert record.cost_basis is None
        assert record.quantity is None
        assert record.raw_line == ""


# ===== VineParser Tests =====


class TestVineParser:
    """Tests for VineParser."""

    def test_parses_orders(self, vine_paste: str) -> None:
        """Order lines yield order number, ASIN, date and ETV."""
        records = VineParser().parse(vine_paste)

        assert len(records) == 2
        fryer = records[0]
        assert fryer.product_name == "Ninja Air Fryer XL"
        assert fryer.asin == "B0ABCD1234"
        assert fryer.receipt_reference == "114-1234567-1234567"
        assert fryer.acquisition_date == "2025-01-15"
        assert fryer.cost_basis == Decimal("89.99")
        assert fryer.source == VINE_SOURCE

    def test_non_breaking_hyphens_normalized(self, vine_paste: str) -> None:
        """Non-breaking hyphens in order numbers are normalized."""
        chair = VineParser().parse(vine_paste)[1]

        assert chair.product_name == "Office Chair"
        assert chair.receipt_reference == "114-2222222-3333333"

    def test_skips_cancellations_and_zero_etv(self, vine_paste: str) -> None:
        """Cancellations and zero ETV rows are dropped."""
        names = [r.product_name for r in VineParser().parse(vine_paste)]

        assert "Desk Lamp" not in names
        assert "Sample Pack" not in names

    def test_skips_header_lines(self) -> None:
        """Header lines are not parsed as orders."""
        text = "Order Number ASIN Product Name Order Type Order Date ETV 10.00"

        assert VineParser().parse(text) == []

    def test_order_number_without_asin(self) -> None:
        """An order number alone is enough."""
        records = VineParser().parse("114-1234567-1234567 ORDER 01/15/2025 19.99")

        assert records[0].product_name == UNKNOWN_PRODUCT
        assert records[0].asin is None
        assert records[0].cost_basis == Decimal("19.99")

    def test_name_ends_at_first_date_without_order_type(self) -> None:
        """Names stop at the first date."""
        records = VineParser().parse("B0ABCD1234 Bamboo Cutting Board 03/02/2025 03/04/2025 22.50")

        assert records[0].product_name == "Bamboo Cutting Board"
        assert records[0].receipt_reference is None

    def test_trailing_date_is_not_an_etv(self) -> None:
        """A trailing date is not read as the ETV."""
        assert VineParser().parse("B0ABCD1234 Mystery Box ORDER 01/15/2025") == []

    def test_lines_without_identifiers_ignored(self) -> None:
        """Lines without identifiers are ignored."""
        assert VineParser().parse("Name,Price\nWidget,4.99") == []


# ===== TabularParser Tests =====


class TestTabularParser:
    """Tests for TabularParser."""

    def test_csv_round_trip(self, widget_csv: str) -> None:
        """CSV rows map to record fields."""
        records = TabularParser().parse(widget_csv)

        assert len(records) == 1
        assert records[0].product_name == "Widget"
        assert records[0].cost_basis == Decimal("45.99")
        assert records[0].acquisition_date == "2025-01-15"

    def test_tab_separated_with_quantity_and_category(self) -> None:
        """Tab-separated rows keep quantity and category."""
        text = "Item\tCategory\tQty\tCost\nStand mixer\tAppliance\t2\t$349.00\n"

        record = TabularParser().parse(text)[0]

        assert record.product_name == "Stand mixer"
        assert record.category == "Appliance"
        assert record.quantity == 2
        assert record.cost_basis == Decimal("349.00")
        assert record.acquisition_date is None

    def test_quoted_values(self) -> None:
        """Quoted cells keep embedded commas."""
        text = 'Item,Cost\n"Desk, oak","$1,234.56"\n'

        record = TabularParser().parse(text)[0]

        assert record.product_name == "Desk, oak"
        assert record.cost_basis == Decimal("1234.56")

    def test_rows_without_name_or_cost_skipped(self) -> None:
        """Rows with neither name nor cost are dropped."""
        text = "Name,Price,Notes\n,,just a note\nLamp,10,\n,25.00,\n"

        records = TabularParser().parse(text)

        assert [(r.product_name, r.cost_basis) for r in records] == [
            ("Lamp", Decimal("10")),
            (None, Decimal("25.00")),
        ]

    def test_short_rows_tolerated(self) -> None:
        """Rows shorter than the header are tolerated."""
        records = TabularParser().parse("Name,Price,Date\nLamp\n")

        assert records[0].product_name == "Lamp"
        assert records[0].cost_basis is None

    def test_unparseable_date_is_none(self) -> None:
        """Bad dates become None."""
        record = TabularParser().parse("Name,Date\nLamp,someday\n")[0]

        assert record.acquisition_date is None

    @pytest.mark.parametrize("text", ["", "Name,Price,Date", "\n\n", "Notes,Comments\nfoo,bar"])
    def test_nothing_recognized(self, text: str) -> None:
        """Input without a usable header gives no records."""
        assert TabularParser().parse(text) == []


# ===== InventoryParserFactory Tests =====


class TestInventoryParserFactory:
    """Tests for InventoryParserFactory."""

    def test_vendor_parser_for_vine(self) -> None:
        """Vine has a dedicated parser."""
        assert isinstance(InventoryParserFactory.get_parser(VINE_SOURCE), VineParser)

    def test_no_vendor_parser_for_other_sources(self) -> None:
        """Other sources have no vendor parser."""
        assert InventoryParserFactory.get_parser("Temu") is None

    def test_vendor_parser_used_when_it_recognizes_rows(self, vine_paste: str) -> None:
        """Vendor parser output is used when non-empty."""
        records = InventoryParserFactory.parse(vine_paste, VINE_SOURCE)

        assert [r.asin for r in records] == ["B0ABCD1234", "B0QWERTY12"]

    def test_falls_back_to_tabular(self, widget_csv: str) -> None:
        """Empty vendor output falls back to tabular."""
        records = InventoryParserFactory.parse(widget_csv, VINE_SOURCE)

        assert records[0].product_name == "Widget"

    def test_generic_source_uses_tabular(self, widget_csv: str) -> None:
        """Generic sources go straight to tabular."""
        assert InventoryParserFactory.parse(widget_csv, "Manual Import")[0].product_name == "Widget"

    def test_parsers_share_base_class(self) -> None:
        """All parsers implement InventoryParser."""
        assert issubclass(VineParser, InventoryParser)
        assert issubclass(TabularParser, InventoryParser)
