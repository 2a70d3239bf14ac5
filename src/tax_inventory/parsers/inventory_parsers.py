"""Line parsers turning pasted inventory text into partial records.

Vendor-specific parsers understand one export layout (the Amazon Vine
orders report); the generic tabular parser handles any tab- or
comma-separated paste with a header row.
"""

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from decimal import Decimal

from tax_inventory.logging_config import get_logger
from tax_inventory.parsers.field_parsers import (
    parse_currency,
    parse_flexible_date,
    parse_quantity,
)
from tax_inventory.parsers.format_detection import (
    VINE_SOURCE,
    detect_delimiter,
    map_headers,
    split_row,
)

logger = get_logger(__name__)

UNKNOWN_PRODUCT = "Unknown Product"


@dataclass
class RawInventoryRecord:
    """Partial inventory record emitted by a line parser.

    Every field is optional; the import service fills defaults and derived
    fields.

    Attributes:
        product_name: Item description
        acquisition_date: ISO date, None if missing or unparseable
        cost_basis: Cost or ETV, None if the column was absent or empty
        source: Vendor label when the parser knows it
        receipt_reference: Order number or receipt reference
        asin: ASIN or SKU
        category: Free-text category
        quantity: Unit count
        raw_line: Original line for debugging
    """

    product_name: str | None = None
    acquisition_date: str | None = None
    cost_basis: Decimal | None = None
    source: str | None = None
    receipt_reference: str | None = None
    asin: str | None = None
    category: str | None = None
    quantity: int | None = None
    raw_line: str = ""


class InventoryParser(ABC):
    """Abstract base class for inventory line parsers."""

    @abstractmethod
    def parse(self, content: str) -> list[RawInventoryRecord]:
        """Parse pasted text into partial records.

        Args:
            content: Raw pasted text.

        Returns:
            Records in input order; empty when nothing is recognized.
        """
        ...

    @staticmethod
    def _lines(content: str) -> list[str]:
        return [line for line in content.splitlines() if line.strip()]


class VineParser(InventoryParser):
    """Parser for text copied from the Amazon Vine orders report.

    Each order row carries an order number, an ASIN, the product name, the
    order type, order/shipped dates and the ETV as the last value:

        114-1234567-1234567 B0ABCD1234 Air Fryer XL ORDER 01/15/2025 01/17/2025 89.99

    Header rows, cancellations and rows with a non-positive ETV are skipped.
    """

    HEADER_MARKERS = ("Order Number", "ASIN", "Product Name")

    # Copy/paste from the PDF often turns hyphens into non-breaking hyphens
    ORDER_NUMBER_PATTERN = re.compile(r"\d{3}[-‑]\d{7}[-‑]\d{7}")
    ASIN_PATTERN = re.compile(r"\bB0[A-Z0-9]{8,10}\b")
    DATE_PATTERN = re.compile(r"\d{2}/\d{2}/\d{4}")
    ETV_PATTERN = re.compile(r"(?:^|[\s$|])([-‑]?\d+(?:\.\d*)?)\s*$")
    ORDER_TYPE_PATTERN = re.compile(r"\b(ORDER|CANCELLATION)\b")

    def parse(self, content: str) -> list[RawInventoryRecord]:
        records: list[RawInventoryRecord] = []

        for line in self._lines(content):
            if any(marker in line for marker in self.HEADER_MARKERS):
                continue
            record = self._parse_line(line)
            if record is not None:
                records.append(record)

        return records

    def _parse_line(self, line: str) -> RawInventoryRecord | None:
        order_match = self.ORDER_NUMBER_PATTERN.search(line)
        asin_match = self.ASIN_PATTERN.search(line)
        if order_match is None and asin_match is None:
            return None

        type_match = self.ORDER_TYPE_PATTERN.search(line)
        if type_match is not None and type_match.group(1) == "CANCELLATION":
            return None

        etv = self._parse_etv(line)
        if etv <= 0:
            return None

        dates = self.DATE_PATTERN.findall(line)
        order_date = parse_flexible_date(dates[0]) if dates else None

        receipt = order_match.group(0).replace("‑", "-") if order_match else None

        return RawInventoryRecord(
            product_name=self._extract_product_name(line, asin_match, type_match),
            acquisition_date=order_date,
            cost_basis=etv,
            source=VINE_SOURCE,
            receipt_reference=receipt,
            asin=asin_match.group(0) if asin_match else None,
            raw_line=line,
        )

    def _parse_etv(self, line: str) -> Decimal:
        match = self.ETV_PATTERN.search(line)
        if match is None:
            return Decimal("0")
        return parse_currency(match.group(1).replace("‑", "-"))

    def _extract_product_name(
        self,
        line: str,
        asin_match: re.Match[str] | None,
        type_match: re.Match[str] | None,
    ) -> str:
        """Text between the ASIN and the order type (or the first date)."""
        if asin_match is None:
            return UNKNOWN_PRODUCT

        start = asin_match.end()
        if type_match is not None and type_match.start() >= start:
            name = line[start : type_match.start()]
        else:
            remainder = line[start:]
            date_match = self.DATE_PATTERN.search(remainder)
            if date_match is None:
                return UNKNOWN_PRODUCT
            name = self.ORDER_TYPE_PATTERN.sub("", remainder[: date_match.start()])

        name = " ".join(name.replace("|", " ").split())
        return name or UNKNOWN_PRODUCT


class TabularParser(InventoryParser):
    """Generic parser for spreadsheet-style pastes with a header row.

    The header row is mapped to inventory fields by keyword; each following
    row becomes a record when it yields a product name or a non-zero cost.
    """

    def parse(self, content: str) -> list[RawInventoryRecord]:
        lines = self._lines(content)
        if len(lines) < 2:
            return []

        delimiter = detect_delimiter(lines[0])
        field_map = map_headers(split_row(lines[0], delimiter))
        if not field_map:
            logger.debug("tabular_headers_unrecognized", header=lines[0])
            return []

        records: list[RawInventoryRecord] = []
        for line in lines[1:]:
            record = self._parse_row(split_row(line, delimiter), field_map, line)
            if record.product_name or record.cost_basis:
                records.append(record)

        return records

    def _parse_row(
        self, values: list[str], field_map: dict[str, int], line: str
    ) -> RawInventoryRecord:
        record = RawInventoryRecord(raw_line=line)

        for field_name, index in field_map.items():
            value = values[index].strip() if index < len(values) else ""
            if not value:
                continue

            if field_name == "cost_basis":
                record.cost_basis = parse_currency(value)
            elif field_name == "acquisition_date":
                record.acquisition_date = parse_flexible_date(value)
            elif field_name == "quantity":
                record.quantity = parse_quantity(value)
            else:
                setattr(record, field_name, value)

        return record


class InventoryParserFactory:
    """Selects the line parser for a source label."""

    _vendor_parsers: dict[str, type[InventoryParser]] = {
        VINE_SOURCE: VineParser,
    }

    @classmethod
    def get_parser(cls, source: str) -> InventoryParser | None:
        """Get the vendor-specific parser for a source, if there is one."""
        parser_cls = cls._vendor_parsers.get(source)
        return parser_cls() if parser_cls is not None else None

    @classmethod
    def parse(cls, content: str, source: str) -> list[RawInventoryRecord]:
        """Parse with the vendor parser, falling back to the tabular parser.

        The tabular parser runs when the source has no vendor parser or the
        vendor parser recognized nothing.
        """
        parser = cls.get_parser(source)
        if parser is not None:
            records = parser.parse(content)
            if records:
                return records
            logger.debug("vendor_parser_empty", source=source, parser=type(parser).__name__)

        return TabularParser().parse(content)
