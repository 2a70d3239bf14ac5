"""Parsers for pasted inventory text."""

from tax_inventory.parsers.field_parsers import (
    parse_currency,
    parse_flexible_date,
    parse_quantity,
)
from tax_inventory.parsers.format_detection import (
    detect_source,
    map_headers,
    split_row,
)
from tax_inventory.parsers.inventory_parsers import (
    InventoryParser,
    InventoryParserFactory,
    RawInventoryRecord,
    TabularParser,
    VineParser,
)

__all__ = [
    "InventoryParser",
    "InventoryParserFactory",
    "RawInventoryRecord",
    "TabularParser",
    "VineParser",
    "detect_source",
    "map_headers",
    "parse_currency",
    "parse_flexible_date",
    "parse_quantity",
    "split_row",
]
