"""Source detection and header-to-field mapping for pasted inventory text.

Both use ordered rule tables: rules are evaluated top to bottom and the first
match wins, so each table can be audited and tested on its own.
"""

import csv
from collections.abc import Sequence
from dataclasses import dataclass

VINE_SOURCE = "Amazon Vine"
DEFAULT_SOURCE = "Manual Import"


@dataclass(frozen=True, slots=True)
class SourceRule:
    keywords: tuple[str, ...]
    source: str


# Evaluated in order; a paste mentioning several vendors gets the first one
SOURCE_RULES: tuple[SourceRule, ...] = (
    SourceRule(keywords=("vine", "amazon"), source=VINE_SOURCE),
    SourceRule(keywords=("temu",), source="Temu"),
    SourceRule(keywords=("alibaba",), source="Alibaba"),
    SourceRule(keywords=("aliexpress",), source="AliExpress"),
    SourceRule(keywords=("walmart",), source="Walmart"),
    SourceRule(keywords=("ebay",), source="eBay"),
)


def detect_source(content: str) -> str:
    """Detect the vendor a paste came from.

    Args:
        content: Raw pasted text.

    Returns:
        The first matching vendor label, or "Manual Import".
    """
    lower = content.lower()
    for rule in SOURCE_RULES:
        if any(keyword in lower for keyword in rule.keywords):
            return rule.source
    return DEFAULT_SOURCE


@dataclass(frozen=True, slots=True)
class HeaderRule:
    """Maps a header to a field when any keyword group fully matches.

    A keyword group matches when every keyword in it is a substring of the
    lower-cased header.
    """

    field: str
    keyword_groups: tuple[tuple[str, ...], ...]

    def matches(self, header: str) -> bool:
        return any(
            all(keyword in header for keyword in group) for group in self.keyword_groups
        )


def _any_of(*keywords: str) -> tuple[tuple[str, ...], ...]:
    return tuple((keyword,) for keyword in keywords)


# Specific identifiers come before the broad "order"/"name" catch-alls
HEADER_RULES: tuple[HeaderRule, ...] = (
    HeaderRule("asin", _any_of("asin", "sku", "upc")),
    HeaderRule(
        "receipt_reference",
        (
            ("order", "number"),
            ("order", "#"),
            ("order", "id"),
            ("receipt",),
            ("reference",),
        ),
    ),
    HeaderRule("quantity", _any_of("quantity", "qty")),
    HeaderRule("category", _any_of("category", "type")),
    HeaderRule("source", _any_of("source", "vendor", "seller", "store", "marketplace")),
    HeaderRule("cost_basis", _any_of("price", "cost", "etv", "value", "amount")),
    HeaderRule("acquisition_date", _any_of("date", "order", "purchase", "acquired")),
    HeaderRule("product_name", _any_of("name", "product", "item", "description", "title")),
)


def detect_delimiter(header_line: str) -> str:
    """Tab when the header row contains one, otherwise comma."""
    return "\t" if "\t" in header_line else ","


def split_row(line: str, delimiter: str | None = None) -> list[str]:
    """Split a row on tabs or quote-respecting commas.

    Args:
        line: One row of pasted text.
        delimiter: Force a delimiter; detected from the line when None.

    Returns:
        Cell values with surrounding whitespace and quotes removed.
    """
    delimiter = delimiter or detect_delimiter(line)
    if delimiter == "\t":
        cells = line.split("\t")
    else:
        cells = next(csv.reader([line], skipinitialspace=True), [])
    return [cell.strip().strip('"').strip() for cell in cells]


def _normalize_header(header: str) -> str:
    return header.strip().lower().replace('"', "").replace("'", "")


def map_headers(
    header_row: str | Sequence[str],
    rules: Sequence[HeaderRule] = HEADER_RULES,
) -> dict[str, int]:
    """Map header columns to inventory fields.

    Each header is assigned to the first rule it matches. A field is mapped
    at most once: when two headers match the same field, the leftmost wins
    and the later one is ignored.

    Args:
        header_row: Raw header line or already-split header cells.
        rules: Ordered header rule table.

    Returns:
        Mapping of field name to column index.
    """
    headers = split_row(header_row) if isinstance(header_row, str) else list(header_row)

    field_map: dict[str, int] = {}
    for index, raw_header in enumerate(headers):
        header = _normalize_header(raw_header)
        if not header:
            continue
        for rule in rules:
            if rule.matches(header):
                field_map.setdefault(rule.field, index)
                break

    return field_map
