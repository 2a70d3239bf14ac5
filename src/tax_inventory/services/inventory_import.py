"""Import service turning pasted inventory text into a validated register.

This service:
- Resolves the source label (hint or keyword detection)
- Parses lines via InventoryParserFactory (vendor parser, then tabular)
- Assigns ids and defaults missing dates to today
- Derives depreciation class, first-year deduction and donation date
- Validates each record and assigns its compliance level
- Deduplicates by ASIN or product name plus date
"""

from collections.abc import Callable, Iterable, Mapping
from datetime import date, datetime
from decimal import Decimal
from pathlib import Path

from dateutil.parser import isoparse  # type: ignore[import-untyped]
from dateutil.relativedelta import relativedelta  # type: ignore[import-untyped]

from tax_inventory.config import Settings, get_settings
from tax_inventory.domain.compliance import DONATION_HOLDING_PERIOD
from tax_inventory.domain.depreciation import TaxYearRule
from tax_inventory.domain.inventory import ParsedInventoryItem
from tax_inventory.exceptions import InputFileNotFoundError
from tax_inventory.logging_config import LogContext, get_logger
from tax_inventory.parsers.format_detection import detect_source
from tax_inventory.parsers.inventory_parsers import (
    UNKNOWN_PRODUCT,
    InventoryParserFactory,
    RawInventoryRecord,
)
from tax_inventory.services.depreciation import item_depreciation
from tax_inventory.services.item_validator import (
    determine_compliance_level,
    validate_item,
)
from tax_inventory.services.tax_rules import get_tax_year_rule

logger = get_logger(__name__)

_BASE36_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"


def _base36(value: int) -> str:
    if value == 0:
        return "0"
    digits = []
    while value:
        value, remainder = divmod(value, 36)
        digits.append(_BASE36_DIGITS[remainder])
    return "".join(reversed(digits))


def generate_internal_id(source: str, index: int, now: datetime) -> str:
    """Build an id for a record without a receipt reference.

    Format: first three letters of the source, upper-cased, the timestamp in
    base-36 milliseconds and the zero-padded row index, e.g.
    "AMA-m5xk3q2a-0003".
    """
    source_code = source[:3].upper()
    timestamp = _base36(int(now.timestamp() * 1000))
    return f"{source_code}-{timestamp}-{index:04d}"


def donation_eligible_date(acquisition_date: str) -> str:
    """Date the holding period for a full fair-market-value donation ends.

    Returns an empty string when the acquisition date is not a valid ISO date.
    """
    months = DONATION_HOLDING_PERIOD.months or 0
    try:
        acquired = isoparse(acquisition_date).date()
        eligible = acquired + relativedelta(months=months)
    except (TypeError, ValueError, OverflowError):
        return ""
    return eligible.isoformat()


def deduplicate(items: Iterable[ParsedInventoryItem]) -> list[ParsedInventoryItem]:
    """Collapse items sharing a dedup key.

    On collision the item with the higher compliance level replaces the one
    kept so far; equal levels keep the earlier item. Output follows the order
    in which each key was first seen.
    """
    kept: dict[str, ParsedInventoryItem] = {}
    order: list[str] = []

    for item in items:
        key = item.dedup_key
        current = kept.get(key)
        if current is None:
            order.append(key)
            kept[key] = item
        elif item.compliance_level > current.compliance_level:
            kept[key] = item

    return [kept[key] for key in order]


class InventoryImportService:
    """Service for parsing pasted inventory data into ParsedInventoryItems.

    The service holds no state between calls; the clock is injectable so ids
    and default dates are deterministic under test.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        clock: Callable[[], datetime] | None = None,
        tax_rules: Mapping[int, TaxYearRule] | None = None,
    ) -> None:
        """Initialize the import service.

        Args:
            settings: Engine settings (import bonus percent); defaults to
                get_settings()
            clock: Returns the current time; defaults to datetime.now
            tax_rules: Rule table used when the bonus percent follows the
                acquisition year; defaults to the active table
        """
        self._settings = settings or get_settings()
        self._clock = clock or datetime.now
        self._tax_rules = tax_rules

    def parse_content(
        self, content: str, source_hint: str | None = None
    ) -> list[ParsedInventoryItem]:
        """Parse pasted text into a validated, deduplicated register.

        Args:
            content: Raw pasted text (vendor report, CSV or tab-separated).
            source_hint: Source label chosen by the user; detected from the
                content when omitted.

        Returns:
            ParsedInventoryItems in first-seen order; empty for empty or
            unrecognized input.
        """
        if not content or not content.strip():
            return []

        source = source_hint or detect_source(content)
        with LogContext(import_source=source):
            raw_records = InventoryParserFactory.parse(content, source)

            now = self._clock()
            items = [
                self._build_item(raw, index, source, now)
                for index, raw in enumerate(raw_records)
            ]
            unique = deduplicate(items)

        logger.info(
            "inventory_content_parsed",
            source=source,
            record_count=len(raw_records),
            item_count=len(unique),
            duplicate_count=len(items) - len(unique),
        )
        return unique

    def parse_file(
        self, file_path: Path | str, source_hint: str | None = None
    ) -> list[ParsedInventoryItem]:
        """Read a text file and parse its content.

        Raises:
            InputFileNotFoundError: If the file doesn't exist
        """
        path = Path(file_path)
        if not path.is_file():
            raise InputFileNotFoundError(path)
        return self.parse_content(path.read_text(encoding="utf-8"), source_hint)

    def _build_item(
        self, raw: RawInventoryRecord, index: int, source: str, now: datetime
    ) -> ParsedInventoryItem:
        item_id = raw.receipt_reference or generate_internal_id(source, index, now)
        acquisition_date = raw.acquisition_date or now.date().isoformat()
        cost_basis = raw.cost_basis or Decimal("0")

        depreciation = item_depreciation(
            cost_basis,
            raw.category,
            acquisition_date,
            bonus_percent=self._bonus_percent(acquisition_date, now.date()),
            today=now.date(),
        )
        warnings = validate_item(raw)

        return ParsedInventoryItem(
            id=item_id,
            product_name=raw.product_name or UNKNOWN_PRODUCT,
            acquisition_date=acquisition_date,
            cost_basis=cost_basis,
            source=raw.source or source,
            receipt_reference=raw.receipt_reference or item_id,
            asin=raw.asin or None,
            category=raw.category or None,
            quantity=raw.quantity or 1,
            donation_eligible_date=donation_eligible_date(acquisition_date),
            depreciation_class=depreciation.depreciation_class,
            first_year_depreciation=depreciation.first_year_depreciation,
            depreciated_value_year1=depreciation.depreciated_value_year1,
            compliance_level=determine_compliance_level(raw),
            validation_warnings=warnings,
            selected=not any(w.is_error for w in warnings),
        )

    def _bonus_percent(self, acquisition_date: str, today: date) -> Decimal:
        if not self._settings.import_bonus_from_tax_year:
            return self._settings.import_bonus_percent

        try:
            year = isoparse(acquisition_date).year
        except ValueError:
            year = today.year
        rule = get_tax_year_rule(
            year, self._tax_rules, default_year=self._settings.default_tax_year
        )
        return rule.bonus_depreciation_percent


def parse_inventory_content(
    content: str, source_hint: str | None = None
) -> list[ParsedInventoryItem]:
    """Parse pasted inventory text with the default settings and clock."""
    return InventoryImportService().parse_content(content, source_hint)
