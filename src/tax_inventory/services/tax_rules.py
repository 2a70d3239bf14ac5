"""Tax-year rule lookup with an optional externally supplied rule table.

The built-in table can be replaced by a JSON file (settings.tax_rules_file)
so yearly legal updates need no code change:

    {
      "_meta": {"version": "2026.1"},
      "2026": {
        "section_179_limit": 2560000,
        "section_179_phaseout_start": 4090000,
        "bonus_depreciation_percent": 100,
        "bonus_description": "100% Bonus"
      }
    }

Keys starting with "_" are ignored.
"""

import json
from collections.abc import Mapping
from decimal import Decimal, InvalidOperation
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType

from tax_inventory.config import Settings, get_settings
from tax_inventory.domain.depreciation import TaxYearRule
from tax_inventory.domain.tax_rules import DEFAULT_TAX_YEAR, TAX_YEAR_RULES
from tax_inventory.exceptions import InvalidTaxRulesError, TaxRulesFileNotFoundError
from tax_inventory.logging_config import get_logger

logger = get_logger(__name__)

RULE_FIELDS = (
    "section_179_limit",
    "section_179_phaseout_start",
    "bonus_depreciation_percent",
)


def load_tax_rules(path: Path | str) -> MappingProxyType[int, TaxYearRule]:
    """Load a tax-year rule table from a JSON file.

    Args:
        path: JSON file keyed by tax year.

    Returns:
        Read-only mapping of tax year to TaxYearRule.

    Raises:
        TaxRulesFileNotFoundError: If the file does not exist.
        InvalidTaxRulesError: If the file is not valid JSON or an entry is
            missing a field or holds a non-numeric value.
    """
    path = Path(path)
    if not path.exists():
        raise TaxRulesFileNotFoundError(path)

    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise InvalidTaxRulesError(path, f"invalid JSON: {e}") from e

    if not isinstance(raw, dict):
        raise InvalidTaxRulesError(path, "top level must be an object keyed by tax year")

    rules: dict[int, TaxYearRule] = {}
    for year_key, entry in raw.items():
        if year_key.startswith("_"):
            continue
        year = _parse_year(path, year_key)
        rules[year] = _parse_rule(path, year_key, entry)

    if not rules:
        raise InvalidTaxRulesError(path, "no tax years defined")

    meta = raw.get("_meta", {})
    logger.info(
        "tax_rules_loaded",
        path=str(path),
        years=sorted(rules),
        version=meta.get("version", "unknown") if isinstance(meta, dict) else "unknown",
    )
    return MappingProxyType(dict(sorted(rules.items())))


def _parse_year(path: Path, year_key: str) -> int:
    try:
        return int(year_key)
    except ValueError as e:
        raise InvalidTaxRulesError(path, f"tax year key {year_key!r} is not an integer") from e


def _parse_rule(path: Path, year_key: str, entry: object) -> TaxYearRule:
    if not isinstance(entry, dict):
        raise InvalidTaxRulesError(path, f"entry for {year_key} must be an object")

    missing = [name for name in RULE_FIELDS if name not in entry]
    if missing:
        raise InvalidTaxRulesError(
            path, f"entry for {year_key} is missing {', '.join(missing)}"
        )

    values: dict[str, Decimal] = {}
    for name in RULE_FIELDS:
        try:
            values[name] = Decimal(str(entry[name]))
        except InvalidOperation as e:
            raise InvalidTaxRulesError(
                path, f"{name} for {year_key} is not numeric: {entry[name]!r}"
            ) from e

    return TaxYearRule(
        tax_year=int(year_key),
        bonus_description=str(entry.get("bonus_description", "")),
        **values,
    )


@lru_cache
def _cached_rules(path: Path) -> MappingProxyType[int, TaxYearRule]:
    return load_tax_rules(path)


def active_tax_rules(settings: Settings | None = None) -> Mapping[int, TaxYearRule]:
    """Return the rule table in effect: the configured file or the built-ins."""
    if settings is None:
        settings = get_settings()
    if settings.tax_rules_file is not None:
        return _cached_rules(Path(settings.tax_rules_file))
    return TAX_YEAR_RULES


def get_tax_year_rule(
    tax_year: int,
    rules: Mapping[int, TaxYearRule] | None = None,
    default_year: int | None = None,
) -> TaxYearRule:
    """Return the rule for a tax year.

    Absent years fall back to default_year (settings.default_tax_year when
    not given), then to the built-in 2025 rule.
    """
    if rules is None:
        rules = active_tax_rules()
    if default_year is None:
        default_year = get_settings().default_tax_year

    rule = rules.get(tax_year)
    if rule is not None:
        return rule

    fallback = rules.get(default_year) or TAX_YEAR_RULES[DEFAULT_TAX_YEAR]
    logger.debug(
        "tax_year_rule_fallback",
        requested_year=tax_year,
        fallback_year=fallback.tax_year,
    )
    return fallback


def section_179_limit(
    tax_year: int,
    total_179_property: Decimal | int | str = Decimal("0"),
    rules: Mapping[int, TaxYearRule] | None = None,
) -> Decimal:
    """Section 179 dollar limit after the phase-out reduction.

    The limit is reduced dollar-for-dollar by the cost of Section 179
    property placed in service above the phase-out threshold.
    """
    rule = get_tax_year_rule(tax_year, rules)
    total = Decimal(str(total_179_property))
    reduction = max(Decimal("0"), total - rule.section_179_phaseout_start)
    return max(Decimal("0"), rule.section_179_limit - reduction)
