"""Tests for tax-year rule lookup and rule file loading."""

import json
from decimal import Decimal

import pytest

from tax_inventory.config import Settings
from tax_inventory.domain.depreciation import TaxYearRule
from tax_inventory.domain.tax_rules import TAX_YEAR_RULES
from tax_inventory.exceptions import InvalidTaxRulesError, TaxRulesFileNotFoundError
from tax_inventory.services.tax_rules import (
    active_tax_rules,
    get_tax_year_rule,
    load_tax_rules,
    section_179_limit,
)


def write_rules(path, data) -> None:
    path.write_text(json.dumps(data), encoding="utf-8")


class TestGetTaxYearRule:
    """Tests for get_tax_year_rule."""

    def test_known_year(self) -> None:
        """Known years return their own rule."""
        rule = get_tax_year_rule(2025)

        assert rule.tax_year == 2025
        assert rule.section_179_limit == Decimal("2500000")
        assert rule.section_179_phaseout_start == Decimal("4000000")
        assert rule.bonus_depreciation_percent == Decimal("100")

    def test_prior_year_has_lower_bonus(self) -> None:
        """2024 carries the phased-down bonus."""
        assert get_tax_year_rule(2024).bonus_depreciation_percent == Decimal("60")

    def test_absent_year_falls_back_to_default_year(self) -> None:
        """Unknown years use the default year."""
        assert get_tax_year_rule(2031).tax_year == 2025

    def test_explicit_default_year(self) -> None:
        """An explicit default year is honored."""
        assert get_tax_year_rule(1999, default_year=2024).tax_year == 2024

    def test_default_year_from_settings(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """The default year can come from settings."""
        monkeypatch.setenv("TAX_INVENTORY_DEFAULT_TAX_YEAR", "2026")

        assert get_tax_year_rule(2031).tax_year == 2026

    def test_custom_table_without_default_uses_builtin(self) -> None:
        """Custom tables fall back to the built-in default."""
        rules = {
            2030: TaxYearRule(
                tax_year=2030,
                section_179_limit=Decimal("3000000"),
                section_179_phaseout_start=Decimal("5000000"),
                bonus_depreciation_percent=Decimal("40"),
            )
        }

        assert get_tax_year_rule(2030, rules).bonus_depreciation_percent == Decimal("40")
        assert get_tax_year_rule(2029, rules) == TAX_YEAR_RULES[2025]


class TestSection179Limit:
    """Tests for section_179_limit."""

    def test_full_limit_below_phaseout(self) -> None:
        """Below the phase-out the full limit applies."""
        assert section_179_limit(2025) == Decimal("2500000")

    def test_reduced_dollar_for_dollar_above_phaseout(self) -> None:
        """Each dollar over the phase-out reduces the limit."""
        assert section_179_limit(2025, Decimal("4500000")) == Decimal("2000000")

    def test_never_negative(self) -> None:
        """The limit never drops below zero."""
        assert section_179_limit(2025, 7_000_000) == Decimal("0")


class TestLoadTaxRules:
    """Tests for load_tax_rules."""

    def test_loads_years_and_skips_meta(self, tmp_path) -> None:
        """Year entries load and underscore keys are skipped."""
        path = tmp_path / "rules.json"
        write_rules(
            path,
            {
                "_meta": {"version": "2026.1"},
                "2026": {
                    "section_179_limit": 2560000,
                    "section_179_phaseout_start": 4090000,
                    "bonus_depreciation_percent": 100,
                    "bonus_description": "100% Bonus",
                },
                "2025": {
                    "section_179_limit": "2500000",
                    "section_179_phaseout_start": "4000000",
                    "bonus_depreciation_percent": "100",
                },
            },
        )

        rules = load_tax_rules(path)

        assert list(rules) == [2025, 2026]
        assert rules[2026].section_179_limit == Decimal("2560000")
        assert rules[2026].bonus_description == "100% Bonus"
        assert rules[2025].bonus_description == ""

    def test_missing_file(self, tmp_path) -> None:
        """A missing file raises TaxRulesFileNotFoundError."""
        with pytest.raises(TaxRulesFileNotFoundError) as exc_info:
            load_tax_rules(tmp_path / "missing.json")

        assert exc_info.value.error_code == "TAX_RULES_FILE_NOT_FOUND"

    def test_invalid_json(self, tmp_path) -> None:
        """Broken JSON raises InvalidTaxRulesError."""
        path = tmp_path / "rules.json"
        path.write_text("{not json", encoding="utf-8")

        with pytest.raises(InvalidTaxRulesError, match="invalid JSON"):
            load_tax_rules(path)

    def test_missing_field(self, tmp_path) -> None:
        """Entries missing a field are rejected."""
        path = tmp_path / "rules.json"
        write_rules(path, {"2026": {"section_179_limit": 1}})

        with pytest.raises(InvalidTaxRulesError, match="section_179_phaseout_start"):
            load_tax_rules(path)

    def test_non_numeric_value(self, tmp_path) -> None:
        """Non-numeric values are rejected."""
        path = tmp_path / "rules.json"
        write_rules(
            path,
            {
                "2026": {
                    "section_179_limit": "lots",
                    "section_179_phaseout_start": 1,
                    "bonus_depreciation_percent": 1,
                }
            },
        )

        with pytest.raises(InvalidTaxRulesError, match="not numeric"):
            load_tax_rules(path)

    def test_non_integer_year(self, tmp_path) -> None:
        """Year keys must be integers."""
        path = tmp_path / "rules.json"
        write_rules(path, {"next-year": {}})

        with pytest.raises(InvalidTaxRulesError, match="not an integer"):
            load_tax_rules(path)

    def test_empty_table(self, tmp_path) -> None:
        """A file without years is rejected."""
        path = tmp_path / "rules.json"
        write_rules(path, {"_meta": {}})

        with pytest.raises(InvalidTaxRulesError, match="no tax years"):
            load_tax_rules(path)


class TestActiveTaxRules:
    """Tests for active_tax_rules."""

    def test_builtin_table_by_default(self) -> None:
        """Without a file the built-in table is used."""
        assert active_tax_rules() is TAX_YEAR_RULES

    def test_configured_file_replaces_builtin(self, tmp_path) -> None:
        """A configured file replaces the built-in table."""
        path = tmp_path / "rules.json"
        write_rules(
            path,
            {
                "2030": {
                    "section_179_limit": 3000000,
                    "section_179_phaseout_start": 5000000,
                    "bonus_depreciation_percent": 40,
                }
            },
        )

        rules = active_tax_rules(Settings(tax_rules_file=path))

        assert list(rules) == [2030]
        assert get_tax_year_rule(2030, rules).bonus_depreciation_percent == Decimal("40")
