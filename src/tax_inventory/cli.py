"""Command-line interface for the Tax Inventory Engine."""

import argparse
import json
import sys
from decimal import Decimal, InvalidOperation

from tax_inventory import __version__
from tax_inventory.config import get_settings
from tax_inventory.domain.depreciation import DepreciationElection, TaxYearRule
from tax_inventory.domain.macrs_tables import PROPERTY_CLASS_INFO
from tax_inventory.domain.value_objects import PropertyClass
from tax_inventory.exceptions import TaxInventoryError
from tax_inventory.logging_config import configure_logging, get_logger
from tax_inventory.services.depreciation import schedule_for_election
from tax_inventory.services.inventory_import import InventoryImportService
from tax_inventory.services.item_validator import validate_election
from tax_inventory.services.property_classifier import classify_property
from tax_inventory.services.tax_rules import active_tax_rules, get_tax_year_rule

logger = get_logger(__name__)


def _decimal_arg(value: str) -> Decimal:
    try:
        amount = Decimal(value.replace(",", "").lstrip("$"))
    except InvalidOperation:
        raise argparse.ArgumentTypeError(f"invalid amount: {value!r}") from None
    if not amount.is_finite():
        raise argparse.ArgumentTypeError(f"invalid amount: {value!r}")
    return amount


def _format_rule(rule: TaxYearRule) -> str:
    line = (
        f"{rule.tax_year}: Section 179 limit ${rule.section_179_limit:,.0f}, "
        f"phase-out ${rule.section_179_phaseout_start:,.0f}, "
        f"bonus {rule.bonus_depreciation_percent}%"
    )
    if rule.bonus_description:
        line += f" ({rule.bonus_description})"
    return line


def cmd_version(args: argparse.Namespace) -> int:
    """Show version information."""
    print(f"Tax Inventory Engine v{__version__}")
    return 0


def cmd_schedule(args: argparse.Namespace) -> int:
    """Print the depreciation schedule for one asset."""
    year = args.year if args.year is not None else get_settings().default_tax_year
    election = DepreciationElection(
        original_cost=args.cost,
        purchase_year=year,
        property_class=PropertyClass.from_key(args.property_class),
        section_179_amount=args.section_179,
        bonus_depreciation_percent=args.bonus,
    )

    for warning in validate_election(election):
        print(f"{warning.severity.value.upper()}: {warning.message}")

    info = PROPERTY_CLASS_INFO[election.property_class]
    print(f"{info.name}, cost ${election.original_cost:,.2f}, placed in service {year}")
    print(
        f"{'Year':<6}{'Rate %':>8}{'MACRS':>14}{'Sec 179':>14}{'Bonus':>14}"
        f"{'Deduction':>14}{'Book value':>14}"
    )
    for row in schedule_for_election(election):
        print(
            f"{row.year:<6}{row.depreciation_percent:>8.2f}"
            f"{row.depreciation_amount:>14,.2f}{row.section_179_amount:>14,.2f}"
            f"{row.bonus_amount:>14,.2f}{row.total_deduction:>14,.2f}"
            f"{row.ending_book_value:>14,.2f}"
        )
    return 0


def cmd_classify(args: argparse.Namespace) -> int:
    """Show the MACRS property class for a description."""
    property_class = classify_property(args.description)
    info = PROPERTY_CLASS_INFO[property_class]
    print(f"{info.name} ({property_class.value})")
    print(f"  {info.description}")
    return 0


def cmd_import(args: argparse.Namespace) -> int:
    """Parse a pasted inventory file and print the register."""
    service = InventoryImportService()
    items = service.parse_file(args.file, source_hint=args.source)

    if args.json:
        print(json.dumps([item.to_dict() for item in items], indent=2))
        return 0

    if not items:
        print("No inventory items recognized")
        return 0

    print(f"✓ Parsed {len(items)} item(s)")
    for item in items:
        marker = " " if item.selected else "!"
        print(
            f"{marker} {item.id}  {item.acquisition_date}  "
            f"${item.cost_basis:>10,.2f}  {item.product_name}"
        )
        print(
            f"    {item.depreciation_class}, first year ${item.first_year_depreciation:,.2f}, "
            f"donate after {item.donation_eligible_date or 'n/a'}, "
            f"{item.compliance_level.value}"
        )
        for warning in item.validation_warnings:
            print(f"    - {warning.severity.value}: {warning.message}")

    return 0


def cmd_rules(args: argparse.Namespace) -> int:
    """Show the tax-year rule table, or the rule applied to one year."""
    if args.year is None:
        for rule in active_tax_rules().values():
            print(_format_rule(rule))
        return 0

    rule = get_tax_year_rule(args.year)
    if rule.tax_year != args.year:
        print(f"No rule for {args.year}; using {rule.tax_year}")
    print(_format_rule(rule))
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="tax-inventory",
        description="Tax Inventory Engine - MACRS depreciation and inventory import",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # version command
    version_parser = subparsers.add_parser("version", help="Show version")
    version_parser.set_defaults(func=cmd_version)

    # schedule command
    schedule_parser = subparsers.add_parser(
        "schedule", help="Show the depreciation schedule for an asset"
    )
    schedule_parser.add_argument("cost", type=_decimal_arg, help="Original cost basis")
    schedule_parser.add_argument(
        "--year", "-y", type=int, default=None, help="Year placed in service"
    )
    schedule_parser.add_argument(
        "--class",
        "-c",
        dest="property_class",
        choices=[pc.value for pc in PropertyClass],
        default=PropertyClass.FIVE_YEAR.value,
        help="MACRS property class (default: 5-year)",
    )
    schedule_parser.add_argument(
        "--section-179",
        type=_decimal_arg,
        default=Decimal("0"),
        help="Section 179 amount expensed in the first year",
    )
    schedule_parser.add_argument(
        "--bonus",
        type=_decimal_arg,
        default=Decimal("0"),
        help="Bonus depreciation percent (0-100)",
    )
    schedule_parser.set_defaults(func=cmd_schedule)

    # classify command
    classify_parser = subparsers.add_parser(
        "classify", help="Classify a description into a property class"
    )
    classify_parser.add_argument("description", help="Item category or description")
    classify_parser.set_defaults(func=cmd_classify)

    # import command
    import_parser = subparsers.add_parser("import", help="Parse a pasted inventory file")
    import_parser.add_argument("file", help="Text, CSV or tab-separated file")
    import_parser.add_argument(
        "--source", "-s", default=None, help="Source label (detected when omitted)"
    )
    import_parser.add_argument(
        "--json", action="store_true", help="Print the register as JSON"
    )
    import_parser.set_defaults(func=cmd_import)

    # rules command
    rules_parser = subparsers.add_parser("rules", help="Show tax-year rules")
    rules_parser.add_argument("--year", "-y", type=int, default=None, help="Tax year")
    rules_parser.set_defaults(func=cmd_rules)

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    configure_logging(get_settings())

    try:
        result: int = args.func(args)
    except TaxInventoryError as e:
        logger.error("command_failed", command=args.command, **e.to_dict())
        print(f"Error: {e}")
        return 1
    return result


if __name__ == "__main__":
    sys.exit(main())
