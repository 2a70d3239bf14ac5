"""Import field catalog, compliance tiers and IRS validation thresholds."""

from dataclasses import dataclass
from decimal import Decimal
from types import MappingProxyType

from tax_inventory.domain.value_objects import ComplianceLevel, FieldType


@dataclass(frozen=True, slots=True)
class ImportField:
    """Declarative descriptor for one importable inventory field."""

    name: str
    label: str
    field_type: FieldType
    required: bool
    tooltip: str
    irs_reference: str | None = None
    auto_generate: bool = False


IMPORT_FIELDS: tuple[ImportField, ...] = (
    ImportField(
        name="product_name",
        label="Product Name",
        field_type=FieldType.STRING,
        required=True,
        tooltip="Descriptive name for the item. Required for all imports.",
    ),
    ImportField(
        name="acquisition_date",
        label="Acquisition Date",
        field_type=FieldType.DATE,
        required=True,
        tooltip=(
            "Date you acquired/ordered the item. Starts depreciation and the "
            "donation holding period."
        ),
        irs_reference="IRS Pub 946 - Placed in Service Date",
    ),
    ImportField(
        name="cost_basis",
        label="Cost Basis / ETV",
        field_type=FieldType.CURRENCY,
        required=True,
        tooltip=(
            "Your cost or Estimated Tax Value. This is the depreciable basis "
            "and affects donation valuation."
        ),
        irs_reference="IRS Pub 551 - Basis of Assets",
    ),
    ImportField(
        name="source",
        label="Source",
        field_type=FieldType.STRING,
        required=False,
        tooltip="Where you acquired this item (Amazon Vine, Temu, Alibaba, etc.).",
        auto_generate=True,
    ),
    ImportField(
        name="receipt_reference",
        label="Order/Receipt #",
        field_type=FieldType.STRING,
        required=False,
        tooltip="Order number or receipt reference. Auto-generated if not provided.",
        auto_generate=True,
    ),
    ImportField(
        name="asin",
        label="ASIN/SKU",
        field_type=FieldType.STRING,
        required=False,
        tooltip="Amazon ASIN or product SKU. Helps with identification.",
        auto_generate=True,
    ),
    ImportField(
        name="category",
        label="Category",
        field_type=FieldType.STRING,
        required=False,
        tooltip="Product category (Electronics, Furniture, etc.). Drives the depreciation class.",
        irs_reference="IRS Pub 946 - Property Classes",
    ),
    ImportField(
        name="quantity",
        label="Quantity",
        field_type=FieldType.NUMBER,
        required=False,
        tooltip="Number of units. Default is 1.",
    ),
)

IMPORT_FIELDS_BY_NAME = MappingProxyType({f.name: f for f in IMPORT_FIELDS})


@dataclass(frozen=True, slots=True)
class ComplianceRequirement:
    level: ComplianceLevel
    required: tuple[str, ...]
    description: str
    tax_benefits: bool


# Ordered lowest to highest; each tier is a superset of the previous one
COMPLIANCE_LEVELS: tuple[ComplianceRequirement, ...] = (
    ComplianceRequirement(
        level=ComplianceLevel.MINIMAL,
        required=("product_name",),
        description="Basic tracking only - no tax benefits",
        tax_benefits=False,
    ),
    ComplianceRequirement(
        level=ComplianceLevel.STANDARD,
        required=("product_name", "acquisition_date", "cost_basis"),
        description="Standard deductions available",
        tax_benefits=True,
    ),
    ComplianceRequirement(
        level=ComplianceLevel.FULL,
        required=(
            "product_name",
            "acquisition_date",
            "cost_basis",
            "source",
            "receipt_reference",
        ),
        description="Full audit-ready documentation",
        tax_benefits=True,
    ),
)


@dataclass(frozen=True, slots=True)
class ValidationRule:
    name: str
    irs_reference: str
    description: str
    amount: Decimal | None = None
    months: int | None = None


DONATION_HOLDING_PERIOD = ValidationRule(
    name="donation_holding_period",
    months=6,
    irs_reference="IRS Pub 526 - Long-term capital gain property",
    description="Property must be held >6 months for full FMV deduction",
)
FORM_8283_THRESHOLD = ValidationRule(
    name="form_8283_threshold",
    amount=Decimal("500"),
    irs_reference="Form 8283 - Noncash Charitable Contributions",
    description="Donations over $500 require Form 8283",
)
APPRAISAL_THRESHOLD = ValidationRule(
    name="appraisal_threshold",
    amount=Decimal("5000"),
    irs_reference="IRS Pub 561",
    description="Donations over $5,000 require qualified appraisal",
)

VALIDATION_RULES = MappingProxyType(
    {
        rule.name: rule
        for rule in (DONATION_HOLDING_PERIOD, FORM_8283_THRESHOLD, APPRAISAL_THRESHOLD)
    }
)

ACQUISITION_DATE_REFERENCE = "IRS Pub 946"
COST_BASIS_REFERENCE = "IRS Pub 551"
SECTION_179_REFERENCE = "IRC §179"
BONUS_DEPRECIATION_REFERENCE = "IRC §168(k)"
