from enum import Enum


class PropertyClass(str, Enum):
    THREE_YEAR = "3-year"
    FIVE_YEAR = "5-year"
    SEVEN_YEAR = "7-year"
    TEN_YEAR = "10-year"
    FIFTEEN_YEAR = "15-year"

    @classmethod
    def from_key(cls, key: "PropertyClass | str | None") -> "PropertyClass":
        """Resolve a class key, falling back to 5-year for unknown keys."""
        if isinstance(key, PropertyClass):
            return key
        if key:
            normalized = str(key).strip().lower()
            for member in cls:
                if member.value == normalized:
                    return member
        return cls.FIVE_YEAR

    @property
    def recovery_years(self) -> int:
        return int(self.value.split("-")[0])


class ComplianceLevel(str, Enum):
    MINIMAL = "minimal"
    STANDARD = "standard"
    FULL = "full"

    @property
    def rank(self) -> int:
        return _COMPLIANCE_RANK[self]

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, ComplianceLevel):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other: object) -> bool:
        if not isinstance(other, ComplianceLevel):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, ComplianceLevel):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, ComplianceLevel):
            return NotImplemented
        return self.rank >= other.rank


_COMPLIANCE_RANK = {
    ComplianceLevel.MINIMAL: 0,
    ComplianceLevel.STANDARD: 1,
    ComplianceLevel.FULL: 2,
}


class WarningSeverity(str, Enum):
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


class FieldType(str, Enum):
    STRING = "string"
    NUMBER = "number"
    DATE = "date"
    CURRENCY = "currency"


__all__ = [
    "PropertyClass",
    "ComplianceLevel",
    "WarningSeverity",
    "FieldType",
]
