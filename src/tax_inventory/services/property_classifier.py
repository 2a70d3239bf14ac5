"""Property classifier using an ordered keyword rule table.

Maps a free-text category or description to a MACRS property class.
"""

from collections.abc import Sequence
from dataclasses import dataclass

from tax_inventory.domain.value_objects import PropertyClass


@dataclass(frozen=True, slots=True)
class ClassificationRule:
    """Keywords (case-insensitive substrings) that select a property class."""

    keywords: tuple[str, ...]
    property_class: PropertyClass

    def matches(self, text: str) -> bool:
        return any(keyword in text for keyword in self.keywords)


DEFAULT_RULES: tuple[ClassificationRule, ...] = (
    ClassificationRule(
        keywords=("tractor", "farm", "furniture", "machinery", "appliance"),
        property_class=PropertyClass.SEVEN_YEAR,
    ),
    ClassificationRule(
        keywords=(
            "computer",
            "telescope",
            "vehicle",
            "equipment",
            "snack",
            "vending",
            "electronics",
        ),
        property_class=PropertyClass.FIVE_YEAR,
    ),
)


class PropertyClassifier:
    """Classifies descriptions using ordered rules.

    Rules are evaluated in order. The first matching rule determines the
    property class. 5-year property is the fallback.
    """

    DEFAULT_CLASS = PropertyClass.FIVE_YEAR

    def __init__(self, rules: Sequence[ClassificationRule] | None = None) -> None:
        """Initialize the classifier.

        Args:
            rules: Ordered rule table. Defaults to DEFAULT_RULES.
        """
        self._rules = tuple(rules) if rules is not None else DEFAULT_RULES

    @property
    def rules(self) -> tuple[ClassificationRule, ...]:
        return self._rules

    def classify(self, description: str | None) -> PropertyClass:
        """Classify a description into a PropertyClass.

        Args:
            description: Category or product description (may be empty)

        Returns:
            The first matching rule's class, or 5-year when nothing matches
        """
        text = (description or "").lower()
        for rule in self._rules:
            if rule.matches(text):
                return rule.property_class
        return self.DEFAULT_CLASS


_default_classifier = PropertyClassifier()


def classify_property(description: str | None) -> PropertyClass:
    """Classify a description with the default rule table."""
    return _default_classifier.classify(description)
