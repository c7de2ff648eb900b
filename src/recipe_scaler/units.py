"""Unit taxonomy for ingredient measurements.

Every unit belongs to exactly one category (volume, weight or count) and
converts to that category's base unit through a fixed multiplier. The tables
are built once at import time and exposed read-only.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType


class UnitCategory(str, Enum):
    """Measurement category. Only units of the same category convert."""

    VOLUME = "volume"
    WEIGHT = "weight"
    COUNT = "count"


@dataclass(frozen=True)
class UnitDefinition:
    """All canonical units of one category and their multipliers to the base unit."""

    category: UnitCategory
    base_unit: str
    conversions: Mapping[str, float]

    def multiplier(self, unit: str) -> float | None:
        return self.conversions.get(unit)


UNIT_DEFINITIONS: tuple[UnitDefinition, ...] = (
    UnitDefinition(
        category=UnitCategory.VOLUME,
        base_unit="ml",
        conversions=MappingProxyType(
            {
                "ml": 1.0,
                "l": 1000.0,
                "tsp": 4.92892,
                "tbsp": 14.7868,
                "cup": 236.588,
                "fl oz": 29.5735,
            }
        ),
    ),
    UnitDefinition(
        category=UnitCategory.WEIGHT,
        base_unit="g",
        conversions=MappingProxyType(
            {
                "g": 1.0,
                "kg": 1000.0,
                "oz": 28.3495,
                "lb": 453.592,
            }
        ),
    ),
    UnitDefinition(
        category=UnitCategory.COUNT,
        base_unit="count",
        conversions=MappingProxyType(
            {
                "count": 1.0,
                "piece": 1.0,
                "pieces": 1.0,
                "clove": 1.0,
                "cloves": 1.0,
                "egg": 1.0,
                "eggs": 1.0,
            }
        ),
    ),
)

# Written spelling (lowercase) -> canonical unit
UNIT_ALIASES: Mapping[str, str] = MappingProxyType(
    {
        "teaspoon": "tsp",
        "teaspoons": "tsp",
        "tsps": "tsp",
        "tablespoon": "tbsp",
        "tablespoons": "tbsp",
        "tbsps": "tbsp",
        "cup": "cup",
        "cups": "cup",
        "ounce": "oz",
        "ounces": "oz",
        "pound": "lb",
        "pounds": "lb",
        "lbs": "lb",
        "milliliter": "ml",
        "milliliters": "ml",
        "millilitre": "ml",
        "millilitres": "ml",
        "liter": "l",
        "liters": "l",
        "litre": "l",
        "litres": "l",
        "gram": "g",
        "grams": "g",
        "kilogram": "kg",
        "kilograms": "kg",
        "fl oz": "fl oz",
        "fluid ounce": "fl oz",
        "fluid ounces": "fl oz",
    }
)


def find_definition(unit: str) -> UnitDefinition | None:
    """Return the definition that owns a canonical unit, if any."""
    for definition in UNIT_DEFINITIONS:
        if unit in definition.conversions:
            return definition
    return None


def normalize_unit(raw: str) -> str | None:
    """Map a written unit to its canonical name.

    Aliases are checked first, then canonical names themselves. Lookup is
    case-insensitive and ignores surrounding whitespace.

    Args:
        raw: Unit as written in the recipe (e.g. "Tablespoons", "g")

    Returns:
        Canonical unit name, or None for an unknown unit

    Example:
        >>> normalize_unit(" Cups ")
        'cup'
        >>> normalize_unit("handful") is None
        True
    """
    lower = raw.strip().lower()

    if lower in UNIT_ALIASES:
        return UNIT_ALIASES[lower]

    if find_definition(lower) is not None:
        return lower

    return None


def unit_category(unit: str) -> UnitCategory | None:
    """Return the category of a canonical unit, or None if it is not registered."""
    definition = find_definition(unit)
    return definition.category if definition else None


def canonical_units() -> list[str]:
    """List every canonical unit across all categories."""
    return [unit for definition in UNIT_DEFINITIONS for unit in definition.conversions]
