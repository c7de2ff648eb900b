"""Unit conversion within a measurement category.

Quantities convert through the category's base unit (ml, g or count).
Volume and weight never convert into each other: that would need the
density of the specific ingredient.

Example:
    >>> result = convert_quantity(2, "cups", "ml")
    >>> round(result.quantity, 3)
    473.176
    >>> convert_quantity(1, "cup", "g") is None
    True
"""

import logging

from .models import ConversionResult
from .units import find_definition, normalize_unit

logger = logging.getLogger(__name__)


def convert_quantity(quantity: float, from_unit: str, to_unit: str) -> ConversionResult | None:
    """Convert a quantity between two units of the same category.

    Args:
        quantity: Amount in ``from_unit``
        from_unit: Source unit, canonical or alias (e.g. "tablespoons")
        to_unit: Target unit, canonical or alias

    Returns:
        ConversionResult with the converted quantity and the base-unit
        intermediate, or None if a unit is unknown or the categories differ
    """
    normalized_from = normalize_unit(from_unit)
    normalized_to = normalize_unit(to_unit)
    if normalized_from is None or normalized_to is None:
        logger.debug("Unknown unit in conversion: %r -> %r", from_unit, to_unit)
        return None

    from_definition = find_definition(normalized_from)
    to_definition = find_definition(normalized_to)
    if (
        from_definition is None
        or to_definition is None
        or from_definition.base_unit != to_definition.base_unit
    ):
        logger.debug("Incompatible units: %s -> %s", normalized_from, normalized_to)
        return None

    base_quantity = quantity * from_definition.conversions[normalized_from]
    result_quantity = base_quantity / to_definition.conversions[normalized_to]

    return ConversionResult(
        quantity=result_quantity,
        unit=normalized_to,
        base_quantity=base_quantity,
        base_unit=from_definition.base_unit,
    )
