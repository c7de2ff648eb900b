"""Scale a parsed ingredient list to a different number of servings."""

from collections.abc import Iterable

from .config import ParserConfig
from .exceptions import ScalingError
from .models import ParsedIngredient, ScaledIngredient
from .quantity import format_quantity


def scale_factor(original_servings: float, desired_servings: float) -> float:
    """Return ``desired_servings / original_servings``.

    Raises:
        ScalingError: If original servings is not positive or desired
            servings is negative
    """
    if original_servings <= 0:
        raise ScalingError(
            "original_servings must be positive",
            original_servings=original_servings,
            desired_servings=desired_servings,
        )
    if desired_servings < 0:
        raise ScalingError(
            "desired_servings must not be negative",
            original_servings=original_servings,
            desired_servings=desired_servings,
        )
    return desired_servings / original_servings


def scale_recipe(
    ingredients: Iterable[ParsedIngredient],
    original_servings: float,
    desired_servings: float,
    config: ParserConfig | None = None,
) -> list[ScaledIngredient]:
    """Scale every ingredient by the same servings ratio.

    Order and length are preserved and units are left as they are. Each
    result carries a display string from ``format_quantity``.

    Args:
        ingredients: Parsed ingredients
        original_servings: Servings the recipe was written for
        desired_servings: Servings to scale to
        config: Passed through to ``format_quantity``

    Returns:
        One ScaledIngredient per input ingredient

    Raises:
        ScalingError: If the servings counts cannot form a scale factor

    Example:
        >>> scaled = scale_recipe(parse_ingredients("2 cups milk"), 4, 2)
        >>> scaled[0].display_quantity
        '1'
    """
    factor = scale_factor(original_servings, desired_servings)

    scaled: list[ScaledIngredient] = []
    for ingredient in ingredients:
        scaled_quantity = ingredient.quantity * factor
        scaled.append(
            ScaledIngredient(
                **ingredient.model_dump(),
                scaled_quantity=scaled_quantity,
                scaled_unit=ingredient.unit,
                display_quantity=format_quantity(scaled_quantity, config),
            )
        )
    return scaled
