"""
Recipe Scaler - Parse, convert and scale free-text recipes.

This package turns loosely structured ingredient and instruction lines into
typed records, converts quantities between compatible units, scales an
ingredient list to a new number of servings, and renders the results as
cook-friendly fractions.
"""

__version__ = "0.1.0"

from .config import DEFAULT_CONFIG, ParserConfig
from .conversion import convert_quantity
from .exceptions import ConfigurationError, RecipeScalerError, ScalingError
from .ingredients import parse_ingredient_line, parse_ingredients
from .instructions import parse_instruction_line, parse_instructions
from .models import (
    ConversionResult,
    Duration,
    ParsedIngredient,
    ParsedInstruction,
    ScaledIngredient,
    Temperature,
)
from .quantity import format_quantity, parse_quantity
from .recipe import ParsedRecipe, parse_recipe
from .scaling import scale_recipe
from .units import UnitCategory, normalize_unit, unit_category

__all__ = [
    "DEFAULT_CONFIG",
    "ConfigurationError",
    "ConversionResult",
    "Duration",
    "ParsedIngredient",
    "ParsedInstruction",
    "ParsedRecipe",
    "ParserConfig",
    "RecipeScalerError",
    "ScaledIngredient",
    "ScalingError",
    "Temperature",
    "UnitCategory",
    "convert_quantity",
    "format_quantity",
    "normalize_unit",
    "parse_ingredient_line",
    "parse_ingredients",
    "parse_instruction_line",
    "parse_instructions",
    "parse_quantity",
    "parse_recipe",
    "scale_recipe",
    "unit_category",
]
