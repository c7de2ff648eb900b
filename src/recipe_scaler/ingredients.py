"""Ingredient line parsing.

Turns lines such as ``"- 2 1/4 cups all-purpose flour (sifted)"`` into
``ParsedIngredient`` records. Parsing is best-effort: a line without a
leading quantity or without a recognized unit is not an ingredient and is
skipped.

Example:
    >>> ingredient = parse_ingredient_line("2 1/4 cups all-purpose flour")
    >>> ingredient.quantity, ingredient.unit, ingredient.ingredient
    (2.25, 'cup', 'all-purpose flour')
"""

import logging
import re

from .config import DEFAULT_CONFIG, ParserConfig
from .models import ParsedIngredient
from .quantity import parse_quantity
from .units import normalize_unit, unit_category

logger = logging.getLogger(__name__)

_BULLET_RE = re.compile(r"^[-•]\s*")
_NOTES_RE = re.compile(r"\(([^)]+)\)$")

# quantity ("2", "2.5", "2 1/4" or "1/4"), unit word(s), then the optional name.
# The unit group is lazy, so it stops at the first word boundary that lets
# the rest of the line match.
_INGREDIENT_RE = re.compile(
    r"^([\d.]+(?:\s+\d+/\d+)?|\d+/\d+)\s+([a-z\s]+?)(?:\s+(.+))?$",
    re.IGNORECASE | re.ASCII,
)


def parse_ingredient_line(line: str) -> ParsedIngredient | None:
    """Parse a single ingredient line.

    Only a trailing parenthesized group is treated as notes. Text after a
    comma stays part of the ingredient name, so ``"1 tbsp butter, softened"``
    yields the ingredient ``"butter, softened"`` and no notes.

    Args:
        line: One line of recipe text

    Returns:
        ParsedIngredient, or None if the line has no leading quantity, the
        quantity is invalid, or the unit is not registered

    Example:
        >>> parse_ingredient_line("2 eggs").ingredient
        'eggs'
        >>> parse_ingredient_line("Salt to taste") is None
        True
    """
    trimmed = line.strip()
    cleaned = _BULLET_RE.sub("", trimmed, count=1).strip()

    notes: str | None = None
    text = cleaned
    notes_match = _NOTES_RE.search(cleaned)
    if notes_match:
        notes = notes_match.group(1)
        text = cleaned[: notes_match.start()].strip()

    match = _INGREDIENT_RE.match(text)
    if not match:
        return None

    quantity_str, unit_str, name_str = match.groups()
    unit_str = unit_str.strip()

    quantity = parse_quantity(quantity_str)
    if quantity is None:
        return None

    unit = normalize_unit(unit_str)
    if unit is None:
        return None

    category = unit_category(unit)
    if category is None:
        return None

    return ParsedIngredient(
        original=trimmed,
        quantity=quantity,
        unit=unit,
        unit_category=category,
        ingredient=(name_str or "").strip() or unit_str,
        notes=notes,
    )


def parse_ingredients(text: str, config: ParserConfig | None = None) -> list[ParsedIngredient]:
    """Parse every ingredient line of a multi-line block.

    Blank lines and headings are skipped. Lines that fail to parse are
    dropped without any error, since ingredient lists are routinely mixed
    with notes and sub-headings.

    Args:
        text: Newline-separated recipe text
        config: Supplies the heading marker

    Returns:
        Parsed ingredients in source order
    """
    config = config or DEFAULT_CONFIG
    ingredients: list[ParsedIngredient] = []

    for line in text.split("\n"):
        stripped = line.strip()
        if not stripped or stripped.startswith(config.heading_marker):
            continue

        parsed = parse_ingredient_line(line)
        if parsed is None:
            logger.debug("Skipping non-ingredient line: %r", stripped)
            continue
        ingredients.append(parsed)

    return ingredients
