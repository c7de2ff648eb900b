"""Parse a whole recipe page and rescale it.

``parse_recipe`` runs the full flow over one markdown recipe: servings line,
ingredient sections, numbered instructions. The resulting ``ParsedRecipe``
can be rescaled any number of times; each call works from the same parsed
ingredients.

Example:
    >>> recipe = parse_recipe(page_text)
    >>> for item in recipe.scale(12):
    ...     print(item.display_quantity, item.scaled_unit, item.ingredient)
"""

import logging
import re

from pydantic import BaseModel, ConfigDict, Field

from .config import DEFAULT_CONFIG, ParserConfig
from .ingredients import parse_ingredients
from .instructions import parse_instructions
from .models import ParsedIngredient, ParsedInstruction, ScaledIngredient
from .scaling import scale_recipe
from .sections import find_recipe_sections, find_servings

logger = logging.getLogger(__name__)

INSTRUCTION_HEADINGS = ("instructions", "method", "directions")

_LIST_MARKER_RE = re.compile(r"^[-*•]\s*")


class ParsedRecipe(BaseModel):
    """Everything the parsers could extract from one recipe page.

    An empty ``ingredients`` tuple is a valid result; the caller decides
    whether to show the raw text instead.
    """

    servings: int = Field(gt=0, description="Servings the recipe was written for")
    ingredients: tuple[ParsedIngredient, ...] = ()
    instructions: tuple[ParsedInstruction, ...] = ()

    model_config = ConfigDict(frozen=True, extra="forbid")

    def scale(
        self, desired_servings: float, config: ParserConfig | None = None
    ) -> list[ScaledIngredient]:
        """Scale the ingredients from ``servings`` to ``desired_servings``."""
        return scale_recipe(self.ingredients, self.servings, desired_servings, config)


def _instruction_block(text: str, config: ParserConfig) -> str:
    """Return the text after the first instructions heading, or all text if none."""
    lines = text.split("\n")
    for index, line in enumerate(lines):
        stripped = line.strip()
        if not stripped.startswith(config.heading_marker):
            continue
        heading = stripped.lstrip(config.heading_marker).strip().lower()
        if any(word in heading for word in INSTRUCTION_HEADINGS):
            return "\n".join(lines[index + 1 :])
    return text


def parse_recipe(
    text: str,
    servings: int | None = None,
    config: ParserConfig | None = None,
) -> ParsedRecipe:
    """Parse servings, ingredients and instructions from a recipe page.

    Ingredients come from the lists under "Ingredients" headings when the
    page has any, otherwise from every line of the page. Instructions come
    from the text after the first "Instructions", "Method" or "Directions"
    heading, otherwise from the whole page.

    Args:
        text: Markdown recipe text
        servings: Servings supplied by the content source; overrides any
            servings line in the text
        config: Parser configuration

    Returns:
        ParsedRecipe
    """
    config = config or DEFAULT_CONFIG

    if servings is None or servings <= 0:
        servings = find_servings(text, config)

    sections = find_recipe_sections(text, "ingredients", config)
    if sections:
        # The line parser strips only "-" and "•" bullets
        ingredient_text = "\n".join(
            _LIST_MARKER_RE.sub("", item, count=1)
            for section in sections
            for item in section.items
        )
    else:
        ingredient_text = text

    recipe = ParsedRecipe(
        servings=servings,
        ingredients=tuple(parse_ingredients(ingredient_text, config)),
        instructions=tuple(parse_instructions(_instruction_block(text, config), config)),
    )
    logger.debug(
        "Parsed recipe: %d servings, %d ingredients, %d steps",
        recipe.servings,
        len(recipe.ingredients),
        len(recipe.instructions),
    )
    return recipe
