"""Locate recipe sections and servings in markdown-style recipe text.

A recipe page usually looks like::

    # Chocolate Chip Cookies
    Servings: 24

    ## Ingredients
    - 2 1/4 cups all-purpose flour
    - 1 tsp baking soda

    ## Instructions
    1. Preheat oven to 375°F.

``find_recipe_sections`` returns the bullet items under each heading that
mentions a keyword, and ``find_servings`` reads the servings line.
"""

import re

from pydantic import BaseModel, ConfigDict, Field

from .config import DEFAULT_CONFIG, ParserConfig

_LIST_ITEM_RE = re.compile(r"^[-*•]\s*\S")
_DIVIDER_RE = re.compile(r"^(?:-{3,}|\*{3,}|_{3,})$")
_SERVINGS_LINE_RE = re.compile(
    r"^(?:servings|serves|yield|makes)\b\s*:?\s*(.+)$",
    re.IGNORECASE | re.ASCII,
)
_LEADING_INT_RE = re.compile(r"^\s*([+-]?\d+)", re.ASCII)


class RecipeSection(BaseModel):
    """Bullet items found under one heading."""

    heading: str = Field(description="Heading text without the heading marker")
    items: tuple[str, ...] = Field(description="Raw item lines, bullet markers included")
    start_line: int = Field(description="Index of the heading line")
    end_line: int = Field(description="Index of the last line belonging to the section")

    model_config = ConfigDict(frozen=True, extra="forbid")


def _heading_text(line: str, config: ParserConfig) -> str | None:
    stripped = line.strip()
    if not stripped.startswith(config.heading_marker):
        return None
    return stripped.lstrip(config.heading_marker).strip()


def find_recipe_sections(
    text: str,
    keyword: str = "ingredients",
    config: ParserConfig | None = None,
) -> list[RecipeSection]:
    """Find the list under every heading that mentions ``keyword``.

    Blank lines and horizontal rules inside a list are skipped; any other
    non-bullet line ends the section. Headings with no items are ignored.

    Args:
        text: Markdown recipe text
        keyword: Case-insensitive word the heading must contain
        config: Supplies the heading marker

    Returns:
        Sections in source order
    """
    config = config or DEFAULT_CONFIG
    lines = text.split("\n")
    keyword = keyword.lower()
    sections: list[RecipeSection] = []

    for index, line in enumerate(lines):
        heading = _heading_text(line, config)
        if heading is None or keyword not in heading.lower():
            continue

        items: list[str] = []
        end_line = index
        for next_index in range(index + 1, len(lines)):
            candidate = lines[next_index].strip()
            if not candidate or _DIVIDER_RE.match(candidate):
                continue
            if not _LIST_ITEM_RE.match(candidate):
                break
            items.append(candidate)
            end_line = next_index

        if items:
            sections.append(
                RecipeSection(
                    heading=heading, items=tuple(items), start_line=index, end_line=end_line
                )
            )

    return sections


def is_recipe_text(text: str) -> bool:
    """True when the text mentions both ingredients and instructions."""
    lowered = text.lower()
    return "ingredients" in lowered and "instructions" in lowered


def parse_servings(value: str | int | None, default: int = 1) -> int:
    """Read a servings count such as ``"4"`` or ``"4 people"``.

    Args:
        value: Servings as supplied by the content source
        default: Returned when the value is missing or not a positive integer

    Returns:
        Positive servings count
    """
    if value is None:
        return default
    if isinstance(value, int):
        return value if value > 0 else default

    match = _LEADING_INT_RE.match(value)
    if not match:
        return default
    servings = int(match.group(1))
    return servings if servings > 0 else default


def find_servings(text: str, config: ParserConfig | None = None) -> int:
    """Return the servings stated on a "Servings:", "Serves", "Yield:" or "Makes" line.

    Falls back to ``config.default_servings``.
    """
    config = config or DEFAULT_CONFIG
    for line in text.split("\n"):
        candidate = line.strip().lstrip("-*•").strip()
        match = _SERVINGS_LINE_RE.match(candidate)
        if match:
            return parse_servings(match.group(1), config.default_servings)
    return config.default_servings
