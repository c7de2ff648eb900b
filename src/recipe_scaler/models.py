"""Record types produced by the parsers.

All records are immutable Pydantic models. A parse call creates them and
nothing modifies them afterwards: scaling builds new ``ScaledIngredient``
records instead of updating the parsed ones.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from .units import UnitCategory


class ParsedIngredient(BaseModel):
    """One ingredient line split into quantity, unit and name."""

    original: str = Field(
        description="The ingredient line as written, with surrounding whitespace removed",
        examples=["- 2 1/4 cups all-purpose flour"],
    )
    quantity: float = Field(
        gt=0,
        description="Numeric quantity (e.g. 2.25 for '2 1/4')",
        examples=[2.25, 0.5, 3],
    )
    unit: str = Field(
        description="Canonical unit name",
        examples=["cup", "tbsp", "g", "eggs"],
    )
    unit_category: UnitCategory = Field(
        description="Measurement category of the unit",
    )
    ingredient: str = Field(
        description=(
            "Ingredient name. Falls back to the unit word when nothing follows it "
            "(e.g. '2 eggs' -> 'eggs')"
        ),
        examples=["all-purpose flour", "butter, softened"],
    )
    notes: str | None = Field(
        None,
        description="Contents of a trailing parenthesized group, if any",
        examples=["room temperature"],
    )

    model_config = ConfigDict(frozen=True, extra="forbid")


class ScaledIngredient(ParsedIngredient):
    """A parsed ingredient with its quantity scaled for a new servings count."""

    scaled_quantity: float = Field(
        ge=0,
        description="Quantity multiplied by the scale factor",
    )
    scaled_unit: str = Field(
        description="Unit of the scaled quantity. Scaling never converts units.",
    )
    display_quantity: str = Field(
        description="Scaled quantity rendered for display",
        examples=["1 1/8", "1/2", "3"],
    )


class Temperature(BaseModel):
    """Oven or cooking temperature mentioned in an instruction."""

    value: int
    unit: Literal["F", "C"]

    model_config = ConfigDict(frozen=True, extra="forbid")


class Duration(BaseModel):
    """Cooking time mentioned in an instruction.

    For a range such as "10-12 minutes" only the first number is kept.
    """

    value: int
    unit: str = Field(
        description="Singular, lowercase unit word as written",
        examples=["minute", "min", "second", "sec", "hour", "hr"],
    )

    model_config = ConfigDict(frozen=True, extra="forbid")


class ParsedInstruction(BaseModel):
    """One numbered instruction step."""

    step_number: int = Field(
        ge=1,
        description="Step number as written by the author, not renumbered",
    )
    text: str = Field(description="Instruction text without the step number")
    temperature: Temperature | None = None
    duration: Duration | None = None

    model_config = ConfigDict(frozen=True, extra="forbid")


class ConversionResult(BaseModel):
    """Outcome of a unit conversion, including the base-unit intermediate."""

    quantity: float
    unit: str
    base_quantity: float
    base_unit: str

    model_config = ConfigDict(frozen=True, extra="forbid")
