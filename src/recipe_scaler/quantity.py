"""Numeric quantities: parsing recipe tokens and rendering cook-friendly fractions.

``parse_quantity`` reads integers, decimals, vulgar fractions ("1/4") and mixed
numbers ("2 1/4"). ``format_quantity`` goes the other way, turning a scaled
float such as 1.3333 into "1 1/3".

Example:
    >>> parse_quantity("2 1/4")
    2.25
    >>> format_quantity(2.25)
    '2 1/4'
"""

import math
import re
from dataclasses import dataclass

from .config import DEFAULT_CONFIG, ParserConfig

_DECIMAL_RE = re.compile(r"\d+(?:\.\d*)?|\.\d+", re.ASCII)


def _is_decimal(text: str) -> bool:
    return _DECIMAL_RE.fullmatch(text) is not None


def parse_quantity(token: str) -> float | None:
    """Parse a quantity token into a float.

    The token holds one or two whitespace-separated parts. Each part is a
    decimal literal or ``numerator/denominator``; the parts are summed.

    Args:
        token: Quantity as written (e.g. "2", "1.5", "1/4", "2 1/4")

    Returns:
        The quantity, or None if a part is not numeric, a denominator is
        zero, or the total is not a finite positive number

    Example:
        >>> parse_quantity("1/4")
        0.25
        >>> parse_quantity("0") is None
        True
    """
    parts = token.split()
    if not parts or len(parts) > 2:
        return None

    total = 0.0
    for part in parts:
        if "/" in part:
            numerator, _, denominator = part.partition("/")
            if not (_is_decimal(numerator) and _is_decimal(denominator)):
                return None
            if float(denominator) == 0:
                return None
            total += float(numerator) / float(denominator)
        else:
            if not _is_decimal(part):
                return None
            total += float(part)

    # Recipes never call for zero of something; zero means a bad parse.
    # Overflowing literals such as "9" * 400 become inf and are rejected too.
    if not math.isfinite(total) or total <= 0:
        return None
    return total


@dataclass(frozen=True)
class FractionApproximation:
    """Nearest simple fraction to the fractional part of a value.

    Attributes:
        whole: Integer part of the value (floored)
        numerator: Best numerator for the remainder
        denominator: Denominator that produced the smallest error
        error: Absolute difference between numerator/denominator and the remainder
    """

    whole: int
    numerator: int
    denominator: int
    error: float

    @property
    def rounds_up(self) -> bool:
        """True when the remainder rounded to a full unit (e.g. 16/16)."""
        return self.numerator == self.denominator


def closest_fraction(value: float, max_denominator: int = 16) -> FractionApproximation:
    """Find the simple fraction closest to the fractional part of ``value``.

    Denominators are tried in ascending order and only a strictly smaller
    error replaces the current best, so ties keep the smaller denominator.

    Args:
        value: Non-negative value to approximate
        max_denominator: Largest denominator to try

    Returns:
        FractionApproximation for the remainder
    """
    whole = math.floor(value)
    remainder = value - whole

    best_numerator = 0
    best_denominator = 1
    best_error = 1.0

    for denominator in range(1, max_denominator + 1):
        # Round half up; round() would round 0.5 to even
        numerator = math.floor(remainder * denominator + 0.5)
        error = abs(numerator / denominator - remainder)
        if error < best_error:
            best_error = error
            best_numerator = numerator
            best_denominator = denominator

    return FractionApproximation(
        whole=whole,
        numerator=best_numerator,
        denominator=best_denominator,
        error=best_error,
    )


def format_quantity(value: float, config: ParserConfig | None = None) -> str:
    """Render a quantity as a whole number, a fraction, or two decimals.

    Args:
        value: Quantity to display
        config: Supplies the maximum denominator and the error tolerance

    Returns:
        "3", "1/2", "2 1/4", or a fixed two-decimal string such as "0.03" when
        no fraction within the tolerance exists

    Example:
        >>> format_quantity(4 / 3)
        '1 1/3'
        >>> format_quantity(3)
        '3'
    """
    config = config or DEFAULT_CONFIG

    if not math.isfinite(value):
        return f"{value:.2f}"

    if value < 0:
        return "-" + format_quantity(-value, config)

    if float(value).is_integer():
        return str(int(value))

    approx = closest_fraction(value, config.max_denominator)

    if approx.rounds_up:
        return str(approx.whole + 1)

    if approx.error < config.fraction_tolerance:
        if approx.numerator == 0:
            return str(approx.whole)
        fraction = f"{approx.numerator}/{approx.denominator}"
        if approx.whole > 0:
            return f"{approx.whole} {fraction}"
        return fraction

    return f"{value:.2f}"
