"""Numbered instruction parsing with temperature and duration extraction.

Only lines that start with ``"<number>. "`` are steps. The first temperature
("350°F", "180C") and the first duration ("10 minutes", "3-4 mins") in each
step are pulled out as structured values.
"""

import logging
import re

from .config import DEFAULT_CONFIG, ParserConfig
from .models import Duration, ParsedInstruction, Temperature

logger = logging.getLogger(__name__)

_STEP_RE = re.compile(r"^(\d+)\.\s+(.+)$", re.ASCII)
_TEMPERATURE_RE = re.compile(r"(\d+)°?([FC])", re.IGNORECASE | re.ASCII)
_DURATION_RE = re.compile(
    r"(\d+(?:\s*-\s*\d+)?)\s*(minute|min|second|sec|hour|hr)s?",
    re.IGNORECASE | re.ASCII,
)
_LEADING_NUMBER_RE = re.compile(r"\d+", re.ASCII)


def extract_temperature(text: str) -> Temperature | None:
    """Return the first temperature in ``text``, with the unit letter upper-cased."""
    match = _TEMPERATURE_RE.search(text)
    if not match:
        return None
    return Temperature(value=int(match.group(1)), unit=match.group(2).upper())


def extract_duration(text: str) -> Duration | None:
    """Return the first duration in ``text``.

    For a range only the first number is kept: "3-4 minutes" gives 3.
    """
    match = _DURATION_RE.search(text)
    if not match:
        return None
    first = _LEADING_NUMBER_RE.match(match.group(1))
    return Duration(value=int(first.group()), unit=match.group(2).lower())


def _build_instruction(step_number: int, text: str) -> ParsedInstruction:
    return ParsedInstruction(
        step_number=step_number,
        text=text,
        temperature=extract_temperature(text),
        duration=extract_duration(text),
    )


def parse_instruction_line(line: str) -> ParsedInstruction | None:
    """Parse one ``"<number>. <text>"`` line.

    Args:
        line: One line of recipe text

    Returns:
        ParsedInstruction, or None if the line has no positive step number prefix

    Example:
        >>> step = parse_instruction_line("1. Preheat oven to 350°F for 10 minutes.")
        >>> step.temperature.value, step.duration.unit
        (350, 'minute')
    """
    match = _STEP_RE.match(line.strip())
    if not match:
        return None
    step_number = int(match.group(1))
    if step_number < 1:
        return None
    return _build_instruction(step_number, match.group(2))


def parse_instructions(text: str, config: ParserConfig | None = None) -> list[ParsedInstruction]:
    """Parse all numbered steps in a multi-line block.

    Blank lines and headings are skipped. Lines without a step number are
    dropped, unless ``config.merge_continuation_lines`` is set, in which case
    they are appended to the preceding step. Text before the first step is
    always dropped.

    Args:
        text: Newline-separated recipe text
        config: Supplies the heading marker and the continuation policy

    Returns:
        Parsed steps in source order
    """
    config = config or DEFAULT_CONFIG
    instructions: list[ParsedInstruction] = []

    for line in text.split("\n"):
        trimmed = line.strip()
        if not trimmed or trimmed.startswith(config.heading_marker):
            continue

        parsed = parse_instruction_line(trimmed)
        if parsed is not None:
            instructions.append(parsed)
            continue

        if config.merge_continuation_lines and instructions:
            previous = instructions[-1]
            instructions[-1] = _build_instruction(
                previous.step_number, f"{previous.text} {trimmed}"
            )
        else:
            logger.debug("Skipping unnumbered instruction line: %r", trimmed)

    return instructions
