"""Unit tests for instruction parsing."""

import pytest

from recipe_scaler.config import ParserConfig
from recipe_scaler.instructions import (
    extract_duration,
    extract_temperature,
    parse_instruction_line,
    parse_instructions,
)
from recipe_scaler.models import Duration, Temperature


class TestExtractTemperature:
    """Tests for extract_temperature."""

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("Preheat oven to 350°F.", Temperature(value=350, unit="F")),
            ("Bake at 180c until set.", Temperature(value=180, unit="C")),
            ("Heat to 200 °C", None),
            ("Stir well.", None),
        ],
    )
    def test_matches(self, text: str, expected: Temperature | None) -> None:
        """Digits followed by an optional degree sign and F or C."""
        assert extract_temperature(text) == expected

    def test_first_match_wins(self) -> None:
        """Only the first temperature is kept."""
        temperature = extract_temperature("Start at 425F, then lower to 350F.")
        assert temperature == Temperature(value=425, unit="F")


class TestExtractDuration:
    """Tests for extract_duration."""

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("Bake for 10 minutes.", Duration(value=10, unit="minute")),
            ("Simmer 5 mins", Duration(value=5, unit="min")),
            ("Rest 30 Seconds", Duration(value=30, unit="second")),
            ("Whisk for 45sec", Duration(value=45, unit="sec")),
            ("Braise 2 hours", Duration(value=2, unit="hour")),
            ("Proof 1 hr", Duration(value=1, unit="hr")),
            ("Bake 9-11 minutes", Duration(value=9, unit="minute")),
            ("Cook 3 - 4 mins per side", Duration(value=3, unit="min")),
            ("Season to taste.", None),
        ],
    )
    def test_matches(self, text: str, expected: Duration | None) -> None:
        """Durations keep the first number and the singular unit."""
        assert extract_duration(text) == expected

    def test_first_match_wins(self) -> None:
        """Only the first duration is kept."""
        duration = extract_duration("Bake 20 minutes, then broil 2 minutes.")
        assert duration == Duration(value=20, unit="minute")


class TestParseInstructionLine:
    """Tests for parse_instruction_line."""

    def test_full_step(self) -> None:
        """Step number, text, temperature and duration are extracted."""
        step = parse_instruction_line("1. Preheat oven to 350°F for 10 minutes.")

        assert step is not None
        assert step.step_number == 1
        assert step.text == "Preheat oven to 350°F for 10 minutes."
        assert step.temperature == Temperature(value=350, unit="F")
        assert step.duration == Duration(value=10, unit="minute")

    def test_plain_step(self) -> None:
        """Steps without times or temperatures have neither."""
        step = parse_instruction_line("4. Fold in the chocolate chips.")

        assert step is not None
        assert step.temperature is None
        assert step.duration is None

    @pytest.mark.parametrize("line", ["Preheat the oven.", "1) Mix", "1.Mix", "Step 1. Mix", "2."])
    def test_requires_number_dot_space(self, line: str) -> None:
        """Only "<number>. " prefixed lines are steps."""
        assert parse_instruction_line(line) is None

    @pytest.mark.parametrize("line", ["0. Gather the ingredients.", "00. Mix"])
    def test_step_zero_rejected(self, line: str) -> None:
        """Step numbers start at 1."""
        assert parse_instruction_line(line) is None

    def test_non_ascii_step_number_rejected(self) -> None:
        """Only ASCII digits number a step."""
        assert parse_instruction_line("\u0661. Mix the flour.") is None

    def test_non_ascii_digits_not_extracted(self) -> None:
        """Temperatures and durations need ASCII digits."""
        step = parse_instruction_line("1. Bake at \u0663\u0665\u0660°F for \u0661\u0660 minutes.")

        assert step is not None
        assert step.temperature is None
        assert step.duration is None


class TestParseInstructions:
    """Tests for parse_instructions."""

    def test_single_step_line(self) -> None:
        """A single step line yields one record."""
        steps = parse_instructions("1. Preheat oven to 350°F for 10 minutes.")

        assert len(steps) == 1
        assert steps[0].step_number == 1
        assert steps[0].temperature == Temperature(value=350, unit="F")
        assert steps[0].duration == Duration(value=10, unit="minute")

    def test_drops_headings_blanks_and_continuations(self, instructions_text: str) -> None:
        """Unnumbered lines are dropped by default."""
        steps = parse_instructions(instructions_text)

        assert [step.step_number for step in steps] == [1, 2, 3]
        assert steps[1].text == "Whisk flour and baking soda."
        assert steps[0].temperature == Temperature(value=375, unit="F")
        assert steps[2].duration == Duration(value=9, unit="minute")

    def test_step_numbers_are_not_renumbered(self) -> None:
        """Author-supplied numbers are kept even when they skip."""
        steps = parse_instructions("3. Mix.\n7. Bake.\n1. Serve.")
        assert [step.step_number for step in steps] == [3, 7, 1]

    def test_merge_continuation_lines(self, instructions_text: str) -> None:
        """With merging enabled, wrapped lines join the previous step."""
        config = ParserConfig(merge_continuation_lines=True)

        steps = parse_instructions(instructions_text, config)

        assert len(steps) == 3
        assert steps[1].step_number == 2
        assert steps[1].text == (
            "Whisk flour and baking soda. Set aside while you cream the butter."
        )

    def test_merged_text_is_rescanned(self) -> None:
        """Times on a continuation line are picked up after merging."""
        config = ParserConfig(merge_continuation_lines=True)

        steps = parse_instructions("1. Roast the chicken\nat 425F for 1 hour.", config)

        assert steps[0].temperature == Temperature(value=425, unit="F")
        assert steps[0].duration == Duration(value=1, unit="hour")

    def test_text_before_first_step_dropped_when_merging(self) -> None:
        """There is no step to attach leading narrative to."""
        config = ParserConfig(merge_continuation_lines=True)

        steps = parse_instructions("Read everything first.\n1. Mix.", config)

        assert len(steps) == 1
        assert steps[0].text == "Mix."

    def test_empty_text(self) -> None:
        """Empty input yields an empty list."""
        assert parse_instructions("") == []
