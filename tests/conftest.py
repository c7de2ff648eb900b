"""Pytest configuration and fixtures for recipe_scaler tests.

This module provides shared fixtures for testing the recipe_scaler package:
- Environment helpers for configuration loading
- Sample recipe text blocks
"""

import sys
from pathlib import Path

import pytest

# Add src directory to Python path for imports
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))


# ============================================================================
# Configuration Fixtures
# ============================================================================


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove all RECIPE_SCALER_* environment variables.

    Use this fixture when testing configuration loading to ensure
    no environment variables interfere with test expectations.
    """
    import os

    for key in list(os.environ.keys()):
        if key.startswith("RECIPE_SCALER_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture
def mock_env(monkeypatch: pytest.MonkeyPatch, clean_env: None) -> dict[str, str]:
    """Provide a helper to set RECIPE_SCALER_* environment variables.

    Example:
        def test_env_loading(mock_env):
            mock_env["MAX_DENOMINATOR"] = "8"
            # RECIPE_SCALER_MAX_DENOMINATOR is now set
    """

    class EnvSetter(dict[str, str]):
        def __setitem__(self, key: str, value: str) -> None:
            super().__setitem__(key, value)
            monkeypatch.setenv(f"RECIPE_SCALER_{key}", value)

    return EnvSetter()


# ============================================================================
# Recipe Text Fixtures
# ============================================================================


@pytest.fixture
def ingredients_text() -> str:
    """Ingredient block mixing headings, data lines and narrative."""
    return "\n".join(
        [
            "# Dough",
            "- 2 1/4 cups all-purpose flour",
            "- 1 tsp baking soda",
            "",
            "- 1 cup butter (softened)",
            "Mix the dry ingredients first.",
            "- 2 eggs",
            "- a pinch of salt",
            "- 12 oz chocolate chips",
        ]
    )


@pytest.fixture
def instructions_text() -> str:
    """Numbered instruction block with a heading and a wrapped line."""
    return "\n".join(
        [
            "## Instructions",
            "1. Preheat oven to 375°F.",
            "2. Whisk flour and baking soda.",
            "   Set aside while you cream the butter.",
            "",
            "3. Bake for 9-11 minutes until golden.",
        ]
    )


@pytest.fixture
def recipe_page(ingredients_text: str, instructions_text: str) -> str:
    """A whole markdown recipe page."""
    return "\n".join(
        [
            "# Chocolate Chip Cookies",
            "Servings: 24",
            "",
            "Grandma's recipe, lightly adapted.",
            "",
            "## Ingredients",
            "- 2 1/4 cups all-purpose flour",
            "- 1 tsp baking soda",
            "- 1 cup butter (softened)",
            "- 2 eggs",
            "- 12 oz chocolate chips",
            "",
            instructions_text,
        ]
    )
