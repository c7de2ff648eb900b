"""Configuration management for recipe_scaler.

The parsers work without any configuration: every public function falls back
to ``DEFAULT_CONFIG``. Callers that want different behaviour build a
``ParserConfig`` themselves or load one explicitly.

Configuration priority (highest to lowest):
1. Keyword overrides (``with_overrides``)
2. Environment variables (RECIPE_SCALER_*)
3. TOML file passed to ``ParserConfig.load``
4. Default values

Example:
    >>> config = ParserConfig.load("recipes.toml")
    >>> config = config.with_overrides(merge_continuation_lines=True)
"""

import os
import tomllib
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any

from .exceptions import ConfigurationError


@dataclass(frozen=True)
class ParserConfig:
    """Tunable parameters for parsing and formatting.

    Attributes:
        max_denominator: Largest denominator tried when rendering fractions
        fraction_tolerance: Largest error accepted for a fractional rendering;
            anything worse is shown with two decimal places
        heading_marker: Lines starting with this prefix are headings
        merge_continuation_lines: Append unnumbered instruction lines to the
            previous step instead of dropping them
        default_servings: Servings assumed when a recipe does not state any

    Example:
        >>> config = ParserConfig(max_denominator=8)
        >>> config.fraction_tolerance
        0.01
    """

    max_denominator: int = 16
    fraction_tolerance: float = 0.01
    heading_marker: str = "#"
    merge_continuation_lines: bool = False
    default_servings: int = 1

    def __post_init__(self) -> None:
        """Validate configuration values after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Validate configuration values.

        Raises:
            ConfigurationError: If any configuration value is invalid
        """
        if self.max_denominator < 1:
            raise ConfigurationError(
                "max_denominator must be at least 1",
                max_denominator=self.max_denominator,
            )

        if not 0.0 < self.fraction_tolerance < 1.0:
            raise ConfigurationError(
                "fraction_tolerance must be between 0.0 and 1.0 (exclusive)",
                fraction_tolerance=self.fraction_tolerance,
            )

        if not self.heading_marker or self.heading_marker.strip() != self.heading_marker:
            raise ConfigurationError(
                "heading_marker must be a non-empty string without surrounding whitespace",
                heading_marker=self.heading_marker,
            )

        if self.default_servings < 1:
            raise ConfigurationError(
                "default_servings must be at least 1",
                default_servings=self.default_servings,
            )

    @classmethod
    def load(
        cls,
        config_path: str | Path | None = None,
        load_env: bool = True,
    ) -> "ParserConfig":
        """Load configuration from an optional TOML file and the environment.

        Args:
            config_path: Path to a TOML file. Missing files are ignored.
            load_env: Whether to read RECIPE_SCALER_* environment variables

        Returns:
            Loaded and validated configuration

        Raises:
            ConfigurationError: If the file is unreadable or a value is invalid
        """
        config_dict: dict[str, Any] = {}

        if config_path:
            path = Path(config_path)
            if path.exists():
                config_dict.update(cls._load_toml(path))

        if load_env:
            config_dict.update(cls._load_env())

        return cls._from_dict(config_dict)

    @classmethod
    def _from_dict(cls, values: dict[str, Any]) -> "ParserConfig":
        valid_keys = {f.name for f in fields(cls)}
        unknown = sorted(set(values) - valid_keys)
        if unknown:
            raise ConfigurationError(
                f"Unknown configuration key: {unknown[0]}",
                key=unknown[0],
                valid_keys=", ".join(sorted(valid_keys)),
            )
        return cls(**values)

    @staticmethod
    def _load_toml(path: Path) -> dict[str, Any]:
        """Load configuration from TOML file.

        Args:
            path: Path to TOML file

        Returns:
            Dictionary of configuration values

        Raises:
            ConfigurationError: If TOML file is invalid
        """
        try:
            with open(path, "rb") as f:
                data = tomllib.load(f)
        except (OSError, tomllib.TOMLDecodeError) as e:
            raise ConfigurationError(
                f"Failed to load configuration from {path}",
                path=str(path),
                error=str(e),
            ) from e

        # Use the [recipe-scaler] table when the file holds other settings too
        if "recipe-scaler" in data:
            return data["recipe-scaler"]
        return data

    @staticmethod
    def _load_env() -> dict[str, Any]:
        """Load configuration from environment variables.

        Variables use the RECIPE_SCALER_ prefix and uppercase snake_case,
        e.g. RECIPE_SCALER_MAX_DENOMINATOR=8.

        Returns:
            Dictionary of configuration values from environment
        """
        config: dict[str, Any] = {}
        prefix = "RECIPE_SCALER_"

        for key, value in os.environ.items():
            if not key.startswith(prefix):
                continue

            config_key = key[len(prefix) :].lower()

            if value.lower() in ("true", "yes"):
                config[config_key] = True
            elif value.lower() in ("false", "no"):
                config[config_key] = False
            elif value.isdigit():
                config[config_key] = int(value)
            elif value.replace(".", "", 1).isdigit():
                config[config_key] = float(value)
            else:
                config[config_key] = value

        return config

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to dictionary."""
        return {f.name: getattr(self, f.name) for f in fields(self)}

    def with_overrides(self, **kwargs: Any) -> "ParserConfig":
        """Return a copy with some values replaced.

        Args:
            **kwargs: Configuration values to update

        Returns:
            New validated configuration

        Raises:
            ConfigurationError: If a key is unknown or a value is invalid
        """
        valid_keys = {f.name for f in fields(self)}
        for key in kwargs:
            if key not in valid_keys:
                raise ConfigurationError(
                    f"Unknown configuration key: {key}",
                    key=key,
                    valid_keys=", ".join(sorted(valid_keys)),
                )
        return replace(self, **kwargs)


DEFAULT_CONFIG = ParserConfig()
