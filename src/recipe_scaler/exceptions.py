"""Custom exceptions for recipe_scaler.

Parsing in this package is best-effort and reports failure by returning
``None``, so exceptions are reserved for callers that break a contract:
an invalid configuration value or an impossible servings ratio.

Example:
    >>> try:
    ...     raise ScalingError("Servings must be positive", original_servings=0)
    ... except RecipeScalerError as e:
    ...     print(e)
    Servings must be positive (original_servings=0)
"""


class RecipeScalerError(Exception):
    """Base exception for all recipe_scaler errors.

    Attributes:
        message: Human-readable error description
        context: Additional context about the failing call
    """

    def __init__(self, message: str, **context: str | int | float | bool | None) -> None:
        """Initialize the exception with a message and optional context.

        Args:
            message: Human-readable error description
            **context: Additional context (e.g., original_servings=0)
        """
        super().__init__(message)
        self.message = message
        self.context = context

    def __str__(self) -> str:
        """Format error message with context."""
        if self.context:
            context_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
            return f"{self.message} ({context_str})"
        return self.message


class ConfigurationError(RecipeScalerError):
    """Error in parser configuration.

    Raised when:
    - A configuration value is out of range
    - A TOML configuration file cannot be read or decoded
    - An unknown configuration key is supplied

    Example:
        >>> raise ConfigurationError(
        ...     "max_denominator must be at least 1",
        ...     max_denominator=0,
        ... )
    """

    pass


class ScalingError(RecipeScalerError):
    """Error in a recipe scaling request.

    Raised when the original servings count is not positive or the desired
    servings count is negative, since no meaningful scale factor exists.

    Example:
        >>> raise ScalingError(
        ...     "original_servings must be positive",
        ...     original_servings=0,
        ...     desired_servings=4,
        ... )
    """

    pass
