"""Data module for rounding modes and precision configuration."""

from precise_numbers.data.precision_types import (
    DEFAULT_PRECISION,
    DEFAULT_PRECISION_CONFIG,
    DEFAULT_ROUNDING_MODE,
    DEFAULT_SCALE,
    PrecisionConfig,
    RoundingMode,
    RoundingSpec,
    get_decimal_rounding,
    get_rounding_spec,
    is_exact,
    list_rounding_modes,
    parse_rounding_mode,
    resolve_config,
)

__all__ = [
    "DEFAULT_PRECISION",
    "DEFAULT_PRECISION_CONFIG",
    "DEFAULT_ROUNDING_MODE",
    "DEFAULT_SCALE",
    "PrecisionConfig",
    "RoundingMode",
    "RoundingSpec",
    "get_decimal_rounding",
    "get_rounding_spec",
    "is_exact",
    "list_rounding_modes",
    "parse_rounding_mode",
    "resolve_config",
]
