"""Defaults and limits for scaled-integer filtering."""

DEFAULT_PRECISION = 2
"""Number of decimal places folded into the stored integer (cents)."""

MAX_PRECISION = 18
"""Largest accepted precision; 10**18 still fits a signed 64-bit column."""

DEFAULT_FILTER_NAME = "precise_int"
"""Prefix for generated query parameter names."""

MAX_SCALED_VALUE = 2**63 - 1
"""Largest scaled magnitude; the filtered column is a signed 64-bit integer."""

MAX_SCALED_DIGITS = 18
"""Scaled values with a larger decimal exponent cannot fit MAX_SCALED_VALUE."""
