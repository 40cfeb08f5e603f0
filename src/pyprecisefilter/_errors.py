"""Exception hierarchy for scaled-integer filtering."""

from __future__ import annotations

from typing import Any


class FilterError(Exception):
    """Base exception for filter errors.

    Provides dual messaging: a user-facing message and internal
    details for logging.
    """

    def __init__(
        self,
        user_message: str,
        internal_details: str = "",
        wrapped: Exception | None = None,
    ) -> None:
        super().__init__(user_message)
        self.user_message = user_message
        self.internal_details = internal_details or user_message
        self.wrapped = wrapped

    def internal(self) -> str:
        return self.internal_details


class UnsupportedOperatorError(FilterError):
    """Raised when an operator type code is not in the operator table."""

    def __init__(self, code: Any, valid_codes: tuple[int, ...]) -> None:
        allowed = '", "'.join(str(c) for c in valid_codes)
        super().__init__(
            f'The type "{code}" is not supported, allowed one are "{allowed}".',
            f"operator type {code!r} not in {list(valid_codes)}",
        )
        self.code = code
        self.valid_codes = valid_codes


class NotNumericError(FilterError):
    """Raised when a value cannot be read as a decimal number."""

    def __init__(
        self,
        value: Any,
        internal_details: str = "",
        wrapped: Exception | None = None,
    ) -> None:
        super().__init__(
            ERR_MSG_NOT_NUMERIC,
            internal_details or f"value {value!r} is not numeric",
            wrapped,
        )
        self.value = value


class ValueOutOfRangeError(FilterError):
    """Raised when a scaled value does not fit a signed 64-bit column."""

    def __init__(self, value: Any, internal_details: str = "") -> None:
        super().__init__(
            ERR_MSG_OUT_OF_RANGE,
            internal_details or f"value {value!r} is out of range",
        )
        self.value = value


class UnboundParameterError(FilterError):
    """Raised when a placeholder was issued but its parameter never bound."""


class InvalidPrecisionError(FilterError):
    """Raised when a precision is negative, too large or not an integer."""


class InvalidFieldNameError(FilterError):
    """Raised when a column alias or field name is invalid."""


class DuplicateParameterError(FilterError):
    """Raised when a query parameter name is bound twice."""


# Sanitized user-facing error message constants
ERR_MSG_NOT_NUMERIC = "value is not numeric"
ERR_MSG_INVALID_PRECISION = "invalid precision"
ERR_MSG_DUPLICATE_PARAMETER = "parameter already bound"
ERR_MSG_OUT_OF_RANGE = "value is out of range"
ERR_MSG_UNBOUND_PARAMETER = "parameter not bound"
