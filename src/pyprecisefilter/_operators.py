"""Operator type codes and their SQL comparison operators."""

from __future__ import annotations

import enum
from types import MappingProxyType
from typing import Any

from pyprecisefilter._errors import UnsupportedOperatorError


class OperatorType(enum.IntEnum):
    """Number operator codes as submitted by the admin filter form."""

    GREATER_EQUAL = 1
    GREATER_THAN = 2
    EQUAL = 3
    LESS_EQUAL = 4
    LESS_THAN = 5


# Operator type code -> SQL operator
CHOICES: MappingProxyType[int, str] = MappingProxyType({
    OperatorType.EQUAL: "=",
    OperatorType.GREATER_EQUAL: ">=",
    OperatorType.GREATER_THAN: ">",
    OperatorType.LESS_EQUAL: "<=",
    OperatorType.LESS_THAN: "<",
})

VALID_CODES: tuple[int, ...] = tuple(int(code) for code in CHOICES)


def resolve_operator(code: Any) -> str:
    """Return the SQL operator for an operator type code.

    Raises:
        UnsupportedOperatorError: If the code is not one of the five known types.
    """
    # bool is an int subclass; True must not resolve to GREATER_EQUAL
    if isinstance(code, bool) or not isinstance(code, int):
        raise UnsupportedOperatorError(code, VALID_CODES)
    try:
        return CHOICES[code]
    except KeyError:
        raise UnsupportedOperatorError(code, VALID_CODES) from None
