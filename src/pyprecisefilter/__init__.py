"""pyprecisefilter - Filter scaled-integer columns with decimal input."""

from __future__ import annotations

try:
    from pyprecisefilter._version import __version__
except ModuleNotFoundError:  # editable install without VCS metadata
    __version__ = "0.0.0.dev0"

import logging
from typing import Any

from pyprecisefilter._constants import DEFAULT_FILTER_NAME, DEFAULT_PRECISION
from pyprecisefilter._errors import (
    DuplicateParameterError,
    FilterError,
    InvalidFieldNameError,
    InvalidPrecisionError,
    NotNumericError,
    UnboundParameterError,
    UnsupportedOperatorError,
    ValueOutOfRangeError,
)
from pyprecisefilter._operators import CHOICES, OperatorType, resolve_operator
from pyprecisefilter._precision import denormalize, is_numeric, normalize
from pyprecisefilter.dialect import get_dialect
from pyprecisefilter.dialect._base import Dialect
from pyprecisefilter.dialect.bigquery import BigQueryDialect
from pyprecisefilter.dialect.duckdb import DuckDBDialect
from pyprecisefilter.dialect.mysql import MySQLDialect
from pyprecisefilter.dialect.postgres import PostgresDialect
from pyprecisefilter.dialect.sqlite import SQLiteDialect
from pyprecisefilter.filter import FilterData, PreciseIntFilter
from pyprecisefilter.query import ProxyQuery, QueryBuilder, Result

__all__ = [
    "build_where",
    "denormalize",
    "is_numeric",
    "normalize",
    "resolve_operator",
    "CHOICES",
    "OperatorType",
    "FilterData",
    "PreciseIntFilter",
    "ProxyQuery",
    "QueryBuilder",
    "Result",
    "FilterError",
    "DuplicateParameterError",
    "InvalidFieldNameError",
    "InvalidPrecisionError",
    "NotNumericError",
    "UnboundParameterError",
    "UnsupportedOperatorError",
    "ValueOutOfRangeError",
    "Dialect",
    "BigQueryDialect",
    "DuckDBDialect",
    "MySQLDialect",
    "PostgresDialect",
    "SQLiteDialect",
]

logging.getLogger(__name__).addHandler(logging.NullHandler())


def build_where(
    alias: str | None,
    field: str,
    value: Any,
    type: int | None = None,
    *,
    dialect: Dialect | str | None = None,
    precision: int = DEFAULT_PRECISION,
    name: str = DEFAULT_FILTER_NAME,
) -> Result:
    """Build a parameterized WHERE condition for a scaled-integer column.

    Args:
        alias: Table alias, or None for a bare column name.
        field: Column storing the scaled integer.
        value: Decimal input as typed by the user.
        type: Operator type code. Defaults to OperatorType.EQUAL.
        dialect: SQL dialect or dialect name. Defaults to PostgreSQL.
        precision: Number of decimal places stored in the column.
        name: Prefix for the generated parameter name.

    Returns:
        Result with the condition and its single parameter, or an empty
        Result if the value is missing, not numeric, or out of the signed
        64-bit range once scaled.

    Raises:
        UnsupportedOperatorError: If type is not a known operator type.
        InvalidFieldNameError: If alias or field is rejected by the dialect.
    """
    if isinstance(dialect, str):
        dialect = get_dialect(dialect)

    query = ProxyQuery(dialect)
    PreciseIntFilter(name, precision=precision).apply(query, alias, field, value, type)
    return query.result()
