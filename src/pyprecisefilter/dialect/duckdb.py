"""DuckDB dialect implementation."""

from __future__ import annotations

from io import StringIO

from pyprecisefilter._utils import COMMON_RESERVED_KEYWORDS
from pyprecisefilter.dialect._base import Dialect, DialectName

_DUCKDB_RESERVED: frozenset[str] = COMMON_RESERVED_KEYWORDS | {
    "any", "array", "cast", "end", "except", "intersect", "offset",
    "pivot", "qualify", "unpivot",
}


class DuckDBDialect(Dialect):
    """DuckDB SQL dialect."""

    name = DialectName.DUCKDB

    def write_param_placeholder(self, w: StringIO, param_index: int) -> None:
        w.write(f"${param_index}")

    def max_identifier_length(self) -> int:
        return 255

    def reserved_keywords(self) -> frozenset[str]:
        return _DUCKDB_RESERVED
