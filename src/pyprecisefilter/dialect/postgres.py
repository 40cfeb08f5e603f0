"""PostgreSQL dialect implementation."""

from __future__ import annotations

from io import StringIO

from pyprecisefilter._utils import COMMON_RESERVED_KEYWORDS
from pyprecisefilter.dialect._base import Dialect, DialectName

_POSTGRES_RESERVED: frozenset[str] = COMMON_RESERVED_KEYWORDS | {
    "any", "array", "cast", "current_date", "current_time",
    "current_timestamp", "current_user", "end", "except", "full", "grant",
    "index", "intersect", "offset", "session_user", "some", "user",
}


class PostgresDialect(Dialect):
    """PostgreSQL SQL dialect."""

    name = DialectName.POSTGRESQL

    def write_param_placeholder(self, w: StringIO, param_index: int) -> None:
        w.write(f"${param_index}")

    def max_identifier_length(self) -> int:
        return 63

    def reserved_keywords(self) -> frozenset[str]:
        return _POSTGRES_RESERVED
