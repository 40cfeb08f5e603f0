"""SQLite dialect implementation."""

from __future__ import annotations

from io import StringIO

from pyprecisefilter._utils import COMMON_RESERVED_KEYWORDS
from pyprecisefilter.dialect._base import Dialect, DialectName

_SQLITE_RESERVED: frozenset[str] = COMMON_RESERVED_KEYWORDS | {
    "abort", "autoincrement", "glob", "index", "isnull", "notnull",
    "pragma", "regexp", "vacuum",
}


class SQLiteDialect(Dialect):
    """SQLite SQL dialect."""

    name = DialectName.SQLITE

    def write_param_placeholder(self, w: StringIO, param_index: int) -> None:
        w.write("?")

    # SQLite has no hard identifier limit
    def max_identifier_length(self) -> int:
        return 255

    def reserved_keywords(self) -> frozenset[str]:
        return _SQLITE_RESERVED
