"""MySQL dialect implementation."""

from __future__ import annotations

from io import StringIO

from pyprecisefilter._utils import COMMON_RESERVED_KEYWORDS
from pyprecisefilter.dialect._base import Dialect, DialectName

_MYSQL_RESERVED: frozenset[str] = COMMON_RESERVED_KEYWORDS | {
    "add", "change", "div", "dual", "index", "key", "keys", "kill",
    "mod", "range", "read", "regexp", "rlike", "show", "xor",
}


class MySQLDialect(Dialect):
    """MySQL SQL dialect."""

    name = DialectName.MYSQL

    def write_param_placeholder(self, w: StringIO, param_index: int) -> None:
        w.write("?")

    def max_identifier_length(self) -> int:
        return 64

    def reserved_keywords(self) -> frozenset[str]:
        return _MYSQL_RESERVED
