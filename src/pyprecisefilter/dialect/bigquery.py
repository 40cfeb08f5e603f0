"""BigQuery dialect implementation."""

from __future__ import annotations

from io import StringIO

from pyprecisefilter._utils import COMMON_RESERVED_KEYWORDS
from pyprecisefilter.dialect._base import Dialect, DialectName

_BIGQUERY_RESERVED: frozenset[str] = COMMON_RESERVED_KEYWORDS | {
    "any", "array", "assert_rows_modified", "cast", "end", "enum",
    "except", "extract", "fetch", "interval", "merge", "range", "struct",
}


class BigQueryDialect(Dialect):
    """BigQuery SQL dialect."""

    name = DialectName.BIGQUERY

    def write_param_placeholder(self, w: StringIO, param_index: int) -> None:
        w.write(f"@p{param_index}")

    def max_identifier_length(self) -> int:
        return 300

    def reserved_keywords(self) -> frozenset[str]:
        return _BIGQUERY_RESERVED
