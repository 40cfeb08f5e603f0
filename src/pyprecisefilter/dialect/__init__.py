"""SQL dialect system for scaled-integer filter predicates."""

from pyprecisefilter.dialect._base import Dialect, DialectName
from pyprecisefilter.dialect.bigquery import BigQueryDialect
from pyprecisefilter.dialect.duckdb import DuckDBDialect
from pyprecisefilter.dialect.mysql import MySQLDialect
from pyprecisefilter.dialect.postgres import PostgresDialect
from pyprecisefilter.dialect.sqlite import SQLiteDialect

__all__ = [
    "Dialect",
    "DialectName",
    "BigQueryDialect",
    "DuckDBDialect",
    "MySQLDialect",
    "PostgresDialect",
    "SQLiteDialect",
    "get_dialect",
]

_REGISTRY: dict[str, type[Dialect]] = {
    DialectName.POSTGRESQL: PostgresDialect,
    DialectName.DUCKDB: DuckDBDialect,
    DialectName.BIGQUERY: BigQueryDialect,
    DialectName.MYSQL: MySQLDialect,
    DialectName.SQLITE: SQLiteDialect,
}


def get_dialect(name: str) -> Dialect:
    """Return a dialect instance by name ("postgresql", "mysql", "sqlite", ...).

    Raises:
        ValueError: If the dialect name is unknown.
    """
    cls = _REGISTRY.get(name)
    if cls is None:
        raise ValueError(
            f"unknown dialect: {name!r}. "
            f"Available: {', '.join(sorted(_REGISTRY))}"
        )
    return cls()
