"""Abstract base class for SQL dialects."""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod
from io import StringIO

from pyprecisefilter._utils import validate_identifier


class DialectName(enum.StrEnum):
    POSTGRESQL = "postgresql"
    MYSQL = "mysql"
    SQLITE = "sqlite"
    DUCKDB = "duckdb"
    BIGQUERY = "bigquery"


class Dialect(ABC):
    """Abstract base class defining the SQL dialect interface.

    A dialect decides how bound parameters are written into the emitted
    predicate and which identifiers it accepts for the filtered column.
    """

    name: DialectName

    @abstractmethod
    def write_param_placeholder(self, w: StringIO, param_index: int) -> None: ...

    @abstractmethod
    def max_identifier_length(self) -> int: ...

    @abstractmethod
    def reserved_keywords(self) -> frozenset[str]: ...

    def validate_field_name(self, name: str) -> None:
        validate_identifier(
            name,
            max_length=self.max_identifier_length(),
            reserved=self.reserved_keywords(),
            dialect_label=self.label,
        )

    @property
    def label(self) -> str:
        return type(self).__name__.removesuffix("Dialect")

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
