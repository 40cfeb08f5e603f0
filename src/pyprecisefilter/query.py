"""Query builder collaborators for emitting filter predicates."""

from __future__ import annotations

from dataclasses import dataclass, field
from io import StringIO
from typing import Any, Protocol, runtime_checkable

from pyprecisefilter._errors import (
    ERR_MSG_DUPLICATE_PARAMETER,
    ERR_MSG_UNBOUND_PARAMETER,
    DuplicateParameterError,
    UnboundParameterError,
)
from pyprecisefilter.dialect._base import Dialect
from pyprecisefilter.dialect.postgres import PostgresDialect


@runtime_checkable
class QueryBuilder(Protocol):
    """What a filter needs from the host query builder."""

    def unique_parameter_id(self) -> int: ...

    def column(self, alias: str | None, field: str) -> str: ...

    def placeholder(self, name: str) -> str: ...

    def where(self, condition: str) -> None: ...

    def bind(self, name: str, value: Any) -> None: ...


@dataclass(frozen=True)
class Result:
    """WHERE clause and bound parameters collected by a ProxyQuery."""

    sql: str
    parameters: list[Any] = field(default_factory=list)
    named_parameters: dict[str, Any] = field(default_factory=dict)


class ProxyQuery:
    """Dialect-aware query builder that collects AND-ed conditions.

    Placeholders are positional; ``parameters`` follows the order in which
    placeholders were issued, ``named_parameters`` keeps the names.
    """

    def __init__(self, dialect: Dialect | None = None) -> None:
        self.dialect = dialect if dialect is not None else PostgresDialect()
        self._conditions: list[str] = []
        self._placeholder_names: list[str] = []
        self._bound: dict[str, Any] = {}
        self._next_id = 0

    def unique_parameter_id(self) -> int:
        self._next_id += 1
        return self._next_id

    def column(self, alias: str | None, field: str) -> str:
        self.dialect.validate_field_name(field)
        if not alias:
            return field
        self.dialect.validate_field_name(alias)
        return f"{alias}.{field}"

    def placeholder(self, name: str) -> str:
        self._placeholder_names.append(name)
        w = StringIO()
        self.dialect.write_param_placeholder(w, len(self._placeholder_names))
        return w.getvalue()

    def where(self, condition: str) -> None:
        self._conditions.append(condition)

    def bind(self, name: str, value: Any) -> None:
        if name in self._bound:
            raise DuplicateParameterError(
                ERR_MSG_DUPLICATE_PARAMETER,
                f"parameter '{name}' is already bound to {self._bound[name]!r}",
            )
        self._bound[name] = value

    @property
    def sql(self) -> str:
        return " AND ".join(self._conditions)

    @property
    def parameters(self) -> list[Any]:
        unbound = [name for name in self._placeholder_names if name not in self._bound]
        if unbound:
            raise UnboundParameterError(
                ERR_MSG_UNBOUND_PARAMETER,
                f"placeholders issued without a bound value: {unbound}",
            )
        return [self._bound[name] for name in self._placeholder_names]

    def result(self) -> Result:
        return Result(
            sql=self.sql,
            parameters=self.parameters,
            named_parameters=dict(self._bound),
        )
