"""Admin data-grid filter comparing scaled-integer columns with decimal input.

Monetary columns often store cents as integers. An administrator filtering
such a column types dollars; the filter converts ``12.34`` to ``1234``
before the comparison reaches the database, so the match is exact.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Any

from pyprecisefilter._constants import DEFAULT_FILTER_NAME, DEFAULT_PRECISION
from pyprecisefilter._errors import ValueOutOfRangeError
from pyprecisefilter._operators import OperatorType, resolve_operator
from pyprecisefilter._precision import is_numeric, normalize, validate_precision
from pyprecisefilter.query import QueryBuilder

logger = logging.getLogger(__name__)

# Form submissions carry the operator type as text, e.g. "2"
_TYPE_CODE_RE = re.compile(r"^\s*[+-]?\d+\s*$")


@dataclass(frozen=True)
class FilterData:
    """Raw filter form submission: a value and an optional operator type."""

    value: Any = None
    type: int | None = None
    has_value: bool = False

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> FilterData:
        """Build from submitted form data; a present ``value`` key counts even if empty."""
        return cls(
            value=data.get("value"),
            type=_type_code(data.get("type")),
            has_value="value" in data,
        )

    @classmethod
    def of(cls, value: Any, type: int | None = None) -> FilterData:
        return cls(value=value, type=type, has_value=value is not None)


def _type_code(value: Any) -> Any:
    if isinstance(value, str) and _TYPE_CODE_RE.match(value):
        return int(value)
    return value


class PreciseIntFilter:
    """Filter a scaled-integer column by a decimal value.

    Args:
        name: Filter name, used as the prefix of generated parameter names.
        precision: Number of decimal places stored in the column.
        label: Label shown next to the filter in the admin form.
        field_options: Options passed through to the form field.
    """

    def __init__(
        self,
        name: str = DEFAULT_FILTER_NAME,
        *,
        precision: int = DEFAULT_PRECISION,
        label: str | None = None,
        field_options: dict[str, Any] | None = None,
    ) -> None:
        validate_precision(precision)
        self.name = name
        self.precision = precision
        self.label = label
        self.field_options = dict(field_options or {})

    def filter(
        self,
        query: QueryBuilder,
        alias: str | None,
        field: str,
        data: FilterData,
    ) -> bool:
        """Add ``<alias>.<field> <operator> <placeholder>`` to the query.

        Nothing is added when no value was submitted, the value is not
        numeric, or its scaled form does not fit a signed 64-bit column.

        Returns:
            True if a condition was added and its parameter bound.

        Raises:
            UnsupportedOperatorError: If ``data.type`` is not a known operator type.
            InvalidFieldNameError: If the builder rejects the alias or field.
        """
        if not data.has_value or not is_numeric(data.value):
            logger.debug("%s: skipping missing or non-numeric value %r", self.name, data.value)
            return False

        try:
            value = normalize(data.value, self.precision)
        except ValueOutOfRangeError as e:
            logger.debug("%s: skipping value outside column range: %s", self.name, e.internal())
            return False
        operator = self.get_operator(data.type if data.type is not None else OperatorType.EQUAL)

        column = query.column(alias, field)
        parameter_name = f"{self.name}_{query.unique_parameter_id()}"
        query.where(f"{column} {operator} {query.placeholder(parameter_name)}")
        query.bind(parameter_name, value)

        logger.debug("%s: %s %s %d", self.name, column, operator, value)
        return True

    def apply(
        self,
        query: QueryBuilder,
        alias: str | None,
        field: str,
        value: Any,
        type: int | None = None,
    ) -> bool:
        return self.filter(query, alias, field, FilterData.of(value, type))

    def get_operator(self, type: int) -> str:
        return resolve_operator(type)

    def get_default_options(self) -> dict[str, Any]:
        return {"field_type": "number"}

    def get_form_options(self) -> dict[str, Any]:
        return {
            "field_type": self.get_default_options()["field_type"],
            "field_options": dict(self.field_options),
            "label": self.label,
            "operator_type": OperatorType,
        }
