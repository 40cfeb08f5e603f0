"""Identifier validation helpers."""

from __future__ import annotations

import re
from collections.abc import Collection

from pyprecisefilter._errors import InvalidFieldNameError

FIELD_NAME_RE = re.compile(r"^[a-zA-Z_][a-zA-Z0-9_]*$")

# Keywords reserved by every supported dialect
COMMON_RESERVED_KEYWORDS: frozenset[str] = frozenset({
    "all", "alter", "and", "as", "asc", "between", "by", "case", "check",
    "column", "constraint", "create", "cross", "default", "delete", "desc",
    "distinct", "drop", "else", "exists", "false", "for", "foreign", "from",
    "group", "having", "in", "inner", "insert", "into", "is", "join",
    "left", "like", "limit", "not", "null", "on", "or", "order", "outer",
    "primary", "references", "right", "select", "set", "table", "then",
    "to", "true", "union", "unique", "update", "using", "values", "when",
    "where", "with",
})


def validate_identifier(
    name: str,
    *,
    max_length: int,
    reserved: Collection[str] = COMMON_RESERVED_KEYWORDS,
    dialect_label: str = "SQL",
) -> None:
    """Validate a column alias or field name.

    Raises:
        InvalidFieldNameError: If the name is empty, too long, malformed or reserved.
    """
    if not name:
        raise InvalidFieldNameError(
            "field name cannot be empty",
            "empty field name provided",
        )
    if len(name) > max_length:
        raise InvalidFieldNameError(
            "field name too long",
            f"field name '{name}' exceeds {max_length} characters",
        )
    if not FIELD_NAME_RE.match(name):
        raise InvalidFieldNameError(
            "invalid field name format",
            f"field name '{name}' contains invalid characters",
        )
    if name.lower() in reserved:
        raise InvalidFieldNameError(
            "field name is a reserved SQL keyword",
            f"field name '{name}' is a reserved {dialect_label} keyword",
        )
