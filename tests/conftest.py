"""Shared test fixtures."""

from unittest.mock import MagicMock

import pytest

from pyprecisefilter import PreciseIntFilter
from pyprecisefilter.dialect.postgres import PostgresDialect
from pyprecisefilter.dialect.sqlite import SQLiteDialect
from pyprecisefilter.query import QueryBuilder


@pytest.fixture
def pg_dialect():
    return PostgresDialect()


@pytest.fixture
def sqlite_dialect():
    return SQLiteDialect()


@pytest.fixture
def precise_filter():
    return PreciseIntFilter("test_filter")


@pytest.fixture
def mock_query():
    """Query builder double; parameter ids come back as 123."""
    query = MagicMock(spec=QueryBuilder)
    query.unique_parameter_id.return_value = 123
    query.column.side_effect = lambda alias, field: f"{alias}.{field}"
    query.placeholder.side_effect = lambda name: f":{name}"
    return query
