"""Fixtures and helpers for integration tests against real databases."""

from __future__ import annotations

import re
import shutil
import subprocess
from collections.abc import Callable
from typing import Any

import pytest

from pyprecisefilter import build_where
from pyprecisefilter.dialect._base import Dialect
from pyprecisefilter.dialect.duckdb import DuckDBDialect
from pyprecisefilter.dialect.mysql import MySQLDialect
from pyprecisefilter.dialect.postgres import PostgresDialect
from pyprecisefilter.dialect.sqlite import SQLiteDialect


def _docker_available() -> bool:
    """True if a Docker daemon answers; testcontainers needs one."""
    docker = shutil.which("docker")
    if docker is None:
        return False
    try:
        subprocess.run([docker, "info"], capture_output=True, check=True, timeout=10)
    except (subprocess.CalledProcessError, subprocess.TimeoutExpired):
        return False
    return True


DOCKER_AVAILABLE = _docker_available()


# ---------------------------------------------------------------------------
# Seed data: prices stored in cents
# ---------------------------------------------------------------------------

SEED_ROWS = [
    ("Widget", 1234),
    ("Gadget", 99999999),
    ("Refund", -2575),
    ("Freebie", 0),
    ("Penny", 1),
    ("Tenner", 1000),
]

ALL_NAMES = {name for name, _ in SEED_ROWS}

_CREATE_TABLE = """
    CREATE TABLE IF NOT EXISTS products (
        name VARCHAR(64) NOT NULL,
        price_cents BIGINT NOT NULL
    )
"""


def _setup_cursor_db(conn, insert: str) -> None:
    cur = conn.cursor()
    cur.execute(_CREATE_TABLE)
    for row in SEED_ROWS:
        cur.execute(insert, row)
    conn.commit()
    cur.close()


def _setup_duckdb(conn) -> None:
    conn.execute(_CREATE_TABLE)
    for name, cents in SEED_ROWS:
        conn.execute("INSERT INTO products VALUES ($1, $2)", [name, cents])


def _setup_sqlite(conn) -> None:
    conn.execute(_CREATE_TABLE)
    conn.executemany("INSERT INTO products VALUES (?, ?)", SEED_ROWS)
    conn.commit()


# ---------------------------------------------------------------------------
# Session-scoped container fixtures
# ---------------------------------------------------------------------------

@pytest.fixture(scope="session")
def pg_container():
    if not DOCKER_AVAILABLE:
        pytest.skip("Docker is not available")
    from testcontainers.postgres import PostgresContainer
    with PostgresContainer("postgres:16") as pg:
        yield pg


@pytest.fixture(scope="session")
def mysql_container():
    if not DOCKER_AVAILABLE:
        pytest.skip("Docker is not available")
    from testcontainers.mysql import MySqlContainer
    with MySqlContainer("mysql:8.4") as mysql:
        yield mysql


# ---------------------------------------------------------------------------
# Session-scoped database fixtures (connection + table + data)
# ---------------------------------------------------------------------------

@pytest.fixture(scope="session")
def pg_db(pg_container):
    import psycopg
    conn = psycopg.connect(
        host=pg_container.get_container_host_ip(),
        port=pg_container.get_exposed_port(5432),
        user=pg_container.username,
        password=pg_container.password,
        dbname=pg_container.dbname,
    )
    _setup_cursor_db(conn, "INSERT INTO products VALUES (%s, %s)")
    yield conn
    conn.close()


@pytest.fixture(scope="session")
def mysql_db(mysql_container):
    import mysql.connector
    conn = mysql.connector.connect(
        host=mysql_container.get_container_host_ip(),
        port=int(mysql_container.get_exposed_port(3306)),
        user=mysql_container.username,
        password=mysql_container.password,
        database=mysql_container.dbname,
    )
    _setup_cursor_db(conn, "INSERT INTO products VALUES (%s, %s)")
    yield conn
    conn.close()


@pytest.fixture(scope="session")
def duckdb_db():
    duckdb = pytest.importorskip("duckdb")
    conn = duckdb.connect(":memory:")
    _setup_duckdb(conn)
    yield conn
    conn.close()


@pytest.fixture(scope="session")
def sqlite_db():
    import sqlite3
    conn = sqlite3.connect(":memory:")
    _setup_sqlite(conn)
    yield conn
    conn.close()


# ---------------------------------------------------------------------------
# Query execution helpers
# ---------------------------------------------------------------------------

def _adapt_params_for_driver(sql: str, db_name: str) -> str:
    """Adapt parameter placeholders for the database driver.

    - PostgreSQL ($1, $2): psycopg uses %s placeholders
    - DuckDB ($1, $2): native support, no change needed
    - MySQL (?): mysql-connector uses %s
    - SQLite (?): native support, no change needed
    """
    if db_name == "pg":
        return re.sub(r"\$\d+", "%s", sql)
    if db_name == "mysql":
        return sql.replace("?", "%s")
    return sql


def execute_filter(
    conn,
    dialect: Dialect,
    db_name: str,
    value: Any,
    type: int | None = None,
) -> set[str]:
    """Apply the filter to products.price_cents and return matching names."""
    result = build_where("p", "price_cents", value, type, dialect=dialect)
    query = "SELECT name FROM products AS p"
    if result.sql:
        query = f"{query} WHERE {_adapt_params_for_driver(result.sql, db_name)}"

    if db_name in ("duckdb", "sqlite"):
        rows = conn.execute(query, result.parameters).fetchall()
    else:
        cur = conn.cursor()
        cur.execute(query, tuple(result.parameters))
        rows = cur.fetchall()
        cur.close()
    return {row[0] for row in rows}


# ---------------------------------------------------------------------------
# Parametrized database fixture
# ---------------------------------------------------------------------------

ALL_DBS = ["pg", "duckdb", "mysql", "sqlite"]

_DIALECTS: dict[str, Dialect] = {
    "pg": PostgresDialect(),
    "duckdb": DuckDBDialect(),
    "mysql": MySQLDialect(),
    "sqlite": SQLiteDialect(),
}


@pytest.fixture(params=ALL_DBS)
def db(request):
    """Yields (connection, dialect, db_name) for each database."""
    name = request.param
    conn = request.getfixturevalue(f"{name}_db")
    return conn, _DIALECTS[name], name


@pytest.fixture
def select_names(db) -> Callable[..., set[str]]:
    """Run the filter against the current database: select_names(value, type=None)."""
    conn, dialect, name = db

    def _select(value: Any, type: int | None = None) -> set[str]:
        return execute_filter(conn, dialect, name, value, type)

    return _select


@pytest.fixture
def all_names() -> set[str]:
    return set(ALL_NAMES)
