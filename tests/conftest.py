"""Pytest fixtures for chefbook tests."""

from unittest.mock import MagicMock

import pytest

from db.connection import ConnectionProvider
from repositories.chef_repo import ChefRepository


@pytest.fixture
def cursor():
    """A fake psycopg2 cursor; tests set fetchone/fetchall/rowcount."""
    cur = MagicMock(name="cursor")
    cur.rowcount = 1
    return cur


@pytest.fixture
def conn(cursor):
    """A fake connection whose `with conn.cursor()` yields `cursor`."""
    connection = MagicMock(name="connection")
    connection.cursor.return_value.__enter__.return_value = cursor
    return connection


@pytest.fixture
def provider(conn):
    """A provider that always hands out `conn`."""
    prov = MagicMock(spec=ConnectionProvider)
    prov.get_connection.return_value = conn
    return prov


@pytest.fixture
def repo(provider):
    return ChefRepository(provider)


def executed_sql(cursor, call_index=0) -> str:
    """Whitespace-normalised SQL of the n-th execute call."""
    return " ".join(cursor.execute.call_args_list[call_index][0][0].split())


def executed_params(cursor, call_index=0):
    return cursor.execute.call_args_list[call_index][0][1]
