from __future__ import annotations

from datetime import time, timedelta

import mysql.connector
import pytest
from mysql.connector import errorcode

from roster_attendance.core.exceptions import DuplicateRecordError, StoreError
from roster_attendance.database.bootstrap import iter_sql_statements
from roster_attendance.database.mysql_base import db_cursor, normalize_mysql_time


class FakeCursor:
    def __init__(self):
        self.closed = False

    def close(self):
        self.closed = True


class FakeConn:
    def __init__(self):
        self.cursor_obj = FakeCursor()
        self.committed = False
        self.rolled_back = False
        self.closed = False

    def cursor(self, dictionary=True):
        return self.cursor_obj

    def commit(self):
        self.committed = True

    def rollback(self):
        self.rolled_back = True

    def close(self):
        self.closed = True


class FakeFactory:
    def __init__(self):
        self.conn = FakeConn()

    def connect(self):
        return self.conn


def test_db_cursor_commits_and_closes():
    factory = FakeFactory()
    with db_cursor(factory) as (conn, cur):
        assert cur is factory.conn.cursor_obj

    assert factory.conn.committed and factory.conn.closed and cur.closed
    assert not factory.conn.rolled_back


def test_duplicate_key_becomes_duplicate_record_error():
    factory = FakeFactory()
    with pytest.raises(DuplicateRecordError):
        with db_cursor(factory):
            raise mysql.connector.IntegrityError(msg="Duplicate entry", errno=errorcode.ER_DUP_ENTRY)

    assert factory.conn.rolled_back and factory.conn.closed
    assert not factory.conn.committed


def test_other_connector_errors_become_store_error():
    factory = FakeFactory()
    with pytest.raises(StoreError) as err:
        with db_cursor(factory):
            raise mysql.connector.DatabaseError(msg="lost connection")

    assert not isinstance(err.value, DuplicateRecordError)
    assert factory.conn.rolled_back


def test_non_database_errors_pass_through():
    factory = FakeFactory()
    with pytest.raises(KeyError):
        with db_cursor(factory):
            raise KeyError("status")
    assert factory.conn.rolled_back


@pytest.mark.parametrize(
    "raw, expected",
    [
        (time(8, 30), time(8, 30)),
        (timedelta(hours=8, minutes=30), time(8, 30)),
        ("08:30:00", time(8, 30)),
        ("14:05", time(14, 5)),
        (None, None),
    ],
)
def test_normalize_mysql_time(raw, expected):
    assert normalize_mysql_time(raw) == expected


def test_sql_splitter_ignores_semicolons_in_quotes():
    sql = "CREATE TABLE a (x INT);\nINSERT INTO a VALUES ('x;y');\n\nSELECT 1"
    assert list(iter_sql_statements(sql)) == [
        "CREATE TABLE a (x INT)",
        "INSERT INTO a VALUES ('x;y')",
        "SELECT 1",
    ]
