from __future__ import annotations

import re
from typing import Optional

from ..core.constants import KV_TABLE
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone
from .base import KeyValueStore

_TABLE_NAME = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


class MySQLKeyValueStore(KeyValueStore):
    def __init__(self, conn_factory: DatabaseConnection, *, table: str = KV_TABLE):
        if not _TABLE_NAME.match(table):
            raise ValueError(f"Invalid table name: {table!r}")
        self._conn_factory = conn_factory
        self._table = table

    def get(self, key: str) -> Optional[str]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT v FROM {self._table} WHERE k=%s", (key,))
            r = fetchone(cur)
            if not r:
                return None
            return r["v"]

    def set(self, key: str, value: str) -> None:
        if not isinstance(value, str):
            raise TypeError(f"Value for {key!r} must be str, got {type(value).__name__}")
        # Single upsert statement; the whole blob is replaced or nothing is.
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                INSERT INTO {self._table} (k, v)
                VALUES (%s, %s)
                ON DUPLICATE KEY UPDATE v=VALUES(v)
                """,
                (key, value),
            )
