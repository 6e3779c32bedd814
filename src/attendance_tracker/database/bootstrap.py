from __future__ import annotations

import re

from ..core.constants import KV_TABLE
from .connection import DatabaseConnection
from .mysql_base import db_cursor, fetchall

_TABLE_NAME = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


def ensure_kv_table(conn_factory: DatabaseConnection, *, table: str = KV_TABLE) -> None:
    """Create the key-value table if missing (idempotent)."""

    if not _TABLE_NAME.match(table):
        raise ValueError(f"Invalid table name: {table!r}")

    with db_cursor(conn_factory) as (_, cur):
        cur.execute(
            f"""
            CREATE TABLE IF NOT EXISTS {table} (
                k VARCHAR(191) NOT NULL PRIMARY KEY,
                v LONGTEXT NOT NULL,
                updated_at TIMESTAMP NOT NULL DEFAULT CURRENT_TIMESTAMP ON UPDATE CURRENT_TIMESTAMP
            ) ENGINE=InnoDB DEFAULT CHARSET=utf8mb4
            """
        )


def list_tables(conn_factory: DatabaseConnection) -> list[str]:
    with db_cursor(conn_factory, dictionary=False) as (_, cur):
        cur.execute("SHOW TABLES")
        return [str(r[0]) for r in fetchall(cur)]
