from __future__ import annotations

import sys
from pathlib import Path

import importlib

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from attendance_tracker.core.constants import KV_TABLE
from attendance_tracker.database.bootstrap import ensure_kv_table, list_tables
from attendance_tracker.database.connection import DBConfig, DatabaseConnection


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    db_config = dict(settings.DB_CONFIG)
    table = str(getattr(settings, "KV_TABLE", KV_TABLE))

    conn = DatabaseConnection(DBConfig.from_dict(db_config))
    ensure_kv_table(conn, table=table)
    tables = list_tables(conn)
    print(
        f"OK: Ensured table {table} -> "
        f"{db_config.get('user')}@{db_config.get('host')}:{db_config.get('port', 3306)}/{db_config.get('database')} "
        f"(tables={len(tables)})"
    )


if __name__ == "__main__":
    main()
