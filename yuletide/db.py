from __future__ import annotations

# yuletide/db.py
import sqlite3
from contextlib import contextmanager
from typing import Iterator

from .config import get_db_path


def connect(db_path: str | None = None) -> sqlite3.Connection:
    """
    打开 SQLite 连接。isolation_level=None 即 autocommit，每条语句执行后即持久化；
    需要批量原子写入时由调用方显式 BEGIN/COMMIT。
    """
    path = db_path or get_db_path()
    conn = sqlite3.connect(
        path,
        check_same_thread=False,
        isolation_level=None,
    )
    conn.row_factory = sqlite3.Row
    return conn


@contextmanager
def get_conn(db_path: str | None = None) -> Iterator[sqlite3.Connection]:
    """
    Short-lived connection for scripts and tests; closed on exit.
    """
    conn = connect(db_path)
    try:
        yield conn
    finally:
        conn.close()
