from __future__ import annotations

import logging
import sqlite3
from contextlib import contextmanager
from typing import Any, Callable, Iterable, Iterator, Mapping, Optional

from ..db import connect
from ..config import get_db_path
from ..domain.gift import fill_defaults, utc_now
from ..domain.seed import SEED_GIFTS
from ..logs import LogContext, ensure_log_schema
from ..repository import gift_repo

logger = logging.getLogger(__name__)


class StoreError(Exception):
    """Base class for gift store failures."""


class StorageUnavailable(StoreError):
    """The SQLite engine failed or the store is not open."""


@contextmanager
def _storage_errors(op: str) -> Iterator[None]:
    try:
        yield
    except sqlite3.Error as e:
        raise StorageUnavailable(f"{op}: {e}") from e


class GiftStore:
    """
    Owns the single shared SQLite connection and every read/write on `gifts`.

    Lifecycle: open() -> ensure_schema() -> seed_if_empty() -> ... -> close().
    Absence is reported as a value (None / False); ids that are not integers
    simply match no row. Engine failures raise StorageUnavailable.
    """

    def __init__(self, db_path: Optional[str] = None, clock: Callable[[], str] = utc_now):
        self._db_path = db_path
        self._clock = clock
        self._conn: Optional[sqlite3.Connection] = None

    @property
    def db_path(self) -> str:
        if self._db_path is None:
            self._db_path = get_db_path()
        return self._db_path

    @property
    def is_open(self) -> bool:
        return self._conn is not None

    @property
    def conn(self) -> sqlite3.Connection:
        if self._conn is None:
            raise StorageUnavailable("store is not open")
        return self._conn

    def open(self) -> "GiftStore":
        if self._conn is None:
            with _storage_errors("open"):
                self._conn = connect(self.db_path)
        return self

    def close(self) -> None:
        if self._conn is None:
            return
        conn, self._conn = self._conn, None
        conn.close()

    # ---------------- schema & seed ----------------

    def ensure_schema(self) -> None:
        with _storage_errors("ensure_schema"):
            gift_repo.ensure_schema(self.conn)
            ensure_log_schema(self.conn)

    def seed_if_empty(self, rows: Iterable[Mapping[str, str]] = SEED_GIFTS) -> int:
        """Insert `rows` in one transaction when the table is empty; return inserted count."""
        conn = self.conn
        with _storage_errors("seed_if_empty"):
            if gift_repo.count(conn) > 0:
                return 0
            conn.execute("BEGIN")
            try:
                inserted = gift_repo.insert_many(conn, rows, self._clock())
                conn.execute("COMMIT")
            except Exception:
                conn.execute("ROLLBACK")
                raise
        return inserted

    # ---------------- CRUD ----------------

    def list_all(self) -> list[dict[str, Any]]:
        with _storage_errors("list_all"):
            return [dict(r) for r in gift_repo.list_all(self.conn)]

    def get_by_id(self, gift_id: int | str) -> Optional[dict[str, Any]]:
        with _storage_errors("get_by_id"):
            row = gift_repo.get_one(self.conn, gift_id)
        return dict(row) if row is not None else None

    def create(self, fields: Optional[Mapping[str, Any]]) -> dict[str, Any]:
        values = fill_defaults(fields)
        with _storage_errors("create"):
            new_id = gift_repo.insert(self.conn, values, self._clock())
            row = gift_repo.get_one(self.conn, new_id)
        return dict(row)

    def update(self, gift_id: int | str, fields: Optional[Mapping[str, Any]]) -> Optional[dict[str, Any]]:
        values = fill_defaults(fields)
        with _storage_errors("update"):
            changed = gift_repo.update(self.conn, gift_id, values, self._clock())
            if changed == 0:
                return None
            row = gift_repo.get_one(self.conn, gift_id)
        return dict(row) if row is not None else None

    def delete(self, gift_id: int | str) -> bool:
        with _storage_errors("delete"):
            return gift_repo.delete(self.conn, gift_id) > 0

    # ---------------- audit ----------------

    def record(self, log: LogContext, result: str = "OK", err: Optional[str] = None) -> bool:
        if self._conn is None:
            logger.warning("operation_log skipped (store closed) action=%s", log.action)
            return False
        return log.write(self._conn, result, err)


def bootstrap(store: GiftStore, seed_rows: Iterable[Mapping[str, str]] = SEED_GIFTS) -> int:
    """Open the store, create tables if absent and seed an empty gift table."""
    store.open()
    store.ensure_schema()
    log = LogContext("SEED_GIFTS", user="system")
    inserted = store.seed_if_empty(seed_rows)
    if inserted:
        log.set_entity("gift", "*")
        log.set_payload({"rows": inserted})
        store.record(log, "OK")
        logger.info("Database initialized with default data (%d gifts)", inserted)
    return inserted
