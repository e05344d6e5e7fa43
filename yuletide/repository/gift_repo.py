from sqlite3 import Connection, Row
from typing import Iterable, Mapping, Optional

from ..domain.gift import GIFT_FIELDS


def ensure_schema(conn: Connection):
    conn.execute(
        """
        CREATE TABLE IF NOT EXISTS gifts (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            kid TEXT NOT NULL,
            item TEXT,
            link TEXT,
            helper TEXT,
            deliveryDate TEXT,
            createdAt DATETIME DEFAULT CURRENT_TIMESTAMP,
            updatedAt DATETIME DEFAULT CURRENT_TIMESTAMP
        )
        """
    )


def count(conn: Connection) -> int:
    return conn.execute("SELECT COUNT(*) AS cnt FROM gifts").fetchone()["cnt"]


_INSERT_SQL = (
    "INSERT INTO gifts(kid, item, link, helper, deliveryDate, createdAt, updatedAt) "
    "VALUES(?, ?, ?, ?, ?, ?, ?)"
)


def _values(fields: Mapping[str, Optional[str]]) -> tuple:
    return tuple(fields.get(k) for k in GIFT_FIELDS)


def insert(conn: Connection, fields: Mapping[str, str], ts: str) -> int:
    cur = conn.execute(_INSERT_SQL, (*_values(fields), ts, ts))
    return cur.lastrowid


def insert_many(conn: Connection, rows: Iterable[Mapping[str, str]], ts: str) -> int:
    cur = conn.executemany(_INSERT_SQL, [(*_values(r), ts, ts) for r in rows])
    return cur.rowcount


def get_one(conn: Connection, gift_id: int | str) -> Optional[Row]:
    return conn.execute("SELECT * FROM gifts WHERE id=?", (gift_id,)).fetchone()


def list_all(conn: Connection) -> list[Row]:
    return conn.execute("SELECT * FROM gifts ORDER BY id").fetchall()


def update(conn: Connection, gift_id: int | str, fields: Mapping[str, str], ts: str) -> int:
    cur = conn.execute(
        "UPDATE gifts SET kid=?, item=?, link=?, helper=?, deliveryDate=?, updatedAt=? WHERE id=?",
        (*_values(fields), ts, gift_id),
    )
    return cur.rowcount


def delete(conn: Connection, gift_id: int | str) -> int:
    cur = conn.execute("DELETE FROM gifts WHERE id=?", (gift_id,))
    return cur.rowcount
