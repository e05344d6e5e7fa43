import json, time, uuid, logging, sqlite3, datetime as dt
from typing import Optional

logger = logging.getLogger(__name__)

DDL = """
CREATE TABLE IF NOT EXISTS operation_log (
  id INTEGER PRIMARY KEY AUTOINCREMENT,
  ts TEXT NOT NULL,
  user TEXT NOT NULL,
  action TEXT NOT NULL,
  entity_type TEXT,
  entity_id TEXT,
  request_id TEXT,
  before_json TEXT,
  after_json TEXT,
  payload_json TEXT,
  result TEXT,
  err_msg TEXT,
  latency_ms INTEGER
);
CREATE INDEX IF NOT EXISTS idx_log_ts ON operation_log(ts);
CREATE INDEX IF NOT EXISTS idx_log_action ON operation_log(action);
"""

def ensure_log_schema(conn: sqlite3.Connection):
    conn.executescript(DDL)

class LogContext:
    """One audit record for a mutating operation; written once via write()."""

    def __init__(self, action: str, user: str = "owner"):
        self.action = action
        self.user = user
        self.request_id = str(uuid.uuid4())
        self.start = time.perf_counter()
        self.before = None
        self.after = None
        self.payload = None
        self.entity_type = None
        self.entity_id = None

    def set_entity(self, etype: str, eid):
        self.entity_type = etype
        self.entity_id = str(eid)

    def set_before(self, obj): self.before = obj
    def set_after(self, obj): self.after = obj
    def set_payload(self, obj): self.payload = obj

    def record(self, result: str = "OK", err: Optional[str] = None) -> dict:
        elapsed_ms = int((time.perf_counter() - self.start) * 1000)
        return {
            "ts": dt.datetime.now(dt.timezone.utc).isoformat(),
            "user": self.user,
            "action": self.action,
            "entity_type": self.entity_type,
            "entity_id": self.entity_id,
            "request_id": self.request_id,
            "before_json": json.dumps(self.before, ensure_ascii=False) if self.before is not None else None,
            "after_json": json.dumps(self.after, ensure_ascii=False) if self.after is not None else None,
            "payload_json": json.dumps(self.payload, ensure_ascii=False) if self.payload is not None else None,
            "result": result,
            "err_msg": err,
            "latency_ms": elapsed_ms,
        }

    def write(self, conn: sqlite3.Connection, result: str = "OK", err: Optional[str] = None) -> bool:
        # 审计日志写入失败不影响业务请求
        rec = self.record(result, err)
        try:
            conn.execute(
                """INSERT INTO operation_log
                (ts,user,action,entity_type,entity_id,request_id,before_json,after_json,payload_json,result,err_msg,latency_ms)
                VALUES(:ts,:user,:action,:entity_type,:entity_id,:request_id,:before_json,:after_json,:payload_json,:result,:err_msg,:latency_ms)""",
                rec
            )
        except sqlite3.Error as e:
            logger.warning("operation_log write failed action=%s request_id=%s: %s", self.action, self.request_id, e)
            return False
        return True

def search_logs(conn: sqlite3.Connection, q: str|None, action: str|None, ts_from: str|None, ts_to: str|None, page:int, size:int):
    where = []
    params = {}
    if q:
        where.append("(payload_json LIKE :q OR before_json LIKE :q OR after_json LIKE :q)")
        params["q"] = f"%{q}%"
    if action:
        where.append("action = :action")
        params["action"] = action
    if ts_from:
        where.append("ts >= :from")
        params["from"] = ts_from
    if ts_to:
        where.append("ts <= :to")
        params["to"] = ts_to
    wh = " WHERE " + " AND ".join(where) if where else ""
    sql = f"SELECT * FROM operation_log{wh} ORDER BY ts DESC, id DESC LIMIT :limit OFFSET :offset"
    count_sql = f"SELECT COUNT(1) AS cnt FROM operation_log{wh}"
    page = max(page, 1)
    size = max(size, 1)
    total = conn.execute(count_sql, params).fetchone()["cnt"]
    rows = conn.execute(sql, {**params, "limit": size, "offset": (page-1)*size}).fetchall()
    return total, [dict(r) for r in rows]
