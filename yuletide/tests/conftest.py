import sys
from datetime import datetime, timedelta
from pathlib import Path

import pytest

# Ensure project root on sys.path
_THIS_DIR = Path(__file__).resolve().parent
_PROJECT_ROOT = _THIS_DIR.parent.parent
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))

from yuletide.domain.gift import format_timestamp  # noqa: E402


class TickingClock:
    """Deterministic clock: each call advances one second."""

    def __init__(self, start=datetime(2025, 12, 1, 8, 0, 0)):
        self.now = start
        self.calls = 0

    def __call__(self) -> str:
        value = format_timestamp(self.now)
        self.now += timedelta(seconds=1)
        self.calls += 1
        return value


@pytest.fixture()
def tmp_db_path(tmp_path, monkeypatch):
    path = tmp_path / "yuletide_test.db"
    # Point the app at this temp DB
    monkeypatch.setenv("YULETIDE_DB_PATH", str(path))
    monkeypatch.delenv("PORT", raising=False)
    monkeypatch.delenv("HOST", raising=False)
    monkeypatch.setenv("YULETIDE_CONFIG", str(tmp_path / "missing-config.yaml"))
    return str(path)


@pytest.fixture()
def clock():
    return TickingClock()


@pytest.fixture()
def store(tmp_db_path, clock):
    from yuletide.services.gift_svc import GiftStore, bootstrap

    s = GiftStore(tmp_db_path, clock=clock)
    bootstrap(s)
    yield s
    s.close()


@pytest.fixture()
def client(store):
    from fastapi.testclient import TestClient
    from yuletide.api import create_app

    with TestClient(create_app(store)) as c:
        yield c
