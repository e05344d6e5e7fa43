from __future__ import annotations

from datetime import datetime, timezone

from fastapi import APIRouter, Request

from ..services.gift_svc import GiftStore

router = APIRouter()

APP_NAME = "yuletide-api"
APP_VERSION = "0.1.0"


def get_store(request: Request) -> GiftStore:
    return request.app.state.store


@router.get("/api/health")
def health():
    ts = datetime.now(timezone.utc).isoformat(timespec="milliseconds")
    return {"status": "ok", "timestamp": ts.replace("+00:00", "Z")}
