from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException

from ..logs import search_logs
from ..services.gift_svc import GiftStore
from .base import get_store

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/api/logs/search")
def api_logs_search(
    page: int = 1,
    size: int = 20,
    action: str | None = None,
    query: str | None = None,
    ts_from: str | None = None,
    ts_to: str | None = None,
    store: GiftStore = Depends(get_store),
):
    try:
        total, items = search_logs(store.conn, query, action, ts_from, ts_to, page, size)
    except Exception:
        logger.exception("Error searching operation logs")
        raise HTTPException(status_code=500, detail="Failed to search logs")
    return {"total": total, "items": items}
