from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException
from pydantic import BaseModel, ConfigDict

from ..domain.gift import fill_defaults
from ..logs import LogContext
from ..services.gift_svc import GiftStore
from .base import get_store

router = APIRouter()
logger = logging.getLogger(__name__)

NOT_FOUND = "Gift not found"
# audit rows are readable over /api/logs/search; engine detail stays in the server log
STORAGE_ERROR = "storage error"


class GiftBody(BaseModel):
    model_config = ConfigDict(extra="ignore")

    kid: Any = None
    item: Any = None
    link: Any = None
    helper: Any = None
    deliveryDate: Any = None


def _fields(body: Any) -> dict[str, str]:
    """Request body -> five text fields. Non-object bodies count as {}."""
    parsed = GiftBody.model_validate(body if isinstance(body, dict) else {})
    return fill_defaults(parsed.model_dump())


@router.get("/api/gifts")
def api_gifts_list(store: GiftStore = Depends(get_store)):
    try:
        return store.list_all()
    except Exception:
        logger.exception("Error fetching gifts")
        raise HTTPException(status_code=500, detail="Failed to fetch gifts")


@router.get("/api/gifts/{gift_id}")
def api_gift_get(gift_id: str, store: GiftStore = Depends(get_store)):
    try:
        gift = store.get_by_id(gift_id)
    except Exception:
        logger.exception("Error fetching gift id=%s", gift_id)
        raise HTTPException(status_code=500, detail="Failed to fetch gift")
    if gift is None:
        raise HTTPException(status_code=404, detail=NOT_FOUND)
    return gift


@router.post("/api/gifts", status_code=201)
def api_gift_create(body: Any = Body(None), store: GiftStore = Depends(get_store)):
    fields = _fields(body)
    log = LogContext("CREATE_GIFT")
    log.set_payload(fields)
    try:
        gift = store.create(fields)
    except Exception:
        logger.exception("Error creating gift")
        store.record(log, "ERROR", STORAGE_ERROR)
        raise HTTPException(status_code=500, detail="Failed to create gift")
    log.set_entity("gift", gift["id"])
    log.set_after(gift)
    store.record(log, "OK")
    return gift


@router.put("/api/gifts/{gift_id}")
def api_gift_update(gift_id: str, body: Any = Body(None), store: GiftStore = Depends(get_store)):
    fields = _fields(body)
    log = LogContext("UPDATE_GIFT")
    log.set_entity("gift", gift_id)
    log.set_payload(fields)
    try:
        gift = store.update(gift_id, fields)
    except Exception:
        logger.exception("Error updating gift id=%s", gift_id)
        store.record(log, "ERROR", STORAGE_ERROR)
        raise HTTPException(status_code=500, detail="Failed to update gift")
    if gift is None:
        store.record(log, "NOT_FOUND")
        raise HTTPException(status_code=404, detail=NOT_FOUND)
    log.set_after(gift)
    store.record(log, "OK")
    return gift


@router.delete("/api/gifts/{gift_id}")
def api_gift_delete(gift_id: str, store: GiftStore = Depends(get_store)):
    log = LogContext("DELETE_GIFT")
    log.set_entity("gift", gift_id)
    try:
        deleted = store.delete(gift_id)
    except Exception:
        logger.exception("Error deleting gift id=%s", gift_id)
        store.record(log, "ERROR", STORAGE_ERROR)
        raise HTTPException(status_code=500, detail="Failed to delete gift")
    if not deleted:
        store.record(log, "NOT_FOUND")
        raise HTTPException(status_code=404, detail=NOT_FOUND)
    store.record(log, "OK")
    return {"message": "Gift deleted successfully"}
