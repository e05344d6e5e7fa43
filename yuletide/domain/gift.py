from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Mapping, Optional

# Mutable columns, in table order. id/createdAt/updatedAt are owned by the store.
GIFT_FIELDS = ("kid", "item", "link", "helper", "deliveryDate")


def _text(value: Any) -> str:
    # falsy (None, "", 0, False) -> ''; anything else is stored as its text form
    if not value:
        return ""
    return value if isinstance(value, str) else str(value)


def fill_defaults(data: Optional[Mapping[str, Any]]) -> dict[str, str]:
    """Coerce a partial field set into the full five-field record; absent/null -> ''."""
    if not isinstance(data, Mapping):
        data = {}
    return {k: _text(data.get(k)) for k in GIFT_FIELDS}


def format_timestamp(moment: datetime) -> str:
    """UTC text timestamp, millisecond precision (sorts with SQLite CURRENT_TIMESTAMP)."""
    if moment.tzinfo is not None:
        moment = moment.astimezone(timezone.utc)
    return moment.strftime("%Y-%m-%d %H:%M:%S.%f")[:-3]


def utc_now() -> str:
    return format_timestamp(datetime.now(timezone.utc))
