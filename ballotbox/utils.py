from datetime import datetime, timezone
from typing import Any, Dict, Optional

from bson import ObjectId
from bson.errors import InvalidId


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def as_utc(dt: datetime) -> datetime:
    """Treat naive datetimes as UTC and convert aware ones to UTC."""
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def truncate_ms(dt: datetime) -> datetime:
    """UTC at millisecond precision, which is what BSON keeps."""
    dt = as_utc(dt)
    return dt.replace(microsecond=dt.microsecond // 1000 * 1000)


def to_storage(dt: datetime) -> datetime:
    return truncate_ms(dt).replace(tzinfo=None)


def from_storage(dt: Optional[datetime]) -> Optional[datetime]:
    if dt is None:
        return None
    return as_utc(dt)


def parse_object_id(value: str) -> Optional[ObjectId]:
    try:
        return ObjectId(value)
    except (InvalidId, TypeError):
        return None


def serialize_document(doc: Dict[str, Any]) -> Dict[str, Any]:
    """Convert a MongoDB document to plain Python values (``_id`` -> ``id``)."""
    doc = dict(doc)
    if "_id" in doc:
        doc["id"] = str(doc.pop("_id"))
    for key, value in doc.items():
        if isinstance(value, datetime):
            doc[key] = from_storage(value)
    return doc
