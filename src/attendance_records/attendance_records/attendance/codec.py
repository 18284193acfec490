"""Mapping between stored documents and :class:`AttendanceRecord`.

Stored shape::

    {"_id": ObjectId, "user_id": str, "username": str,
     "checkin_time": datetime, "checkout_time": datetime (optional)}
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, Mapping

from bson import ObjectId
from bson.errors import InvalidId

from ..common.datetime_utils import as_utc
from ..core.exceptions import RecordDecodeError
from .model import AttendanceRecord


def new_record_id() -> str:
    return str(ObjectId())


def parse_record_id(value: str) -> ObjectId:
    try:
        return ObjectId(value)
    except (InvalidId, TypeError):
        raise ValueError(f"invalid record id: {value!r}")


def is_valid_record_id(value: str) -> bool:
    return isinstance(value, str) and ObjectId.is_valid(value)


def to_document(record: AttendanceRecord) -> Dict[str, Any]:
    doc: Dict[str, Any] = {
        "_id": parse_record_id(record.record_id),
        "user_id": record.user_id,
        "username": record.username,
        "checkin_time": record.checkin_time,
    }
    if record.checkout_time is not None:
        doc["checkout_time"] = record.checkout_time
    return doc


def from_document(doc: Mapping[str, Any]) -> AttendanceRecord:
    raw_id = doc.get("_id")
    if not isinstance(raw_id, ObjectId):
        raise RecordDecodeError(f"document has no ObjectId _id: {raw_id!r}")

    user_id = doc.get("user_id")
    username = doc.get("username")
    if not isinstance(user_id, str) or not isinstance(username, str):
        raise RecordDecodeError(f"document {raw_id} has non-string user_id/username")

    checkin = doc.get("checkin_time")
    if not isinstance(checkin, datetime):
        raise RecordDecodeError(f"document {raw_id} has invalid checkin_time")

    checkout = doc.get("checkout_time")
    if checkout is not None and not isinstance(checkout, datetime):
        raise RecordDecodeError(f"document {raw_id} has invalid checkout_time")

    return AttendanceRecord(
        record_id=str(raw_id),
        user_id=user_id,
        username=username,
        checkin_time=as_utc(checkin),
        checkout_time=as_utc(checkout) if checkout is not None else None,
    )
