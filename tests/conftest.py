from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Iterator, Mapping, Optional

import pytest
from bson import ObjectId

from src.attendance_records.attendance_records.attendance import codec
from src.attendance_records.attendance_records.attendance.model import AttendanceRecord
from src.attendance_records.attendance_records.core.exceptions import StoreError


class FakeClock:
    def __init__(self, start: datetime):
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now = self.now + timedelta(**kwargs)


class InMemoryAttendance:
    """Document-backed stand-in for the Mongo repository."""

    def __init__(self):
        self.docs: Dict[ObjectId, Dict[str, Any]] = {}
        self.writes = 0
        self.fail: Optional[str] = None

    def _maybe_fail(self, op: str) -> None:
        if self.fail == op:
            raise StoreError(f"{op} failed: store unavailable")

    def is_valid_id(self, record_id: str) -> bool:
        return codec.is_valid_record_id(record_id)

    def insert(self, record: AttendanceRecord) -> str:
        self._maybe_fail("insert")
        doc = codec.to_document(record)
        self.docs[doc["_id"]] = doc
        self.writes += 1
        return record.record_id

    def insert_raw(self, doc: Dict[str, Any]) -> None:
        self.docs[doc.get("_id", ObjectId())] = doc

    def find_one_and_set_checkout(self, record_id: str, checkout_time: datetime) -> Optional[AttendanceRecord]:
        self._maybe_fail("update")
        doc = self.docs.get(codec.parse_record_id(record_id))
        if doc is None:
            return None
        doc["checkout_time"] = checkout_time
        self.writes += 1
        return codec.from_document(doc)

    def find_latest_for_user(self, user_id: str) -> Optional[AttendanceRecord]:
        self._maybe_fail("lookup")
        matches = [d for d in self.docs.values() if d.get("user_id") == user_id]
        if not matches:
            return None
        return codec.from_document(max(matches, key=lambda d: d["checkin_time"]))

    def find_all(self) -> Iterator[Mapping[str, Any]]:
        self._maybe_fail("find")
        for doc in list(self.docs.values()):
            yield doc


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2026, 2, 1, 3, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def clock(fixed_now) -> FakeClock:
    return FakeClock(fixed_now)


@pytest.fixture
def memory_repo() -> InMemoryAttendance:
    return InMemoryAttendance()
