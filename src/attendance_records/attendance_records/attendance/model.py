from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one check-in, optionally closed by a check-out.

    Timestamps are always UTC. ``record_id`` is the store identifier rendered
    as its hex string.
    """

    record_id: str
    user_id: str
    username: str
    checkin_time: datetime
    checkout_time: Optional[datetime] = None


@dataclass(frozen=True)
class AttendanceRecordView:
    """Rendered record returned to callers (timestamps in the display zone)."""

    id: str
    user_id: str
    username: str
    checkin_time: str
    checkout_time: Optional[str]
    status_message: str

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "id": self.id,
            "user_id": self.user_id,
            "username": self.username,
            "checkin_time": self.checkin_time,
            "status_message": self.status_message,
        }
        if self.checkout_time is not None:
            data["checkout_time"] = self.checkout_time
        return data


@dataclass(frozen=True)
class AttendanceListing:
    records: List[AttendanceRecordView] = field(default_factory=list)
    skipped: int = 0
