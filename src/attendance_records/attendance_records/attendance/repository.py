from __future__ import annotations

from datetime import datetime
from typing import Any, Iterator, Mapping, Optional, Protocol

from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    """Store contract used by :class:`AttendanceService`.

    Implementations re-raise driver failures as ``StoreError``.
    """

    def is_valid_id(self, record_id: str) -> bool:
        raise NotImplementedError

    def insert(self, record: AttendanceRecord) -> str:
        raise NotImplementedError

    def find_one_and_set_checkout(self, record_id: str, checkout_time: datetime) -> Optional[AttendanceRecord]:
        """Atomically set ``checkout_time`` and return the updated record."""

        raise NotImplementedError

    def find_latest_for_user(self, user_id: str) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def find_all(self) -> Iterator[Mapping[str, Any]]:
        """Forward-only scan over raw stored documents, in store order."""

        raise NotImplementedError
