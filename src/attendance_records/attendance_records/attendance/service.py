from __future__ import annotations

import logging
from datetime import datetime, tzinfo
from typing import Callable, Optional

from ..common.datetime_utils import format_for_display, now_utc
from ..common.validators import is_blank, require_non_empty
from ..core.enums import StatusMessage
from ..core.exceptions import (
    InternalError,
    InvalidArgumentError,
    NotFoundError,
    RecordDecodeError,
    StoreError,
)
from . import codec
from .model import AttendanceListing, AttendanceRecord, AttendanceRecordView
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


class AttendanceService:
    """Check-in, check-out and lookup over an :class:`AttendanceRepository`.

    Every operation makes at most one store call. Check-out relies on the
    store's atomic find-and-update; it never reads then writes.

    Current behavior kept on purpose: a user may hold several open records,
    and checking out an already closed record overwrites its checkout time.
    """

    def __init__(
        self,
        records: AttendanceRepository,
        *,
        display_zone: tzinfo,
        clock: Callable[[], datetime] = now_utc,
    ):
        self._records = records
        self._zone = display_zone
        self._clock = clock

    def check_in(self, user_id: str, username: str) -> AttendanceRecordView:
        if is_blank(user_id) or is_blank(username):
            raise InvalidArgumentError("user_id and username are required")

        record = AttendanceRecord(
            record_id=codec.new_record_id(),
            user_id=user_id.strip(),
            username=username.strip(),
            checkin_time=self._clock(),
        )
        try:
            self._records.insert(record)
        except StoreError as e:
            logger.error("check-in insert failed for user_id=%s: %s", record.user_id, e)
            raise InternalError(f"failed to insert record: {e}") from e

        logger.info("checked in user_id=%s record_id=%s", record.user_id, record.record_id)
        return self._to_view(record, StatusMessage.CHECKED_IN)

    def check_out(self, record_id: str) -> AttendanceRecordView:
        record_id = require_non_empty(record_id, "record_id")
        if not self._records.is_valid_id(record_id):
            raise InvalidArgumentError("invalid record id")

        try:
            updated = self._records.find_one_and_set_checkout(record_id, self._clock())
        except StoreError as e:
            logger.error("check-out update failed for record_id=%s: %s", record_id, e)
            raise InternalError(f"update error: {e}") from e
        except RecordDecodeError as e:
            logger.error("check-out returned undecodable record_id=%s: %s", record_id, e)
            raise InternalError(f"decode error: {e}") from e

        if updated is None:
            raise NotFoundError("record not found")

        logger.info("checked out record_id=%s", updated.record_id)
        return self._to_view(updated, StatusMessage.CHECKED_OUT)

    def get_attendance(self, user_id: str) -> AttendanceRecordView:
        user_id = require_non_empty(user_id, "user_id")

        try:
            record = self._records.find_latest_for_user(user_id)
        except StoreError as e:
            logger.error("lookup failed for user_id=%s: %s", user_id, e)
            raise InternalError(f"db error: {e}") from e
        except RecordDecodeError as e:
            logger.error("latest record for user_id=%s is undecodable: %s", user_id, e)
            raise InternalError(f"decode error: {e}") from e

        if record is None:
            raise NotFoundError("no records found for this user")
        return self._to_view(record, StatusMessage.FOUND)

    def get_all_attendance(self) -> AttendanceListing:
        views = []
        skipped = 0
        try:
            for doc in self._records.find_all():
                try:
                    record = codec.from_document(doc)
                except RecordDecodeError as e:
                    skipped += 1
                    logger.warning("skipping undecodable record _id=%r: %s", doc.get("_id"), e)
                    continue
                views.append(self._to_view(record, StatusMessage.RETRIEVED))
        except StoreError as e:
            logger.error("listing all records failed: %s", e)
            raise InternalError(f"find error: {e}") from e

        if skipped:
            logger.warning("skipped %d undecodable record(s) while listing", skipped)
        return AttendanceListing(records=views, skipped=skipped)

    def _to_view(self, record: AttendanceRecord, message: StatusMessage) -> AttendanceRecordView:
        checkout: Optional[str] = None
        if record.checkout_time is not None:
            checkout = format_for_display(record.checkout_time, self._zone)
        return AttendanceRecordView(
            id=record.record_id,
            user_id=record.user_id,
            username=record.username,
            checkin_time=format_for_display(record.checkin_time, self._zone),
            checkout_time=checkout,
            status_message=message.value,
        )
