from __future__ import annotations

from datetime import datetime
from typing import Any, Iterator, Mapping, Optional

from pymongo import DESCENDING, ReturnDocument
from pymongo.collection import Collection
from pymongo.errors import PyMongoError

from ..core.exceptions import StoreError
from . import codec
from .model import AttendanceRecord
from .repository import AttendanceRepository


class MongoAttendanceRepository(AttendanceRepository):
    def __init__(self, collection: Collection):
        self._collection = collection

    def is_valid_id(self, record_id: str) -> bool:
        return codec.is_valid_record_id(record_id)

    def insert(self, record: AttendanceRecord) -> str:
        try:
            result = self._collection.insert_one(codec.to_document(record))
        except PyMongoError as e:
            raise StoreError(f"insert failed: {e}") from e
        return str(result.inserted_id)

    def find_one_and_set_checkout(self, record_id: str, checkout_time: datetime) -> Optional[AttendanceRecord]:
        try:
            doc = self._collection.find_one_and_update(
                {"_id": codec.parse_record_id(record_id)},
                {"$set": {"checkout_time": checkout_time}},
                return_document=ReturnDocument.AFTER,
            )
        except PyMongoError as e:
            raise StoreError(f"update failed: {e}") from e
        if doc is None:
            return None
        return codec.from_document(doc)

    def find_latest_for_user(self, user_id: str) -> Optional[AttendanceRecord]:
        try:
            doc = self._collection.find_one(
                {"user_id": user_id},
                sort=[("checkin_time", DESCENDING)],
            )
        except PyMongoError as e:
            raise StoreError(f"lookup failed: {e}") from e
        if doc is None:
            return None
        return codec.from_document(doc)

    def find_all(self) -> Iterator[Mapping[str, Any]]:
        try:
            cursor = self._collection.find({})
        except PyMongoError as e:
            raise StoreError(f"find failed: {e}") from e
        try:
            for doc in cursor:
                yield doc
        except PyMongoError as e:
            raise StoreError(f"cursor failed: {e}") from e
        finally:
            cursor.close()
