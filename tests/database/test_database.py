from __future__ import annotations

from pymongo import ASCENDING, DESCENDING

from src.attendance_records.attendance_records.database.bootstrap import USER_LATEST_INDEX, ensure_indexes, list_indexes
from src.attendance_records.attendance_records.database.connection import DatabaseConnection, MongoConfig


class FakeIndexCollection:
    def __init__(self):
        self.indexes = {"_id_": [("_id", ASCENDING)]}

    def create_index(self, keys, name):
        self.indexes.setdefault(name, list(keys))
        return name

    def list_indexes(self):
        return [{"name": n, "key": k} for n, k in self.indexes.items()]


class FakeClient:
    def __init__(self):
        self.closed = False
        self.commands = []
        self.admin = self

    def command(self, name):
        self.commands.append(name)
        return {"ok": 1.0}

    def __getitem__(self, name):
        return {"records": f"{name}.records"}

    def close(self):
        self.closed = True


def test_ensure_indexes_is_idempotent():
    collection = FakeIndexCollection()

    assert ensure_indexes(collection) == [USER_LATEST_INDEX]
    assert ensure_indexes(collection) == [USER_LATEST_INDEX]

    assert list_indexes(collection) == ["_id_", USER_LATEST_INDEX]
    assert collection.indexes[USER_LATEST_INDEX] == [("user_id", ASCENDING), ("checkin_time", DESCENDING)]


def test_connection_uses_configured_database_and_collection():
    client = FakeClient()
    conn = DatabaseConnection(MongoConfig(uri="mongodb://db:27017", database="attendance_db", collection="records"), client=client)

    assert conn.collection() == "attendance_db.records"
    assert conn.describe() == "attendance_db.records"

    conn.ping()
    conn.close()

    assert client.commands == ["ping"]
    assert client.closed
