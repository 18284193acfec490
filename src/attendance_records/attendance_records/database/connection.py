from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from pymongo import MongoClient
from pymongo.collection import Collection


@dataclass(frozen=True)
class MongoConfig:
    uri: str
    database: str
    collection: str
    connect_timeout_ms: int = 10_000


class DatabaseConnection:
    """Owns the process-wide MongoClient.

    Note: MongoClient pools connections and is safe to share across request
    threads, so one instance is built per app and passed down explicitly.
    """

    def __init__(self, config: MongoConfig, *, client: Optional[MongoClient] = None):
        self._config = config
        self._client = client

    @property
    def config(self) -> MongoConfig:
        return self._config

    @property
    def client(self) -> MongoClient:
        if self._client is None:
            self._client = MongoClient(
                self._config.uri,
                connectTimeoutMS=int(self._config.connect_timeout_ms),
                serverSelectionTimeoutMS=int(self._config.connect_timeout_ms),
                tz_aware=True,
            )
        return self._client

    def collection(self) -> Collection:
        return self.client[self._config.database][self._config.collection]

    def ping(self) -> None:
        self.client.admin.command("ping")

    def describe(self) -> str:
        return f"{self._config.database}.{self._config.collection}"

    def close(self) -> None:
        if self._client is not None:
            self._client.close()
            self._client = None
