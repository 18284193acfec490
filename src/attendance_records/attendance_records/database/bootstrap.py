from __future__ import annotations

from typing import List

from pymongo import ASCENDING, DESCENDING
from pymongo.collection import Collection

USER_LATEST_INDEX = "user_id_checkin_time_desc"


def ensure_indexes(collection: Collection) -> List[str]:
    """Create the indexes the service queries rely on.

    Idempotent: ``create_index`` is a no-op when an identical index exists.
    """

    name = collection.create_index(
        [("user_id", ASCENDING), ("checkin_time", DESCENDING)],
        name=USER_LATEST_INDEX,
    )
    return [name]


def list_indexes(collection: Collection) -> List[str]:
    return [str(ix["name"]) for ix in collection.list_indexes()]
