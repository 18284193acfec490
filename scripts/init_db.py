from __future__ import annotations

import sys
from pathlib import Path

import importlib

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from dotenv import load_dotenv

from config import get_settings_module

from src.attendance_records.attendance_records.container import build_container
from src.attendance_records.attendance_records.database.bootstrap import ensure_indexes, list_indexes


def main() -> None:
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    mongo_config = dict(settings.MONGO_CONFIG)

    container = build_container(mongo_config=mongo_config)
    try:
        container.conn.ping()
        collection = container.conn.collection()
        ensure_indexes(collection)
        indexes = list_indexes(collection)
    finally:
        container.conn.close()

    print(
        "OK: Ensured indexes -> "
        f"{container.conn.describe()} (indexes={', '.join(indexes)})"
    )


if __name__ == "__main__":
    main()
