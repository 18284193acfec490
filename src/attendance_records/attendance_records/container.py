from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .attendance.mongo_attendance_repository import MongoAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .common.datetime_utils import load_display_zone
from .core.constants import DEFAULT_CONNECT_TIMEOUT_MS, DEFAULT_DISPLAY_TIMEZONE
from .database.connection import DatabaseConnection, MongoConfig


@dataclass(frozen=True)
class Container:
    conn: Optional[DatabaseConnection]

    attendance_repo: AttendanceRepository

    attendance_service: AttendanceService


def build_container(*, mongo_config: dict, display_timezone: str = DEFAULT_DISPLAY_TIMEZONE) -> Container:
    config = MongoConfig(
        uri=str(mongo_config["uri"]),
        database=str(mongo_config["database"]),
        collection=str(mongo_config["collection"]),
        connect_timeout_ms=int(mongo_config.get("connect_timeout_ms", DEFAULT_CONNECT_TIMEOUT_MS)),
    )
    conn = DatabaseConnection(config)

    attendance_repo = MongoAttendanceRepository(conn.collection())
    attendance_service = AttendanceService(attendance_repo, display_zone=load_display_zone(display_timezone))

    return Container(
        conn=conn,
        attendance_repo=attendance_repo,
        attendance_service=attendance_service,
    )


def build_container_with_repository(
    attendance_repo: AttendanceRepository,
    *,
    display_timezone: str = DEFAULT_DISPLAY_TIMEZONE,
    service: Optional[AttendanceService] = None,
) -> Container:
    """Wire a container around an existing repository (tests, scripts)."""

    return Container(
        conn=None,
        attendance_repo=attendance_repo,
        attendance_service=service
        or AttendanceService(attendance_repo, display_zone=load_display_zone(display_timezone)),
    )
