"""Example: drive the service layer directly (no Flask).

Controllers are a thin layer; the business rules live in AttendanceService.
"""

import importlib

from config import get_settings_module

from src.attendance_records.attendance_records.container import build_container


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(mongo_config=settings.MONGO_CONFIG, display_timezone=settings.DISPLAY_TIMEZONE)
    service = container.attendance_service

    checked_in = service.check_in("u1", "Alice")
    print(checked_in.to_dict())
    print(service.check_out(checked_in.id).to_dict())
    print(service.get_attendance("u1").to_dict())

    listing = service.get_all_attendance()
    print(f"{len(listing.records)} record(s), {listing.skipped} skipped")


if __name__ == "__main__":
    main()
