"""Constants and defaults.

Note: Keep constants here to avoid magic values spread across code.
"""

DEFAULT_DISPLAY_TIMEZONE = "Asia/Kolkata"
DISPLAY_TIME_FORMAT = "%Y-%m-%d %H:%M:%S %Z"

DEFAULT_CONNECT_TIMEOUT_MS = 10_000

DEFAULT_HTTP_PORT = 8080

SKIPPED_RECORDS_HEADER = "X-Skipped-Records"
