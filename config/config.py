import os


def env_flag(name: str, default: str) -> bool:
    return bool(int(os.getenv(name, default)))


def mongo_config_from_env(*, database: str = "attendance_db") -> dict:
    """Store settings shared by every environment module."""
    return {
        "uri": os.getenv("MONGO_URI", "mongodb://localhost:27017"),
        "database": os.getenv("MONGO_DB", database),
        "collection": os.getenv("MONGO_COLLECTION", "records"),
        "connect_timeout_ms": int(os.getenv("MONGO_CONNECT_TIMEOUT_MS", "10000")),
    }
