"""Settings modules selected by ``APP_ENV``."""

import os

DEFAULT_ENV = "development"

_ENV_MODULES = {
    "prod": "config.production",
    "production": "config.production",
    "test": "config.testing",
    "testing": "config.testing",
}


def get_settings_module() -> str:
    env = os.getenv("APP_ENV", DEFAULT_ENV).strip().lower()
    # Unrecognised names run with development settings
    return _ENV_MODULES.get(env, "config.development")
