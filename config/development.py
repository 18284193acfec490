import os

from config.config import env_flag, mongo_config_from_env

MONGO_CONFIG = mongo_config_from_env()

# Rendering zone for every returned timestamp (storage stays UTC)
DISPLAY_TIMEZONE = os.getenv("DISPLAY_TIMEZONE", "Asia/Kolkata")

HTTP_PORT = int(os.getenv("HTTP_PORT", "8080"))

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# If enabled, app will create store indexes on startup (idempotent)
AUTO_INIT_DB = env_flag("AUTO_INIT_DB", "1")
