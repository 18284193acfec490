import os

from config.config import env_flag, mongo_config_from_env

MONGO_CONFIG = mongo_config_from_env()

DISPLAY_TIMEZONE = os.getenv("DISPLAY_TIMEZONE", "Asia/Kolkata")

HTTP_PORT = int(os.getenv("HTTP_PORT", "8080"))

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

AUTO_INIT_DB = env_flag("AUTO_INIT_DB", "0")
