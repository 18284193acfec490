import os

from config.config import env_flag, mongo_config_from_env

MONGO_CONFIG = mongo_config_from_env(database="attendance_db_test")

DISPLAY_TIMEZONE = "Asia/Kolkata"

HTTP_PORT = 8080

DEBUG = False
TESTING = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING")

AUTO_INIT_DB = env_flag("AUTO_INIT_DB", "0")
