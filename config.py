"""
config.py
-----------------
Application settings, read from environment variables.
A local .env file (if any) is loaded before the values are read.
"""

import os

from dotenv import load_dotenv

load_dotenv()


def _env_flag(name, default="false"):
    return os.getenv(name, default).strip().lower() in {"1", "true", "yes"}


class Config:
    # MONGODB_URI is the name older deployments used
    MONGO_URI = os.getenv("MONGO_URI") or os.getenv("MONGODB_URI") or "mongodb://localhost:27017/attendance"
    # used when MONGO_URI has no database path
    MONGO_DBNAME = os.getenv("MONGO_DBNAME", "attendance")

    HOST = os.getenv("HOST", "0.0.0.0")
    PORT = int(os.getenv("PORT", "3000"))
    DEBUG = _env_flag("DEBUG")

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    CORS_ORIGINS = os.getenv("CORS_ORIGINS", "*")
