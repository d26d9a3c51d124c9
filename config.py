import os

from dotenv import load_dotenv

# Pick up a local .env before reading the environment
load_dotenv(override=False)


def _env_flag(name, default="0"):
    return os.environ.get(name, default).strip().lower() in {"1", "true", "yes", "on"}


class Config:
    # MongoDB connection (database name is part of the URI)
    MONGO_URI = os.environ.get("MONGO_URI", "mongodb://localhost:27017/attendance")

    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()

    HOST = os.environ.get("HOST", "0.0.0.0")
    PORT = int(os.environ.get("PORT", "8000"))
    DEBUG = _env_flag("FLASK_DEBUG")

    # When enabled, check-out rejects unknown employee / check-in references
    VERIFY_CHECK_OUT_REFERENCES = _env_flag("VERIFY_CHECK_OUT_REFERENCES")


class TestingConfig(Config):
    TESTING = True
    MONGO_URI = os.environ.get("TEST_MONGO_URI", "mongodb://localhost:27017/attendance_test")
    LOG_LEVEL = "DEBUG"
