import logging
import os
from pathlib import Path
from dotenv import load_dotenv

logger = logging.getLogger(__name__)

# Load environment variables from .env file
env_path = Path(__file__).parent.parent / ".env"
load_dotenv(dotenv_path=env_path)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _split(value: str) -> list:
    return [item.strip() for item in value.split(",") if item.strip()]


class Config:
    """Application configuration loaded from environment variables"""

    # Server
    HOST = os.getenv("HOST", "0.0.0.0")
    PORT = int(os.getenv("PORT", "9595"))

    # Logging
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
    LOG_REQUESTS = os.getenv("LOG_REQUESTS", "true").lower() == "true"
    LOG_REQUEST_METHODS = [m.upper() for m in _split(os.getenv("LOG_REQUEST_METHODS", "POST"))]

    # CORS
    CORS_ORIGINS = _split(os.getenv("CORS_ORIGINS", "*"))

    @classmethod
    def validate(cls):
        """Validate that the configuration values are usable"""
        problems = []

        if not 0 < cls.PORT < 65536:
            problems.append(f"PORT={cls.PORT} is out of range")
        if cls.LOG_LEVEL not in LOG_LEVELS:
            problems.append(f"LOG_LEVEL={cls.LOG_LEVEL} is not one of {', '.join(LOG_LEVELS)}")

        if problems:
            raise ValueError(
                f"Invalid configuration: {'; '.join(problems)}. "
                f"Please check your .env file at {env_path}"
            )

        logger.info("✓ Configuration validated successfully")
        return True

    @classmethod
    def effective_log_level(cls) -> str:
        """LOG_LEVEL if it is a known level, otherwise INFO"""
        return cls.LOG_LEVEL if cls.LOG_LEVEL in LOG_LEVELS else "INFO"

    @classmethod
    def log_config(cls):
        """Log the effective configuration"""
        logger.info("Configuration:")
        logger.info(f"  Bind: {cls.HOST}:{cls.PORT}")
        logger.info(f"  Log level: {cls.effective_log_level()}")
        logger.info(f"  Request logging: {'✓ On' if cls.LOG_REQUESTS else '✗ Off'} ({', '.join(cls.LOG_REQUEST_METHODS)})")
        logger.info(f"  CORS origins: {', '.join(cls.CORS_ORIGINS)}")


# Validate on import (logs a warning instead of failing)
try:
    Config.validate()
except ValueError as e:
    logger.warning(f"Configuration validation failed: {e}")
    logger.warning("An invalid LOG_LEVEL falls back to INFO; an invalid PORT stops the server from starting")
