"""
Run the Projects API server.

Usage: python -m projects_api
"""
import logging

import uvicorn

from projects_api.config import Config
from projects_api.main import app

logger = logging.getLogger("projects_api")


def main():
    Config.log_config()
    logger.info(f"Starting server on {Config.HOST}:{Config.PORT} 🏆")
    uvicorn.run(app, host=Config.HOST, port=Config.PORT, log_level=Config.effective_log_level().lower())


if __name__ == "__main__":
    main()
