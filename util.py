import logging
import os
import sys
from datetime import datetime

from dotenv import find_dotenv, load_dotenv

from loggers.config import configure_loggers

logger = logging.getLogger(__name__)


def setup_logging(session_id: str, log_file: str = "war_game.log") -> None:
    """
    Configure logging with UTF-8 encoding support and session management.

    Sets up a logging system that outputs to both console and file. The log
    file is overwritten on every run.

    Args:
        session_id (str): Unique identifier for this game session.
        log_file (str): Path of the log file.

    Side Effects:
        - Clears existing logging handlers
        - Creates/overwrites log_file
        - Loads .env from the working directory
        - Sets the root level from the LOG_LEVEL environment variable
        - Sets urllib3 logging level to WARNING
    """
    # Clear any existing handlers
    logging.getLogger().handlers = []

    # LOG_LEVEL may come from a .env file in the working directory
    load_dotenv(find_dotenv(usecwd=True))
    level = getattr(logging, os.getenv("LOG_LEVEL", "INFO").upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[
            logging.StreamHandler(sys.stderr),
            logging.FileHandler(log_file, encoding="utf-8", mode="w"),
        ],
    )
    configure_loggers({name: level for name in ("api", "deck", "game")})

    # Silence connection pool chatter from requests
    logging.getLogger("urllib3").setLevel(logging.WARNING)

    logging.info(f"\n{'='*70}")
    logging.info(f"New War Session Started - ID: {session_id}")
    logging.info(f"Started at: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}")
    logging.info(f"{'='*70}\n")
