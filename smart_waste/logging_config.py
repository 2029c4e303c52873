"""
This module sets up logging for the application.
"""
import logging
from collections import deque
from datetime import datetime, timezone
from logging import Handler, LogRecord
from typing import Dict, List, Optional

from waste_logs.config import LOG_LEVEL, RECENT_LOG_CAPACITY

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class RecentLogHandler(Handler):
    """
    A logging handler that keeps the most recent records in memory,
    so the dashboard can show them.
    """

    def __init__(self, capacity: int = RECENT_LOG_CAPACITY):
        super().__init__()
        self.records = deque(maxlen=capacity)

    def emit(self, record: LogRecord) -> None:
        """
        Stores the formatted log record.
        """
        try:
            self.records.append(
                {
                    "timestamp": datetime.fromtimestamp(
                        record.created, tz=timezone.utc
                    ).strftime("%Y-%m-%d %H:%M:%S"),
                    "level": record.levelname,
                    "message": record.getMessage(),
                    "logger_name": record.name,
                }
            )
        except Exception:
            self.handleError(record)

    def get_logs(self) -> List[Dict[str, str]]:
        """Returns the stored records, newest first."""
        return list(reversed(self.records))


_recent_handler: Optional[RecentLogHandler] = None


def get_recent_log_handler() -> Optional[RecentLogHandler]:
    """Returns the handler installed by setup_logging, if any."""
    return _recent_handler


def setup_logging(level: int = LOG_LEVEL) -> RecentLogHandler:
    """
    Configures the root logger with a console handler and a RecentLogHandler.
    """
    global _recent_handler

    # Get the root logger
    logger = logging.getLogger()
    logger.setLevel(level)

    # Remove any existing handlers to avoid duplicates
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    formatter = logging.Formatter(LOG_FORMAT)

    _recent_handler = RecentLogHandler()
    _recent_handler.setLevel(level)
    _recent_handler.setFormatter(formatter)
    logger.addHandler(_recent_handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    logging.info("Logging configured for console and dashboard.")
    return _recent_handler
