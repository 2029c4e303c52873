"""
This module defines the RefreshService that periodically re-reads the waste logs.
"""

import asyncio
import logging
import threading
from datetime import datetime, timezone
from typing import Optional

from waste_logs.config import REFRESH_INTERVAL_SECONDS

from ..exceptions import DataSourceError
from .data_source import WasteLogSource

logger = logging.getLogger(__name__)


class RefreshService:
    """
    Owns the periodic refresh of the waste log snapshot.
    """

    def __init__(
        self,
        source: WasteLogSource,
        interval_seconds: int = REFRESH_INTERVAL_SECONDS,
    ):
        self.source = source
        self.interval_seconds = interval_seconds
        self.last_refreshed: Optional[datetime] = None
        self._thread: Optional[threading.Thread] = None

    def refresh_once(self) -> bool:
        """
        Fetches one snapshot and delivers it to the subscribers of the source.

        Returns:
            True if the snapshot was fetched, False if the source failed.
        """
        try:
            self.source.refresh()
        except DataSourceError as e:
            logger.error(f"Failed to refresh waste logs: {e}")
            return False
        self.last_refreshed = datetime.now(timezone.utc)
        return True

    async def run_scheduler(self) -> None:
        """
        Runs the refresh loop indefinitely.
        """
        logger.info(f"Refresh scheduler started, interval {self.interval_seconds}s.")
        while True:
            try:
                self.refresh_once()
            except Exception as e:
                logger.exception(f"An error occurred during the waste log refresh: {e}")

            await asyncio.sleep(self.interval_seconds)

    def start_in_background(self) -> threading.Thread:
        """Runs the scheduler on a daemon thread with its own event loop."""
        if self._thread is not None and self._thread.is_alive():
            return self._thread

        self._thread = threading.Thread(
            target=asyncio.run,
            args=(self.run_scheduler(),),
            name="waste-log-refresh",
            daemon=True,
        )
        self._thread.start()
        return self._thread
