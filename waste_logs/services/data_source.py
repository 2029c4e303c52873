"""
This module defines the data sources that supply waste log snapshots.
"""
import logging
import threading
from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, List, Optional

import requests

from waste_logs.config import (FIREBASE_DATABASE_URL, REQUEST_TIMEOUT_SECONDS,
                               WASTE_LOGS_PATH)

from ..exceptions import DataSourceError

logger = logging.getLogger(__name__)

SnapshotCallback = Callable[[Optional[Dict[str, Any]]], None]


class WasteLogSource(ABC):
    """
    Base class for a source of full waste log snapshots.

    Subscribers receive the complete snapshot on every refresh, never a diff.
    """

    def __init__(self):
        self._subscribers: List[SnapshotCallback] = []
        self._lock = threading.Lock()

    @abstractmethod
    def fetch_snapshot(self) -> Optional[Dict[str, Any]]:
        """Returns the current raw snapshot of the waste log collection."""

    def subscribe(self, callback: SnapshotCallback) -> Callable[[], None]:
        """
        Registers a callback for new snapshots.

        Returns:
            A function that removes the subscription. Calling it more than
            once has no effect.
        """
        with self._lock:
            self._subscribers.append(callback)

        def unsubscribe() -> None:
            with self._lock:
                if callback in self._subscribers:
                    self._subscribers.remove(callback)

        return unsubscribe

    def refresh(self) -> Optional[Dict[str, Any]]:
        """
        Fetches a snapshot and pushes it to every subscriber.

        Raises:
            DataSourceError: If the snapshot cannot be fetched.
        """
        snapshot = self.fetch_snapshot()
        self._notify(snapshot)
        return snapshot

    def _notify(self, snapshot: Optional[Dict[str, Any]]) -> None:
        with self._lock:
            subscribers = list(self._subscribers)
        for callback in subscribers:
            try:
                callback(snapshot)
            except Exception as e:
                logger.exception(f"Snapshot subscriber {callback!r} failed: {e}")


class FirebaseSource(WasteLogSource):
    """Reads waste logs through the Firebase Realtime Database REST API."""

    def __init__(
        self,
        database_url: str = FIREBASE_DATABASE_URL,
        path: str = WASTE_LOGS_PATH,
        timeout: int = REQUEST_TIMEOUT_SECONDS,
    ):
        super().__init__()
        self.database_url = database_url.rstrip("/")
        self.path = path.strip("/")
        self.timeout = timeout

    @property
    def url(self) -> str:
        return f"{self.database_url}/{self.path}.json"

    def fetch_snapshot(self) -> Optional[Dict[str, Any]]:
        try:
            response = requests.get(self.url, timeout=self.timeout)
            response.raise_for_status()
            snapshot = response.json()
        except requests.exceptions.RequestException as e:
            raise DataSourceError(f"Error reading waste logs from {self.url}: {e}") from e
        except ValueError as e:
            raise DataSourceError(f"Invalid JSON in waste logs from {self.url}: {e}") from e

        count = len(snapshot) if isinstance(snapshot, dict) else 0
        logger.info(f"Fetched {count} waste logs from {self.url}")
        return snapshot


class InMemorySource(WasteLogSource):
    """A source holding its snapshot in memory. Useful for demos and tests."""

    def __init__(self, snapshot: Optional[Dict[str, Any]] = None):
        super().__init__()
        self._snapshot = snapshot

    def fetch_snapshot(self) -> Optional[Dict[str, Any]]:
        return self._snapshot

    def publish(self, snapshot: Optional[Dict[str, Any]]) -> None:
        """Replaces the stored snapshot and notifies subscribers."""
        self._snapshot = snapshot
        self._notify(snapshot)
