"""
This module defines the data models for the waste log dashboard.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import List, Optional

# Range of seconds since epoch that datetime can represent.
MIN_TIMESTAMP = int(datetime.min.replace(tzinfo=timezone.utc).timestamp())
MAX_TIMESTAMP = int(datetime.max.replace(tzinfo=timezone.utc).timestamp())


@dataclass(frozen=True)
class WasteEvent:
    """Represents a single waste sorting action recorded by the bin."""

    id: str
    category: str
    timestamp: Optional[int]

    def recorded_at(self) -> Optional[datetime]:
        """Returns the event time as an aware UTC datetime, if known."""
        if self.timestamp is None:
            return None
        try:
            return datetime.fromtimestamp(self.timestamp, tz=timezone.utc)
        except (OverflowError, OSError, ValueError):
            return None


@dataclass
class CategoryCount:
    """Number of events of one category, with its display color."""

    category: str
    count: int
    display_color: str


@dataclass
class Page:
    """A slice of a sequence together with the total number of pages."""

    items: List = field(default_factory=list)
    total_pages: int = 0
