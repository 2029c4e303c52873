"""
This module defines the DashboardService that builds the dashboard views.
"""
import logging
import threading
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Sequence, Tuple

from waste_logs.categories import KNOWN_CATEGORIES
from waste_logs.config import ITEMS_PER_PAGE

from ..aggregator import (DateLike, category_counts, clamp_page,
                          count_by_category, filter_by_date_range,
                          most_common_category, paginate)
from ..models import CategoryCount, WasteEvent
from ..snapshot import parse_snapshot

logger = logging.getLogger(__name__)


@dataclass
class DashboardView:
    """Everything the dashboard page shows, computed from one snapshot."""

    total_count: int = 0
    category_counts: List[CategoryCount] = field(default_factory=list)
    most_common: Optional[CategoryCount] = None
    filtered_count: int = 0
    logs: List[WasteEvent] = field(default_factory=list)
    current_page: int = 1
    total_pages: int = 0
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    last_updated: Optional[datetime] = None
    loading: bool = True


class DashboardService:
    """
    Holds the latest waste log snapshot and builds dashboard views from it.

    Snapshots arrive whole and replace the previous one. Only the snapshot
    is shared between callers: the date range and page belong to each view
    request, and every view is computed from a single snapshot reference.
    """

    def __init__(
        self,
        page_size: int = ITEMS_PER_PAGE,
        known_categories: Sequence[str] = KNOWN_CATEGORIES,
    ):
        if page_size < 1:
            raise ValueError(f"page_size must be at least 1, got {page_size}")
        self.page_size = page_size
        self.known_categories = tuple(known_categories)

        self._lock = threading.Lock()
        self._events: Tuple[WasteEvent, ...] = ()
        self.last_updated: Optional[datetime] = None
        self.loading = True

    @property
    def events(self) -> Tuple[WasteEvent, ...]:
        return self._events

    def on_snapshot(self, raw: Optional[Dict[str, Any]]) -> None:
        """Replaces the current snapshot with a freshly received one."""
        events = tuple(parse_snapshot(raw))
        with self._lock:
            self._events = events
            self.last_updated = datetime.now(timezone.utc)
            self.loading = False
        logger.info(f"Received snapshot with {len(events)} waste logs.")

    def build_view(
        self,
        start_date: DateLike = None,
        end_date: DateLike = None,
        page: Optional[int] = None,
    ) -> DashboardView:
        """
        Computes the dashboard view from the current snapshot.

        Args:
            start_date: First day to list (inclusive), or None for no bound.
            end_date: Last day to list (inclusive), or None for no bound.
            page: Requested page of the activity list, clamped into range.
                Defaults to the first page.
        """
        with self._lock:
            events = self._events
            last_updated, loading = self.last_updated, self.loading

        start_text, end_text = date_text(start_date), date_text(end_date)

        counts = count_by_category(events, self.known_categories)
        rows = category_counts(counts)
        top = most_common_category(counts, self.known_categories)
        most_common = next((row for row in rows if row.category == top), None)

        filtered = filter_by_date_range(events, start_text, end_text)
        total_pages = paginate(filtered, 1, self.page_size).total_pages
        page_number = clamp_page(page or 1, total_pages)
        listing = paginate(filtered, page_number, self.page_size)

        return DashboardView(
            total_count=len(events),
            category_counts=rows,
            most_common=most_common,
            filtered_count=len(filtered),
            logs=listing.items,
            current_page=page_number,
            total_pages=total_pages,
            start_date=start_text,
            end_date=end_text,
            last_updated=last_updated,
            loading=loading,
        )


def date_text(value: DateLike) -> Optional[str]:
    if value is None:
        return None
    if isinstance(value, str):
        return value.strip() or None
    if isinstance(value, datetime):
        value = value.date()
    return value.isoformat()
