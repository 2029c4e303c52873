"""
This module defines the central facade for the waste log dashboard.
"""

import logging
from typing import Any, Callable, Dict, Optional

from .aggregator import DateLike
from .categories import display_name
from .services.dashboard_service import DashboardService, DashboardView
from .services.data_source import WasteLogSource
from .services.refresh_service import RefreshService

logger = logging.getLogger(__name__)


class WasteDashboardFacade:
    """
    The central entry point for the dashboard.
    It connects the data source to the dashboard state and exposes plain data.
    """

    def __init__(
        self,
        source: WasteLogSource,
        dashboard_service: DashboardService,
        refresh_service: RefreshService,
    ):
        self.source = source
        self.dashboard_service = dashboard_service
        self.refresh_service = refresh_service
        self._unsubscribe: Optional[Callable[[], None]] = source.subscribe(
            dashboard_service.on_snapshot
        )

    def refresh(self) -> bool:
        """Fetches a new snapshot right away."""
        return self.refresh_service.refresh_once()

    def close(self) -> None:
        """Stops receiving snapshots from the source."""
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    def get_dashboard_data(
        self,
        start_date: DateLike = None,
        end_date: DateLike = None,
        page: Optional[int] = None,
    ) -> Dict[str, Any]:
        """
        Retrieves all data shown by the dashboard.

        Args:
            start_date: First day to list (inclusive), or None for no bound.
            end_date: Last day to list (inclusive), or None for no bound.
            page: Requested page of the activity list, clamped into range.
                Without a page the first page is returned.

        Returns:
            A dictionary of plain values. On failure it holds empty data and
            an "error" message.
        """
        try:
            view = self.dashboard_service.build_view(start_date, end_date, page)
            return _view_to_dict(view)
        except Exception as e:
            logger.exception("Failed to build dashboard data.")
            return {
                "total_count": 0,
                "category_counts": [],
                "most_common": None,
                "filtered_count": 0,
                "logs": [],
                "current_page": 1,
                "total_pages": 0,
                "start_date": None,
                "end_date": None,
                "last_updated": None,
                "loading": False,
                "error": str(e),
            }


def _view_to_dict(view: DashboardView) -> Dict[str, Any]:
    most_common = None
    if view.most_common is not None:
        most_common = {
            "category": view.most_common.category,
            "name": display_name(view.most_common.category),
            "count": view.most_common.count,
            "color": view.most_common.display_color,
        }
    return {
        "total_count": view.total_count,
        "category_counts": [
            {
                "category": row.category,
                "name": display_name(row.category),
                "count": row.count,
                "color": row.display_color,
            }
            for row in view.category_counts
        ],
        "most_common": most_common,
        "filtered_count": view.filtered_count,
        "logs": [
            {"id": event.id, "category": event.category, "timestamp": event.timestamp}
            for event in view.logs
        ],
        "current_page": view.current_page,
        "total_pages": view.total_pages,
        "start_date": view.start_date,
        "end_date": view.end_date,
        "last_updated": view.last_updated.isoformat() if view.last_updated else None,
        "loading": view.loading,
    }
