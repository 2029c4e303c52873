"""
This module provides a factory for creating and configuring the application's core components.
"""
from typing import Optional

from waste_logs.config import (FIREBASE_DATABASE_URL, ITEMS_PER_PAGE,
                               REFRESH_INTERVAL_SECONDS, WASTE_LOGS_PATH)
from waste_logs.facade import WasteDashboardFacade
from waste_logs.services.dashboard_service import DashboardService
from waste_logs.services.data_source import FirebaseSource, WasteLogSource
from waste_logs.services.refresh_service import RefreshService

from .logging_config import setup_logging


def initialize_app() -> None:
    """
    Initializes the application by setting up logging.
    """
    setup_logging()


def create_source(
    database_url: str = FIREBASE_DATABASE_URL, path: str = WASTE_LOGS_PATH
) -> WasteLogSource:
    """Creates the data source reading the remote waste logs."""
    return FirebaseSource(database_url=database_url, path=path)


def create_facade(source: Optional[WasteLogSource] = None) -> WasteDashboardFacade:
    """
    Initializes and returns the WasteDashboardFacade with all its dependencies.
    """
    if source is None:
        source = create_source()
    dashboard_service = DashboardService(page_size=ITEMS_PER_PAGE)
    refresh_service = RefreshService(source, interval_seconds=REFRESH_INTERVAL_SECONDS)

    return WasteDashboardFacade(
        source=source,
        dashboard_service=dashboard_service,
        refresh_service=refresh_service,
    )
