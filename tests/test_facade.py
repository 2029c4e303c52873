"""
Unit tests for the WasteDashboardFacade.
"""

from unittest.mock import MagicMock

import pytest

from waste_logs.facade import WasteDashboardFacade
from waste_logs.services.dashboard_service import DashboardService
from waste_logs.services.data_source import InMemorySource
from waste_logs.services.refresh_service import RefreshService

JAN_1 = 1735689600  # 2025-01-01T00:00:00Z

SNAPSHOT = {
    f"id{i:02d}": {"type": ("Metal", "Wet", "Dry")[i % 3], "timestamp": str(JAN_1 + i * 3600)}
    for i in range(24)
}
SNAPSHOT["late"] = {"type": "Wet", "timestamp": str(JAN_1 + 86400)}


@pytest.fixture
def facade():
    source = InMemorySource(SNAPSHOT)
    dashboard_service = DashboardService(page_size=10)
    facade = WasteDashboardFacade(
        source=source,
        dashboard_service=dashboard_service,
        refresh_service=RefreshService(source),
    )
    yield facade
    facade.close()


def test_refresh_feeds_dashboard(facade):
    """A refresh delivers the snapshot to the dashboard state."""
    # Act
    assert facade.refresh() is True
    data = facade.get_dashboard_data()

    # Assert
    assert data["loading"] is False
    assert data["total_count"] == 25
    assert [row["count"] for row in data["category_counts"]] == [8, 9, 8]
    assert data["most_common"] == {"category": "Wet", "name": "Wet", "count": 9, "color": "#10B981"}
    assert data["total_pages"] == 3
    assert data["logs"][0] == {"id": "late", "category": "Wet", "timestamp": JAN_1 + 86400}
    assert data["last_updated"] is not None


def test_date_range_and_page_in_one_call(facade):
    """A filtered request keeps the page it asks for."""
    facade.refresh()

    data = facade.get_dashboard_data("2025-01-01", "2025-01-01", page=2)

    assert data["current_page"] == 2
    assert data["filtered_count"] == 24
    assert data["total_pages"] == 3
    assert data["start_date"] == "2025-01-01"
    assert len(data["logs"]) == 10

    data = facade.get_dashboard_data("2025-01-01", "2025-01-01", page=99)
    assert data["current_page"] == 3
    assert len(data["logs"]) == 4


def test_request_without_page_gets_first_page(facade):
    """An earlier request's page does not leak into the next one."""
    facade.refresh()

    data = facade.get_dashboard_data(page=3)
    assert data["current_page"] == 3
    assert len(data["logs"]) == 5

    data = facade.get_dashboard_data()
    assert data["current_page"] == 1
    assert data["logs"][0]["id"] == "late"


def test_close_unsubscribes(facade):
    facade.close()
    facade.source.publish({"x": {"type": "Dry", "timestamp": "1"}})

    assert facade.get_dashboard_data()["loading"] is True


def test_failure_returns_error_data():
    """An unexpected error is logged and reported in the returned data."""
    # Arrange
    dashboard_service = MagicMock()
    dashboard_service.build_view.side_effect = Exception("Something broke")
    facade = WasteDashboardFacade(
        source=MagicMock(), dashboard_service=dashboard_service, refresh_service=MagicMock()
    )

    # Act
    data = facade.get_dashboard_data()

    # Assert
    assert data["error"] == "Something broke"
    assert data["logs"] == []
    assert data["total_pages"] == 0


def test_refresh_delegates_to_refresh_service():
    refresh_service = MagicMock()
    refresh_service.refresh_once.return_value = False
    facade = WasteDashboardFacade(
        source=MagicMock(), dashboard_service=MagicMock(), refresh_service=refresh_service
    )

    assert facade.refresh() is False
    refresh_service.refresh_once.assert_called_once()
