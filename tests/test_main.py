"""
Tests for the application runner and factory.
"""
from unittest.mock import MagicMock, patch

from smart_waste import main as runner
from smart_waste.app_factory import create_facade
from waste_logs.services.data_source import FirebaseSource, InMemorySource


def test_create_facade_defaults_to_firebase():
    facade = create_facade()
    try:
        assert isinstance(facade.source, FirebaseSource)
        assert facade.source.url.endswith("/waste_logs.json")
    finally:
        facade.close()


def test_create_facade_with_injected_source():
    source = InMemorySource({"a": {"type": "Dry", "timestamp": "10"}})
    facade = create_facade(source=source)

    assert facade.refresh() is True
    assert facade.get_dashboard_data()["total_count"] == 1


@patch("smart_waste.main.initialize_app")
@patch("smart_waste.main.create_facade")
def test_summary_command_prints_counts(mock_create_facade, mock_initialize, capsys):
    source = InMemorySource(
        {
            "a": {"type": "Wet", "timestamp": "1735689600"},
            "b": {"type": "Wet", "timestamp": "1735689700"},
        }
    )
    mock_create_facade.return_value = create_facade(source=source)

    exit_code = runner.main(["summary"])

    out = capsys.readouterr().out
    assert exit_code == 0
    assert "Total items: 2" in out
    assert "Most common: Wet (2)" in out


@patch("smart_waste.main.initialize_app")
@patch("smart_waste.main.create_facade")
def test_summary_command_fails_when_refresh_fails(mock_create_facade, mock_initialize):
    facade = MagicMock()
    facade.refresh.return_value = False
    mock_create_facade.return_value = facade

    assert runner.main(["summary"]) == 1
    facade.get_dashboard_data.assert_not_called()
