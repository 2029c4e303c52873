"""
Unit tests for snapshot parsing.
"""
import pytest

from waste_logs.aggregator import filter_by_date_range
from waste_logs.models import WasteEvent
from waste_logs.snapshot import parse_snapshot, parse_timestamp


@pytest.mark.parametrize(
    "value, expected",
    [
        ("1735689600", 1735689600),
        (" 1735689600 ", 1735689600),
        (1735689600, 1735689600),
        (1735689600.0, 1735689600),
        ("-5", -5),
        ("", None),
        ("abc", None),
        ("17356.5", None),
        (None, None),
        (True, None),
        (float("nan"), None),
        ([1], None),
    ],
)
def test_parse_timestamp(value, expected):
    assert parse_timestamp(value) == expected


def test_parse_snapshot_reads_type_and_timestamp():
    raw = {
        "a": {"type": "Metal", "timestamp": "100"},
        "b": {"category": "Wet", "timestamp": 200},
    }

    events = parse_snapshot(raw)

    assert [(e.id, e.category, e.timestamp) for e in events] == [
        ("a", "Metal", 100),
        ("b", "Wet", 200),
    ]


def test_parse_snapshot_keeps_unknown_categories_and_bad_timestamps():
    """Malformed entries stay in the listing rather than being dropped."""
    raw = {
        "a": {"type": "Plastic", "timestamp": "100"},
        "b": {"type": "Dry", "timestamp": "later"},
        "c": {"type": "Wet"},
    }

    events = parse_snapshot(raw)

    assert [e.category for e in events] == ["Plastic", "Dry", "Wet"]
    assert [e.timestamp for e in events] == [100, None, None]


def test_parse_snapshot_skips_non_object_entries():
    raw = {"a": "garbage", "b": {"type": "Dry", "timestamp": "1"}, "c": None}
    assert [e.id for e in parse_snapshot(raw)] == ["b"]


@pytest.mark.parametrize("raw", [None, {}, [], "text"])
def test_parse_snapshot_empty_or_unexpected(raw):
    assert parse_snapshot(raw) == []


def test_recorded_at_is_utc():
    event = parse_snapshot({"a": {"type": "Metal", "timestamp": "1735689600"}})[0]
    assert event.recorded_at().isoformat() == "2025-01-01T00:00:00+00:00"
    assert parse_snapshot({"b": {"type": "Metal"}})[0].recorded_at() is None


@pytest.mark.parametrize(
    "value", ["99999999999999999", "-99999999999999999", 10 ** 20, 1e20]
)
def test_parse_timestamp_outside_datetime_range(value):
    """Timestamps a datetime cannot hold are treated as unusable."""
    assert parse_timestamp(value) is None


def test_out_of_range_timestamp_is_left_out_of_the_listing():
    raw = {
        "a": {"type": "Metal", "timestamp": "1735689600"},
        "b": {"type": "Wet", "timestamp": "99999999999999999"},
    }

    events = parse_snapshot(raw)

    assert [e.timestamp for e in events] == [1735689600, None]
    assert [e.id for e in filter_by_date_range(events)] == ["a"]


def test_recorded_at_outside_datetime_range_is_none():
    event = WasteEvent(id="x", category="Wet", timestamp=10 ** 20)
    assert event.recorded_at() is None


def test_parse_snapshot_accepts_list_with_holes():
    """Sequential ids come back as a list; indices become the ids."""
    raw = [
        {"type": "Metal", "timestamp": "100"},
        None,
        {"type": "Dry", "timestamp": "300"},
    ]

    events = parse_snapshot(raw)

    assert [(e.id, e.category, e.timestamp) for e in events] == [
        ("0", "Metal", 100),
        ("2", "Dry", 300),
    ]
