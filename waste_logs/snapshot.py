"""
This module turns raw database snapshots into WasteEvent objects.
"""
import logging
import math
import re
from typing import Any, List, Mapping, Optional

from .models import MAX_TIMESTAMP, MIN_TIMESTAMP, WasteEvent

logger = logging.getLogger(__name__)

integer_pattern = re.compile(r"^[+-]?\d+$")


def parse_timestamp(value: Any) -> Optional[int]:
    """
    Parses a timestamp in seconds since epoch.

    The database stores timestamps as numeric strings, but plain numbers are
    accepted too. Anything that is not a whole number of seconds, or lies
    outside the range a datetime can hold, yields None.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        seconds = value
    elif isinstance(value, float):
        if not math.isfinite(value):
            return None
        seconds = int(value)
    elif isinstance(value, str):
        text = value.strip()
        if not integer_pattern.match(text):
            return None
        seconds = int(text)
    else:
        return None

    if not MIN_TIMESTAMP <= seconds <= MAX_TIMESTAMP:
        return None
    return seconds


def parse_snapshot(raw: Any) -> List[WasteEvent]:
    """
    Parses a full snapshot of the waste log collection.

    Args:
        raw: Mapping of event id to {"type": str, "timestamp": str}. The
            database returns None for an empty collection, and a list when
            the ids are sequential integers; list indices become the ids.

    Returns:
        A list of WasteEvent objects in the order of the snapshot. Events
        with a missing or malformed timestamp are kept with timestamp None.
    """
    if not raw:
        return []
    if isinstance(raw, list):
        # Missing indices come back as null.
        entries = [(index, entry) for index, entry in enumerate(raw) if entry is not None]
    elif isinstance(raw, Mapping):
        entries = list(raw.items())
    else:
        logger.warning(f"Ignoring snapshot of unexpected type {type(raw).__name__}.")
        return []

    events = []
    for event_id, entry in entries:
        if not isinstance(entry, Mapping):
            logger.warning(f"Skipping waste log {event_id}: entry is not an object.")
            continue

        category = entry.get("type", entry.get("category"))
        category = "" if category is None else str(category)

        timestamp = parse_timestamp(entry.get("timestamp"))
        if timestamp is None:
            logger.debug(f"Waste log {event_id} has no usable timestamp.")

        events.append(WasteEvent(id=str(event_id), category=category, timestamp=timestamp))
    return events
