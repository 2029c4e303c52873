"""
Aggregation, date filtering and pagination of waste logs.

Every function here is pure: it takes one snapshot of events and the view
parameters, and returns a new value without touching its input.
"""
import logging
import math
from datetime import date, datetime, time, timezone
from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Tuple, Union

from .categories import CATEGORY_COLORS, KNOWN_CATEGORIES, UNKNOWN_CATEGORY_COLOR
from .models import CategoryCount, Page, WasteEvent

logger = logging.getLogger(__name__)

SECONDS_PER_DAY = 86400

DateLike = Union[date, str, None]


def count_by_category(
    events: Iterable[WasteEvent], known_categories: Sequence[str] = KNOWN_CATEGORIES
) -> Dict[str, int]:
    """
    Counts events per known category.

    All known categories are present in the result, in declared order, even
    with a count of zero. Events with an unknown category are not counted.
    """
    counts = {category: 0 for category in known_categories}
    for event in events:
        if event.category in counts:
            counts[event.category] += 1
    return counts


def category_counts(
    counts: Mapping[str, int], colors: Mapping[str, str] = CATEGORY_COLORS
) -> List[CategoryCount]:
    """Builds the presentation rows for a category count mapping."""
    return [
        CategoryCount(
            category=category,
            count=count,
            display_color=colors.get(category, UNKNOWN_CATEGORY_COLOR),
        )
        for category, count in counts.items()
    ]


def most_common_category(
    counts: Mapping[str, int], known_categories: Optional[Sequence[str]] = None
) -> Optional[str]:
    """
    Returns the category with the strictly largest count.

    Ties go to the category declared first. When every count is zero the
    first category is still returned; only an empty mapping gives None.

    Args:
        counts: Mapping of category to count, as built by count_by_category.
        known_categories: Declared category order. Defaults to the order of
            the mapping itself.
    """
    if known_categories is None:
        order = list(counts)
    else:
        order = [category for category in known_categories if category in counts]

    best = None
    for category in order:
        if best is None or counts[category] > counts[best]:
            best = category
    return best


def _parse_date(value: DateLike) -> Optional[date]:
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            return date.fromisoformat(text)
        except ValueError:
            logger.warning(f"Ignoring malformed date filter '{value}'.")
            return None
    logger.warning(f"Ignoring date filter of unexpected type {type(value).__name__}.")
    return None


def _midnight_utc(day: date) -> int:
    return int(datetime.combine(day, time.min, tzinfo=timezone.utc).timestamp())


def date_boundaries(
    start_date: DateLike, end_date: DateLike
) -> Tuple[Optional[int], Optional[int]]:
    """
    Converts calendar dates into inclusive boundary timestamps.

    The start date maps to its midnight (UTC) and the end date to the last
    second of that day, so the end day is included. Missing or malformed
    dates give None, meaning the bound is not applied.
    """
    start = _parse_date(start_date)
    end = _parse_date(end_date)
    start_ts = _midnight_utc(start) if start is not None else None
    end_ts = _midnight_utc(end) + SECONDS_PER_DAY - 1 if end is not None else None
    return start_ts, end_ts


def filter_by_date_range(
    events: Iterable[WasteEvent], start_date: DateLike = None, end_date: DateLike = None
) -> List[WasteEvent]:
    """
    Filters events to a date range and sorts them, most recent first.

    Events without a usable timestamp are left out. Events sharing a
    timestamp keep their relative input order.
    """
    start_ts, end_ts = date_boundaries(start_date, end_date)

    selected = [
        event
        for event in events
        if event.timestamp is not None
        and (start_ts is None or event.timestamp >= start_ts)
        and (end_ts is None or event.timestamp <= end_ts)
    ]
    # sorted() is stable with reverse=True as well.
    return sorted(selected, key=lambda event: event.timestamp, reverse=True)


def paginate(sequence: Sequence, page_number: int, page_size: int) -> Page:
    """
    Returns one page of a sequence and the total number of pages.

    The page number is not clamped: a page outside [1, total_pages] gives an
    empty slice.

    Raises:
        ValueError: If page_size is smaller than 1.
    """
    if page_size < 1:
        raise ValueError(f"page_size must be at least 1, got {page_size}")

    total_pages = math.ceil(len(sequence) / page_size)
    start = (page_number - 1) * page_size
    if start < 0:
        return Page(items=[], total_pages=total_pages)
    return Page(items=list(sequence[start : start + page_size]), total_pages=total_pages)


def clamp_page(page_number: int, total_pages: int) -> int:
    """Clamps a requested page number into [1, total_pages]."""
    return max(1, min(page_number, total_pages))
