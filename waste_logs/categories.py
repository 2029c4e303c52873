"""
Static table of the waste categories reported by the sorting bin.
"""
from typing import Dict, Tuple

# Declared order is also the tie-break order for the most common category.
KNOWN_CATEGORIES: Tuple[str, ...] = ("Metal", "Wet", "Dry")

CATEGORY_COLORS: Dict[str, str] = {
    "Metal": "#6366F1",  # Indigo
    "Wet": "#10B981",  # Green
    "Dry": "#F59E0B",  # Amber
}

UNKNOWN_CATEGORY_COLOR = "#9CA3AF"  # Gray


def get_display_color(category: str) -> str:
    """Returns the display color for a category, gray if it is not known."""
    return CATEGORY_COLORS.get(category, UNKNOWN_CATEGORY_COLOR)


def display_name(category: str) -> str:
    """Upper-cases the first letter of a category label."""
    if not category:
        return ""
    return category[0].upper() + category[1:]
