"""
This module contains the Flask application for the waste dashboard.
"""

import logging
from datetime import datetime, timezone

from flask import Flask, current_app, jsonify, redirect, render_template, request, url_for

from smart_waste.logging_config import get_recent_log_handler
from waste_logs.categories import KNOWN_CATEGORIES, get_display_color

logger = logging.getLogger(__name__)


def _format_timestamp(timestamp, fmt):
    if timestamp is None:
        return "-"
    try:
        return datetime.fromtimestamp(timestamp, tz=timezone.utc).strftime(fmt)
    except (OverflowError, OSError, ValueError):
        return "-"


def format_date(timestamp):
    """Formats seconds since epoch as a UTC date."""
    return _format_timestamp(timestamp, "%Y-%m-%d")


def format_time(timestamp):
    """Formats seconds since epoch as a UTC time of day."""
    return _format_timestamp(timestamp, "%H:%M:%S")


def _view_args():
    """Reads the filter and page query parameters."""
    page = request.args.get("page", type=int)
    return {
        "start_date": request.args.get("start_date") or None,
        "end_date": request.args.get("end_date") or None,
        "page": page,
    }


def _recent_logs():
    handler = get_recent_log_handler()
    return handler.get_logs() if handler else []


def index():
    """Renders the main dashboard page."""
    facade = current_app.config["FACADE"]
    data = facade.get_dashboard_data(**_view_args())
    return render_template(
        "index.html",
        data=data,
        categories=[(c, get_display_color(c)) for c in KNOWN_CATEGORIES],
        logs=_recent_logs(),
    )


def summary():
    """Returns the dashboard data as JSON."""
    facade = current_app.config["FACADE"]
    return jsonify(facade.get_dashboard_data(**_view_args()))


def refresh():
    """Fetches a new snapshot and returns to the dashboard."""
    facade = current_app.config["FACADE"]
    if not facade.refresh():
        logger.warning("Manual refresh failed.")
    params = {
        key: value
        for key, value in (
            ("start_date", request.form.get("start_date")),
            ("end_date", request.form.get("end_date")),
        )
        if value
    }
    return redirect(url_for("index", **params))


def create_app(facade=None) -> Flask:
    """Creates the Flask app serving the given WasteDashboardFacade."""
    app = Flask(__name__)
    app.config["FACADE"] = facade
    app.add_template_filter(format_date, "utc_date")
    app.add_template_filter(format_time, "utc_time")
    app.add_template_filter(get_display_color, "category_color")

    app.add_url_rule("/", "index", index)
    app.add_url_rule("/api/summary", "summary", summary)
    app.add_url_rule("/refresh", "refresh", refresh, methods=["POST"])
    return app
