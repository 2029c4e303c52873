"""
This module contains configuration settings for the application.
"""
import os
import logging

# Firebase Realtime Database holding the waste logs
FIREBASE_DATABASE_URL = os.environ.get(
    "FIREBASE_DATABASE_URL",
    "https://smart-waste-management-f008e-default-rtdb.firebaseio.com",
)
WASTE_LOGS_PATH = os.environ.get("WASTE_LOGS_PATH", "waste_logs")

# HTTP timeout for snapshot downloads
REQUEST_TIMEOUT_SECONDS = int(os.environ.get("REQUEST_TIMEOUT_SECONDS", 10))

# Snapshot refresh interval in seconds
REFRESH_INTERVAL_SECONDS = int(os.environ.get("REFRESH_INTERVAL_SECONDS", 30))

# Rows shown per page in the recent activity table
ITEMS_PER_PAGE = int(os.environ.get("ITEMS_PER_PAGE", 10))

# Logging
LOG_LEVEL = getattr(logging, os.environ.get("LOG_LEVEL", "INFO").upper(), logging.INFO)
RECENT_LOG_CAPACITY = int(os.environ.get("RECENT_LOG_CAPACITY", 100))

# Dashboard server
DASHBOARD_HOST = os.environ.get("DASHBOARD_HOST", "0.0.0.0")
DASHBOARD_PORT = int(os.environ.get("DASHBOARD_PORT", 8080))
