"""
This module defines custom exceptions for the waste log dashboard.
"""


class DataSourceError(Exception):
    """Custom exception for errors while fetching a waste log snapshot."""

    pass
