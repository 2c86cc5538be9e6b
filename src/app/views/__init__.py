"""App views package.

UI rendering layer for Streamlit application.
Pure rendering - no business logic or lookups.
"""

__all__ = ["common", "search", "result"]
