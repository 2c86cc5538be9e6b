"""App logic package.

Business logic layer for Streamlit application.
Pure Python - no Streamlit UI calls.
"""

__all__ = ["data_loader", "search", "result"]
