"""Mini README: Interactive interfaces for the finance tracker.

Exports the FastAPI application factory serving the JSON API consumed by
the browser dashboard.
"""

from .web_app import create_application

__all__ = ["create_application"]
