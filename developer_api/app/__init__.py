"""
Application package initializer.

The service is split into ``core`` (settings, logging, database),
``services`` (persistence), ``schemas`` (JSON representations) and
``api`` (versioned routers).
"""

from .main import app, create_app  # noqa: F401
