"""
App package - Application configuration and logging setup.
"""

from app.config import settings, Settings, Environment
from app.logging_config import configure_logging, get_logger

__all__ = [
    "settings",
    "Settings",
    "Environment",
    "configure_logging",
    "get_logger",
]
