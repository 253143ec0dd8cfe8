"""Logging bootstrap for PetMeals."""

import logging
from typing import Optional

from app.config import Settings, settings as default_settings

LOGGER_PREFIX = "petmeals"


def configure_logging(settings: Optional[Settings] = None) -> None:
    """Apply the configured level and format to the root logger."""
    settings = settings or default_settings
    level = "DEBUG" if settings.debug else settings.log_level
    logging.basicConfig(
        level=getattr(logging, level.upper()), format=settings.log_format
    )


def get_logger(name: str) -> logging.Logger:
    """Return a logger namespaced under ``petmeals.``"""
    return logging.getLogger(f"{LOGGER_PREFIX}.{name}")
