"""Logging helpers."""

from __future__ import annotations

import logging

LOGGER_NAME = "oblien_search"


def get_logger() -> logging.Logger:
    """Return the module logger used across the package."""
    return logging.getLogger(LOGGER_NAME)
