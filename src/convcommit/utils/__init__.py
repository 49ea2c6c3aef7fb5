"""Shared helpers for convcommit."""

from convcommit.utils.logger import PACKAGE_LOGGER, get_logger

__all__ = [
    "PACKAGE_LOGGER",
    "get_logger",
]
