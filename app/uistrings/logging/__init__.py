"""Structured logging.

Public API:
    - configure_logging(): Opt-in logging setup for applications
    - get_module_logger(): Get a lazy logger for the calling module

Example:
    from uistrings.logging import get_module_logger

    logger = get_module_logger()
    logger.info("module_initialized")
"""

from uistrings.logging.setup import configure_logging, get_module_logger

__all__ = [
    "configure_logging",
    "get_module_logger",
]
