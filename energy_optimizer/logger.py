"""Logging helpers for the battery runtime optimizer."""

import logging

PACKAGE_LOGGER_NAME = "energy_optimizer"


def get_logger(name=None):
    """Get the package logger or a namespaced child logger."""
    if name is None:
        name = PACKAGE_LOGGER_NAME
    elif not name.startswith(PACKAGE_LOGGER_NAME):
        name = f"{PACKAGE_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def log_debug(msg, *args, **kwargs):
    """Log a debug message."""
    get_logger().debug(msg, *args, **kwargs)


def log_info(msg, *args, **kwargs):
    """Log an info message."""
    get_logger().info(msg, *args, **kwargs)
