"""Logger helper that keeps every calcscan logger under one namespace."""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Return a standard library logger prefixed with "calcscan.".

    Example:
        >>> get_logger("scanner").name
        'calcscan.scanner'
        >>> get_logger("calcscan.cli").name
        'calcscan.cli'
    """
    if not (name == "calcscan" or name.startswith("calcscan.")):
        name = f"calcscan.{name}"
    return logging.getLogger(name)
