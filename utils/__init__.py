# utils/__init__.py
# This file is part of Tabula - A Propositional Truth Table Engine
#
# Utility module exports

from .logger import (
    LogLevel,
    TabulaLogger,
    configure_logging,
    format_assignment,
    get_logger,
    set_log_level,
)

__all__ = [
    "LogLevel",
    "TabulaLogger",
    "configure_logging",
    "format_assignment",
    "get_logger",
    "set_log_level",
]
