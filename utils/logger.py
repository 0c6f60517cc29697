# utils/logger.py
# This file is part of Tabula - A Propositional Truth Table Engine
#
# Logging utility for truth-table analysis with configurable levels

import logging
import sys
from enum import Enum
from typing import Iterable, Mapping, Optional


class LogLevel(Enum):
    """Log levels for truth-table analysis."""

    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR


def format_assignment(assignment: Mapping[str, bool]) -> str:
    """Render an assignment as ``{a: true, b: false}`` in key order."""
    pairs = ", ".join(
        f"{name}: {'true' if value else 'false'}" for name, value in assignment.items()
    )
    return f"{{{pairs}}}"


class TabulaLogger:
    """Centralized logger for truth-table analysis with structured output."""

    def __init__(self, name: str = "tabula", level: LogLevel = LogLevel.INFO):
        """Initialize the Tabula logger.

        Args:
            name: Logger name
            level: Default logging level
        """
        self.logger = logging.getLogger(name)
        self.logger.setLevel(level.value)

        # Remove existing handlers to avoid duplicates
        self.logger.handlers.clear()

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(level.value)
        console_handler.setFormatter(TabulaFormatter())

        self.logger.addHandler(console_handler)

        # Prevent propagation to root logger
        self.logger.propagate = False

    def set_level(self, level: LogLevel):
        """Change the logging level."""
        self.logger.setLevel(level.value)
        for handler in self.logger.handlers:
            handler.setLevel(level.value)

    # Core logging methods
    def debug(self, message: str, **kwargs):
        """Log debug message (detailed internal state)."""
        self.logger.debug(message, **kwargs)

    def info(self, message: str, **kwargs):
        """Log info message (results and progress)."""
        self.logger.info(message, **kwargs)

    def warning(self, message: str, **kwargs):
        """Log warning message (unexpected but recoverable)."""
        self.logger.warning(message, **kwargs)

    def error(self, message: str, **kwargs):
        """Log error message (serious problems)."""
        self.logger.error(message, **kwargs)

    # Specialized methods for truth-table reporting
    def formula_loaded(self, formula_text: str):
        """Log the formula under analysis."""
        self.info(f"Formula: {formula_text}")

    def tokens_listed(self, tokens: Iterable):
        """Log the token stream produced by the lexer."""
        rendered = " ".join(
            f"{token.type}({token.value})" if token.value else token.type
            for token in tokens
        )
        self.info(f"Tokens: {rendered}")

    def ast_built(self, ast_repr: str, ast_text: str):
        """Log the parsed tree and its canonical formula text."""
        self.info(f"AST: {ast_repr}")
        self.info(f"Canonical form: {ast_text}")

    def variables_listed(self, variables: Iterable[str]):
        """Log the sorted variable list."""
        self.info(f"Variables: [{', '.join(variables)}]")

    def assignment_bucket(self, title: str, assignments: Iterable[Mapping[str, bool]]):
        """Log one classification bucket, one assignment per line."""
        assignments = list(assignments)
        self.info(f"{title} ({len(assignments)}):")
        if not assignments:
            self.info("  (none)")
        for assignment in assignments:
            self.info(f"  {format_assignment(assignment)}")

    def truth_table_row(self, assignment: Mapping[str, bool], value: bool):
        """Log one truth-table row."""
        self.info(f"  {format_assignment(assignment)} -> {'true' if value else 'false'}")

    def classification_summary(self, verdict: str, satisfying: int, total: int):
        """Log the satisfiability verdict."""
        self.info(f"\n>>> {verdict}: {satisfying} of {total} assignments satisfy the formula <<<")


class TabulaFormatter(logging.Formatter):
    """Custom formatter for Tabula logging with clean output."""

    def format(self, record):
        # For INFO level and above, show message only (clean output)
        if record.levelno >= logging.INFO:
            return record.getMessage()

        if record.levelno == logging.DEBUG:
            return f"[DEBUG] {record.getMessage()}"

        return f"[{record.levelname}] {record.getMessage()}"


# Global logger instance
_global_logger: Optional[TabulaLogger] = None


def get_logger(name: str = "tabula") -> TabulaLogger:
    """Get or create the global Tabula logger instance.

    Args:
        name: Logger name (default: "tabula")

    Returns:
        TabulaLogger instance
    """
    global _global_logger
    if _global_logger is None:
        _global_logger = TabulaLogger(name)
    return _global_logger


def set_log_level(level: LogLevel):
    """Set the global log level.

    Args:
        level: New log level
    """
    get_logger().set_level(level)


def configure_logging(debug: bool = False, quiet: bool = False):
    """Configure logging based on command line flags.

    Results are reported at INFO, so only ``quiet`` hides them.

    Args:
        debug: Enable debug output
        quiet: Report warnings and errors only (ignored when debug is set)
    """
    if debug:
        set_log_level(LogLevel.DEBUG)
    elif quiet:
        set_log_level(LogLevel.WARNING)
    else:
        set_log_level(LogLevel.INFO)
