"""
logger.py

Centralized logging configuration for the Weather Agent.

Provides structured logging with:
- Console output for development
- File output for debugging (can be switched off with LOG_TO_FILE=false)
- Configurable log levels (LOG_LEVEL)
- Separate loggers for the agent core, the CLI and the chat page
- Rotation support for file logs
"""

import logging
import os
import sys
from pathlib import Path
from typing import Optional
from logging.handlers import RotatingFileHandler


# ANSI color codes for console output
class LogColors:
    """ANSI color codes for prettier console logs"""
    RESET = "\033[0m"
    RED = "\033[31m"
    YELLOW = "\033[33m"
    BLUE = "\033[34m"
    CYAN = "\033[36m"
    GRAY = "\033[90m"
    BOLD = "\033[1m"


class ColoredFormatter(logging.Formatter):
    """Custom formatter with colors for different log levels"""

    COLORS = {
        logging.DEBUG: LogColors.GRAY,
        logging.INFO: LogColors.CYAN,
        logging.WARNING: LogColors.YELLOW,
        logging.ERROR: LogColors.RED,
        logging.CRITICAL: LogColors.RED + LogColors.BOLD,
    }

    def format(self, record):
        # Color a copy so the file handler still sees plain names
        record = logging.makeLogRecord(record.__dict__)
        color = self.COLORS.get(record.levelno, LogColors.RESET)
        record.levelname = f"{color}{record.levelname}{LogColors.RESET}"
        record.name = f"{LogColors.BLUE}{record.name}{LogColors.RESET}"

        return super().format(record)


def setup_logger(
    name: str,
    level: str = "INFO",
    log_file: Optional[str] = None,
    console_output: bool = True,
    max_bytes: int = 10 * 1024 * 1024,  # 10 MB
    backup_count: int = 5
) -> logging.Logger:
    """
    Setup a logger with console and optional file handlers.

    Args:
        name: Logger name (usually module name)
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional file path for file logging
        console_output: Whether to output to console
        max_bytes: Maximum log file size before rotation
        backup_count: Number of backup files to keep

    Returns:
        Configured logger instance

    Example:
        >>> from utils.logger import setup_logger
        >>> logger = setup_logger("my_module", level="DEBUG", log_file="logs/my_module.log")
        >>> logger.info("Application started")
    """
    logger = logging.getLogger(name)

    # Avoid adding handlers multiple times
    if logger.handlers:
        return logger

    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    logger.propagate = False

    # Console handler with colors; stderr keeps CLI answers on stdout clean
    if console_output:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(logging.WARNING)

        console_formatter = ColoredFormatter(
            fmt='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%H:%M:%S'
        )
        console_handler.setFormatter(console_formatter)
        logger.addHandler(console_handler)

    # File handler with rotation (if specified)
    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding='utf-8'
        )
        file_handler.setLevel(logging.DEBUG)

        file_formatter = logging.Formatter(
            fmt='%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        file_handler.setFormatter(file_formatter)
        logger.addHandler(file_handler)

    return logger


def _log_file(file_name: str) -> Optional[str]:
    """Resolve a log file path under LOG_DIR, or None when file logging is off."""
    if os.getenv("LOG_TO_FILE", "true").lower() != "true":
        return None
    return str(Path(os.getenv("LOG_DIR", "logs")) / file_name)


LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# Router, matcher, extractor, collaborators
agent_logger = setup_logger(
    "weather_agent",
    level=LOG_LEVEL,
    log_file=_log_file("agent.log")
)

# Command-line entry point
cli_logger = setup_logger(
    "cli",
    level=LOG_LEVEL,
    log_file=_log_file("cli.log")
)

# Streamlit chat page
app_logger = setup_logger(
    "app",
    level=LOG_LEVEL,
    log_file=_log_file("app.log")
)


def log_performance(logger: logging.Logger, operation: str, duration_ms: float):
    """
    Log performance metrics.

    Args:
        logger: Logger instance to use
        operation: Name of the operation
        duration_ms: Duration in milliseconds

    Example:
        >>> import time
        >>> start = time.time()
        >>> # ... do work
        >>> log_performance(logger, "bedrock_invoke", (time.time() - start) * 1000)
    """
    logger.info(f"Performance: {operation} completed in {duration_ms:.2f}ms")


# Export commonly used loggers
__all__ = [
    'setup_logger',
    'agent_logger',
    'cli_logger',
    'app_logger',
    'log_performance',
]
