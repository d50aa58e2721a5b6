import json
import logging
import os
import sys
from datetime import UTC, datetime
from typing import Any

PACKAGE_LOGGER = "path_search"
LOG_LEVEL_ENV = "PATH_SEARCH_LOG_LEVEL"
LOG_JSON_ENV = "PATH_SEARCH_LOG_JSON"

# Scan context attached by callers through `extra=`
CONTEXT_FIELDS = ("project_path", "query")


class JSONFormatter(logging.Formatter):
    """JSON log formatter for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON."""
        log_data: dict[str, Any] = {
            "timestamp": datetime.now(UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        # Add scan context if present
        for field in CONTEXT_FIELDS:
            if hasattr(record, field):
                log_data[field] = getattr(record, field)

        # Add exception info if present
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        # Source location only for debug
        if record.levelno <= logging.DEBUG:
            log_data["source"] = {
                "file": record.pathname,
                "line": record.lineno,
                "function": record.funcName,
            }

        return json.dumps(log_data, ensure_ascii=False)


class ConsoleFormatter(logging.Formatter):
    """Human-readable console formatter with colors."""

    COLORS = {
        "DEBUG": "\033[36m",  # Cyan
        "INFO": "\033[32m",  # Green
        "WARNING": "\033[33m",  # Yellow
        "ERROR": "\033[31m",  # Red
        "CRITICAL": "\033[35m",  # Magenta
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        """Format log record with colors, followed by any traceback."""
        color = self.COLORS.get(record.levelname, "")
        timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")

        message = (
            f"{color}{timestamp} [{record.levelname:8}]{self.RESET} "
            f"{record.name}: {record.getMessage()}"
        )
        query = getattr(record, "query", None)
        if query:
            message += f" (query={query!r})"
        if record.exc_info:
            message += "\n" + self.formatException(record.exc_info)
        return message


_configured = False


def configure_logging() -> None:
    """Configure logging based on environment variables.

    Logs always go to stderr; stdout is reserved for JSON responses.

    Environment Variables:
        PATH_SEARCH_LOG_LEVEL: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        PATH_SEARCH_LOG_JSON: Set to 'true' for JSON format
    """
    global _configured
    if _configured:
        return

    # Read configuration from environment
    log_level_str = os.environ.get(LOG_LEVEL_ENV, "INFO").upper()
    use_json = os.environ.get(LOG_JSON_ENV, "false").lower() == "true"

    # Unknown names fall back to INFO
    log_level = getattr(logging, log_level_str, logging.INFO)

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(log_level)

    # Drop handlers from a previous configuration
    package_logger.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(log_level)

    if use_json:
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(ConsoleFormatter())

    package_logger.addHandler(handler)

    # Keep scan logs out of the root logger
    package_logger.propagate = False

    _configured = True


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured logger instance
    """
    # Auto-configure on first use
    configure_logging()

    return logging.getLogger(name)
