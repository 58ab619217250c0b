import logging
import sys
from typing import Any, Dict, Optional

import structlog

SENSITIVE_KEYS = {
    "api_key",
    "key",
    "credential",
    "token",
    "secret",
    "authorization",
    "password",
}

REDACTED = "***REDACTED***"


def filter_sensitive_data(_, __, event_dict: Dict[str, Any]) -> Dict[str, Any]:
    """Mask API keys and other credentials in log entries."""

    def _recursive_filter(obj: Any, depth: int = 0) -> Any:
        if depth > 10:
            return "***DEPTH_LIMIT***"

        if isinstance(obj, dict):
            filtered = {}
            for key, value in obj.items():
                key_lower = str(key).lower()
                if any(
                    sensitive == key_lower
                    or key_lower.endswith(f"_{sensitive}")
                    or key_lower.startswith(f"{sensitive}_")
                    for sensitive in SENSITIVE_KEYS
                ):
                    filtered[key] = REDACTED
                else:
                    filtered[key] = _recursive_filter(value, depth + 1)
            return filtered
        elif isinstance(obj, list):
            return [_recursive_filter(item, depth + 1) for item in obj]
        return obj

    return _recursive_filter(event_dict)


def setup_logging(log_level: str = "INFO", json_logs: bool = False) -> None:
    """Configure structured logging for applications embedding the client.

    The library never calls this itself; without it structlog's defaults apply.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_logs: Use JSON format for logs
    """
    level = getattr(logging, log_level.upper())

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)

    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        filter_sensitive_data,
    ]

    if json_logs:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        handlers=[handler],
        level=level,
        force=True,
    )

    # httpx logs every request line at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


def get_logger(name: Optional[str] = None) -> structlog.stdlib.BoundLogger:
    """Get a configured logger instance."""
    return structlog.get_logger(name)
