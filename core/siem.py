"""SIEM-compatible audit logging for password evaluations.

Writes one JSON object per line, suitable for ingestion by SIEM platforms
like Splunk, ELK, or QRadar. Log rotation is handled by RotatingFileHandler
to prevent disk exhaustion.

Events never contain the evaluated password, only derived metadata
(length, scores, rating, match reason).
"""

import json
import logging
import os
from datetime import datetime
from logging.handlers import RotatingFileHandler
from threading import Lock
from typing import Optional

from core.config import SIEM_LOG_FILE, SIEM_LOG_MAX_BYTES, SIEM_LOG_BACKUP_COUNT
from core.storage import ensure_directories, file_exists


SIEM_LOGGER_NAME = "password_advisor.siem"

# Module-level state
_siem_logger: Optional[logging.Logger] = None
_config_lock = Lock()


def _get_siem_logger() -> logging.Logger:
    """Configure the rotating JSON-lines logger on first use."""
    global _siem_logger
    with _config_lock:
        if _siem_logger is None:
            ensure_directories(os.path.dirname(SIEM_LOG_FILE))

            handler = RotatingFileHandler(
                SIEM_LOG_FILE,
                maxBytes=SIEM_LOG_MAX_BYTES,
                backupCount=SIEM_LOG_BACKUP_COUNT,
                encoding="utf-8",
            )
            handler.setFormatter(logging.Formatter("%(message)s"))

            logger = logging.getLogger(SIEM_LOGGER_NAME)
            logger.setLevel(logging.INFO)
            logger.propagate = False
            logger.addHandler(handler)

            _siem_logger = logger
        return _siem_logger


def reset_siem_logging() -> None:
    """Close the SIEM log handler so the next event reopens SIEM_LOG_FILE."""
    global _siem_logger
    with _config_lock:
        if _siem_logger is None:
            return
        for handler in list(_siem_logger.handlers):
            _siem_logger.removeHandler(handler)
            handler.close()
        _siem_logger = None


def log_siem_event(
    event_type: str,
    status: str,
    source: str = "password_advisor",
    details: Optional[dict] = None
) -> None:
    """Log event in JSON format suitable for SIEM tools.

    Args:
        event_type: Type of event (e.g., 'password_evaluated', 'dictionary_loaded')
        status: Event status (e.g., 'WEAK', 'STRONG', 'DEGRADED')
        source: Component that produced the event ('cli', 'api', ...)
        details: Optional additional event details
    """
    event = {
        "timestamp": datetime.now().isoformat(),
        "event_type": event_type,
        "status": status,
        "source": source,
    }

    if details:
        event["details"] = details

    _get_siem_logger().info(json.dumps(event))


def get_siem_events(limit: int = 100) -> list[dict]:
    """Read and parse SIEM log events.

    Args:
        limit: Maximum number of events to return

    Returns:
        List of parsed event dictionaries, oldest first
    """
    if not file_exists(SIEM_LOG_FILE):
        return []

    events = []
    with open(SIEM_LOG_FILE, "r", encoding="utf-8") as f:
        for line in f:
            try:
                events.append(json.loads(line))
            except json.JSONDecodeError:
                continue

    return events[-limit:]


def count_events_by_status(event_type: Optional[str] = None) -> dict[str, int]:
    """Count SIEM events grouped by status.

    Args:
        event_type: Optional filter by event type

    Returns:
        Dictionary mapping status to count
    """
    events = get_siem_events(limit=10000)
    counts = {}

    for event in events:
        if event_type and event.get("event_type") != event_type:
            continue

        status = event.get("status", "UNKNOWN")
        counts[status] = counts.get(status, 0) + 1

    return counts
