"""
Event logger sinks. Services only see the ``EventLogger`` protocol.
"""

import json
import logging
import threading
from datetime import datetime, timezone
from decimal import Decimal
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Tuple
from uuid import UUID


def make_serializable(obj):
    """Convert objects to JSON-serializable format"""
    if isinstance(obj, (Decimal, UUID)):
        return str(obj)
    elif isinstance(obj, datetime):
        return obj.isoformat()
    elif isinstance(obj, Enum):
        return obj.value
    elif isinstance(obj, dict):
        return {k: make_serializable(v) for k, v in obj.items()}
    elif isinstance(obj, (list, tuple)):
        return [make_serializable(item) for item in obj]
    return obj


class StandardEventLogger:
    """Writes events through the stdlib logging module as ``event key=value`` lines"""

    def __init__(self, logger_name: str = "solidshop.events", level: int = logging.INFO):
        self.logger = logging.getLogger(logger_name)
        self.level = level

    def log(self, event: str, **fields: Any) -> None:
        parts = " ".join(f"{k}={make_serializable(v)}" for k, v in fields.items())
        self.logger.log(self.level, f"{event} {parts}".rstrip())


class JsonLinesEventLogger:
    """Appends one JSON object per event to a file"""

    def __init__(self, path):
        self.path = Path(path)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self._lock = threading.Lock()

    def log(self, event: str, **fields: Any) -> None:
        record = {
            "event": event,
            "at": datetime.now(timezone.utc).isoformat(),
            "fields": make_serializable(fields),
        }
        line = json.dumps(record, sort_keys=True)
        with self._lock:
            with self.path.open("a", encoding="utf-8") as fh:
                fh.write(line + "\n")


class MemoryEventLogger:
    """Keeps events in a list; handy for tests and the memory configuration"""

    def __init__(self):
        self.events: List[Tuple[str, Dict[str, Any]]] = []

    def log(self, event: str, **fields: Any) -> None:
        self.events.append((event, dict(fields)))

    def names(self) -> List[str]:
        return [name for name, _ in self.events]
