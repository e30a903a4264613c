"""Logging setup for the service.

``setup_logging`` runs from the FastAPI lifespan. It installs one stream
handler on the root logger and is a no-op when a handler is already there,
so restarting the app inside one process does not duplicate lines.
"""

import json
import logging
from datetime import datetime, timezone
from typing import Iterable

# record attributes copied into the JSON line when a call passes them in ``extra``
CONTEXT_FIELDS = ("category_id", "user_id", "slug", "error_code", "skipped", "path")


def _json_value(val):
    if isinstance(val, (str, int, float, bool)):
        return val
    return str(val)


class JSONFormatter(logging.Formatter):
    def __init__(self, context_fields: Iterable[str] = CONTEXT_FIELDS):
        super().__init__()
        self.context_fields = tuple(context_fields)

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "ts": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        payload.update(
            (name, _json_value(getattr(record, name)))
            for name in self.context_fields
            if getattr(record, name, None) is not None
        )
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False)


def setup_logging(level: str = "INFO", fmt: str = "json") -> None:
    root = logging.getLogger()
    lvl = logging.getLevelName(level.upper())
    root.setLevel(lvl if isinstance(lvl, int) else logging.INFO)
    if root.handlers:
        return

    handler = logging.StreamHandler()
    handler.setFormatter(
        JSONFormatter() if fmt == "json"
        else logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
    )
    root.addHandler(handler)
