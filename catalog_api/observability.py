"""Logging setup for the catalogue API.

Production runs emit one JSON object per line; local runs can ask for
plain text with ``CATALOG_LOG_FORMAT=text``. The handler is installed
on the root logger under a fixed name and reused, so building several
applications in one process never duplicates output.
"""

import json
import logging
from datetime import datetime, timezone

HANDLER_NAME = "catalog_api"
TEXT_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

# LogRecord attributes copied into the JSON line when a call passes them via ``extra``
CONTEXT_KEYS = ("category_id", "slug", "error_code", "path")


class JSONFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        created = datetime.fromtimestamp(record.created, tz=timezone.utc)
        payload = dict(
            timestamp=created.isoformat(),
            level=record.levelname,
            logger=record.name,
            message=record.getMessage(),
        )
        payload.update(
            (key, getattr(record, key))
            for key in CONTEXT_KEYS
            if getattr(record, key, None) is not None
        )
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False, default=str)


def _find_handler() -> logging.Handler:
    for handler in logging.root.handlers:
        if handler.get_name() == HANDLER_NAME:
            return handler
    handler = logging.StreamHandler()
    handler.set_name(HANDLER_NAME)
    logging.root.addHandler(handler)
    return handler


def setup_logging(level: str = "INFO", fmt: str = "json") -> None:
    """Point the root logger at the catalogue handler and set its level.

    Calling it again only swaps the formatter and level.
    """
    handler = _find_handler()
    handler.setFormatter(JSONFormatter() if fmt == "json" else logging.Formatter(TEXT_FORMAT))
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
