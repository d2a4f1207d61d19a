"""Root logger setup for the verification service.

Plain text lines by default; JSON lines when LABELVERIFY_LOG_JSON is set.
Verification log calls attach the beverage category and disposition through
``extra=``, and the JSON formatter lifts them into top-level keys.
"""

import json
import logging
from datetime import datetime, timezone

# LogRecord attributes set via extra= that are copied into JSON output.
CONTEXT_FIELDS = ("category", "overall_status")


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "ts": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for field in CONTEXT_FIELDS:
            value = getattr(record, field, None)
            if value is not None:
                payload[field] = value
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False)


def setup_logging(level: str = "INFO", json_output: bool = False) -> None:
    """Replace any root handlers with a single stderr handler."""
    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(level)

    handler = logging.StreamHandler()
    if json_output:
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s [%(name)s] %(message)s"))
    root.addHandler(handler)
