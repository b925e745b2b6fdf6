"""Logging configuration.

Configures the root logger once at startup from ``settings.log_level`` and
``settings.log_format``. Modules log through ``logging.getLogger(__name__)``.
"""

import json
import logging
import sys
from datetime import datetime, timezone

from app.core.config import LogFormatEnum, LogLevelEnum


class JsonFormatter(logging.Formatter):
    """Render each record as a single JSON object."""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


def setup_logging(
    level: LogLevelEnum | str = LogLevelEnum.INFO,
    fmt: LogFormatEnum | str = LogFormatEnum.simple,
) -> None:
    """Install a single stderr handler on the root logger.

    Calling it again replaces the previous handler instead of stacking a
    second one.
    """
    level_name = level.value if isinstance(level, LogLevelEnum) else str(level).upper()
    fmt_name = fmt.value if isinstance(fmt, LogFormatEnum) else str(fmt)

    root = logging.getLogger()
    root.setLevel(level_name)

    for handler in list(root.handlers):
        if getattr(handler, "_todo_api_handler", False):
            root.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler._todo_api_handler = True
    if fmt_name == LogFormatEnum.json.value:
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(
            logging.Formatter(
                fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
    root.addHandler(handler)
