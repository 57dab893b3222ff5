from __future__ import annotations

import logging
import os
from typing import Optional, Union

from pythonjsonlogger import jsonlogger

LOG_FORMAT_ENV = "SS58_VIEWER_LOG_FORMAT"
LOG_LEVEL_ENV = "SS58_VIEWER_LOG_LEVEL"
SERVICE_NAME = "ss58-viewer"

PLAIN_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"
JSON_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"

# Per-request chatter from the web stack; our own callback logs carry the
# table events.
NOISY_LOGGERS = ("werkzeug", "dash.dash")


class RegistryJsonFormatter(jsonlogger.JsonFormatter):
    """
    JSON formatter for viewer logs.

    Every record carries ``service`` and ``level`` keys so the lines can be
    told apart from other processes writing to the same collector. Values
    passed through ``extra=`` (trigger, page_index, prefix, ...) are merged
    in by the base class.
    """

    def add_fields(self, log_record, record, message_dict):
        super().add_fields(log_record, record, message_dict)
        log_record["service"] = SERVICE_NAME
        log_record["level"] = log_record.pop("levelname", record.levelname)
        log_record["logger"] = log_record.pop("name", record.name)


def resolve_level(level: Union[int, str, None]) -> int:
    """
    Turn a level name or number into a logging level.

    Unknown names fall back to INFO rather than failing at startup.
    """
    if level is None:
        return logging.INFO
    if isinstance(level, int):
        return level
    value = logging.getLevelName(str(level).strip().upper())
    return value if isinstance(value, int) else logging.INFO


def build_formatter(format_mode: str) -> logging.Formatter:
    if format_mode == "plain":
        return logging.Formatter(PLAIN_FORMAT)
    return RegistryJsonFormatter(JSON_FORMAT)


def configure_logging(
        level: Union[int, str, None] = None,
        force_format: Optional[str] = None,
) -> None:
    """
    Configure root logger for the viewer

    Format: force_format ("json" or "plain"), else env SS58_VIEWER_LOG_FORMAT,
    else "json".
    Level: the level argument, else env SS58_VIEWER_LOG_LEVEL, else INFO.

    The werkzeug request log and dash internals are held at WARNING unless
    the root level is DEBUG.
    """
    format_mode = (force_format or os.getenv(LOG_FORMAT_ENV, "json")).lower()
    if level is None:
        level = os.getenv(LOG_LEVEL_ENV)
    root_level = resolve_level(level)

    handler = logging.StreamHandler()
    handler.setFormatter(build_formatter(format_mode))

    root = logging.getLogger()
    root.setLevel(root_level)
    root.handlers.clear()
    root.addHandler(handler)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(
            logging.DEBUG if root_level <= logging.DEBUG else logging.WARNING
        )
