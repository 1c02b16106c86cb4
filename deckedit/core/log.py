"""Application-wide logging helpers.

``setup_logging()``  configures a :class:`RotatingFileHandler` sized from
config and, optionally, a stderr handler for interactive runs.

``safe_print(msg, level)``  emits a log entry at the requested level.

``StructuredFormatter`` outputs JSON log lines for machine-readable logs.

``session_context`` / ``timed`` tag every line of one edit run with a
session id and measure each edit step.
"""

from __future__ import annotations

import contextlib
import json
import logging
import sys
import time
import uuid
from collections.abc import Generator
from logging.handlers import RotatingFileHandler
from typing import Any

from deckedit.config import get_settings

# Module-level session id; edits are single-threaded
_session_id: str = ""

_PLAIN_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


# ── Structured JSON Formatter ───────────────────────────────────────────


class StructuredFormatter(logging.Formatter):
    """Emit each log record as a single JSON line.

    Fields: timestamp, level, logger, message, session_id, and any extras
    passed via the ``extra`` kwarg on the logging call.
    """

    def format(self, record: logging.LogRecord) -> str:
        log_entry: dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if _session_id:
            log_entry["session_id"] = _session_id

        # Merge any extras the caller attached
        for key in ("duration_ms", "step", "page", "path", "error"):
            val = getattr(record, key, None)
            if val is not None:
                log_entry[key] = val

        if record.exc_info and record.exc_info[1]:
            log_entry["exception"] = str(record.exc_info[1])

        return json.dumps(log_entry, ensure_ascii=False, default=str)


# ── Setup ───────────────────────────────────────────────────────────────


def setup_logging(*, json_format: bool | None = None, console: bool = False) -> None:
    """Initialise the root logger with a rotating file handler.

    Args:
        json_format: Use StructuredFormatter (JSON lines) when True, the
                     classic human-readable format when False.  ``None``
                     defers to ``settings.log_json``.
        console: Also mirror records to stderr in the plain format.
    """
    settings = get_settings()
    if json_format is None:
        json_format = settings.log_json

    root = logging.getLogger()
    for h in root.handlers[:]:
        root.removeHandler(h)

    handler = RotatingFileHandler(
        settings.log_file,
        mode="a",
        encoding="utf-8",
        maxBytes=settings.log_max_bytes,
        backupCount=settings.log_backup_count,
    )

    if json_format:
        handler.setFormatter(StructuredFormatter())
    else:
        handler.setFormatter(logging.Formatter(_PLAIN_FORMAT))
    root.addHandler(handler)

    if console:
        stream = logging.StreamHandler(sys.stderr)
        stream.setFormatter(logging.Formatter(_PLAIN_FORMAT))
        root.addHandler(stream)

    root.setLevel(settings.log_level)


def safe_print(text: str, level: int = logging.INFO) -> None:
    """Emit *text* through the logging system (or fallback to print)."""
    if logging.getLogger().handlers:
        logging.getLogger("deckedit").log(level, text)
    else:
        print(text)


# ── Session helpers ─────────────────────────────────────────────────────


def set_session_id(sid: str | None = None) -> str:
    """Set the correlation ID for the current edit session.  Returns the ID."""
    global _session_id
    _session_id = sid or uuid.uuid4().hex[:12]
    return _session_id


def get_session_id() -> str:
    """Return the current session ID (empty if unset)."""
    return _session_id


def clear_session_id() -> None:
    global _session_id
    _session_id = ""


@contextlib.contextmanager
def session_context(sid: str | None = None) -> Generator[str, None, None]:
    """Context manager that sets and clears an edit-session ID.

    Usage::

        with session_context() as sid:
            safe_print(f"Editing {path}")
            # all log lines within will include session_id
    """
    token = set_session_id(sid)
    try:
        yield token
    finally:
        clear_session_id()


@contextlib.contextmanager
def timed(operation: str, **extra: Any) -> Generator[None, None, None]:
    """Context manager that logs the duration of an operation.

    Usage::

        with timed("embed_image", page=1):
            embed_image(prs, 1, image, box)

    Emits an INFO log with ``duration_ms`` at the end, or an ERROR log
    if the block raises (the exception is re-raised).
    """
    logger = logging.getLogger("deckedit.timing")
    start = time.perf_counter()
    safe_print(f"[START] {operation}", logging.DEBUG)
    try:
        yield
    except Exception as exc:
        elapsed = (time.perf_counter() - start) * 1000
        logger.error(
            f"[FAILED] {operation} after {elapsed:.0f}ms",
            extra={"duration_ms": round(elapsed), "step": operation, "error": repr(exc), **extra},
        )
        raise
    else:
        elapsed = (time.perf_counter() - start) * 1000
        logger.info(
            f"[DONE] {operation} in {elapsed:.0f}ms",
            extra={"duration_ms": round(elapsed), "step": operation, **extra},
        )
