"""Codec event log lines."""

from __future__ import annotations

from textveil.util.logger import get_logger

logger = get_logger("events")


def log_codec_event(event: str, *, scheme: str, operation: str, **fields: object) -> None:
    """One INFO line per event; *fields* must never carry payload text."""
    extra = " ".join(f"{key}={fields[key]}" for key in sorted(fields))
    logger.info("event=%s scheme=%s operation=%s %s", event, scheme, operation, extra)
