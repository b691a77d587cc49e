"""
Masked payload excerpts for DEBUG logs.

Callers pass plaintext or encoded payloads; only a masked, truncated excerpt is
written and only when DEBUG is enabled for the project logger.
"""

from __future__ import annotations

import logging

from textveil.config.settings import settings
from textveil.util.logger import logger
from textveil.util.masking import mask_for_log


def debug_log_payload(
    label: str,
    payload: str | None,
    *,
    reason: str | None = None,
    max_len: int | None = None,
) -> None:
    """
    label: e.g. "multiplicative.encode_failed"
    payload: text that reached the codec (masked before logging)
    reason: optional failure description
    """
    if not logger.isEnabledFor(logging.DEBUG):
        return
    limit = settings.log_excerpt_max_len if max_len is None else max_len
    excerpt = mask_for_log(payload, limit)
    if reason:
        logger.debug("%s payload_excerpt reason=%s excerpt=%s", label, reason, excerpt)
    else:
        logger.debug("%s payload_excerpt excerpt=%s", label, excerpt)
