"""Masking for codec payloads that reach log output."""

from __future__ import annotations

import re

_WHITESPACE_RE = re.compile(r"\s+")


def _visible_edges(length: int) -> tuple[int, int]:
    if length <= 4:
        return 1, 1
    head = 3 if length >= 10 else 2
    if head + 2 >= length:
        return 1, 1
    return head, 2


def mask_for_log(value: str | None, max_len: int | None = None) -> str:
    """Mask *value* down to its edges, optionally capped at *max_len* chars.

    Whitespace runs collapse to one space first. Values of 10+ chars keep 3
    leading and 2 trailing chars, shorter ones fewer; one char is always "*".
    """
    normalized = _WHITESPACE_RE.sub(" ", str(value or "")).strip()
    length = len(normalized)
    if length == 0:
        return ""
    if length == 1:
        masked = "*"
    else:
        head, tail = _visible_edges(length)
        masked = f"{normalized[:head]}{'*' * (length - head - tail)}{normalized[-tail:]}"
    if max_len is None or length <= max_len:
        return masked
    return f"{masked[:max_len]} ... [truncated, total {length} chars]"
