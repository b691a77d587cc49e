"""Base codec contract."""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from typing import Callable

from textveil.config.settings import settings
from textveil.core.errors import CodecError, EmptyInputError
from textveil.core.models import CodecResult
from textveil.observability.logging import log_codec_event
from textveil.util.debug_excerpt import debug_log_payload

# str.isdigit/int() also accept non-ASCII decimal digits (e.g. NKo, Arabic-Indic)
ASCII_DIGITS_RE = re.compile(r"[0-9]+")


def is_blank(text: str | None) -> bool:
    """True for None or text made only of U+0000..U+0020.

    U+00A0, U+3000 and other Unicode spaces are content, unlike str.strip().
    """
    return text is None or all(ord(ch) <= 0x20 for ch in text)


def ascii_digit(ch: str) -> int:
    if len(ch) != 1 or not ASCII_DIGITS_RE.fullmatch(ch):
        raise ValueError(f"not an ASCII decimal digit: {ch!r}")
    return ord(ch) - ord("0")


def ascii_int(segment: str) -> int:
    if not ASCII_DIGITS_RE.fullmatch(segment):
        raise ValueError(f"invalid decimal literal: {segment!r}")
    return int(segment)


class BaseCodec(ABC):
    name = "base"
    delimiter = ""
    sentinel = ""

    def __init__(self, max_code_point: int | None = None) -> None:
        self.max_code_point = settings.max_code_point if max_code_point is None else max_code_point

    def encode(self, text: str | None) -> CodecResult:
        return self._run("encode", self._encode, text)

    def decode(self, text: str | None) -> CodecResult:
        return self._run("decode", self._decode, text)

    @abstractmethod
    def _encode(self, text: str) -> str:
        raise NotImplementedError

    @abstractmethod
    def _decode(self, text: str) -> str:
        raise NotImplementedError

    def _run(self, operation: str, step: Callable[[str], str], text: str | None) -> CodecResult:
        try:
            if is_blank(text):
                raise EmptyInputError("input is empty or blank")
            value = step(text)  # type: ignore[arg-type]
        except CodecError as exc:
            log_codec_event(
                "codec_failure",
                scheme=self.name,
                operation=operation,
                kind=exc.kind.value,
                code=exc.code,
            )
            debug_log_payload(f"{self.name}.{operation}_failed", text, reason=exc.kind.value)
            return CodecResult.failure(exc, scheme=self.name, operation=operation, sentinel=self.sentinel)
        return CodecResult.success(value, scheme=self.name, operation=operation, sentinel=self.sentinel)

    def _code_point(self, ch: str) -> int:
        code = ord(ch)
        if code > self.max_code_point:
            raise ValueError(f"code point U+{code:04X} exceeds limit U+{self.max_code_point:04X}")
        return code

    def _char(self, code: int) -> str:
        if code < 0 or code > self.max_code_point:
            raise ValueError(f"code {code} outside 0..{self.max_code_point}")
        return chr(code)
