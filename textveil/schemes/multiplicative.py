"""Multiplicative key-embedding codec.

Every character code is multiplied by a random two-digit key and the products
are joined with ``DELIMITER``. The key itself is spliced into the result at the
index named by the last digit of the product string (the check digit).

When the check digit is not smaller than the product string's length the key is
never inserted, and decoding that output fails or yields other text.
"""

from __future__ import annotations

import secrets
from typing import Callable

from textveil.core.errors import KeyExtractionError, KeyMixError, RecoveryError, SerializationError
from textveil.schemes.base import BaseCodec, ascii_digit, ascii_int
from textveil.util.logger import get_logger

logger = get_logger("schemes.multiplicative")

DELIMITER = "߀"  # NKo digit zero; int() accepts it, ascii_int() does not
SENTINEL = "NullValue"
KEY_MIN = 10
KEY_MAX = 99


def draw_key() -> int:
    return KEY_MIN + secrets.randbelow(KEY_MAX - KEY_MIN + 1)


class MultiplicativeCodec(BaseCodec):
    name = "multiplicative"
    delimiter = DELIMITER
    sentinel = SENTINEL

    def __init__(
        self,
        key_source: Callable[[], int] | None = None,
        max_code_point: int | None = None,
    ) -> None:
        super().__init__(max_code_point=max_code_point)
        self._key_source = key_source or draw_key

    def product_sequence(self, text: str, key: int) -> str:
        try:
            return self.delimiter.join(str(self._code_point(ch) * key) for ch in text)
        except (ValueError, OverflowError) as exc:
            raise SerializationError.wrap(exc) from exc

    @staticmethod
    def check_digit(value: str) -> int:
        return ascii_digit(value[-1])

    def embed_key(self, product: str, key: int) -> str:
        try:
            if not KEY_MIN <= key <= KEY_MAX:
                raise ValueError(f"key {key} outside {KEY_MIN}..{KEY_MAX}")
            position = self.check_digit(product)
        except (ValueError, IndexError) as exc:
            raise KeyMixError.wrap(exc) from exc
        if position >= len(product):
            logger.debug("check digit %d beyond product length %d, key not embedded", position, len(product))
            return product
        return f"{product[:position]}{key}{product[position:]}"

    def extract_key(self, encoded: str) -> tuple[str, str]:
        """Split *encoded* into ``(key_digits, residual_products)``."""
        try:
            position = self.check_digit(encoded)
        except (ValueError, IndexError) as exc:
            raise KeyExtractionError.wrap(exc) from exc
        if position + 2 > len(encoded):
            raise KeyExtractionError(
                f"key digits expected at {position}..{position + 1}, input has {len(encoded)} chars"
            )
        return encoded[position:position + 2], encoded[:position] + encoded[position + 2:]

    def recover(self, residual: str, key_digits: str) -> str:
        try:
            key = ascii_int(key_digits)
            chars: list[str] = []
            for segment in residual.split(self.delimiter):
                if not segment:
                    continue
                chars.append(self._char(ascii_int(segment) // key))
        except (ValueError, ZeroDivisionError, OverflowError) as exc:
            raise RecoveryError.wrap(exc) from exc
        return "".join(chars)

    def _encode(self, text: str) -> str:
        key = self._key_source()
        return self.embed_key(self.product_sequence(text, key), key)

    def _decode(self, text: str) -> str:
        key_digits, residual = self.extract_key(text)
        return self.recover(residual, key_digits)
