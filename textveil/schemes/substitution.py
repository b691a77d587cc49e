"""Substitution-mapping codec.

Character codes are joined with ``DELIMITER`` and every digit and the delimiter
are then swapped through ``SUBSTITUTION_TABLE``.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from textveil.core.errors import ConversionError
from textveil.schemes.base import BaseCodec, ascii_int

DELIMITER = "ɯ"  # Latin small letter turned m
SENTINEL = "NULVAL"


def invert_table(table: Mapping[str, str]) -> Mapping[str, str]:
    inverse = {target: source for source, target in table.items()}
    if len(inverse) != len(table):
        raise ValueError("substitution table is not one-to-one")
    return MappingProxyType(inverse)


SUBSTITUTION_TABLE: Mapping[str, str] = MappingProxyType(
    {
        "0": "A",
        "1": "B",
        "2": "C",
        "3": "D",
        "4": "E",
        "5": "F",
        "6": "G",
        "7": "H",
        "8": "I",
        "9": "J",
        DELIMITER: "R",
    }
)
INVERSE_TABLE: Mapping[str, str] = invert_table(SUBSTITUTION_TABLE)


def _translate(text: str, table: Mapping[str, str]) -> str:
    return "".join(table.get(ch, ch) for ch in text)


def substitute(text: str) -> str:
    """Map digits and the delimiter to their cover letters; leave the rest."""
    return _translate(text, SUBSTITUTION_TABLE)


def reverse_substitute(text: str) -> str:
    return _translate(text, INVERSE_TABLE)


class SubstitutionCodec(BaseCodec):
    name = "substitution"
    delimiter = DELIMITER
    sentinel = SENTINEL

    def serialize(self, text: str) -> str:
        try:
            return self.delimiter.join(str(self._code_point(ch)) for ch in text)
        except ValueError as exc:
            raise ConversionError.wrap(exc) from exc

    def deserialize(self, serialized: str) -> str:
        try:
            return "".join(self._char(ascii_int(segment)) for segment in serialized.split(self.delimiter))
        except (ValueError, OverflowError) as exc:
            raise ConversionError.wrap(exc) from exc

    def _encode(self, text: str) -> str:
        return substitute(self.serialize(text))

    def _decode(self, text: str) -> str:
        return self.deserialize(reverse_substitute(text))
