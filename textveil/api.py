"""Function-level entry points, one pair per scheme."""

from __future__ import annotations

from textveil.core.models import CodecResult
from textveil.schemes.multiplicative import MultiplicativeCodec
from textveil.schemes.substitution import SubstitutionCodec


def encode_a(text: str | None) -> CodecResult:
    return MultiplicativeCodec().encode(text)


def decode_a(text: str | None) -> CodecResult:
    return MultiplicativeCodec().decode(text)


def encode_b(text: str | None) -> CodecResult:
    return SubstitutionCodec().encode(text)


def decode_b(text: str | None) -> CodecResult:
    return SubstitutionCodec().decode(text)
