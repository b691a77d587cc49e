"""Reversible text obfuscation codecs."""

from textveil.api import decode_a, decode_b, encode_a, encode_b
from textveil.core.models import CodecResult

__version__ = "0.1.0"

__all__ = ["CodecResult", "decode_a", "decode_b", "encode_a", "encode_b"]
