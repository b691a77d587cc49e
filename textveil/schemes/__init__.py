"""Codec selection helpers."""

from __future__ import annotations

from textveil.config.settings import settings
from textveil.core.errors import UnknownSchemeError
from textveil.schemes.base import BaseCodec
from textveil.schemes.multiplicative import MultiplicativeCodec
from textveil.schemes.substitution import SubstitutionCodec

_CODECS: dict[str, type[BaseCodec]] = {
    MultiplicativeCodec.name: MultiplicativeCodec,
    SubstitutionCodec.name: SubstitutionCodec,
}
_ALIASES = {"a": MultiplicativeCodec.name, "b": SubstitutionCodec.name}


def available_schemes() -> list[str]:
    return sorted(_CODECS)


def normalize_scheme_name(raw: str | None = None) -> str:
    candidate = (raw or settings.default_scheme or "").strip().lower()
    candidate = _ALIASES.get(candidate, candidate)
    if candidate not in _CODECS:
        raise UnknownSchemeError(f"unknown scheme {raw!r}; expected one of {', '.join(available_schemes())}")
    return candidate


def get_codec(name: str | None = None) -> BaseCodec:
    return _CODECS[normalize_scheme_name(name)]()
