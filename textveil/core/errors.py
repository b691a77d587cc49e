"""Project error hierarchy."""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    EMPTY_INPUT = "empty_input"
    SERIALIZATION_FAILURE = "serialization_failure"
    KEY_MIX_ERROR = "key_mix_error"
    KEY_EXTRACTION_ERROR = "key_extraction_error"
    RECOVERY_ERROR = "recovery_error"
    CONVERSION_ERROR = "conversion_error"


class TextVeilError(Exception):
    """Base error."""


class UnknownSchemeError(TextVeilError, ValueError):
    """Raised when a codec name or alias cannot be resolved."""


class CodecError(TextVeilError):
    """A single encode/decode step failed."""

    kind: ErrorKind
    # string tag used by the legacy "<code>~<detail>" rendering
    code: str = "ERR"

    def __init__(self, detail: str = "") -> None:
        super().__init__(detail)
        self.detail = detail

    @classmethod
    def wrap(cls, exc: BaseException) -> "CodecError":
        return cls(f"{type(exc).__name__}: {exc}")


class EmptyInputError(CodecError):
    kind = ErrorKind.EMPTY_INPUT
    code = "EMPTY"


class SerializationError(CodecError):
    kind = ErrorKind.SERIALIZATION_FAILURE
    code = "ERRBL1"


class KeyMixError(CodecError):
    kind = ErrorKind.KEY_MIX_ERROR
    code = "ERRBL2"


class KeyExtractionError(CodecError):
    kind = ErrorKind.KEY_EXTRACTION_ERROR
    code = "ERRBL1"


class RecoveryError(CodecError):
    kind = ErrorKind.RECOVERY_ERROR
    code = "ERRBL2"


class ConversionError(CodecError):
    kind = ErrorKind.CONVERSION_ERROR
    code = "ERRCNV"


_ERRORS_BY_KIND: dict[ErrorKind, type[CodecError]] = {
    cls.kind: cls
    for cls in (
        EmptyInputError,
        SerializationError,
        KeyMixError,
        KeyExtractionError,
        RecoveryError,
        ConversionError,
    )
}


def error_for_kind(kind: ErrorKind) -> type[CodecError]:
    return _ERRORS_BY_KIND[kind]
