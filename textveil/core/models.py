"""Codec result model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, model_validator

from textveil.core.errors import CodecError, ErrorKind, error_for_kind


class CodecResult(BaseModel):
    """Outcome of one encode/decode call.

    Success and failure are told apart by ``ok``, never by inspecting ``value``;
    decoded text may legitimately look like a sentinel or an error tag.
    """

    model_config = ConfigDict(frozen=True)

    ok: bool
    scheme: str
    operation: str
    sentinel: str
    value: str | None = None
    kind: ErrorKind | None = None
    code: str | None = None
    detail: str = ""

    @model_validator(mode="after")
    def _check_shape(self) -> "CodecResult":
        if self.ok and (self.value is None or self.kind is not None):
            raise ValueError("successful result needs a value and no error kind")
        if not self.ok and (self.kind is None or self.value is not None):
            raise ValueError("failed result needs an error kind and no value")
        return self

    @classmethod
    def success(cls, value: str, *, scheme: str, operation: str, sentinel: str) -> "CodecResult":
        return cls(ok=True, value=value, scheme=scheme, operation=operation, sentinel=sentinel)

    @classmethod
    def failure(cls, error: CodecError, *, scheme: str, operation: str, sentinel: str) -> "CodecResult":
        return cls(
            ok=False,
            kind=error.kind,
            code=error.code,
            detail=error.detail,
            scheme=scheme,
            operation=operation,
            sentinel=sentinel,
        )

    def unwrap(self) -> str:
        """Return the value or raise the CodecError matching ``kind``."""
        if self.ok:
            return self.value  # type: ignore[return-value]
        raise error_for_kind(self.kind)(self.detail)  # type: ignore[arg-type]

    def to_legacy(self) -> str:
        """Render the single-string form older callers expect."""
        if self.ok:
            return self.value  # type: ignore[return-value]
        if self.kind is ErrorKind.EMPTY_INPUT:
            return self.sentinel
        return f"{self.code}~{self.detail}"


def looks_like_legacy_failure(text: str | None, sentinel: str) -> bool:
    """Best-effort classification of strings produced by ``to_legacy``.

    Ambiguous by nature: decoded text can start with an error tag. Only use it
    for output of tools that predate CodecResult.
    """
    if text is None or text == sentinel:
        return True
    head, sep, _ = text.partition("~")
    return bool(sep) and head in {"ERRBL1", "ERRBL2", "ERRCNV"}
