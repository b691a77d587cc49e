import pytest
from pydantic import ValidationError

from textveil.core.errors import ConversionError, ErrorKind, RecoveryError
from textveil.core.models import CodecResult, looks_like_legacy_failure


def _failure(error) -> CodecResult:
    return CodecResult.failure(error, scheme="multiplicative", operation="decode", sentinel="NullValue")


def test_success_requires_value_and_no_kind():
    with pytest.raises(ValidationError):
        CodecResult(ok=True, scheme="substitution", operation="encode", sentinel="NULVAL")
    with pytest.raises(ValidationError):
        CodecResult(
            ok=True,
            value="x",
            kind=ErrorKind.CONVERSION_ERROR,
            scheme="substitution",
            operation="encode",
            sentinel="NULVAL",
        )


def test_failure_requires_kind_and_no_value():
    with pytest.raises(ValidationError):
        CodecResult(ok=False, scheme="substitution", operation="encode", sentinel="NULVAL")
    with pytest.raises(ValidationError):
        CodecResult(
            ok=False,
            value="x",
            kind=ErrorKind.CONVERSION_ERROR,
            scheme="substitution",
            operation="encode",
            sentinel="NULVAL",
        )


def test_result_is_frozen():
    result = CodecResult.success("abc", scheme="substitution", operation="decode", sentinel="NULVAL")
    with pytest.raises(ValidationError):
        result.value = "other"


def test_unwrap_returns_value_or_raises_matching_error():
    ok = CodecResult.success("abc", scheme="substitution", operation="decode", sentinel="NULVAL")
    assert ok.unwrap() == "abc"

    failed = _failure(RecoveryError("ValueError: bad segment"))
    with pytest.raises(RecoveryError) as excinfo:
        failed.unwrap()
    assert excinfo.value.detail == "ValueError: bad segment"


def test_to_legacy_rendering():
    assert _failure(RecoveryError("ZeroDivisionError: x")).to_legacy() == "ERRBL2~ZeroDivisionError: x"
    assert CodecResult.failure(
        ConversionError("bad"), scheme="substitution", operation="decode", sentinel="NULVAL"
    ).to_legacy() == "ERRCNV~bad"


def test_wrap_keeps_exception_type_in_detail():
    err = ConversionError.wrap(ValueError("invalid decimal literal: 'x'"))
    assert err.kind is ErrorKind.CONVERSION_ERROR
    assert err.detail == "ValueError: invalid decimal literal: 'x'"


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("NullValue", True),
        (None, True),
        ("ERRBL1~ValueError: x", True),
        ("ERRCNV~bad", True),
        ("ERRBL1 not tagged", False),
        ("hello", False),
    ],
)
def test_looks_like_legacy_failure(text, expected):
    assert looks_like_legacy_failure(text, "NullValue") is expected
