import pytest

from textveil.api import decode_a, encode_a
from textveil.core.errors import ErrorKind
from textveil.schemes import multiplicative
from textveil.schemes.multiplicative import DELIMITER, KEY_MAX, KEY_MIN, MultiplicativeCodec, draw_key


def _fixed_key(key: int) -> MultiplicativeCodec:
    return MultiplicativeCodec(key_source=lambda: key)


def test_encode_hi_with_known_key_embeds_key_at_check_digit():
    codec = _fixed_key(12)
    # 72*12=864, 105*12=1260 -> check digit 0 -> key goes in front
    assert codec.product_sequence("Hi", 12) == f"864{DELIMITER}1260"

    encoded = codec.encode("Hi")
    assert encoded.ok
    assert encoded.value == f"12864{DELIMITER}1260"

    decoded = codec.decode(encoded.value)
    assert decoded.ok
    assert decoded.value == "Hi"


def test_key_is_inserted_before_character_at_check_digit():
    codec = _fixed_key(13)
    # 51*13=663 -> check digit 3
    product = codec.product_sequence("Raviteja123@123", 13)
    assert codec.check_digit(product) == 3

    encoded = codec.encode("Raviteja123@123").value
    assert encoded == f"{product[:3]}13{product[3:]}"
    assert codec.decode(encoded).value == "Raviteja123@123"


@pytest.mark.parametrize("key", [10, 11, 37, 50, 99])
@pytest.mark.parametrize("text", ["Hi", "Raviteja123@123", "hello world", "tab\tand\nnewline", "ß€ ✓ 😀"])
def test_round_trip_when_check_digit_inside_product(text, key):
    codec = _fixed_key(key)
    product = codec.product_sequence(text, key)
    assert codec.check_digit(product) < len(product)

    encoded = codec.encode(text)
    assert codec.decode(encoded.value).value == text


def test_known_divergence_key_not_embedded_when_check_digit_past_end():
    codec = _fixed_key(11)
    # 65*11=715: check digit 5 but the product has only 3 chars
    encoded = codec.encode("A")
    assert encoded.ok
    assert encoded.value == "715"

    decoded = codec.decode(encoded.value)
    assert not decoded.ok
    assert decoded.kind is ErrorKind.KEY_EXTRACTION_ERROR


def test_texts_of_three_or_more_chars_always_embed_key():
    for key in range(KEY_MIN, KEY_MAX + 1):
        codec = _fixed_key(key)
        encoded = codec.encode("Hi!").value
        assert codec.decode(encoded).value == "Hi!"


def test_embedded_key_is_always_in_range():
    codec = MultiplicativeCodec()
    for _ in range(200):
        encoded = codec.encode("Hi").value
        key_digits, _ = codec.extract_key(encoded)
        assert KEY_MIN <= int(key_digits) <= KEY_MAX


def test_draw_key_bounds(monkeypatch):
    monkeypatch.setattr(multiplicative.secrets, "randbelow", lambda n: 0)
    assert draw_key() == KEY_MIN
    monkeypatch.setattr(multiplicative.secrets, "randbelow", lambda n: n - 1)
    assert draw_key() == KEY_MAX


@pytest.mark.parametrize("text", ["", "   ", "\t\n", "\x00", "\x00 \x1f", None])
def test_blank_input_returns_sentinel(text):
    for result in (encode_a(text), decode_a(text)):
        assert not result.ok
        assert result.kind is ErrorKind.EMPTY_INPUT
        assert result.to_legacy() == "NullValue"


def test_decode_non_numeric_segment_is_recovery_error():
    result = decode_a(f"12abc{DELIMITER}xyz0")
    assert not result.ok
    assert result.kind is ErrorKind.RECOVERY_ERROR
    assert result.to_legacy().startswith("ERRBL2~")


def test_decode_zero_key_is_recovery_error():
    result = decode_a("00120")
    assert result.kind is ErrorKind.RECOVERY_ERROR
    assert "ZeroDivisionError" in result.detail


def test_decode_non_ascii_check_digit_is_rejected():
    # int() would read the NKo delimiter as 0
    result = decode_a(f"12864{DELIMITER}")
    assert result.kind is ErrorKind.KEY_EXTRACTION_ERROR
    assert result.code == "ERRBL1"


def test_decode_letter_check_digit_is_key_extraction_error():
    assert decode_a("1234x").kind is ErrorKind.KEY_EXTRACTION_ERROR


def test_out_of_range_key_source_is_key_mix_error():
    result = _fixed_key(5).encode("Hi")
    assert not result.ok
    assert result.kind is ErrorKind.KEY_MIX_ERROR


def test_max_code_point_bounds_encode_and_decode():
    codec = MultiplicativeCodec(key_source=lambda: 10, max_code_point=0xFFFF)
    encoded = codec.encode("ok 😀")
    assert encoded.kind is ErrorKind.SERIALIZATION_FAILURE

    # key 10, single segment 700000 -> code 70000 > 0xFFFF
    decoded = codec.decode("10700000")
    assert decoded.kind is ErrorKind.RECOVERY_ERROR


def test_empty_segments_are_skipped():
    codec = _fixed_key(10)
    assert codec.recover(f"{DELIMITER}650{DELIMITER}{DELIMITER}", "10") == "A"


@pytest.mark.parametrize("text", ["\xa0", "\u3000", " \xa0 "])
def test_unicode_spaces_are_content_not_blank(text):
    # every code above is a multiple of 10 once keyed, so the check digit is 0
    codec = _fixed_key(10)
    encoded = codec.encode(text)
    assert encoded.ok
    assert codec.decode(encoded.value).value == text
