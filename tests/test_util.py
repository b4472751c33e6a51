import pytest

from cuddlyui.util import REPLACEMENT_CHARACTER, u32_to_utf8, utf8_to_u32


def test_ascii_decodes_to_ordinals():
    text = "Hello, world!"
    assert utf8_to_u32(text.encode("ascii")) == [ord(c) for c in text]


def test_two_byte_sequence():
    assert utf8_to_u32(b"\xc3\xa9") == [0xE9]


def test_three_byte_sequence():
    assert utf8_to_u32(b"\xe2\x82\xac") == [0x20AC]


@pytest.mark.parametrize("text", ["abc", "caf\u00e9", "\u20ac100", "\U0001F600x", "\u05e9\u05dc\u05d5\u05dd"])
def test_decode_matches_standard_utf8(text):
    assert utf8_to_u32(text.encode("utf-8")) == [ord(c) for c in text]


@pytest.mark.parametrize("text", ["abc", "caf\u00e9", "\u20ac100", "\U0001F600x", "\u0000\u007f\u0080\u07ff\u0800\uffff\U00010000"])
def test_encode_matches_standard_utf8(text):
    assert u32_to_utf8([ord(c) for c in text]) == text.encode("utf-8")


def test_encode_accepts_str():
    assert u32_to_utf8("caf\u00e9") == "caf\u00e9".encode("utf-8")


def test_invalid_lead_byte_becomes_replacement():
    assert utf8_to_u32(b"a\x80b") == [ord("a"), REPLACEMENT_CHARACTER, ord("b")]


@pytest.mark.parametrize("lead", [0xFE, 0xFF, 0xBF])
def test_other_invalid_leads(lead):
    assert utf8_to_u32(bytes([lead])) == [REPLACEMENT_CHARACTER]


def test_truncated_sequence_raises():
    with pytest.raises(ValueError):
        utf8_to_u32(b"\xe2\x82")


@pytest.mark.parametrize(
    "code",
    [0, 0x7F, 0x80, 0x7FF, 0x800, 0xFFFF, 0x10000, 0x10FFFF, 0x1FFFFF,
     0x200000, 0x3FFFFFF, 0x4000000, 0x7FFFFFFF],
)
def test_round_trip_wide_values(code):
    assert utf8_to_u32(u32_to_utf8([code])) == [code]


def test_long_forms_use_five_and_six_bytes():
    assert len(u32_to_utf8([0x200000])) == 5
    assert len(u32_to_utf8([0x4000000])) == 6


def test_negative_code_point_rejected():
    with pytest.raises(ValueError):
        u32_to_utf8([-1])


def test_empty_inputs():
    assert utf8_to_u32(b"") == []
    assert u32_to_utf8([]) == b""