"""Conversion between UTF-8 bytes and sequences of code points.

The encoding follows the original, pre-2003 UTF-8 definition, so values
up to 31 bits wide are carried in five- and six-byte sequences.
"""

from __future__ import annotations

from typing import Iterable, Union

REPLACEMENT_CHARACTER = 0xFFFD

# (mask, pattern, payload bits kept from the lead byte, continuation bytes)
_LEAD_BYTES = (
    (0xFE, 0xFC, 0x01, 5),
    (0xFC, 0xF8, 0x03, 4),
    (0xF8, 0xF0, 0x07, 3),
    (0xF0, 0xE0, 0x0F, 2),
    (0xE0, 0xC0, 0x1F, 1),
)

# (bits that select this width, lead prefix, lead payload mask, continuations)
_ENCODINGS = (
    (0x7C000000, 0xFC, 0x01, 5),
    (0x03E00000, 0xF8, 0x03, 4),
    (0x001F0000, 0xF0, 0x07, 3),
    (0x0000F800, 0xE0, 0x1F, 2),
    (0x00000780, 0xC0, 0x1F, 1),
)


def utf8_to_u32(data: Union[bytes, bytearray, memoryview]) -> list[int]:
    """Decode UTF-8 bytes into a list of code points.

    A byte that cannot start a sequence becomes U+FFFD.  Continuation
    bytes are taken as they come, without validation.  A sequence cut
    short by the end of the data raises ValueError.
    """
    raw = bytes(data)
    stream = iter(raw)
    result: list[int] = []
    for lead in stream:
        for mask, pattern, keep, extra in _LEAD_BYTES:
            if lead & mask == pattern:
                code = lead & keep
                for _ in range(extra):
                    try:
                        follow = next(stream)
                    except StopIteration:
                        raise ValueError("truncated UTF-8 sequence") from None
                    code = (code << 6) | (follow & 0x3F)
                break
        else:
            code = lead if lead < 0x80 else REPLACEMENT_CHARACTER
        result.append(code)
    return result


def u32_to_utf8(code_points: Union[str, Iterable[int]]) -> bytes:
    """Encode code points (or the characters of a string) as UTF-8 bytes."""
    if isinstance(code_points, str):
        code_points = map(ord, code_points)
    out = bytearray()
    for code in code_points:
        if not 0 <= code <= 0xFFFFFFFF:
            raise ValueError(f"code point out of range: {code!r}")
        for select, prefix, lead_mask, extra in _ENCODINGS:
            if code & select:
                out.append(prefix | ((code >> (6 * extra)) & lead_mask))
                out.extend(
                    0x80 | ((code >> (6 * shift)) & 0x3F)
                    for shift in range(extra - 1, -1, -1)
                )
                break
        else:
            out.append(code & 0x7F)
    return bytes(out)