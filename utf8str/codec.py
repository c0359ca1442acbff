"""
Stateless UTF-8 codec: sizing, decoding and encoding of single characters,
plus counting and character-index lookups over byte sequences.

A byte sequence is any `bytes`, `bytearray` or `memoryview` of bytes. It ends
at its first zero byte or at the end of the object, whichever comes first.
Input is trusted to be well-formed UTF-8: continuation bytes are not validated.
"""

from typing import Iterator, Optional, Tuple, Union

from wcwidth import wcswidth, wcwidth

from utf8str.errors import (
    IndexOutOfRangeError,
    InvalidEncodingError,
    InvalidScalarError,
    TruncatedEncodingError,
)

BytesLike = Union[bytes, bytearray, memoryview]

MAX_SCALAR = 0x10FFFF
DEFAULT_CAPACITY = 16

_WHITESPACE = frozenset(
    [0x0020, 0x0085, 0x00A0, 0x1680, 0x2028, 0x2029, 0x202F, 0x205F, 0x3000]
    + list(range(0x0009, 0x000D + 1))
    + list(range(0x2000, 0x200A + 1))
)


def byte_length_of_lead_byte(byte: int) -> int:
    if byte < 0x80:
        return 1
    elif byte < 0xE0:
        return 2
    elif byte < 0xF0:
        return 3
    return 4


def byte_length_of_scalar(scalar: int) -> int:
    if scalar < 0:
        raise InvalidScalarError(scalar)
    elif scalar < 0x80:
        return 1
    elif scalar < 0x800:
        return 2
    elif scalar < 0x10000:
        return 3
    elif scalar <= MAX_SCALAR:
        return 4
    raise InvalidScalarError(scalar)


def decode(data: BytesLike, offset: int = 0) -> int:
    """Reconstruct the scalar whose encoding starts at `offset`.

    Raises:
        TruncatedEncodingError: If the lead byte announces more bytes than remain.
    """
    available = len(data) - offset
    if available <= 0:
        raise TruncatedEncodingError(1, 0)

    lead = data[offset]
    size = byte_length_of_lead_byte(lead)
    if available < size:
        raise TruncatedEncodingError(size, available)

    if size == 1:
        return lead
    elif size == 2:
        return ((lead & 0x1F) << 6) | (data[offset + 1] & 0x3F)
    elif size == 3:
        return ((lead & 0x0F) << 12) | ((data[offset + 1] & 0x3F) << 6) | (data[offset + 2] & 0x3F)
    return (
        ((lead & 0x07) << 18)
        | ((data[offset + 1] & 0x3F) << 12)
        | ((data[offset + 2] & 0x3F) << 6)
        | (data[offset + 3] & 0x3F)
    )


def encode(scalar: int, out: Union[bytearray, memoryview], offset: int = 0) -> int:
    """Write the encoding of `scalar` into `out` at `offset`, returning the bytes written."""
    size = byte_length_of_scalar(scalar)
    if len(out) - offset < size:
        raise ValueError(f"No room for {size} bytes at offset {offset} of a {len(out)}-byte buffer")

    if size == 1:
        out[offset] = scalar
    elif size == 2:
        out[offset] = 0xC0 | (scalar >> 6)
        out[offset + 1] = 0x80 | (scalar & 0x3F)
    elif size == 3:
        out[offset] = 0xE0 | (scalar >> 12)
        out[offset + 1] = 0x80 | ((scalar >> 6) & 0x3F)
        out[offset + 2] = 0x80 | (scalar & 0x3F)
    else:
        out[offset] = 0xF0 | (scalar >> 18)
        out[offset + 1] = 0x80 | ((scalar >> 12) & 0x3F)
        out[offset + 2] = 0x80 | ((scalar >> 6) & 0x3F)
        out[offset + 3] = 0x80 | (scalar & 0x3F)
    return size


def encode_scalar(scalar: int) -> bytes:
    out = bytearray(byte_length_of_scalar(scalar))
    encode(scalar, out)
    return bytes(out)


def byte_count(data: BytesLike) -> int:
    """Number of content bytes, i.e. the offset of the first zero byte or `len(data)`."""
    find = getattr(data, "find", None)
    position = find(0) if find is not None else bytes(data).find(0)
    return len(data) if position < 0 else position


def count_characters(data: BytesLike, max_bytes: Optional[int] = None) -> int:
    end = len(data) if max_bytes is None else min(len(data), max_bytes)
    count = 0
    offset = 0
    while offset < end and data[offset] != 0:
        count += 1
        offset += byte_length_of_lead_byte(data[offset])
    return count


def advance_to_character_index(data: BytesLike, index: int) -> int:
    """Byte offset of the character at `index`.

    The index one past the last character is accepted and maps to the end of
    the content, so the result can be used as an insertion or slicing bound.
    """
    if index < 0:
        raise IndexOutOfRangeError(index, count_characters(data))

    end = len(data)
    offset = 0
    for i in range(index):
        if offset >= end or data[offset] == 0:
            raise IndexOutOfRangeError(index, i)
        offset += byte_length_of_lead_byte(data[offset])
    return offset


byte_offset = advance_to_character_index


def scalar_at(data: BytesLike, index: int) -> int:
    offset = advance_to_character_index(data, index)
    if offset >= len(data) or data[offset] == 0:
        raise IndexOutOfRangeError(index, index - 1)
    return decode(data, offset)


def decode_text(data: BytesLike) -> str:
    """Whole byte sequence as `str`. Encoded surrogate scalars are kept as lone surrogates.

    Raises:
        InvalidEncodingError: If the bytes are not UTF-8 at all.
    """
    try:
        return bytes(data).decode("utf-8", errors="surrogatepass")
    except UnicodeDecodeError as e:
        raise InvalidEncodingError(e.start, e.reason) from e


def is_whitespace(char: Union[int, BytesLike]) -> bool:
    if not isinstance(char, int):
        char = decode(char)
    return char in _WHITESPACE


def column_count(char: Union[int, BytesLike]) -> int:
    """Number of terminal columns a character, or a whole byte sequence, occupies.

    Non-printable characters occupy no columns.
    """
    if isinstance(char, int):
        byte_length_of_scalar(char)
        return max(wcwidth(chr(char)), 0)

    text = decode_text(char[: byte_count(char)])
    width = wcswidth(text)
    if width >= 0:
        return width
    return sum(max(wcwidth(symbol), 0) for symbol in text)


class Characters:
    """Lazy, restartable view of `(character_index, scalar)` pairs over a byte sequence."""

    __slots__ = ("_data",)

    def __init__(self, data: BytesLike):
        self._data = data

    def __iter__(self) -> Iterator[Tuple[int, int]]:
        data = self._data
        end = len(data)
        offset = 0
        index = 0
        while offset < end and data[offset] != 0:
            yield index, decode(data, offset)
            offset += byte_length_of_lead_byte(data[offset])
            index += 1

    def __len__(self) -> int:
        return count_characters(self._data)

    def __repr__(self) -> str:
        return f"Characters({bytes(self._data[: byte_count(self._data)])!r})"


def characters(data: BytesLike) -> Characters:
    return Characters(data)
