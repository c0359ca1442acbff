"""
Character-at-a-time reading and writing over binary file objects.
"""

from typing import BinaryIO, Iterator, Optional, Union

from utf8str.codec import BytesLike, byte_length_of_lead_byte, decode, encode_scalar
from utf8str.errors import TruncatedEncodingError


def read_one_character(source: BinaryIO) -> bytes:
    """Read the lead byte and then the continuation bytes it announces.

    Returns:
        The encoded character, or `b""` at the end of the stream.

    Raises:
        TruncatedEncodingError: If the stream ends in the middle of a character.
    """
    lead = source.read(1)
    if not lead:
        return b""

    size = byte_length_of_lead_byte(lead[0])
    if size == 1:
        return bytes(lead)

    tail = source.read(size - 1)
    if len(tail) != size - 1:
        raise TruncatedEncodingError(size, 1 + len(tail))
    return bytes(lead) + bytes(tail)


def read_scalar(source: BinaryIO) -> Optional[int]:
    char = read_one_character(source)
    return decode(char) if char else None


def iter_characters(source: BinaryIO) -> Iterator[bytes]:
    while True:
        char = read_one_character(source)
        if not char:
            return
        yield char


def write_one_character(char: Union[int, BytesLike], sink: BinaryIO) -> int:
    """Write a single character given as a scalar or as bytes starting with its encoding."""
    if isinstance(char, int):
        encoded = encode_scalar(char)
    else:
        size = byte_length_of_lead_byte(char[0])
        if len(char) < size:
            raise TruncatedEncodingError(size, len(char))
        encoded = bytes(char[:size])
    sink.write(encoded)
    return len(encoded)
