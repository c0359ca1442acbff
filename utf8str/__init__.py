import os
from importlib.metadata import PackageNotFoundError, version

from utf8str.codec import (
    DEFAULT_CAPACITY,
    MAX_SCALAR,
    Characters,
    advance_to_character_index,
    byte_count,
    byte_length_of_lead_byte,
    byte_length_of_scalar,
    byte_offset,
    characters,
    column_count,
    count_characters,
    decode,
    decode_text,
    encode,
    encode_scalar,
    is_whitespace,
    scalar_at,
)
from utf8str.console import setup_console
from utf8str.errors import (
    ConsoleError,
    FileAccessError,
    IndexOutOfRangeError,
    InvalidEncodingError,
    InvalidScalarError,
    OutOfMemoryError,
    TruncatedEncodingError,
    Utf8Error,
)
from utf8str.stream import iter_characters, read_one_character, read_scalar, write_one_character
from utf8str.string import String

try:
    __version__ = version("utf8str")
except PackageNotFoundError:
    # Source checkout that was never installed, read the same file as `setup.py`
    with open(os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "VERSION"), "r") as f:
        __version__ = f.read().strip()

__all__ = [
    "DEFAULT_CAPACITY",
    "MAX_SCALAR",
    "Characters",
    "ConsoleError",
    "FileAccessError",
    "IndexOutOfRangeError",
    "InvalidEncodingError",
    "InvalidScalarError",
    "OutOfMemoryError",
    "String",
    "TruncatedEncodingError",
    "Utf8Error",
    "advance_to_character_index",
    "byte_count",
    "byte_length_of_lead_byte",
    "byte_length_of_scalar",
    "byte_offset",
    "characters",
    "column_count",
    "count_characters",
    "decode",
    "decode_text",
    "encode",
    "encode_scalar",
    "is_whitespace",
    "iter_characters",
    "read_one_character",
    "read_scalar",
    "scalar_at",
    "setup_console",
    "write_one_character",
]
