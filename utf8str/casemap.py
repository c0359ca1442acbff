"""
Case mapping services used by `String.to_uppercase`, `String.to_lowercase`
and `String.casefold`, backed by the interpreter's Unicode database.
"""

import unicodedata
from typing import Iterable, Tuple

from utf8str.codec import BytesLike, byte_count, byte_length_of_scalar, decode_text

# Default_Ignorable_Code_Point ranges, dropped by NFKC_Casefold
_DEFAULT_IGNORABLE: Tuple[Tuple[int, int], ...] = (
    (0x00AD, 0x00AD),
    (0x034F, 0x034F),
    (0x061C, 0x061C),
    (0x115F, 0x1160),
    (0x17B4, 0x17B5),
    (0x180B, 0x180F),
    (0x200B, 0x200F),
    (0x202A, 0x202E),
    (0x2060, 0x206F),
    (0x3164, 0x3164),
    (0xFE00, 0xFE0F),
    (0xFEFF, 0xFEFF),
    (0xFFA0, 0xFFA0),
    (0xFFF0, 0xFFF8),
    (0x1BCA0, 0x1BCA3),
    (0x1D173, 0x1D17A),
    (0xE0000, 0xE0FFF),
)


def is_default_ignorable(scalar: int) -> bool:
    return any(low <= scalar <= high for low, high in _DEFAULT_IGNORABLE)


def _single(scalar: int, mapped: str) -> int:
    # Full mappings like `ß` -> `SS` have no one-to-one counterpart
    return ord(mapped) if len(mapped) == 1 else scalar


def uppercase(scalar: int) -> int:
    byte_length_of_scalar(scalar)
    return _single(scalar, chr(scalar).upper())


def lowercase(scalar: int) -> int:
    byte_length_of_scalar(scalar)
    return _single(scalar, chr(scalar).lower())


def _strip_ignorable(text: str) -> Iterable[str]:
    return (symbol for symbol in text if not is_default_ignorable(ord(symbol)))


def casefold(data: BytesLike) -> bytearray:
    """NFKC_Casefold a UTF-8 byte sequence into a new, caller-owned array."""
    text = decode_text(data[: byte_count(data)])
    folded = "".join(_strip_ignorable(unicodedata.normalize("NFKC", text).casefold()))
    # Ignorables may separate a base from its combining marks, so compose after dropping them
    folded = unicodedata.normalize("NFKC", folded)
    return bytearray(folded.encode("utf-8", errors="surrogatepass"))
