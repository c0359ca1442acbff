"""
Exceptions raised by the codec, the stream helpers and the `String` buffer.

Every class derives from `Utf8Error` and from the builtin exception a caller
would naturally catch for the same situation, so `except IndexError` keeps
working around `String[...]` lookups.
"""

from typing import Optional


class Utf8Error(Exception):
    """Base class for all errors raised by `utf8str`."""

    pass


class InvalidScalarError(Utf8Error, ValueError):
    """Raised when a scalar lies outside of `[0, 0x10FFFF]`."""

    def __init__(self, scalar: int):
        self.scalar = scalar
        super().__init__(f"Char code {scalar} is out of utf8 range (Must be integer 0 - 1114111)")


class IndexOutOfRangeError(Utf8Error, IndexError):
    """Raised when a character index is past the last character of a sequence."""

    def __init__(self, index: int, max_index: int):
        self.index = index
        self.max_index = max_index
        super().__init__(f"Out of range utf8 character index {index}, max index is {max_index}")


class TruncatedEncodingError(Utf8Error, ValueError):
    """Raised when the data ends in the middle of a multi-byte character."""

    def __init__(self, expected: int, received: int):
        self.expected = expected
        self.received = received
        super().__init__(
            f"Unexpected EOF: data ends in the middle of utf8 character code "
            f"(expected {expected} bytes, got {received})"
        )


class InvalidEncodingError(Utf8Error, ValueError):
    """Raised when bytes that were never validated cannot be read back as text."""

    def __init__(self, offset: int, reason: str):
        self.offset = offset
        self.reason = reason
        super().__init__(f"Invalid utf8 byte sequence at offset {offset}: {reason}")


class OutOfMemoryError(Utf8Error, MemoryError):
    """Raised when the buffer allocation cannot grow."""

    def __init__(self, requested: int):
        self.requested = requested
        super().__init__(f"Out of memory while growing String allocation to {requested} bytes")


class FileAccessError(Utf8Error, OSError):
    """Raised when a file cannot be opened for reading or writing."""

    def __init__(self, path: str, mode: str, reason: Optional[str] = None):
        self.path = path
        self.mode = mode
        action = "reading" if mode == "r" else "writing"
        message = f'Error {action} file "{path}"'
        if reason:
            message += f": {reason}"
        super().__init__(message)


class ConsoleError(Utf8Error, RuntimeError):
    """Raised when the terminal cannot be switched to UTF-8."""

    def __init__(self, reason: Optional[str] = None):
        message = "A UTF-8 compatible terminal is required"
        if reason:
            message += f" ({reason})"
        super().__init__(message)
