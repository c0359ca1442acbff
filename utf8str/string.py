"""
Growable UTF-8 string buffer addressed by character index.

The storage is a single `bytearray` whose length is the allocated capacity.
Content occupies `[0, byte_length)` and is always followed by a zero byte,
so the codec functions can scan the raw array and stop at the content end.
"""

import logging
import os
from typing import Iterator, Mapping, Optional, Tuple, Union

from utf8str import casemap
from utf8str.codec import (
    DEFAULT_CAPACITY,
    BytesLike,
    Characters,
    advance_to_character_index,
    byte_count,
    byte_length_of_scalar,
    count_characters,
    decode_text,
    encode,
    encode_scalar,
    scalar_at,
)
from utf8str.errors import FileAccessError, IndexOutOfRangeError, OutOfMemoryError

logger = logging.getLogger(__name__)

PathLike = Union[str, bytes, os.PathLike]
Content = Union[str, BytesLike, "String"]

OWNED = "owned"
ADOPTED = "adopted"


def _content_bytes(content: Content, length: Optional[int] = None) -> bytes:
    if isinstance(content, String):
        data = content._bytes[: content._byte_length]
    elif isinstance(content, str):
        data = content.encode("utf-8")
    elif isinstance(content, (bytes, bytearray, memoryview)):
        data = bytes(content)
    else:
        raise TypeError(f"Expected str, bytes-like or String, got {type(content).__name__}")
    if length is not None and length < len(data):
        length = max(length, 0)
        # Never keep the head of a character whose continuation bytes are cut off
        while length > 0 and data[length] & 0xC0 == 0x80:
            length -= 1
        data = data[:length]
    return bytes(data)


def _render(fmt: Union[str, bytes, "String"], args: tuple) -> bytes:
    if isinstance(fmt, String):
        fmt = fmt.as_text()
    values = args[0] if len(args) == 1 and isinstance(args[0], Mapping) else args
    rendered = fmt % values
    return rendered.encode("utf-8") if isinstance(rendered, str) else bytes(rendered)


def _doubled_capacity(current: int, required: int) -> int:
    capacity = current if current > 0 else DEFAULT_CAPACITY
    while capacity < required:
        capacity *= 2
    return capacity


class String:
    """Mutable UTF-8 text stored as packed bytes.

    Positions passed to `insert_at`, `remove`, `char_at` and friends are
    character indices, converted to byte offsets with a linear scan.
    Not safe for concurrent use: guard each instance with its own lock if
    several threads need it.
    """

    __slots__ = ("_bytes", "_byte_length", "_provenance")
    __hash__ = None

    def __init__(self, source: Optional[Content] = None, capacity: Optional[int] = None):
        if isinstance(source, int):
            raise TypeError("Pass `capacity=` to preallocate, or use `insert` for scalars")
        self._bytes = bytearray()
        self._byte_length = 0
        self._provenance = OWNED
        if capacity is not None:
            self.grow_allocation(capacity)
        if source is not None:
            self.insert(source)

    # Construction

    @classmethod
    def with_capacity(cls, capacity: int) -> "String":
        return cls(capacity=capacity)

    @classmethod
    def adopt(
        cls,
        buffer: bytearray,
        byte_length: Optional[int] = None,
        byte_capacity: Optional[int] = None,
    ) -> "String":
        """Take ownership of `buffer` without copying its content.

        The caller must not use `buffer` afterwards. When `byte_length` is omitted,
        the content ends at the first zero byte. If the array has no room for the
        trailing zero byte, it is grown with the usual doubling policy.
        """
        if not isinstance(buffer, bytearray):
            raise TypeError(f"Only a bytearray can be adopted, got {type(buffer).__name__}")
        if byte_length is None:
            byte_length = byte_count(buffer)
        if byte_length < 0 or byte_length > len(buffer):
            raise ValueError(f"Length {byte_length} does not fit a {len(buffer)}-byte buffer")

        capacity = len(buffer) if byte_capacity is None else byte_capacity
        if capacity < byte_length + 1:
            capacity = _doubled_capacity(DEFAULT_CAPACITY, byte_length + 1)
        if capacity > len(buffer):
            buffer.extend(bytes(capacity - len(buffer)))
        elif capacity < len(buffer):
            del buffer[capacity:]
        buffer[byte_length] = 0

        adopted = cls.__new__(cls)
        adopted._bytes = buffer
        adopted._byte_length = byte_length
        adopted._provenance = ADOPTED
        logger.debug("Adopted %d bytes with capacity %d", byte_length, capacity)
        return adopted

    @classmethod
    def from_file(cls, path: PathLike) -> "String":
        try:
            with open(path, "rb") as file:
                content = file.read()
        except OSError as e:
            raise FileAccessError(os.fsdecode(path), "r", e.strerror) from e

        loaded = cls.with_capacity(len(content))
        loaded.insert(content)
        logger.debug("Loaded %d bytes from %s", len(content), os.fsdecode(path))
        return loaded

    def to_file(self, path: PathLike) -> None:
        try:
            with open(path, "wb") as file:
                file.write(self._bytes[: self._byte_length])
        except OSError as e:
            raise FileAccessError(os.fsdecode(path), "w", e.strerror) from e
        logger.debug("Stored %d bytes to %s", self._byte_length, os.fsdecode(path))

    # Accessors

    @property
    def byte_length(self) -> int:
        return self._byte_length

    @property
    def byte_capacity(self) -> int:
        return len(self._bytes)

    @property
    def provenance(self) -> str:
        return self._provenance

    def as_bytes(self) -> memoryview:
        """Read-only view of the content. Release it before mutating the string."""
        return memoryview(self._bytes)[: self._byte_length].toreadonly()

    def as_text(self) -> str:
        return decode_text(self._bytes[: self._byte_length])

    def char_at(self, index: int) -> int:
        return scalar_at(self._bytes, index)

    def str_at(self, index: int) -> bytes:
        """Content from the character at `index` to the end."""
        offset = advance_to_character_index(self._bytes, index)
        return bytes(self._bytes[offset : self._byte_length])

    def __len__(self) -> int:
        return count_characters(self._bytes)

    def __bool__(self) -> bool:
        return self._byte_length > 0

    def __getitem__(self, index: Union[int, slice]) -> Union[int, "String"]:
        if isinstance(index, slice):
            start, stop, step = index.indices(len(self))
            if step != 1:
                raise ValueError("String slices do not support steps")
            if stop <= start:
                return String()
            begin = advance_to_character_index(self._bytes, start)
            end = advance_to_character_index(self._bytes, stop)
            return String(self._bytes[begin:end])

        if index < 0:
            count = len(self)
            if index + count < 0:
                raise IndexOutOfRangeError(index, count - 1)
            index += count
        return self.char_at(index)

    def __iter__(self) -> Iterator[Tuple[int, int]]:
        snapshot = bytes(self._bytes[: self._byte_length])
        return iter(Characters(snapshot))

    def __bytes__(self) -> bytes:
        return bytes(self._bytes[: self._byte_length])

    def __str__(self) -> str:
        return self.as_text()

    def __repr__(self) -> str:
        text = bytes(self._bytes[: self._byte_length]).decode("utf-8", errors="backslashreplace")
        return f"utf8str.String({text!r})"

    def __eq__(self, other) -> bool:
        if isinstance(other, String):
            return self._bytes[: self._byte_length] == other._bytes[: other._byte_length]
        if isinstance(other, str):
            return self._bytes[: self._byte_length] == other.encode("utf-8")
        if isinstance(other, (bytes, bytearray, memoryview)):
            return self._bytes[: self._byte_length] == bytes(other)
        return NotImplemented

    def __iadd__(self, other: Union[Content, int]) -> "String":
        self.insert(other)
        return self

    def copy(self) -> "String":
        return String(self)

    __copy__ = copy

    def __deepcopy__(self, memo) -> "String":
        return String(self)

    # Allocation

    def grow_allocation(self, additional: int) -> None:
        """Ensure room for `additional` more bytes plus the trailing zero byte."""
        required = self._byte_length + additional + 1
        capacity = _doubled_capacity(len(self._bytes), required)
        if capacity <= len(self._bytes):
            return
        try:
            self._bytes.extend(bytes(capacity - len(self._bytes)))
        except MemoryError as e:
            raise OutOfMemoryError(capacity) from e
        logger.debug("Grew allocation to %d bytes for %d content bytes", capacity, required - 1)

    def collapse_allocation(self) -> None:
        if len(self._bytes) > self._byte_length + 1:
            del self._bytes[self._byte_length + 1 :]
            logger.debug("Collapsed allocation to %d bytes", len(self._bytes))

    # Mutation

    def _terminate(self) -> None:
        self._bytes[self._byte_length] = 0

    def insert(self, content: Union[Content, int], length: Optional[int] = None) -> None:
        """Append text, bytes or another `String`, or a single scalar given as `int`.

        Args:
            content: What to append.
            length: Only append the first `length` bytes of `content`.
        """
        if isinstance(content, int):
            size = byte_length_of_scalar(content)
            self.grow_allocation(size)
            encode(content, self._bytes, self._byte_length)
            self._byte_length += size
            self._terminate()
            return

        data = _content_bytes(content, length)
        self.grow_allocation(len(data))
        end = self._byte_length + len(data)
        self._bytes[self._byte_length : end] = data
        self._byte_length = end
        self._terminate()

    def insert_at(self, index: int, content: Union[Content, int], length: Optional[int] = None) -> None:
        """Insert before the character at `index`, appending when `index` is past the end."""
        if index >= len(self):
            return self.insert(content, length)

        data = encode_scalar(content) if isinstance(content, int) else _content_bytes(content, length)
        offset = advance_to_character_index(self._bytes, index)
        self._open_gap(offset, data)

    def _open_gap(self, offset: int, data: bytes) -> None:
        size = len(data)
        self.grow_allocation(size)
        tail_end = self._byte_length
        # Equal-length slice assignment copies the source first, so overlap is fine
        self._bytes[offset + size : tail_end + size] = self._bytes[offset:tail_end]
        self._bytes[offset : offset + size] = data
        self._byte_length += size
        self._terminate()

    def remove(self, index: int, count: int = 1) -> None:
        """Remove `count` characters starting at `index`. The capacity is kept."""
        if count < 0:
            raise ValueError(f"Cannot remove a negative number of characters: {count}")
        begin = advance_to_character_index(self._bytes, index)
        end = advance_to_character_index(self._bytes, index + count)
        if end == begin:
            return

        tail = self._bytes[end : self._byte_length]
        self._bytes[begin : begin + len(tail)] = tail
        self._byte_length -= end - begin
        self._terminate()

    def insert_fmt(self, fmt: Union[str, bytes, "String"], *args) -> None:
        """Append printf-style formatted text, like `fmt % args`."""
        self.insert(_render(fmt, args))

    def insert_fmt_at(self, index: int, fmt: Union[str, bytes, "String"], *args) -> None:
        rendered = _render(fmt, args)
        if index >= len(self):
            return self.insert(rendered)
        offset = advance_to_character_index(self._bytes, index)
        self._open_gap(offset, rendered)

    # Case transforms

    def to_lowercase(self) -> "String":
        lowered = String.with_capacity(self._byte_length)
        for _, scalar in self:
            lowered.insert(casemap.lowercase(scalar))
        return lowered

    def to_uppercase(self) -> "String":
        uppered = String.with_capacity(self._byte_length)
        for _, scalar in self:
            uppered.insert(casemap.uppercase(scalar))
        return uppered

    def casefold(self) -> "String":
        folded = casemap.casefold(self._bytes)
        length = len(folded)
        return String.adopt(folded, length, _doubled_capacity(DEFAULT_CAPACITY, length + 1))

    # Ownership

    def dispose(self) -> None:
        self._bytes = bytearray()
        self._byte_length = 0
        self._provenance = OWNED

    def release(self) -> bytearray:
        """Hand the storage over to the caller and reset to an empty string.

        The returned array holds the content followed by a single zero byte,
        or is empty if nothing was ever allocated.
        """
        self.collapse_allocation()
        released = self._bytes
        self.dispose()
        return released

    def move(self, source: "String") -> None:
        """Take over the storage of `source`, leaving it empty."""
        if source is self:
            return
        self._bytes = source._bytes
        self._byte_length = source._byte_length
        self._provenance = source._provenance
        source.dispose()
