"""
Deferred stream addressing.

A package header mixes three ways of locating data:

- inline: the value sits at the cursor
- indirect: the cursor holds a (count, offset) descriptor and the value lives
  elsewhere in the file
- deferred: a descriptor is kept and the value is decoded later, if at all

Codecs are stateless singletons. Each one knows how to parse or skip its
value given a stream info descriptor, and the base class derives the inline
and indirect variants from that.
"""

from dataclasses import dataclass
from typing import Any, Callable, Iterator, List, Optional

from .archive import Archive
from .errors import IteratorInvalidatedError


@dataclass(frozen=True)
class SingleItemStreamInfo:
    """Location of a single value."""
    offset: int

    @classmethod
    def from_current_position(cls, archive: Archive) -> 'SingleItemStreamInfo':
        return cls(archive.tell())

    @classmethod
    def from_indirect_reference(cls, archive: Archive) -> 'SingleItemStreamInfo':
        """Read an int32 offset at the cursor."""
        return cls(archive.read_int32())

    def to_dict(self) -> dict:
        return {'offset': self.offset}


@dataclass(frozen=True)
class ArrayStreamInfo:
    """Location and element count of a contiguous array."""
    offset: int
    count: int

    @classmethod
    def from_current_position(cls, archive: Archive) -> 'ArrayStreamInfo':
        """Read an int32 count; the elements follow it."""
        count = archive.read_count()
        return cls(archive.tell(), count)

    @classmethod
    def from_indirect_reference(cls, archive: Archive, checked: bool = True) -> 'ArrayStreamInfo':
        """
        Read an int32 count followed by an int32 offset.

        Args:
            archive: Archive positioned at the descriptor
            checked: Validate the count against the archive limits. Descriptors
                that are only recorded (never walked) keep the raw value.
        """
        count = archive.read_count() if checked else archive.read_int32()
        offset = archive.read_int32()
        return cls(offset, count)

    @classmethod
    def from_offset_then_count(cls, archive: Archive, checked: bool = True) -> 'ArrayStreamInfo':
        """Read an int32 offset followed by an int32 count."""
        offset = archive.read_int32()
        count = archive.read_count() if checked else archive.read_int32()
        return cls(offset, count)

    def to_dict(self) -> dict:
        return {'offset': self.offset, 'count': self.count}


class Codec:
    """
    Base class for value codecs.

    Subclasses implement parse_seekless() and skip_with_info(); everything
    else is derived.
    """

    stream_info_type = SingleItemStreamInfo

    def parse_seekless(self, archive: Archive, stream_info: Optional[Any] = None) -> Any:
        """Decode the value at the cursor without seeking first."""
        raise NotImplementedError

    def skip_with_info(self, archive: Archive, stream_info: Any):
        """Leave the cursor just past the value described by stream_info."""
        raise NotImplementedError

    def parse_with_info(self, archive: Archive, stream_info: Any) -> Any:
        archive.seek(stream_info.offset)
        return self.parse_seekless(archive, stream_info)

    def parse_inline(self, archive: Archive) -> Any:
        stream_info = self.stream_info_type.from_current_position(archive)
        return self.parse_seekless(archive, stream_info)

    def parse_indirect(self, archive: Archive,
                       read_info: Optional[Callable[[Archive], Any]] = None) -> Any:
        """
        Read a descriptor at the cursor, decode the value it points to and
        leave the cursor just past the descriptor.

        Args:
            archive: Archive positioned at the descriptor
            read_info: Descriptor reader (default: the stream info type's
                from_indirect_reference)
        """
        if read_info is None:
            read_info = self.stream_info_type.from_indirect_reference
        stream_info = read_info(archive)
        with archive.preserve_position():
            return self.parse_with_info(archive, stream_info)

    def skip(self, archive: Archive):
        stream_info = self.stream_info_type.from_current_position(archive)
        self.skip_with_info(archive, stream_info)


class FixedSizeCodec(Codec):
    """Codec for values with a constant on-disk size."""

    size = 0

    def skip_with_info(self, archive: Archive, stream_info: SingleItemStreamInfo):
        archive.seek(stream_info.offset + self.size)


class ArrayCodec(Codec):
    """
    Contiguous array of elements decoded by another codec.

    Usage:
        names = ArrayCodec(STRING).parse_indirect(archive)
    """

    stream_info_type = ArrayStreamInfo

    def __init__(self, element: Codec):
        self.element = element

    def __repr__(self):
        return f"ArrayCodec({type(self.element).__name__})"

    def parse_seekless(self, archive: Archive, stream_info: ArrayStreamInfo = None) -> List[Any]:
        if stream_info is None:
            # Nested inside another record: count prefix at the cursor
            stream_info = ArrayStreamInfo.from_current_position(archive)
        return [self.element.parse_seekless(archive) for _ in range(stream_info.count)]

    def skip_with_info(self, archive: Archive, stream_info: ArrayStreamInfo):
        if isinstance(self.element, FixedSizeCodec):
            archive.seek(stream_info.offset + stream_info.count * self.element.size)
            return

        archive.seek(stream_info.offset)
        for _ in range(stream_info.count):
            self.element.skip(archive)

    def iter_with_info(self, archive: Archive, stream_info: ArrayStreamInfo) -> 'ArrayIterator':
        archive.seek(stream_info.offset)
        return ArrayIterator(archive, self.element, stream_info.count)

    def iter_inline(self, archive: Archive) -> 'ArrayIterator':
        stream_info = ArrayStreamInfo.from_current_position(archive)
        return ArrayIterator(archive, self.element, stream_info.count)


class ArrayIterator:
    """
    Lazy, one-shot iterator over an array at the archive cursor.

    The iterator shares the archive's cursor with everything else. If the
    cursor is moved between two steps (and not put back), the next step
    raises IteratorInvalidatedError instead of decoding garbage.
    """

    def __init__(self, archive: Archive, element: Codec, count: int):
        self._archive = archive
        self._element = element
        self._remaining = count
        self._position = archive.tell()

    def __iter__(self) -> Iterator[Any]:
        return self

    def __next__(self) -> Any:
        if self._remaining <= 0:
            raise StopIteration

        position = self._archive.tell()
        if position != self._position:
            raise IteratorInvalidatedError(self._position, position)

        item = self._element.parse_seekless(self._archive)
        self._position = self._archive.tell()
        self._remaining -= 1
        return item

    def __length_hint__(self) -> int:
        return max(self._remaining, 0)


__all__ = [
    'SingleItemStreamInfo',
    'ArrayStreamInfo',
    'Codec',
    'FixedSizeCodec',
    'ArrayCodec',
    'ArrayIterator',
]
