"""
Codecs for the primitive records found in a package summary.

Strings are serialized with a signed length prefix:

- 0: empty string
- > 0: that many single-byte characters, including a trailing NUL
- < 0: that many UCS-2 code units, including a trailing NUL

UCS-2 strings are transcoded to UTF-8 with numpy bit slicing and then decoded
strictly, so lone surrogates are rejected rather than replaced.
"""

from dataclasses import dataclass
from typing import Optional

import numpy as np

from .archive import Archive
from .errors import InvalidStringError
from .serialization import Codec, FixedSizeCodec, SingleItemStreamInfo
from .versions import CustomVersionLayout


# Top bit of a saved changelist marks a licensee build
LICENSEE_BIT_MASK = 0x80000000
CHANGELIST_MASK = 0x7FFFFFFF


# ---------------------------------------------------------------------------
# Record types
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Guid:
    """Unreal GUID (four uint32 words)."""
    a: int = 0
    b: int = 0
    c: int = 0
    d: int = 0

    def __str__(self):
        return f"{self.a:08X}{self.b:08X}{self.c:08X}{self.d:08X}"


@dataclass(frozen=True)
class CustomVersion:
    """Custom version entry; friendly_name only exists in the GUIDS layout."""
    key: Guid
    version: int
    friendly_name: Optional[str] = None


@dataclass(frozen=True)
class GenerationInfo:
    """Package generation info."""
    export_count: int = 0
    name_count: int = 0


@dataclass(frozen=True)
class CompressedChunk:
    """Legacy compressed chunk descriptor."""
    uncompressed_offset: int = 0
    uncompressed_size: int = 0
    compressed_offset: int = 0
    compressed_size: int = 0


@dataclass(frozen=True)
class EngineVersion:
    """Engine version a package was saved (or is compatible) with."""
    major: int = 0
    minor: int = 0
    patch: int = 0
    changelist: int = 0
    is_licensee_version: bool = False
    branch: str = ""

    @classmethod
    def from_changelist(cls, value: int) -> 'EngineVersion':
        """Packages older than the engine version object only store a changelist."""
        return cls(
            major=4,
            minor=0,
            patch=0,
            changelist=value & CHANGELIST_MASK,
            is_licensee_version=bool(value & LICENSEE_BIT_MASK),
        )

    def __str__(self):
        text = f"{self.major}.{self.minor}.{self.patch}-{self.changelist}"
        if self.branch:
            text += f"+{self.branch}"
        return text

    def to_dict(self) -> dict:
        return {
            'major': self.major,
            'minor': self.minor,
            'patch': self.patch,
            'changelist': self.changelist,
            'is_licensee_version': self.is_licensee_version,
            'branch': self.branch,
        }


# ---------------------------------------------------------------------------
# Strings
# ---------------------------------------------------------------------------

def ucs2_to_utf8(units: np.ndarray) -> bytes:
    """
    Transcode UCS-2 code units to UTF-8 bytes.

    Each unit becomes 1, 2 or 3 bytes depending on its magnitude. Output
    positions come from a cumulative sum of the widths, so every unit is
    written in one vectorised pass per width class. Surrogate units are
    encoded like any other 3-byte value and fail strict UTF-8 decoding later.
    """
    units = units.astype(np.uint32)
    if units.size == 0:
        return b""

    widths = np.where(units < 0x80, 1, np.where(units < 0x800, 2, 3))
    ends = np.cumsum(widths)
    starts = ends - widths
    out = np.empty(int(ends[-1]), dtype=np.uint8)

    one = widths == 1
    out[starts[one]] = units[one].astype(np.uint8)

    two = widths == 2
    pos, val = starts[two], units[two]
    out[pos] = (0xC0 | (val >> 6)).astype(np.uint8)
    out[pos + 1] = (0x80 | (val & 0x3F)).astype(np.uint8)

    three = widths == 3
    pos, val = starts[three], units[three]
    out[pos] = (0xE0 | (val >> 12)).astype(np.uint8)
    out[pos + 1] = (0x80 | ((val >> 6) & 0x3F)).astype(np.uint8)
    out[pos + 2] = (0x80 | (val & 0x3F)).astype(np.uint8)

    return out.tobytes()


def read_string(archive: Archive) -> str:
    """Read a length-prefixed string at the cursor."""
    length = archive.read_int32()
    if length == 0:
        return ""

    if length > 0:
        archive.check_string_length(length)
        data = archive.read(length - 1)
        # Trailing NUL
        archive.read(1)
    else:
        archive.check_string_length(-length)
        raw = archive.read((-length - 1) * 2)
        archive.read(2)
        data = ucs2_to_utf8(np.frombuffer(raw, dtype='<u2'))

    try:
        return data.decode('utf-8')
    except UnicodeDecodeError as e:
        raise InvalidStringError(f"Invalid string data: {e}") from e


def skip_string(archive: Archive):
    """Move past a length-prefixed string without decoding it."""
    length = archive.read_int32()
    if length < 0:
        archive.skip(-length * 2)
    else:
        archive.skip(length)


class StringCodec(Codec):
    """Length-prefixed string."""

    def parse_seekless(self, archive, stream_info=None) -> str:
        return read_string(archive)

    def skip_with_info(self, archive, stream_info):
        archive.seek(stream_info.offset)
        skip_string(archive)


class NameEntryWithHashCodec(Codec):
    """Name table entry followed by a uint32 hash (hash discarded)."""

    def parse_seekless(self, archive, stream_info=None) -> str:
        name = read_string(archive)
        archive.skip(4)
        return name

    def skip_with_info(self, archive, stream_info):
        archive.seek(stream_info.offset)
        skip_string(archive)
        archive.skip(4)


# ---------------------------------------------------------------------------
# Fixed size records
# ---------------------------------------------------------------------------

class Int32Codec(FixedSizeCodec):
    size = 4

    def parse_seekless(self, archive, stream_info=None) -> int:
        return archive.read_int32()


class GuidCodec(FixedSizeCodec):
    size = 16

    def parse_seekless(self, archive, stream_info=None) -> Guid:
        return Guid(
            archive.read_uint32(),
            archive.read_uint32(),
            archive.read_uint32(),
            archive.read_uint32(),
        )


class GenerationInfoCodec(FixedSizeCodec):
    size = 8

    def parse_seekless(self, archive, stream_info=None) -> GenerationInfo:
        return GenerationInfo(archive.read_int32(), archive.read_int32())


class CompressedChunkCodec(FixedSizeCodec):
    size = 16

    def parse_seekless(self, archive, stream_info=None) -> CompressedChunk:
        return CompressedChunk(
            archive.read_int32(),
            archive.read_int32(),
            archive.read_int32(),
            archive.read_int32(),
        )


class OptimizedCustomVersionCodec(FixedSizeCodec):
    """Custom version as GUID + int32."""
    size = 20

    def parse_seekless(self, archive, stream_info=None) -> CustomVersion:
        key = GUID.parse_seekless(archive)
        return CustomVersion(key, archive.read_int32())


class GuidsCustomVersionCodec(Codec):
    """Custom version as GUID + int32 + friendly name."""

    def parse_seekless(self, archive, stream_info=None) -> CustomVersion:
        key = GUID.parse_seekless(archive)
        version = archive.read_int32()
        return CustomVersion(key, version, read_string(archive))

    def skip_with_info(self, archive, stream_info):
        archive.seek(stream_info.offset + GUID.size + INT32.size)
        skip_string(archive)


class EngineVersionCodec(Codec):
    """uint16 major/minor/patch, uint32 changelist, branch string."""

    # Fixed part before the branch name
    base_size = 10

    def parse_seekless(self, archive, stream_info=None) -> EngineVersion:
        major = archive.read_uint16()
        minor = archive.read_uint16()
        patch = archive.read_uint16()
        changelist = archive.read_uint32()
        branch = read_string(archive)
        return EngineVersion(
            major=major,
            minor=minor,
            patch=patch,
            changelist=changelist & CHANGELIST_MASK,
            is_licensee_version=bool(changelist & LICENSEE_BIT_MASK),
            branch=branch,
        )

    def skip_with_info(self, archive, stream_info: SingleItemStreamInfo):
        archive.seek(stream_info.offset + self.base_size)
        skip_string(archive)


# Shared codec instances
STRING = StringCodec()
NAME_ENTRY_WITH_HASH = NameEntryWithHashCodec()
INT32 = Int32Codec()
GUID = GuidCodec()
GENERATION_INFO = GenerationInfoCodec()
COMPRESSED_CHUNK = CompressedChunkCodec()
ENGINE_VERSION = EngineVersionCodec()
CUSTOM_VERSION_OPTIMIZED = OptimizedCustomVersionCodec()
CUSTOM_VERSION_GUIDS = GuidsCustomVersionCodec()


def custom_version_codec(layout: CustomVersionLayout) -> Codec:
    """Pick the custom version codec for a layout."""
    if layout == CustomVersionLayout.GUIDS:
        return CUSTOM_VERSION_GUIDS
    return CUSTOM_VERSION_OPTIMIZED


__all__ = [
    'Guid',
    'CustomVersion',
    'GenerationInfo',
    'CompressedChunk',
    'EngineVersion',
    'ucs2_to_utf8',
    'read_string',
    'skip_string',
    'StringCodec',
    'NameEntryWithHashCodec',
    'Int32Codec',
    'GuidCodec',
    'GenerationInfoCodec',
    'CompressedChunkCodec',
    'OptimizedCustomVersionCodec',
    'GuidsCustomVersionCodec',
    'EngineVersionCodec',
    'STRING',
    'NAME_ENTRY_WITH_HASH',
    'INT32',
    'GUID',
    'GENERATION_INFO',
    'COMPRESSED_CHUNK',
    'ENGINE_VERSION',
    'CUSTOM_VERSION_OPTIMIZED',
    'CUSTOM_VERSION_GUIDS',
    'custom_version_codec',
]
