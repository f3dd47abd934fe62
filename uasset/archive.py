"""
Package archive: a seekable little-endian reader plus the version gate.

The archive reads the package preamble (magic, legacy version, object
versions) when it is constructed and then answers "was this field serialized?"
questions for the rest of the header parse. It also owns the shared cursor
that deferred codecs jump around with.
"""

import logging
import struct
from contextlib import contextmanager
from typing import BinaryIO, Iterator, Optional, Union

from .config import ParserLimits
from .errors import (
    AssetIOError,
    InvalidFileError,
    ParseFailureError,
    UnsupportedVersionError,
    UnversionedAssetError,
)
from .versions import (
    LEGACY_VERSION_WITH_UE5_VERSION,
    OLDEST_SUPPORTED_LEGACY_VERSION,
    CustomVersionLayout,
    ObjectVersion,
    ObjectVersionUE5,
    PackageFlags,
    is_supported_legacy_version,
)

logger = logging.getLogger(__name__)

# Identifies an Unreal package (also tells the endianness, we only read little endian)
PACKAGE_FILE_MAGIC = 0x9E2A83C1

_INT16 = struct.Struct('<H')
_INT32 = struct.Struct('<i')
_UINT32 = struct.Struct('<I')
_INT64 = struct.Struct('<q')


class Archive:
    """
    Reader over a seekable binary stream holding an Unreal package.

    Usage:
        archive = Archive(stream)
        if archive.serialized_with(ObjectVersion.VER_UE4_NAME_HASHES_SERIALIZED):
            ...

    Attributes:
        legacy_version: Negative legacy file version (-5 .. -8)
        file_version: UE4 object version the package was saved with
        file_version_ue5: UE5 object version, or None for UE4 packages
        file_licensee_version: Licensee version number
        limits: Sanity limits applied to counts and string lengths
    """

    def __init__(self, stream: BinaryIO, limits: Optional[ParserLimits] = None):
        self.stream = stream
        self.limits = limits if limits is not None else ParserLimits()
        self.legacy_version: int = 0
        self.file_version: ObjectVersion = ObjectVersion.VER_UE4_OLDEST_LOADABLE_PACKAGE
        self.file_version_ue5: Optional[ObjectVersionUE5] = None
        self.file_licensee_version: int = 0
        self._editor_only_data: Optional[bool] = None

        self._read_preamble()

    def _read_preamble(self):
        """Read and validate the magic and the version fields."""
        magic = self.read_uint32()
        if magic != PACKAGE_FILE_MAGIC:
            raise InvalidFileError(magic)

        legacy_version = self.read_int32()
        if not is_supported_legacy_version(legacy_version):
            raise UnsupportedVersionError(legacy_version, 'legacy')
        self.legacy_version = legacy_version

        # Legacy UE3 version, unused
        self.read_int32()

        file_version = self.read_int32()
        file_version_ue5 = 0
        if legacy_version <= LEGACY_VERSION_WITH_UE5_VERSION:
            file_version_ue5 = self.read_int32()
        file_licensee_version = self.read_int32()

        if file_version == 0 and file_version_ue5 == 0 and file_licensee_version == 0:
            raise UnversionedAssetError()

        try:
            self.file_version = ObjectVersion(file_version)
        except ValueError:
            raise UnsupportedVersionError(file_version, 'ue4') from None

        if file_version_ue5 != 0:
            try:
                self.file_version_ue5 = ObjectVersionUE5(file_version_ue5)
            except ValueError:
                raise UnsupportedVersionError(file_version_ue5, 'ue5') from None

        self.file_licensee_version = file_licensee_version

        logger.debug(
            f"Package versions: legacy={legacy_version} ue4={file_version} "
            f"ue5={file_version_ue5} licensee={file_licensee_version}"
        )

    # ------------------------------------------------------------------
    # Version gate
    # ------------------------------------------------------------------

    def serialized_with(self, version: Union[ObjectVersion, ObjectVersionUE5]) -> bool:
        """True when the package was saved at or after the given version."""
        if isinstance(version, ObjectVersionUE5):
            return self.file_version_ue5 is not None and self.file_version_ue5 >= version
        return self.file_version >= version

    def serialized_without(self, version: Union[ObjectVersion, ObjectVersionUE5]) -> bool:
        return not self.serialized_with(version)

    def custom_version_layout(self) -> CustomVersionLayout:
        if self.legacy_version >= OLDEST_SUPPORTED_LEGACY_VERSION:
            return CustomVersionLayout.GUIDS
        return CustomVersionLayout.OPTIMIZED

    @property
    def editor_only_data(self) -> Optional[bool]:
        """Whether editor-only fields are present; None until package flags are read."""
        return self._editor_only_data

    def apply_package_flags(self, package_flags: int):
        """
        Record the package flags' effect on the rest of the parse.

        Raises:
            RuntimeError: If called more than once for the same archive
        """
        if self._editor_only_data is not None:
            raise RuntimeError("Package flags were already applied to this archive")
        self._editor_only_data = not (package_flags & PackageFlags.FILTER_EDITOR_ONLY)

    # ------------------------------------------------------------------
    # Cursor
    # ------------------------------------------------------------------

    def tell(self) -> int:
        try:
            return self.stream.tell()
        except OSError as e:
            raise AssetIOError(f"Failed to query stream position: {e}") from e

    def seek(self, offset: int, whence: int = 0) -> int:
        if whence == 0 and offset < 0:
            raise ParseFailureError(f"Cannot seek to negative offset {offset}")
        try:
            return self.stream.seek(offset, whence)
        except OSError as e:
            raise AssetIOError(f"Failed to seek to {offset}: {e}") from e
        except ValueError as e:
            raise ParseFailureError(f"Invalid seek to {offset}: {e}") from e

    def skip(self, size: int):
        """Move the cursor forward by size bytes."""
        self.seek(size, 1)

    @contextmanager
    def preserve_position(self) -> Iterator[int]:
        """Restore the cursor on exit, whatever the body did with it."""
        position = self.tell()
        try:
            yield position
        finally:
            self.seek(position)

    # ------------------------------------------------------------------
    # Primitive reads
    # ------------------------------------------------------------------

    def read(self, size: int) -> bytes:
        """Read exactly size bytes."""
        if size < 0:
            raise ParseFailureError(f"Negative read size {size}")
        try:
            data = self.stream.read(size)
        except OSError as e:
            raise AssetIOError(f"Failed to read {size} bytes: {e}") from e
        if len(data) != size:
            raise ParseFailureError(
                f"Unexpected end of stream: wanted {size} bytes, got {len(data)}"
            )
        return data

    def read_uint16(self) -> int:
        return _INT16.unpack(self.read(2))[0]

    def read_int32(self) -> int:
        return _INT32.unpack(self.read(4))[0]

    def read_uint32(self) -> int:
        return _UINT32.unpack(self.read(4))[0]

    def read_int64(self) -> int:
        return _INT64.unpack(self.read(8))[0]

    def read_bool32(self) -> bool:
        """Read a 32-bit boolean (UE serializes bool as uint32)."""
        return self.read_uint32() != 0

    def read_count(self) -> int:
        """Read an int32 element count and check it against the limits."""
        return self.check_count(self.read_int32())

    def check_count(self, count: int) -> int:
        if count < 0:
            raise ParseFailureError(f"Negative element count {count}")
        if count > self.limits.max_array_count:
            raise ParseFailureError(
                f"Element count {count} exceeds limit {self.limits.max_array_count}"
            )
        return count

    def check_string_length(self, length: int) -> int:
        if length > self.limits.max_string_length:
            raise ParseFailureError(
                f"String length {length} exceeds limit {self.limits.max_string_length}"
            )
        return length


__all__ = [
    'Archive',
    'PACKAGE_FILE_MAGIC',
]
