"""
Exceptions raised while decoding package summaries.

Every exception derives from UAssetError so callers can catch one type per
file and move on to the next asset.
"""

from typing import Optional


class UAssetError(Exception):
    """Base class for all package decoding errors."""


class InvalidFileError(UAssetError):
    """The stream does not start with the package file magic."""

    def __init__(self, magic: Optional[int] = None):
        self.magic = magic
        if magic is None:
            super().__init__("Not an Unreal package file")
        else:
            super().__init__(f"Not an Unreal package file (magic {magic:08X})")


class UnsupportedVersionError(UAssetError):
    """
    A version field names a format this decoder cannot read.

    Attributes:
        version: The offending serialized value
        kind: Which version line it came from: 'legacy', 'ue4' or 'ue5'
    """

    def __init__(self, version: int, kind: str = 'ue4'):
        self.version = version
        self.kind = kind
        super().__init__(f"Unsupported {kind} version: {version}")


class UnversionedAssetError(UAssetError):
    """The asset was saved without version information (cooked unversioned)."""

    def __init__(self):
        super().__init__("Asset has no version information")


class InvalidStringError(UAssetError):
    """A serialized string could not be decoded."""


class InvalidNameIndexError(UAssetError):
    """A name reference points outside the name table."""

    def __init__(self, index: int):
        self.index = index
        super().__init__(f"Name index {index} is out of range")


class AssetIOError(UAssetError):
    """The underlying stream failed to read or seek."""


class ParseFailureError(UAssetError):
    """The header is structurally inconsistent (short read, bad count, etc.)."""


class IteratorInvalidatedError(ParseFailureError):
    """A lazy array iterator was advanced after the shared cursor moved."""

    def __init__(self, expected: int, actual: int):
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Archive cursor moved during iteration (expected {expected}, at {actual})"
        )


__all__ = [
    'UAssetError',
    'InvalidFileError',
    'UnsupportedVersionError',
    'UnversionedAssetError',
    'InvalidStringError',
    'InvalidNameIndexError',
    'AssetIOError',
    'ParseFailureError',
    'IteratorInvalidatedError',
]
