"""
uasset Package

Decoder for the package file summary of Unreal Engine .uasset / .umap files
saved by UE 4.10 through 5.3.
"""

__version__ = '0.3.0'
__author__ = 'uasset Team'

from uasset.errors import (
    UAssetError,
    InvalidFileError,
    UnsupportedVersionError,
    UnversionedAssetError,
    InvalidStringError,
    InvalidNameIndexError,
    AssetIOError,
    ParseFailureError,
    IteratorInvalidatedError,
)
from uasset.versions import ObjectVersion, ObjectVersionUE5, PackageFlags
from uasset.references import NameReference, ObjectReference, ObjectReferenceKind
from uasset.records import ObjectImport, ObjectExport, ThumbnailInfo
from uasset.codecs import EngineVersion
from uasset.header import AssetHeader, parse, parse_bytes, parse_file

__all__ = [
    'AssetHeader',
    'parse',
    'parse_bytes',
    'parse_file',
    'NameReference',
    'ObjectReference',
    'ObjectReferenceKind',
    'ObjectImport',
    'ObjectExport',
    'ThumbnailInfo',
    'EngineVersion',
    'ObjectVersion',
    'ObjectVersionUE5',
    'PackageFlags',
    'UAssetError',
    'InvalidFileError',
    'UnsupportedVersionError',
    'UnversionedAssetError',
    'InvalidStringError',
    'InvalidNameIndexError',
    'AssetIOError',
    'ParseFailureError',
    'IteratorInvalidatedError',
    '__version__',
]
