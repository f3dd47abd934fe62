"""
Name and object references.

Names are stored once in the package's name table and referenced by index.
An FName on disk is (index, number): number 0 means "no suffix", any other
value N renders as "<name>_<N-1>".

Object references are signed package indices into the import and export
tables.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from .archive import Archive
from .errors import InvalidNameIndexError
from .serialization import FixedSizeCodec


@dataclass(frozen=True)
class NameReference:
    """Index into the name table plus optional instance number."""
    index: int
    number: Optional[int] = None


def resolve_name(names: List[str], reference: NameReference) -> str:
    """
    Render a name reference against a name table.

    Raises:
        InvalidNameIndexError: If the index is outside the table
    """
    if reference.index < 0 or reference.index >= len(names):
        raise InvalidNameIndexError(reference.index)

    name = names[reference.index]
    if reference.number is not None:
        return f"{name}_{reference.number - 1}"
    return name


def find_name(names: List[str], query: str) -> Optional[NameReference]:
    """
    Find the first table entry matching query, exactly or ignoring case.

    Numbered suffixes are not split off the query, so "Foo_2" only matches a
    table entry spelled "Foo_2".
    """
    folded = query.casefold()
    for index, name in enumerate(names):
        if name == query or name.casefold() == folded:
            return NameReference(index)
    return None


class ObjectReferenceKind(Enum):
    NONE = "none"
    EXPORT = "export"
    IMPORT = "import"


@dataclass(frozen=True)
class ObjectReference:
    """Decoded package index (FPackageIndex)."""
    kind: ObjectReferenceKind
    index: int = 0

    @classmethod
    def decode(cls, value: int) -> 'ObjectReference':
        if value == 0:
            return NONE_REFERENCE
        if value > 0:
            return cls(ObjectReferenceKind.EXPORT, value - 1)
        return cls(ObjectReferenceKind.IMPORT, -(value + 1))

    def encode(self) -> int:
        if self.kind == ObjectReferenceKind.EXPORT:
            return self.index + 1
        if self.kind == ObjectReferenceKind.IMPORT:
            return -(self.index + 1)
        return 0

    @property
    def is_none(self) -> bool:
        return self.kind == ObjectReferenceKind.NONE

    def __str__(self):
        if self.kind == ObjectReferenceKind.NONE:
            return "None"
        return f"{self.kind.value}[{self.index}]"


NONE_REFERENCE = ObjectReference(ObjectReferenceKind.NONE)


class NameReferenceCodec(FixedSizeCodec):
    """uint32 index + uint32 number."""
    size = 8

    def parse_seekless(self, archive: Archive, stream_info=None) -> NameReference:
        index = archive.read_uint32()
        number = archive.read_uint32()
        return NameReference(index, number if number != 0 else None)


class ObjectReferenceCodec(FixedSizeCodec):
    """int32 package index."""
    size = 4

    def parse_seekless(self, archive: Archive, stream_info=None) -> ObjectReference:
        return ObjectReference.decode(archive.read_int32())


NAME_REFERENCE = NameReferenceCodec()
OBJECT_REFERENCE = ObjectReferenceCodec()


__all__ = [
    'NameReference',
    'ObjectReference',
    'ObjectReferenceKind',
    'NONE_REFERENCE',
    'resolve_name',
    'find_name',
    'NameReferenceCodec',
    'ObjectReferenceCodec',
    'NAME_REFERENCE',
    'OBJECT_REFERENCE',
]
