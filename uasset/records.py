"""
Import, export and thumbnail table records.

Which fields a record carries depends on the versions the package was saved
with, so these codecs consult the archive's version gate while decoding.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from .archive import Archive
from .codecs import GUID, read_string, skip_string
from .references import (
    NAME_REFERENCE,
    NONE_REFERENCE,
    OBJECT_REFERENCE,
    NameReference,
    ObjectReference,
    resolve_name,
)
from .serialization import Codec
from .versions import ObjectVersion, ObjectVersionUE5


@dataclass
class ObjectImport:
    """Import table entry (FObjectImport)."""
    class_package: NameReference
    class_name: NameReference
    outer: ObjectReference
    object_name: NameReference
    package_name: Optional[NameReference] = None
    import_optional: bool = False

    def to_dict(self, names: List[str]) -> dict:
        return {
            'class_package': resolve_name(names, self.class_package),
            'class_name': resolve_name(names, self.class_name),
            'outer': str(self.outer),
            'object_name': resolve_name(names, self.object_name),
            'package_name': (resolve_name(names, self.package_name)
                             if self.package_name is not None else None),
            'import_optional': self.import_optional,
        }


@dataclass
class ObjectExport:
    """Export table entry (FObjectExport)."""
    class_index: ObjectReference = NONE_REFERENCE
    super_index: ObjectReference = NONE_REFERENCE
    template_index: ObjectReference = NONE_REFERENCE
    outer_index: ObjectReference = NONE_REFERENCE
    object_name: NameReference = field(default_factory=lambda: NameReference(0))
    object_flags: int = 0
    serial_size: int = 0
    serial_offset: int = 0
    script_serialization_start_offset: int = 0
    script_serialization_end_offset: int = 0
    forced_export: bool = False
    not_for_client: bool = False
    not_for_server: bool = False
    is_inherited_instance: bool = False
    package_flags: int = 0
    not_always_loaded_for_editor_game: bool = True
    is_asset: bool = False
    generate_public_hash: bool = False
    first_export_dependency: int = -1
    serialization_before_serialization_dependencies: int = -1
    create_before_serialization_dependencies: int = -1
    serialization_before_create_dependencies: int = -1
    create_before_create_dependencies: int = -1

    def to_dict(self, names: List[str]) -> dict:
        return {
            'class_index': str(self.class_index),
            'super_index': str(self.super_index),
            'template_index': str(self.template_index),
            'outer_index': str(self.outer_index),
            'object_name': resolve_name(names, self.object_name),
            'object_flags': self.object_flags,
            'serial_size': self.serial_size,
            'serial_offset': self.serial_offset,
            'script_serialization_start_offset': self.script_serialization_start_offset,
            'script_serialization_end_offset': self.script_serialization_end_offset,
            'forced_export': self.forced_export,
            'not_for_client': self.not_for_client,
            'not_for_server': self.not_for_server,
            'is_inherited_instance': self.is_inherited_instance,
            'package_flags': self.package_flags,
            'not_always_loaded_for_editor_game': self.not_always_loaded_for_editor_game,
            'is_asset': self.is_asset,
            'generate_public_hash': self.generate_public_hash,
            'first_export_dependency': self.first_export_dependency,
            'serialization_before_serialization_dependencies':
                self.serialization_before_serialization_dependencies,
            'create_before_serialization_dependencies':
                self.create_before_serialization_dependencies,
            'serialization_before_create_dependencies':
                self.serialization_before_create_dependencies,
            'create_before_create_dependencies': self.create_before_create_dependencies,
        }


@dataclass(frozen=True)
class ThumbnailInfo:
    """Thumbnail table entry; file_offset points at the image data."""
    object_class_name: str
    object_path_without_package_name: str
    file_offset: int

    def to_dict(self) -> dict:
        return {
            'object_class_name': self.object_class_name,
            'object_path_without_package_name': self.object_path_without_package_name,
            'file_offset': self.file_offset,
        }


class ObjectImportCodec(Codec):
    """Import record; size varies with the package versions."""

    def parse_seekless(self, archive: Archive, stream_info=None) -> ObjectImport:
        class_package = NAME_REFERENCE.parse_seekless(archive)
        class_name = NAME_REFERENCE.parse_seekless(archive)
        outer = OBJECT_REFERENCE.parse_seekless(archive)
        object_name = NAME_REFERENCE.parse_seekless(archive)

        package_name = None
        if (archive.serialized_with(ObjectVersion.VER_UE4_NON_OUTER_PACKAGE_IMPORT)
                and archive.editor_only_data):
            package_name = NAME_REFERENCE.parse_seekless(archive)

        import_optional = False
        if archive.serialized_with(ObjectVersionUE5.OPTIONAL_RESOURCES):
            import_optional = archive.read_bool32()

        return ObjectImport(
            class_package=class_package,
            class_name=class_name,
            outer=outer,
            object_name=object_name,
            package_name=package_name,
            import_optional=import_optional,
        )

    def skip_with_info(self, archive: Archive, stream_info):
        archive.seek(stream_info.offset)
        self.parse_seekless(archive)


class ObjectExportCodec(Codec):
    """Export record; size varies with the package versions."""

    def parse_seekless(self, archive: Archive, stream_info=None) -> ObjectExport:
        export = ObjectExport()

        export.class_index = OBJECT_REFERENCE.parse_seekless(archive)
        export.super_index = OBJECT_REFERENCE.parse_seekless(archive)
        if archive.serialized_with(ObjectVersion.VER_UE4_TemplateIndex_IN_COOKED_EXPORTS):
            export.template_index = OBJECT_REFERENCE.parse_seekless(archive)
        export.outer_index = OBJECT_REFERENCE.parse_seekless(archive)
        export.object_name = NAME_REFERENCE.parse_seekless(archive)
        export.object_flags = archive.read_uint32()

        if archive.serialized_with(ObjectVersion.VER_UE4_64BIT_EXPORTMAP_SERIALSIZES):
            export.serial_size = archive.read_int64()
            export.serial_offset = archive.read_int64()
        else:
            export.serial_size = archive.read_int32()
            export.serial_offset = archive.read_int32()

        export.forced_export = archive.read_bool32()
        export.not_for_client = archive.read_bool32()
        export.not_for_server = archive.read_bool32()

        if archive.serialized_without(ObjectVersionUE5.REMOVE_OBJECT_EXPORT_PACKAGE_GUID):
            GUID.skip(archive)

        if archive.serialized_with(ObjectVersionUE5.TRACK_OBJECT_EXPORT_IS_INHERITED):
            export.is_inherited_instance = archive.read_bool32()

        export.package_flags = archive.read_uint32()

        if archive.serialized_with(ObjectVersion.VER_UE4_LOAD_FOR_EDITOR_GAME):
            export.not_always_loaded_for_editor_game = archive.read_bool32()

        if archive.serialized_with(ObjectVersion.VER_UE4_COOKED_ASSETS_IN_EDITOR_SUPPORT):
            export.is_asset = archive.read_bool32()

        if archive.serialized_with(ObjectVersionUE5.OPTIONAL_RESOURCES):
            export.generate_public_hash = archive.read_bool32()

        if archive.serialized_with(ObjectVersion.VER_UE4_PRELOAD_DEPENDENCIES_IN_COOKED_EXPORTS):
            export.first_export_dependency = archive.read_int32()
            export.serialization_before_serialization_dependencies = archive.read_int32()
            export.create_before_serialization_dependencies = archive.read_int32()
            export.serialization_before_create_dependencies = archive.read_int32()
            export.create_before_create_dependencies = archive.read_int32()

        if archive.serialized_with(ObjectVersionUE5.SCRIPT_SERIALIZATION_OFFSET):
            export.script_serialization_start_offset = archive.read_int64()
            export.script_serialization_end_offset = archive.read_int64()

        return export

    def skip_with_info(self, archive: Archive, stream_info):
        archive.seek(stream_info.offset)
        self.parse_seekless(archive)


class ThumbnailInfoCodec(Codec):
    """Thumbnail table entry: class name, object path, int32 file offset."""

    def parse_seekless(self, archive: Archive, stream_info=None) -> ThumbnailInfo:
        object_class_name = read_string(archive)
        object_path = read_string(archive)
        file_offset = archive.read_int32()
        return ThumbnailInfo(object_class_name, object_path, file_offset)

    def skip_with_info(self, archive: Archive, stream_info):
        archive.seek(stream_info.offset)
        skip_string(archive)
        skip_string(archive)
        archive.skip(4)


OBJECT_IMPORT = ObjectImportCodec()
OBJECT_EXPORT = ObjectExportCodec()
THUMBNAIL_INFO = ThumbnailInfoCodec()


__all__ = [
    'ObjectImport',
    'ObjectExport',
    'ThumbnailInfo',
    'ObjectImportCodec',
    'ObjectExportCodec',
    'ThumbnailInfoCodec',
    'OBJECT_IMPORT',
    'OBJECT_EXPORT',
    'THUMBNAIL_INFO',
]
