"""
Package file summary (FPackageFileSummary) decoding.

Reads the header of a .uasset / .umap file:
- Package metadata and engine versions
- Name table
- Import and export tables
- Offsets of the tables that are not decoded eagerly (thumbnails, preload
  dependencies, soft references, ...)

Supports packages saved by UE 4.10 through 5.3.
"""

import io
import logging
from dataclasses import dataclass, field
from typing import BinaryIO, Iterator, List, Optional

from .archive import Archive
from .codecs import (
    COMPRESSED_CHUNK,
    ENGINE_VERSION,
    GENERATION_INFO,
    GUID,
    INT32,
    NAME_ENTRY_WITH_HASH,
    STRING,
    EngineVersion,
    custom_version_codec,
    read_string,
)
from .config import ParserLimits, get_config
from .errors import AssetIOError
from .records import OBJECT_EXPORT, OBJECT_IMPORT, THUMBNAIL_INFO, ObjectExport, ObjectImport, ThumbnailInfo
from .references import NameReference, find_name, resolve_name
from .serialization import ArrayCodec, ArrayStreamInfo
from .versions import (
    LEGACY_VERSION_WITHOUT_TEXTURE_ALLOCATIONS,
    ObjectVersion,
    ObjectVersionUE5,
    PackageFlags,
)

logger = logging.getLogger(__name__)

PACKAGE_CLASS_NAME = "Package"
CORE_UOBJECT_PACKAGE_NAME = "/Script/CoreUObject"


@dataclass
class AssetHeader:
    """
    Decoded package summary.

    Usage:
        header = parse_file("Content/Maps/Entry.umap")
        print(header.engine_version)
        for package in header.package_import_iter():
            print(package)

    Optional fields are None when the package's versions (or its editor-only
    data flag) mean they were never serialized.
    """
    archive: Archive = field(repr=False)
    custom_versions: ArrayStreamInfo
    total_header_size: int
    package_name: str
    package_flags: int
    names: List[str]
    soft_object_paths: Optional[ArrayStreamInfo]
    localization_id: Optional[str]
    gatherable_text_data: Optional[ArrayStreamInfo]
    exports: List[ObjectExport]
    imports: List[ObjectImport]
    depends_offset: int
    soft_package_references: Optional[ArrayStreamInfo]
    searchable_names_offset: Optional[int]
    thumbnail_table_offset: int
    generations: ArrayStreamInfo
    engine_version: EngineVersion
    compatible_engine_version: EngineVersion
    compression_flags: int
    compressed_chunks: ArrayStreamInfo
    package_source: int
    additional_packages_to_cook: List[str]
    texture_allocations: Optional[int]
    asset_registry_data_offset: int
    bulk_data_start_offset: int
    world_tile_info_offset: Optional[int]
    chunk_ids: List[int]
    preload_dependencies: Optional[ArrayStreamInfo]
    names_referenced_from_export_data_count: int
    payload_toc_offset: Optional[int]
    data_resource_offset: Optional[int]

    # ------------------------------------------------------------------
    # Version information
    # ------------------------------------------------------------------

    @property
    def legacy_version(self) -> int:
        return self.archive.legacy_version

    @property
    def file_version(self) -> ObjectVersion:
        return self.archive.file_version

    @property
    def file_version_ue5(self) -> Optional[ObjectVersionUE5]:
        return self.archive.file_version_ue5

    @property
    def file_licensee_version(self) -> int:
        return self.archive.file_licensee_version

    @property
    def editor_only_data(self) -> bool:
        return bool(self.archive.editor_only_data)

    @property
    def package_flags_set(self) -> PackageFlags:
        return PackageFlags(self.package_flags)

    # ------------------------------------------------------------------
    # Names
    # ------------------------------------------------------------------

    def find_name(self, query: str) -> Optional[NameReference]:
        """
        Look up a name table entry, ignoring case.

        Args:
            query: Name to look for, without any "_N" instance suffix

        Returns:
            Reference to the first matching entry, or None
        """
        return find_name(self.names, query)

    def resolve_name(self, reference: NameReference) -> str:
        """
        Render a name reference as a string.

        Raises:
            InvalidNameIndexError: If the reference points outside the name table
        """
        return resolve_name(self.names, reference)

    # ------------------------------------------------------------------
    # Derived views
    # ------------------------------------------------------------------

    def package_import_iter(self) -> Iterator[str]:
        """
        Yield the names of the packages this package imports, in table order.

        The package's own import of /Script/CoreUObject is left out.
        """
        package_class = self.find_name(PACKAGE_CLASS_NAME)
        if package_class is None:
            return

        core_uobject = self.find_name(CORE_UOBJECT_PACKAGE_NAME)
        for entry in self.imports:
            if entry.class_name != package_class:
                continue
            if core_uobject is not None and entry.object_name == core_uobject:
                continue
            yield self.resolve_name(entry.object_name)

    def thumbnail_iter(self) -> Iterator[ThumbnailInfo]:
        """
        Lazily read the thumbnail table.

        Seeks to the table immediately; entries are decoded as the iterator
        advances. Seeking the underlying stream while iterating invalidates
        the iterator.
        """
        if self.thumbnail_table_offset <= 0:
            return iter(())
        self.archive.seek(self.thumbnail_table_offset)
        return ArrayCodec(THUMBNAIL_INFO).iter_inline(self.archive)

    def to_dict(self) -> dict:
        """Convert the header to a JSON-serializable dictionary."""

        def descriptor(info: Optional[ArrayStreamInfo]) -> Optional[dict]:
            return info.to_dict() if info is not None else None

        return {
            'legacy_version': self.legacy_version,
            'file_version': int(self.file_version),
            'file_version_name': self.file_version.name,
            'file_version_ue5': int(self.file_version_ue5) if self.file_version_ue5 is not None else None,
            'file_licensee_version': self.file_licensee_version,
            'custom_versions': descriptor(self.custom_versions),
            'total_header_size': self.total_header_size,
            'package_name': self.package_name,
            'package_flags': self.package_flags,
            'package_flag_names': [flag.name for flag in PackageFlags
                                   if flag and flag in self.package_flags_set],
            'editor_only_data': self.editor_only_data,
            'names': list(self.names),
            'soft_object_paths': descriptor(self.soft_object_paths),
            'localization_id': self.localization_id,
            'gatherable_text_data': descriptor(self.gatherable_text_data),
            'exports': [export.to_dict(self.names) for export in self.exports],
            'imports': [entry.to_dict(self.names) for entry in self.imports],
            'depends_offset': self.depends_offset,
            'soft_package_references': descriptor(self.soft_package_references),
            'searchable_names_offset': self.searchable_names_offset,
            'thumbnail_table_offset': self.thumbnail_table_offset,
            'generations': descriptor(self.generations),
            'engine_version': str(self.engine_version),
            'compatible_engine_version': str(self.compatible_engine_version),
            'compression_flags': self.compression_flags,
            'compressed_chunks': descriptor(self.compressed_chunks),
            'package_source': self.package_source,
            'additional_packages_to_cook': list(self.additional_packages_to_cook),
            'texture_allocations': self.texture_allocations,
            'asset_registry_data_offset': self.asset_registry_data_offset,
            'bulk_data_start_offset': self.bulk_data_start_offset,
            'world_tile_info_offset': self.world_tile_info_offset,
            'chunk_ids': list(self.chunk_ids),
            'preload_dependencies': descriptor(self.preload_dependencies),
            'names_referenced_from_export_data_count': self.names_referenced_from_export_data_count,
            'payload_toc_offset': self.payload_toc_offset,
            'data_resource_offset': self.data_resource_offset,
        }


def parse(stream: BinaryIO, limits: Optional[ParserLimits] = None) -> AssetHeader:
    """
    Parse a package summary from a seekable binary stream.

    The stream must stay open while the header's lazy iterators are used.

    Args:
        stream: Seekable stream positioned anywhere (reading starts at 0)
        limits: Sanity limits (default: from the loaded configuration)

    Returns:
        AssetHeader

    Raises:
        UAssetError: Any decoding failure; no partial header is returned
    """
    if limits is None:
        limits = get_config().parser

    try:
        stream.seek(0)
    except OSError as e:
        raise AssetIOError(f"Stream is not seekable: {e}") from e

    archive = Archive(stream, limits)

    custom_versions = ArrayStreamInfo.from_current_position(archive)
    ArrayCodec(custom_version_codec(archive.custom_version_layout())).skip_with_info(
        archive, custom_versions)

    total_header_size = archive.read_int32()
    package_name = read_string(archive)
    package_flags = archive.read_uint32()
    archive.apply_package_flags(package_flags)

    if archive.serialized_with(ObjectVersion.VER_UE4_NAME_HASHES_SERIALIZED):
        names = ArrayCodec(NAME_ENTRY_WITH_HASH).parse_indirect(archive)
    else:
        names = ArrayCodec(STRING).parse_indirect(archive)

    soft_object_paths = None
    if archive.serialized_with(ObjectVersionUE5.ADD_SOFTOBJECTPATH_LIST):
        soft_object_paths = ArrayStreamInfo.from_indirect_reference(archive, checked=False)

    localization_id = None
    if (archive.serialized_with(ObjectVersion.VER_UE4_ADDED_PACKAGE_SUMMARY_LOCALIZATION_ID)
            and archive.editor_only_data):
        localization_id = read_string(archive)

    gatherable_text_data = None
    if archive.serialized_with(ObjectVersion.VER_UE4_SERIALIZE_TEXT_IN_PACKAGES):
        gatherable_text_data = ArrayStreamInfo.from_indirect_reference(archive, checked=False)

    exports = ArrayCodec(OBJECT_EXPORT).parse_indirect(archive)
    imports = ArrayCodec(OBJECT_IMPORT).parse_indirect(archive)
    depends_offset = archive.read_int32()

    soft_package_references = None
    if archive.serialized_with(ObjectVersion.VER_UE4_ADD_STRING_ASSET_REFERENCES_MAP):
        soft_package_references = ArrayStreamInfo.from_indirect_reference(archive, checked=False)

    searchable_names_offset = None
    if archive.serialized_with(ObjectVersion.VER_UE4_ADDED_SEARCHABLE_NAMES):
        searchable_names_offset = archive.read_int32()

    thumbnail_table_offset = archive.read_int32()

    GUID.skip(archive)
    if archive.serialized_with(ObjectVersion.VER_UE4_ADDED_PACKAGE_OWNER) and archive.editor_only_data:
        # Persistent GUID
        GUID.skip(archive)
        if archive.serialized_without(ObjectVersion.VER_UE4_NON_OUTER_PACKAGE_IMPORT):
            # Owner persistent GUID
            GUID.skip(archive)

    generations = ArrayStreamInfo.from_current_position(archive)
    ArrayCodec(GENERATION_INFO).skip_with_info(archive, generations)

    if archive.serialized_with(ObjectVersion.VER_UE4_ENGINE_VERSION_OBJECT):
        engine_version = ENGINE_VERSION.parse_inline(archive)
    else:
        engine_version = EngineVersion.from_changelist(archive.read_uint32())

    if archive.serialized_with(ObjectVersion.VER_UE4_PACKAGE_SUMMARY_HAS_COMPATIBLE_ENGINE_VERSION):
        compatible_engine_version = ENGINE_VERSION.parse_inline(archive)
    else:
        compatible_engine_version = engine_version

    compression_flags = archive.read_uint32()

    compressed_chunks = ArrayStreamInfo.from_current_position(archive)
    ArrayCodec(COMPRESSED_CHUNK).skip_with_info(archive, compressed_chunks)

    package_source = archive.read_uint32()
    additional_packages_to_cook = ArrayCodec(STRING).parse_inline(archive)

    texture_allocations = None
    if archive.legacy_version > LEGACY_VERSION_WITHOUT_TEXTURE_ALLOCATIONS:
        texture_allocations = archive.read_int32()

    asset_registry_data_offset = archive.read_int32()
    bulk_data_start_offset = archive.read_int64()

    world_tile_info_offset = None
    if archive.serialized_with(ObjectVersion.VER_UE4_WORLD_LEVEL_INFO):
        offset = archive.read_int32()
        if offset > 0:
            world_tile_info_offset = offset

    if archive.serialized_with(ObjectVersion.VER_UE4_CHANGED_CHUNKID_TO_BE_AN_ARRAY_OF_CHUNKIDS):
        chunk_ids = ArrayCodec(INT32).parse_inline(archive)
    elif archive.serialized_with(ObjectVersion.VER_UE4_ADDED_CHUNKID_TO_ASSETDATA_AND_UPACKAGE):
        chunk_id = archive.read_int32()
        chunk_ids = [chunk_id] if chunk_id >= 0 else []
    else:
        chunk_ids = []

    preload_dependencies = None
    if archive.serialized_with(ObjectVersion.VER_UE4_PRELOAD_DEPENDENCIES_IN_COOKED_EXPORTS):
        preload_dependencies = ArrayStreamInfo.from_indirect_reference(archive, checked=False)

    if archive.serialized_with(ObjectVersionUE5.NAMES_REFERENCED_FROM_EXPORT_DATA):
        names_referenced_from_export_data_count = archive.read_int32()
    else:
        names_referenced_from_export_data_count = len(names)

    payload_toc_offset = None
    if archive.serialized_with(ObjectVersionUE5.PAYLOAD_TOC):
        payload_toc_offset = archive.read_int64()

    data_resource_offset = None
    if archive.serialized_with(ObjectVersionUE5.DATA_RESOURCES):
        offset = archive.read_int32()
        if offset > 0:
            data_resource_offset = offset

    logger.debug(
        f"Parsed package {package_name!r}: {len(names)} names, "
        f"{len(imports)} imports, {len(exports)} exports"
    )

    return AssetHeader(
        archive=archive,
        custom_versions=custom_versions,
        total_header_size=total_header_size,
        package_name=package_name,
        package_flags=package_flags,
        names=names,
        soft_object_paths=soft_object_paths,
        localization_id=localization_id,
        gatherable_text_data=gatherable_text_data,
        exports=exports,
        imports=imports,
        depends_offset=depends_offset,
        soft_package_references=soft_package_references,
        searchable_names_offset=searchable_names_offset,
        thumbnail_table_offset=thumbnail_table_offset,
        generations=generations,
        engine_version=engine_version,
        compatible_engine_version=compatible_engine_version,
        compression_flags=compression_flags,
        compressed_chunks=compressed_chunks,
        package_source=package_source,
        additional_packages_to_cook=additional_packages_to_cook,
        texture_allocations=texture_allocations,
        asset_registry_data_offset=asset_registry_data_offset,
        bulk_data_start_offset=bulk_data_start_offset,
        world_tile_info_offset=world_tile_info_offset,
        chunk_ids=chunk_ids,
        preload_dependencies=preload_dependencies,
        names_referenced_from_export_data_count=names_referenced_from_export_data_count,
        payload_toc_offset=payload_toc_offset,
        data_resource_offset=data_resource_offset,
    )


def parse_bytes(data: bytes, limits: Optional[ParserLimits] = None) -> AssetHeader:
    """Parse a package summary from an in-memory copy of the file."""
    return parse(io.BytesIO(data), limits)


def parse_file(file_path: str, limits: Optional[ParserLimits] = None) -> AssetHeader:
    """
    Load and parse a .uasset / .umap file.

    The whole file is read into memory so the header's lazy iterators keep
    working after this returns.

    Args:
        file_path: Path to the asset
        limits: Sanity limits (default: from the loaded configuration)

    Raises:
        AssetIOError: If the file cannot be read
        UAssetError: If it cannot be decoded
    """
    try:
        with open(file_path, 'rb') as f:
            data = f.read()
    except OSError as e:
        raise AssetIOError(f"Failed to read {file_path}: {e}") from e

    return parse_bytes(data, limits)


__all__ = [
    'AssetHeader',
    'parse',
    'parse_bytes',
    'parse_file',
]
