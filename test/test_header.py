"""
Tests for package summary parsing

Tests for every supported engine generation, the version and editor-only
gates of individual fields, the derived views (package imports, thumbnails)
and failure handling.
"""

import io
import json
import pytest
import sys
import os

# Add the parent directory to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from uasset import (
    AssetHeader,
    EngineVersion,
    InvalidFileError,
    InvalidNameIndexError,
    IteratorInvalidatedError,
    ObjectReference,
    ObjectReferenceKind,
    ObjectVersion,
    ObjectVersionUE5,
    PackageFlags,
    ParseFailureError,
    AssetIOError,
    ThumbnailInfo,
    UnsupportedVersionError,
    UnversionedAssetError,
    parse,
    parse_bytes,
    parse_file,
)
from uasset.codecs import custom_version_codec
from uasset.config import ParserLimits
from uasset.serialization import ArrayCodec, ArrayStreamInfo

from package_writer import (
    ENGINE_GENERATIONS,
    FILTER_EDITOR_ONLY,
    ExportSpec,
    ImportSpec,
    PackageWriter,
    sample_writer,
)

SAMPLE_NAMES = ["/Game/A/B", "/Script/CoreUObject", "Package", "Texture2D", "X",
                "/Script/Engine", "Asset", "None"]
COOKED_FLAGS = FILTER_EDITOR_ONLY | int(PackageFlags.COOKED)


def import_ref(index: int) -> ObjectReference:
    return ObjectReference(ObjectReferenceKind.IMPORT, index)


class TestEngineGenerations:
    """Test a complete package for every supported engine release."""

    @pytest.mark.parametrize("release,ue4,ue5,legacy", ENGINE_GENERATIONS,
                             ids=[g[0] for g in ENGINE_GENERATIONS])
    def test_parse_generation(self, release, ue4, ue5, legacy):
        """Test parsing a sample package saved by each release."""
        writer = sample_writer(release, names_referenced_from_export_data_count=len(SAMPLE_NAMES))
        data = writer.build()
        header = parse_bytes(data)

        assert header.legacy_version == legacy
        assert header.file_version == ObjectVersion(ue4)
        assert header.file_version_ue5 == (ObjectVersionUE5(ue5) if ue5 else None)
        assert header.editor_only_data is True
        assert header.package_name == "/Game/Test/Asset"
        assert header.total_header_size == len(data)
        assert header.names == SAMPLE_NAMES

        assert len(header.imports) == 3
        assert header.imports[2].outer == import_ref(0)
        assert header.resolve_name(header.imports[2].class_name) == "Texture2D"

        assert len(header.exports) == 1
        export = header.exports[0]
        assert header.resolve_name(export.object_name) == "Asset"
        assert export.class_index == import_ref(2)
        assert export.object_flags == 0x1
        assert export.serial_size == 1234
        assert export.serial_offset == 5678
        assert export.is_asset == (ue4 >= 485)

        assert list(header.package_import_iter()) == ["/Game/A/B"]

        expected_version = EngineVersion(4, 27, 2, 18319896, False, "++UE4+Release-4.27")
        assert header.engine_version == expected_version
        assert header.compatible_engine_version == expected_version
        assert header.package_source == 0x1234ABCD
        assert header.names_referenced_from_export_data_count == len(SAMPLE_NAMES)
        assert header.custom_versions.count == 2
        assert header.generations.count == 1

        assert (header.localization_id is not None) == (ue4 >= 516)
        assert (header.searchable_names_offset is not None) == (ue4 >= 510)
        assert (header.preload_dependencies is not None) == (ue4 >= 507)
        assert (header.soft_object_paths is not None) == (ue5 >= 1008)
        assert (header.payload_toc_offset is not None) == (ue5 >= 1002)
        assert (header.texture_allocations is not None) == (legacy > -7)
        assert header.gatherable_text_data == ArrayStreamInfo(0, 0)
        assert header.soft_package_references == ArrayStreamInfo(0, 0)
        assert header.world_tile_info_offset is None
        assert header.data_resource_offset is None
        assert header.chunk_ids == []

    @pytest.mark.parametrize("release", [g[0] for g in ENGINE_GENERATIONS])
    def test_cooked_generation(self, release):
        """Test the same package with editor-only data filtered out."""
        header = parse_bytes(sample_writer(release, package_flags=COOKED_FLAGS).build())
        assert header.editor_only_data is False
        assert header.localization_id is None
        assert all(entry.package_name is None for entry in header.imports)
        assert list(header.package_import_iter()) == ["/Game/A/B"]

    def test_parse_from_stream(self):
        """Test parsing a stream that is not positioned at the start."""
        stream = io.BytesIO(sample_writer("4.27").build())
        stream.seek(17)
        header = parse(stream)
        assert isinstance(header, AssetHeader)
        assert header.names == SAMPLE_NAMES


class TestSummaryFields:
    """Test individual gated summary fields."""

    def test_localization_id(self):
        header = parse_bytes(PackageWriter(file_version=516, localization_id="ABCDEF").build())
        assert header.localization_id == "ABCDEF"

    def test_localization_id_cooked(self):
        header = parse_bytes(PackageWriter(file_version=516, package_flags=COOKED_FLAGS).build())
        assert header.localization_id is None

    @pytest.mark.parametrize("file_version", [517, 518, 519, 520, 522])
    def test_persistent_guids(self, file_version):
        """Test that persistent and owner GUIDs are consumed where present."""
        writer = sample_writer("4.27", file_version=file_version, additional_packages_to_cook=["/Game/Extra"])
        header = parse_bytes(writer.build())
        assert header.generations.count == 1
        assert header.additional_packages_to_cook == ["/Game/Extra"]
        assert header.package_source == 0x1234ABCD

    def test_engine_version_from_changelist(self):
        """Test packages older than the engine version object."""
        writer = PackageWriter(file_version=300, legacy_version=-6, engine_changelist=0x80000000 | 1234)
        header = parse_bytes(writer.build())
        expected = EngineVersion(4, 0, 0, 1234, True, "")
        assert header.engine_version == expected
        assert header.compatible_engine_version == expected

    def test_compatible_version_copied(self):
        """Test that the compatible version falls back to the saved version."""
        writer = PackageWriter(file_version=400, legacy_version=-6, engine_version=(4, 7, 1, 99, "b"))
        header = parse_bytes(writer.build())
        assert header.engine_version == EngineVersion(4, 7, 1, 99, False, "b")
        assert header.compatible_engine_version == header.engine_version

    def test_compatible_version_separate(self):
        writer = PackageWriter(
            file_version=522,
            engine_version=(4, 27, 2, 100, "main"),
            compatible_engine_version=(4, 27, 0, 50, "main"),
        )
        header = parse_bytes(writer.build())
        assert str(header.engine_version) == "4.27.2-100+main"
        assert str(header.compatible_engine_version) == "4.27.0-50+main"

    def test_texture_allocations(self):
        """Test that texture allocations are only read for legacy -6 and older."""
        header = parse_bytes(PackageWriter(file_version=504, legacy_version=-6, texture_allocations=3).build())
        assert header.texture_allocations == 3
        header = parse_bytes(PackageWriter(file_version=504, legacy_version=-7).build())
        assert header.texture_allocations is None

    @pytest.mark.parametrize("file_version,chunk_ids,chunk_id,expected", [
        (522, [1, 2, 3], -1, [1, 2, 3]),
        (326, [], -1, []),
        (300, [], 5, [5]),
        (300, [], -1, []),
        (278, [], 0, [0]),
        (250, [], 5, []),
    ])
    def test_chunk_ids(self, file_version, chunk_ids, chunk_id, expected):
        """Test the three chunk id layouts."""
        writer = PackageWriter(file_version=file_version, legacy_version=-6,
                               chunk_ids=chunk_ids, chunk_id=chunk_id, asset_registry_data_offset=77)
        header = parse_bytes(writer.build())
        assert header.chunk_ids == expected
        assert header.asset_registry_data_offset == 77

    @pytest.mark.parametrize("file_version,offset,expected", [
        (522, 0, None),
        (522, -5, None),
        (522, 4096, 4096),
        (224, 12, 12),
        (223, 12, None),
    ])
    def test_world_tile_info(self, file_version, offset, expected):
        """Test that non-positive world tile offsets mean absent."""
        writer = PackageWriter(file_version=file_version, legacy_version=-6, world_tile_info_offset=offset)
        header = parse_bytes(writer.build())
        assert header.world_tile_info_offset == expected

    def test_bulk_data_start_offset(self):
        header = parse_bytes(PackageWriter(bulk_data_start_offset=2 ** 40).build())
        assert header.bulk_data_start_offset == 2 ** 40

    def test_recorded_descriptors(self):
        """Test count/offset pairs that are recorded but not decoded."""
        writer = PackageWriter(
            file_version=522,
            file_version_ue5=1008,
            soft_object_paths=(3, 500),
            gatherable_text_data=(2, 600),
            soft_package_references=(4, 700),
            preload_dependencies=(-1, 0),
            searchable_names_offset=800,
            depends_offset=900,
        )
        header = parse_bytes(writer.build())
        assert header.soft_object_paths == ArrayStreamInfo(500, 3)
        assert header.gatherable_text_data == ArrayStreamInfo(600, 2)
        assert header.soft_package_references == ArrayStreamInfo(700, 4)
        assert header.preload_dependencies == ArrayStreamInfo(0, -1)
        assert header.searchable_names_offset == 800
        assert header.depends_offset == 900

    def test_ue5_trailing_fields(self):
        writer = PackageWriter(
            file_version=522,
            file_version_ue5=1009,
            names_referenced_from_export_data_count=42,
            payload_toc_offset=2 ** 35,
            data_resource_offset=1234,
        )
        header = parse_bytes(writer.build())
        assert header.names_referenced_from_export_data_count == 42
        assert header.payload_toc_offset == 2 ** 35
        assert header.data_resource_offset == 1234

    def test_names_referenced_defaults_to_name_count(self):
        header = parse_bytes(PackageWriter(file_version=522, names=["A", "B", "C"]).build())
        assert header.names_referenced_from_export_data_count == 3

    def test_compressed_chunks_skipped(self):
        header = parse_bytes(PackageWriter(compressed_chunks=3, compression_flags=0x10).build())
        assert header.compressed_chunks.count == 3
        assert header.compression_flags == 0x10
        assert header.package_source == 0x1234ABCD

    def test_guids_custom_versions(self):
        """Test the oldest legacy version with named custom versions."""
        writer = PackageWriter(file_version=482, legacy_version=-5)
        header = parse_bytes(writer.build())
        codec = ArrayCodec(custom_version_codec(header.archive.custom_version_layout()))
        versions = codec.parse_with_info(header.archive, header.custom_versions)
        assert [v.friendly_name for v in versions] == ["FooVersion", "BarVersion"]
        assert [v.version for v in versions] == [7, 3]

    def test_optimized_custom_versions(self):
        header = parse_bytes(PackageWriter(file_version=522).build())
        codec = ArrayCodec(custom_version_codec(header.archive.custom_version_layout()))
        versions = codec.parse_with_info(header.archive, header.custom_versions)
        assert [v.version for v in versions] == [7, 3]
        assert versions[0].friendly_name is None

    def test_wide_names(self):
        """Test name tables stored as UCS-2."""
        names = ["None", "Größe", "日本"]
        header = parse_bytes(PackageWriter(names=names, wide_names=True).build())
        assert header.names == names

    def test_name_hashes(self):
        """Test name tables with and without trailing hashes."""
        for file_version in (503, 504):
            header = parse_bytes(PackageWriter(file_version=file_version, names=["A", "B"]).build())
            assert header.names == ["A", "B"]

    def test_package_flags_set(self):
        flags = int(PackageFlags.CONTAINS_MAP | PackageFlags.CONTAINS_MAP_DATA)
        header = parse_bytes(PackageWriter(package_flags=flags).build())
        assert PackageFlags.CONTAINS_MAP in header.package_flags_set
        assert PackageFlags.FILTER_EDITOR_ONLY not in header.package_flags_set
        assert header.package_flags == flags


class TestExports:
    """Test export table fields."""

    def test_64bit_serial_sizes(self):
        writer = PackageWriter(file_version=511, exports=[ExportSpec(serial_size=2 ** 33, serial_offset=2 ** 34)])
        export = parse_bytes(writer.build()).exports[0]
        assert export.serial_size == 2 ** 33
        assert export.serial_offset == 2 ** 34

    def test_32bit_serial_sizes(self):
        writer = PackageWriter(file_version=510, exports=[ExportSpec(serial_size=-1, serial_offset=100)])
        export = parse_bytes(writer.build()).exports[0]
        assert export.serial_size == -1
        assert export.serial_offset == 100

    def test_template_index(self):
        writer = PackageWriter(file_version=508, exports=[ExportSpec(template_index=-2, outer_index=1)])
        export = parse_bytes(writer.build()).exports[0]
        assert export.template_index == import_ref(1)
        assert export.outer_index == ObjectReference(ObjectReferenceKind.EXPORT, 0)

    def test_template_index_absent(self):
        writer = PackageWriter(file_version=507, exports=[ExportSpec(template_index=-2, outer_index=1)])
        export = parse_bytes(writer.build()).exports[0]
        assert export.template_index.is_none
        assert export.outer_index == ObjectReference(ObjectReferenceKind.EXPORT, 0)

    def test_dependencies(self):
        writer = PackageWriter(file_version=507, exports=[ExportSpec(dependencies=(3, 1, 2, 0, 4))])
        export = parse_bytes(writer.build()).exports[0]
        assert export.first_export_dependency == 3
        assert export.serialization_before_serialization_dependencies == 1
        assert export.create_before_serialization_dependencies == 2
        assert export.serialization_before_create_dependencies == 0
        assert export.create_before_create_dependencies == 4

    def test_dependency_defaults(self):
        """Test the -1 sentinel before preload dependencies existed."""
        export = parse_bytes(PackageWriter(file_version=506, exports=[ExportSpec()]).build()).exports[0]
        assert export.first_export_dependency == -1
        assert export.create_before_create_dependencies == -1

    def test_old_export_defaults(self):
        """Test defaults for flags that did not exist yet."""
        writer = PackageWriter(file_version=300, legacy_version=-6,
                               exports=[ExportSpec(forced_export=True, not_for_server=True)])
        export = parse_bytes(writer.build()).exports[0]
        assert export.forced_export is True
        assert export.not_for_client is False
        assert export.not_for_server is True
        assert export.not_always_loaded_for_editor_game is True
        assert export.is_asset is False
        assert export.generate_public_hash is False

    def test_ue5_export_fields(self):
        """Test fields added by UE5 object versions."""
        spec = ExportSpec(
            is_inherited_instance=True,
            generate_public_hash=True,
            package_flags=0x20,
            is_asset=True,
            script_serialization_start_offset=100,
            script_serialization_end_offset=200,
        )
        writer = PackageWriter(file_version=522, file_version_ue5=1010, exports=[spec])
        export = parse_bytes(writer.build()).exports[0]
        assert export.is_inherited_instance is True
        assert export.generate_public_hash is True
        assert export.package_flags == 0x20
        assert export.is_asset is True
        assert export.script_serialization_start_offset == 100
        assert export.script_serialization_end_offset == 200

    @pytest.mark.parametrize("file_version_ue5", [1004, 1005])
    def test_package_guid_gate(self, file_version_ue5):
        """Test exports on either side of the package GUID removal."""
        specs = [ExportSpec(object_name=0, package_flags=1), ExportSpec(object_name=1, package_flags=2)]
        writer = PackageWriter(file_version=522, file_version_ue5=file_version_ue5, names=["A", "B"], exports=specs)
        header = parse_bytes(writer.build())
        assert [header.resolve_name(e.object_name) for e in header.exports] == ["A", "B"]
        assert [e.package_flags for e in header.exports] == [1, 2]

    def test_numbered_object_name(self):
        writer = PackageWriter(names=["StaticMeshComponent"], exports=[ExportSpec(object_name=0, object_name_number=3)])
        header = parse_bytes(writer.build())
        assert header.resolve_name(header.exports[0].object_name) == "StaticMeshComponent_2"


class TestImports:
    """Test import table fields."""

    def test_package_name_editor(self):
        writer = PackageWriter(file_version=520, names=["A", "B"],
                               imports=[ImportSpec(0, 0, 0, 0, package_name=1)])
        entry = parse_bytes(writer.build()).imports[0]
        assert entry.package_name is not None
        assert entry.package_name.index == 1

    def test_package_name_before_version(self):
        writer = PackageWriter(file_version=519, names=["A", "B"],
                               imports=[ImportSpec(0, 0, 0, 0, package_name=1)])
        entry = parse_bytes(writer.build()).imports[0]
        assert entry.package_name is None

    def test_import_optional(self):
        writer = PackageWriter(file_version=522, file_version_ue5=1003, names=["A"],
                               imports=[ImportSpec(0, 0, 0, 0, import_optional=True), ImportSpec(0, 0, 0, 0)])
        header = parse_bytes(writer.build())
        assert [entry.import_optional for entry in header.imports] == [True, False]


class TestPackageImports:
    """Test package_import_iter."""

    def test_excludes_core_uobject(self):
        """Test the self-import of /Script/CoreUObject is skipped."""
        header = parse_bytes(sample_writer("4.27").build())
        assert list(header.package_import_iter()) == ["/Game/A/B"]

    def test_without_core_uobject_name(self):
        """Test that every package import is yielded when there is no self-import."""
        names = ["/Game/A/B", "Package", "/Game/C", "/Script/Engine"]
        imports = [
            ImportSpec(class_package=3, class_name=1, outer=0, object_name=0),
            ImportSpec(class_package=3, class_name=1, outer=0, object_name=2),
        ]
        header = parse_bytes(PackageWriter(names=names, imports=imports).build())
        assert list(header.package_import_iter()) == ["/Game/A/B", "/Game/C"]

    def test_without_package_name(self):
        """Test that no imports are yielded when "Package" is not a name."""
        header = parse_bytes(PackageWriter(names=["A", "B"], imports=[ImportSpec(0, 1, 0, 0)]).build())
        assert list(header.package_import_iter()) == []

    def test_numbered_package_import(self):
        names = ["Package", "/Game/Level"]
        imports = [ImportSpec(class_package=0, class_name=0, outer=0, object_name=1, object_name_number=2)]
        header = parse_bytes(PackageWriter(names=names, imports=imports).build())
        assert list(header.package_import_iter()) == ["/Game/Level_1"]

    def test_table_order(self):
        names = ["Package", "/Game/Z", "/Game/A", "/Game/M"]
        imports = [ImportSpec(0, 0, 0, 1), ImportSpec(0, 0, 0, 2), ImportSpec(0, 0, 0, 3)]
        header = parse_bytes(PackageWriter(names=names, imports=imports).build())
        assert list(header.package_import_iter()) == ["/Game/Z", "/Game/A", "/Game/M"]

    def test_invalid_name_index(self):
        """Test that a dangling name reference surfaces on resolution."""
        header = parse_bytes(PackageWriter(names=["Package"], imports=[ImportSpec(0, 0, 0, 99)]).build())
        with pytest.raises(InvalidNameIndexError):
            list(header.package_import_iter())


class TestNames:
    """Test header name lookups."""

    def test_find_and_resolve(self):
        header = parse_bytes(sample_writer("4.27").build())
        for name in SAMPLE_NAMES:
            assert header.resolve_name(header.find_name(name)) == name

    def test_find_name_case_insensitive(self):
        header = parse_bytes(sample_writer("4.27").build())
        assert header.find_name("PACKAGE") == header.find_name("Package")
        assert header.find_name("NotThere") is None


class TestThumbnails:
    """Test the lazy thumbnail table iterator."""

    THUMBNAILS = [("Texture2D", "T_Foo", 1000), ("StaticMesh", "Meshes/SM_Bar", 2000)]

    def test_iterate(self):
        header = parse_bytes(PackageWriter(thumbnails=self.THUMBNAILS).build())
        assert list(header.thumbnail_iter()) == [
            ThumbnailInfo("Texture2D", "T_Foo", 1000),
            ThumbnailInfo("StaticMesh", "Meshes/SM_Bar", 2000),
        ]

    def test_restartable(self):
        """Test that each call seeks back to the table."""
        header = parse_bytes(PackageWriter(thumbnails=self.THUMBNAILS).build())
        assert list(header.thumbnail_iter()) == list(header.thumbnail_iter())

    def test_no_thumbnail_table(self):
        header = parse_bytes(PackageWriter().build())
        assert header.thumbnail_table_offset == 0
        assert list(header.thumbnail_iter()) == []

    def test_invalidated_by_other_reads(self):
        """Test that moving the shared cursor mid-iteration is detected."""
        header = parse_bytes(PackageWriter(thumbnails=self.THUMBNAILS).build())
        iterator = header.thumbnail_iter()
        next(iterator)
        header.archive.seek(0)
        with pytest.raises(IteratorInvalidatedError):
            next(iterator)

    def test_interleaved_iterators(self):
        """Test that starting a second iteration invalidates the first."""
        header = parse_bytes(PackageWriter(thumbnails=self.THUMBNAILS).build())
        first = header.thumbnail_iter()
        next(first)
        second = header.thumbnail_iter()
        assert next(second).object_class_name == "Texture2D"
        with pytest.raises(IteratorInvalidatedError):
            next(first)


class TestFailures:
    """Test that malformed input raises and never yields a partial header."""

    def test_corrupt_magic(self):
        data = bytearray(sample_writer("4.27").build())
        data[0] ^= 0xFF
        with pytest.raises(InvalidFileError):
            parse_bytes(bytes(data))

    def test_unsupported_legacy(self):
        with pytest.raises(UnsupportedVersionError):
            parse_bytes(PackageWriter(legacy_version=-4).build())

    def test_unversioned(self):
        """Test cooked unversioned packages are refused."""
        with pytest.raises(UnversionedAssetError):
            parse_bytes(PackageWriter(file_version=0, licensee_version=0).build())

    @pytest.mark.parametrize("length", [0, 10, 40, 80])
    def test_truncated_summary(self, length):
        data = sample_writer("4.27").build()[:length]
        with pytest.raises((ParseFailureError, InvalidFileError)):
            parse_bytes(data)

    def test_truncated_tables(self):
        """Test that a table running past the end is a parse failure."""
        data = sample_writer("5.3").build()
        with pytest.raises(ParseFailureError):
            parse_bytes(data[:-6])

    def test_array_count_limit(self):
        with pytest.raises(ParseFailureError):
            parse_bytes(sample_writer("4.27").build(), ParserLimits(max_array_count=4))

    def test_missing_file(self, tmp_path):
        with pytest.raises(AssetIOError):
            parse_file(str(tmp_path / "missing.uasset"))


class TestParseFile:
    """Test parsing from disk and dumping."""

    def test_parse_file(self, tmp_path):
        path = tmp_path / "Asset.uasset"
        path.write_bytes(sample_writer("5.1", thumbnails=[("Texture2D", "T", 1)]).build())
        header = parse_file(str(path))
        assert header.names == SAMPLE_NAMES
        assert [t.object_path_without_package_name for t in header.thumbnail_iter()] == ["T"]

    def test_to_dict(self):
        """Test that the dump is JSON serializable and resolved."""
        header = parse_bytes(sample_writer("5.2", package_flags=int(PackageFlags.CONTAINS_MAP)).build())
        data = json.loads(json.dumps(header.to_dict()))
        assert data['file_version'] == 522
        assert data['file_version_ue5'] == 1009
        assert data['names'] == SAMPLE_NAMES
        assert data['imports'][0]['object_name'] == "/Game/A/B"
        assert data['imports'][2]['outer'] == "import[0]"
        assert data['exports'][0]['object_name'] == "Asset"
        assert data['exports'][0]['class_index'] == "import[2]"
        assert data['engine_version'] == "4.27.2-18319896+++UE4+Release-4.27"
        assert data['package_flag_names'] == ["CONTAINS_MAP"]
        assert data['custom_versions'] == {'offset': 28, 'count': 2}
