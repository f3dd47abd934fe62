#!/usr/bin/env python3
"""
uasset command line tool.

Inspects the package summaries of Unreal .uasset / .umap files. Directories
given on the command line are searched recursively for assets.
"""

import argparse
import json
import logging
import os
import sys
import time
from typing import Callable, List, Optional

import psutil

from uasset.config import ScanConfig, UAssetConfig, get_config, load_config
from uasset.errors import UAssetError
from uasset.header import AssetHeader, parse_file

logger = logging.getLogger(__name__)


def discover_assets(paths: List[str], scan: Optional[ScanConfig] = None) -> List[str]:
    """
    Expand directories into the asset files they contain.

    Args:
        paths: Files and directories; files are passed through unchanged
        scan: Discovery settings (default: from the loaded configuration)

    Returns:
        Asset paths in discovery order
    """
    if scan is None:
        scan = get_config().scan

    extensions = tuple(ext.lower() for ext in scan.extensions)
    assets = []

    for path in paths:
        if not os.path.isdir(path):
            assets.append(path)
            continue

        for root, dirs, files in os.walk(path, followlinks=scan.follow_links):
            if scan.skip_hidden:
                dirs[:] = [d for d in dirs if not d.startswith('.')]
            dirs.sort()
            for name in sorted(files):
                if scan.skip_hidden and name.startswith('.'):
                    continue
                if name.lower().endswith(extensions):
                    assets.append(os.path.join(root, name))

    return assets


def try_parse(asset_path: str, callback: Callable[[AssetHeader], None]) -> bool:
    """
    Parse one asset and hand the header to callback.

    Lazy tables read by the callback (thumbnails) and names it resolves are
    decoded after the header parsed, so failures there count against the
    asset too.

    Returns:
        True if the asset was handled, False if it failed (the failure is logged)
    """
    logger.debug(f"Reading {asset_path}")
    try:
        header = parse_file(asset_path)
        callback(header)
    except UAssetError as e:
        logger.error(f"Failed to parse {asset_path}: {e}")
        return False

    return True


def cmd_benchmark(asset_paths: List[str], scan_seconds: float) -> int:
    print(f"Scanning directories took {scan_seconds:.3f}s")

    num_imports = 0
    num_failed = 0

    def count_imports(header: AssetHeader):
        nonlocal num_imports
        logger.debug(f"Found {len(header.imports)} imports")
        num_imports += len(header.imports)

    load_start = time.perf_counter()
    for asset_path in asset_paths:
        if not try_parse(asset_path, count_imports):
            num_failed += 1
    load_seconds = time.perf_counter() - load_start

    rss_mb = psutil.Process().memory_info().rss / (1024 * 1024)

    print(f"Loading {len(asset_paths)} assets ({num_failed} failed) "
          f"with {num_imports} imports took {load_seconds:.3f}s")
    print(f"Total execution took {scan_seconds + load_seconds:.3f}s")
    print(f"Resident memory: {rss_mb:.1f} MB")
    return 1 if num_failed else 0


def cmd_dump(asset_paths: List[str]) -> int:
    def dump(header: AssetHeader):
        print(json.dumps(header.to_dict(), indent=2))
        print()

    failed = 0
    for asset_path in asset_paths:
        print(f"{asset_path}:")
        if not try_parse(asset_path, dump):
            failed += 1
    return 1 if failed else 0


def cmd_list_imports(asset_paths: List[str], skip_code_imports: bool) -> int:
    def list_imports(header: AssetHeader):
        for package in header.package_import_iter():
            if skip_code_imports and package.startswith("/Script/"):
                continue
            print(f"  {package}")

    failed = 0
    for asset_path in asset_paths:
        print(f"{asset_path}:")
        if not try_parse(asset_path, list_imports):
            failed += 1
    return 1 if failed else 0


def cmd_list_thumbnails(asset_paths: List[str]) -> int:
    def list_thumbnails(header: AssetHeader):
        for thumbnail in header.thumbnail_iter():
            print(f"  {thumbnail.object_class_name} "
                  f"{thumbnail.object_path_without_package_name} "
                  f"@{thumbnail.file_offset}")

    failed = 0
    for asset_path in asset_paths:
        print(f"{asset_path}:")
        if not try_parse(asset_path, list_thumbnails):
            failed += 1
    return 1 if failed else 0


def configure_logging(config: UAssetConfig, verbose: int, quiet: bool):
    """Configure the root logger from the config file and -v/-q."""
    level = getattr(logging, config.logging.level, logging.WARNING)
    if quiet:
        level = logging.CRITICAL
    elif verbose >= 2:
        level = logging.DEBUG
    elif verbose == 1:
        level = logging.INFO

    logging.basicConfig(level=level, format=config.logging.format)


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="uasset",
        description="Display information from Unreal Engine package headers",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s benchmark ~/Projects/Game/Content
  %(prog)s dump Content/Maps/Entry.umap
  %(prog)s list-imports Content --skip-code-imports
  %(prog)s list-thumbnails Content/UI
"""
    )
    parser.add_argument("-v", "--verbose", action="count", default=0,
                        help="Increase log verbosity (repeat for debug)")
    parser.add_argument("-q", "--quiet", action="store_true",
                        help="Only print command output")
    parser.add_argument("--config", help="Path to a uasset_config.yaml")

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # Benchmark command
    bench_p = subparsers.add_parser("benchmark", help="Time loading all the given assets")
    bench_p.add_argument("paths", nargs="+", help="Assets or directories to load")

    # Dump command
    dump_p = subparsers.add_parser("dump", help="Show every header field as JSON")
    dump_p.add_argument("paths", nargs="+", help="Assets or directories to dump")

    # List imports command
    imports_p = subparsers.add_parser("list-imports", help="Show the packages each asset imports")
    imports_p.add_argument("paths", nargs="+", help="Assets or directories")
    imports_p.add_argument("--skip-code-imports", action="store_true",
                           help="Skip imports of code packages (/Script/...)")

    # List thumbnails command
    thumbs_p = subparsers.add_parser("list-thumbnails", help="Show the thumbnail table of each asset")
    thumbs_p.add_argument("paths", nargs="+", help="Assets or directories")

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    config = load_config(args.config) if args.config else get_config()
    configure_logging(config, args.verbose, args.quiet)

    scan_start = time.perf_counter()
    asset_paths = discover_assets(args.paths, config.scan)
    scan_seconds = time.perf_counter() - scan_start

    if args.command == "benchmark":
        return cmd_benchmark(asset_paths, scan_seconds)

    elif args.command == "dump":
        return cmd_dump(asset_paths)

    elif args.command == "list-imports":
        return cmd_list_imports(asset_paths, args.skip_code_imports)

    elif args.command == "list-thumbnails":
        return cmd_list_thumbnails(asset_paths)

    return 1


if __name__ == "__main__":
    sys.exit(main())
