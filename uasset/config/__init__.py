"""
uasset Configuration Module

Loads and provides access to parser and scanner settings from uasset_config.yaml.
"""

import logging
import os
from typing import List, Optional
from dataclasses import dataclass, field

import yaml

logger = logging.getLogger(__name__)


@dataclass
class ParserLimits:
    """Sanity limits applied while decoding a header."""
    max_array_count: int = 16777216
    max_string_length: int = 1048576


@dataclass
class ScanConfig:
    """Asset discovery configuration."""
    extensions: List[str] = field(default_factory=lambda: [".uasset", ".umap"])
    follow_links: bool = True
    skip_hidden: bool = True


@dataclass
class LoggingConfig:
    """Logging configuration for the command line tool."""
    level: str = "WARNING"
    format: str = "%(asctime)s %(levelname)s %(name)s: %(message)s"


@dataclass
class UAssetConfig:
    """Complete configuration."""
    parser: ParserLimits = field(default_factory=ParserLimits)
    scan: ScanConfig = field(default_factory=ScanConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


# Global config instance
_config: Optional[UAssetConfig] = None


def get_config_path() -> str:
    """Get the path to the bundled config file."""
    return os.path.join(os.path.dirname(__file__), 'uasset_config.yaml')


def load_config(config_path: Optional[str] = None) -> UAssetConfig:
    """
    Load configuration from a YAML file.

    Args:
        config_path: Path to config file (default: uasset_config.yaml in this directory)

    Returns:
        UAssetConfig instance
    """
    global _config

    explicit = config_path is not None
    if config_path is None:
        config_path = get_config_path()

    config = UAssetConfig()

    if os.path.exists(config_path):
        with open(config_path, 'r') as f:
            data = yaml.safe_load(f) or {}

        update_config_from_dict(data, config)
    elif explicit:
        logger.warning(f"Config file {config_path} not found, using defaults")

    _config = config
    return config


def get_config() -> UAssetConfig:
    """
    Get the current configuration.

    Loads from file if not already loaded.
    """
    global _config
    if _config is None:
        load_config()
    return _config


def save_config(config: Optional[UAssetConfig] = None, config_path: Optional[str] = None) -> bool:
    """
    Save configuration to a YAML file.

    Args:
        config: UAssetConfig to save (uses global if None)
        config_path: Destination (default: the bundled config file)

    Returns:
        True if saved successfully
    """
    if config is None:
        config = _config
    if config is None:
        return False

    if config_path is None:
        config_path = get_config_path()

    try:
        with open(config_path, 'w') as f:
            f.write("# uasset Configuration\n")
            f.write("#\n")
            f.write("# Parser sanity limits, asset discovery and CLI logging.\n\n")
            yaml.dump(config_to_dict(config), f, default_flow_style=False, sort_keys=False)
        return True
    except OSError:
        return False


def config_to_dict(config: Optional[UAssetConfig] = None) -> dict:
    """
    Convert UAssetConfig to dictionary for serialization.

    Args:
        config: UAssetConfig to convert (uses global if None)

    Returns:
        Dictionary representation of config
    """
    if config is None:
        config = get_config()

    return {
        'parser': {
            'max_array_count': config.parser.max_array_count,
            'max_string_length': config.parser.max_string_length,
        },
        'scan': {
            'extensions': list(config.scan.extensions),
            'follow_links': config.scan.follow_links,
            'skip_hidden': config.scan.skip_hidden,
        },
        'logging': {
            'level': config.logging.level,
            'format': config.logging.format,
        },
    }


def update_config_from_dict(data: dict, config: Optional[UAssetConfig] = None) -> UAssetConfig:
    """
    Update a config (the global one by default) from a dictionary.

    Args:
        data: Dictionary with config values
        config: Config to update in place (uses global if None)

    Returns:
        Updated UAssetConfig
    """
    global _config

    if config is None:
        if _config is None:
            _config = UAssetConfig()
        config = _config

    # Parser limits
    if 'parser' in data:
        parser = data['parser'] or {}
        if 'max_array_count' in parser:
            config.parser.max_array_count = int(parser['max_array_count'])
        if 'max_string_length' in parser:
            config.parser.max_string_length = int(parser['max_string_length'])

    # Asset discovery
    if 'scan' in data:
        scan = data['scan'] or {}
        if 'extensions' in scan:
            config.scan.extensions = [ext.lower() for ext in scan['extensions']]
        if 'follow_links' in scan:
            config.scan.follow_links = bool(scan['follow_links'])
        if 'skip_hidden' in scan:
            config.scan.skip_hidden = bool(scan['skip_hidden'])

    # Logging
    if 'logging' in data:
        log = data['logging'] or {}
        if 'level' in log:
            config.logging.level = str(log['level']).upper()
        if 'format' in log:
            config.logging.format = log['format']

    return config


__all__ = [
    'UAssetConfig',
    'ParserLimits',
    'ScanConfig',
    'LoggingConfig',
    'load_config',
    'get_config',
    'get_config_path',
    'save_config',
    'config_to_dict',
    'update_config_from_dict',
]
