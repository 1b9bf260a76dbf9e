"""
VFS Configuration

Pydantic model for filesystem settings and a YAML loader for it.
"""

import os
import logging
from pathlib import Path
from typing import Optional, Union

import yaml
from pydantic import BaseModel, field_validator

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = 'VFS_CONFIG'


class FilesystemConfig(BaseModel):
    """Settings shared by the in-memory filesystem and the CLI

    strict_remove: refuse to remove non-empty directories
    min_buffer_size: minimum growth step of a file buffer, in bytes
    default_file_mode: permission bits used by create()
    default_dir_mode: permission bits used by mkdir() when none are given
    log_level: level name handed to logging by the CLI
    """
    strict_remove: bool = False
    min_buffer_size: int = 512
    default_file_mode: int = 0o666
    default_dir_mode: int = 0o777
    log_level: str = "WARNING"

    @field_validator('min_buffer_size')
    @classmethod
    def validate_min_buffer_size(cls, v):
        if v <= 0:
            raise ValueError(f"min_buffer_size must be positive, got {v}")
        return v

    @field_validator('default_file_mode', 'default_dir_mode', mode='before')
    @classmethod
    def validate_mode(cls, v):
        # YAML has no 0o literal; accept octal strings such as "0o644" or "644"
        if isinstance(v, str):
            try:
                v = int(v, 8)
            except ValueError:
                raise ValueError(f"Invalid permission bits: {v!r}")
        if not isinstance(v, int) or isinstance(v, bool):
            raise ValueError(f"Invalid permission bits: {v!r}")
        if not 0 <= v <= 0o7777:
            raise ValueError(f"Invalid permission bits: {oct(v)}")
        return v

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v):
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v}")
        return level


def load_config(path: Optional[Union[str, Path]] = None) -> FilesystemConfig:
    """Load configuration from a YAML file

    Falls back to $VFS_CONFIG when no path is given, and to the defaults when
    neither points to an existing file.
    """
    if path is None:
        path = os.environ.get(CONFIG_ENV_VAR)
    if not path:
        return FilesystemConfig()

    config_path = Path(path)
    if not config_path.exists():
        logger.debug(f"Config file {config_path} not found, using defaults")
        return FilesystemConfig()

    with open(config_path) as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Config file {config_path} must contain a mapping")

    logger.debug(f"Loaded config from {config_path}")
    return FilesystemConfig(**data)
