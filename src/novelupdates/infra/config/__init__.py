"""
Unified interface for loading and adapting configuration files.
"""

__all__ = [
    "copy_default_config",
    "find_config_file",
    "load_client_config",
    "load_config",
    "ConfigAdapter",
]

from .adapter import ConfigAdapter, load_client_config
from .file_io import (
    copy_default_config,
    find_config_file,
    load_config,
)
