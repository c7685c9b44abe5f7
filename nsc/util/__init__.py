"""
Utility package providing configuration and output helpers for nsc.

This package includes:
- Configuration loading from the environment and JSON/YAML files
- Logging setup for command layers
- Output helpers that write formatted blocks to stdout or new files
"""

from .config import (
    Settings, get_config_value, get_bool_config,
    merge_configs, load_config_file, configure_logging
)
from .output import (
    STDOUT, is_stdout, ok_to_write, is_readable_file, write_output, default_name
)

__all__ = [
    # Configuration utilities
    'Settings', 'get_config_value', 'get_bool_config',
    'merge_configs', 'load_config_file', 'configure_logging',

    # Output utilities
    'STDOUT', 'is_stdout', 'ok_to_write', 'is_readable_file', 'write_output',
    'default_name'
]
