"""
Loading and writing of the optional EDD Utils YAML configuration file.
"""

from .parser import (
    ConfigParser,
    ConfigParseResult,
    ConfigurationError,
    create_config_template,
    load_config,
    merge_config,
    validate_config_file
)

__all__ = [
    'ConfigParser',
    'ConfigParseResult',
    'ConfigurationError',
    'create_config_template',
    'load_config',
    'merge_config',
    'validate_config_file'
]
