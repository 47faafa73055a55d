"""
YAML configuration loading for EDD Utils.

The configuration file is optional. When present it overrides individual
search defaults and cache settings; anything it leaves out keeps the value
from ``EddUtilsConfig()``.
"""

import copy
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Union

import yaml

from ..models.config import EddUtilsConfig, validate_config_dict


logger = logging.getLogger(__name__)

PathLike = Union[str, Path]

# Comment written above each top-level section of a saved file.
SECTION_COMMENTS: List[Tuple[str, str]] = [
    ('search', "Search defaults per entity (status filter, page size, sorting)"),
    ('cache', "Caching of distinct-value lists and order statistics"),
    ('table_prefix', "Database table prefix used when the host does not provide one"),
]


class ConfigurationError(Exception):
    """Raised when a configuration file cannot be read, parsed or validated."""


@dataclass
class ConfigParseResult:
    """
    Outcome of :meth:`ConfigParser.load_config`.

    Attributes:
        config: Validated configuration
        warnings: Non-fatal problems worth showing to the user
        config_path: File the values came from (None for built-in defaults)
        is_default: True when no file was found
    """
    config: EddUtilsConfig
    warnings: List[str] = field(default_factory=list)
    config_path: Optional[Path] = None
    is_default: bool = False


def merge_config(defaults: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """Recursively merge ``overrides`` over ``defaults`` (overrides win)."""
    merged = copy.deepcopy(defaults)
    for key, value in overrides.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = merge_config(merged[key], value)
        else:
            merged[key] = value
    return merged


def config_search_dirs() -> List[Path]:
    """Directories searched for a configuration file, in priority order."""
    return [Path.cwd(), Path.home(), Path.home() / '.config' / 'edd-utils']


class ConfigParser:
    """
    Reads, validates and writes EDD Utils YAML configuration.

    Attributes:
        strict_mode: Raise instead of returning warnings
    """

    CONFIG_FILE_NAMES = [
        '.eddutils.yaml',
        '.eddutils.yml',
        'eddutils.yaml',
        'eddutils.yml'
    ]

    def __init__(self, strict_mode: bool = False):
        self.strict_mode = strict_mode
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    def load_config(self, config_path: Optional[PathLike] = None) -> ConfigParseResult:
        """
        Load configuration from ``config_path`` or the first discovered file.

        Args:
            config_path: Explicit file; when None the search directories are
                tried and built-in defaults used if nothing is found

        Returns:
            ConfigParseResult with the validated configuration

        Raises:
            ConfigurationError: If the file is missing, unreadable or invalid,
                or if strict mode is on and there are warnings
        """
        try:
            if config_path is not None:
                path = Path(config_path)
                if not path.exists():
                    raise ConfigurationError(f"Configuration file not found: {path}")
                data = self.read_yaml(path)
            else:
                path, data = self.discover()

            result = self.build_config(data or {}, path)
        except ConfigurationError:
            raise
        except Exception as e:
            raise ConfigurationError(f"Failed to load configuration: {e}") from e

        if self.strict_mode and result.warnings:
            raise ConfigurationError(f"Configuration warnings in strict mode: {'; '.join(result.warnings)}")

        self.logger.info(f"Using configuration from {result.config_path or 'built-in defaults'}")
        return result

    def build_config(self, data: Dict[str, Any], path: Optional[Path] = None) -> ConfigParseResult:
        """Merge raw file data over the defaults and validate it."""
        merged = merge_config(EddUtilsConfig().to_dict(), data)
        config = EddUtilsConfig.from_dict(self.validate_data(merged))

        warnings = config.validate_configuration()
        if path is None:
            warnings.append("No configuration file found, using default settings")

        return ConfigParseResult(config=config, warnings=warnings, config_path=path, is_default=path is None)

    def discover(self) -> Tuple[Optional[Path], Optional[Dict[str, Any]]]:
        """
        Find the first readable configuration file in the search directories.

        Files that exist but fail to parse are logged and skipped.

        Returns:
            ``(path, data)``, or ``(None, None)`` when nothing usable exists
        """
        for directory in config_search_dirs():
            for name in self.CONFIG_FILE_NAMES:
                candidate = directory / name
                if not candidate.is_file():
                    continue
                try:
                    data = self.read_yaml(candidate)
                except ConfigurationError as e:
                    self.logger.warning(f"Skipping {candidate}: {e}")
                    continue
                self.logger.debug(f"Discovered configuration file {candidate}")
                return candidate, data

        self.logger.debug("No configuration file in any search directory")
        return None, None

    def read_yaml(self, path: Path) -> Dict[str, Any]:
        """
        Parse a YAML configuration file into a mapping.

        Empty files and files holding only comments give an empty mapping.

        Raises:
            ConfigurationError: If the file cannot be read, is not valid YAML,
                or its top level is not a mapping
        """
        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML syntax in {path}: {e}") from e
        except OSError as e:
            raise ConfigurationError(f"Cannot read configuration file {path}: {e}") from e

        if data is None:
            self.logger.warning(f"Configuration file {path} is empty")
            return {}
        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Configuration file must contain a YAML object, got {type(data).__name__}"
            )
        return data

    def validate_data(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Validate raw values, returning the normalized mapping."""
        try:
            return validate_config_dict(data)
        except ValueError as e:
            raise ConfigurationError(f"Configuration validation failed: {e}") from e

    def render_yaml(self, config: EddUtilsConfig) -> str:
        """Render a configuration as YAML with a comment above each section."""
        values = config.to_dict()
        blocks = ["# EDD Utils Configuration\n# Default search settings and cache behaviour"]

        for section, comment in SECTION_COMMENTS:
            body = yaml.dump({section: values[section]}, default_flow_style=False, sort_keys=False)
            blocks.append(f"# {comment}\n{body.rstrip()}")

        return "\n\n".join(blocks) + "\n"

    def save_config(self, config: EddUtilsConfig, output_path: PathLike) -> None:
        """
        Write a configuration file, creating parent directories.

        Raises:
            ConfigurationError: If the file cannot be written
        """
        path = Path(output_path)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(self.render_yaml(config), encoding='utf-8')
        except OSError as e:
            raise ConfigurationError(f"Cannot write configuration file {path}: {e}") from e

        self.logger.info(f"Wrote configuration to {path}")

    def validate_config_file(self, config_path: PathLike) -> List[str]:
        """Check a file without loading it; returns error messages (empty if valid)."""
        path = Path(config_path)
        if not path.exists():
            return [f"Configuration file not found: {path}"]

        try:
            self.validate_data(self.read_yaml(path))
        except ConfigurationError as e:
            return [str(e)]
        return []

    def get_config_template(self) -> str:
        """YAML text listing every option at its default value."""
        return self.render_yaml(EddUtilsConfig())


def load_config(config_path: Optional[PathLike] = None, strict_mode: bool = False) -> ConfigParseResult:
    """Load configuration with a one-off parser (see :meth:`ConfigParser.load_config`)."""
    return ConfigParser(strict_mode=strict_mode).load_config(config_path)


def validate_config_file(config_path: PathLike) -> List[str]:
    """Return the problems found in a configuration file, empty when it is valid."""
    return ConfigParser().validate_config_file(config_path)


def create_config_template(output_path: PathLike) -> None:
    """Write a configuration file holding the defaults."""
    ConfigParser().save_config(EddUtilsConfig(), output_path)
