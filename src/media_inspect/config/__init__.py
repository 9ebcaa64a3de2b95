"""Configuration management for media_inspect.

Configuration is loaded with precedence handling:
1. CLI flags (highest priority)
2. Environment variables (MEDIA_INSPECT_*)
3. Config file (~/.media-inspect/config.toml)
4. Default values (lowest priority)
"""

from media_inspect.config.builder import (
    ConfigBuilder,
    ConfigSource,
    source_from_env,
    source_from_file,
)
from media_inspect.config.env import EnvReader
from media_inspect.config.loader import get_config, get_default_config_path
from media_inspect.config.models import (
    DEFAULT_MEDIAINFO_BINARY,
    AppConfig,
    InspectorConfig,
    LoggingConfig,
)
from media_inspect.config.toml_parser import (
    TomlParseError,
    load_toml_file,
    parse_toml,
)

__all__ = [
    # Models
    "DEFAULT_MEDIAINFO_BINARY",
    "AppConfig",
    "InspectorConfig",
    "LoggingConfig",
    # Loader
    "get_config",
    "get_default_config_path",
    # Layering
    "EnvReader",
    "ConfigBuilder",
    "ConfigSource",
    "source_from_env",
    "source_from_file",
    # TOML
    "TomlParseError",
    "load_toml_file",
    "parse_toml",
]
