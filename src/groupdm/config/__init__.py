"""設定管理モジュール"""

from groupdm.config.loader import ConfigError, ConfigValidationError, load_config
from groupdm.config.logging_setup import configure_logging, resolve_level
from groupdm.config.models import Config, LoggingConfig

__all__ = [
    "Config",
    "ConfigError",
    "ConfigValidationError",
    "LoggingConfig",
    "configure_logging",
    "load_config",
    "resolve_level",
]
