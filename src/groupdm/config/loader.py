"""YAML設定ファイルの読み込み"""

from pathlib import Path
from typing import Any

import yaml

from groupdm.config.models import DEFAULT_LOG_FORMAT, Config, LoggingConfig


class ConfigError(Exception):
    """設定関連の基底例外"""


class ConfigValidationError(ConfigError):
    """設定値のバリデーションエラー"""


def _level_value(value: Any, field: str) -> str | int:
    """ログレベルの値を検証する

    YAML では `DEBUG` も `10` も書けるため、文字列と整数を受け付ける。

    Raises:
        ConfigValidationError: 文字列でも整数でもない
    """
    if isinstance(value, bool) or not isinstance(value, (str, int)):
        raise ConfigValidationError(
            f"'{field}' must be a level name or number, got {value!r}"
        )
    return value


def _load_logging(data: Any) -> LoggingConfig | None:
    """logging セクションを LoggingConfig に変換する

    Args:
        data: logging セクション（未指定なら None）

    Returns:
        LoggingConfig（セクションが空なら None）

    Raises:
        ConfigValidationError: セクションの形式が不正
    """
    if not data:
        return None
    if not isinstance(data, dict):
        raise ConfigValidationError("'logging' must be a mapping")

    loggers_data = data.get("loggers")
    loggers: dict[str, str | int] | None = None
    if loggers_data is not None:
        if not isinstance(loggers_data, dict):
            raise ConfigValidationError("'logging.loggers' must be a mapping")
        loggers = {
            str(name): _level_value(level, f"logging.loggers.{name}")
            for name, level in loggers_data.items()
        }

    log_format = data.get("format", DEFAULT_LOG_FORMAT)
    if not isinstance(log_format, str):
        raise ConfigValidationError("'logging.format' must be a string")

    return LoggingConfig(
        level=_level_value(data.get("level", "INFO"), "logging.level"),
        format=log_format,
        loggers=loggers,
    )


def load_config(path: str | Path) -> Config:
    """設定ファイルを読み込む

    Args:
        path: config.yaml のパス

    Returns:
        Config オブジェクト（空ファイルならデフォルト）

    Raises:
        FileNotFoundError: ファイルが存在しない
        ConfigValidationError: 形式が不正
        yaml.YAMLError: YAML構文エラー
    """
    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if data is None:
        return Config()
    if not isinstance(data, dict):
        raise ConfigValidationError("Config root must be a mapping")

    return Config(logging=_load_logging(data.get("logging")))
