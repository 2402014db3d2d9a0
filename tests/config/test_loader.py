"""設定ローダーのテスト"""

from pathlib import Path

import pytest
import yaml

from groupdm.config import Config, ConfigValidationError, LoggingConfig, load_config


def write_config(path: Path, data: object) -> Path:
    """設定ファイルを書き出す"""
    config_path = path / "config.yaml"
    config_path.write_text(yaml.safe_dump(data), encoding="utf-8")
    return config_path


class TestLoadConfig:
    """load_config関数のテスト"""

    def test_full_logging_section(self, tmp_path: Path) -> None:
        """logging セクションを読み込める"""
        config_path = write_config(
            tmp_path,
            {
                "logging": {
                    "level": "DEBUG",
                    "format": "%(levelname)s %(message)s",
                    "loggers": {"groupdm.infrastructure.wire": "WARNING"},
                }
            },
        )

        config = load_config(config_path)

        assert config.logging == LoggingConfig(
            level="DEBUG",
            format="%(levelname)s %(message)s",
            loggers={"groupdm.infrastructure.wire": "WARNING"},
        )

    def test_numeric_levels(self, tmp_path: Path) -> None:
        """数値のログレベルを受け付ける"""
        config_path = write_config(
            tmp_path, {"logging": {"level": 30, "loggers": {"groupdm": 10}}}
        )

        config = load_config(config_path)

        assert config.logging is not None
        assert config.logging.level == 30
        assert config.logging.loggers == {"groupdm": 10}

    @pytest.mark.parametrize("level", [["DEBUG"], {"name": "DEBUG"}, True, 1.5])
    def test_invalid_logger_level(self, tmp_path: Path, level: object) -> None:
        """文字列でも整数でもないレベルはエラー"""
        config_path = write_config(
            tmp_path, {"logging": {"loggers": {"groupdm": level}}}
        )

        with pytest.raises(ConfigValidationError) as exc_info:
            load_config(config_path)
        assert "logging.loggers.groupdm" in str(exc_info.value)

    def test_logging_defaults(self, tmp_path: Path) -> None:
        """省略した項目はデフォルト値になる"""
        config_path = write_config(tmp_path, {"logging": {"level": "WARNING"}})

        config = load_config(config_path)

        assert config.logging is not None
        assert config.logging.level == "WARNING"
        assert config.logging.format == LoggingConfig().format
        assert config.logging.loggers is None

    def test_no_logging_section(self, tmp_path: Path) -> None:
        """logging セクションがなければ None"""
        config_path = write_config(tmp_path, {"other": 1})

        assert load_config(config_path) == Config(logging=None)

    def test_empty_file(self, tmp_path: Path) -> None:
        """空ファイルはデフォルト設定"""
        config_path = tmp_path / "config.yaml"
        config_path.write_text("", encoding="utf-8")

        assert load_config(config_path) == Config()

    def test_file_not_found(self, tmp_path: Path) -> None:
        """ファイルが存在しない場合はFileNotFoundError"""
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "missing.yaml")

    def test_root_not_mapping(self, tmp_path: Path) -> None:
        """トップレベルが mapping でない場合はエラー"""
        config_path = write_config(tmp_path, ["a", "b"])

        with pytest.raises(ConfigValidationError):
            load_config(config_path)

    def test_loggers_not_mapping(self, tmp_path: Path) -> None:
        """loggers が mapping でない場合はエラー"""
        config_path = write_config(tmp_path, {"logging": {"loggers": ["x"]}})

        with pytest.raises(ConfigValidationError):
            load_config(config_path)

    def test_format_not_string(self, tmp_path: Path) -> None:
        """format が文字列でない場合はエラー"""
        config_path = write_config(tmp_path, {"logging": {"format": 1}})

        with pytest.raises(ConfigValidationError):
            load_config(config_path)

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        """YAML構文エラー"""
        config_path = tmp_path / "config.yaml"
        config_path.write_text("logging: [unclosed", encoding="utf-8")

        with pytest.raises(yaml.YAMLError):
            load_config(config_path)
