"""設定データクラス"""

from dataclasses import dataclass

DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


@dataclass
class LoggingConfig:
    """ログ設定

    Attributes:
        level: ルートロガーのレベル（名前または数値）
        format: ハンドラのフォーマット
        loggers: ロガー名ごとのレベル（例: groupdm.infrastructure.wire: DEBUG）
    """

    level: str | int = "INFO"
    format: str = DEFAULT_LOG_FORMAT
    loggers: dict[str, str | int] | None = None


@dataclass
class Config:
    """groupdm の設定（現状はログ設定のみ）"""

    logging: LoggingConfig | None = None
