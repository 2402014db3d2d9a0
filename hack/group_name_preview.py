#!/usr/bin/env python3
"""Group name preview script for groupdm.

チャンネルの JSON ペイロードから表示名を確認する CLI ツール。

Usage:
    uv run python hack/group_name_preview.py channel.json [channel2.json ...]
    uv run python hack/group_name_preview.py --format json dump.json
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

# プロジェクトルートをパスに追加
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from groupdm.config import (  # noqa: E402
    ConfigError,
    LoggingConfig,
    configure_logging,
    load_config,
)
from groupdm.domain.entities import GroupChannel  # noqa: E402
from groupdm.domain.exceptions import PayloadError  # noqa: E402
from groupdm.infrastructure.wire import parse_group_channel  # noqa: E402

logging.basicConfig(
    level=logging.WARNING,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def load_payloads(path: Path) -> list[dict[str, Any]]:
    """ファイルからチャンネルペイロードを読み込む

    ファイルの中身は単一オブジェクトでも配列でもよい。
    """
    with open(path, encoding="utf-8") as f:
        data = json.load(f)
    if isinstance(data, list):
        return data
    return [data]


def describe(channel: GroupChannel) -> dict[str, Any]:
    """表示用の dict に変換"""
    return {
        "id": str(channel.id),
        "explicit_name": channel.name,
        "recipients": len(channel.recipients),
        "display_name": channel.display_name,
    }


def print_rows(rows: list[dict[str, Any]], output_format: str) -> None:
    """結果を出力"""
    if output_format == "json":
        print(json.dumps(rows, ensure_ascii=False, indent=2))
        return

    if not rows:
        print("(no data)")
        return

    for row in rows:
        print(f"{row['id']}\t{row['recipients']}\t{row['display_name']!r}")


def create_parser() -> argparse.ArgumentParser:
    """CLIパーサーを作成"""
    parser = argparse.ArgumentParser(
        description="groupdm グループ名プレビュー",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("files", nargs="+", help="チャンネル JSON ファイル")
    parser.add_argument(
        "--config",
        default=None,
        help="config.yaml のパス (ログ設定のみ使用)",
    )
    parser.add_argument(
        "--format",
        choices=["table", "json"],
        default="table",
        help="出力形式 (default: table)",
    )
    parser.add_argument("--debug", action="store_true", help="DEBUG ログを出力")
    return parser


def main() -> None:
    """メインエントリポイント"""
    parser = create_parser()
    args = parser.parse_args()

    if args.config:
        try:
            config = load_config(args.config)
        except (ConfigError, FileNotFoundError) as e:
            print(f"Error: Failed to load config: {e}", file=sys.stderr)
            sys.exit(1)
        configure_logging(config.logging)
    if args.debug:
        configure_logging(LoggingConfig(level="DEBUG"))

    rows: list[dict[str, Any]] = []
    failed = False
    for file_name in args.files:
        path = Path(file_name)
        try:
            payloads = load_payloads(path)
        except (OSError, json.JSONDecodeError) as e:
            logger.error("Failed to read %s: %s", path, e)
            failed = True
            continue

        for payload in payloads:
            try:
                rows.append(describe(parse_group_channel(payload)))
            except PayloadError as e:
                logger.error("Skipping payload in %s: %s", path, e)
                failed = True

    print_rows(rows, args.format)
    if failed:
        sys.exit(1)


if __name__ == "__main__":
    main()
