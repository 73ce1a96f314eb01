# utils/app_config.py
from __future__ import annotations
import os
from dataclasses import dataclass


def _env_str(name: str, default: str) -> str:
    v = os.getenv(name)
    return default if v is None or v.strip() == "" else v.strip()


def _env_int(name: str, default: int) -> int:
    v = os.getenv(name)
    if v is None or v.strip() == "":
        return default
    try:
        return int(v)
    except ValueError:
        return default


@dataclass(frozen=True)
class AppConfig:
    """
    アプリケーションの起動設定をカプセル化するデータクラス。

    Attributes:
        db_path (str): SQLiteデータベースファイルのパス。
        schema_version (int): 要求するスキーマバージョン。
        log_dir (str): ログファイルの出力先。空文字の場合はファイルに出力しない。
        log_level (str): ログレベル名。
        window_title (str): メインウィンドウのタイトル。
    """
    db_path: str = os.path.join("data", "memo.db")
    schema_version: int = 1
    log_dir: str = "logs"
    log_level: str = "INFO"
    window_title: str = "メモ"

    @staticmethod
    def from_env() -> AppConfig:
        """環境変数 MEMO_DB_PATH, MEMO_SCHEMA_VERSION, MEMO_LOG_DIR, MEMO_LOG_LEVEL で既定値を上書きする。"""
        return AppConfig(
            db_path=_env_str("MEMO_DB_PATH", AppConfig.db_path),
            schema_version=_env_int("MEMO_SCHEMA_VERSION", AppConfig.schema_version),
            log_dir=os.getenv("MEMO_LOG_DIR", AppConfig.log_dir).strip(),
            log_level=_env_str("MEMO_LOG_LEVEL", AppConfig.log_level),
        )
