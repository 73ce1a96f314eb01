# utils/logging_utils.py
"""
アプリケーション全体のロギング設定を提供します。

各モジュールは get_logger(__name__) でロガーを取得します。
ハンドラ（コンソールとローテーションするログファイル）は、起動時に
setup_logging() を一度呼び出すことでアプリケーションのルートロガーにだけ追加されます。
"""
import logging
import logging.handlers
import os
from typing import Optional

APP_LOGGER_NAME = "memo_app"


def get_logger(name: str) -> logging.Logger:
    """アプリケーションのルートロガー配下のロガーを返す。

    Args:
        name (str): モジュール名。通常は __name__。

    Returns:
        logging.Logger: "memo_app.<name>" という名前のロガー。
    """
    return logging.getLogger(f"{APP_LOGGER_NAME}.{name}")


def setup_logging(log_dir: Optional[str] = "logs", level: str = "INFO") -> logging.Logger:
    """アプリケーションのルートロガーにハンドラを設定する。

    二回目以降の呼び出しではログレベルのみを更新します。

    Args:
        log_dir (Optional[str]): ログファイルの出力先ディレクトリ。Noneの場合はファイル出力を行わない。
        level (str): "DEBUG", "INFO" などのログレベル名。不明な値はINFOとして扱う。

    Returns:
        logging.Logger: 設定済みのルートロガー。
    """
    logger = logging.getLogger(APP_LOGGER_NAME)
    logger.setLevel(getattr(logging, str(level).upper(), logging.INFO))

    if logger.handlers:
        return logger

    ch = logging.StreamHandler()
    ch.setFormatter(logging.Formatter("%(levelname)s - %(message)s"))
    logger.addHandler(ch)

    if log_dir:
        os.makedirs(log_dir, exist_ok=True)
        fh = logging.handlers.RotatingFileHandler(
            os.path.join(log_dir, f"{APP_LOGGER_NAME}.log"),
            maxBytes=1_000_000, backupCount=3, encoding="utf-8",
        )
        fh.setFormatter(
            logging.Formatter("%(asctime)s - %(levelname)s - %(name)s - %(message)s")
        )
        logger.addHandler(fh)

    return logger
