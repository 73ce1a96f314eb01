# utils/date_utils.py
from datetime import datetime, timezone, tzinfo
from typing import Optional

# 4桁の年/月/日 時:分（12時間表記）
MEMO_DATETIME_FORMAT = "%Y/%m/%d %I:%M"


def now_millis() -> int:
    """現在時刻をエポックミリ秒で返す。"""
    return int(datetime.now(timezone.utc).timestamp() * 1000)


def format_memo_datetime(millis: int, tz: Optional[tzinfo] = None) -> str:
    """エポックミリ秒をメモ一覧の表示形式（例: 2024/01/05 03:07）に変換する。

    Args:
        millis (int): エポックミリ秒。
        tz (Optional[tzinfo]): 表示に使うタイムゾーン。Noneの場合はローカルタイム。

    Returns:
        str: 整形済みの日時文字列。
    """
    return datetime.fromtimestamp(millis / 1000, tz).strftime(MEMO_DATETIME_FORMAT)
