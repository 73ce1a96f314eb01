# models/memo_models.py
from dataclasses import dataclass
from typing import Optional

@dataclass
class Memo:
    """ユーザーが作成する単一のメモを表現するデータモデル。

    Attributes:
        id (Optional[int]): メモの一意なID。ストアが採番するため、未保存のメモではNone。
        content (str): メモの本文。
        created_at (int): メモの作成日時（エポックミリ秒）。作成後は変更しない。
    """
    id: Optional[int]
    content: str
    created_at: int

    @property
    def is_persisted(self) -> bool:
        """ストアによってIDが採番済みかどうかを返す。"""
        return self.id is not None
