"""
メモ一覧を表示するためのリストモデルを提供します。

MemoListModel はストアの内容をメモリ上に保持するミラーです。作成・削除のたびに
ストアから全件を読み直し、modelReset シグナルで表示側に全行の再描画を通知します。
"""
from __future__ import annotations
from typing import TYPE_CHECKING, Any, List, Optional

from PyQt6.QtCore import QAbstractListModel, QModelIndex, QObject, Qt

from models.memo_models import Memo
from utils.date_utils import now_millis
from utils.logging_utils import get_logger

if TYPE_CHECKING:
    from services.memo_service import MemoService

logger = get_logger(__name__)


class MemoListModel(QAbstractListModel):
    """
    MemoServiceの内容を反映する、順序付きのメモ一覧モデル。

    増分更新は行わず、変更のたびにリスト全体を読み直します。
    これによりストアが採番したIDが一覧に反映されます。

    Attributes:
        memo_service (MemoService): 永続化を担当するストア。
        memos (List[Memo]): 現在表示中のメモ（ストアの読み込み順）。
    """
    MemoRole: int = Qt.ItemDataRole.UserRole.value + 1
    IdRole: int = Qt.ItemDataRole.UserRole.value + 2
    CreatedAtRole: int = Qt.ItemDataRole.UserRole.value + 3

    def __init__(self, memo_service: MemoService, parent: Optional[QObject] = None) -> None:
        """
        MemoListModelのコンストラクタ。ストアから初期データを読み込む。

        Args:
            memo_service (MemoService): メモの読み書きに使用するストア。
            parent (Optional[QObject]): 親オブジェクト。
        """
        super().__init__(parent)
        self.memo_service: MemoService = memo_service
        self.memos: List[Memo] = []
        self.refresh()

    def rowCount(self, parent: QModelIndex = QModelIndex()) -> int:
        if parent.isValid():
            return 0
        return len(self.memos)

    def data(self, index: QModelIndex, role: int = Qt.ItemDataRole.DisplayRole) -> Any:
        if not index.isValid() or not 0 <= index.row() < len(self.memos):
            return None

        memo = self.memos[index.row()]
        if role == Qt.ItemDataRole.DisplayRole:
            return memo.content
        if role == self.MemoRole:
            return memo
        if role == self.IdRole:
            return memo.id
        if role == self.CreatedAtRole:
            return memo.created_at
        return None

    def memo_at(self, row: int) -> Memo:
        """指定された位置のメモを返す。

        Raises:
            IndexError: rowが範囲外の場合。
        """
        return self.memos[row]

    def refresh(self) -> None:
        """一覧をクリアし、ストアから全件を読み直して全行の再描画を通知する。"""
        memos = self.memo_service.load_memos()
        self.beginResetModel()
        self.memos.clear()
        self.memos.extend(memos)
        self.endResetModel()

    def add_memo(self, content: str, created_at: Optional[int] = None) -> bool:
        """
        入力されたテキストから新しいメモを作成し、一覧を読み直す。

        空文字列の場合は何もしません。

        Args:
            content (str): メモの本文。
            created_at (Optional[int]): 作成日時（エポックミリ秒）。Noneの場合は現在時刻。

        Returns:
            bool: メモを作成した場合はTrue、空入力で無視した場合はFalse。
        """
        if not content:
            return False

        memo = Memo(id=None, content=content,
                    created_at=now_millis() if created_at is None else created_at)
        self.memo_service.create_memo(memo)
        self.refresh()
        return True

    def delete_memo(self, memo: Memo) -> None:
        """
        ストアからメモを削除し、同じメモを一覧から取り除いて全行の再描画を通知する。

        Args:
            memo (Memo): 削除するメモ。IDが採番済みである必要がある。

        Raises:
            MemoNotPersistedError: memo.id が None の場合。
        """
        self.memo_service.delete_memo(memo)
        self.beginResetModel()
        if memo in self.memos:
            self.memos.remove(memo)
        else:
            logger.debug("一覧に存在しないメモが削除されました: id=%s", memo.id)
        self.endResetModel()

    def update_memo(self, memo: Memo) -> None:
        """ストアのメモを更新して一覧を読み直す。画面からは使用されない。"""
        self.memo_service.update_memo(memo)
        self.refresh()
