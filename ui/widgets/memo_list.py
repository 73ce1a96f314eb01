from typing import List, Optional

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtWidgets import (QWidget, QHBoxLayout, QVBoxLayout, QLabel,
                             QPushButton, QScrollArea)

from models.memo_models import Memo
from utils.date_utils import format_memo_datetime
from .memo_list_model import MemoListModel


class MemoRowWidget(QWidget):
    """
    メモ一覧の一行を表示する再利用可能なウィジェット。

    番号、本文、作成日時と削除ボタンを表示します。行は別のメモに再バインドされて
    使い回されるため、削除ボタンは押された時点でバインドされているメモを通知します。

    Signals:
        delete_requested (pyqtSignal): 削除ボタンが押されたときに、バインド中のMemoを送出する。
    """
    ROW_HEIGHT: int = 48

    delete_requested = pyqtSignal(object)

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.setFixedHeight(self.ROW_HEIGHT)

        # --- UI要素の型定義 ---
        self.no_label: QLabel
        self.content_label: QLabel
        self.datetime_label: QLabel
        self.delete_button: QPushButton
        self._memo: Optional[Memo] = None

        layout = QHBoxLayout(self)
        layout.setContentsMargins(8, 4, 8, 4)

        self.no_label = QLabel()
        self.no_label.setFixedWidth(40)
        self.content_label = QLabel()
        self.content_label.setWordWrap(False)
        self.datetime_label = QLabel()
        self.datetime_label.setAlignment(Qt.AlignmentFlag.AlignRight | Qt.AlignmentFlag.AlignVCenter)
        self.delete_button = QPushButton("削除")
        self.delete_button.setCursor(Qt.CursorShape.PointingHandCursor)

        layout.addWidget(self.no_label)
        layout.addWidget(self.content_label, 1)
        layout.addWidget(self.datetime_label)
        layout.addWidget(self.delete_button)

        self.delete_button.clicked.connect(self._on_delete_clicked)

    @property
    def memo(self) -> Optional[Memo]:
        """現在バインドされているメモ。"""
        return self._memo

    def bind(self, memo: Memo) -> None:
        """行の表示内容と保持するメモを、指定されたメモで置き換える。"""
        self._memo = memo
        self.no_label.setText(f"{memo.id}")
        self.content_label.setText(memo.content)
        self.datetime_label.setText(format_memo_datetime(memo.created_at))

    def unbind(self) -> None:
        self._memo = None
        self.no_label.clear()
        self.content_label.clear()
        self.datetime_label.clear()

    def _on_delete_clicked(self) -> None:
        if self._memo is None:
            return
        self.delete_requested.emit(self._memo)


class MemoListView(QScrollArea):
    """
    MemoListModelの内容をMemoRowWidgetで縦に並べて表示するスクロール領域。

    行ウィジェットはプールとして保持し、モデルがリセットされるたびに先頭から順に
    再バインドします。不足した分だけ新しい行を作り、余った行は非表示にします。
    """

    def __init__(self, model: Optional[MemoListModel] = None, parent: Optional[QWidget] = None) -> None:
        """
        MemoListViewのコンストラクタ。

        Args:
            model (Optional[MemoListModel]): 表示するモデル。後から set_model() で設定してもよい。
            parent (Optional[QWidget]): 親ウィジェット。
        """
        super().__init__(parent)
        self.setWidgetResizable(True)
        self.setHorizontalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)

        self.rows: List[MemoRowWidget] = []
        self._model: Optional[MemoListModel] = None

        container = QWidget()
        self._rows_layout = QVBoxLayout(container)
        self._rows_layout.setContentsMargins(0, 0, 0, 0)
        self._rows_layout.setSpacing(2)
        self._rows_layout.addStretch()
        self.setWidget(container)

        if model is not None:
            self.set_model(model)

    def model(self) -> Optional[MemoListModel]:
        return self._model

    def set_model(self, model: MemoListModel) -> None:
        """表示するモデルを設定し、モデルの変更通知に接続する。"""
        if self._model is not None:
            self._model.modelReset.disconnect(self.rebind_rows)

        self._model = model
        model.modelReset.connect(self.rebind_rows)
        self.rebind_rows()

    def visible_rows(self) -> List[MemoRowWidget]:
        """現在メモがバインドされている行ウィジェットを表示順に返す。"""
        return [row for row in self.rows if row.memo is not None]

    def rebind_rows(self) -> None:
        """モデルの全行を行ウィジェットに再バインドする。"""
        count = self._model.rowCount() if self._model is not None else 0

        while len(self.rows) < count:
            row = MemoRowWidget()
            row.delete_requested.connect(self._on_delete_requested)
            # 末尾のストレッチより前に挿入する
            self._rows_layout.insertWidget(len(self.rows), row)
            self.rows.append(row)

        for i, row in enumerate(self.rows):
            if i < count:
                row.bind(self._model.memo_at(i))
                row.setHidden(False)
            else:
                row.unbind()
                row.setHidden(True)

    def _on_delete_requested(self, memo: Memo) -> None:
        if self._model is not None:
            self._model.delete_memo(memo)
