# ui/screens/memo_screen.py
"""
メモ画面のUIコンポーネントを提供します。

このモジュールには、ユーザーがメモを入力・保存し、保存済みのメモを一覧から
削除するためのUIを提供する MemoScreen クラスが含まれています。
"""
from __future__ import annotations
from typing import TYPE_CHECKING, Optional

from PyQt6.QtWidgets import (QWidget, QVBoxLayout, QHBoxLayout, QLineEdit,
                             QPushButton)
from PyQt6.QtGui import QFont

from ui.widgets import MemoListModel, MemoListView

if TYPE_CHECKING:
    from services.memo_service import MemoService

class MemoScreen(QWidget):
    """
    メモ画面のメインウィジェット。

    メモ入力欄と保存ボタン、および保存済みメモのスクロール一覧から構成されます。
    保存に成功すると入力欄はクリアされます。
    """

    def __init__(self, memo_service: MemoService, parent: Optional[QWidget] = None) -> None:
        """
        MemoScreenのコンストラクタ。

        Args:
            memo_service (MemoService): メモの永続化に使用するストア。
            parent (Optional[QWidget]): 親ウィジェット。
        """
        super().__init__(parent)

        # --- 定数設定 ---
        self.DEFAULT_FONT_SIZE: int = 14

        # --- メモデータ ---
        self.list_model: MemoListModel = MemoListModel(memo_service, self)

        # --- UI要素の型定義 ---
        self.memo_edit: QLineEdit
        self.save_button: QPushButton
        self.memo_list: MemoListView

        self.setup_ui()
        self.setup_connections()

    def setup_ui(self) -> None:
        """UIの構築とレイアウト設定を行う。"""
        layout = QVBoxLayout(self)

        self.memo_list = MemoListView(self.list_model)
        layout.addWidget(self.memo_list, 1)

        input_layout = self._create_input_bar_layout()
        layout.addLayout(input_layout)

    def _create_input_bar_layout(self) -> QHBoxLayout:
        """メモ入力欄と保存ボタンのレイアウトを作成する。"""
        input_layout = QHBoxLayout()
        self.memo_edit = QLineEdit()
        self.memo_edit.setPlaceholderText("メモを入力")
        self.memo_edit.setFont(QFont(self.memo_edit.font().family(), self.DEFAULT_FONT_SIZE))
        self.save_button = QPushButton("保存")

        input_layout.addWidget(self.memo_edit, 1)
        input_layout.addWidget(self.save_button)
        return input_layout

    def setup_connections(self) -> None:
        """UI要素のシグナルとスロットを接続する。"""
        self.save_button.clicked.connect(self.save_current_memo)
        self.memo_edit.returnPressed.connect(self.save_current_memo)

    def save_current_memo(self) -> None:
        """
        入力欄の内容を新しいメモとして保存する。
        入力が空の場合は何もしません。
        """
        if self.list_model.add_memo(self.memo_edit.text()):
            self.memo_edit.clear()
