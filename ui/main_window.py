# ui/main_window.py
from typing import Optional

from PyQt6.QtWidgets import QMainWindow

from services.memo_service import MemoService
from services.storage_service import StorageService
from ui.screens.memo_screen import MemoScreen
from utils.app_config import AppConfig
from utils.logging_utils import get_logger

logger = get_logger(__name__)


class MainWindow(QMainWindow):
    """
    アプリケーションのメインウィンドウ。

    設定からストレージとメモストアを組み立て、メモ画面を中央ウィジェットとして表示します。
    """

    def __init__(self, config: Optional[AppConfig] = None,
                 memo_service: Optional[MemoService] = None) -> None:
        """
        MainWindowのコンストラクタ。

        Args:
            config (Optional[AppConfig]): 起動設定。Noneの場合は既定値を使用。
            memo_service (Optional[MemoService]): 使用するストア。Noneの場合は設定から生成する。
        """
        super().__init__()
        self.config: AppConfig = config or AppConfig()
        self.setWindowTitle(self.config.window_title)
        self.setGeometry(100, 100, 480, 720)

        if memo_service is None:
            storage_service = StorageService(self.config.db_path)
            memo_service = MemoService(storage_service, self.config.schema_version)
        self.memo_service: MemoService = memo_service
        # アプリケーションの生存期間中に一度だけスキーマを確認する
        self.memo_service.initialize()
        logger.info("メモデータベースを開きました: %s", self.memo_service.storage_service.db_path)

        self.memo_screen: MemoScreen = MemoScreen(self.memo_service, self)
        self.setCentralWidget(self.memo_screen)
