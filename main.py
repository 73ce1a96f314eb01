"""
アプリケーションのエントリーポイント。

このスクリプトは、設定とロギングを初期化したうえでPyQt6アプリケーションを生成し、
メインウィンドウであるMainWindowを表示して、アプリケーションのイベントループを開始します。
また、プロジェクトのルートディレクトリをPythonのパスに追加し、
他のモジュール（ui, servicesなど）を正しくインポートできるように設定します。
"""
import sys
import os
from PyQt6.QtWidgets import QApplication

# このファイル(main.py)があるディレクトリをsys.pathに追加し、
# uiフォルダやservicesフォルダなどのプロジェクト内モジュールを見つけられるようにします。
current_dir: str = os.path.dirname(os.path.abspath(__file__))
if current_dir not in sys.path:
    sys.path.append(current_dir)

from ui.main_window import MainWindow
from utils.app_config import AppConfig
from utils.logging_utils import setup_logging


def main() -> int:
    # 1. 環境変数から設定を読み込み、ロギングを初期化します。
    config: AppConfig = AppConfig.from_env()
    setup_logging(config.log_dir or None, config.log_level)

    # 2. PyQtアプリケーションインスタンスを作成します。
    app: QApplication = QApplication(sys.argv)

    # 3. メインウィンドウを作成して表示します。
    window: MainWindow = MainWindow(config)
    window.show()

    # 4. イベントループを開始し、終了コードを返します。
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
