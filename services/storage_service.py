# services/storage_service.py
import os
import sqlite3
from contextlib import contextmanager
from typing import Iterator

from utils.logging_utils import get_logger

logger = get_logger(__name__)


class StorageService:
    """SQLiteデータベースファイルへの接続（ハンドル）を管理するサービスクラス。

    接続は操作ごとに開いて閉じます。複数の操作にまたがって接続を保持することはありません。
    """

    def __init__(self, db_path: str) -> None:
        """StorageServiceのコンストラクタ。

        Args:
            db_path (str): SQLiteデータベースファイルのパス。
                           親ディレクトリが存在しない場合は自動的に作成されます。
        """
        self.db_path = db_path
        os.makedirs(os.path.dirname(os.path.abspath(db_path)), exist_ok=True)

    @contextmanager
    def connect(self) -> Iterator[sqlite3.Connection]:
        """データベースへの接続を一つ開き、ブロックの終了時に必ず閉じる。

        ブロックが正常に終了した場合はコミットし、例外が発生した場合はロールバックしてから
        例外をそのまま再送出します。

        Yields:
            sqlite3.Connection: この操作のためだけに開かれた接続。

        Raises:
            sqlite3.Error: データベースファイルを開けない、またはSQLの実行に失敗した場合。
        """
        conn = sqlite3.connect(self.db_path)
        try:
            with conn:
                yield conn
        except sqlite3.Error as e:
            logger.error("データベース操作中にエラーが発生しました: %s, %s", self.db_path, e)
            raise
        finally:
            conn.close()
