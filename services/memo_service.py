# services/memo_service.py
import threading
from typing import List, Optional, Sequence

from .base_service import BaseService
from .exceptions import MemoNotPersistedError
from .schema import MIGRATIONS, MigrationStep, ensure_schema
from .storage_service import StorageService
from models.memo_models import Memo
from utils.logging_utils import get_logger

logger = get_logger(__name__)


class MemoService(BaseService[Memo]):
    """memoテーブルに対するCRUD操作を管理するサービスクラス。

    メモの作成、一覧読み込み、更新、削除機能を提供します。
    各操作はStorageServiceから接続を一つ取得し、処理後に必ず解放します。
    操作同士はロックで直列化されます。
    """

    DEFAULT_SCHEMA_VERSION = 1

    def __init__(
        self,
        storage_service: StorageService,
        schema_version: int = DEFAULT_SCHEMA_VERSION,
        migrations: Sequence[MigrationStep] = MIGRATIONS,
    ) -> None:
        """MemoServiceのコンストラクタ。

        Args:
            storage_service (StorageService): データ永続化のためのストレージサービス。
            schema_version (int): 初期化時に要求するスキーマバージョン。
            migrations (Sequence[MigrationStep]): バージョンアップ時に適用するマイグレーション。
        """
        super().__init__(storage_service=storage_service)
        self.schema_version = schema_version
        self.migrations = migrations
        self._lock = threading.RLock()
        self._initialized = False

    def initialize(self, schema_version: Optional[int] = None) -> None:
        """テーブルが存在することを保証し、必要ならマイグレーションを適用する。

        何度呼び出しても安全です。初回はテーブルを作成し、
        バージョンが上がっていれば登録済みのマイグレーションを実行します。

        Args:
            schema_version (Optional[int]): 要求するスキーマバージョン。省略時はコンストラクタの値。

        Raises:
            SchemaVersionError: ダウングレード、または1未満のバージョンが要求された場合。
        """
        with self._lock:
            if schema_version is not None:
                self.schema_version = schema_version
            with self.storage_service.connect() as conn:
                old, new = ensure_schema(conn, self.schema_version, self.migrations)
            self._initialized = True
        if old != new:
            logger.info("メモストアを初期化しました: %s (version %d -> %d)",
                        self.storage_service.db_path, old, new)

    def _ensure_initialized(self) -> None:
        if not self._initialized:
            self.initialize()

    def create_memo(self, memo: Memo) -> None:
        """メモを新しい行として挿入する。

        IDはデータベースが採番するため、memo.id は無視されます。
        採番されたIDを知るには load_memos() で読み直す必要があります。

        Args:
            memo (Memo): 挿入するメモ。content と created_at が使用される。
        """
        with self._lock:
            self._ensure_initialized()
            with self.storage_service.connect() as conn:
                conn.execute(
                    "INSERT INTO memo (content, datetime) VALUES (?, ?)",
                    (memo.content, memo.created_at),
                )
        logger.debug("メモを保存しました: %d文字", len(memo.content))

    def load_memos(self) -> List[Memo]:
        """保存されているすべてのメモをID昇順のリストとして取得する。

        Returns:
            List[Memo]: 呼び出しごとに新しく生成されるメモのリスト。
        """
        with self._lock:
            self._ensure_initialized()
            with self.storage_service.connect() as conn:
                rows = conn.execute(
                    "SELECT no, content, datetime FROM memo ORDER BY no ASC"
                ).fetchall()
        return [Memo(id=no, content=content, created_at=datetime) for no, content, datetime in rows]

    def update_memo(self, memo: Memo) -> int:
        """指定されたIDの行の content と datetime を上書きする。

        該当する行がなくてもエラーにはなりません。

        Args:
            memo (Memo): 更新内容。IDが採番済みである必要がある。

        Returns:
            int: 更新された行数（0または1）。

        Raises:
            MemoNotPersistedError: memo.id が None の場合。
        """
        if memo.id is None:
            raise MemoNotPersistedError("update")
        with self._lock:
            self._ensure_initialized()
            with self.storage_service.connect() as conn:
                cur = conn.execute(
                    "UPDATE memo SET content = ?, datetime = ? WHERE no = ?",
                    (memo.content, memo.created_at, memo.id),
                )
                affected = cur.rowcount
        if not affected:
            logger.debug("更新対象のメモが見つかりませんでした: id=%s", memo.id)
        return affected

    def delete_memo(self, memo: Memo) -> int:
        """指定されたメモのIDに一致する行を削除する。

        該当する行がない場合は何もしません。

        Args:
            memo (Memo): 削除するメモ。IDが採番済みである必要がある。

        Returns:
            int: 削除された行数（0または1）。

        Raises:
            MemoNotPersistedError: memo.id が None の場合。
        """
        if memo.id is None:
            raise MemoNotPersistedError("delete")
        with self._lock:
            self._ensure_initialized()
            with self.storage_service.connect() as conn:
                cur = conn.execute("DELETE FROM memo WHERE no = ?", (memo.id,))
                affected = cur.rowcount
        logger.debug("メモを削除しました: id=%s (%d行)", memo.id, affected)
        return affected

    def count_memos(self) -> int:
        """保存されているメモの件数を返す。"""
        with self._lock:
            self._ensure_initialized()
            with self.storage_service.connect() as conn:
                (count,) = conn.execute("SELECT COUNT(*) FROM memo").fetchone()
        return count

    def load_data(self, identifier: int) -> Optional[Memo]:
        """BaseServiceから継承したメソッド。IDを指定してメモを一件読み込む。

        Args:
            identifier (int): 読み込むメモのID。

        Returns:
            Optional[Memo]: 読み込まれたメモ。見つからない場合はNone。
        """
        with self._lock:
            self._ensure_initialized()
            with self.storage_service.connect() as conn:
                row = conn.execute(
                    "SELECT no, content, datetime FROM memo WHERE no = ?", (identifier,)
                ).fetchone()
        if row is None:
            return None
        return Memo(id=row[0], content=row[1], created_at=row[2])

    def save_data(self, data: Memo) -> None:
        """BaseServiceから継承したメソッド。IDの有無に応じて作成または更新を行う。

        Args:
            data (Memo): 保存するメモ。
        """
        if data.id is None:
            self.create_memo(data)
        else:
            self.update_memo(data)
