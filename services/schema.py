# services/schema.py
"""
メモデータベースのスキーマ作成とマイグレーションを提供します。

スキーマバージョンはSQLiteの ``PRAGMA user_version`` に記録されます。
バージョンが上がった場合は、MIGRATIONS に登録されたステップのうち
(旧バージョン, 新バージョン] の範囲に入るものを昇順に適用します。
"""
from __future__ import annotations
import sqlite3
from dataclasses import dataclass
from typing import Callable, List, Sequence, Tuple

from services.exceptions import SchemaVersionError
from utils.logging_utils import get_logger

logger = get_logger(__name__)

TABLE_NAME = "memo"

CREATE_TABLE_SQL = (
    "create table if not exists memo ("
    "no integer primary key, "
    "content text, "
    "datetime integer"
    ")"
)


@dataclass(frozen=True)
class MigrationStep:
    """
    スキーマを ``version`` へ引き上げる一つのマイグレーション。

    Attributes:
        version (int): このステップを適用した後のスキーマバージョン。
        description (str): ログに出力する説明。
        apply (Callable[[sqlite3.Connection], None]): 同一トランザクション内で実行される処理。
    """
    version: int
    description: str
    apply: Callable[[sqlite3.Connection], None]


# バージョン1が初期スキーマ。スキーマを変更する際はここにステップを追加する。
MIGRATIONS: List[MigrationStep] = []


def get_user_version(conn: sqlite3.Connection) -> int:
    """データベースに記録されているスキーマバージョンを返す。未作成の場合は0。"""
    row = conn.execute("PRAGMA user_version").fetchone()
    return int(row[0]) if row else 0


def set_user_version(conn: sqlite3.Connection, version: int) -> None:
    # PRAGMAはプレースホルダを受け付けない
    conn.execute(f"PRAGMA user_version = {int(version)}")


def ensure_schema(
    conn: sqlite3.Connection,
    version: int,
    migrations: Sequence[MigrationStep] = MIGRATIONS,
) -> Tuple[int, int]:
    """
    テーブルの作成、またはバージョンアップ時のマイグレーションを行う。何度呼び出しても安全。

    Args:
        conn (sqlite3.Connection): 操作対象の接続。
        version (int): アプリケーションが要求するスキーマバージョン（1以上）。
        migrations (Sequence[MigrationStep]): 適用候補のマイグレーション一覧。

    Returns:
        Tuple[int, int]: (処理前のバージョン, 処理後のバージョン)。

    Raises:
        SchemaVersionError: versionが1未満、または記録済みのバージョンより低い場合。
    """
    # DDLとPRAGMAも含めて一つのトランザクションにまとめる
    if not conn.in_transaction:
        conn.execute("BEGIN IMMEDIATE")
    current = get_user_version(conn)
    if version < 1 or version < current:
        raise SchemaVersionError(current, version)

    if version == current:
        return current, version

    # 新規作成時は初期スキーマ(バージョン1)を作成し、残りをマイグレーションで引き上げる
    base = current
    if current == 0:
        conn.execute(CREATE_TABLE_SQL)
        logger.info("memoテーブルを作成しました")
        base = 1

    steps = sorted(
        (m for m in migrations if base < m.version <= version),
        key=lambda m: m.version,
    )
    if not steps and base < version:
        logger.warning(
            "スキーマバージョンが %d から %d に上がりましたが、適用するマイグレーションがありません",
            base, version,
        )
    for step in steps:
        logger.info("マイグレーションを適用します: v%d %s", step.version, step.description)
        step.apply(conn)
    set_user_version(conn, version)
    return current, version
