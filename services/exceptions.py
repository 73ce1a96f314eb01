# services/exceptions.py
"""メモストアが送出する例外を定義します。"""


class MemoStoreError(Exception):
    """メモストアに関するすべてのエラーの基底クラス。"""


class MemoNotPersistedError(MemoStoreError, ValueError):
    """IDが未採番のメモに対して、IDを必要とする操作（更新・削除）が要求された。

    呼び出し側の契約違反であり、実行時に回復すべき状況ではありません。
    """

    def __init__(self, operation: str) -> None:
        super().__init__(f"{operation} にはIDが採番済みのメモが必要です (id=None)")
        self.operation = operation


class SchemaVersionError(MemoStoreError):
    """要求されたスキーマバージョンが不正、またはダウングレードを要求している。"""

    def __init__(self, current: int, requested: int) -> None:
        super().__init__(
            f"スキーマバージョン {current} から {requested} への変更はサポートされていません"
        )
        self.current = current
        self.requested = requested
