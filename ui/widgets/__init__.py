from .memo_list_model import MemoListModel
from .memo_list import MemoRowWidget, MemoListView

__all__ = [
    "MemoListModel",
    "MemoRowWidget",
    "MemoListView",
]
