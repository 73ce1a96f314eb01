import os
import sys

import pytest

# ヘッドレス環境でQtを実行できるようにする
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from services.memo_service import MemoService
from services.storage_service import StorageService


@pytest.fixture(scope="session")
def qapp():
    from PyQt6.QtWidgets import QApplication
    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture
def db_path(tmp_path):
    return str(tmp_path / "data" / "memo.db")


@pytest.fixture
def storage_service(db_path):
    return StorageService(db_path)


@pytest.fixture
def memo_service(storage_service):
    service = MemoService(storage_service)
    service.initialize(1)
    return service
