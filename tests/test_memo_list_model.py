import pytest
from PyQt6.QtCore import Qt

from models.memo_models import Memo
from services.exceptions import MemoNotPersistedError
from ui.widgets import MemoListModel


@pytest.fixture
def model(qapp, memo_service):
    return MemoListModel(memo_service)


def _record_resets(model):
    resets = []
    model.modelReset.connect(lambda: resets.append(len(model.memos)))
    return resets


def test_initial_population_from_store(qapp, memo_service):
    memo_service.create_memo(Memo(None, "existing", 10))

    model = MemoListModel(memo_service)

    assert model.rowCount() == 1
    assert model.memo_at(0) == Memo(1, "existing", 10)


def test_add_memo_reloads_with_assigned_ids(model):
    resets = _record_resets(model)

    assert model.add_memo("buy milk", created_at=1000) is True
    assert model.add_memo("call mom", created_at=2000) is True

    assert model.memos == [Memo(1, "buy milk", 1000), Memo(2, "call mom", 2000)]
    assert resets == [1, 2]


def test_add_memo_uses_current_time_by_default(model, monkeypatch):
    monkeypatch.setattr("ui.widgets.memo_list_model.now_millis", lambda: 777)

    model.add_memo("now")

    assert model.memo_at(0).created_at == 777


def test_empty_input_is_ignored(model, memo_service):
    resets = _record_resets(model)

    assert model.add_memo("") is False

    assert memo_service.load_memos() == []
    assert model.rowCount() == 0
    assert resets == []


def test_delete_memo_removes_from_store_and_mirror(model, memo_service):
    model.add_memo("one", created_at=1)
    model.add_memo("two", created_at=2)
    resets = _record_resets(model)

    model.delete_memo(model.memo_at(0))

    assert memo_service.load_memos() == [Memo(2, "two", 2)]
    assert model.memos == [Memo(2, "two", 2)]
    assert resets == [1]


def test_delete_unsaved_memo_raises_and_keeps_mirror(model):
    model.add_memo("one", created_at=1)

    with pytest.raises(MemoNotPersistedError):
        model.delete_memo(Memo(None, "one", 1))

    assert model.rowCount() == 1


def test_update_memo_refreshes_mirror(model):
    model.add_memo("a", created_at=100)

    model.update_memo(Memo(1, "b", 200))

    assert model.memos == [Memo(1, "b", 200)]


def test_refresh_picks_up_external_changes(model, memo_service):
    memo_service.create_memo(Memo(None, "outside", 5))
    assert model.rowCount() == 0

    model.refresh()

    assert model.memos == [Memo(1, "outside", 5)]


def test_data_roles(model):
    model.add_memo("hello", created_at=42)
    index = model.index(0, 0)

    assert model.data(index, Qt.ItemDataRole.DisplayRole) == "hello"
    assert model.data(index, MemoListModel.MemoRole) == Memo(1, "hello", 42)
    assert model.data(index, MemoListModel.IdRole) == 1
    assert model.data(index, MemoListModel.CreatedAtRole) == 42
    assert model.data(model.index(5, 0), Qt.ItemDataRole.DisplayRole) is None
