import pytest

from models.memo_models import Memo
from ui.screens.memo_screen import MemoScreen
from ui.widgets import MemoListModel, MemoListView, MemoRowWidget
from utils.date_utils import format_memo_datetime


@pytest.fixture
def model(qapp, memo_service):
    return MemoListModel(memo_service)


def test_row_bind_renders_memo(qapp):
    row = MemoRowWidget()
    memo = Memo(3, "hello", 1704424020000)

    row.bind(memo)

    assert row.memo is memo
    assert row.no_label.text() == "3"
    assert row.content_label.text() == "hello"
    assert row.datetime_label.text() == format_memo_datetime(1704424020000)


def test_row_delete_emits_latest_bound_memo(qapp):
    row = MemoRowWidget()
    emitted = []
    row.delete_requested.connect(emitted.append)

    row.bind(Memo(1, "first", 1))
    row.bind(Memo(2, "second", 2))
    row.delete_button.click()

    assert emitted == [Memo(2, "second", 2)]


def test_unbound_row_does_not_emit(qapp):
    row = MemoRowWidget()
    emitted = []
    row.delete_requested.connect(emitted.append)

    row.delete_button.click()
    row.bind(Memo(1, "x", 1))
    row.unbind()
    row.delete_button.click()

    assert emitted == []
    assert row.content_label.text() == ""


def test_view_binds_rows_in_model_order(model):
    for i, text in enumerate(["a", "b", "c"]):
        model.add_memo(text, created_at=i)

    view = MemoListView(model)

    assert [row.memo.content for row in view.visible_rows()] == ["a", "b", "c"]


def test_view_reuses_rows_after_delete(model, memo_service):
    for i, text in enumerate(["a", "b", "c"]):
        model.add_memo(text, created_at=i)
    view = MemoListView(model)
    pool = list(view.rows)

    view.rows[0].delete_button.click()

    assert view.rows == pool
    assert [row.memo.id for row in view.visible_rows()] == [2, 3]
    assert view.rows[2].isHidden()

    # 再バインド後の同じ行ウィジェットは新しいメモを削除する
    view.rows[0].delete_button.click()

    assert [m.id for m in memo_service.load_memos()] == [3]
    assert [row.memo.id for row in view.visible_rows()] == [3]


def test_view_grows_pool_on_create(model):
    view = MemoListView(model)
    assert view.rows == []

    model.add_memo("new", created_at=1)

    assert len(view.rows) == 1
    assert not view.rows[0].isHidden()


def test_screen_saves_and_clears_input(qapp, memo_service):
    screen = MemoScreen(memo_service)

    screen.memo_edit.setText("buy milk")
    screen.save_button.click()

    assert screen.memo_edit.text() == ""
    assert [m.content for m in memo_service.load_memos()] == ["buy milk"]
    assert [row.memo.content for row in screen.memo_list.visible_rows()] == ["buy milk"]


def test_screen_ignores_empty_input(qapp, memo_service):
    screen = MemoScreen(memo_service)

    screen.memo_edit.setText("")
    screen.save_button.click()

    assert memo_service.load_memos() == []
    assert screen.list_model.rowCount() == 0


def test_screen_end_to_end(qapp, memo_service):
    screen = MemoScreen(memo_service)

    for text in ["buy milk", "call mom"]:
        screen.memo_edit.setText(text)
        screen.save_button.click()
    assert [row.memo.id for row in screen.memo_list.visible_rows()] == [1, 2]

    screen.memo_list.rows[0].delete_button.click()

    remaining = memo_service.load_memos()
    assert [(m.id, m.content) for m in remaining] == [(2, "call mom")]
    assert screen.list_model.memos == remaining


def test_view_follows_only_the_current_model(qapp, memo_service, tmp_path):
    from services.memo_service import MemoService
    from services.storage_service import StorageService

    first = MemoListModel(memo_service)
    other_service = MemoService(StorageService(str(tmp_path / "other.db")))
    other_service.create_memo(Memo(None, "other", 1))
    second = MemoListModel(other_service)
    view = MemoListView(first)

    view.set_model(second)
    first.add_memo("ignored", created_at=2)

    assert [row.memo.content for row in view.visible_rows()] == ["other"]
