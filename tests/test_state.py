from gui.state import IDLE, AppState, Idle, PendingConfirm
from taskboard.models.schemas import Task


def test_delete_flow_variants_compare_by_value():
    assert Idle() == IDLE
    assert PendingConfirm("1") == PendingConfirm("1")
    assert PendingConfirm("1") != PendingConfirm("2")
    assert PendingConfirm("1") != IDLE


def test_pending_helpers():
    state = AppState()
    assert state.pending_delete_id is None
    assert state.confirm_open is False

    state.delete_flow = PendingConfirm("abc")

    assert state.pending_delete_id == "abc"
    assert state.confirm_open is True


def test_find_and_counts():
    state = AppState(tasks=[
        Task(id="1", description="a"),
        Task(id="2", description="b", completed=True),
        Task(id="3", description="c"),
    ])

    assert state.find("2").description == "b"
    assert state.find("nope") is None
    assert state.counts() == (2, 1)


def test_states_do_not_share_lists():
    a, b = AppState(), AppState()
    a.tasks.append(Task(id="1", description="a"))
    assert b.tasks == []
