from bottlesort.engine.moves import MoveStatus, apply_move, select_color
from bottlesort.engine.state import PuzzleState

A, B = "#FF5733", "#33FF57"

def make_state(**kw):
    return PuzzleState.from_lists([[A, B, A, B], [B, A], []], [A, B], **kw)

def test_select_replaces_previous():
    st = select_color(make_state(), A)
    assert st.selected == A
    st = select_color(st, B)
    assert st.selected == B

def test_pour_success():
    st = select_color(make_state(score=30), A)
    new, out = apply_move(st, 1)
    assert out.status is MoveStatus.OK and out.applied
    assert out.points_gained == 10
    assert new.bottles[1] == (B, A, A)
    assert new.fill_of(1) == st.fill_of(1) + 1
    assert new.score == 40
    assert new.selected is None
    # input snapshot is untouched
    assert st.bottles[1] == (B, A)

def test_no_color_matching_rule():
    st = select_color(make_state(), B)
    new, out = apply_move(st, 1)  # top is A
    assert out.applied and new.top_of(1) == B

def test_pour_into_empty():
    new, out = apply_move(select_color(make_state(), B), 2)
    assert out.applied and new.bottles[2] == (B,)

def test_full_rejected_state_identical():
    st = select_color(make_state(), A)
    new, out = apply_move(st, 0)
    assert out.status is MoveStatus.CONTAINER_FULL
    assert not out.applied and out.points_gained == 0
    assert new is st
    assert new.selected == A

def test_no_selection():
    st = make_state()
    new, out = apply_move(st, 2)
    assert out.status is MoveStatus.NO_COLOR_SELECTED
    assert new is st

def test_bad_index():
    st = select_color(make_state(), A)
    for idx in (-1, 3, 99):
        new, out = apply_move(st, idx)
        assert out.status is MoveStatus.INVALID_CONTAINER_INDEX
        assert new is st

def test_selection_is_single_use():
    st = select_color(make_state(), A)
    st, _ = apply_move(st, 2)
    st, out = apply_move(st, 2)
    assert out.status is MoveStatus.NO_COLOR_SELECTED
    assert st.bottles[2] == (A,)

def test_winning_pour_reports_won():
    st = PuzzleState.from_lists([[A, A, A], [B, B, B, B], []], [A, B], selected=A)
    new, out = apply_move(st, 0)
    assert out.won
    st2 = PuzzleState.from_lists([[A, A], [B, B, B, B]], [A, B], selected=A)
    _, out2 = apply_move(st2, 0)
    assert out2.applied and not out2.won
