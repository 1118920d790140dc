from bottlesort.engine.state import PuzzleState
from bottlesort.engine.win import is_solved_bottle, is_win

A, B = "#FF5733", "#33FF57"

def test_examples():
    assert is_win([[A, A, A, A], [], [B, B, B, B]]) is True
    assert is_win([[A, A, A, B]]) is False
    assert is_win([[A, A, A, A], [B, B, B]]) is False

def test_empty_board_is_vacuous_win():
    assert is_win([]) is True
    assert is_win([[], []]) is True

def test_accepts_state():
    st = PuzzleState.from_lists([[B, B, B, B], []])
    assert is_win(st)

def test_solved_bottle():
    assert is_solved_bottle([A] * 4)
    assert not is_solved_bottle([A] * 3)
    assert not is_solved_bottle([A] * 5)
    assert is_solved_bottle([A] * 3, capacity=3)
