from bottlesort.engine.state import PuzzleState
from bottlesort.ui.hud import status_text

def test_status_text():
    st = PuzzleState.from_lists([[]], level=3, score=120)
    assert status_text(st) == "Level 3  Score 120"
