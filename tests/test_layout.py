from bottlesort.render.layout import BOTTLE_H, BOTTLE_W, TOP_MARGIN, BoardLayout
from bottlesort.ui.status_bar import PickerLayout, picker_hit

def test_even_spacing():
    lay = BoardLayout.for_width(300, 3)
    # (300 - 3*60) / 4
    assert lay.spacing == 30
    assert lay.bottle_origin(0) == (30, TOP_MARGIN)
    assert lay.bottle_origin(2) == (30 + 2 * 90, TOP_MARGIN)

def test_bottle_at():
    lay = BoardLayout.for_width(300, 3)
    assert lay.bottle_at(30, TOP_MARGIN) == 0
    assert lay.bottle_at(30 + BOTTLE_W, TOP_MARGIN + BOTTLE_H) == 0
    assert lay.bottle_at(125, 100) == 1
    assert lay.bottle_at(10, 100) is None
    assert lay.bottle_at(125, 5) is None

def test_layer_rect_bottom_up():
    lay = BoardLayout.for_width(300, 3)
    _, y0, _, h0 = lay.layer_rect(0, 0)
    _, y3, _, _ = lay.layer_rect(0, 3)
    assert h0 == BOTTLE_H / 4
    assert y0 + h0 == TOP_MARGIN + BOTTLE_H
    assert y3 == TOP_MARGIN

def test_picker_hit():
    colors = ["#FF5733", "#33FF57"]
    picker = PickerLayout(origin_xy=(100, 10), count=2)
    assert picker_hit(100, 10, picker, colors) == "#FF5733"
    assert picker_hit(100 + 42, 20, picker, colors) == "#33FF57"
    assert picker_hit(99, 10, picker, colors) is None
    assert picker_hit(100 + 35, 20, picker, colors) is None

def test_picker_for_state_right_aligned():
    from bottlesort.engine.state import PuzzleState
    from bottlesort.ui.status_bar import PICKER_RIGHT, PICKER_TOP, SWATCH, SWATCH_STEP
    st = PuzzleState.from_lists([[]], ["#FF5733", "#33FF57", "#3357FF"])
    picker = PickerLayout.for_state(640, 190, st)
    assert picker.count == 3
    assert picker.origin_xy == (640 - 3 * SWATCH_STEP - PICKER_RIGHT, 190 + PICKER_TOP)
    x, _, w, _ = picker.swatch_rect(2)
    assert x + w + SWATCH_STEP - SWATCH == 640 - PICKER_RIGHT

def test_picker_follows_level_change():
    from bottlesort.engine.controller import LevelController, NextLevel
    from fakes import NoShuffle

    pickers = []
    ctl = LevelController(1, rng=NoShuffle(),
                          sink=lambda st: pickers.append(PickerLayout.for_state(640, 190, st)))
    assert pickers[-1].count == 2
    ctl.dispatch(NextLevel())
    picker = pickers[-1]
    assert picker.count == len(ctl.state.colors) == 3
    # every drawn swatch arms the colour it shows
    for i, color in enumerate(ctl.state.colors):
        x, y, _, _ = picker.swatch_rect(i)
        assert picker_hit(x + 1, y + 1, picker, ctl.state.colors) == color
