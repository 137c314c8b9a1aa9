import io

import pytest
from blessed import Terminal

from cui_render.canvas import Canvas, CANVAS_WIDTH, CANVAS_HEIGHT
from cui_render.geometry import Pair
from cui_render.units import RenderCell, UnitColor


def make_canvas():
    return Canvas(Terminal(force_styling=None))

def unit(text, color=UnitColor.WHITE):
    return RenderCell.from_double_half_char(text[0], text[1], color)


def test_canvas_size_and_bounds():
    canvas = make_canvas()
    assert canvas.size() == Pair(38, 30)
    assert canvas.is_drawable_at(Pair(0, 0))
    assert canvas.is_drawable_at(Pair(37, 29))
    assert not canvas.is_drawable_at(Pair(38, 0))
    assert not canvas.is_drawable_at(Pair(0, 30))
    assert not canvas.is_drawable_at(Pair(-1, 0))

def test_new_canvas_is_blank():
    canvas = make_canvas()
    assert canvas.slot_at(Pair(5, 5)) is None

def test_draw_on_empty_slot():
    canvas = make_canvas()
    canvas.draw_unit(unit("ab"), Pair(3, 4), 0)
    slot = canvas.slot_at(Pair(3, 4))
    assert slot.unit == unit("ab")
    assert slot.layer == 0

def test_lower_layer_does_not_overwrite():
    canvas = make_canvas()
    canvas.draw_unit(unit("hi"), Pair(1, 1), 1)
    canvas.draw_unit(unit("lo"), Pair(1, 1), 0)
    assert canvas.slot_at(Pair(1, 1)).unit == unit("hi")
    assert canvas.slot_at(Pair(1, 1)).layer == 1

def test_higher_layer_overwrites():
    canvas = make_canvas()
    canvas.draw_unit(unit("lo"), Pair(1, 1), 0)
    canvas.draw_unit(unit("hi"), Pair(1, 1), 1)
    assert canvas.slot_at(Pair(1, 1)).unit == unit("hi")

def test_equal_layer_last_writer_wins():
    canvas = make_canvas()
    canvas.draw_unit(unit("aa"), Pair(1, 1), 2)
    canvas.draw_unit(unit("bb"), Pair(1, 1), 2)
    assert canvas.slot_at(Pair(1, 1)).unit == unit("bb")

def test_any_ordered_layer_type():
    canvas = make_canvas()
    canvas.draw_unit(unit("aa"), Pair(0, 0), "m")
    canvas.draw_unit(unit("bb"), Pair(0, 0), "a")
    assert canvas.slot_at(Pair(0, 0)).unit == unit("aa")
    canvas.draw_unit(unit("cc"), Pair(0, 0), "z")
    assert canvas.slot_at(Pair(0, 0)).unit == unit("cc")

def test_draw_outside_canvas_is_contract_violation():
    canvas = make_canvas()
    with pytest.raises(AssertionError):
        canvas.draw_unit(unit("ab"), Pair(CANVAS_WIDTH, 0), 0)
    with pytest.raises(AssertionError):
        canvas.draw_unit(unit("ab"), Pair(0, CANVAS_HEIGHT), 0)

def test_clear_resets_slots():
    canvas = make_canvas()
    canvas.draw_unit(unit("ab"), Pair(2, 2), 5)
    canvas.clear()
    assert canvas.slot_at(Pair(2, 2)) is None
    # After clear, even a lower layer can draw again
    canvas.draw_unit(unit("cd"), Pair(2, 2), 0)
    assert canvas.slot_at(Pair(2, 2)).unit == unit("cd")

def test_write_blank_canvas():
    canvas = make_canvas()
    canvas.draw_unit(unit("xx"), Pair(0, 0), 0)
    canvas.clear()
    out = io.StringIO()
    canvas.write_to(out)

    rows = out.getvalue().split("\n")
    assert rows[-1] == ""
    rows = rows[:-1]
    assert len(rows) == CANVAS_HEIGHT + 2
    assert rows[0] == "__" * (CANVAS_WIDTH + 2)
    for row in rows[1:-1]:
        assert row == " |" + "  " * CANVAS_WIDTH + "| "
    assert rows[-1] == "￣" * (CANVAS_WIDTH + 2)

def test_write_places_cells():
    canvas = make_canvas()
    canvas.draw_unit(unit("@@"), Pair(0, 0), 0)
    canvas.draw_unit(RenderCell.from_single_full_char('木', UnitColor.GREEN), Pair(37, 29), 0)
    out = io.StringIO()
    canvas.write_to(out)
    rows = out.getvalue().split("\n")
    assert rows[1].startswith(" |@@  ")
    assert rows[CANVAS_HEIGHT].endswith("  木| ")

def test_write_failure_propagates_and_aborts():
    class FailingStream:
        def __init__(self, fail_after):
            self.fail_after = fail_after
            self.written = []

        def write(self, text):
            if len(self.written) == self.fail_after:
                raise OSError("disk full")
            self.written.append(text)

    canvas = make_canvas()
    stream = FailingStream(fail_after=3)
    with pytest.raises(OSError, match="disk full"):
        canvas.write_to(stream)
    # Rows before the failure stay written, nothing after it is attempted
    assert len(stream.written) == 3
