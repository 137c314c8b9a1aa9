import pytest
from cui_render.geometry import CANVAS_LATTICE, WORLD_LATTICE, CastError, Pair, Rectangle


def test_pair_arithmetic():
    assert Pair(1, 2) + Pair(3, -4) == Pair(4, -2)
    assert Pair(1, 2) - Pair(3, -4) == Pair(-2, 6)

def test_try_cast_in_range():
    assert Pair(3, 4).try_cast(CANVAS_LATTICE) == Pair(3, 4)
    assert Pair(-3, 4).try_cast(WORLD_LATTICE) == Pair(-3, 4)

def test_try_cast_negative_to_canvas_fails():
    with pytest.raises(CastError):
        Pair(-1, 0).try_cast(CANVAS_LATTICE)

def test_try_cast_overflow_fails():
    with pytest.raises(CastError):
        Pair(2 ** 64, 0).try_cast(WORLD_LATTICE)
    with pytest.raises(CastError):
        Pair(0, 2 ** 64).try_cast(CANVAS_LATTICE)

def test_rectangle_from_corners():
    rect = Rectangle.from_corners(Pair(2, 3), Pair(6, 4))
    assert rect.left == 2 and rect.top == 3
    assert rect.right == 6 and rect.bottom == 4
    assert rect.width == 5
    assert rect.height == 2
    assert rect.top_left == Pair(2, 3)
    assert rect.bottom_right == Pair(6, 4)

def test_rectangle_contains():
    rect = Rectangle(0, 0, 2, 2)
    assert rect.contains(Pair(2, 2))
    assert not rect.contains(Pair(3, 0))

def test_inverted_rectangle_has_no_area():
    rect = Rectangle(5, 5, 4, 4)
    assert rect.width == 0
    assert rect.height == 0
