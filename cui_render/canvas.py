"""
Canvas
=======
Fixed-size layered cell grid, flushed to a text stream once per frame.

Out-of-bounds draws are caller bugs checked with ``assert`` (compiled out
under ``python -O``). Stream write errors are the only errors that
propagate to the caller.
"""

from dataclasses import dataclass
from typing import Any, Generic, List, Optional, Protocol, TypeVar
import logging

try:
    from blessed import Terminal
except ImportError:
    raise ImportError("'blessed' library required. Install with: pip install blessed")

from .geometry import Pair
from .units import RenderCell, UnitColor


logger = logging.getLogger(__name__)


# =============================================================================
# CONSTANTS
# =============================================================================

# Interior size in squares; the drawn width adds one border square per side
CANVAS_WIDTH = 40 - 2
CANVAS_HEIGHT = 30

CANVAS_BOUNDARY_COLOR = UnitColor.WHITE


class Layer(Protocol):
    """Any totally ordered depth value. Higher or equal layers win."""

    def __ge__(self, other: Any) -> bool:
        ...


L = TypeVar('L', bound=Layer)


@dataclass(frozen=True)
class CanvasSlot(Generic[L]):
    """What one grid point holds once something is drawn there."""
    unit: RenderCell
    layer: L


class Canvas(Generic[L]):
    """
    Fixed CANVAS_WIDTH x CANVAS_HEIGHT grid of optional (cell, layer) slots.

    A draw replaces the slot contents only when its layer is greater than
    or equal to the layer already there, so the last writer wins ties.
    """

    def __init__(self, term: Optional[Terminal] = None):
        self.term = term if term is not None else Terminal()
        self.slots: List[List[Optional[CanvasSlot[L]]]] = []
        self._init_slots()

    def _init_slots(self):
        self.slots = [
            [None for _ in range(CANVAS_WIDTH)]
            for _ in range(CANVAS_HEIGHT)
        ]

    def size(self) -> Pair:
        """Size in console squares, borders excluded."""
        return Pair(CANVAS_WIDTH, CANVAS_HEIGHT)

    def is_drawable_at(self, position: Pair) -> bool:
        """Check if a position lies inside the grid."""
        return 0 <= position.x < CANVAS_WIDTH and 0 <= position.y < CANVAS_HEIGHT

    def slot_at(self, position: Pair) -> Optional[CanvasSlot[L]]:
        """Current contents of a grid point, or None if blank."""
        assert self.is_drawable_at(position), f"{position} is outside the canvas"
        return self.slots[position.y][position.x]

    def draw_unit(self, unit: RenderCell, position: Pair, layer: L):
        """Draw a cell unless a higher layer already occupies the point."""
        assert 0 <= position.x < CANVAS_WIDTH, f"x={position.x} is outside the canvas"
        assert 0 <= position.y < CANVAS_HEIGHT, f"y={position.y} is outside the canvas"
        current = self.slots[position.y][position.x]
        if current is None or layer >= current.layer:
            self.slots[position.y][position.x] = CanvasSlot(unit, layer)

    def clear(self):
        """Blank every grid point."""
        for row in self.slots:
            for x in range(CANVAS_WIDTH):
                row[x] = None

    def write_to(self, stream):
        """
        Write the whole canvas, borders included, to a text stream.

        Output goes out one row at a time, each row ending in a newline.
        If a write fails the exception propagates unchanged and the
        remaining rows are not written; rows already written stay written.
        """
        for index, row in enumerate(self._rows()):
            try:
                stream.write(row + '\n')
            except Exception:
                logger.warning("Canvas write failed at output row %d", index)
                raise

    def _rows(self):
        """Yield each output row as a styled string."""
        term = self.term
        top = RenderCell.from_double_half_char('_', '_', CANVAS_BOUNDARY_COLOR)
        left = RenderCell.from_double_half_char(' ', '|', CANVAS_BOUNDARY_COLOR)
        right = RenderCell.from_double_half_char('|', ' ', CANVAS_BOUNDARY_COLOR)
        bottom = RenderCell.from_single_full_char('￣', CANVAS_BOUNDARY_COLOR)
        blank = RenderCell.blank().render(term)

        yield top.render(term) * (CANVAS_WIDTH + 2)

        left_text = left.render(term)
        right_text = right.render(term)
        for slot_row in self.slots:
            parts = [left_text]
            for slot in slot_row:
                parts.append(blank if slot is None else slot.unit.render(term))
            parts.append(right_text)
            yield ''.join(parts)

        yield bottom.render(term) * (CANVAS_WIDTH + 2)
