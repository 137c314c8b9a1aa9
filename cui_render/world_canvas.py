"""
World Canvas
=============
Draws game-field objects by projecting world coordinates onto the canvas.

World positions that land outside the canvas are dropped silently; that
is the normal case for anything off screen, not an error.
"""

from dataclasses import dataclass
from typing import Generic, Optional

from .canvas import Canvas, L
from .geometry import CANVAS_LATTICE, WORLD_LATTICE, CastError, Pair
from .units import UnitColor, segment


@dataclass(frozen=True)
class Reference:
    """
    Anchor mapping one world point onto one canvas point.

    Every other world point is translated by the same offset.
    """
    reference_canvas_position: Pair
    reference_world_position: Pair

    def canvas_position_of(self, world_position: Pair,
                           canvas: Canvas) -> Optional[Pair]:
        """Canvas point a world point is drawn at, or None if off-canvas."""
        try:
            offset = world_position - self.reference_world_position
            anchor = self.reference_canvas_position.try_cast(WORLD_LATTICE)
            canvas_position = (offset + anchor).try_cast(CANVAS_LATTICE)
        except CastError:
            return None

        if canvas.is_drawable_at(canvas_position):
            return canvas_position
        return None


class WorldCanvas(Generic[L]):
    """Canvas view addressed in world coordinates."""

    def __init__(self, canvas: Canvas[L], reference: Reference):
        self.canvas = canvas
        self.reference = reference

    def draw_unit(self, unit, world_position: Pair, layer: L):
        """Draw one cell at a world point. Off-canvas points draw nothing."""
        canvas_position = self.reference.canvas_position_of(world_position, self.canvas)
        if canvas_position is not None:
            self.canvas.draw_unit(unit, canvas_position, layer)

    def draw_text(self, text: str, color: UnitColor, world_position: Pair, layer: L):
        """Draw text eastward from a world point, clipping each cell on its own."""
        for i, unit in enumerate(segment(text, color)):
            self.draw_unit(unit, world_position + Pair(i, 0), layer)
