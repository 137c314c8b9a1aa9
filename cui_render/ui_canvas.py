"""
UI Canvas
==========
Thin canvas view for HUD and panel drawing. UI coordinates are canvas
coordinates, so positions must already lie on the canvas.
"""

from typing import Generic

from .canvas import Canvas, L
from .geometry import Pair
from .units import RenderCell, UnitColor, segment


class UiCanvas(Generic[L]):
    """Canvas view addressed in UI coordinates."""

    def __init__(self, canvas: Canvas[L]):
        self.canvas = canvas

    def size(self) -> Pair:
        return self.canvas.size()

    def draw_unit(self, unit: RenderCell, ui_position: Pair, layer: L):
        self.canvas.draw_unit(unit, ui_position, layer)

    def draw_text(self, text: str, color: UnitColor, ui_position: Pair, layer: L):
        """Draw text left to right; cells past the right edge are dropped."""
        for i, unit in enumerate(segment(text, color)):
            position = ui_position + Pair(i, 0)
            if not self.canvas.is_drawable_at(position):
                break
            self.canvas.draw_unit(unit, position, layer)
