"""
Message Buffer
===============
Bounded scrollback of message lines, drawn into a bordered panel.

Lines are word-wrapped at the panel width and laid out bottom-up, newest
line last, so the panel always shows the most recent messages. Nothing
about the scroll position is stored; every draw recomputes the layout.
"""

from collections import deque
from typing import Deque, Iterable, Iterator, Tuple
import logging

from .canvas import L
from .geometry import Pair, Rectangle
from .ui_canvas import UiCanvas
from .units import RenderCell, UnitColor, segment


logger = logging.getLogger(__name__)


def div_ceil(x: int, y: int) -> int:
    """Smallest integer not below x / y."""
    assert y != 0, "division by zero"
    return x // y + (0 if x % y == 0 else 1)


class MessageLine:
    """
    One logical message line.

    Holds at most max_message_length cells; appending past that drops the
    oldest cells from the front. Only a growable line accepts more text.
    """

    def __init__(self, max_message_length: int, growable: bool):
        self.units: Deque[RenderCell] = deque(maxlen=max_message_length)
        self.growable = growable
        self.max_message_length = max_message_length

    @classmethod
    def empty_growable_line(cls, max_message_length: int) -> 'MessageLine':
        return cls(max_message_length, growable=True)

    @classmethod
    def empty_sealed_line(cls) -> 'MessageLine':
        return cls(0, growable=False)

    def __len__(self) -> int:
        return len(self.units)

    def __iter__(self) -> Iterator[RenderCell]:
        return iter(self.units)

    def append_message(self, units: Iterable[RenderCell]):
        assert self.growable, "cannot append to a sealed message line"
        self.units.extend(units)

    def seal(self):
        assert self.growable, "message line is already sealed"
        self.growable = False

    def rows(self, width: int) -> Iterator[Tuple[RenderCell, ...]]:
        """Split the line into consecutive chunks of at most width cells."""
        units = tuple(self.units)
        for start in range(0, len(units), width):
            yield units[start:start + width]


class MessageBuffer:
    """
    Scrollback of at most max_line_count lines.

    Only the last line can be growable: add_text extends it, add_newline
    seals it. When a new line would exceed max_line_count the oldest line
    is dropped.
    """

    def __init__(self, max_line_count: int, max_message_length: int,
                 border_unit: RenderCell):
        assert max_line_count >= 1, "message buffer must hold at least one line"
        self._lines: Deque[MessageLine] = deque()
        self.max_line_count = max_line_count
        self.max_message_length = max_message_length
        self.border_unit = border_unit

    @property
    def lines(self) -> Tuple[MessageLine, ...]:
        """Current lines, oldest first."""
        return tuple(self._lines)

    def add_text(self, text: str, color: UnitColor):
        """Append text to the growable last line, starting a new line if needed."""
        units = segment(text, color)
        if self._lines and self._lines[-1].growable:
            self._lines[-1].append_message(units)
        else:
            line = MessageLine.empty_growable_line(self.max_message_length)
            line.append_message(units)
            self._add_new_message_line(line)

    def add_newline(self):
        """Seal the growable last line, or add an empty sealed line."""
        if self._lines and self._lines[-1].growable:
            self._lines[-1].seal()
        else:
            self._add_new_message_line(MessageLine.empty_sealed_line())

    def add_line(self, text: str, color: UnitColor):
        """Add text as one complete line."""
        self.add_text(text, color)
        self.add_newline()

    def draw_message(self, ui_canvas: UiCanvas[L], region: Rectangle, layer: L):
        """
        Draw the panel: border, blank interior, then the newest lines.

        Lines are laid out from the bottom of the interior upward, each
        wrapped at the interior width. Rows above the interior are clipped
        and older lines that cannot reach the interior are skipped.
        """
        assert region.width >= 1, "message region must be at least one cell wide"
        self._draw_border_and_fill_inner(ui_canvas, region, layer)

        interior = Rectangle(region.left + 1, region.top + 1,
                             region.right - 1, region.bottom - 1)
        if interior.width < 1 or interior.height < 1:
            return

        # Row the next (older) line's last chunk lands on
        current_end_row = interior.bottom
        for line in reversed(self._lines):
            if current_end_row < interior.top:
                break
            rows_needed = max(div_ceil(len(line), interior.width), 1)
            start_row = current_end_row - rows_needed + 1

            for index, units in enumerate(line.rows(interior.width)):
                row = start_row + index
                if row < interior.top:
                    continue
                for column, unit in enumerate(units):
                    ui_canvas.draw_unit(unit, Pair(interior.left + column, row), layer)

            current_end_row -= rows_needed

    def _draw_border_and_fill_inner(self, ui_canvas: UiCanvas[L],
                                    region: Rectangle, layer: L):
        blank = RenderCell.blank()
        for row in range(region.top, region.bottom + 1):
            is_horizontal_border = row in (region.top, region.bottom)
            for column in range(region.left, region.right + 1):
                is_border = is_horizontal_border or column in (region.left, region.right)
                unit = self.border_unit if is_border else blank
                ui_canvas.draw_unit(unit, Pair(column, row), layer)

    def _add_new_message_line(self, line: MessageLine):
        if len(self._lines) == self.max_line_count:
            self._lines.popleft()
            logger.debug("Message buffer full (%d lines), dropped oldest line",
                         self.max_line_count)
        self._lines.append(line)
