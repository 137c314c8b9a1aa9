"""
Render Units
=============
Square render cells and the segmenter that packs text into them.

A console square is two columns wide: it holds either one full-width
glyph or two half-width glyphs. Glyph widths are checked with ``assert``,
so the checks run in normal builds and vanish under ``python -O``.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from wcwidth import wcwidth


class UnitColor(Enum):
    """The eight console colors. Values are blessed formatter names."""
    BLACK = 'black'
    BLUE = 'blue'
    CYAN = 'cyan'
    GREEN = 'green'
    MAGENTA = 'magenta'
    RED = 'red'
    WHITE = 'white'
    YELLOW = 'yellow'


def char_width(c: str) -> int:
    """Console columns taken by a single character (-1 for control chars)."""
    return wcwidth(c)


@dataclass(frozen=True)
class RenderCell:
    """
    Smallest drawable unit: one full-width glyph, or two half-width glyphs.

    Always occupies exactly one square on the console.
    """
    left: str
    right: Optional[str]
    color: UnitColor

    @classmethod
    def from_single_full_char(cls, c: str, color: UnitColor) -> 'RenderCell':
        assert char_width(c) == 2, f"{c!r} is not a full-width character"
        return cls(c, None, color)

    @classmethod
    def from_double_half_char(cls, left: str, right: str,
                              color: UnitColor) -> 'RenderCell':
        assert char_width(left) == 1, f"{left!r} is not a half-width character"
        assert char_width(right) == 1, f"{right!r} is not a half-width character"
        return cls(left, right, color)

    @classmethod
    def blank(cls) -> 'RenderCell':
        return cls.from_double_half_char(' ', ' ', UnitColor.WHITE)

    @classmethod
    def create_units_from(cls, text: str, color: UnitColor) -> List['RenderCell']:
        """
        Pack text into square cells.

        Half-width characters are paired up; a half-width character left
        without a partner (before a full-width one, or at the end) is
        padded with a space.
        """
        assert all(char_width(c) in (1, 2) for c in text), \
            f"{text!r} contains characters that are not 1 or 2 columns wide"

        units = []
        pending = None
        for c in text:
            if char_width(c) == 1:
                if pending is None:
                    pending = c
                else:
                    units.append(cls.from_double_half_char(pending, c, color))
                    pending = None
            else:
                if pending is not None:
                    units.append(cls.from_double_half_char(pending, ' ', color))
                    pending = None
                units.append(cls.from_single_full_char(c, color))

        # Only a half-width char can still be pending here
        if pending is not None:
            units.append(cls.from_double_half_char(pending, ' ', color))
        return units

    @property
    def text(self) -> str:
        """Unstyled glyph text."""
        return self.left if self.right is None else self.left + self.right

    def render(self, term) -> str:
        """Text wrapped in the terminal's color sequence for this cell."""
        return getattr(term, self.color.value)(self.text)


def segment(text: str, color: UnitColor) -> List[RenderCell]:
    """Shorthand for RenderCell.create_units_from."""
    return RenderCell.create_units_from(text, color)


def plain_text(units: List[RenderCell]) -> str:
    """Concatenate the unstyled text of a run of cells."""
    return ''.join(unit.text for unit in units)
