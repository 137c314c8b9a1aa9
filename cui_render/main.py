#!/usr/bin/env python3
"""
CUI Render Demo - Turn-based Walk
==================================
Walk a small forest and watch the message log scroll.

Controls:
    WASD / Arrows   - Move one step
    Q/ESC           - Quit
"""

from dataclasses import dataclass, field
from enum import IntEnum
import logging
import os
import sys

try:
    from blessed import Terminal
except ImportError:
    print("ERROR: 'blessed' library required. Install with: pip install blessed")
    sys.exit(1)

from .canvas import Canvas, CANVAS_WIDTH, CANVAS_HEIGHT
from .geometry import Pair, Rectangle
from .input import KeyboardInput
from .message_buffer import MessageBuffer
from .ui_canvas import UiCanvas
from .units import RenderCell, UnitColor
from .world_canvas import Reference, WorldCanvas


logger = logging.getLogger(__name__)


# =============================================================================
# CONSTANTS
# =============================================================================

LOG_ENV = 'CUI_RENDER_LOG'
LOG_LEVEL_ENV = 'CUI_RENDER_LOG_LEVEL'

MAX_LOG_LINES = 32
MAX_MESSAGE_LENGTH = 64
LOG_PANEL_HEIGHT = 8

# Message panel across the bottom of the canvas
LOG_REGION = Rectangle(0, CANVAS_HEIGHT - LOG_PANEL_HEIGHT, CANVAS_WIDTH - 1, CANVAS_HEIGHT - 1)

# Canvas point the player is always drawn at
VIEW_CENTER = Pair(CANVAS_WIDTH // 2, (CANVAS_HEIGHT - LOG_PANEL_HEIGHT) // 2)

MOVES = {
    'w': (Pair(0, -1), 'north'),
    's': (Pair(0, 1), 'south'),
    'a': (Pair(-1, 0), 'west'),
    'd': (Pair(1, 0), 'east'),
    'KEY_UP': (Pair(0, -1), 'north'),
    'KEY_DOWN': (Pair(0, 1), 'south'),
    'KEY_LEFT': (Pair(-1, 0), 'west'),
    'KEY_RIGHT': (Pair(1, 0), 'east'),
}

PLAYER_UNIT = RenderCell.from_single_full_char('＠', UnitColor.YELLOW)
TREE_UNIT = RenderCell.from_single_full_char('木', UnitColor.GREEN)
FLOOR_UNIT = RenderCell.from_double_half_char('.', ' ', UnitColor.BLUE)
BORDER_UNIT = RenderCell.from_double_half_char('#', '#', UnitColor.WHITE)


class DrawLayer(IntEnum):
    """Draw order, lowest first."""
    FLOOR = 0
    FEATURE = 1
    ACTOR = 2
    UI = 3


# =============================================================================
# GAME STATE
# =============================================================================

def is_tree(position: Pair) -> bool:
    """Deterministic scattering of trees over the infinite field."""
    if position == Pair(0, 0):
        return False
    return (position.x * 7 + position.y * 13) % 17 == 0


@dataclass
class GameState:
    """Everything the demo needs to draw a frame."""
    player: Pair = field(default_factory=Pair)
    turn: int = 0
    running: bool = True
    messages: MessageBuffer = field(default_factory=lambda: MessageBuffer(
        MAX_LOG_LINES, MAX_MESSAGE_LENGTH, BORDER_UNIT))

    def __post_init__(self):
        self.messages.add_line("Welcome to the forest.", UnitColor.CYAN)
        self.messages.add_text("ＷＡＳＤ", UnitColor.YELLOW)
        self.messages.add_line(" to move, Q to quit.", UnitColor.WHITE)


def apply_key(state: GameState, key) -> None:
    """Advance the game by one key press."""
    if key is None or not key:
        return

    key_str = key.lower() if not key.is_sequence else ''
    if key_str == 'q' or key.name == 'KEY_ESCAPE':
        state.running = False
        return

    move = MOVES.get(key.name) if key.is_sequence else MOVES.get(key_str)
    if move is None:
        return

    delta, direction = move
    target = state.player + delta
    state.turn += 1
    state.messages.add_text(f"[{state.turn}] ", UnitColor.WHITE)
    if is_tree(target):
        state.messages.add_line(f"A tree blocks the way {direction}.", UnitColor.RED)
    else:
        state.player = target
        state.messages.add_line(f"You walk {direction}.", UnitColor.GREEN)


# =============================================================================
# RENDERING
# =============================================================================

def render_frame(canvas: Canvas, state: GameState) -> None:
    """Compose one frame: field around the player, then the message panel."""
    canvas.clear()

    world = WorldCanvas(canvas, Reference(VIEW_CENTER, state.player))
    half_w = CANVAS_WIDTH // 2 + 1
    half_h = CANVAS_HEIGHT // 2 + 1
    for dy in range(-half_h, half_h + 1):
        for dx in range(-half_w, half_w + 1):
            position = state.player + Pair(dx, dy)
            if is_tree(position):
                world.draw_unit(TREE_UNIT, position, DrawLayer.FEATURE)
            else:
                world.draw_unit(FLOOR_UNIT, position, DrawLayer.FLOOR)
    world.draw_unit(PLAYER_UNIT, state.player, DrawLayer.ACTOR)

    ui = UiCanvas(canvas)
    state.messages.draw_message(ui, LOG_REGION, DrawLayer.UI)
    ui.draw_text(f"({state.player.x},{state.player.y})", UnitColor.MAGENTA,
                 Pair(LOG_REGION.left + 1, LOG_REGION.top), DrawLayer.UI)


# =============================================================================
# MAIN
# =============================================================================

def configure_logging() -> None:
    """Log to the file named by CUI_RENDER_LOG; stay silent otherwise."""
    path = os.environ.get(LOG_ENV)
    if not path:
        return
    level = os.environ.get(LOG_LEVEL_ENV, 'DEBUG').upper()
    logging.basicConfig(
        filename=path,
        level=level,
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
    )


def main():
    """Entry point."""
    configure_logging()
    term = Terminal()
    canvas = Canvas(term)
    keyboard = KeyboardInput(term)
    state = GameState()
    logger.info("Demo started (%dx%d canvas)", CANVAS_WIDTH, CANVAS_HEIGHT)

    with term.fullscreen(), term.hidden_cursor():
        while state.running:
            render_frame(canvas, state)
            try:
                sys.stdout.write(term.home + term.clear)
                canvas.write_to(sys.stdout)
                sys.stdout.flush()
            except OSError:
                logger.exception("Frame %d could not be written, quitting", state.turn)
                break
            apply_key(state, keyboard.read_key())

    # Restore terminal
    print(term.normal, end='', flush=True)
    logger.info("Demo finished after %d turns", state.turn)


if __name__ == '__main__':
    main()
