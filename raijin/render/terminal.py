"""curses paint backend."""

import curses
from collections.abc import Iterable

from raijin.models.screen import Color, PaintOp, Rect

# Color -> (curses color, extra attribute)
_PALETTE: dict[Color, tuple[int, int]] = {
    Color.GRAY: (curses.COLOR_WHITE, curses.A_DIM),
    Color.RED: (curses.COLOR_RED, 0),
    Color.YELLOW: (curses.COLOR_YELLOW, 0),
    Color.CYAN: (curses.COLOR_CYAN, 0),
    Color.LIGHT_BLUE: (curses.COLOR_BLUE, curses.A_BOLD),
    Color.LIGHT_MAGENTA: (curses.COLOR_MAGENTA, curses.A_BOLD),
    Color.LIGHT_YELLOW: (curses.COLOR_YELLOW, curses.A_BOLD),
}


class TerminalPainter:
    """Maps paint instructions onto a curses window."""

    def __init__(self, window, use_colors: bool = True):
        self.window = window
        self._attrs: dict[Color, int] = {}
        if use_colors and curses.has_colors():
            curses.start_color()
            curses.use_default_colors()
            for pair, (color, _) in enumerate(_PALETTE.values(), start=1):
                curses.init_pair(pair, color, -1)
            for pair, (name, (_, extra)) in enumerate(_PALETTE.items(), start=1):
                self._attrs[name] = curses.color_pair(pair) | extra

    def viewport(self) -> Rect:
        height, width = self.window.getmaxyx()
        return Rect(0, 0, width, height)

    def paint(self, ops: Iterable[PaintOp]) -> None:
        self.window.erase()
        for op in ops:
            attr = self._attrs.get(op.color, 0)
            if op.bold:
                attr |= curses.A_BOLD
            self._addstr(op.y, op.x, op.text, attr)
        self.window.refresh()

    def _addstr(self, row: int, col: int, text: str, attr: int) -> None:
        """Write a string, dropping anything outside the window."""
        max_y, max_x = self.window.getmaxyx()
        if not (0 <= row < max_y and 0 <= col < max_x):
            return
        try:
            self.window.addnstr(row, col, text, max_x - col, attr)
        except curses.error:
            # Writing the bottom-right cell moves the cursor off screen
            pass
