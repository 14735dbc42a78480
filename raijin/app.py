"""Dashboard session: owns the forecast snapshot and the draw/poll loop."""

import curses
import logging
from collections.abc import Sequence

from raijin.assets import MoonArtLibrary
from raijin.models.forecast import Forecast, MoonPhaseEntry
from raijin.models.screen import PaintOp, Rect
from raijin.render.screen import render
from raijin.render.terminal import TerminalPainter

logger = logging.getLogger(__name__)

QUIT_KEY = ord("q")


class Dashboard:
    """Draws the full frame, then blocks on the next key. ``q`` quits.

    The forecast is fetched once before the loop starts and is never
    refreshed or mutated while it runs.
    """

    def __init__(
        self,
        forecast: Forecast,
        moon_phases: Sequence[MoonPhaseEntry] = (),
        moon_art: MoonArtLibrary | None = None,
        logo: str = "",
        unit_symbol: str = "°C",
    ):
        self.forecast = forecast
        self.moon_phases = tuple(moon_phases)
        self.moon_art = moon_art
        self.logo = logo
        self.unit_symbol = unit_symbol
        self.exit = False
        self._frames = 0

    def frame(self, viewport: Rect) -> list[PaintOp]:
        return render(
            self.forecast,
            viewport,
            moon_phases=self.moon_phases,
            moon_art=self.moon_art,
            logo=self.logo,
            unit_symbol=self.unit_symbol,
        )

    def handle_key(self, key: int) -> None:
        if key == QUIT_KEY:
            self.exit = True

    def run(self, window) -> None:
        """Main loop; ``window`` is the curses screen from curses.wrapper."""
        try:
            curses.curs_set(0)
        except curses.error:
            logger.debug("Terminal does not support hiding the cursor")

        painter = TerminalPainter(window)
        while not self.exit:
            viewport = painter.viewport()
            painter.paint(self.frame(viewport))
            self._frames += 1
            logger.debug(
                "Frame %d drawn at %dx%d",
                self._frames, viewport.width, viewport.height,
            )
            self.handle_key(window.getch())
        logger.info("Dashboard closed after %d frames", self._frames)


def run_dashboard(dashboard: Dashboard) -> None:
    """Run inside curses.wrapper so the terminal is restored on any exit."""
    curses.wrapper(dashboard.run)
