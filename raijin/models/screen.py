"""Screen geometry, paint instructions and chart geometry."""

from dataclasses import dataclass
from enum import IntEnum, StrEnum


@dataclass(frozen=True)
class Rect:
    x: int
    y: int
    width: int
    height: int

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def bottom(self) -> int:
        return self.y + self.height

    @property
    def is_empty(self) -> bool:
        return self.width <= 0 or self.height <= 0


class Color(StrEnum):
    DEFAULT = "default"
    GRAY = "gray"
    RED = "red"
    YELLOW = "yellow"
    CYAN = "cyan"
    LIGHT_BLUE = "light_blue"
    LIGHT_MAGENTA = "light_magenta"
    LIGHT_YELLOW = "light_yellow"


@dataclass(frozen=True)
class PaintOp:
    x: int
    y: int
    text: str
    color: Color = Color.DEFAULT
    bold: bool = False


class ChartWindow(IntEnum):
    DAILY = 24
    FORTNIGHT = 336


@dataclass(frozen=True)
class ChartSeries:
    window: ChartWindow
    points: tuple[tuple[float, float], ...]
    x_bounds: tuple[float, float]
    y_min: float
    y_max: float
    y_labels: tuple[str, ...]
    x_labels: tuple[str, ...]
