"""Proportional screen layout: a declarative tree of splits evaluated against
the viewport.

Every split fully tiles its parent. Child sizes come from rounding the
cumulative boundaries (half-up, exact fractions), so equal shares never
differ by more than one cell and no cells are lost or double counted.
"""

import math
from dataclasses import dataclass
from enum import StrEnum
from fractions import Fraction
from typing import TypeAlias

from raijin.models.screen import Rect


class Direction(StrEnum):
    VERTICAL = "vertical"  # children stacked top to bottom
    HORIZONTAL = "horizontal"  # children side by side


@dataclass(frozen=True)
class Percentage:
    value: int

    @property
    def fraction(self) -> Fraction:
        return Fraction(self.value, 100)


@dataclass(frozen=True)
class Ratio:
    numerator: int
    denominator: int

    @property
    def fraction(self) -> Fraction:
        return Fraction(self.numerator, self.denominator)


Constraint: TypeAlias = Percentage | Ratio


@dataclass(frozen=True)
class Leaf:
    name: str


@dataclass(frozen=True)
class Inset:
    """Shrinks the area by fixed margins, e.g. a border plus padding."""

    name: str
    child: "Node"
    left: int = 0
    top: int = 0
    right: int = 0
    bottom: int = 0


@dataclass(frozen=True)
class Split:
    name: str
    direction: Direction
    children: tuple[tuple[Constraint, "Node"], ...]

    def __post_init__(self) -> None:
        total = sum((c.fraction for c, _ in self.children), Fraction(0))
        if total != 1:
            raise ValueError(
                f"Split {self.name!r} constraints sum to {total}, expected 1"
            )


Node: TypeAlias = Leaf | Inset | Split


def _vertical(name: str, *children: tuple[Constraint, Node]) -> Split:
    return Split(name, Direction.VERTICAL, tuple(children))


def _horizontal(name: str, *children: tuple[Constraint, Node]) -> Split:
    return Split(name, Direction.HORIZONTAL, tuple(children))


DAY_CARD_SLOTS = ("slot_1", "slot_2", "slot_3", "slot_4")

DASHBOARD_LAYOUT: Split = _vertical(
    "screen",
    (
        Percentage(70),
        _horizontal(
            "today",
            (
                Ratio(2, 3),
                _vertical(
                    "left",
                    (
                        Percentage(40),
                        _horizontal(
                            "info",
                            (Ratio(1, 2), Leaf("quick_stats")),
                            (Ratio(1, 2), Leaf("moon_phase")),
                        ),
                    ),
                    (Percentage(60), Leaf("fortnight_chart")),
                ),
            ),
            (
                Ratio(1, 3),
                _vertical(
                    "right",
                    (Ratio(3, 4), Leaf("daily_chart")),
                    (Ratio(1, 4), Leaf("logo")),
                ),
            ),
        ),
    ),
    (
        Percentage(30),
        # Children live inside the 4-cast border and its one-row top padding
        Inset(
            "forecast",
            _horizontal(
                "forecast_inner",
                *((Ratio(1, 4), Leaf(slot)) for slot in DAY_CARD_SLOTS),
            ),
            left=1,
            top=2,
            right=1,
            bottom=1,
        ),
    ),
)


def split_sizes(total: int, constraints: list[Constraint]) -> list[int]:
    """Divide ``total`` cells according to ``constraints``; sizes sum to total."""
    edges = [0]
    cumulative = Fraction(0)
    for constraint in constraints:
        cumulative += constraint.fraction
        edges.append(_round_half_up(total * cumulative))
    return [end - start for start, end in zip(edges, edges[1:])]


def inset(area: Rect, left: int, top: int, right: int, bottom: int) -> Rect:
    return Rect(
        x=area.x + min(left, area.width),
        y=area.y + min(top, area.height),
        width=max(0, area.width - left - right),
        height=max(0, area.height - top - bottom),
    )


def partition(viewport: Rect, tree: Node = DASHBOARD_LAYOUT) -> dict[str, Rect]:
    """Evaluate the layout tree; returns every node's region by name."""
    if viewport.width < 0 or viewport.height < 0:
        viewport = Rect(viewport.x, viewport.y, max(0, viewport.width),
                        max(0, viewport.height))
    regions: dict[str, Rect] = {}
    _place(tree, viewport, regions)
    return regions


def _place(node: Node, area: Rect, regions: dict[str, Rect]) -> None:
    if node.name in regions:
        raise ValueError(f"Duplicate layout node name {node.name!r}")
    regions[node.name] = area

    if isinstance(node, Inset):
        _place(
            node.child,
            inset(area, node.left, node.top, node.right, node.bottom),
            regions,
        )
    elif isinstance(node, Split):
        vertical = node.direction == Direction.VERTICAL
        length = area.height if vertical else area.width
        sizes = split_sizes(length, [c for c, _ in node.children])
        offset = 0
        for (_, child), size in zip(node.children, sizes):
            if vertical:
                rect = Rect(area.x, area.y + offset, area.width, size)
            else:
                rect = Rect(area.x + offset, area.y, size, area.height)
            offset += size
            _place(child, rect, regions)


def _round_half_up(value: Fraction) -> int:
    return math.floor(value + Fraction(1, 2))
