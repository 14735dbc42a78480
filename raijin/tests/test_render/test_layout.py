"""Tests for the proportional layout tree."""

import pytest

from raijin.models.screen import Rect
from raijin.render.layout import (
    DASHBOARD_LAYOUT,
    DAY_CARD_SLOTS,
    Direction,
    Inset,
    Leaf,
    Percentage,
    Ratio,
    Split,
    inset,
    partition,
    split_sizes,
)

VIEWPORTS = [(120, 40), (80, 24), (203, 57), (37, 11), (1, 1), (4, 3)]


def _splits(node):
    if isinstance(node, Split):
        yield node
        for _, child in node.children:
            yield from _splits(child)
    elif isinstance(node, Inset):
        yield from _splits(node.child)


class TestSplitSizes:
    def test_thirds(self):
        assert split_sizes(10, [Ratio(1, 3)] * 3) == [3, 4, 3]

    def test_percentages(self):
        assert split_sizes(40, [Percentage(70), Percentage(30)]) == [28, 12]

    def test_zero_total(self):
        assert split_sizes(0, [Ratio(1, 4)] * 4) == [0, 0, 0, 0]

    def test_constraints_must_cover_parent(self):
        with pytest.raises(ValueError):
            Split("bad", Direction.VERTICAL, ((Percentage(50), Leaf("a")),))


class TestInset:
    def test_shrinks(self):
        assert inset(Rect(0, 28, 120, 12), 1, 2, 1, 1) == Rect(1, 30, 118, 9)

    def test_clamps_to_zero(self):
        r = inset(Rect(5, 5, 1, 1), 1, 2, 1, 1)
        assert r.width == 0 and r.height == 0


class TestPartition:
    def test_reference_viewport(self):
        regions = partition(Rect(0, 0, 120, 40))
        assert regions["today"] == Rect(0, 0, 120, 28)
        assert regions["forecast"] == Rect(0, 28, 120, 12)
        assert regions["left"] == Rect(0, 0, 80, 28)
        assert regions["right"] == Rect(80, 0, 40, 28)
        assert regions["info"] == Rect(0, 0, 80, 11)
        assert regions["fortnight_chart"] == Rect(0, 11, 80, 17)
        assert regions["quick_stats"] == Rect(0, 0, 40, 11)
        assert regions["moon_phase"] == Rect(40, 0, 40, 11)
        assert regions["daily_chart"] == Rect(80, 0, 40, 21)
        assert regions["logo"] == Rect(80, 21, 40, 7)
        assert regions["forecast_inner"] == Rect(1, 30, 118, 9)
        assert [regions[s].width for s in DAY_CARD_SLOTS] == [30, 29, 30, 29]

    def test_offset_viewport(self):
        regions = partition(Rect(10, 5, 120, 40))
        assert regions["logo"] == Rect(90, 26, 40, 7)

    @pytest.mark.parametrize("width,height", VIEWPORTS)
    def test_day_cards_equal_width(self, width: int, height: int):
        regions = partition(Rect(0, 0, width, height))
        inner = regions["forecast_inner"]
        slots = [regions[s] for s in DAY_CARD_SLOTS]
        for slot in slots:
            assert abs(slot.width - inner.width / 4) <= 1
            assert slot.height == inner.height
        assert sum(s.width for s in slots) == inner.width

    @pytest.mark.parametrize("width,height", VIEWPORTS)
    def test_splits_tile_parent(self, width: int, height: int):
        regions = partition(Rect(0, 0, width, height))
        for split in _splits(DASHBOARD_LAYOUT):
            parent = regions[split.name]
            children = [regions[child.name] for _, child in split.children]
            if split.direction == Direction.VERTICAL:
                cursor = parent.y
                for child in children:
                    assert child.y == cursor
                    assert (child.x, child.width) == (parent.x, parent.width)
                    cursor += child.height
                assert cursor == parent.bottom
            else:
                cursor = parent.x
                for child in children:
                    assert child.x == cursor
                    assert (child.y, child.height) == (parent.y, parent.height)
                    cursor += child.width
                assert cursor == parent.right

    def test_zero_viewport(self):
        regions = partition(Rect(0, 0, 0, 0))
        assert regions
        for rect in regions.values():
            assert rect.width == 0 and rect.height == 0

    def test_deterministic(self):
        assert partition(Rect(0, 0, 97, 31)) == partition(Rect(0, 0, 97, 31))

    def test_custom_tree(self):
        tree = Split(
            "root",
            Direction.HORIZONTAL,
            ((Ratio(1, 2), Leaf("a")), (Ratio(1, 2), Leaf("b"))),
        )
        regions = partition(Rect(0, 0, 9, 2), tree)
        assert regions["a"] == Rect(0, 0, 5, 2)
        assert regions["b"] == Rect(5, 0, 4, 2)

    def test_duplicate_names_rejected(self):
        tree = Split(
            "root",
            Direction.HORIZONTAL,
            ((Ratio(1, 2), Leaf("a")), (Ratio(1, 2), Leaf("a"))),
        )
        with pytest.raises(ValueError):
            partition(Rect(0, 0, 10, 2), tree)
