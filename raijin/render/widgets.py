"""Box, table, paragraph and scatter chart widgets."""

import math

from raijin.models.screen import ChartSeries, Color, Rect
from raijin.render.chart import bin_points
from raijin.render.layout import inset
from raijin.render.paint import Canvas

POINT_MARK = "•"
LABEL_WIDTH = 16


def draw_box(
    canvas: Canvas,
    area: Rect,
    title: str = "",
    title_color: Color = Color.DEFAULT,
) -> Rect:
    """Draw a bordered box with a centered title. Returns the inner area."""
    inner = inset(area, 1, 1, 1, 1)
    if area.width < 2 or area.height < 2:
        return inner

    span = area.width - 2
    canvas.text(area, 0, 0, "┌" + "─" * span + "┐")
    for row in range(1, area.height - 1):
        canvas.text(area, 0, row, "│")
        canvas.text(area, area.width - 1, row, "│")
    canvas.text(area, 0, area.height - 1, "└" + "─" * span + "┘")

    if title:
        title = title[:span]
        canvas.text(area, 1 + (span - len(title)) // 2, 0, title, title_color, bold=True)
    return inner


def draw_table(
    canvas: Canvas,
    area: Rect,
    rows: list[tuple[str, str]],
    label_width: int = LABEL_WIDTH,
) -> None:
    """Two columns: label on the left, value right-aligned."""
    for row, (label, value) in enumerate(rows):
        canvas.text(area, 0, row, label[:label_width])
        col = max(label_width + 1, area.width - len(value))
        canvas.text(area, col, row, value)


def draw_paragraph(
    canvas: Canvas,
    area: Rect,
    text: str,
    color: Color = Color.DEFAULT,
) -> None:
    """Horizontally centered lines, top-aligned."""
    for row, line in enumerate(text.splitlines()):
        line = line.rstrip()
        canvas.text(area, max(0, (area.width - len(line)) // 2), row, line, color)


def draw_chart(
    canvas: Canvas,
    area: Rect,
    series: ChartSeries,
    title: str,
    x_title: str,
    y_title: str,
) -> None:
    """Bordered scatter chart with y tick labels, an L-shaped axis and x labels.

    Inside the border: row 0 holds the axis titles, the last row the x
    labels, the row above it the x axis; everything between is plot area.
    """
    inner = draw_box(canvas, area, title, Color.CYAN)
    if inner.is_empty:
        return

    canvas.text(inner, 0, 0, y_title, Color.GRAY)
    canvas.text(inner, inner.width - len(x_title), 0, x_title, Color.GRAY)

    label_width = max(len(label) for label in series.y_labels)
    plot = Rect(
        x=inner.x + label_width + 1,
        y=inner.y + 1,
        width=inner.width - label_width - 1,
        height=inner.height - 3,
    )
    if plot.is_empty:
        return

    axis_row = plot.height + 1
    axis_col = label_width
    for row in range(plot.height):
        canvas.text(inner, axis_col, 1 + row, "│", Color.GRAY)
    canvas.text(inner, axis_col, axis_row, "└" + "─" * plot.width, Color.GRAY)

    ticks = len(series.y_labels)
    for i, label in enumerate(series.y_labels):
        row = plot.height - 1 - _spread(i, ticks, plot.height)
        canvas.text(inner, label_width - len(label), 1 + row, label, Color.GRAY)

    _draw_x_labels(canvas, inner, plot, series.x_labels, axis_row + 1)

    for col, row in sorted(bin_points(series, plot.width, plot.height)):
        canvas.text(plot, col, row, POINT_MARK, Color.YELLOW)


def _draw_x_labels(
    canvas: Canvas, inner: Rect, plot: Rect, labels: tuple[str, ...], row: int
) -> None:
    """Spread labels evenly under the plot, dropping any that would overlap."""
    offset = plot.x - inner.x
    last_end = -1
    for i, label in enumerate(labels):
        center = _spread(i, len(labels), plot.width)
        start = min(max(0, center - len(label) // 2), plot.width - len(label))
        if start <= last_end:
            continue
        canvas.text(inner, offset + start, row, label, Color.GRAY)
        last_end = start + len(label)


def _spread(index: int, count: int, cells: int) -> int:
    """Cell position of tick ``index`` out of ``count`` evenly spaced ticks."""
    if count <= 1 or cells <= 1:
        return 0
    return math.floor(index * (cells - 1) / (count - 1) + 0.5)
