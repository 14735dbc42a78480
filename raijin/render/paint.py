"""Canvas collecting paint instructions for one frame."""

from raijin.models.screen import Color, PaintOp, Rect


class Canvas:
    def __init__(self) -> None:
        self.ops: list[PaintOp] = []

    def text(
        self,
        area: Rect,
        col: int,
        row: int,
        text: str,
        color: Color = Color.DEFAULT,
        bold: bool = False,
    ) -> None:
        """Write text at (col, row) relative to ``area``, clipped to it."""
        if area.is_empty or not 0 <= row < area.height:
            return
        if col < 0:
            text = text[-col:]
            col = 0
        text = text[: max(0, area.width - col)]
        if text:
            self.ops.append(PaintOp(area.x + col, area.y + row, text, color, bold))
