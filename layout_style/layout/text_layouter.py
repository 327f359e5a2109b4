"""Position wrapped text lines according to a style."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from layout_style.model.elements import TextFragment, TextLine
from layout_style.model.style import Style
from layout_style.utils.logger import get_logger

LOGGER = get_logger(__name__)


@dataclass(slots=True)
class LayoutResult:
    """Lines with their offsets set, plus the size of the laid out text."""

    lines: List[TextLine] = field(default_factory=list)
    width: float = 0.0
    height: float = 0.0


class TextLayouter:
    """Wrap text fragments into lines and position them using the style's settings."""

    def __init__(self, style: Style) -> None:
        self._style = style

    @property
    def style(self) -> Style:
        return self._style

    # ------------------------------------------------------------------
    # Public API
    def fit(
        self,
        fragments: Sequence[TextFragment],
        width: float,
        height: Optional[float] = None,
    ) -> LayoutResult:
        """Lay out ``fragments`` into a box of the given width (and optional height).

        Baselines are measured top-down from the top of the box.
        """
        style = self._style
        indent = style.text_indent()

        def width_for_line(index: int) -> float:
            return width - indent if index == 0 else width

        items = style.text_segmentation_algorithm()(fragments)
        lines = style.text_line_wrapping_algorithm()(items, width_for_line)

        for index, line in enumerate(lines):
            line.x_offset = self._horizontal_offset(line, index, width_for_line(index), indent)

        content_height = self._position_lines(lines)
        shift = self._vertical_offset(content_height, height)
        if shift:
            for line in lines:
                line.y_offset += shift

        LOGGER.debug("Laid out %d lines into %.2f x %.2f", len(lines), width, content_height)
        return LayoutResult(lines=lines, width=width, height=content_height)

    # ------------------------------------------------------------------
    # Positioning helpers
    def _horizontal_offset(self, line: TextLine, index: int, available: float, indent: float) -> float:
        base = indent if index == 0 else 0.0
        align = self._style.align()
        if align == "center":
            return base + (available - line.width) / 2
        if align == "right":
            return base + available - line.width
        # justify is laid out like left; no inter-word stretching is done.
        return base

    def _position_lines(self, lines: List[TextLine]) -> float:
        if not lines:
            return 0.0

        spacing = self._style.line_spacing()
        baseline = lines[0].y_max
        lines[0].y_offset = baseline
        for previous, line in zip(lines, lines[1:]):
            baseline += spacing.baseline_distance(previous, line)
            line.y_offset = baseline

        return baseline + abs(lines[-1].y_min)

    def _vertical_offset(self, content_height: float, height: Optional[float]) -> float:
        if height is None:
            return 0.0

        valign = self._style.valign()
        if valign == "center":
            return (height - content_height) / 2
        if valign == "bottom":
            return height - content_height
        return 0.0
