"""Greedy line wrapping over segmented text."""
from __future__ import annotations

from typing import Callable, Iterable, List, Union

from layout_style.layout.text_segmentation import Box, Glue, Penalty, Segment
from layout_style.model.elements import TextFragment, TextLine

WidthSpec = Union[float, Callable[[int], float]]


class SimpleLineWrapping:
    """Fill each line with as many boxes as fit into the available width.

    ``available_width`` is either a number or a callable returning the width for a zero-based
    line index. Glue is only kept between two boxes of the same line, a mandatory penalty ends
    the current line and a box wider than the available width gets a line of its own.
    """

    def __call__(self, items: Iterable[Segment], available_width: WidthSpec) -> List[TextLine]:
        width_for = available_width if callable(available_width) else (lambda index: available_width)

        lines: List[TextLine] = []
        current: List[TextFragment] = []
        current_width = 0.0
        pending_glue: List[Glue] = []

        def flush() -> None:
            nonlocal current, current_width, pending_glue
            lines.append(TextLine(items=current))
            current = []
            current_width = 0.0
            pending_glue = []

        for item in items:
            if isinstance(item, Penalty):
                if item.is_mandatory:
                    flush()
                continue

            if isinstance(item, Glue):
                if current:
                    pending_glue.append(item)
                continue

            if not isinstance(item, Box):
                raise TypeError(f"Unsupported item for line wrapping: {item!r}")

            glue_width = sum(glue.width for glue in pending_glue)
            projected = current_width + glue_width + item.width
            if current and projected > width_for(len(lines)):
                flush()
                projected = item.width

            current.extend(glue.item for glue in pending_glue)
            current.append(item.item)
            current_width = projected
            pending_glue = []

        if current:
            flush()

        return lines
