"""Split text fragments into the boxes, glue and penalties used for line wrapping."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional, Union

from layout_style.model.elements import Glyph, Item, TextFragment

SPACE_CHARS = frozenset(" \t")
NEWLINE_CHARS = frozenset("\n")


@dataclass(slots=True, eq=False)
class Box:
    """Unbreakable content, e.g. a word."""

    item: TextFragment

    @property
    def width(self) -> float:
        return self.item.width


@dataclass(slots=True, eq=False)
class Glue:
    """Breakable white space between boxes."""

    item: TextFragment

    @property
    def width(self) -> float:
        return self.item.width


@dataclass(slots=True, eq=False)
class Penalty:
    """A break opportunity; a penalty of ``MANDATORY`` forces a line break."""

    penalty: float
    item: Optional[TextFragment] = None

    MANDATORY = float("-inf")

    @property
    def width(self) -> float:
        return 0.0

    @property
    def is_mandatory(self) -> bool:
        return self.penalty == self.MANDATORY


Segment = Union[Box, Glue, Penalty]


def _kind_of(glyph: Glyph) -> str:
    if glyph.char in NEWLINE_CHARS:
        return "newline"
    if glyph.char in SPACE_CHARS:
        return "space"
    return "text"


class SimpleTextSegmentation:
    """Break fragments at spaces and newlines.

    Runs of spaces become glue, each newline becomes a mandatory penalty and everything else is
    grouped into boxes. Kerning values stay with the run they appear in.
    """

    def __call__(self, fragments: Iterable[TextFragment]) -> List[Segment]:
        result: List[Segment] = []
        for fragment in fragments:
            run: List[Item] = []
            run_kind: Optional[str] = None
            for item in fragment.items:
                kind = _kind_of(item) if isinstance(item, Glyph) else ("space" if run_kind == "space" else "text")
                if run and (kind != run_kind or kind == "newline"):
                    result.append(self._segment(run_kind, run, fragment))
                    run = []
                run.append(item)
                run_kind = kind
            if run:
                result.append(self._segment(run_kind, run, fragment))
        return result

    @staticmethod
    def _segment(kind: Optional[str], items: List[Item], source: TextFragment) -> Segment:
        if kind == "newline":
            return Penalty(Penalty.MANDATORY, TextFragment(items=items, style=source.style))
        fragment = TextFragment(items=items, style=source.style)
        return Glue(fragment) if kind == "space" else Box(fragment)
