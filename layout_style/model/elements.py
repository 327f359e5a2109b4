"""Glyphs, text fragments and lines produced while laying out styled text."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, List, Union

if TYPE_CHECKING:
    from layout_style.model.style import Style


@dataclass(slots=True, eq=False)
class Glyph:
    """A single glyph with its advance width in glyph space (1/1000 em).

    Glyphs compare by identity: the style's width cache is keyed by the glyph object.
    """

    char: str
    width: float
    apply_word_spacing: bool = False


Item = Union[Glyph, int, float]


@dataclass(slots=True, eq=False)
class TextFragment:
    """A run of glyphs and kerning values sharing one style."""

    items: List[Item]
    style: "Style"

    @classmethod
    def create(cls, text: str, style: "Style") -> "TextFragment":
        """Decode ``text`` with the style's font, inserting kerning values if enabled."""
        font = style.font()
        glyphs = font.decode(text)
        if not style.font_features().get("kern"):
            return cls(items=list(glyphs), style=style)

        items: List[Item] = []
        for index, glyph in enumerate(glyphs):
            if index:
                adjustment = font.kerning(glyphs[index - 1].char, glyph.char)
                if adjustment:
                    items.append(adjustment)
            items.append(glyph)
        return cls(items=items, style=style)

    @property
    def text(self) -> str:
        return "".join(item.char for item in self.items if isinstance(item, Glyph))

    @property
    def width(self) -> float:
        return sum(self.style.scaled_item_width(item) for item in self.items)

    @property
    def y_min(self) -> float:
        return self.style.scaled_font_descender + self.style.text_rise()

    @property
    def y_max(self) -> float:
        return self.style.scaled_font_ascender + self.style.text_rise()


@dataclass(slots=True)
class TextLine:
    """One wrapped line; ``y_offset`` is the baseline position once the line is placed."""

    items: List[TextFragment] = field(default_factory=list)
    x_offset: float = 0.0
    y_offset: float = 0.0

    @property
    def width(self) -> float:
        return sum(item.width for item in self.items)

    @property
    def y_min(self) -> float:
        return min((item.y_min for item in self.items), default=0.0)

    @property
    def y_max(self) -> float:
        return max((item.y_max for item in self.items), default=0.0)

    @property
    def height(self) -> float:
        return self.y_max - self.y_min

    @property
    def text(self) -> str:
        return "".join(item.text for item in self.items)

