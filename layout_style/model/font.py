"""Minimal font wrapper exposing the metrics a Style needs."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Tuple

from layout_style.model.elements import Glyph
from layout_style.utils.units import DESIGN_UNITS_PER_EM

WORD_SPACING_CHARS = frozenset(" ")


@dataclass(slots=True, eq=False)
class SimpleFont:
    """Font wrapper backed by in-memory metric tables.

    Metrics are given in font units; ``scaling_factor`` converts them to glyph space.
    """

    name: str
    ascender: float
    descender: float
    units_per_em: int = DESIGN_UNITS_PER_EM
    glyph_widths: Dict[str, float] = field(default_factory=dict)
    default_width: float = 500
    kerning_pairs: Dict[Tuple[str, str], float] = field(default_factory=dict)
    _glyphs: Dict[str, Glyph] = field(default_factory=dict, init=False, repr=False)

    @property
    def scaling_factor(self) -> float:
        return DESIGN_UNITS_PER_EM / self.units_per_em

    def glyph(self, char: str) -> Glyph:
        """Return the glyph for ``char``; the same object is returned on every call."""
        glyph = self._glyphs.get(char)
        if glyph is None:
            width = self.glyph_widths.get(char, self.default_width) * self.scaling_factor
            glyph = Glyph(char=char, width=width, apply_word_spacing=char in WORD_SPACING_CHARS)
            self._glyphs[char] = glyph
        return glyph

    def decode(self, text: str) -> List[Glyph]:
        return [self.glyph(char) for char in text]

    def kerning(self, left: str, right: str) -> float:
        """Return the kerning item for a pair in glyph space, 0 if there is none.

        Kerning pairs use font conventions (negative tightens) while the returned item follows
        text-positioning conventions, where a positive value moves the next glyph left.
        """
        return -self.kerning_pairs.get((left, right), 0) * self.scaling_factor
