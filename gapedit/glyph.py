"""Map of glyph positions in a font atlas, indexed by character."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol

MAX_GLYPHS = 200
FIRST_GLYPH = 32
FIRST_PRINTABLE = 32
LAST_PRINTABLE = 126


class _RectLike(Protocol):
    x: int
    y: int
    w: int
    h: int


@dataclass
class GlyphRect:
    """Location and size of one glyph in the atlas."""

    x: int = 0
    y: int = 0
    w: int = 0
    h: int = 0


@dataclass
class GlyphMap:
    """Glyph rectangles keyed by character, plus the common line height."""

    max_glyphs: int = MAX_GLYPHS
    glyph_height: int = 0
    glyphs: dict[int, GlyphRect] = field(default_factory=dict)

    def _index(self, char: str) -> int:
        if len(char) != 1:
            raise ValueError(f"expected a single character, got {char!r}")
        index = ord(char) - FIRST_GLYPH
        if not 0 <= index < self.max_glyphs:
            raise ValueError(f"character {char!r} is outside the glyph map")
        return index

    def add_glyph(self, char: str, rect: _RectLike) -> None:
        """Record (or overwrite) the rectangle for ``char``."""
        self.glyphs[self._index(char)] = GlyphRect(rect.x, rect.y, rect.w, rect.h)

    def __getitem__(self, char: str) -> GlyphRect:
        index = self._index(char)
        try:
            return self.glyphs[index]
        except KeyError:
            raise KeyError(char) from None

    def __contains__(self, char: object) -> bool:
        if not isinstance(char, str):
            return False
        try:
            return self._index(char) in self.glyphs
        except ValueError:
            return False

    def width_of(self, char: str) -> int:
        """Advance width of ``char``; characters outside printable ASCII take none."""
        if not FIRST_PRINTABLE <= ord(char) <= LAST_PRINTABLE:
            return 0
        return self[char].w