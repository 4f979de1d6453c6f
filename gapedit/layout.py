"""Cursor, selection and scrolling state, and the geometry that links text to pixels."""

from __future__ import annotations

from dataclasses import dataclass, field

from .gap import GapBuffer
from .glyph import FIRST_PRINTABLE, LAST_PRINTABLE, GlyphMap
from .text import Text
from .vec import Vec2

CLIPBOARD_SIZE = 1024
# Pixels kept between the cursor and the window edge when scrolling sideways.
SCROLL_MARGIN = 20


def _printable(char: str) -> bool:
    return FIRST_PRINTABLE <= ord(char) <= LAST_PRINTABLE


@dataclass
class Cursor:
    """Where the user is editing: a line, a column and a remembered x offset."""

    line: int = 0
    index: int = 0
    pos: Vec2 = field(default_factory=Vec2)
    preferred_x: int = 0


@dataclass
class Selection:
    """A span between an anchor (start) and a moving end, in either order."""

    start_line: int = 0
    start_index: int = 0
    end_line: int = 0
    end_index: int = 0

    def is_empty(self) -> bool:
        """True when start and end are the same point."""
        return (self.start_line, self.start_index) == (self.end_line, self.end_index)

    def ordered(self) -> tuple[int, int, int, int]:
        """Return ``(first_line, first_index, last_line, last_index)`` in document order."""
        start = (self.start_line, self.start_index)
        end = (self.end_line, self.end_index)
        if start <= end:
            return (*start, *end)
        return (*end, *start)

    def collapse_to(self, line: int, index: int) -> None:
        """Make the selection an empty span at ``(line, index)``."""
        self.start_line = self.end_line = line
        self.start_index = self.end_index = index


@dataclass
class ScrollState:
    """Scroll offsets (y in lines, x in pixels), their limits and the window size."""

    x: int = 0
    y: int = 0
    max_x: int = 0
    max_y: int = 0
    win_w: int = 0
    win_h: int = 0

    def lines_visible(self, glyph_map: GlyphMap) -> int:
        """Number of whole lines that fit in the window."""
        return self.win_h // glyph_map.glyph_height

    def update_max(self, text: Text, glyph_map: GlyphMap) -> None:
        """Recompute the vertical scroll limit and clamp the offset to it."""
        self.max_y = max(0, len(text) - self.lines_visible(glyph_map))
        self.y = min(self.y, self.max_y)

    def keep_visible(self, cursor: Cursor, text: Text, glyph_map: GlyphMap) -> None:
        """Scroll just enough that ``cursor`` lies inside the window."""
        visible = self.lines_visible(glyph_map)
        if cursor.line < self.y:
            self.y = cursor.line
        elif cursor.line >= self.y + visible:
            self.y = cursor.line - visible + 1

        cursor_x = calculate_cursor_x(text[cursor.line], glyph_map, cursor.index)
        if cursor_x < self.x:
            self.x = max(0, cursor_x - SCROLL_MARGIN)
        elif cursor_x > self.x + self.win_w - SCROLL_MARGIN:
            self.x = min(self.max_x, cursor_x - self.win_w + SCROLL_MARGIN)


def calculate_cursor_x(line: GapBuffer, glyph_map: GlyphMap, cursor_pos: int) -> int:
    """Pixel offset of column ``cursor_pos`` from the start of ``line``."""
    if cursor_pos <= 0:
        return 0
    return sum(glyph_map.width_of(char) for char in str(line)[:cursor_pos])


def find_cursor_position(line: GapBuffer, glyph_map: GlyphMap, target_x: int) -> int:
    """Column of ``line`` nearest to the pixel offset ``target_x``."""
    current_x = 0
    pos = 0
    for char in line.before():
        if _printable(char):
            width = glyph_map.width_of(char)
            if current_x + width // 2 > target_x:
                return pos
            current_x += width
        pos += 1
    # Behind the cursor only printable characters count as columns.
    for char in line.after():
        if _printable(char):
            width = glyph_map.width_of(char)
            if current_x + width // 2 > target_x:
                return pos
            current_x += width
            pos += 1
    return pos


def line_width(line: GapBuffer, glyph_map: GlyphMap) -> int:
    """Total pixel width of ``line``."""
    return sum(glyph_map.width_of(char) for char in str(line))


def copy_selected_text(
    text: Text, selection: Selection, clipboard_size: int = CLIPBOARD_SIZE
) -> str:
    """Return the selected text, at most ``clipboard_size - 1`` characters long."""
    if clipboard_size < 1:
        raise ValueError("clipboard_size must be at least 1")
    if selection.is_empty():
        return ""

    first_line, first_index, last_line, last_index = selection.ordered()
    pieces: list[str] = []
    for number in range(first_line, last_line + 1):
        if number >= len(text):
            break
        line = text[number]
        start = first_index if number == first_line else 0
        end = last_index if number == last_line else len(line)
        if start >= end:
            continue
        before = line.before()
        gap = len(before)
        pieces.append(before[start:min(end, gap)])
        if end > gap:
            pieces.append(line.after()[: end - gap])
        if number != last_line:
            pieces.append("\n")
    return "".join(pieces)[: clipboard_size - 1]


def paste_text(text: Text, cursor: Cursor, selection: Selection, clipboard: str) -> None:
    """Insert ``clipboard`` at the cursor, splitting lines at each newline."""
    if not selection.is_empty():
        selection.collapse_to(cursor.line, cursor.index)

    for char in clipboard:
        if char == "\n":
            cursor.line += 1
            text.new_line(cursor.line, cursor.index)
            cursor.index = 0
        else:
            text.insert_on_line(cursor.line, char)
            cursor.index += 1


def select_all(text: Text, selection: Selection) -> None:
    """Select from the start of the document to the end of its last line."""
    selection.start_line = 0
    selection.start_index = 0
    selection.end_line = len(text) - 1
    selection.end_index = len(text[len(text) - 1])