"""Editing state and the actions a user performs on it."""

from __future__ import annotations

import os

from .fileio import open_file, save_file
from .glyph import GlyphMap
from .layout import (
    CLIPBOARD_SIZE,
    Cursor,
    ScrollState,
    Selection,
    calculate_cursor_x,
    copy_selected_text,
    find_cursor_position,
    paste_text,
)
from .layout import select_all as _select_all
from .text import Text

# Lines scrolled per wheel notch, and pixels per sideways notch.
WHEEL_LINES = 3
WHEEL_PIXELS = 20


def _trunc_div(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b > 0) else -quotient


class Editor:
    """A document with its cursor, selection, scroll position and clipboard.

    Every action mirrors one key press or mouse event of the editor window.
    Drawing is left to the caller, which is also responsible for keeping
    ``scroll.max_x`` up to date with the width of the visible lines.
    """

    def __init__(
        self,
        glyph_map: GlyphMap,
        width: int = 0,
        height: int = 0,
        path: str | os.PathLike[str] | None = None,
    ) -> None:
        self.glyph_map = glyph_map
        self.text = Text()
        self.cursor = Cursor()
        self.selection = Selection()
        self.scroll = ScrollState(win_w=width, win_h=height)
        self.clipboard = ""
        self.mouse_dragging = False
        self.path = path

    def __repr__(self) -> str:
        return (
            f"Editor(lines={len(self.text)}, cursor=({self.cursor.line}, "
            f"{self.cursor.index}), path={self.path!r})"
        )

    # -- helpers -------------------------------------------------------------

    def _current_line(self):
        return self.text[self.cursor.line]

    def _update_preferred_x(self) -> None:
        self.cursor.preferred_x = calculate_cursor_x(
            self._current_line(), self.glyph_map, self.cursor.index
        )

    def _collapse_selection_to_cursor(self) -> None:
        if not self.selection.is_empty():
            self.selection.collapse_to(self.cursor.line, self.cursor.index)

    def _anchor_selection(self) -> None:
        if self.selection.is_empty():
            self.selection.start_line = self.cursor.line
            self.selection.start_index = self.cursor.index

    def _extend_selection(self) -> None:
        self.selection.end_line = self.cursor.line
        self.selection.end_index = self.cursor.index

    def _keep_visible(self) -> None:
        self.scroll.keep_visible(self.cursor, self.text, self.glyph_map)

    # -- files and window ----------------------------------------------------

    def load(self, path: str | os.PathLike[str]) -> bool:
        """Read ``path`` into the document and remember it as the save target."""
        self.path = path
        loaded = open_file(path, self.text)
        self.text[0].move_cursor(0)
        self.scroll.update_max(self.text, self.glyph_map)
        return loaded

    def save(self, path: str | os.PathLike[str] | None = None) -> bool:
        """Write the document to ``path`` or the remembered file.

        Returns False when there is nowhere to save or the file cannot be written.
        """
        target = path if path is not None else self.path
        if target is None:
            return False
        return save_file(target, self.text)

    def resize(self, width: int, height: int) -> None:
        """Record a new window size and adjust the vertical scroll limit."""
        self.scroll.win_w = width
        self.scroll.win_h = height
        self.scroll.update_max(self.text, self.glyph_map)

    # -- typing --------------------------------------------------------------

    def type_text(self, string: str) -> None:
        """Insert typed characters at the cursor."""
        self._collapse_selection_to_cursor()
        self.text.insert_on_line(self.cursor.line, string)
        self.cursor.index += len(string)
        self._update_preferred_x()
        self.scroll.update_max(self.text, self.glyph_map)

    def backspace(self) -> None:
        """Delete backwards, joining with the line above at a line start."""
        if not self.selection.is_empty():
            self.selection.collapse_to(self.cursor.line, self.cursor.index)
        elif self.cursor.index > 0:
            self.cursor.index -= 1
            self.text.delete_from_line(self.cursor.line)
            self._update_preferred_x()
        elif self.cursor.line > 0:
            self.cursor.index = self.text.delete_line(self.cursor.line, self.cursor.index)
            self.cursor.line -= 1
            self._update_preferred_x()
        self.scroll.update_max(self.text, self.glyph_map)
        self._keep_visible()

    def enter(self) -> None:
        """Break the line at the cursor and move to the start of the new line."""
        self._collapse_selection_to_cursor()
        self.cursor.line += 1
        self.text.new_line(self.cursor.line, self.cursor.index)
        self.cursor.index = 0
        self.cursor.preferred_x = 0
        self.scroll.update_max(self.text, self.glyph_map)
        self._keep_visible()

    # -- cursor movement -----------------------------------------------------

    def _step_left(self) -> None:
        if self.cursor.index > 0:
            self._current_line().cursor_left()
            self.cursor.index -= 1
        elif self.cursor.line > 0:
            self.cursor.line -= 1
            self.cursor.index = self._current_line().move_cursor_to_end()

    def _step_right(self) -> None:
        if self.cursor.index < len(self._current_line()):
            self._current_line().cursor_right()
            self.cursor.index += 1
        elif self.cursor.line < len(self.text) - 1:
            self.cursor.line += 1
            self.cursor.index = 0

    def move_left(self, extend: bool = False) -> None:
        """Move one character left; with ``extend`` grow the selection."""
        if extend:
            self._anchor_selection()
            self._step_left()
            self._extend_selection()
        else:
            if not self.selection.is_empty():
                self.cursor.line = self.selection.start_line
                self.cursor.index = self.selection.start_index
            else:
                self._step_left()
            self.selection.collapse_to(self.cursor.line, self.cursor.index)
        self._update_preferred_x()
        self._keep_visible()

    def move_right(self, extend: bool = False) -> None:
        """Move one character right; with ``extend`` grow the selection."""
        if extend:
            self._anchor_selection()
            self._step_right()
            self._extend_selection()
        else:
            if not self.selection.is_empty():
                self.cursor.line = self.selection.end_line
                self.cursor.index = self.selection.end_index
            else:
                self._step_right()
            self.selection.collapse_to(self.cursor.line, self.cursor.index)
        self._update_preferred_x()
        self._keep_visible()

    def _move_vertically(self, step: int, extend: bool) -> None:
        if extend:
            self._anchor_selection()
        target = self.cursor.line + step
        if 0 <= target < len(self.text):
            self.cursor.line = target
            self.cursor.index = find_cursor_position(
                self._current_line(), self.glyph_map, self.cursor.preferred_x
            )
        if extend:
            self._extend_selection()
        else:
            self.selection.collapse_to(self.cursor.line, self.cursor.index)
        self._keep_visible()

    def move_up(self, extend: bool = False) -> None:
        """Move to the line above, keeping the remembered x offset."""
        self._move_vertically(-1, extend)

    def move_down(self, extend: bool = False) -> None:
        """Move to the line below, keeping the remembered x offset."""
        self._move_vertically(1, extend)

    def page_up(self) -> None:
        """Scroll up by a window's height, then keep the cursor in view."""
        visible = self.scroll.lines_visible(self.glyph_map)
        self.scroll.y = max(0, self.scroll.y - visible)
        self._keep_visible()

    def page_down(self) -> None:
        """Scroll down by a window's height, then keep the cursor in view."""
        visible = self.scroll.lines_visible(self.glyph_map)
        self.scroll.y = min(self.scroll.max_y, self.scroll.y + visible)
        self._keep_visible()

    # -- selection and clipboard ---------------------------------------------

    def select_all(self) -> None:
        """Select the whole document and put the cursor at its end."""
        _select_all(self.text, self.selection)
        self.cursor.line = self.selection.end_line
        self.cursor.index = self.selection.end_index
        self._update_preferred_x()
        self._keep_visible()

    def copy(self) -> str:
        """Copy the selection into the clipboard and return it."""
        self.clipboard = copy_selected_text(self.text, self.selection, CLIPBOARD_SIZE)
        self._keep_visible()
        return self.clipboard

    def paste(self) -> None:
        """Insert the clipboard at the cursor."""
        paste_text(self.text, self.cursor, self.selection, self.clipboard)
        self.scroll.update_max(self.text, self.glyph_map)
        self._keep_visible()

    # -- mouse ---------------------------------------------------------------

    def wheel(self, dx: int, dy: int) -> None:
        """Scroll by a mouse wheel movement."""
        if dy > 0:
            self.scroll.y = max(0, self.scroll.y - WHEEL_LINES)
        elif dy < 0:
            self.scroll.y = min(self.scroll.max_y, self.scroll.y + WHEEL_LINES)
        if dx > 0:
            self.scroll.x = min(self.scroll.max_x, self.scroll.x + WHEEL_PIXELS)
        elif dx < 0:
            self.scroll.x = max(0, self.scroll.x - WHEEL_PIXELS)

    def _place_cursor_at(self, x: int, y: int) -> bool:
        clicked_line = self.scroll.y + _trunc_div(y, self.glyph_map.glyph_height)
        if not 0 <= clicked_line < len(self.text):
            return False
        self.cursor.line = clicked_line
        self.cursor.index = find_cursor_position(
            self._current_line(), self.glyph_map, x + self.scroll.x
        )
        self._update_preferred_x()
        return True

    def mouse_down(self, x: int, y: int) -> None:
        """Place the cursor at a click and start a selection there."""
        if not self._place_cursor_at(x, y):
            return
        self.selection.collapse_to(self.cursor.line, self.cursor.index)
        self.mouse_dragging = True
        self._keep_visible()

    def mouse_drag(self, x: int, y: int) -> None:
        """While the button is held, move the selection end to the pointer."""
        if not self.mouse_dragging:
            return
        if not self._place_cursor_at(x, y):
            return
        self._extend_selection()
        self._keep_visible()

    def mouse_up(self) -> None:
        """End a mouse drag."""
        self.mouse_dragging = False