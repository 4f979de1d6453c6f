"""A document made of gap-buffer lines."""

from __future__ import annotations

from collections.abc import Iterator

from .gap import GapBuffer


class Text:
    """An ordered list of lines; always holds at least one line."""

    def __init__(self) -> None:
        self._lines: list[GapBuffer] = [GapBuffer()]

    def __len__(self) -> int:
        return len(self._lines)

    def __getitem__(self, index: int) -> GapBuffer:
        return self._lines[index]

    def __iter__(self) -> Iterator[GapBuffer]:
        return iter(self._lines)

    def __repr__(self) -> str:
        return f"Text({[str(line) for line in self._lines]!r})"

    def new_line(self, index: int, line_pos: int) -> None:
        """Insert an empty line at ``index``.

        When ``line_pos`` lies before the end of the previous line, the text
        behind that line's cursor moves onto the new line. An ``index`` past
        the end of the document is ignored.
        """
        if index > len(self._lines):
            return
        if index < 1:
            raise IndexError("a new line must follow an existing line")
        new = GapBuffer()
        self._lines.insert(index, new)
        old = self._lines[index - 1]
        if line_pos < len(old):
            new.copy_after_cursor(old)
            tail = len(old.after())
            old.move_cursor_to_end()
            for _ in range(tail):
                old.delete_back()

    def delete_line(self, line_num: int, line_pos: int) -> int:
        """Remove line ``line_num``, joining it onto the line above.

        Returns the cursor position in the joined line where the removed
        line's text begins.
        """
        if not 1 <= line_num < len(self._lines):
            raise IndexError(f"cannot delete line {line_num}")
        old = self._lines.pop(line_num)
        previous = self._lines[line_num - 1]
        new_cursor = previous.move_cursor_to_end()
        if line_pos < len(old):
            previous.copy_after_cursor(old)
        previous.move_cursor(new_cursor)
        return new_cursor

    def insert_on_line(self, line: int, string: str) -> None:
        """Insert ``string`` at the cursor of line ``line``."""
        self._lines[line].insert(string)

    def delete_from_line(self, line: int) -> None:
        """Delete the character before the cursor of line ``line``."""
        self._lines[line].delete_back()