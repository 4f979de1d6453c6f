"""A gap buffer holding the text of a single line."""

from __future__ import annotations


class GapBuffer:
    """Editable character sequence with a movable insertion point.

    Text before the cursor and text after it are kept apart, so inserting
    and deleting at the cursor is cheap no matter how long the line is.
    """

    def __init__(self, text: str = "") -> None:
        self._before: list[str] = list(text)
        # Characters after the cursor, stored nearest-last for cheap moves.
        self._after: list[str] = []

    @property
    def cursor(self) -> int:
        """Position of the insertion point."""
        return len(self._before)

    def insert(self, text: str) -> None:
        """Insert ``text`` at the cursor and move the cursor past it."""
        self._before.extend(text)

    def delete_back(self) -> None:
        """Remove the character before the cursor, if there is one."""
        if self._before:
            self._before.pop()

    def cursor_left(self) -> None:
        """Move the cursor one character left; does nothing at the start."""
        if self._before:
            self._after.append(self._before.pop())

    def cursor_right(self) -> None:
        """Move the cursor one character right; does nothing at the end."""
        if self._after:
            self._before.append(self._after.pop())

    def __len__(self) -> int:
        return len(self._before) + len(self._after)

    def __str__(self) -> str:
        return self.before() + self.after()

    def __repr__(self) -> str:
        return f"GapBuffer({str(self)!r}, cursor={self.cursor})"

    def before(self) -> str:
        """Text in front of the cursor."""
        return "".join(self._before)

    def after(self) -> str:
        """Text behind the cursor."""
        return "".join(reversed(self._after))

    def move_cursor(self, position: int) -> None:
        """Place the cursor at ``position``; out-of-range positions are ignored."""
        if position < 0 or position > len(self):
            return
        if position > self.cursor:
            for _ in range(position - self.cursor):
                self.cursor_right()
        else:
            for _ in range(self.cursor - position):
                self.cursor_left()

    def move_cursor_to_end(self) -> int:
        """Move the cursor past the last character and return its position."""
        end = len(self)
        self.move_cursor(end)
        return end

    def copy_after_cursor(self, source: GapBuffer) -> None:
        """Insert everything behind ``source``'s cursor at this buffer's cursor."""
        self.insert(source.after())