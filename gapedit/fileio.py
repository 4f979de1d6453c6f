"""Loading and saving a document as a plain text file."""

from __future__ import annotations

import os

from .text import Text

# Longest run of characters read onto a line in one piece.
_CHUNK = 255


def open_file(file_name: str | os.PathLike[str], text: Text) -> bool:
    """Append the lines of ``file_name`` to ``text``.

    Returns False, leaving ``text`` alone, when the file cannot be opened.
    """
    print(os.fspath(file_name))
    try:
        handle = open(file_name, "r", encoding="utf-8", newline="\n")
    except OSError:
        return False
    print("File loaded")
    line = 0
    with handle:
        for raw in handle:
            content = raw[:-1] if raw.endswith("\n") else raw
            text.insert_on_line(line, content)
            if raw.endswith("\n") or len(content) % _CHUNK != 0:
                line += 1
                text.new_line(line, 0)
    return True


def save_file(file_name: str | os.PathLike[str], text: Text) -> bool:
    """Write every line of ``text`` to ``file_name``, each ending in a newline.

    Returns False when the file cannot be opened for writing.
    """
    try:
        handle = open(file_name, "w", encoding="utf-8", newline="")
    except OSError:
        return False
    with handle:
        for line in text:
            line.move_cursor_to_end()
            handle.write(line.before())
            handle.write("\n")
    return True