# gapedit

gapedit is a small graphical text editor. Each line of text is held in a gap
buffer, so typing and deleting at the cursor stay cheap. The window is drawn
with pygame. Glyphs for the printable ASCII characters are rendered once into
an atlas and then copied from it.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Running

```
gapedit [FILE]
```

If you give a file, it is loaded into the editor, and Ctrl+S writes the text
back to that same file. With no file you can still edit, but Ctrl+S does
nothing.

The editor loads the font `DejaVuSansMono.ttf` at size 24 from the current
directory. If the font cannot be loaded, it prints `font error: ...` to
standard error and exits with status 1.

## Keys

| Key                    | Action                                        |
|------------------------|-----------------------------------------------|
| Arrow keys             | Move the cursor                               |
| Shift + arrows         | Extend the selection                          |
| Return                 | Split the line at the cursor                  |
| Backspace              | Delete back, joining lines at a line start    |
| Page Up / Page Down    | Scroll by one screen                          |
| Ctrl+A                 | Select all                                    |
| Ctrl+C                 | Copy the selection (up to 1023 characters)    |
| Ctrl+V                 | Paste                                         |
| Ctrl+S                 | Save to the file given on the command line    |
| Ctrl+Shift+= / Ctrl+-  | Grow or shrink the font by 2 (8 to 40)        |
| Mouse wheel            | Scroll by 3 lines, or 20 pixels sideways      |
| Click and drag         | Place the cursor and select                   |

## What it does not do

- Typing, Return, Backspace and paste do not remove selected text. They drop
  the selection and act at the cursor.
- Copy and paste use the editor's own clipboard, not the system clipboard.
- There is no undo, no search and no "save as". The only file that can be
  saved from the window is the one named on the command line.
- Only printable ASCII characters are drawn. Files are read and written as
  UTF-8.

## Library use

You can use the editing model without opening a window.

- `gapedit.gap.GapBuffer` is one line of text with a cursor. Its methods are
  `insert`, `delete_back`, `cursor_left`, `cursor_right`, `move_cursor`,
  `move_cursor_to_end`, `before`, `after` and `copy_after_cursor`.
- `gapedit.text.Text` is the list of lines. It always has at least one line.
  `new_line` splits a line and `delete_line` joins a line onto the one above.
- `gapedit.fileio` has `open_file(path, text)` and `save_file(path, text)`.
  Each returns `False` when the file cannot be opened.
- `gapedit.glyph.GlyphMap` records a `GlyphRect` for each character, plus the
  line height (`glyph_height`).
- `gapedit.layout` holds `Cursor`, `Selection` and `ScrollState`, and the
  functions `calculate_cursor_x`, `find_cursor_position`, `line_width`,
  `copy_selected_text`, `paste_text` and `select_all`.
- `gapedit.editor.Editor` holds the whole editor state. It has one method for
  each user action: `type_text`, `enter`, `backspace`, `move_left`,
  `move_right`, `move_up`, `move_down`, `page_up`, `page_down`, `select_all`,
  `copy`, `paste`, `wheel`, `mouse_down`, `mouse_drag`, `mouse_up`, `resize`,
  `load` and `save`.
- `gapedit.app` has `build_glyph_atlas`, `render_text` and `main`, which opens
  the window.

The editor measures text in pixels, so it needs a glyph map with a line
height and a rectangle for every printable character:

```python
from gapedit.editor import Editor
from gapedit.glyph import GlyphMap, GlyphRect

glyph_map = GlyphMap(glyph_height=20)
for code in range(32, 127):
    glyph_map.add_glyph(chr(code), GlyphRect(0, 0, 10, 20))

editor = Editor(glyph_map, 800, 600)
editor.type_text("hello")
editor.enter()
editor.type_text("world")
editor.select_all()
print(editor.copy())  # prints "hello" and "world" on two lines
```