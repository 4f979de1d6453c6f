import pytest

from gapedit.gap import GapBuffer
from gapedit.glyph import GlyphMap, GlyphRect
from gapedit.layout import (
    Cursor,
    ScrollState,
    Selection,
    calculate_cursor_x,
    copy_selected_text,
    find_cursor_position,
    line_width,
    paste_text,
    select_all,
)
from gapedit.text import Text

WIDTH = 10
HEIGHT = 20


def _glyph_map(widths=None):
    glyph_map = GlyphMap(glyph_height=HEIGHT)
    for code in range(32, 127):
        char = chr(code)
        w = (widths or {}).get(char, WIDTH)
        glyph_map.add_glyph(char, GlyphRect(0, 0, w, HEIGHT))
    return glyph_map


def _make_text(lines):
    text = Text()
    for number, content in enumerate(lines):
        if number > 0:
            text.new_line(number, 0)
        text.insert_on_line(number, content)
    return text


def _contents(text):
    return [str(line) for line in text]


# Selection


def test_selection_empty_by_default():
    assert Selection().is_empty() is True


def test_selection_not_empty_when_end_moves():
    selection = Selection(end_index=3)
    assert selection.is_empty() is False


def test_ordered_keeps_forward_selection():
    selection = Selection(1, 2, 3, 4)
    assert selection.ordered() == (1, 2, 3, 4)


def test_ordered_swaps_backward_selection():
    selection = Selection(3, 4, 1, 2)
    assert selection.ordered() == (1, 2, 3, 4)


def test_ordered_same_line_backward():
    selection = Selection(2, 7, 2, 1)
    assert selection.ordered() == (2, 1, 2, 7)


def test_collapse_to():
    selection = Selection(0, 1, 5, 6)
    selection.collapse_to(2, 3)
    assert (selection.start_line, selection.start_index) == (2, 3)
    assert (selection.end_line, selection.end_index) == (2, 3)
    assert selection.is_empty()


# Geometry


def test_cursor_x_monospace_matches_column():
    glyph_map = _glyph_map()
    line = GapBuffer("hello")
    for column in range(len(line) + 1):
        assert calculate_cursor_x(line, glyph_map, column) == column * WIDTH


def test_cursor_x_independent_of_gap_position():
    glyph_map = _glyph_map({"i": 3, "m": 12})
    line = GapBuffer("mimic")
    expected = [calculate_cursor_x(line, glyph_map, k) for k in range(6)]
    for gap in range(6):
        line.move_cursor(gap)
        assert [calculate_cursor_x(line, glyph_map, k) for k in range(6)] == expected


def test_cursor_x_at_end_equals_line_width():
    glyph_map = _glyph_map({"i": 3, "m": 12})
    line = GapBuffer("mimic")
    line.move_cursor(2)
    assert calculate_cursor_x(line, glyph_map, len(line)) == line_width(line, glyph_map)


def test_cursor_x_uses_glyph_widths():
    glyph_map = _glyph_map({"i": 3, "m": 12})
    line = GapBuffer("mi")
    assert calculate_cursor_x(line, glyph_map, 2) == (
        glyph_map.width_of("m") + glyph_map.width_of("i")
    )


def test_non_printable_has_no_width():
    glyph_map = _glyph_map()
    assert line_width(GapBuffer("\t"), glyph_map) == 0
    assert line_width(GapBuffer("a\tb"), glyph_map) == 2 * WIDTH


def test_line_width_empty():
    assert line_width(GapBuffer(), _glyph_map()) == 0


@pytest.mark.parametrize("gap", [0, 2, 5])
def test_find_position_round_trip(gap):
    glyph_map = _glyph_map()
    line = GapBuffer("hello")
    line.move_cursor(gap)
    for column in range(len(line) + 1):
        x = calculate_cursor_x(line, glyph_map, column)
        assert find_cursor_position(line, glyph_map, x) == column


def test_find_position_clamps_to_line():
    glyph_map = _glyph_map()
    line = GapBuffer("abc")
    assert find_cursor_position(line, glyph_map, -50) == 0
    assert find_cursor_position(line, glyph_map, 10_000) == len(line)


def test_find_position_rounds_to_nearest_column():
    glyph_map = _glyph_map()
    line = GapBuffer("abc")
    assert find_cursor_position(line, glyph_map, WIDTH + WIDTH // 2 - 1) == 1
    assert find_cursor_position(line, glyph_map, WIDTH + WIDTH // 2) == 2


# Scrolling


def test_update_max_limits_vertical_scroll():
    glyph_map = _glyph_map()
    text = _make_text([str(n) for n in range(10)])
    scroll = ScrollState(y=50, win_h=3 * HEIGHT)
    scroll.update_max(text, glyph_map)
    assert scroll.max_y == len(text) - 3
    assert scroll.y == scroll.max_y


def test_update_max_zero_when_everything_fits():
    glyph_map = _glyph_map()
    text = _make_text(["a", "b"])
    scroll = ScrollState(y=1, win_h=10 * HEIGHT)
    scroll.update_max(text, glyph_map)
    assert scroll.max_y == 0
    assert scroll.y == 0


def test_keep_visible_scrolls_down_to_cursor():
    glyph_map = _glyph_map()
    text = _make_text([str(n) for n in range(10)])
    scroll = ScrollState(win_w=400, win_h=3 * HEIGHT)
    cursor = Cursor(line=7, index=0)
    scroll.keep_visible(cursor, text, glyph_map)
    assert scroll.y == cursor.line - 3 + 1
    assert scroll.y <= cursor.line < scroll.y + 3


def test_keep_visible_scrolls_up_to_cursor():
    glyph_map = _glyph_map()
    text = _make_text([str(n) for n in range(10)])
    scroll = ScrollState(y=6, win_w=400, win_h=3 * HEIGHT)
    cursor = Cursor(line=2, index=0)
    scroll.keep_visible(cursor, text, glyph_map)
    assert scroll.y == cursor.line


def test_keep_visible_scrolls_left():
    glyph_map = _glyph_map()
    text = _make_text(["abcdef"])
    scroll = ScrollState(x=100, win_w=400, win_h=3 * HEIGHT)
    scroll.keep_visible(Cursor(line=0, index=0), text, glyph_map)
    assert scroll.x == 0


def test_keep_visible_scrolls_right_within_limit():
    glyph_map = _glyph_map()
    text = _make_text(["x" * 60])
    scroll = ScrollState(max_x=10_000, win_w=100, win_h=3 * HEIGHT)
    cursor = Cursor(line=0, index=50)
    scroll.keep_visible(cursor, text, glyph_map)
    cursor_x = calculate_cursor_x(text[0], glyph_map, cursor.index)
    assert scroll.x == cursor_x - scroll.win_w + 20
    assert scroll.x <= cursor_x <= scroll.x + scroll.win_w


def test_keep_visible_respects_max_x():
    glyph_map = _glyph_map()
    text = _make_text(["x" * 60])
    scroll = ScrollState(max_x=5, win_w=100, win_h=3 * HEIGHT)
    scroll.keep_visible(Cursor(line=0, index=50), text, glyph_map)
    assert scroll.x == scroll.max_x


# Clipboard


def test_copy_empty_selection():
    text = _make_text(["hello"])
    assert copy_selected_text(text, Selection(0, 2, 0, 2)) == ""


def test_copy_single_line():
    text = _make_text(["hello world"])
    assert copy_selected_text(text, Selection(0, 0, 0, 5)) == "hello"


def test_copy_across_lines():
    text = _make_text(["abc", "def"])
    assert copy_selected_text(text, Selection(0, 1, 1, 2)) == "bc\nde"


def test_copy_backward_selection_matches_forward():
    text = _make_text(["abc", "def", "ghi"])
    forward = copy_selected_text(text, Selection(0, 1, 2, 2))
    backward = copy_selected_text(text, Selection(2, 2, 0, 1))
    assert forward == backward


def test_copy_truncated_to_clipboard_size():
    text = _make_text(["abcdef", "ghi"])
    selection = Selection()
    select_all(text, selection)
    full = copy_selected_text(text, selection)
    assert copy_selected_text(text, selection, 4) == full[:3]


def test_copy_rejects_zero_size():
    text = _make_text(["abc"])
    with pytest.raises(ValueError):
        copy_selected_text(text, Selection(0, 0, 0, 2), 0)


def test_select_all_covers_document():
    text = _make_text(["one", "two", "three"])
    selection = Selection()
    select_all(text, selection)
    assert selection.ordered() == (0, 0, len(text) - 1, len(text[len(text) - 1]))
    assert copy_selected_text(text, selection) == "\n".join(["one", "two", "three"])


def test_paste_into_empty_text():
    text = Text()
    cursor = Cursor()
    paste_text(text, cursor, Selection(), "ab\ncd")
    assert _contents(text) == ["ab", "cd"]
    assert (cursor.line, cursor.index) == (1, 2)


def test_paste_splits_line_at_cursor():
    text = _make_text(["xy"])
    text[0].move_cursor(1)
    cursor = Cursor(line=0, index=1)
    paste_text(text, cursor, Selection(), "\n")
    assert _contents(text) == ["x", "y"]
    assert (cursor.line, cursor.index) == (1, 0)


def test_paste_collapses_selection_to_cursor():
    text = Text()
    cursor = Cursor()
    selection = Selection(0, 0, 0, 0)
    selection.end_index = 1
    paste_text(text, cursor, selection, "q")
    assert selection.is_empty()
    assert (selection.start_line, selection.start_index) == (0, 0)
    assert str(text[0]) == "q"


def test_copy_paste_round_trip():
    source = _make_text(["first", "second", "third"])
    selection = Selection()
    select_all(source, selection)
    clipboard = copy_selected_text(source, selection)

    target = Text()
    paste_text(target, Cursor(), Selection(), clipboard)
    assert _contents(target) == _contents(source)