import pytest

from gapedit.gap import GapBuffer


def test_new_buffer_is_empty():
    buf = GapBuffer()
    assert len(buf) == 0
    assert str(buf) == ""
    assert buf.cursor == 0


def test_insert_advances_cursor():
    buf = GapBuffer()
    buf.insert("hello")
    assert str(buf) == "hello"
    assert buf.cursor == len("hello")
    assert buf.before() == "hello"
    assert buf.after() == ""


def test_insert_in_middle():
    buf = GapBuffer()
    buf.insert("held")
    buf.move_cursor(3)
    buf.insert("lo wor")
    assert str(buf) == "hello world"[:3] + "lo wor" + "d"
    assert buf.before() == "hel" + "lo wor"
    assert buf.after() == "d"


def test_delete_back_removes_before_cursor():
    buf = GapBuffer()
    buf.insert("abc")
    buf.cursor_left()
    buf.delete_back()
    assert str(buf) == "ac"
    assert buf.cursor == 1


def test_delete_back_at_start_does_nothing():
    buf = GapBuffer()
    buf.insert("abc")
    buf.move_cursor(0)
    buf.delete_back()
    assert str(buf) == "abc"
    assert buf.cursor == 0


def test_cursor_left_and_right_bounds():
    buf = GapBuffer()
    buf.insert("ab")
    buf.cursor_right()
    assert buf.cursor == 2
    buf.cursor_left()
    buf.cursor_left()
    buf.cursor_left()
    assert buf.cursor == 0
    assert buf.after() == "ab"


def test_move_cursor_out_of_range_is_ignored():
    buf = GapBuffer()
    buf.insert("abc")
    buf.move_cursor(1)
    buf.move_cursor(10)
    assert buf.cursor == 1
    buf.move_cursor(-1)
    assert buf.cursor == 1


@pytest.mark.parametrize("position", [0, 1, 2, 3, 4])
def test_move_cursor_keeps_content(position):
    buf = GapBuffer()
    buf.insert("abcd")
    buf.move_cursor(position)
    assert buf.cursor == position
    assert str(buf) == "abcd"
    assert buf.before() + buf.after() == "abcd"


def test_move_cursor_to_end_returns_length():
    buf = GapBuffer()
    buf.insert("text")
    buf.move_cursor(0)
    end = buf.move_cursor_to_end()
    assert end == len("text")
    assert buf.cursor == end
    assert buf.after() == ""


def test_copy_after_cursor():
    src = GapBuffer()
    src.insert("left|right")
    src.move_cursor(5)
    dest = GapBuffer()
    dest.insert(">")
    dest.copy_after_cursor(src)
    assert str(dest) == ">" + "right"
    assert str(src) == "left|right"


def test_initial_text():
    buf = GapBuffer("xyz")
    assert str(buf) == "xyz"
    assert buf.cursor == len("xyz")


def test_large_insert():
    buf = GapBuffer()
    data = "q" * 5000
    buf.insert(data)
    buf.move_cursor(2500)
    buf.insert("!")
    assert len(buf) == len(data) + 1
    assert str(buf)[2500] == "!"