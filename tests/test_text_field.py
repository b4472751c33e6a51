import pytest

from cuddlyui.composite import (
    Callback,
    Composite,
    FocusEvent,
    Key,
    KeyEvent,
    KeyState,
)
from cuddlyui.text_field import TextField

CHAR_W = 10


class FakeFont:
    def __init__(self, cell=(CHAR_W, 16)):
        self.cell = cell

    def get_string_size(self, code_points):
        return (len(code_points) * CHAR_W, 12, 4)

    def max_cell_size(self):
        return self.cell


class Clock:
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now


def make_field(text="", font=None):
    parent = Composite()
    parent.resize(400, 400)
    field = TextField(parent, font or FakeFont())
    field.text = text
    return parent, field


def key(k, char=0, state=KeyState.DOWN):
    return KeyEvent((0, 0), char, k, state)


def test_defaults_from_source():
    _, field = make_field()
    assert field.blink == 250
    assert field.max_length == 20
    assert field.repeat_initial == 350
    assert field.repeat_delay == 150
    assert field.cursor_active is False


def test_size_fits_max_length_cells():
    _, field = make_field()
    assert field.field_length() == CHAR_W * field.max_length
    field.max_length = 5
    assert field.field_length() == CHAR_W * 5
    field.margin = (1, 2, 3, 4)
    field.border = (1, 1, 1, 1)
    assert field.field_length() == CHAR_W * 5


def test_setting_text_puts_cursor_at_end():
    _, field = make_field("hello")
    assert field.text == "hello"
    assert field.cursor_position == len("hello")


def test_cursor_position_is_clamped():
    _, field = make_field("abc")
    field.cursor_position = 99
    assert field.cursor_position == 3
    field.cursor_position = -4
    assert field.cursor_position == 0


def test_insert_and_navigation():
    _, field = make_field("ac")
    field.previous_char()
    field.insert_char("b")
    assert field.text == "abc"
    assert field.cursor_position == 2
    field.first_char()
    field.previous_char()
    assert field.cursor_position == 0
    field.last_char()
    field.next_char()
    assert field.cursor_position == 3


def test_removal_at_edges():
    _, field = make_field("xyz")
    field.remove_next_char()
    assert field.text == "xyz"
    field.remove_previous_char()
    assert field.text == "xy"
    field.first_char()
    field.remove_previous_char()
    assert field.text == "xy"
    field.remove_next_char()
    assert field.text == "y"
    assert field.cursor_position == 0


def test_apply_key_editing_keys():
    _, field = make_field("abcd")
    field.apply_key(key(Key.HOME))
    field.apply_key(key(Key.DEL))
    field.apply_key(key(Key.R_ARROW))
    field.apply_key(key(Key.BKSPC))
    assert field.text == "cd"
    field.apply_key(key(Key.END))
    field.apply_key(key(Key.NO_KEY, ord("!")))
    assert field.text == "cd!"
    field.apply_key(key(Key.L_ARROW))
    assert field.cursor_position == 2


def test_typing_through_parent_focus():
    parent, field = make_field()
    parent.set_focused_child(field)
    assert field.cursor_active is True
    for ch in "hi":
        parent.key_callback(Key.NO_KEY, ord(ch), KeyState.DOWN)
        parent.key_callback(Key.NO_KEY, 0, KeyState.UP)
    assert field.text == "hi"
    assert field.repeating is False


def test_focus_hook_receives_focus_changes():
    parent, field = make_field()
    seen = []
    field.focus_hook = seen.append
    parent.set_focused_child(field)
    parent.set_focused_child(None)
    assert seen == [True, False]
    assert field.cursor_active is False


def test_focus_callback_direct():
    _, field = make_field()
    field.call_callbacks(Callback.FOCUS, FocusEvent(True))
    assert field.cursor_active is True


def test_key_repeat_after_initial_delay():
    parent, field = make_field()
    clock = Clock()
    field.clock = clock
    parent.set_focused_child(field)
    parent.key_callback(Key.NO_KEY, ord("a"), KeyState.DOWN)
    assert field.text == "a"
    field.tick(0.1)
    assert field.text == "a"
    field.tick(0.36)
    assert field.text == "aa"
    field.tick(0.40)
    assert field.text == "aa"
    field.tick(0.52)
    assert field.text == "aaa"
    parent.key_callback(Key.NO_KEY, 0, KeyState.UP)
    field.tick(5.0)
    assert field.text == "aaa"


def test_cursor_blinks_only_when_active():
    _, field = make_field()
    clock = Clock()
    field.clock = clock
    assert field.tick(1.0) is False
    field.activate_cursor()
    assert field.tick(0.1) is True
    assert field.tick(0.3) is False
    assert field.tick(0.6) is True


def test_zero_blink_keeps_cursor_steady():
    _, field = make_field()
    field.clock = Clock()
    field.blink = 0
    field.activate_cursor()
    assert all(field.tick(t) for t in (0.5, 1.0, 10.0))


def test_visible_window_short_text_is_whole():
    _, field = make_field("abc")
    start, width, cursor = field.visible_window()
    assert start == 0
    assert width == field.raw_cursor_pos()
    assert cursor == field.raw_cursor_pos()


@pytest.mark.parametrize("pos", range(0, 31))
def test_visible_window_keeps_cursor_in_view(pos):
    _, field = make_field("x" * 30)
    field.max_length = 4
    field.cursor_position = pos
    field_len = field.field_length()
    start, width, cursor = field.visible_window()
    assert start % (field_len // 2) == 0
    assert 0 <= cursor <= field_len
    assert start + cursor == field.raw_cursor_pos()
    assert 0 < width <= field_len


def test_utf8_round_trip():
    _, field = make_field()
    field.utf8 = "héllo".encode("utf-8")
    assert field.text == "héllo"
    assert field.utf8 == "héllo".encode("utf-8")


def test_no_font_means_no_cursor_offset():
    parent = Composite()
    field = TextField(parent)
    field.text = "abc"
    assert field.raw_cursor_pos() == 0
    assert field.size == (0, 0)