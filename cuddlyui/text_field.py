"""A single-line editable text field with a blinking cursor and key repeat."""

from __future__ import annotations

import time
from typing import Any, Callable, Optional, Protocol, Sequence, Union

from .composite import Callback, Composite, FocusEvent, Key, KeyEvent, Widget
from .util import u32_to_utf8, utf8_to_u32

Edges = tuple[int, int, int, int]

DEFAULT_BLINK_MS = 250
DEFAULT_MAX_LENGTH = 20
DEFAULT_REPEAT_INITIAL_MS = 350
DEFAULT_REPEAT_DELAY_MS = 150


class Font(Protocol):
    """What a text field needs from a font."""

    def get_string_size(self, code_points: Sequence[int]) -> tuple[int, int, int]:
        """Width, ascender and descender of a run of code points."""
        ...

    def max_cell_size(self) -> tuple[int, int]:
        """Width and height of the largest glyph cell."""
        ...


def _edges(value: Edges) -> Edges:
    top, left, right, bottom = value
    return (int(top), int(left), int(right), int(bottom))


class TextField(Widget):
    """An editable line of text.

    The field is as wide as ``max_length`` of the font's widest cells.
    When the text is wider than the field, only a window of it is shown,
    chosen in half-field steps so the cursor stays in view.  Times are in
    milliseconds; a blink rate of zero keeps the cursor steady.
    """

    focus_hook: Optional[Callable[[bool], None]] = None

    def __init__(self, parent: Optional[Composite] = None, font: Optional[Font] = None) -> None:
        self._text: list[int] = []
        self._font: Optional[Font] = None
        self._margin: Edges = (0, 0, 0, 0)
        self._border: Edges = (0, 0, 0, 0)
        self._cursor_pos = 0
        self._blink = DEFAULT_BLINK_MS
        self._max_length = DEFAULT_MAX_LENGTH
        self.repeat_initial = DEFAULT_REPEAT_INITIAL_MS
        self.repeat_delay = DEFAULT_REPEAT_DELAY_MS
        self.clock: Callable[[], float] = time.monotonic
        self.cursor_visible = True
        self.cursor_active = False
        self._cursor_clock = self.clock()
        self._repeat_event: Optional[KeyEvent] = None
        self._repeat_due = 0.0
        super().__init__(parent)

        self.add_callback(Callback.FOCUS, TextField._on_focus)
        self.add_callback(Callback.KEY_DOWN, TextField._on_key_down)
        self.add_callback(Callback.KEY_UP, TextField._on_key_up)

        if font is not None:
            self.font = font

    # -- properties -------------------------------------------------------

    @property
    def font(self) -> Optional[Font]:
        return self._font

    @font.setter
    def font(self, value: Optional[Font]) -> None:
        self._font = value
        self._calculate_widget_size()
        self.reset_cursor()

    @property
    def text(self) -> str:
        return "".join(map(chr, self._text))

    @text.setter
    def text(self, value: str) -> None:
        self._text = [ord(ch) for ch in value]
        self._cursor_pos = len(self._text)
        self.reset_cursor()

    @property
    def code_points(self) -> tuple[int, ...]:
        return tuple(self._text)

    @property
    def utf8(self) -> bytes:
        """The text encoded as UTF-8."""
        return u32_to_utf8(self._text)

    @utf8.setter
    def utf8(self, value: bytes) -> None:
        self._text = utf8_to_u32(value)
        self._cursor_pos = len(self._text)
        self.reset_cursor()

    @property
    def margin(self) -> Edges:
        return self._margin

    @margin.setter
    def margin(self, value: Edges) -> None:
        self._margin = _edges(value)
        self._calculate_widget_size()

    @property
    def border(self) -> Edges:
        return self._border

    @border.setter
    def border(self, value: Edges) -> None:
        self._border = _edges(value)
        self._calculate_widget_size()

    @property
    def max_length(self) -> int:
        """How many of the font's widest cells fit in the field."""
        return self._max_length

    @max_length.setter
    def max_length(self, value: int) -> None:
        self._max_length = int(value)
        self._calculate_widget_size()
        self.reset_cursor()

    @property
    def cursor_position(self) -> int:
        return self._cursor_pos

    @cursor_position.setter
    def cursor_position(self, value: int) -> None:
        self._cursor_pos = max(0, min(int(value), len(self._text)))
        self.reset_cursor()

    @property
    def blink(self) -> int:
        return self._blink

    @blink.setter
    def blink(self, value: int) -> None:
        self._blink = int(value)
        self.reset_cursor()

    @property
    def repeating(self) -> bool:
        """Whether a held key is waiting to repeat."""
        return self._repeat_event is not None

    # -- callbacks --------------------------------------------------------

    @staticmethod
    def _on_focus(widget: Widget, event: FocusEvent, client: Any) -> None:
        if not isinstance(widget, TextField):
            return
        hook = widget.focus_hook
        if event.focus:
            if hook is not None:
                hook(True)
            widget.activate_cursor()
        else:
            widget.deactivate_cursor()
            if hook is not None:
                hook(False)

    @staticmethod
    def _on_key_down(widget: Widget, event: KeyEvent, client: Any) -> None:
        if isinstance(widget, TextField):
            widget.apply_key(event)
            widget._repeat_event = event
            widget._repeat_due = widget.clock() + widget.repeat_initial / 1000.0

    @staticmethod
    def _on_key_up(widget: Widget, event: KeyEvent, client: Any) -> None:
        if isinstance(widget, TextField):
            widget._repeat_event = None

    # -- editing ----------------------------------------------------------

    def apply_key(self, event: KeyEvent) -> None:
        """Insert the event's character, or act on an editing key."""
        if event.character != 0:
            self.insert_char(event.character)
            return
        action = {
            Key.L_ARROW: self.previous_char,
            Key.R_ARROW: self.next_char,
            Key.HOME: self.first_char,
            Key.END: self.last_char,
            Key.BKSPC: self.remove_previous_char,
            Key.DEL: self.remove_next_char,
        }.get(event.key)
        if action is not None:
            action()

    def insert_char(self, char: Union[int, str]) -> None:
        """Insert a code point (or one-character string) at the cursor."""
        code = ord(char) if isinstance(char, str) else int(char)
        self._text.insert(self._cursor_pos, code)
        self._cursor_pos += 1

    def first_char(self) -> None:
        self._cursor_pos = 0

    def previous_char(self) -> None:
        if self._cursor_pos > 0:
            self._cursor_pos -= 1

    def next_char(self) -> None:
        if self._cursor_pos < len(self._text):
            self._cursor_pos += 1

    def last_char(self) -> None:
        self._cursor_pos = len(self._text)

    def remove_previous_char(self) -> None:
        if self._cursor_pos > 0:
            self._cursor_pos -= 1
            del self._text[self._cursor_pos]

    def remove_next_char(self) -> None:
        if self._cursor_pos < len(self._text):
            del self._text[self._cursor_pos]

    # -- cursor -----------------------------------------------------------

    def reset_cursor(self) -> None:
        self.cursor_visible = True
        self._cursor_clock = self.clock()

    def activate_cursor(self) -> None:
        self.cursor_active = True
        self.reset_cursor()

    def deactivate_cursor(self) -> None:
        self.cursor_active = False

    # -- geometry ---------------------------------------------------------

    def _string_size(self, code_points: Sequence[int]) -> tuple[int, int, int]:
        if self._font is None:
            return (0, 0, 0)
        return self._font.get_string_size(list(code_points))

    def raw_cursor_pos(self) -> int:
        """Pixel offset of the cursor from the start of the whole text."""
        if self._font is None:
            return 0
        return self._string_size(self._text[: self._cursor_pos])[0]

    def field_length(self) -> int:
        """Pixels available for text inside the margins and borders."""
        return (
            self.width
            - self._margin[1] - self._margin[2]
            - self._border[1] - self._border[2]
            - 2
        )

    def visible_window(self) -> tuple[int, int, int]:
        """The shown part of the text: (start pixel, width, cursor pixel in it)."""
        pixel_pos = self.raw_cursor_pos()
        field_len = self.field_length()
        width = self._string_size(self._text)[0]
        if width <= field_len:
            return (0, width, pixel_pos)
        chunk = max(field_len // 2, 1)
        which = max(pixel_pos // chunk - 1, 0)
        start = chunk * which
        return (start, min(field_len, width - start), pixel_pos - start)

    def _calculate_widget_size(self) -> None:
        if self._font is None:
            return
        cell_w, cell_h = self._font.max_cell_size()
        width = (
            cell_w * self._max_length
            + self._border[1] + self._border[2]
            + self._margin[1] + self._margin[2] + 2
        )
        height = (
            cell_h
            + self._border[0] + self._border[3]
            + self._margin[0] + self._margin[3] + 2
        )
        self.resize(width, height)

    # -- timing -----------------------------------------------------------

    def tick(self, now: Optional[float] = None) -> bool:
        """Advance blinking and key repeat to ``now`` (seconds).

        Returns whether the cursor should be drawn.
        """
        if now is None:
            now = self.clock()
        if self._repeat_event is not None and now >= self._repeat_due:
            self.apply_key(self._repeat_event)
            self._repeat_due = now + self.repeat_delay / 1000.0
        if self.cursor_active and self._blink > 0:
            if (now - self._cursor_clock) * 1000.0 >= self._blink:
                self.cursor_visible = not self.cursor_visible
                self._cursor_clock = now
        return self.cursor_active and self.cursor_visible