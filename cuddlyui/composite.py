"""Widgets with callbacks, and composites that hold and route events to them."""

from __future__ import annotations

import math
import string
from contextlib import contextmanager
from dataclasses import dataclass, replace
from enum import Enum, IntEnum, IntFlag, auto
from typing import Any, Callable, Iterator, Optional

from .quadtree import QuadTree
from .rect import Rect

Point = tuple[int, int]


class Callback(Enum):
    """Kinds of event a widget can have callbacks for."""

    ENTER = auto()
    LEAVE = auto()
    MOTION = auto()
    BTN_DOWN = auto()
    BTN_UP = auto()
    KEY_DOWN = auto()
    KEY_UP = auto()
    RESIZE = auto()
    FOCUS = auto()


_PRINTING_KEYS = [
    "SPACE", "APOSTROPHE", "COMMA", "DASH", "PERIOD", "SLASH",
    "SEMICOLON", "EQUAL", "GRAVE", "BACKSLASH", "L_BRACKET", "R_BRACKET",
    *(f"KEY_{digit}" for digit in range(10)),
    *string.ascii_uppercase,
    *(f"KP_{digit}" for digit in range(10)),
    "KP_PERIOD", "KP_SLASH", "KP_ASTERISK", "KP_DASH", "KP_PLUS",
]

_NON_PRINTING_KEYS = [
    "KP_ENTER", "ESC", "ENTER", "TAB", "BKSPC", "INS", "DEL",
    "L_ARROW", "R_ARROW", "U_ARROW", "D_ARROW", "PG_UP", "PG_DOWN",
    "HOME", "END", "PRT_SCR", "PAUSE", "NUM_LK", "SCROLL_LK", "CAPS_LK",
    *(f"F{number}" for number in range(1, 25)),
]

# Every key that produces a character sorts below NON_PRINTING.
Key = IntEnum(
    "Key",
    ["NO_KEY", *_PRINTING_KEYS, "NON_PRINTING", *_NON_PRINTING_KEYS],
    module=__name__,
    qualname="Key",
    start=0,
)


class KeyMod(IntFlag):
    """Modifier keys held during a key or button event."""

    NONE = 0
    SHIFT = 1
    CTRL = 2
    ALT = 4
    SUPER = 8


class MouseState(IntEnum):
    UP = 0
    DOWN = 1


class KeyState(IntEnum):
    UP = 0
    DOWN = 1


@dataclass(frozen=True)
class MouseEvent:
    location: Point


@dataclass(frozen=True)
class ButtonEvent:
    location: Point
    button: int
    state: int
    mods: int = 0


@dataclass(frozen=True)
class KeyEvent:
    location: Point
    character: int
    key: int
    state: int
    mods: int = 0


@dataclass(frozen=True)
class FocusEvent:
    focus: bool


@dataclass(frozen=True)
class ResizeEvent:
    size: Point


CallbackFunc = Callable[["Widget", Any, Any], None]


class Widget(Rect):
    """A positioned rectangle inside a parent, with per-event callback lists.

    Callbacks are called as ``func(widget, event, client)``.
    """

    def __init__(self, parent: Optional["Composite"] = None) -> None:
        super().__init__(0, 0)
        self.parent = parent
        self._x = 0
        self._y = 0
        self._visible = True
        self._callbacks: dict[Callback, list[tuple[CallbackFunc, Any]]] = {}
        if parent is not None:
            parent.add_child(self)

    @contextmanager
    def _relocating(self) -> Iterator[None]:
        parent = self.parent
        tracked = parent is not None and self in parent.children
        if tracked:
            parent.tree.remove(self)
        try:
            yield
        finally:
            if tracked:
                parent.move_child(self)

    @property
    def position(self) -> Point:
        return (self._x, self._y)

    @position.setter
    def position(self, value: Point) -> None:
        x, y = value
        with self._relocating():
            self._x, self._y = int(x), int(y)

    @property
    def visible(self) -> bool:
        return self._visible

    @visible.setter
    def visible(self, value: bool) -> None:
        with self._relocating():
            self._visible = bool(value)

    def resize(self, width: int, height: int) -> None:
        with self._relocating():
            super().resize(width, height)

    def bounds(self) -> tuple[int, int, int, int]:
        """The box in the parent's coordinates: (x, y, width, height)."""
        return (self._x, self._y, self.width, self.height)

    def add_callback(self, kind: Callback, func: CallbackFunc, client: Any = None) -> None:
        self._callbacks.setdefault(kind, []).append((func, client))

    def remove_callback(self, kind: Callback, func: CallbackFunc, client: Any = None) -> None:
        entries = self._callbacks.get(kind)
        if entries:
            self._callbacks[kind] = [
                (f, c) for f, c in entries if not (f == func and c is client)
            ]

    def call_callbacks(self, kind: Callback, data: Any) -> None:
        for func, client in list(self._callbacks.get(kind, ())):
            func(self, data, client)


def _per_pixel(extent: int) -> float:
    return 2.0 / extent if extent else math.inf


class Composite(Widget):
    """A widget holding children, which routes pointer and key events to them."""

    TREE_MAX_DEPTH = 4

    def __init__(self, parent: Optional["Composite"] = None) -> None:
        self._children: list[Widget] = []
        self._to_remove: list[Widget] = []
        self._focused: Optional[Widget] = None
        self.tree = QuadTree((0, 0), (0, 0), self.TREE_MAX_DEPTH)
        self.dirty = False
        self.old_pos: Point = (0, 0)
        self.old_child: Optional[Widget] = None
        super().__init__(parent)
        self._regenerate_search_tree()
        self.add_callback(Callback.FOCUS, Composite._on_focus)

    @property
    def children(self) -> tuple[Widget, ...]:
        return tuple(self._children)

    @property
    def focused_child(self) -> Optional[Widget]:
        return self._focused

    def _index_of(self, child: Widget) -> int:
        return next(i for i, held in enumerate(self._children) if held is child)

    def set_focused_child(self, child: Optional[Widget]) -> None:
        """Move the focus to a child; a widget that is not a child clears it."""
        if child is self._focused:
            return
        target = child if child is not None and child in self._children else None
        self._focus_child(target)
        if self.parent is not None and child is None:
            self.parent.set_focused_child(None)

    def resize(self, width: int, height: int) -> None:
        super().resize(width, height)
        self._regenerate_search_tree()
        event = ResizeEvent(self.size)
        for child in self._children:
            child.call_callbacks(Callback.RESIZE, event)

    def pixel_size(self) -> tuple[float, float, float]:
        """Size of one pixel in normalised device units: (x, y, 0)."""
        return (_per_pixel(self.width), _per_pixel(self.height), 0.0)

    def set_desired_size(self) -> None:
        self._clear_removed_children()

    def _regenerate_search_tree(self) -> None:
        self.tree = QuadTree((0, 0), self.size, self.TREE_MAX_DEPTH)
        for child in self._children:
            if child.visible:
                self.tree.insert(child)

    def _clear_removed_children(self) -> None:
        if self.dirty and self._to_remove:
            for child in self._to_remove:
                self._children = [held for held in self._children if held is not child]
                self.tree.remove(child)
            self._to_remove.clear()

    @staticmethod
    def _relative(location: Point, child: Widget) -> Point:
        x, y, _, _ = child.bounds()
        return (location[0] - x, location[1] - y)

    def _child_motion(self, child: Widget, kind: Callback, pos: Point) -> None:
        location = self._relative(pos, child)
        if isinstance(child, Composite):
            child.mouse_pos_callback(*location)
        else:
            child.call_callbacks(kind, MouseEvent(location))

    def _focus_child(self, new_focus: Optional[Widget]) -> None:
        if new_focus is self._focused:
            return
        if self._focused is not None:
            self._focused.call_callbacks(Callback.FOCUS, FocusEvent(False))
        self._focused = new_focus
        if self._focused is not None:
            self._focused.call_callbacks(Callback.FOCUS, FocusEvent(True))

    def _focus_next_child(self) -> None:
        if not self._children:
            self._focus_child(None)
            return
        if self._focused is None:
            index = 0
        else:
            index = (self._index_of(self._focused) + 1) % len(self._children)
        self._focus_child(self._children[index])

    def _focus_previous_child(self) -> None:
        if not self._children:
            return
        index = len(self._children) if self._focused is None else self._index_of(self._focused)
        if index == 0:
            index = len(self._children)
        self._focus_child(self._children[index - 1])

    @staticmethod
    def _on_focus(widget: Widget, event: FocusEvent, client: Any) -> None:
        if isinstance(widget, Composite) and not event.focus:
            widget.set_focused_child(None)

    def add_child(self, child: Widget) -> None:
        if child in self._children:
            return
        self._children.append(child)
        if child.visible:
            self.tree.insert(child)
        self.dirty = True

    def remove_child(self, child: Widget) -> None:
        """Schedule a child for removal at the next :meth:`manage_children`."""
        if child not in self._children:
            return
        if self._focused is child:
            self._focused = None
        self._to_remove.append(child)
        self.dirty = True

    def move_child(self, child: Widget) -> None:
        """Refile a child in the search tree after its box or visibility changed."""
        self.tree.remove(child)
        if child.visible:
            self.tree.insert(child)
        self.dirty = True

    def manage_children(self) -> None:
        self.set_desired_size()

    def mouse_pos_callback(self, x: int, y: int) -> None:
        pos = (int(x), int(y))
        target = self.tree.search(pos)
        if target is not None:
            if self.old_child is not target:
                if self.old_child is not None:
                    self._child_motion(self.old_child, Callback.LEAVE, pos)
                self._child_motion(target, Callback.ENTER, pos)
            self._child_motion(target, Callback.MOTION, pos)
        else:
            if self.old_child is not None:
                self._child_motion(self.old_child, Callback.LEAVE, pos)
            self.call_callbacks(Callback.MOTION, MouseEvent(pos))
        # A callback may have moved or removed the widget, so look again.
        self.old_child = self.tree.search(pos)
        self.old_pos = pos

    def mouse_btn_callback(self, button: int, state: int, mods: int = 0) -> None:
        self._handle_button(ButtonEvent(self.old_pos, button, state, mods))

    def _handle_button(self, event: ButtonEvent) -> None:
        which = Callback.BTN_UP if event.state == MouseState.UP else Callback.BTN_DOWN
        target = self.tree.search(self.old_pos)
        if which is Callback.BTN_DOWN:
            self.set_focused_child(target)
        if target is not None:
            moved = replace(event, location=self._relative(event.location, target))
            if isinstance(target, Composite):
                target._handle_button(moved)
            else:
                target.call_callbacks(which, moved)
        else:
            self.call_callbacks(which, event)

    def key_callback(self, key: int, char: int, state: int, mods: int = 0) -> None:
        self._handle_key(KeyEvent(self.old_pos, char, key, state, mods))

    def _handle_key(self, event: KeyEvent) -> None:
        which = Callback.KEY_UP if event.state == KeyState.UP else Callback.KEY_DOWN
        focused = self._focused
        nested = focused if isinstance(focused, Composite) else None

        if event.key == Key.TAB and event.state == KeyState.DOWN:
            if nested is not None:
                nested._handle_key(event)
            elif event.mods & KeyMod.SHIFT:
                self._focus_previous_child()
            else:
                self._focus_next_child()
        elif focused is not None:
            moved = replace(event, location=self._relative(event.location, focused))
            if nested is not None:
                nested._handle_key(moved)
            else:
                focused.call_callbacks(which, moved)
        else:
            self.call_callbacks(which, event)