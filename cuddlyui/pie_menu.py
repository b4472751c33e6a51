"""A round popup menu whose children sit in equal pie-slice sectors."""

from __future__ import annotations

import math
from typing import Any, Optional

from .composite import (
    ButtonEvent,
    Callback,
    Composite,
    MouseEvent,
    MouseState,
    Widget,
)
from .manager import Manager, Resize

TWO_PI = 2.0 * math.pi

# Fraction of the radius left empty in the middle of the menu.
INNER_PCT = 0.1

DEFAULT_POPUP_BUTTON = 2


class PieMenu(Manager):
    """A popup menu that appears centred on the pointer when a button goes down.

    The menu attaches itself to its parent's button callbacks: pressing
    :attr:`popup_button` over an empty part of the parent shows it, and
    releasing that button hides it again.
    """

    def __init__(self, parent: Optional[Composite] = None) -> None:
        super().__init__(parent)
        self._resize_mode = Resize.NONE
        self.popup_button = DEFAULT_POPUP_BUTTON
        self.visible = False
        if parent is not None:
            parent.add_callback(Callback.BTN_DOWN, PieMenu._show_callback, self)
            parent.add_callback(Callback.BTN_UP, PieMenu._hide_callback, self)
        self.add_callback(Callback.BTN_UP, PieMenu._hide_callback, self)

    @property
    def resize_mode(self) -> Resize:
        return self._resize_mode

    @resize_mode.setter
    def resize_mode(self, value: int) -> None:
        # A pie menu keeps the size it is given; the mode never changes.
        del value

    @staticmethod
    def _show_callback(widget: Widget, event: ButtonEvent, client: Any) -> None:
        client.show(event)

    @staticmethod
    def _hide_callback(widget: Widget, event: ButtonEvent, client: Any) -> None:
        client.hide(event)

    def show(self, event: ButtonEvent) -> None:
        """Pop up centred on the event's location if the popup button went down."""
        if event.button == self.popup_button and event.state == MouseState.DOWN:
            x, y = event.location
            self.position = (x - self.width // 2, y - self.height // 2)
            self.visible = True

    def hide(self, event: ButtonEvent) -> None:
        """Hide again when the popup button is released."""
        if event.button == self.popup_button and event.state == MouseState.UP:
            self.visible = False

    def set_desired_size(self) -> None:
        """Place each child in the middle of its own sector."""
        Composite.set_desired_size(self)
        count = len(self._children)
        if count:
            increment = TWO_PI / count
            middle_x, middle_y = self.width // 4, self.height // 4
            center_x, center_y = self.width // 2, self.height // 2
            for index, child in enumerate(list(self._children)):
                angle = increment * (index + 0.5)
                x = center_x + math.trunc(middle_x * math.cos(angle)) - child.width // 2
                y = center_y + math.trunc(middle_y * math.sin(angle)) - child.height // 2
                child.position = (x, y)
        self.dirty = False

    def which_sector(self, x: int, y: int) -> int:
        """Index of the sector under a point, or -1 outside the ring."""
        width, height = self.size
        count = len(self._children)
        if count == 0 or width == 0 or height == 0:
            return -1
        y_factor = height / width
        sector_x = x - width // 2
        sector_y = (y - height // 2) / y_factor
        length = math.hypot(sector_x, sector_y)
        angle = math.atan2(sector_y, sector_x)
        outer_length = math.hypot(
            width / 2.0 * math.cos(angle),
            height / 2.0 * math.sin(angle) / y_factor,
        )
        if length < outer_length * INNER_PCT or length > outer_length:
            return -1
        if angle < 0.0:
            angle += TWO_PI
        increment = TWO_PI / count
        return min(math.trunc(angle / increment), count - 1)

    def which_child(self, x: int, y: int) -> Optional[Widget]:
        """The child whose sector holds the point, or None."""
        sector = self.which_sector(x, y)
        if sector == -1:
            return None
        return self._children[sector]

    def mouse_pos_callback(self, x: int, y: int) -> None:
        pos = (int(x), int(y))
        event = MouseEvent(pos)
        target = self.which_child(*pos)
        if target is not None:
            if self.old_child is not target:
                if self.old_child is not None:
                    self.old_child.call_callbacks(Callback.LEAVE, event)
                target.call_callbacks(Callback.ENTER, event)
            target.call_callbacks(Callback.MOTION, event)
        elif self.old_child is not None:
            self.old_child.call_callbacks(Callback.LEAVE, event)
        self.old_child = target
        self.old_pos = pos

    def mouse_btn_callback(self, button: int, state: int, mods: int = 0) -> None:
        self._handle_button(ButtonEvent(self.old_pos, button, state, mods))

    def _handle_button(self, event: ButtonEvent) -> None:
        which = Callback.BTN_UP if event.state == MouseState.UP else Callback.BTN_DOWN
        target = self.which_child(*event.location)
        if target is not None:
            target.call_callbacks(which, event)
        # Our own list holds the hide callback.
        self.call_callbacks(which, event)