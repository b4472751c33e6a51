"""Managers: composites that size themselves to fit their children."""

from __future__ import annotations

from enum import IntFlag
from typing import Optional

from .composite import Callback, Composite, ResizeEvent, Widget

Point = tuple[int, int]
Edges = tuple[int, int, int, int]


class Resize(IntFlag):
    """How a manager may change its own size to fit its children."""

    NONE = 0
    SHRINK = 1
    GROW = 2
    ALL = 3


def _edges(value: Edges) -> Edges:
    top, left, right, bottom = value
    return (int(top), int(left), int(right), int(bottom))


class Manager(Composite):
    """A composite with margins, borders and spacing that fits its children.

    Margins and borders are given as (top, left, right, bottom).
    """

    def __init__(self, parent: Optional[Composite] = None) -> None:
        self._resize_mode = Resize.ALL
        self._child_spacing: Point = (0, 0)
        self.margin: Edges = (0, 0, 0, 0)
        self.border: Edges = (0, 0, 0, 0)
        super().__init__(parent)

    @property
    def margin(self) -> Edges:
        return self._margin

    @margin.setter
    def margin(self, value: Edges) -> None:
        self._margin = _edges(value)

    @property
    def border(self) -> Edges:
        return self._border

    @border.setter
    def border(self, value: Edges) -> None:
        self._border = _edges(value)

    @property
    def child_spacing(self) -> Point:
        """Gap left between children and around them: (x, y)."""
        return self._child_spacing

    @child_spacing.setter
    def child_spacing(self, value: Point) -> None:
        x, y = value
        self._child_spacing = (int(x), int(y))
        self._regenerate_search_tree()

    @property
    def resize_mode(self) -> Resize:
        return self._resize_mode

    @resize_mode.setter
    def resize_mode(self, value: int) -> None:
        self._resize_mode = Resize(value)
        self.set_desired_size()

    def resize(self, width: int, height: int) -> None:
        super().resize(width, height)

    def pixel_size(self) -> tuple[float, float, float]:
        """Pixel size of the parent, in which this manager is drawn."""
        if self.parent is None:
            raise RuntimeError("a manager without a parent has no pixel size")
        return self.parent.pixel_size()

    def calculate_max_point(self) -> Point:
        """The furthest right and bottom edges reached by any child."""
        max_x = max_y = 0
        for child in self._children:
            x, y, width, height = child.bounds()
            max_x = max(max_x, x + width)
            max_y = max(max_y, y + height)
        return (max_x, max_y)

    def _horizontal_frame(self) -> int:
        return self._margin[1] + self._margin[2] + self._border[1] + self._border[2]

    def _vertical_frame(self) -> int:
        return self._margin[0] + self._margin[3] + self._border[0] + self._border[3]

    def _set_dim(self, width: int, height: int) -> None:
        """Change our own size without notifying children, and report it."""
        old = self.size
        Widget.resize(self, width, height)
        if self.size != old:
            self.call_callbacks(Callback.RESIZE, ResizeEvent(self.size))

    def set_desired_size(self) -> None:
        """Drop removed children and grow or shrink around the rest."""
        Composite.set_desired_size(self)
        mode = self._resize_mode
        if mode == Resize.NONE:
            return

        max_x, max_y = self.calculate_max_point()
        max_x += self._horizontal_frame() + self._child_spacing[0]
        max_y += self._vertical_frame() + self._child_spacing[1]

        width, height = self.size
        if mode & Resize.SHRINK:
            width = min(width, max_x)
            height = min(height, max_y)
        if mode & Resize.GROW:
            width = max(width, max_x)
            height = max(height, max_y)
        self._set_dim(width, height)
        self.dirty = False
        self._regenerate_search_tree()