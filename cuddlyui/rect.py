"""A sized rectangle, the base of every widget."""

from __future__ import annotations


class Rect:
    """Something with a width and a height.

    All size changes go through :meth:`resize`, so subclasses need only
    override that one method to react to them.
    """

    def __init__(self, width: int = 0, height: int = 0) -> None:
        self._width = int(width)
        self._height = int(height)

    @property
    def width(self) -> int:
        return self._width

    @width.setter
    def width(self, value: int) -> None:
        self.resize(value, self._height)

    @property
    def height(self) -> int:
        return self._height

    @height.setter
    def height(self, value: int) -> None:
        self.resize(self._width, value)

    @property
    def size(self) -> tuple[int, int]:
        return (self._width, self._height)

    @size.setter
    def size(self, value: tuple[int, int]) -> None:
        width, height = value
        self.resize(width, height)

    def resize(self, width: int, height: int) -> None:
        """Set both dimensions."""
        self._width = int(width)
        self._height = int(height)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(width={self._width}, height={self._height})"