"""A manager that lays its children out on a grid."""

from __future__ import annotations

from enum import IntEnum
from typing import Iterator, Optional

from .composite import Composite
from .manager import Manager

Point = tuple[int, int]


class Order(IntEnum):
    """Whether the grid is filled a row or a column at a time."""

    ROW = 0
    COLUMN = 1


class RowColumn(Manager):
    """Places children in equal cells, as large as the largest child.

    The grid size is (columns, rows); a zero in either means "as many as
    needed".
    """

    def __init__(self, parent: Optional[Composite] = None) -> None:
        self._grid: Point = (1, 0)
        self._order = Order.ROW
        super().__init__(parent)

    @property
    def grid_size(self) -> Point:
        return self._grid

    @grid_size.setter
    def grid_size(self, value: Point) -> None:
        columns, rows = value
        self._grid = (int(columns), int(rows))

    @property
    def columns(self) -> int:
        return self._grid[0]

    @columns.setter
    def columns(self, value: int) -> None:
        self._grid = (int(value), self._grid[1])

    @property
    def rows(self) -> int:
        return self._grid[1]

    @rows.setter
    def rows(self, value: int) -> None:
        self._grid = (self._grid[0], int(value))

    @property
    def order(self) -> Order:
        return self._order

    @order.setter
    def order(self, value: int) -> None:
        self._order = Order(value)

    def calculate_cell_size(self) -> Point:
        """The largest width and height among the children."""
        width = height = 0
        for child in self._children:
            width = max(width, child.width)
            height = max(height, child.height)
        return (width, height)

    def calculate_grid_size(self) -> Point:
        """The grid actually used, enlarged to hold every child."""
        count = len(self._children)
        columns, rows = self._grid
        if (columns == 0 and rows == 0) or (
            columns != 0 and rows != 0 and columns * rows >= count
        ):
            return (columns, rows)
        if columns == 0:
            columns = -(-count // rows)
        else:
            rows = -(-count // columns)
        return (columns, rows)

    def _cell_origins(self, grid: Point, cell: Point) -> Iterator[Point]:
        columns, rows = grid
        spacing_x, spacing_y = self._child_spacing
        start_x = self._margin[1] + self._border[1] + spacing_x
        start_y = self._margin[0] + self._border[0] + spacing_y
        step_x = cell[0] + spacing_x
        step_y = cell[1] + spacing_y
        if self._order == Order.ROW:
            for row in range(rows):
                for column in range(columns):
                    yield (start_x + step_x * column, start_y + step_y * row)
        else:
            for column in range(columns):
                for row in range(rows):
                    yield (start_x + step_x * column, start_y + step_y * row)

    def set_desired_size(self) -> None:
        """Size the grid around the children and move each into its cell."""
        Composite.set_desired_size(self)
        cell = self.calculate_cell_size()
        grid = self.calculate_grid_size()
        spacing_x, spacing_y = self._child_spacing
        width = (cell[0] + spacing_x) * grid[0] + spacing_x + self._horizontal_frame()
        height = (cell[1] + spacing_y) * grid[1] + spacing_y + self._vertical_frame()
        self._set_dim(width, height)

        for child, origin in zip(list(self._children), self._cell_origins(grid, cell)):
            child.position = origin
        self._regenerate_search_tree()
        self.dirty = False