"""A fixed-depth quadtree for finding the widget under a point.

Quadrants are numbered::

    +---+---+
    | 0 | 1 |
    +---+---+
    | 2 | 3 |
    +---+---+
"""

from __future__ import annotations

from typing import Optional, Protocol, Sequence


class Bounded(Protocol):
    """Anything that can report its absolute box as (x, y, width, height)."""

    def bounds(self) -> tuple[int, int, int, int]: ...


Point = Sequence[int]


class QuadTree:
    """A region split recursively into four quadrants down to ``max_depth``."""

    def __init__(
        self,
        corner1: Point,
        corner2: Point,
        max_depth: int,
        depth: int = 0,
        parent: Optional["QuadTree"] = None,
    ) -> None:
        x1, y1 = corner1
        x2, y2 = corner2
        self.minimum = (min(x1, x2), min(y1, y2))
        self.maximum = (max(x1, x2), max(y1, y2))
        self.center = (
            self.minimum[0] + (self.maximum[0] - self.minimum[0]) // 2,
            self.minimum[1] + (self.maximum[1] - self.minimum[1]) // 2,
        )
        self.parent = parent
        self._contents: list[Bounded] = []

        self.quadrants: tuple[Optional[QuadTree], ...]
        if depth < max_depth:
            child_depth = depth + 1
            (min_x, min_y), (max_x, max_y) = self.minimum, self.maximum
            self.quadrants = tuple(
                QuadTree(self.center, corner, max_depth, child_depth, self)
                for corner in (
                    (min_x, min_y),
                    (max_x, min_y),
                    (min_x, max_y),
                    (max_x, max_y),
                )
            )
        else:
            self.quadrants = (None, None, None, None)

    @property
    def contents(self) -> tuple[Bounded, ...]:
        """Items held at this node, most recently inserted first."""
        return tuple(self._contents)

    def _quad_index(self, x: int, y: int) -> int:
        center_x, center_y = self.center
        index = 0
        if x >= center_x:
            index += 1
        if y >= center_y:
            index += 2
        return index

    def _classify(self, item: Bounded) -> int:
        x, y, width, height = item.bounds()
        right, bottom = x + width, y + height
        mask = 0
        for px, py in ((x, y), (x, bottom), (right, y), (right, bottom)):
            mask |= 1 << self._quad_index(px, py)
        return mask

    def _children_for(self, mask: int):
        for index, quadrant in enumerate(self.quadrants):
            if mask & (1 << index) and quadrant is not None:
                yield quadrant

    def insert(self, item: Bounded) -> None:
        """Add an item to this node and every quadrant its corners touch."""
        mask = self._classify(item)
        if mask == 0:
            return
        self._contents.insert(0, item)
        for quadrant in self._children_for(mask):
            quadrant.insert(item)

    def remove(self, item: Bounded) -> None:
        """Remove an item, following the quadrants its current box touches."""
        mask = self._classify(item)
        self._contents = [held for held in self._contents if held is not item]
        for quadrant in self._children_for(mask):
            quadrant.remove(item)

    def clear(self) -> None:
        """Drop every item from the whole tree."""
        self._contents.clear()
        for quadrant in self.quadrants:
            if quadrant is not None:
                quadrant.clear()

    def search(self, point: Point) -> Optional[Bounded]:
        """Return the item whose box holds the point, or None."""
        if not self._contents:
            return None
        px, py = point
        quadrant = self.quadrants[self._quad_index(px, py)]
        if quadrant is not None:
            return quadrant.search(point)
        for item in self._contents:
            x, y, width, height = item.bounds()
            if x <= px < x + width and y <= py < y + height:
                return item
        return None