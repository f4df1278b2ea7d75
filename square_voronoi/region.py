"""Growable rectangular regions.

Each region starts as a 1x1 rectangle at its seed point and grows one edge at
a time. An edge that runs into another region or the canvas boundary is
clamped at the point of contact and stops for good.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Sequence


class Edge(Enum):
    """Rectangle sides, in the order they advance during a tick."""

    LEFT = "left"
    RIGHT = "right"
    TOP = "top"
    BOTTOM = "bottom"


class GrowthMode(Enum):
    """How a blocked edge affects the rest of the region."""

    DIRECTIONAL = "directional"  # Only the blocked edge stops
    UNIFORM = "uniform"  # Any blocked edge stops the whole region


@dataclass
class Rect:
    """Integer rectangle covering [x, x + width) x [y, y + height)."""

    x: int
    y: int
    width: int = 1
    height: int = 1

    @property
    def x_max(self) -> int:
        return self.x + self.width

    @property
    def y_max(self) -> int:
        return self.y + self.height

    @property
    def area(self) -> int:
        return self.width * self.height

    def contains(self, px: int, py: int) -> bool:
        """Check whether a pixel coordinate lies inside the rectangle."""
        return self.x <= px < self.x_max and self.y <= py < self.y_max

    def overlaps(self, other: "Rect") -> bool:
        """Check whether two rectangles share at least one pixel."""
        return (
            self.x < other.x_max
            and other.x < self.x_max
            and self.y < other.y_max
            and other.y < self.y_max
        )

    def clipped(self, width: int, height: int) -> tuple[int, int, int, int]:
        """Clip to a canvas.

        Returns:
            (x0, y0, x1, y1) slice bounds, empty when outside the canvas.
        """
        x0 = min(max(self.x, 0), width)
        y0 = min(max(self.y, 0), height)
        x1 = min(max(self.x_max, x0), width)
        y1 = min(max(self.y_max, y0), height)
        return x0, y0, x1, y1

    def as_tuple(self) -> tuple[int, int, int, int]:
        return (self.x, self.y, self.width, self.height)


@dataclass
class Region:
    """A colored rectangle that grows until it is blocked.

    The region owns its rectangle; growth mutates it in place and never
    shrinks it.
    """

    rect: Rect
    color: tuple[int, int, int, int]
    free_edges: set[Edge] = field(default_factory=lambda: set(Edge))

    @property
    def can_grow(self) -> bool:
        return bool(self.free_edges)

    def stop(self) -> None:
        """Block every edge."""
        self.free_edges.clear()

    def grow(
        self,
        step: int,
        others: Sequence["Region"],
        width: int,
        height: int,
        mode: GrowthMode = GrowthMode.DIRECTIONAL,
    ) -> bool:
        """Advance every free edge by ``step`` pixels.

        Args:
            step: Distance each free edge tries to move outward.
            others: All other regions, in diagram order.
            width: Canvas width.
            height: Canvas height.
            mode: Whether a blocked edge stops only itself or the whole region.

        Returns:
            True if the rectangle got larger.
        """
        area_before = self.rect.area
        blocked = False
        for edge in Edge:
            if edge not in self.free_edges:
                continue
            if not self._advance(edge, step, others, width, height):
                blocked = True
                if mode is GrowthMode.DIRECTIONAL:
                    self.free_edges.discard(edge)

        # Uniform growth: every edge moves this tick, then any contact stops all of them
        if blocked and mode is GrowthMode.UNIFORM:
            self.stop()
        return self.rect.area > area_before

    def _advance(
        self,
        edge: Edge,
        step: int,
        others: Sequence["Region"],
        width: int,
        height: int,
    ) -> bool:
        """Move one edge outward, clamped at the first contact.

        Returns:
            True if the edge moved the full step without touching anything.
        """
        rect = self.rect

        if edge is Edge.LEFT:
            target = rect.x - step
            limit = 0
            for other in others:
                o = other.rect
                if o.x < rect.x and o.x_max > target and _spans(o.y, o.y_max, rect.y, rect.y_max):
                    limit = max(limit, o.x_max)
            new_x = min(rect.x, max(target, limit))
            rect.width += rect.x - new_x
            rect.x = new_x
            return new_x == target

        if edge is Edge.RIGHT:
            target = rect.x_max + step
            limit = width
            for other in others:
                o = other.rect
                if o.x_max > rect.x_max and o.x < target and _spans(o.y, o.y_max, rect.y, rect.y_max):
                    limit = min(limit, o.x)
            new_x_max = max(rect.x_max, min(target, limit))
            rect.width = new_x_max - rect.x
            return new_x_max == target

        if edge is Edge.TOP:
            target = rect.y - step
            limit = 0
            for other in others:
                o = other.rect
                if o.y < rect.y and o.y_max > target and _spans(o.x, o.x_max, rect.x, rect.x_max):
                    limit = max(limit, o.y_max)
            new_y = min(rect.y, max(target, limit))
            rect.height += rect.y - new_y
            rect.y = new_y
            return new_y == target

        target = rect.y_max + step
        limit = height
        for other in others:
            o = other.rect
            if o.y_max > rect.y_max and o.y < target and _spans(o.x, o.x_max, rect.x, rect.x_max):
                limit = min(limit, o.y)
        new_y_max = max(rect.y_max, min(target, limit))
        rect.height = new_y_max - rect.y
        return new_y_max == target


def _spans(a0: int, a1: int, b0: int, b1: int) -> bool:
    """Check whether half-open intervals [a0, a1) and [b0, b1) intersect."""
    return a0 < b1 and b0 < a1
