"""Straight line segments sampled at a fixed parameter step."""

from __future__ import annotations

import math
from typing import Iterator

from dados.curve import _parameter_steps
from dados.vertex import Vertex


class Line:
    """Points sampled along the segment from ``p1`` towards ``p2``.

    As with curves, the parameter runs while it does not exceed ``1 + dt``,
    so the last point may lie beyond ``p2``.
    """

    def __init__(self, p1: Vertex, p2: Vertex, dt: float) -> None:
        direction = p2 - p1
        self.points: list[Vertex] = [p1 + direction * t for t in _parameter_steps(dt)]

    def __iter__(self) -> Iterator[Vertex]:
        return iter(self.points)

    def __len__(self) -> int:
        return len(self.points)

    def __str__(self) -> str:
        return "\n".join(str(p) for p in self.points)

    def point_at(self, t: float) -> Vertex:
        """Interpolate between the first and the last sampled point."""
        first, last = self.points[0], self.points[-1]
        return first + (last - first) * t

    def magnitude(self) -> float:
        """Return the distance between the first two sampled points."""
        a, b = self.points[0], self.points[1]
        return math.dist(tuple(a), tuple(b))