"""Polygonal faces that refer to vertices by index."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence

from dados.vertex import Vertex


@dataclass(frozen=True)
class Face:
    """A polygon given by indices into a list of vertices."""

    indices: tuple[int, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "indices", tuple(int(i) for i in self.indices))

    def perimeter(self, vertices: Sequence[Vertex]) -> float:
        """Return the total length of the closed polygon's edges."""
        corners = [vertices[i] for i in self.indices]
        closing = corners[1:] + corners[:1]
        return sum(math.dist(tuple(a), tuple(b)) for a, b in zip(corners, closing))

    def num_sides(self) -> int:
        """Return the number of vertices (and edges) of the face."""
        return len(self.indices)

    def normal(self, vertices: Sequence[Vertex]) -> tuple[float, float, float] | None:
        """Return the unit normal from the first three vertices.

        Returns None for faces with fewer than three vertices; a degenerate
        face yields the zero vector.
        """
        if len(self.indices) < 3:
            return None
        v1, v2, v3 = (vertices[i] for i in self.indices[:3])
        u = v2 - v1
        v = v3 - v1
        nx = u.y * v.z - u.z * v.y
        ny = u.z * v.x - u.x * v.z
        nz = u.x * v.y - u.y * v.x
        length = math.sqrt(nx * nx + ny * ny + nz * nz)
        if length > 0.0:
            nx, ny, nz = nx / length, ny / length, nz / length
        return (nx, ny, nz)