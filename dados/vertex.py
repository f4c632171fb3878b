"""Points in 3D space with the arithmetic used by curves and models."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

import numpy as np


@dataclass
class Vertex:
    """A mutable point (or vector) in 3D space."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __post_init__(self) -> None:
        self.x = float(self.x)
        self.y = float(self.y)
        self.z = float(self.z)

    def __iter__(self) -> Iterator[float]:
        return iter((self.x, self.y, self.z))

    def __add__(self, other: Vertex) -> Vertex:
        if not isinstance(other, Vertex):
            return NotImplemented
        return Vertex(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vertex) -> Vertex:
        if not isinstance(other, Vertex):
            return NotImplemented
        return Vertex(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, factor: float) -> Vertex:
        if not isinstance(factor, (int, float, np.floating, np.integer)):
            return NotImplemented
        f = float(factor)
        return Vertex(self.x * f, self.y * f, self.z * f)

    __rmul__ = __mul__

    def __str__(self) -> str:
        return f"({self.x:g}, {self.y:g}, {self.z:g})"

    def h(self) -> np.ndarray:
        """Return the point in homogeneous coordinates ``[x, y, z, 1]``."""
        return np.array([self.x, self.y, self.z, 1.0])