"""Cubic Bezier curves sampled at a fixed parameter step."""

from __future__ import annotations

from typing import Iterator

import numpy as np

from dados.vertex import Vertex

_BEZIER_BASIS = np.array(
    [
        [-1.0, 3.0, -3.0, 1.0],
        [3.0, -6.0, 3.0, 0.0],
        [-3.0, 3.0, 0.0, 0.0],
        [1.0, 0.0, 0.0, 0.0],
    ]
)


def _parameter_steps(dt: float) -> Iterator[float]:
    """Yield t = 0, dt, 2dt, ... while t <= 1 + dt, accumulated in single precision."""
    if not dt > 0:
        raise ValueError("dt must be positive")
    step = np.float32(dt)
    limit = 1.0 + float(step)
    t = np.float32(0.0)
    while float(t) <= limit:
        yield float(t)
        t = np.float32(t + step)


def bezier_points(p1: Vertex, p2: Vertex, p3: Vertex, p4: Vertex, dt: float) -> list[Vertex]:
    """Sample the cubic Bezier curve with control points ``p1``..``p4``.

    The parameter runs from 0 in steps of ``dt`` for as long as it does not
    exceed ``1 + dt``, so the last sample may lie slightly past ``p4``.
    """
    geometry = np.array([list(p) for p in (p1, p2, p3, p4)])
    coefficients = _BEZIER_BASIS @ geometry
    points = []
    for t in _parameter_steps(dt):
        q = np.array([t**3, t**2, t, 1.0]) @ coefficients
        points.append(Vertex(float(q[0]), float(q[1]), float(q[2])))
    return points