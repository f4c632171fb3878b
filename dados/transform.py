"""4x4 homogeneous transformation matrices."""

from __future__ import annotations

import math

import numpy as np

# The approximation of pi used for degree-to-radian conversion.
PI = 3.14159


def _radians(theta: float) -> float:
    return theta * PI / 180.0


def translate(dx: float, dy: float, dz: float) -> np.ndarray:
    """Return a translation matrix."""
    return np.array(
        [
            [1.0, 0.0, 0.0, dx],
            [0.0, 1.0, 0.0, dy],
            [0.0, 0.0, 1.0, dz],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def scale(sx: float, sy: float, sz: float) -> np.ndarray:
    """Return a scaling matrix."""
    return np.array(
        [
            [sx, 0.0, 0.0, 0.0],
            [0.0, sy, 0.0, 0.0],
            [0.0, 0.0, sz, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def rotate_x(theta: float) -> np.ndarray:
    """Return a rotation matrix about the x axis; ``theta`` is in degrees."""
    a = _radians(theta)
    c, s = math.cos(a), math.sin(a)
    return np.array(
        [
            [1.0, 0.0, 0.0, 0.0],
            [0.0, c, -s, 0.0],
            [0.0, s, c, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def rotate_y(theta: float) -> np.ndarray:
    """Return a rotation matrix about the y axis; ``theta`` is in degrees."""
    a = _radians(theta)
    c, s = math.cos(a), math.sin(a)
    return np.array(
        [
            [c, 0.0, s, 0.0],
            [0.0, 1.0, 0.0, 0.0],
            [-s, 0.0, c, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def rotate_z(theta: float) -> np.ndarray:
    """Return a rotation matrix about the z axis; ``theta`` is in degrees."""
    a = _radians(theta)
    c, s = math.cos(a), math.sin(a)
    return np.array(
        [
            [c, -s, 0.0, 0.0],
            [s, c, 0.0, 0.0],
            [0.0, 0.0, 1.0, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )