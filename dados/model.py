"""Polygon models with a transform, and the vertex and colour buffers built from them."""

from __future__ import annotations

import math

import numpy as np

from dados.face import Face
from dados.vertex import Vertex


def split_tokens(text: str, delim: str) -> list[str]:
    """Split ``text`` on ``delim``, dropping empty tokens."""
    if not delim:
        raise ValueError("delimiter must not be empty")
    return [token for token in text.split(delim) if token]


class Model:
    """A set of vertices and faces, with a colour and a 4x4 transform."""

    def __init__(self) -> None:
        self.name: str = ""
        self.r: float = 0.0
        self.g: float = 0.0
        self.b: float = 0.0
        self.transform: np.ndarray = np.identity(4)
        self.vertices: list[Vertex] = []
        self.faces: list[Face] = []

    def info(self) -> str:
        """Print and return the model's name and its vertex and face counts."""
        text = (
            f"Nombre del objeto: {self.name}\n"
            f"Número de vértices: {len(self.vertices)}\n"
            f"Número de caras: {len(self.faces)}"
        )
        print(text)
        return text

    def set_colors(self, r: float, g: float, b: float) -> None:
        """Set the base colour the colour buffer is derived from."""
        self.r, self.g, self.b = float(r), float(g), float(b)

    def set_transform(self, matrix) -> None:
        """Replace the model's transform with a 4x4 matrix."""
        m = np.asarray(matrix, dtype=float)
        if m.shape != (4, 4):
            raise ValueError(f"transform must be 4x4, got shape {m.shape}")
        self.transform = m

    def _vertex(self, index: int) -> Vertex:
        if not 0 <= index < len(self.vertices):
            raise IndexError(f"face refers to missing vertex {index}")
        return self.vertices[index]

    def vertex_buffer_data(self) -> list[float]:
        """Return transformed x, y, z for every face corner, face by face."""
        data: list[float] = []
        for face in self.faces:
            for index in face.indices:
                vp = self.transform @ self._vertex(index).h()
                data.extend((vp[:3] / vp[3]).tolist())
        return data

    def vertex_color_data(self) -> list[float]:
        """Return an r, g, b triple in [0, 1) for every face corner.

        Each face gets its own shade, offset from the base colour.
        """
        data: list[float] = []
        for n, face in enumerate(self.faces):
            offset = 3 * n
            rgb = (
                math.fmod(self.r + offset * 7, 255.0) / 255.0,
                math.fmod(self.g + offset, 255.0) / 255.0,
                math.fmod(self.b + offset * 11, 255.0) / 255.0,
            )
            for _ in face.indices:
                data.extend(rgb)
        return data