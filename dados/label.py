"""A static sign model standing upright in the scene."""

from __future__ import annotations

from dados.obj import ObjModel
from dados.transform import rotate_x, translate
from dados.vertex import Vertex

Buffers = tuple[list[float], list[float]]


class Label:
    """A sign loaded from an OBJ file, turned 90 degrees about the x axis."""

    def __init__(self, pos_x: float, pos_y: float, pos_z: float, path: str) -> None:
        self.position = Vertex(pos_x, pos_y, pos_z)
        self.model = ObjModel(path)
        self.model.set_colors(1.0, 0.0, 1.0)
        self.model.set_transform(translate(pos_x, pos_y, pos_z) @ rotate_x(90))
        self.inclination = 45.0

    def draw(self) -> list[Buffers]:
        """Return the sign's vertex and colour buffers."""
        return [(self.model.vertex_buffer_data(), self.model.vertex_color_data())]