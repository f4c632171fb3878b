"""A cannon that fires a ball along a single Bezier arc."""

from __future__ import annotations

from dados.curve import bezier_points
from dados.obj import ObjModel
from dados.ply import PlyModel
from dados.transform import rotate_z, scale, translate
from dados.vertex import Vertex

Buffers = tuple[list[float], list[float]]


class Cannon:
    """A cannon made of a body, a wheel and a ball of ammunition."""

    def __init__(
        self,
        pos_x: float,
        pos_y: float,
        pos_z: float,
        body_path: str,
        wheel_path: str,
        ammo_path: str,
    ) -> None:
        self.position = Vertex(pos_x, pos_y, pos_z)
        self.angle = 45.0

        self.body = ObjModel(body_path)
        self.body.set_colors(1.0, 0.0, 0.0)
        self._place_body()

        self.wheel = PlyModel(wheel_path)
        self.wheel.set_colors(0.0, 1.0, 0.0)
        self.wheel.set_transform(translate(pos_x, pos_y - 0.1, pos_z) @ scale(0.1, 0.1, 0.1))

        self.ammo = PlyModel(ammo_path)
        self.ammo.set_colors(1.0, 0.0, 1.0)
        launch = self.launch_point
        self.ammo.set_transform(
            translate(launch.x, launch.y, launch.z) @ scale(0.08, 0.08, 0.08)
        )

        self.inclination = 45.0
        self.shot_force = 0.5
        self.shot_curve: list[Vertex] = []
        self.shooted = False
        self.curve_index = 0

    @property
    def launch_point(self) -> Vertex:
        """Where the ball rests before it is fired."""
        return Vertex(self.position.x, self.position.y + 0.15, self.position.z - 0.1)

    def _place_body(self) -> None:
        p = self.position
        self.body.set_transform(
            translate(p.x, p.y, p.z) @ rotate_z(self.angle) @ scale(0.3, 0.15, 0.15)
        )

    def shot(self) -> None:
        """Fire the ball: compute its arc from the launch point to the ground."""
        self.shooted = True
        p1 = self.launch_point
        force = self.shot_force
        p2 = Vertex(p1.x + force, p1.y + 0.7, p1.z)
        p3 = Vertex(p2.x + force, p2.y, p2.z)
        p4 = Vertex(p2.x + force * 2, 0.0, p2.z)
        self.shot_curve = bezier_points(p1, p2, p3, p4, 0.01)

    def draw(self) -> list[Buffers]:
        """Advance the ball one frame and return buffers for body, wheel and ammo."""
        if self.shooted and self.shot_curve:
            p = self.shot_curve[min(self.curve_index, len(self.shot_curve) - 1)]
            if self.curve_index < len(self.shot_curve):
                self.curve_index += 1
            self.ammo.set_transform(translate(p.x, p.y, p.z) @ scale(0.08, 0.08, 0.08))
        return [
            (part.vertex_buffer_data(), part.vertex_color_data())
            for part in (self.body, self.wheel, self.ammo)
        ]

    def set_angle(self, angle: float) -> None:
        """Turn the barrel by ``angle`` degrees, keeping it within 0..90."""
        self.angle = min(90.0, max(0.0, self.angle + angle))
        self._place_body()