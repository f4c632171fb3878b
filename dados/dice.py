"""A die that is thrown along a bouncing trajectory while it tumbles."""

from __future__ import annotations

import math
import random

from dados.curve import bezier_points
from dados.ply import PlyModel
from dados.transform import rotate_x, rotate_y, rotate_z, scale, translate
from dados.vertex import Vertex

_ENERGY_LOSS = 0.5
_GROUND_LEVEL = -0.5
_MIN_FORCE = 0.1
_SEGMENT_STEP = 0.05
_SIZE = 0.08

Buffers = tuple[list[float], list[float]]


class Dice:
    """A die model that follows a chain of bouncing Bezier arcs when shot."""

    def __init__(
        self,
        pos_x: float,
        pos_y: float,
        pos_z: float,
        initial_inclination: float,
        fname: str,
        rng: random.Random | None = None,
    ) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.position = Vertex(pos_x, pos_y, pos_z)
        self.model = PlyModel(fname)
        self.model.set_colors(1.0, 0.0, 1.0)
        launch = self.launch_point
        self.model.set_transform(
            translate(launch.x, launch.y, launch.z) @ scale(_SIZE, _SIZE, _SIZE)
        )
        self.inclination = float(initial_inclination)
        self.shot_force = 0.9
        self.shot_rotation = min(45.0, self.inclination)
        self.shot_curve: list[Vertex] = []
        self.shooted = False
        self.curve_index = 0
        self.rotation_angle = 45.0
        self.rotation_speed = 6.0
        self.time = 0.0
        self.spin: tuple[int, int, int] = tuple(self.rng.randint(10, 45) for _ in range(3))

    @property
    def launch_point(self) -> Vertex:
        """The point the die starts from and is thrown from."""
        return Vertex(self.position.x, self.position.y + 0.15, self.position.z - 0.1)

    def shot(self) -> None:
        """Throw the die: pick spin directions and append the bouncing trajectory."""
        self.spin = tuple(-1 if self.rng.randint(0, 1) == 0 else 1 for _ in range(3))
        self.shooted = True

        last = self.launch_point
        force = self.shot_force
        inclination = math.radians(self.inclination)
        while force > _MIN_FORCE:
            dx = force * math.cos(inclination)
            dy = force * math.sin(inclination)
            p1 = Vertex(last.x + dx, last.y + dy * 0.5, last.z)
            p2 = Vertex(p1.x + dx, p1.y, p1.z)
            p3 = Vertex(p2.x + dx, _GROUND_LEVEL, p2.z)
            self.shot_curve.extend(bezier_points(last, p1, p2, p3, _SEGMENT_STEP))
            last = p3
            force *= _ENERGY_LOSS

        self.shot_force = force

    def _place(self, p: Vertex) -> None:
        a = self.rotation_angle
        r1, r2, r3 = self.spin
        rotation = rotate_x(a * r1) @ rotate_y(a * r2) @ rotate_z(a * r3)
        self.model.set_transform(
            translate(p.x, p.y, p.z) @ rotation @ scale(_SIZE, _SIZE, _SIZE)
        )

    def draw(self) -> list[Buffers]:
        """Advance the animation one frame and return the die's vertex and colour buffers."""
        if self.shooted:
            if self.curve_index < len(self.shot_curve):
                p = self.shot_curve[self.curve_index]
                self.curve_index += 1
                self.time += 0.1
                force_factor = max(0.1, self.shot_force * self.shot_rotation)
                self.rotation_speed = 50.0 * abs(math.sin(self.time)) * force_factor
                self.rotation_angle += self.rotation_speed
                self._place(p)
            else:
                self._place(self.shot_curve[-1])
        return [(self.model.vertex_buffer_data(), self.model.vertex_color_data())]