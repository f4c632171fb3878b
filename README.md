# dados

A small geometry toolkit for animating dice thrown across a scene. It
computes trajectories and transformed mesh buffers, frame by frame.

## Contents

- `dados.vertex.Vertex`: a 3D point with `+`, `-`, scalar `*`, iteration
  over `(x, y, z)` and a homogeneous form `h()` that returns `[x, y, z, 1]`.
- `dados.transform`: 4×4 homogeneous matrices as numpy arrays:
  `translate`, `scale`, `rotate_x`, `rotate_y` and `rotate_z`. Angles are
  in degrees.
- `dados.curve.bezier_points(p1, p2, p3, p4, dt)`: samples a cubic Bezier
  curve. The parameter steps by `dt` and the sampling carries on while it
  does not exceed `1 + dt`. A `dt` that is not positive raises
  `ValueError`.
- `dados.line.Line(p1, p2, dt)`: samples a straight segment in the same
  way. `point_at(t)` interpolates between the first and the last sample.
  `magnitude()` returns the distance between the first two samples.
- `dados.face.Face(indices)`: a polygon given by vertex indices, with
  `perimeter(vertices)`, `num_sides()` and `normal(vertices)`. `normal`
  returns a unit normal, or `None` when the face has fewer than three
  vertices.
- `dados.model.Model`: vertices, faces, a base colour (`set_colors`) and a
  4×4 transform (`set_transform`). `vertex_buffer_data()` returns the
  transformed x, y, z of every face corner. `vertex_color_data()` returns
  an r, g, b triple per corner, with a shade per face. `info()` prints the
  name and the counts, and also returns them.
  `dados.model.split_tokens` splits a string and drops empty tokens.
- `dados.obj.ObjModel` and `dados.ply.PlyModel`: models loaded from
  Wavefront OBJ and ASCII PLY files.
- Scene objects:
  - `dados.dice.Dice`: `shot()` builds a chain of bouncing Bezier arcs.
    Each `draw()` moves the die one step along that chain and tumbles it.
    It takes an optional `random.Random` for the spin.
  - `dados.cannon.Cannon`: `shot()` fires a ball along one arc.
    `set_angle()` turns the barrel, kept within 0 to 90 degrees.
  - `dados.label.Label`: a static sign.

  Each `draw()` returns a list of `(vertex_buffer, color_buffer)` pairs.

## Installation

```
pip install .
```

## Example

```python
import random

from dados.curve import bezier_points
from dados.dice import Dice
from dados.transform import rotate_z, translate
from dados.vertex import Vertex

points = bezier_points(Vertex(0, 0, 0), Vertex(1, 1, 0), Vertex(2, 1, 0), Vertex(3, 0, 0), 0.1)
print(points[0], points[-1])

matrix = translate(1, 2, 3) @ rotate_z(90)

die = Dice(-0.9, 0.1, 0, 89, "models/dado1.ply", rng=random.Random(1))
die.shot()
for _ in range(10):
    buffers = die.draw()
```

The die's model is read from the PLY file path you pass in, so that file must exist.

## What it does not do

There is no window, no renderer and no keyboard handling, and no command to run. `draw()` only returns flat float buffers. Putting those on screen is left to whatever graphics library you use.

## Running the tests

```
pip install .[test]
pytest
```