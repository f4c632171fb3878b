import numpy as np
import pytest

from dados.vertex import Vertex


def test_add_then_subtract_round_trips():
    a = Vertex(1.5, -2.0, 3.25)
    b = Vertex(0.5, 4.0, -1.0)
    assert (a + b) - b == a


def test_subtract_self_is_origin():
    a = Vertex(7.0, -3.0, 2.0)
    assert a - a == Vertex()


def test_add_is_componentwise():
    a = Vertex(1, 2, 3)
    b = Vertex(10, 20, 30)
    s = a + b
    assert (s.x, s.y, s.z) == (a.x + b.x, a.y + b.y, a.z + b.z)


def test_multiply_by_one_and_zero():
    a = Vertex(2.0, -5.0, 0.5)
    assert a * 1 == a
    assert a * 0 == Vertex(0, 0, 0)


def test_multiply_scales_each_component():
    a = Vertex(2.0, -5.0, 0.5)
    scaled = a * 4
    assert tuple(scaled) == (a.x * 4, a.y * 4, a.z * 4)
    assert 4 * a == scaled


def test_str_format():
    assert str(Vertex(1, 2.5, -3)) == "(1, 2.5, -3)"


def test_homogeneous_coordinates():
    v = Vertex(1.0, 2.0, 3.0)
    h = v.h()
    assert h.shape == (4,)
    assert np.allclose(h[:3], list(v))
    assert h[3] == 1.0


def test_coordinates_are_mutable():
    v = Vertex()
    v.x = 3
    v.z = -1
    assert tuple(v) == (3.0, 0.0, -1.0)


def test_add_rejects_non_vertex():
    with pytest.raises(TypeError):
        Vertex(1, 2, 3) + 5