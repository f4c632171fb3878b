import pytest

from dados.line import Line
from dados.vertex import Vertex

A = Vertex(1.0, 2.0, 3.0)
B = Vertex(5.0, -2.0, 7.0)


def test_first_point_is_start():
    line = Line(A, B, 0.25)
    assert list(line.points[0]) == pytest.approx([1.0, 2.0, 3.0], abs=1e-6)


def test_exact_step_reaches_end_and_overshoots():
    line = Line(A, B, 0.25)
    assert len(line) == 6
    assert list(line.points[4]) == pytest.approx([5.0, -2.0, 7.0], abs=1e-6)


def test_midpoint_sample():
    line = Line(A, B, 0.25)
    assert list(line.points[2]) == pytest.approx([3.0, 0.0, 5.0], abs=1e-6)


def test_points_are_evenly_spaced():
    line = Line(A, B, 0.1)
    steps = [b - a for a, b in zip(line.points, line.points[1:])]
    assert steps
    for s in steps:
        assert list(s) == pytest.approx([0.4, -0.4, 0.4], abs=1e-5)


def test_point_at_ends():
    line = Line(A, B, 0.25)
    assert list(line.point_at(0.0)) == pytest.approx([1.0, 2.0, 3.0], abs=1e-6)
    assert list(line.point_at(1.0)) == pytest.approx(list(line.points[-1]), abs=1e-6)
    assert list(line.point_at(1.0)) == pytest.approx([6.0, -3.0, 8.0], abs=1e-5)


def test_magnitude_is_first_step_length():
    line = Line(Vertex(0, 0, 0), Vertex(3, 4, 0), 0.5)
    assert line.magnitude() == pytest.approx(2.5)


def test_iteration_matches_points():
    line = Line(A, B, 0.5)
    assert list(line) == line.points


def test_str_has_one_line_per_point():
    line = Line(A, B, 0.5)
    lines = str(line).splitlines()
    assert len(lines) == len(line)
    assert lines[0] == str(line.points[0])


def test_non_positive_step_rejected():
    with pytest.raises(ValueError):
        Line(A, B, 0)