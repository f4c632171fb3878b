import math

import numpy as np
import pytest

from dados.face import Face
from dados.model import Model, split_tokens
from dados.transform import scale, translate
from dados.vertex import Vertex


def _triangle_model():
    model = Model()
    model.vertices = [Vertex(0, 0, 0), Vertex(1, 0, 0), Vertex(0, 1, 0)]
    model.faces = [Face((0, 1, 2))]
    return model


def test_split_drops_empty_tokens():
    assert split_tokens("a b  c ", " ") == ["a", "b", "c"]


def test_split_other_delimiter():
    assert split_tokens("3/4/5", "/") == ["3", "4", "5"]
    assert split_tokens("3//5", "/") == ["3", "5"]


def test_split_empty_text():
    assert split_tokens("", " ") == []


def test_split_empty_delimiter_rejected():
    with pytest.raises(ValueError):
        split_tokens("abc", "")


def test_default_transform_is_identity():
    assert np.array_equal(Model().transform, np.identity(4))


def test_buffer_with_identity_transform():
    model = _triangle_model()
    assert model.vertex_buffer_data() == [0, 0, 0, 1, 0, 0, 0, 1, 0]


def test_buffer_follows_face_order():
    model = _triangle_model()
    model.faces = [Face((2, 0))]
    assert model.vertex_buffer_data() == [0, 1, 0, 0, 0, 0]


def test_buffer_applies_translation():
    model = _triangle_model()
    model.set_transform(translate(1, 2, 3))
    data = model.vertex_buffer_data()
    assert data[:3] == [1, 2, 3]
    assert data[3:6] == [2, 2, 3]


def test_buffer_divides_by_w():
    model = _triangle_model()
    m = np.identity(4)
    m[3, 3] = 2.0
    model.set_transform(m)
    data = model.vertex_buffer_data()
    assert data[3:6] == [0.5, 0.0, 0.0]


def test_buffer_scale_matches_vertex_scaling():
    model = _triangle_model()
    model.set_transform(scale(3, 3, 3))
    expected = []
    for v in model.vertices:
        expected.extend(v * 3)
    assert model.vertex_buffer_data() == pytest.approx(expected)


def test_buffer_missing_vertex_raises():
    model = _triangle_model()
    model.faces = [Face((0, 5, 1))]
    with pytest.raises(IndexError):
        model.vertex_buffer_data()


def test_set_transform_rejects_wrong_shape():
    with pytest.raises(ValueError):
        Model().set_transform(np.identity(3))


def test_color_data_first_face_uses_base_color():
    model = _triangle_model()
    model.set_colors(10, 20, 30)
    colors = model.vertex_color_data()
    assert len(colors) == 9
    assert colors[:3] == pytest.approx([10 / 255, 20 / 255, 30 / 255])
    assert colors[3:6] == colors[:3]


def test_color_data_faces_differ_and_stay_in_range():
    model = _triangle_model()
    model.faces = [Face((0, 1, 2))] * 40
    model.set_colors(1.0, 0.0, 1.0)
    colors = model.vertex_color_data()
    assert len(colors) == 40 * 9
    assert all(0.0 <= c < 1.0 for c in colors)
    assert colors[:3] != colors[9:12]


def test_color_data_green_offset():
    model = _triangle_model()
    model.faces = [Face((0, 1, 2)), Face((0, 1, 2))]
    colors = model.vertex_color_data()
    assert math.isclose(colors[10], 3 / 255)


def test_info_reports_counts(capsys):
    model = _triangle_model()
    model.name = "tri"
    text = model.info()
    out = capsys.readouterr().out
    assert "Nombre del objeto: tri" in out
    assert "Número de vértices: 3" in text
    assert "Número de caras: 1" in text