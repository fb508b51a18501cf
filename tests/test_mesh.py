import math

import pytest

from catshooter.geometry import Color, Vec3, matrix_identity
from catshooter.mesh import MeshCylinder, MeshField, strip_indices


def _flat(matrix):
    return [x for row in matrix for x in row]


@pytest.mark.parametrize("dx,dy", [(1, 1), (3, 3), (4, 2), (2, 5)])
def test_strip_index_count_and_range(dx, dy):
    indices = strip_indices(dx, dy)
    assert len(indices) == 2 * (dy * (2 + dx) - 1)
    assert all(0 <= i < (dx + 1) * (dy + 1) for i in indices)


def test_strip_single_quad():
    assert strip_indices(1, 1) == [2, 0, 3, 1]


def test_strip_covers_every_vertex():
    assert set(strip_indices(3, 2)) == set(range(4 * 3))


@pytest.mark.parametrize("dx,dy", [(0, 1), (1, 0), (-1, 2)])
def test_strip_rejects_bad_divisions(dx, dy):
    with pytest.raises(ValueError):
        strip_indices(dx, dy)


def test_field_counts():
    field = MeshField(Vec3(), Vec3(), 0, 3, 3, 1000, 1000)
    assert len(field.vertices) == field.max_vtx == 16
    assert field.poly_num == len(field.indices) - 2
    assert field.width == 1000


def test_field_is_centred_and_flat():
    field = MeshField(Vec3(), Vec3(), 0, 3, 3, 1000, 1000)
    xs = [v.pos.x for v in field.vertices]
    zs = [v.pos.z for v in field.vertices]
    assert min(xs) == -max(xs)
    assert min(zs) == -max(zs)
    assert all(v.pos.y == 0.0 for v in field.vertices)
    assert all(v.nor == Vec3(0.0, 1.0, 0.0) for v in field.vertices)


def test_field_texture_coordinates():
    field = MeshField(Vec3(), Vec3(), 0, 2, 2, 10, 10)
    assert field.vertices[0].tex == (0.0, 0.0)
    assert field.vertices[-1].tex == (2.0, 2.0)


def test_field_rejects_bad_divisions():
    with pytest.raises(ValueError):
        MeshField(Vec3(), Vec3(), 0, 0, 3, 10, 10)


def test_field_world_matrix_identity():
    field = MeshField(Vec3(), Vec3(), 0, 1, 1, 10, 10)
    expected = [
        1.0, 0.0, 0.0, 0.0,
        0.0, 1.0, 0.0, 0.0,
        0.0, 0.0, 1.0, 0.0,
        0.0, 0.0, 0.0, 1.0,
    ]
    assert _flat(field.world_matrix()) == pytest.approx(expected)
    assert _flat(matrix_identity()) == pytest.approx(expected)


def test_field_world_matrix_translation():
    field = MeshField(Vec3(4.0, 5.0, 6.0), Vec3(), 0, 1, 1, 10, 10)
    assert field.world_matrix()[3][:3] == (4.0, 5.0, 6.0)


def test_cylinder_shape():
    cyl = MeshCylinder(Vec3(), Vec3(), 8, 2, 50.0, 20.0)
    assert len(cyl.vertices) == cyl.max_vtx == 27
    assert cyl.poly_num == len(cyl.indices) - 2
    for v in cyl.vertices:
        assert math.hypot(v.pos.x, v.pos.z) == pytest.approx(20.0)
        assert v.nor.length() == pytest.approx(1.0)
    assert cyl.vertices[0].pos.y == pytest.approx(50.0)
    assert cyl.vertices[-1].pos.y == pytest.approx(0.0)


def test_cylinder_defaults():
    cyl = MeshCylinder(Vec3(), Vec3(), 4, 1, 10.0, 5.0)
    assert cyl.culling is True
    assert cyl.tex_index == -1


def test_cylinder_set_color():
    cyl = MeshCylinder(Vec3(), Vec3(), 4, 2, 10.0, 5.0)
    red = Color(1.0, 0.0, 0.0, 1.0)
    cyl.set_color(red)
    assert cyl.colors == (red,) * cyl.max_vtx


def test_cylinder_world_matrix_yaw():
    cyl = MeshCylinder(Vec3(1.0, 2.0, 3.0), Vec3(0.0, math.pi / 2, 0.0), 4, 1, 10.0, 5.0)
    world = cyl.world_matrix()
    assert world[3][:3] == (1.0, 2.0, 3.0)
    assert world[1][1] == pytest.approx(1.0)


def test_cylinder_rejects_bad_divisions():
    with pytest.raises(ValueError):
        MeshCylinder(Vec3(), Vec3(), 4, 0, 10.0, 5.0)