import math

import pytest

from geodesic_mesh.polyhedra import (
    add_segment_points,
    build_polyhedron,
    check_edges_vertices,
    triangulation_vertices,
)


def _dist(a, b):
    return math.sqrt(sum((x - y) ** 2 for x, y in zip(a, b)))


@pytest.mark.parametrize("q", [3, 4, 5])
def test_vertices_on_unit_sphere(q):
    mesh = build_polyhedron(q)
    for vertex in mesh.cell0d_coordinates:
        assert math.isclose(math.sqrt(sum(c * c for c in vertex)), 1.0)


@pytest.mark.parametrize("q", [3, 4, 5])
def test_euler_characteristic(q):
    mesh = build_polyhedron(q)
    assert mesh.num_cell0ds - mesh.num_cell1ds + mesh.num_cell2ds == 2
    assert len(mesh.cell0d_coordinates) == mesh.num_cell0ds
    assert len(mesh.cell1d_extrema) == mesh.num_cell1ds
    assert len(mesh.cell2d_vertices) == mesh.num_cell2ds


@pytest.mark.parametrize("q", [3, 4, 5])
def test_all_edges_have_same_length(q):
    mesh = build_polyhedron(q)
    lengths = [_dist(mesh.vertex(a), mesh.vertex(b)) for a, b in mesh.cell1d_extrema]
    assert all(math.isclose(length, lengths[0]) for length in lengths)


@pytest.mark.parametrize("q", [3, 4, 5])
def test_each_vertex_meets_q_faces(q):
    mesh = build_polyhedron(q)
    for vertex_id in mesh.cell0d_ids:
        assert sum(vertex_id in face for face in mesh.cell2d_vertices) == q


@pytest.mark.parametrize("q", [3, 4, 5])
def test_built_meshes_pass_check(q):
    assert check_edges_vertices(build_polyhedron(q)) is True


@pytest.mark.parametrize("q", [3, 4, 5])
def test_cell3d_lists_everything(q):
    mesh = build_polyhedron(q)
    assert mesh.cell3d_vertices == mesh.cell0d_ids
    assert mesh.cell3d_edges == mesh.cell1d_ids
    assert mesh.cell3d_faces == mesh.cell2d_ids
    assert mesh.cell3d_num_faces == mesh.num_cell2ds


def test_tetrahedron_first_face():
    mesh = build_polyhedron(3)
    assert mesh.cell2d_vertices[0] == [0, 1, 2]
    assert mesh.cell2d_edges[0] == [0, 3, 1]
    assert mesh.cell3d_id == 0


@pytest.mark.parametrize("q", [0, 2, 6, -1])
def test_invalid_q(q):
    with pytest.raises(ValueError):
        build_polyhedron(q)


def test_check_detects_wrong_edge_order():
    mesh = build_polyhedron(3)
    mesh.cell2d_edges[0] = [0, 1, 3]
    assert check_edges_vertices(mesh) is False


def test_check_detects_wrong_vertex():
    mesh = build_polyhedron(3)
    mesh.cell2d_vertices[0] = [2, 1, 0]
    assert check_edges_vertices(mesh) is False


def test_add_segment_points_divides_evenly():
    verts = []
    added = add_segment_points(verts, (0.0, 0.0, 0.0), (4.0, 8.0, 12.0), 4)
    assert added == 3
    assert verts == [(1.0, 2.0, 3.0), (2.0, 4.0, 6.0), (3.0, 6.0, 9.0)]


def test_add_segment_points_skips_existing():
    verts = []
    add_segment_points(verts, (0.0, 0.0, 0.0), (4.0, 8.0, 12.0), 4)
    before = list(verts)
    assert add_segment_points(verts, (0.0, 0.0, 0.0), (4.0, 8.0, 12.0), 4) == 0
    assert verts == before


def test_add_segment_points_single_division_adds_nothing():
    verts = []
    assert add_segment_points(verts, (0.0, 0.0, 0.0), (1.0, 1.0, 1.0), 1) == 0
    assert verts == []


def test_triangulation_b1_gives_second_face_vertices():
    mesh = build_polyhedron(3)
    assert triangulation_vertices(mesh, 1) == [mesh.vertex(1), mesh.vertex(2)]


def test_triangulation_tetrahedron_b2_points():
    mesh = build_polyhedron(3)
    verts = triangulation_vertices(mesh, 2)
    assert len(verts) == len(set(verts))
    midpoints = [
        tuple((a + b) / 2 for a, b in zip(mesh.vertex(i), mesh.vertex(j)))
        for i, j in mesh.cell1d_extrema
    ]
    originals = [mesh.vertex(i) for i in mesh.cell0d_ids]
    for point in verts:
        assert any(_dist(point, other) < 1e-12 for other in midpoints + originals)
    assert verts[0] == pytest.approx(midpoints[0])


@pytest.mark.parametrize("q", [3, 4, 5])
@pytest.mark.parametrize("b", [2, 3])
def test_triangulation_points_are_distinct_and_inside(q, b):
    verts = triangulation_vertices(build_polyhedron(q), b)
    assert len(verts) == len(set(verts))
    for point in verts:
        assert math.sqrt(sum(c * c for c in point)) <= 1.0 + 1e-12