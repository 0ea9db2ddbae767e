"""Platonic solids with triangular faces and the vertices of their face triangulation."""

from __future__ import annotations

import math

from geodesic_mesh.mesh import Point3, PolygonalMesh


def _tetrahedron() -> tuple[list[Point3], list[tuple[int, int]], list[list[int]], list[list[int]]]:
    s = 1.0 / math.sqrt(3)
    coordinates = [(s, s, s), (-s, -s, s), (-s, s, -s), (s, -s, -s)]
    extrema = [(0, 1), (0, 2), (0, 3), (1, 2), (1, 3), (2, 3)]
    faces = [[0, 1, 2], [1, 2, 3], [0, 2, 3], [0, 1, 3]]
    face_edges = [[0, 3, 1], [3, 5, 4], [1, 5, 2], [0, 4, 2]]
    return coordinates, extrema, faces, face_edges


def _octahedron() -> tuple[list[Point3], list[tuple[int, int]], list[list[int]], list[list[int]]]:
    coordinates = [
        (1.0, 0.0, 0.0),
        (-1.0, 0.0, 0.0),
        (0.0, 0.0, 1.0),
        (0.0, 0.0, -1.0),
        (0.0, 1.0, 0.0),
        (0.0, -1.0, 0.0),
    ]
    extrema = [
        (0, 2), (0, 3), (0, 4), (0, 5),
        (1, 2), (1, 3), (1, 4), (1, 5),
        (2, 4), (2, 5), (3, 4), (3, 5),
    ]
    faces = [
        [0, 2, 4], [1, 2, 4], [1, 2, 5], [0, 2, 5],
        [0, 3, 5], [1, 3, 5], [1, 3, 4], [0, 3, 4],
    ]
    face_edges = [
        [0, 8, 2], [4, 8, 6], [4, 9, 7], [0, 9, 3],
        [1, 11, 3], [5, 11, 7], [5, 10, 6], [1, 10, 2],
    ]
    return coordinates, extrema, faces, face_edges


def _icosahedron() -> tuple[list[Point3], list[tuple[int, int]], list[list[int]], list[list[int]]]:
    phi = (1 + math.sqrt(5)) / 2
    x = 1 / math.sqrt(1 + phi**2)
    y = phi / math.sqrt(1 + phi**2)
    coordinates = [
        (-x, y, 0.0),
        (x, -y, 0.0),
        (x, y, 0.0),
        (-x, -y, 0.0),
        (0.0, x, y),
        (0.0, -x, -y),
        (0.0, -x, y),
        (0.0, x, -y),
        (-y, 0.0, x),
        (-y, 0.0, -x),
        (y, 0.0, x),
        (y, 0.0, -x),
    ]
    extrema = [
        (0, 2), (0, 4), (0, 7), (0, 8), (0, 9),
        (1, 3), (1, 6), (1, 5), (1, 10), (1, 11),
        (2, 4), (2, 7), (2, 11), (2, 10),
        (3, 5), (3, 9), (3, 8), (3, 6),
        (4, 10), (4, 6), (4, 8),
        (5, 11), (5, 7), (5, 9),
        (6, 8), (6, 10),
        (7, 9), (7, 11),
        (8, 9),
        (10, 11),
    ]
    faces = [
        [0, 2, 4], [0, 4, 8], [0, 8, 9], [0, 7, 9], [0, 2, 7],
        [2, 7, 11], [5, 7, 11], [5, 7, 9], [3, 5, 9], [3, 8, 9],
        [3, 6, 8], [4, 6, 8], [4, 6, 10], [1, 6, 10], [1, 3, 6],
        [1, 3, 5], [1, 5, 11], [1, 10, 11], [2, 10, 11], [2, 4, 10],
    ]
    face_edges = [
        [0, 10, 1], [1, 20, 3], [3, 28, 4], [2, 26, 4], [0, 11, 2],
        [11, 27, 12], [22, 27, 21], [22, 26, 23], [14, 23, 15], [16, 28, 15],
        [17, 24, 16], [19, 24, 20], [19, 25, 18], [6, 25, 8], [5, 17, 6],
        [5, 14, 7], [7, 21, 9], [8, 29, 9], [13, 29, 12], [10, 18, 13],
    ]
    return coordinates, extrema, faces, face_edges


_SOLIDS = {3: (0, _tetrahedron), 4: (1, _octahedron), 5: (2, _icosahedron)}


def build_polyhedron(q: int) -> PolygonalMesh:
    """Build the solid whose vertices each meet ``q`` triangles (3, 4 or 5)."""
    try:
        solid_id, factory = _SOLIDS[q]
    except KeyError:
        raise ValueError(f"invalid value of q: {q}") from None
    coordinates, extrema, faces, face_edges = factory()

    vertex_ids = list(range(len(coordinates)))
    edge_ids = list(range(len(extrema)))
    face_ids = list(range(len(faces)))
    return PolygonalMesh(
        num_cell0ds=len(coordinates),
        cell0d_ids=vertex_ids,
        cell0d_coordinates=coordinates,
        num_cell1ds=len(extrema),
        cell1d_ids=edge_ids,
        cell1d_extrema=extrema,
        num_cell2ds=len(faces),
        cell2d_ids=face_ids,
        cell2d_num_vertices=[len(face) for face in faces],
        cell2d_num_edges=[len(edges) for edges in face_edges],
        cell2d_vertices=faces,
        cell2d_edges=face_edges,
        cell3d_id=solid_id,
        cell3d_num_vertices=len(coordinates),
        cell3d_num_edges=len(extrema),
        cell3d_num_faces=len(faces),
        cell3d_vertices=list(vertex_ids),
        cell3d_edges=list(edge_ids),
        cell3d_faces=list(face_ids),
    )


def check_edges_vertices(mesh: PolygonalMesh) -> bool:
    """Check that consecutive face edges share one vertex and that each edge starts at its face vertex."""
    for i, (vertices, edges) in enumerate(zip(mesh.cell2d_vertices, mesh.cell2d_edges)):
        for j, edge_id in enumerate(edges):
            next_edge_id = edges[(j + 1) % len(edges)]
            edge = mesh.cell1d_extrema[edge_id]
            next_edge = mesh.cell1d_extrema[next_edge_id]

            shared = sum(a == b for a in edge for b in next_edge)
            if shared != 1:
                print(f"edges: {shared} i: {i} j: {j}")
                return False

            count = shared + sum(vertices[j] == end for end in edge)
            if count != 2:
                print(f"vertices: {count} i: {i} j: {j}")
                return False
    return True


def _lerp(start: Point3, end: Point3, step: int, divisions: int) -> Point3:
    return tuple(a + (b - a) * step / divisions for a, b in zip(start, end))  # type: ignore[return-value]


def add_segment_points(verts: list[Point3], v0: Point3, v1: Point3, j: int) -> int:
    """Append the ``j - 1`` inner points splitting v0-v1 into ``j`` parts; return how many were new."""
    added = 0
    for step in range(1, j):
        point = _lerp(v0, v1, step, j)
        if point not in verts:
            verts.append(point)
            added += 1
    return added


def _step_towards(start: Point3, end: Point3, divisions: int) -> Point3:
    return tuple(a + (b - a) / divisions for a, b in zip(start, end))  # type: ignore[return-value]


def triangulation_vertices(mesh: PolygonalMesh, b: int) -> list[Point3]:
    """Collect the distinct vertices produced by splitting every face in ``b`` horizontal layers."""
    verts: list[Point3] = []
    for face in mesh.cell2d_vertices:
        v0, v1, v2 = (mesh.vertex(vertex_id) for vertex_id in face[:3])
        for j in range(b, 0, -1):
            add_segment_points(verts, v0, v1, j)
            if j == 1:
                continue
            v0 = _step_towards(v0, v2, b)
            if v0 not in verts:
                verts.append(v0)
                if j != b and v1 not in verts:
                    verts.append(v1)
                    v1 = _step_towards(v1, v2, b)
        if v1 not in verts:
            verts.append(v1)
    return verts