"""Polygonal mesh made of 0D, 1D, 2D and 3D cells."""

from __future__ import annotations

from dataclasses import dataclass, field

Point3 = tuple[float, float, float]


@dataclass
class PolygonalMesh:
    """Vertices, edges, faces and the single polyhedron they bound."""

    # Cell0D
    num_cell0ds: int = 0
    cell0d_ids: list[int] = field(default_factory=list)
    cell0d_coordinates: list[Point3] = field(default_factory=list)

    # Cell1D
    num_cell1ds: int = 0
    cell1d_ids: list[int] = field(default_factory=list)
    cell1d_extrema: list[tuple[int, int]] = field(default_factory=list)

    # Cell2D
    num_cell2ds: int = 0
    cell2d_ids: list[int] = field(default_factory=list)
    cell2d_num_vertices: list[int] = field(default_factory=list)
    cell2d_num_edges: list[int] = field(default_factory=list)
    cell2d_vertices: list[list[int]] = field(default_factory=list)
    cell2d_edges: list[list[int]] = field(default_factory=list)

    # Cell3D
    num_cell3ds: int = 1
    cell3d_id: int = 0
    cell3d_num_vertices: int = 0
    cell3d_num_edges: int = 0
    cell3d_num_faces: int = 0
    cell3d_vertices: list[int] = field(default_factory=list)
    cell3d_edges: list[int] = field(default_factory=list)
    cell3d_faces: list[int] = field(default_factory=list)

    def vertex(self, vertex_id: int) -> Point3:
        """Return the coordinates of the vertex with the given id."""
        if not 0 <= vertex_id < len(self.cell0d_coordinates):
            raise IndexError(f"vertex {vertex_id} does not exist")
        x, y, z = self.cell0d_coordinates[vertex_id]
        return (float(x), float(y), float(z))