"""Command line entry point: triangulate the tetrahedron and list the new vertices."""

from __future__ import annotations

import argparse

from geodesic_mesh.mesh import PolygonalMesh
from geodesic_mesh.polyhedra import (
    build_polyhedron,
    check_edges_vertices,
    triangulation_vertices,
)

_Q = 3
_B = 2
_FIRST_LABEL = 4


def main(argv: list[str] | None = None) -> int:
    """Build the tetrahedron, check it and print its triangulation vertices."""
    parser = argparse.ArgumentParser(
        prog="geodesic-mesh",
        description="Print the vertices of the triangulated tetrahedron.",
    )
    parser.parse_args(argv)

    try:
        mesh = build_polyhedron(_Q)
    except ValueError:
        print("Error while building the polyhedron")
        mesh = PolygonalMesh()

    if not check_edges_vertices(mesh):
        print("The check of edges and vertices failed")

    for label, vertex in enumerate(triangulation_vertices(mesh, _B), start=_FIRST_LABEL):
        print(f"vertice {label}:")
        print("".join(f"{value:g} " for value in vertex))
        print()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())