# geodesic-mesh

A small library for the three Platonic solids with triangular faces
(tetrahedron, octahedron and icosahedron). It can:

- build each solid as a `PolygonalMesh` of vertices, edges, faces and one
  polyhedron;
- check that the edges and vertices of every face fit together;
- collect the points of a regular subdivision of every face;
- write points, segments, polygons or tetrahedra to the UCD ASCII format
  that ParaView reads.

It has no dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
geodesic-mesh
```

The command takes no options other than `--help`. It builds the
tetrahedron, runs the edge and vertex check, and prints every point that
subdivision level 2 produces. The points are numbered from 4 and printed
one per block:

```
vertice 4:
<x> <y> <z>
```

If the check fails, the command prints `The check of edges and vertices
failed`. It always exits with status 0.

## Building and checking solids

```python
from geodesic_mesh.polyhedra import (
    build_polyhedron,
    check_edges_vertices,
    triangulation_vertices,
)

mesh = build_polyhedron(4)      # 3: tetrahedron, 4: octahedron, 5: icosahedron
print(mesh.num_cell0ds, mesh.num_cell1ds, mesh.num_cell2ds)   # 6 12 8
print(mesh.vertex(0))           # (1.0, 0.0, 0.0)
print(check_edges_vertices(mesh))

points = triangulation_vertices(mesh, 2)
```

- `build_polyhedron(q)` returns a `geodesic_mesh.mesh.PolygonalMesh`. Any
  `q` other than 3, 4 or 5 raises `ValueError`. `cell3d_id` is 0 for the
  tetrahedron, 1 for the octahedron and 2 for the icosahedron.
- `PolygonalMesh.vertex(vertex_id)` returns the coordinates as a tuple of
  three floats. It raises `IndexError` for an id that does not exist.
- `check_edges_vertices(mesh)` returns `True` when each pair of consecutive
  edges in a face shares exactly one endpoint and each face vertex is an
  endpoint of the edge in the same position. On the first failure it prints
  which face and position failed and returns `False`.
- `add_segment_points(verts, v0, v1, j)` appends to `verts` the `j - 1`
  inner points that split the segment `v0`–`v1` into `j` equal parts. Points
  already in the list are skipped. It returns the number of points it added.
- `triangulation_vertices(mesh, b)` walks every face in `b` layers and
  returns the distinct points it produces, in the order it meets them.
  Only the first three vertices of each face are used.

## UCD export

```python
from geodesic_mesh.ucd import UCDProperty, export_polygons

points = [(0.0, 0.0, 0.0), (1.0, 0.0, 0.0), (0.0, 1.0, 0.0)]
export_polygons(
    "triangle.inp",
    points,
    [[0, 1, 2]],
    points_properties=[UCDProperty("height", "m", 1, [0.0, 0.0, 0.0])],
)
```

The module `geodesic_mesh.ucd` provides the following functions:

- `export_points(file_path, points, points_properties=(), materials=None)`
  writes one point cell per point. The given properties are written as
  properties of those cells.
- `export_segments(file_path, points, segments, ...)` writes line cells
  from `(start, end)` index pairs.
- `export_polygons(file_path, points, polygons_vertices, ...)` writes
  triangles and quadrilaterals.
- `export_polyhedra(file_path, points, polyhedra_vertices, ...)` writes
  tetrahedra.
- `write_ucd_ascii(points, point_properties, cells, cell_properties,
  file_path)` writes a prepared list of `UCDCell` objects.

It also provides `create_point_cells`, `create_line_cells`,
`create_polygon_cells` and `create_polyhedra_cells`, which build the
`UCDCell` lists used by the export functions.

Behaviour of the export functions:

- Point ids are zero-based in Python and written one-based in the file.
- Coordinates and property values are written in scientific notation with
  16 digits.
- `materials` applies only when its length equals the number of cells.
  Otherwise every cell gets material 0.
- A `UCDProperty(label, unit_label, num_components, data)` holds
  `num_components` values for each point or cell, stored one after another
  in `data`.
- Polygons with other than 3 or 4 vertices raise `ValueError`.
- Polyhedra with other than 4 vertices raise `ValueError`.
- A `UCDCell` whose type has no UCD keyword (`CellType.UNKNOWN`) raises
  `ValueError` when it is written.
- A file that cannot be opened raises `OSError`.

## What it does not do

- `triangulation_vertices` returns points only. It does not build the
  triangles, edges or a new `PolygonalMesh` from them.
- Nothing projects the points onto the sphere.
- The command line tool neither writes a UCD file nor accepts a choice of
  solid or subdivision level. To do either, use the library functions
  above.