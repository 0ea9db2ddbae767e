"""Export of points, segments, polygons and polyhedra to the UCD ASCII format."""

from __future__ import annotations

import enum
from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class UCDProperty:
    """Named data attached to points or cells, ``num_components`` values each."""

    label: str
    unit_label: str
    num_components: int
    data: Sequence[float] = field(default_factory=tuple)


class CellType(enum.Enum):
    UNKNOWN = -1
    POINT = 0
    LINE = 1
    TRIANGLE = 2
    QUADRILATERAL = 3
    HEXAHEDRON = 4
    PRISM = 5
    TETRAHEDRON = 6
    PYRAMID = 7


_LABELS = {
    CellType.LINE: "line",
    CellType.TRIANGLE: "tri",
    CellType.QUADRILATERAL: "quad",
    CellType.HEXAHEDRON: "hex",
    CellType.PRISM: "prism",
    CellType.TETRAHEDRON: "tet",
    CellType.PYRAMID: "pyr",
    CellType.POINT: "pt",
}


@dataclass(frozen=True)
class UCDCell:
    """A cell of a given type over zero-based point ids."""

    type: CellType
    point_ids: tuple[int, ...]
    material_id: int = 0

    def label(self) -> str:
        """Return the UCD keyword of this cell's type."""
        try:
            return _LABELS[self.type]
        except KeyError:
            raise ValueError("Type not supported") from None


def _material(materials: Sequence[int] | None, count: int, index: int) -> int:
    if materials is not None and len(materials) == count:
        return int(materials[index])
    return 0


def create_point_cells(
    points: Sequence[Sequence[float]], materials: Sequence[int] | None = None
) -> list[UCDCell]:
    """One point cell per point."""
    return [
        UCDCell(CellType.POINT, (p,), _material(materials, len(points), p))
        for p in range(len(points))
    ]


def create_line_cells(
    lines: Sequence[Sequence[int]], materials: Sequence[int] | None = None
) -> list[UCDCell]:
    """One line cell per (start, end) pair."""
    return [
        UCDCell(
            CellType.LINE,
            (int(line[0]), int(line[1])),
            _material(materials, len(lines), index),
        )
        for index, line in enumerate(lines)
    ]


def create_polygon_cells(
    polygons_vertices: Sequence[Sequence[int]], materials: Sequence[int] | None = None
) -> list[UCDCell]:
    """Triangle or quadrilateral cells; other polygons are rejected."""
    cells = []
    for index, vertices in enumerate(polygons_vertices):
        if len(vertices) == 3:
            cell_type = CellType.TRIANGLE
        elif len(vertices) == 4:
            cell_type = CellType.QUADRILATERAL
        else:
            raise ValueError("Polygon type not supported")
        cells.append(
            UCDCell(
                cell_type,
                tuple(vertices),
                _material(materials, len(polygons_vertices), index),
            )
        )
    return cells


def create_polyhedra_cells(
    polyhedra_vertices: Sequence[Sequence[int]], materials: Sequence[int] | None = None
) -> list[UCDCell]:
    """Tetrahedron cells; other polyhedra are rejected."""
    cells = []
    for index, vertices in enumerate(polyhedra_vertices):
        if len(vertices) != 4:
            raise ValueError("Polygon type not supported")
        cells.append(
            UCDCell(
                CellType.TETRAHEDRON,
                tuple(vertices),
                _material(materials, len(polyhedra_vertices), index),
            )
        )
    return cells


def _property_lines(properties: Sequence[UCDProperty], count: int) -> list[str]:
    if not properties:
        return []
    lines = [" ".join([str(len(properties))] + [str(p.num_components) for p in properties])]
    lines.extend(f"{p.label}, {p.unit_label}" for p in properties)
    for item in range(count):
        values = [
            f"{prop.data[prop.num_components * item + component]:.16e}"
            for prop in properties
            for component in range(prop.num_components)
        ]
        lines.append(" ".join([str(item + 1)] + values))
    return lines


def write_ucd_ascii(
    points: Sequence[Sequence[float]],
    point_properties: Sequence[UCDProperty],
    cells: Sequence[UCDCell],
    cell_properties: Sequence[UCDProperty],
    file_path: str | Path,
) -> None:
    """Write points, cells and their properties to a UCD ASCII file."""
    lines = [
        f"{len(points)} {len(cells)} {len(point_properties)} {len(cell_properties)} 0"
    ]
    for index, (x, y, z) in enumerate(points, start=1):
        lines.append(f"{index} {x:.16e} {y:.16e} {z:.16e}")
    for index, cell in enumerate(cells, start=1):
        ids = "".join(f" {pid + 1}" for pid in cell.point_ids)
        lines.append(f"{index} {cell.material_id} {cell.label()}{ids}")
    lines.extend(_property_lines(point_properties, len(points)))
    lines.extend(_property_lines(cell_properties, len(cells)))

    try:
        handle = open(file_path, "w", encoding="utf-8")
    except OSError as exc:
        raise OSError(f"File '{file_path}' cannot be opened") from exc
    with handle:
        handle.write("\n".join(lines) + "\n")


def export_points(
    file_path: str | Path,
    points: Sequence[Sequence[float]],
    points_properties: Sequence[UCDProperty] = (),
    materials: Sequence[int] | None = None,
) -> None:
    """Export each point as a point cell; the properties belong to those cells."""
    write_ucd_ascii(
        points, (), create_point_cells(points, materials), points_properties, file_path
    )


def export_segments(
    file_path: str | Path,
    points: Sequence[Sequence[float]],
    segments: Sequence[Sequence[int]],
    points_properties: Sequence[UCDProperty] = (),
    segments_properties: Sequence[UCDProperty] = (),
    materials: Sequence[int] | None = None,
) -> None:
    """Export points and the segments joining them."""
    write_ucd_ascii(
        points,
        points_properties,
        create_line_cells(segments, materials),
        segments_properties,
        file_path,
    )


def export_polygons(
    file_path: str | Path,
    points: Sequence[Sequence[float]],
    polygons_vertices: Sequence[Sequence[int]],
    points_properties: Sequence[UCDProperty] = (),
    polygons_properties: Sequence[UCDProperty] = (),
    materials: Sequence[int] | None = None,
) -> None:
    """Export points and triangular or quadrilateral polygons."""
    write_ucd_ascii(
        points,
        points_properties,
        create_polygon_cells(polygons_vertices, materials),
        polygons_properties,
        file_path,
    )


def export_polyhedra(
    file_path: str | Path,
    points: Sequence[Sequence[float]],
    polyhedra_vertices: Sequence[Sequence[int]],
    points_properties: Sequence[UCDProperty] = (),
    polyhedra_properties: Sequence[UCDProperty] = (),
    materials: Sequence[int] | None = None,
) -> None:
    """Export points and tetrahedra."""
    write_ucd_ascii(
        points,
        points_properties,
        create_polyhedra_cells(polyhedra_vertices, materials),
        polyhedra_properties,
        file_path,
    )