import pytest

from geodesic_mesh.cli import main
from geodesic_mesh.polyhedra import build_polyhedron, triangulation_vertices


def test_main_returns_zero():
    assert main([]) == 0


def test_main_lists_all_vertices(capsys):
    main([])
    out = capsys.readouterr().out
    expected = triangulation_vertices(build_polyhedron(3), 2)
    labels = [line for line in out.splitlines() if line.startswith("vertice ")]
    assert len(labels) == len(expected)
    assert labels[0] == "vertice 4:"


def test_main_prints_coordinates(capsys):
    main([])
    lines = capsys.readouterr().out.splitlines()
    expected = triangulation_vertices(build_polyhedron(3), 2)
    coordinate_lines = [
        lines[index + 1] for index, line in enumerate(lines) if line.startswith("vertice ")
    ]
    for line, vertex in zip(coordinate_lines, expected):
        values = [float(token) for token in line.split()]
        assert values == pytest.approx(list(vertex), abs=1e-5)
        assert line.endswith(" ")


def test_main_reports_no_failures(capsys):
    main([])
    out = capsys.readouterr().out
    assert "failed" not in out
    assert "Error" not in out


def test_main_rejects_unknown_option():
    with pytest.raises(SystemExit):
        main(["--unknown"])