[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "geodesic-mesh"
version = "1.0.0"
description = "Triangular-faced Platonic solid meshes, face triangulation points and UCD ASCII export"
requires-python = ">=3.10"
dependencies = []
keywords = ["mesh", "polyhedron", "geodesic", "triangulation", "ucd", "paraview"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
geodesic-mesh = "geodesic_mesh.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["geodesic_mesh"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
