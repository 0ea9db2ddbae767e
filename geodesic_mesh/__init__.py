"""Triangular-faced Platonic solid meshes, face triangulation points and UCD ASCII export."""

__version__ = "1.0.0"