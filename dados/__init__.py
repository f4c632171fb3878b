"""Vertices, transforms, Bezier trajectories and OBJ/PLY models for animating thrown dice."""

__version__ = "0.1.0"