# src/collision/__init__.py

from .checker import CollisionChecker, collides
from .geometry import distance, point_in_rectangle, path_length

__all__ = [
    "CollisionChecker",
    "collides",
    "distance",
    "point_in_rectangle",
    "path_length",
]
