"""2D and 3D vector value types."""

from .vector_2d import Vector2D
from .vector_3d import Vector3D

__all__ = [
    "Vector2D",
    "Vector3D",
]
