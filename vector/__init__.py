"""Simple generic vector types."""

from .vec2 import IndexOutOfBoundsError, Vector2

__all__ = [
    "IndexOutOfBoundsError",
    "Vector2",
]
