"""Generic 2-component vector value type."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Generic, TypeVar

from . import config

T = TypeVar("T")

logger = logging.getLogger(__name__)


class IndexOutOfBoundsError(IndexError):
    """Raised by Vector2.get for any index other than 0 or 1."""

    def __init__(self, index: int, length: int = config.VECTOR2_LEN) -> None:
        super().__init__(config.INDEX_OUT_OF_BOUNDS_MESSAGE.format(length=length, index=index))
        self.index = index
        self.length = length


@dataclass(frozen=True)
class Vector2(Generic[T]):
    """2D vector with components of a shared scalar type T.

    Operations never mutate; each returns a new Vector2 (or a scalar for the
    dot product). Errors raised by T's own arithmetic propagate unchanged.
    """

    e0: T
    e1: T

    @classmethod
    def new(cls, e0: T, e1: T) -> "Vector2[T]":
        return cls(e0, e1)

    def get(self, index: int) -> T:
        if index == 0:
            return self.e0
        if index == 1:
            return self.e1
        logger.debug("Vector2.get called with out-of-bounds index %r", index)
        raise IndexOutOfBoundsError(index)

    def __add__(self, other: "Vector2[T]") -> "Vector2[T]":
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.e0 + other.e0, self.e1 + other.e1)

    def __sub__(self, other: "Vector2[T]") -> "Vector2[T]":
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.e0 - other.e0, self.e1 - other.e1)

    def __neg__(self) -> "Vector2[T]":
        return Vector2(-self.e0, -self.e1)

    def __mul__(self, other: "Vector2[T] | T") -> "T | Vector2[T]":
        """Dot product for a Vector2 operand, scalar multiply otherwise."""
        if isinstance(other, Vector2):
            return self.dot(other)
        return self.scale(other)

    def __rmul__(self, scalar: T) -> "Vector2[T]":
        return self.scale(scalar)

    def dot(self, other: "Vector2[T]") -> T:
        return self.e0 * other.e0 + self.e1 * other.e1

    def scale(self, scalar: T) -> "Vector2[T]":
        return Vector2(self.e0 * scalar, self.e1 * scalar)
