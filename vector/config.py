"""Default constants for the vector package."""

from __future__ import annotations

VECTOR2_LEN = 2

INDEX_OUT_OF_BOUNDS_MESSAGE = "index out of bounds: the len is {length} but the index is {index}"
