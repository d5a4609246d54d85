"""Error kinds raised by the renderer.

Two conditions abort a render: normalizing a vector that is too short to have
a direction, and failing to encode or write the output image. Both are raised
as exceptions so callers can report them without the process exiting. Neither
is retried and no partial image is produced once either occurs.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from spherecast.core.vector import Vector3


class SpherecastError(Exception):
    """Base class for fatal render failures."""


class DegenerateVectorError(SpherecastError, ValueError):
    """A vector shorter than the normalization epsilon was normalized.

    Attributes:
        vector: The vector that could not be normalized.
    """

    def __init__(self, vector: Vector3) -> None:
        self.vector = vector
        super().__init__(f"Cannot normalize a zero-length vector: {vector!r}")


class ImageWriteError(SpherecastError, OSError):
    """The output image could not be encoded or written.

    Attributes:
        path: Destination path of the failed write.
    """

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        super().__init__(f"Failed to write image to {path}: {reason}")
