"""Three-component vector value type and vector utility functions.

Vector3 is used for points, directions and colors alike. Instances are
immutable: every operation, including the augmented assignments, returns a new
vector, so ``v += w`` rebinds ``v`` rather than changing a shared value.

Colors reuse the same type; the ``r``, ``g`` and ``b`` accessors alias ``x``,
``y`` and ``z``. No range constraint is placed on color components.

Example:
    >>> from spherecast.core.vector import Vector3, dot, normalize
    >>> a = Vector3(1.0, 2.0, 3.0)
    >>> b = Vector3(4.0, 5.0, 6.0)
    >>> dot(a, b)
    32.0
    >>> normalize(Vector3(0.0, 3.0, 0.0))
    Vector3(x=0.0, y=1.0, z=0.0)
"""

from __future__ import annotations

import math
from collections.abc import Iterator
from dataclasses import dataclass
from numbers import Real

from spherecast.core.errors import DegenerateVectorError

# Vectors shorter than this cannot be normalized
NORMALIZE_EPSILON = 1e-5

# Component threshold used by near_zero()
NEAR_ZERO_EPSILON = 1e-8


@dataclass(frozen=True)
class Vector3:
    """A vector with three 64-bit float components.

    Attributes:
        x: First component (red channel when used as a color).
        y: Second component (green channel when used as a color).
        z: Third component (blue channel when used as a color).
    """

    x: float
    y: float
    z: float

    # -------------------------------------------------------------------------
    # Color accessors
    # -------------------------------------------------------------------------

    @property
    def r(self) -> float:
        return self.x

    @property
    def g(self) -> float:
        return self.y

    @property
    def b(self) -> float:
        return self.z

    # -------------------------------------------------------------------------
    # Arithmetic
    # -------------------------------------------------------------------------

    def __add__(self, other: Vector3) -> Vector3:
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector3) -> Vector3:
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar: float) -> Vector3:
        if not isinstance(scalar, Real):
            return NotImplemented
        return Vector3(self.x * scalar, self.y * scalar, self.z * scalar)

    def __rmul__(self, scalar: float) -> Vector3:
        return self.__mul__(scalar)

    def __truediv__(self, scalar: float) -> Vector3:
        """Divide every component by a scalar.

        Raises:
            ZeroDivisionError: If scalar is zero.
        """
        if not isinstance(scalar, Real):
            return NotImplemented
        return Vector3(self.x / scalar, self.y / scalar, self.z / scalar)

    def __neg__(self) -> Vector3:
        return Vector3(-self.x, -self.y, -self.z)

    # Augmented assignment returns a new instance; the left operand is rebound.
    __iadd__ = __add__
    __isub__ = __sub__
    __imul__ = __mul__
    __itruediv__ = __truediv__

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    # -------------------------------------------------------------------------
    # Products and norms
    # -------------------------------------------------------------------------

    def dot(self, other: Vector3) -> float:
        """Compute the dot product with another vector."""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vector3) -> Vector3:
        """Compute the right-handed cross product self x other."""
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def length_squared(self) -> float:
        return self.dot(self)

    def length(self) -> float:
        return math.sqrt(self.length_squared())

    def normalize(self) -> Vector3:
        """Return the unit vector pointing the same way as this one.

        Returns:
            self / self.length().

        Raises:
            DegenerateVectorError: If the length is below NORMALIZE_EPSILON.
        """
        vector_length = self.length()
        if vector_length < NORMALIZE_EPSILON:
            raise DegenerateVectorError(self)
        return self / vector_length

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    def to_tuple(self) -> tuple[float, float, float]:
        return (self.x, self.y, self.z)

    def isclose(self, other: Vector3, *, abs_tol: float = 1e-9) -> bool:
        """Check componentwise equality within an absolute tolerance."""
        return (
            math.isclose(self.x, other.x, abs_tol=abs_tol)
            and math.isclose(self.y, other.y, abs_tol=abs_tol)
            and math.isclose(self.z, other.z, abs_tol=abs_tol)
        )

    @classmethod
    def zero(cls) -> Vector3:
        return cls(0.0, 0.0, 0.0)

    @classmethod
    def from_tuple(cls, values: tuple[float, float, float]) -> Vector3:
        x, y, z = values
        return cls(float(x), float(y), float(z))


# Type aliases for readability at call sites
Point3 = Vector3
Color = Vector3


def vec3(x: float, y: float, z: float) -> Vector3:
    """Create a vector from three components."""
    return Vector3(float(x), float(y), float(z))


# =============================================================================
# Vector Utility Functions
# =============================================================================


def dot(a: Vector3, b: Vector3) -> float:
    """Compute the dot product of two vectors.

    Args:
        a: First vector.
        b: Second vector.

    Returns:
        The dot product a . b.
    """
    return a.dot(b)


def cross(a: Vector3, b: Vector3) -> Vector3:
    """Compute the cross product of two vectors.

    The result is orthogonal to both operands and anti-commutative:
    cross(a, b) == -cross(b, a).

    Args:
        a: First vector.
        b: Second vector.

    Returns:
        The cross product a x b.
    """
    return a.cross(b)


def length(v: Vector3) -> float:
    """Compute the Euclidean length of a vector."""
    return v.length()


def length_squared(v: Vector3) -> float:
    """Compute the squared length of a vector.

    Cheaper than length() when only comparing magnitudes.
    """
    return v.length_squared()


def normalize(v: Vector3) -> Vector3:
    """Normalize a vector to unit length.

    Args:
        v: The input vector.

    Returns:
        A unit vector in the same direction as v.

    Raises:
        DegenerateVectorError: If v is shorter than NORMALIZE_EPSILON.
    """
    return v.normalize()


# Name used for the same operation in ray tracing literature
unit_vector = normalize


def near_zero(v: Vector3) -> bool:
    """Check if a vector is near zero in all components."""
    s = NEAR_ZERO_EPSILON
    return abs(v.x) < s and abs(v.y) < s and abs(v.z) < s
