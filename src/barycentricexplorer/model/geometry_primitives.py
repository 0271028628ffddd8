"""
Geometric Primitives for the barycentric scene.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, Iterator, TYPE_CHECKING
import numpy as np
import math

if TYPE_CHECKING:
    import numpy.typing as npt

AXES = ("x", "y", "z")


def _check_index(index: int) -> None:
    if index not in (0, 1, 2):
        raise ValueError(f"Component index must be 0, 1 or 2, got {index}.")


@dataclass(frozen=True)
class Vector:
    """
    An immutable vector (or point) in 3D space.
    """
    x: float
    y: float
    z: float

    @classmethod
    def from_iterable(cls, values: Iterable[float]) -> Vector:
        x, y, z = (float(v) for v in values)
        return cls(x, y, z)

    def __add__(self, other: Vector) -> Vector:
        return Vector(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector) -> Vector:
        return Vector(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar: float) -> Vector:
        return Vector(self.x * scalar, self.y * scalar, self.z * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Vector:
        if scalar == 0.0: raise ZeroDivisionError
        return Vector(self.x / scalar, self.y / scalar, self.z / scalar)

    def __neg__(self) -> Vector:
        return Vector(-self.x, -self.y, -self.z)

    def __iter__(self) -> Iterator[float]:
        return iter((self.x, self.y, self.z))

    def __getitem__(self, index: int) -> float:
        _check_index(index)
        return (self.x, self.y, self.z)[index]

    def with_component(self, index: int, value: float) -> Vector:
        """Return a copy with one component replaced."""
        _check_index(index)
        values = [self.x, self.y, self.z]
        values[index] = float(value)
        return Vector(*values)

    @property
    def magnitude(self) -> float:
        return math.sqrt(self.x**2 + self.y**2 + self.z**2)

    def normalize(self) -> Vector:
        mag = self.magnitude
        if mag == 0.0: return Vector(0.0, 0.0, 0.0)
        return self / mag

    def dot(self, other: Vector) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vector) -> Vector:
        return Vector(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x
        )

    def distance_to(self, other: Vector) -> float:
        return (self - other).magnitude

    def to_array(self) -> npt.NDArray[np.float64]:
        return np.array([self.x, self.y, self.z])


@dataclass(frozen=True)
class Plane:
    """A plane through `origin` orthogonal to `normal`."""
    origin: Vector
    normal: Vector

    def signed_distance(self, point: Vector) -> float:
        return self.normal.dot(point - self.origin)


@dataclass(frozen=True)
class BarycentricCoordinates:
    """
    Weights (alpha, beta, gamma) of the vertices A, B, C.

    The weights are expected to sum to one; they all lie in [0, 1] exactly when
    the point is inside (or on the boundary of) the triangle.
    """
    alpha: float
    beta: float
    gamma: float

    @classmethod
    def from_iterable(cls, values: Iterable[float]) -> BarycentricCoordinates:
        alpha, beta, gamma = (float(v) for v in values)
        return cls(alpha, beta, gamma)

    def __iter__(self) -> Iterator[float]:
        return iter((self.alpha, self.beta, self.gamma))

    def __getitem__(self, index: int) -> float:
        _check_index(index)
        return (self.alpha, self.beta, self.gamma)[index]

    def with_component(self, index: int, value: float) -> BarycentricCoordinates:
        _check_index(index)
        values = [self.alpha, self.beta, self.gamma]
        values[index] = float(value)
        return BarycentricCoordinates(*values)

    @property
    def total(self) -> float:
        return self.alpha + self.beta + self.gamma

    def is_inside(self, eps: float = 0.0) -> bool:
        """True if every weight lies in [0, 1] (within `eps`)."""
        return all(-eps <= w <= 1.0 + eps for w in self)

    def to_array(self) -> npt.NDArray[np.float64]:
        return np.array([self.alpha, self.beta, self.gamma])
