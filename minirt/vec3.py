"""Three-component vectors used for points, directions and colours."""

from __future__ import annotations

import math
from dataclasses import dataclass

_COLOR_SCALE = 255.999


@dataclass(frozen=True)
class Vec3:
    """An immutable 3D vector of floats."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def dot(self, other: Vec3) -> float:
        """Return the dot product with ``other``."""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def __add__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar: float) -> Vec3:
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return Vec3(self.x * scalar, self.y * scalar, self.z * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Vec3:
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return Vec3(self.x / scalar, self.y / scalar, self.z / scalar)

    def __neg__(self) -> Vec3:
        return Vec3(-self.x, -self.y, -self.z)

    def magnitude(self) -> float:
        """Return the Euclidean length of the vector."""
        return math.sqrt(self.dot(self))

    def normalized(self) -> Vec3:
        """Return the unit vector in the same direction.

        Raises ZeroDivisionError for the zero vector.
        """
        return self * (1 / self.magnitude())

    def to_color_int(self) -> int:
        """Pack the vector, read as r, g, b in [0, 1], into a 0xRRGGBB integer."""
        red = int(self.x * _COLOR_SCALE) & 0xFFFFFFFF
        green = int(self.y * _COLOR_SCALE) & 0xFFFFFFFF
        blue = int(self.z * _COLOR_SCALE) & 0xFFFFFFFF
        return ((red << 16) | (green << 8) | blue) & 0xFFFFFFFF


Point = Vec3
Color = Vec3