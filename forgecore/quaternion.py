"""Quaternions for representing rotations."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator

from forgecore.matrix import Mat4, _IDENTITY, _with
from forgecore.vector import Vec3

_DOT_THRESHOLD = 0.9995


@dataclass(frozen=True)
class Quat:
    """An immutable quaternion with vector part (x, y, z) and scalar part w."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 1.0

    def __iter__(self) -> Iterator[float]:
        return iter((self.x, self.y, self.z, self.w))

    def __neg__(self) -> "Quat":
        return Quat(-self.x, -self.y, -self.z, -self.w)

    @classmethod
    def identity(cls) -> "Quat":
        return cls(0.0, 0.0, 0.0, 1.0)

    def normal(self) -> float:
        """The magnitude."""
        return math.sqrt(self.dot(self))

    def normalized(self) -> "Quat":
        """A unit-length copy; raises ZeroDivisionError for the zero quaternion."""
        n = self.normal()
        return Quat(self.x / n, self.y / n, self.z / n, self.w / n)

    def conjugate(self) -> "Quat":
        return Quat(-self.x, -self.y, -self.z, self.w)

    def inverse(self) -> "Quat":
        return self.conjugate().normalized()

    def __mul__(self, other: "Quat") -> "Quat":
        if not isinstance(other, Quat):
            return NotImplemented
        a, b = self, other
        return Quat(
            a.x * b.w + a.y * b.z - a.z * b.y + a.w * b.x,
            -a.x * b.x + a.y * b.w + a.z * b.x + a.w * b.y,
            a.x * b.y - a.y * b.x + a.z * b.w + a.w * b.z,
            -a.x + b.x - a.y * b.y - a.z * b.z + a.w * b.w,
        )

    def dot(self, other: "Quat") -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z + self.w * other.w

    def to_mat4(self) -> Mat4:
        """The rotation matrix of the normalized quaternion."""
        n = self.normalized()
        return Mat4(
            _with(
                _IDENTITY,
                {
                    0: 1.0 - 2.0 * n.y * n.y - 2.0 * n.z * n.z,
                    1: 2.0 * n.x * n.y - 2.0 * n.z * n.w,
                    2: 2.0 * n.x * n.z + 2.0 * n.y * n.w,
                    4: 2.0 * n.x * n.y + 2.0 * n.z * n.w,
                    5: 1.0 - 2.0 * n.x * n.x - 2.0 * n.z * n.z,
                    6: 2.0 * n.y * n.z - 2.0 * n.x * n.w,
                    8: 2.0 * n.x * n.z - 2.0 * n.y * n.w,
                    9: 2.0 * n.y * n.z + 2.0 * n.x * n.w,
                    10: 1.0 - 2.0 * n.x * n.x - 2.0 * n.y * n.y,
                },
            )
        )

    def to_rotation_matrix(self, center: Vec3) -> Mat4:
        """A rotation matrix about ``center``."""
        x, y, z, w = self
        o0 = (x * x) - (y * y) - (z * z) + (w * w)
        o1 = 2.0 * ((x * y) + (z * w))
        o2 = 2.0 * ((x * z) - (y * w))
        o3 = center.x - center.x * o0 - center.y * o1 - center.z * o2

        o4 = 2.0 * ((x * y) - (z * w))
        o5 = -((x * x) + (y * y) - (z * z) + (w * w))
        o6 = 2.0 * ((y * z) + (x * w))
        o7 = center.y - center.x * o4 - center.y * o5 - center.z * o6

        o8 = 2.0 * ((x * z) + (y * w))
        o9 = 2.0 * ((y * z) - (x * w))
        o10 = -(x * x) - (y * y) + (z * z) + (w * w)
        o11 = center.z - center.x * o8 - center.y * o9 - center.z * o10

        return Mat4((o0, o1, o2, o3, o4, o5, o6, o7, o8, o9, o10, o11, 0.0, 0.0, 0.0, 1.0))

    @classmethod
    def from_axis_angle(cls, axis: Vec3, angle: float, normalize: bool = True) -> "Quat":
        """A rotation of ``angle`` radians about ``axis``."""
        half_angle = 0.5 * angle
        s = math.sin(half_angle)
        c = math.cos(half_angle)
        q = cls(s * axis.x, s * axis.y, s * axis.z, c)
        return q.normalized() if normalize else q

    def slerp(self, other: "Quat", percentage: float) -> "Quat":
        """Spherical interpolation from this rotation towards ``other``."""
        v0 = self.normalized()
        v1 = other.normalized()
        dot = v0.dot(v1)

        # Take the shorter path; q and -q are the same rotation.
        if dot < 0.0:
            v1 = -v1
            dot = -dot

        if dot > _DOT_THRESHOLD:
            return Quat(
                *(a + (b - a) * percentage for a, b in zip(v0, v1))
            ).normalized()

        theta_0 = math.acos(dot)
        theta = theta_0 * percentage
        sin_theta = math.sin(theta)
        sin_theta_0 = math.sin(theta_0)

        s0 = math.cos(theta) - dot * sin_theta / sin_theta_0
        s1 = sin_theta / sin_theta_0
        return Quat(*(a * s0 + b * s1 for a, b in zip(v0, v1)))