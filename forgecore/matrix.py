"""A 4x4 float matrix stored as 16 values in column-major order."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator

from forgecore.vector import Vec3

_IDENTITY = (
    1.0, 0.0, 0.0, 0.0,
    0.0, 1.0, 0.0, 0.0,
    0.0, 0.0, 1.0, 0.0,
    0.0, 0.0, 0.0, 1.0,
)


def _with(base: tuple[float, ...], updates: dict[int, float]) -> tuple[float, ...]:
    values = list(base)
    for index, value in updates.items():
        values[index] = value
    return tuple(values)


@dataclass(frozen=True)
class Mat4:
    """An immutable 4x4 matrix; ``data`` holds its 16 elements."""

    data: tuple[float, ...] = _IDENTITY

    def __post_init__(self) -> None:
        values = tuple(float(value) for value in self.data)
        if len(values) != 16:
            raise ValueError(f"a 4x4 matrix needs 16 elements, got {len(values)}")
        object.__setattr__(self, "data", values)

    def __iter__(self) -> Iterator[float]:
        return iter(self.data)

    @classmethod
    def identity(cls) -> "Mat4":
        return cls(_IDENTITY)

    def __mul__(self, other: "Mat4") -> "Mat4":
        if not isinstance(other, Mat4):
            return NotImplemented
        a, b = self.data, other.data
        return Mat4(
            tuple(
                sum(a[row * 4 + k] * b[k * 4 + col] for k in range(4))
                for row in range(4)
                for col in range(4)
            )
        )

    @classmethod
    def orthographic(
        cls,
        left: float,
        right: float,
        bottom: float,
        top: float,
        near_clip: float,
        far_clip: float,
    ) -> "Mat4":
        """An orthographic projection, typically for flat or 2D scenes."""
        lr = 1.0 / (left - right)
        bt = 1.0 / (bottom - top)
        nf = 1.0 / (near_clip - far_clip)
        return cls(
            _with(
                _IDENTITY,
                {
                    0: -2.0 * lr,
                    5: -2.0 * bt,
                    10: -2.0 * nf,
                    12: (left + right) * lr,
                    13: (top + bottom) * bt,
                    14: (far_clip + near_clip) * nf,
                },
            )
        )

    @classmethod
    def perspective(
        cls, fov_radians: float, aspect_ratio: float, near_clip: float, far_clip: float
    ) -> "Mat4":
        """A perspective projection, typically for 3D scenes."""
        half_tan_fov = math.tan(fov_radians * 0.5)
        depth = far_clip - near_clip
        return cls(
            _with(
                (0.0,) * 16,
                {
                    0: 1.0 / (aspect_ratio * half_tan_fov),
                    5: 1.0 / half_tan_fov,
                    10: -((far_clip + near_clip) / depth),
                    11: -1.0,
                    14: -((2.0 * far_clip * near_clip) / depth),
                },
            )
        )

    @classmethod
    def look_at(cls, position: Vec3, target: Vec3, up: Vec3) -> "Mat4":
        """A matrix looking at ``target`` from ``position``."""
        z_axis = (target - position).normalized()
        x_axis = z_axis.cross(up).normalized()
        y_axis = x_axis.cross(z_axis)
        return cls(
            (
                x_axis.x, y_axis.x, -z_axis.x, 0.0,
                x_axis.y, y_axis.y, -z_axis.y, 0.0,
                x_axis.z, y_axis.z, -z_axis.z, 0.0,
                -x_axis.dot(position), -y_axis.dot(position), -z_axis.dot(position), 1.0,
            )
        )

    def transposed(self) -> "Mat4":
        """A copy with rows and columns swapped."""
        return Mat4(tuple(self.data[col * 4 + row] for row in range(4) for col in range(4)))

    def inverse(self) -> "Mat4":
        """The inverse; raises ZeroDivisionError for a singular matrix."""
        m = self.data

        t0 = m[10] * m[15]
        t1 = m[14] * m[11]
        t2 = m[6] * m[15]
        t3 = m[14] * m[7]
        t4 = m[6] * m[11]
        t5 = m[10] * m[7]
        t6 = m[2] * m[15]
        t7 = m[14] * m[3]
        t8 = m[2] * m[11]
        t9 = m[10] * m[3]
        t10 = m[2] * m[7]
        t11 = m[6] * m[3]
        t12 = m[8] * m[13]
        t13 = m[12] * m[9]
        t14 = m[4] * m[13]
        t15 = m[12] * m[5]
        t16 = m[4] * m[9]
        t17 = m[8] * m[5]
        t18 = m[0] * m[13]
        t19 = m[12] * m[1]
        t20 = m[0] * m[9]
        t21 = m[8] * m[1]
        t22 = m[0] * m[5]
        t23 = m[4] * m[1]

        o0 = (t0 * m[5] + t3 * m[9] + t4 * m[13]) - (t1 * m[5] + t2 * m[9] + t5 * m[13])
        o1 = (t1 * m[1] + t6 * m[9] + t9 * m[13]) - (t0 * m[1] + t7 * m[9] + t8 * m[13])
        o2 = (t2 * m[1] + t7 * m[5] + t10 * m[13]) - (t3 * m[1] + t6 * m[5] + t11 * m[13])
        o3 = (t5 * m[1] + t8 * m[5] + t11 * m[9]) - (t4 * m[1] + t9 * m[5] + t10 * m[9])

        d = 1.0 / (m[0] * o0 + m[4] * o1 + m[8] * o2 + m[12] * o3)

        return Mat4(
            (
                d * o0,
                d * o1,
                d * o2,
                d * o3,
                d * ((t1 * m[4] + t2 * m[8] + t5 * m[12]) - (t0 * m[4] + t3 * m[8] + t4 * m[12])),
                d * ((t0 * m[0] + t7 * m[8] + t8 * m[12]) - (t1 * m[0] + t6 * m[8] + t9 * m[12])),
                d * ((t3 * m[0] + t6 * m[4] + t11 * m[12]) - (t2 * m[0] + t7 * m[4] + t10 * m[12])),
                d * ((t4 * m[0] + t9 * m[4] + t10 * m[8]) - (t5 * m[0] + t8 * m[4] + t11 * m[8])),
                d * ((t12 * m[7] + t15 * m[11] + t16 * m[15]) - (t13 * m[7] + t14 * m[11] + t17 * m[15])),
                d * ((t13 * m[3] + t18 * m[11] + t21 * m[15]) - (t12 * m[3] + t19 * m[11] + t20 * m[15])),
                d * ((t14 * m[3] + t19 * m[7] + t22 * m[15]) - (t15 * m[3] + t18 * m[7] + t23 * m[15])),
                d * ((t17 * m[3] + t20 * m[7] + t23 * m[11]) - (t16 * m[3] + t21 * m[7] + t22 * m[11])),
                d * ((t14 * m[10] + t17 * m[14] + t13 * m[6]) - (t16 * m[14] + t12 * m[6] + t15 * m[10])),
                d * ((t20 * m[14] + t12 * m[2] + t19 * m[10]) - (t18 * m[10] + t21 * m[14] + t13 * m[2])),
                d * ((t18 * m[6] + t23 * m[14] + t15 * m[2]) - (t22 * m[14] + t14 * m[2] + t19 * m[6])),
                d * ((t22 * m[10] + t16 * m[2] + t21 * m[6]) - (t20 * m[6] + t23 * m[10] + t17 * m[2])),
            )
        )

    @classmethod
    def translation(cls, position: Vec3) -> "Mat4":
        return cls(_with(_IDENTITY, {12: position.x, 13: position.y, 14: position.z}))

    @classmethod
    def scale(cls, scale: Vec3) -> "Mat4":
        return cls(_with(_IDENTITY, {0: scale.x, 5: scale.y, 10: scale.z}))

    @classmethod
    def euler_x(cls, angle_radians: float) -> "Mat4":
        c = math.cos(angle_radians)
        s = math.sin(angle_radians)
        return cls(_with(_IDENTITY, {5: c, 6: s, 9: -s, 10: -c}))

    @classmethod
    def euler_y(cls, angle_radians: float) -> "Mat4":
        c = math.cos(angle_radians)
        s = math.sin(angle_radians)
        return cls(_with(_IDENTITY, {0: c, 2: -s, 8: s, 10: c}))

    @classmethod
    def euler_z(cls, angle_radians: float) -> "Mat4":
        c = math.cos(angle_radians)
        s = math.sin(angle_radians)
        return cls(_with(_IDENTITY, {0: c, 1: s, 4: -s, 5: c}))

    @classmethod
    def euler_xyz(cls, x_radians: float, y_radians: float, z_radians: float) -> "Mat4":
        return cls.euler_x(x_radians) * cls.euler_y(y_radians) * cls.euler_z(z_radians)

    def _direction(self, first: int, second: int, third: int, sign: float) -> Vec3:
        m = self.data
        return Vec3(sign * m[first], sign * m[second], sign * m[third]).normalized()

    def forward(self) -> Vec3:
        return self._direction(2, 6, 10, -1.0)

    def backward(self) -> Vec3:
        return self._direction(2, 6, 10, 1.0)

    def up(self) -> Vec3:
        return self._direction(1, 5, 9, 1.0)

    def down(self) -> Vec3:
        return self._direction(1, 5, 9, -1.0)

    def left(self) -> Vec3:
        return self._direction(0, 4, 8, -1.0)

    def right(self) -> Vec3:
        return self._direction(0, 4, 8, 1.0)