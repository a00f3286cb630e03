"""Immutable 2-, 3- and 4-component float vectors."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True)
class Vec2:
    """A 2-component vector."""

    x: float = 0.0
    y: float = 0.0

    @property
    def elements(self) -> tuple[float, float]:
        return (self.x, self.y)

    def __iter__(self) -> Iterator[float]:
        return iter(self.elements)

    @classmethod
    def zero(cls) -> "Vec2":
        return cls(0.0, 0.0)

    @classmethod
    def one(cls) -> "Vec2":
        return cls(1.0, 1.0)

    @classmethod
    def up(cls) -> "Vec2":
        return cls(0.0, 1.0)

    @classmethod
    def down(cls) -> "Vec2":
        return cls(0.0, -1.0)

    @classmethod
    def left(cls) -> "Vec2":
        return cls(-1.0, 0.0)

    @classmethod
    def right(cls) -> "Vec2":
        return cls(1.0, 0.0)

    def __add__(self, other: "Vec2") -> "Vec2":
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vec2") -> "Vec2":
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, other: "Vec2") -> "Vec2":
        """Component-wise product."""
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x * other.x, self.y * other.y)

    def __truediv__(self, other: "Vec2") -> "Vec2":
        """Component-wise quotient."""
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x / other.x, self.y / other.y)

    def length_squared(self) -> float:
        return self.x * self.x + self.y * self.y

    def length(self) -> float:
        return math.sqrt(self.length_squared())

    def normalized(self) -> "Vec2":
        """A unit-length copy; raises ZeroDivisionError for the zero vector."""
        length = self.length()
        return Vec2(self.x / length, self.y / length)

    def compare(self, other: "Vec2", tolerance: float) -> bool:
        """True if every component differs by no more than ``tolerance``."""
        return all(abs(a - b) <= tolerance for a, b in zip(self, other))

    def distance(self, other: "Vec2") -> float:
        return (self - other).length()


@dataclass(frozen=True)
class Vec3:
    """A 3-component vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @property
    def elements(self) -> tuple[float, float, float]:
        return (self.x, self.y, self.z)

    def __iter__(self) -> Iterator[float]:
        return iter(self.elements)

    @classmethod
    def zero(cls) -> "Vec3":
        return cls(0.0, 0.0, 0.0)

    @classmethod
    def one(cls) -> "Vec3":
        return cls(1.0, 1.0, 1.0)

    @classmethod
    def up(cls) -> "Vec3":
        return cls(0.0, 1.0, 0.0)

    @classmethod
    def down(cls) -> "Vec3":
        return cls(0.0, -1.0, 0.0)

    @classmethod
    def left(cls) -> "Vec3":
        return cls(-1.0, 0.0, 0.0)

    @classmethod
    def right(cls) -> "Vec3":
        return cls(1.0, 0.0, 0.0)

    @classmethod
    def forward(cls) -> "Vec3":
        return cls(0.0, 0.0, -1.0)

    @classmethod
    def back(cls) -> "Vec3":
        return cls(0.0, 0.0, 1.0)

    @classmethod
    def from_vec4(cls, vector: "Vec4") -> "Vec3":
        """Take x, y and z of ``vector``, dropping w."""
        return cls(vector.x, vector.y, vector.z)

    def to_vec4(self, w: float) -> "Vec4":
        return Vec4(self.x, self.y, self.z, w)

    def __add__(self, other: "Vec3") -> "Vec3":
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: "Vec3") -> "Vec3":
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, other: "Vec3") -> "Vec3":
        """Component-wise product."""
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x * other.x, self.y * other.y, self.z * other.z)

    def __truediv__(self, other: "Vec3") -> "Vec3":
        """Component-wise quotient."""
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x / other.x, self.y / other.y, self.z / other.z)

    def scale(self, scalar: float) -> "Vec3":
        """Every component multiplied by ``scalar``."""
        return Vec3(self.x * scalar, self.y * scalar, self.z * scalar)

    def length_squared(self) -> float:
        return self.x * self.x + self.y * self.y + self.z * self.z

    def length(self) -> float:
        return math.sqrt(self.length_squared())

    def normalized(self) -> "Vec3":
        """A unit-length copy; raises ZeroDivisionError for the zero vector."""
        length = self.length()
        return Vec3(self.x / length, self.y / length, self.z / length)

    def dot(self, other: "Vec3") -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: "Vec3") -> "Vec3":
        """A vector orthogonal to both operands."""
        return Vec3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def compare(self, other: "Vec3", tolerance: float) -> bool:
        """True if every component differs by no more than ``tolerance``."""
        return all(abs(a - b) <= tolerance for a, b in zip(self, other))

    def distance(self, other: "Vec3") -> float:
        return (self - other).length()


@dataclass(frozen=True)
class Vec4:
    """A 4-component vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 0.0

    @property
    def elements(self) -> tuple[float, float, float, float]:
        return (self.x, self.y, self.z, self.w)

    def __iter__(self) -> Iterator[float]:
        return iter(self.elements)

    @classmethod
    def zero(cls) -> "Vec4":
        return cls(0.0, 0.0, 0.0, 0.0)

    @classmethod
    def one(cls) -> "Vec4":
        return cls(1.0, 1.0, 1.0, 1.0)

    @classmethod
    def from_vec3(cls, vector: Vec3, w: float) -> "Vec4":
        return cls(vector.x, vector.y, vector.z, w)

    def to_vec3(self) -> Vec3:
        return Vec3(self.x, self.y, self.z)

    def __add__(self, other: "Vec4") -> "Vec4":
        if not isinstance(other, Vec4):
            return NotImplemented
        return Vec4(*(a + b for a, b in zip(self, other)))

    def __sub__(self, other: "Vec4") -> "Vec4":
        if not isinstance(other, Vec4):
            return NotImplemented
        return Vec4(*(a - b for a, b in zip(self, other)))

    def __mul__(self, other: "Vec4") -> "Vec4":
        """Component-wise product."""
        if not isinstance(other, Vec4):
            return NotImplemented
        return Vec4(*(a * b for a, b in zip(self, other)))

    def __truediv__(self, other: "Vec4") -> "Vec4":
        """Component-wise quotient."""
        if not isinstance(other, Vec4):
            return NotImplemented
        return Vec4(*(a / b for a, b in zip(self, other)))

    def length_squared(self) -> float:
        return sum(component * component for component in self)

    def length(self) -> float:
        return math.sqrt(self.length_squared())

    def normalized(self) -> "Vec4":
        """A unit-length copy; raises ZeroDivisionError for the zero vector."""
        length = self.length()
        return Vec4(*(component / length for component in self))

    def dot(self, other: "Vec4") -> float:
        return sum(a * b for a, b in zip(self, other))