"""Quaternions over three-component vectors, used for rotations."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Sequence, Tuple

Vector3 = Tuple[float, float, float]


def _vec(values: Sequence[float]) -> Vector3:
    x, y, z = values
    return (float(x), float(y), float(z))


def _add(a: Vector3, b: Vector3) -> Vector3:
    return (a[0] + b[0], a[1] + b[1], a[2] + b[2])


def _sub(a: Vector3, b: Vector3) -> Vector3:
    return (a[0] - b[0], a[1] - b[1], a[2] - b[2])


def _scale(a: Vector3, f: float) -> Vector3:
    return (a[0] * f, a[1] * f, a[2] * f)


def _dot(a: Vector3, b: Vector3) -> float:
    return a[0] * b[0] + a[1] * b[1] + a[2] * b[2]


def _cross(a: Vector3, b: Vector3) -> Vector3:
    return (
        a[1] * b[2] - a[2] * b[1],
        a[2] * b[0] - a[0] * b[2],
        a[0] * b[1] - a[1] * b[0],
    )


@dataclass(frozen=True)
class Quaternion:
    """A real part ``w`` and an imaginary vector ``v``; defaults to the unit quaternion."""

    w: float = 1.0
    v: Vector3 = field(default=(0.0, 0.0, 0.0))

    def __post_init__(self) -> None:
        object.__setattr__(self, "w", float(self.w))
        object.__setattr__(self, "v", _vec(self.v))

    @classmethod
    def from_axis_angle(cls, axis: Sequence[float], angle: float) -> Quaternion:
        """Build a rotation quaternion from an axis (normalised here) and an angle."""
        a = _vec(axis)
        length = math.sqrt(_dot(a, a))
        unit_axis = _scale(a, 1.0 / length)
        return cls(math.cos(angle), _scale(unit_axis, math.sin(angle / 2)))

    @classmethod
    def from_vector(cls, vector: Sequence[float]) -> Quaternion:
        """Build a pure quaternion with a zero real part."""
        return cls(0.0, vector)

    def __add__(self, other: Quaternion) -> Quaternion:
        if not isinstance(other, Quaternion):
            return NotImplemented
        return Quaternion(self.w + other.w, _add(self.v, other.v))

    def __sub__(self, other: Quaternion) -> Quaternion:
        if not isinstance(other, Quaternion):
            return NotImplemented
        return Quaternion(self.w - other.w, _sub(self.v, other.v))

    def __mul__(self, other: Quaternion) -> Quaternion:
        if not isinstance(other, Quaternion):
            return NotImplemented
        return self.cross(other)

    def __truediv__(self, factor: float) -> Quaternion:
        return Quaternion(self.w / factor, _scale(self.v, 1.0 / factor))

    def dot(self, other: Quaternion) -> float:
        return self.w * other.w + _dot(self.v, other.v)

    def cross(self, other: Quaternion) -> Quaternion:
        """Hamilton product of this quaternion with ``other``."""
        w = self.w * other.w - _dot(self.v, other.v)
        v = _add(
            _add(_scale(other.v, self.w), _scale(self.v, other.w)),
            _cross(self.v, other.v),
        )
        return Quaternion(w, v)

    def conjugate(self) -> Quaternion:
        return Quaternion(self.w, _scale(self.v, -1.0))

    def inverse(self) -> Quaternion:
        """The conjugate divided by the norm."""
        return self.conjugate() / self.norm()

    def norm(self) -> float:
        return math.sqrt(self.w * self.w + _dot(self.v, self.v))

    def unit(self) -> Quaternion:
        return self / self.norm()

    def rotate_vector(self, vector: Sequence[float]) -> Vector3:
        """Apply this quaternion to ``vector`` as q * v * conj(q)."""
        result = self.cross(Quaternion.from_vector(vector)).cross(self.conjugate())
        return result.v