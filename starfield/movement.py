"""Steering of a game object by thrust and rotation."""

from __future__ import annotations

import math
from typing import Any

DEG2RAD = math.pi / 180


class MovementController:
    """Drives a game object's ``acceleration`` and ``rotation``.

    The object is expected to expose ``angle`` in degrees and writable
    ``acceleration`` and ``rotation`` attributes.
    """

    def __init__(self, obj: Any) -> None:
        self._object = obj
        self._acceleration = 0.0

    @property
    def acceleration(self) -> float:
        """The magnitude of the last acceleration applied."""
        return self._acceleration

    def accelerate(self, a: float) -> None:
        """Accelerate the object by ``a`` along its current heading."""
        angle = DEG2RAD * self._object.angle
        self._object.acceleration = (math.cos(angle) * a, math.sin(angle) * a, 0.0)
        self._acceleration = a

    def rotate(self, r: float) -> None:
        """Set the object's rotation rate and re-apply the current thrust."""
        self._object.rotation = r
        self.accelerate(self._acceleration)