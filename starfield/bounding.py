"""Bounding shapes attached to game objects for collision testing."""

from __future__ import annotations

import weakref
from typing import Any, Optional

from starfield.gametype import GameObjectType


class BoundingShape:
    """A typed shape that refers weakly to the game object it bounds.

    The game object is expected to expose a ``position`` of three numbers.
    """

    def __init__(self, type_name: str, game_object: Any = None) -> None:
        self._type = GameObjectType(type_name)
        self._ref: Optional[weakref.ReferenceType] = None
        self.game_object = game_object

    @property
    def type(self) -> GameObjectType:
        return self._type

    @property
    def game_object(self) -> Any:
        """The bounded object, or ``None`` if unset or no longer alive."""
        return self._ref() if self._ref is not None else None

    @game_object.setter
    def game_object(self, obj: Any) -> None:
        self._ref = weakref.ref(obj) if obj is not None else None

    def collision_test(self, other: BoundingShape) -> bool:
        return False


class BoundingSphere(BoundingShape):
    """A sphere of a given radius centred on its game object's position."""

    def __init__(self, game_object: Any = None, radius: float = 0.0) -> None:
        super().__init__("BoundingSphere", game_object)
        self.radius = float(radius)

    def _position(self) -> tuple:
        obj = self.game_object
        if obj is None:
            raise ValueError("bounding sphere has no game object")
        x, y, z = obj.position
        return (x, y, z)

    def collision_test(self, other: BoundingShape) -> bool:
        """True when the spheres touch or overlap."""
        if self.type != other.type:
            return False
        assert isinstance(other, BoundingSphere)
        p1 = self._position()
        p2 = other._position()
        distance_sqr = sum((b - a) ** 2 for a, b in zip(p1, p2))
        reach = self.radius + other.radius
        return distance_sqr <= reach ** 2