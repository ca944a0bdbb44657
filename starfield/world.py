"""The game world: its objects, their collisions and its listeners."""

from __future__ import annotations

import weakref
from typing import Any, Callable, Dict, List, Protocol, Tuple


class GameWorldListener(Protocol):
    """Receives notifications about changes in a :class:`GameWorld`."""

    def on_world_updated(self, world: GameWorld) -> None: ...

    def on_object_added(self, world: GameWorld, obj: Any) -> None: ...

    def on_object_removed(self, world: GameWorld, obj: Any) -> None: ...


def _weak(obj: Any) -> Callable[[], Any]:
    try:
        return weakref.ref(obj)
    except TypeError:
        return lambda: obj


class GameWorld:
    """A rectangular world of game objects centred on the origin.

    Game objects are expected to provide ``update(t)``,
    ``collision_test(other)``, ``on_collision(objects)`` and a writable
    ``world`` attribute.
    """

    def __init__(self) -> None:
        self.width = 200
        self.height = 200
        self._objects: List[Any] = []
        self._collisions: Dict[Any, List[Any]] = {}
        self._to_remove: List[Callable[[], Any]] = []
        self._listeners: List[GameWorldListener] = []

    @property
    def objects(self) -> List[Any]:
        """A copy of the objects currently in the world, in insertion order."""
        return list(self._objects)

    def update(self, t: int) -> None:
        """Advance every object by ``t`` milliseconds and resolve collisions."""
        self._update_objects(t)
        self._update_collisions(t)
        while self._to_remove:
            ref = self._to_remove.pop(0)
            self.remove_object(ref())
        self.fire_world_updated()

    def add_object(self, obj: Any) -> None:
        self._objects.append(obj)
        self._collisions[obj] = []
        obj.world = self
        self.fire_object_added(obj)

    def remove_object(self, obj: Any) -> None:
        """Remove ``obj`` from the world; ``None`` is ignored."""
        if obj is None:
            return
        self._objects = [o for o in self._objects if o is not obj]
        self._collisions.pop(obj, None)
        obj.world = None
        self.fire_object_removed(obj)

    def flag_for_removal(self, obj: Any) -> None:
        """Schedule ``obj`` for removal at the end of the next update."""
        self._to_remove.append(_weak(obj))

    def get_collisions(self, obj: Any) -> List[Any]:
        """Return a copy of the objects ``obj`` collided with in the last update."""
        return list(self._collisions.setdefault(obj, []))

    def add_listener(self, listener: GameWorldListener) -> None:
        self._listeners.append(listener)

    def remove_listener(self, listener: GameWorldListener) -> None:
        self._listeners = [lst for lst in self._listeners if lst is not listener]

    def fire_world_updated(self) -> None:
        for listener in list(self._listeners):
            listener.on_world_updated(self)

    def fire_object_added(self, obj: Any) -> None:
        for listener in list(self._listeners):
            listener.on_object_added(self, obj)

    def fire_object_removed(self, obj: Any) -> None:
        for listener in list(self._listeners):
            listener.on_object_removed(self, obj)

    def wrap_xy(self, x: float, y: float) -> Tuple[float, float]:
        """Return ``(x, y)`` wrapped around the world's edges."""
        if self.width <= 0 or self.height <= 0:
            raise ValueError("world dimensions must be positive to wrap")
        half_w = self.width // 2
        half_h = self.height // 2
        while x > half_w:
            x -= self.width
        while y > half_h:
            y -= self.height
        while x < -half_w:
            x += self.width
        while y < -half_h:
            y += self.height
        return x, y

    def _update_objects(self, t: int) -> None:
        for obj in list(self._objects):
            obj.update(t)

    def _update_collisions(self, t: int) -> None:
        for collisions in self._collisions.values():
            collisions.clear()

        for first, first_hits in self._collisions.items():
            for second, second_hits in self._collisions.items():
                if second is not first and first.collision_test(second):
                    first_hits.append(second)
                    second_hits.append(first)

        for obj in list(self._collisions):
            if obj not in self._collisions:
                continue
            hits = list(self._collisions[obj])
            if hits:
                obj.on_collision(hits)