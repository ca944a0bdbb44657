"""Listeners that keep track of the player's lives and score."""

from __future__ import annotations

from typing import Any, List, Optional, Protocol

from starfield.gametype import GameObjectType
from starfield.world import GameWorld, GameWorldListener

_SPACESHIP = GameObjectType("Spaceship")
_ASTEROID = GameObjectType("Asteroid")
_ASTEROID_POINTS = 10


class _PlayerListener(Protocol):
    def on_player_killed(self, lives_left: int) -> None: ...


class _ScoreListener(Protocol):
    def on_score_changed(self, score: int) -> None: ...


class Player(GameWorldListener):
    """Counts the player's lives, losing one whenever a spaceship is removed."""

    def __init__(self) -> None:
        self._lives = 0
        self._listeners: List[_PlayerListener] = []
        self._world: Optional[GameWorld] = None

    @property
    def lives(self) -> int:
        return self._lives

    @property
    def world(self) -> Optional[GameWorld]:
        """The world that most recently notified this listener."""
        return self._world

    def on_world_updated(self, world: GameWorld) -> None:
        self._world = world

    def on_object_added(self, world: GameWorld, obj: Any) -> None:
        self._world = world

    def on_object_removed(self, world: GameWorld, obj: Any) -> None:
        self._world = world
        if obj.type == _SPACESHIP:
            self._lives -= 1
            self.fire_player_killed()

    def add_listener(self, listener: _PlayerListener) -> None:
        self._listeners.append(listener)

    def set_lives(self, lives: int) -> None:
        """Set the number of lives and tell listeners straight away."""
        self._lives = lives
        self.fire_player_killed()

    def add_life(self) -> None:
        self._lives += 1

    def fire_player_killed(self) -> None:
        for listener in list(self._listeners):
            listener.on_player_killed(self._lives)


class ScoreKeeper(GameWorldListener):
    """Adds points to the score whenever an asteroid is removed."""

    def __init__(self) -> None:
        self._score = 0
        self._listeners: List[_ScoreListener] = []
        self._world: Optional[GameWorld] = None

    @property
    def score(self) -> int:
        return self._score

    @property
    def world(self) -> Optional[GameWorld]:
        """The world that most recently notified this listener."""
        return self._world

    def on_world_updated(self, world: GameWorld) -> None:
        self._world = world

    def on_object_added(self, world: GameWorld, obj: Any) -> None:
        self._world = world

    def on_object_removed(self, world: GameWorld, obj: Any) -> None:
        self._world = world
        if obj.type == _ASTEROID:
            self._score += _ASTEROID_POINTS
            self.fire_score_changed()

    def add_listener(self, listener: _ScoreListener) -> None:
        self._listeners.append(listener)

    def reset_score(self) -> None:
        self._score = 0
        self.fire_score_changed()

    def fire_score_changed(self) -> None:
        for listener in list(self._listeners):
            listener.on_score_changed(self._score)