"""Timers keyed by a rolling integer, delivered to registered listeners."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, List, Tuple

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


class TimerListener(ABC):
    """Something that wants to be told when a timer it set has expired."""

    @abstractmethod
    def on_timer(self, value: int) -> None:
        """Called with the value given when the timer was set."""


@dataclass(frozen=True)
class _Timer:
    listener: Any
    value: int
    msecs: int


class TimerSession:
    """Hands out timer keys and dispatches expired timers to their listeners.

    Each key is used once: after its timer fires it is forgotten.
    """

    def __init__(self) -> None:
        self._timers: Dict[int, _Timer] = {}
        self._last_key = _INT_MIN
        self._idle_enabled = False

    @property
    def idle_function_enabled(self) -> bool:
        return self._idle_enabled

    def enable_idle_function(self) -> None:
        self._idle_enabled = True

    def disable_idle_function(self) -> None:
        self._idle_enabled = False

    def set_timer(self, msecs: int, listener: Any, value: int = 0) -> int:
        """Register ``listener`` to receive ``value`` after ``msecs``; return the key."""
        if msecs < 0:
            raise ValueError("timer delay must not be negative")
        self._last_key += 1
        if self._last_key == _INT_MAX:
            self._last_key = _INT_MIN
        key = self._last_key
        self._timers[key] = _Timer(listener, value, msecs)
        return key

    def on_timer(self, key: int) -> bool:
        """Fire the timer registered under ``key``; return whether one was found."""
        timer = self._timers.get(key)
        if timer is None:
            return False
        timer.listener.on_timer(timer.value)
        self._timers.pop(key, None)
        return True

    def pending(self) -> List[Tuple[int, int]]:
        """The ``(key, msecs)`` pairs of timers not yet fired, ordered by key."""
        return sorted((key, timer.msecs) for key, timer in self._timers.items())