"""A window that dispatches input events, and one that drives a game world."""

from __future__ import annotations

from typing import Any, List, Optional, Protocol, Tuple

ESCAPE = 27
KEY_F1 = 1


class _KeyboardListener(Protocol):
    def on_key_pressed(self, key: int, x: int, y: int) -> None: ...
    def on_key_released(self, key: int, x: int, y: int) -> None: ...
    def on_special_key_pressed(self, key: int, x: int, y: int) -> None: ...
    def on_special_key_released(self, key: int, x: int, y: int) -> None: ...


class _MouseListener(Protocol):
    def on_mouse_dragged(self, x: int, y: int) -> None: ...
    def on_mouse_button(self, button: int, state: int, x: int, y: int) -> None: ...
    def on_mouse_moved(self, x: int, y: int) -> None: ...


class _WindowListener(Protocol):
    def on_window_reshaped(self, width: int, height: int) -> None: ...
    def on_window_visible(self, visible: int) -> None: ...


def _without(items: List[Any], item: Any) -> List[Any]:
    return [i for i in items if i is not item]


class Window:
    """A titled window with a size, a position and listeners for its events.

    Pressing Escape ends the program by raising ``SystemExit(0)``; F1
    toggles fullscreen mode.
    """

    def __init__(self, width: int, height: int, x: int, y: int, title: str) -> None:
        self.width = width
        self.height = height
        self.x = x
        self.y = y
        self.title = title
        self.fullscreen = False
        self._saved: Tuple[int, int, int, int] = (width, height, x, y)
        self._keyboard_listeners: List[_KeyboardListener] = []
        self._mouse_listeners: List[_MouseListener] = []
        self._window_listeners: List[_WindowListener] = []

    def on_idle(self, dt: int) -> None:
        """Hook called from the idle loop with the milliseconds elapsed."""

    def on_key_pressed(self, key: int, x: int, y: int) -> None:
        if key == ESCAPE:
            raise SystemExit(0)
        for listener in list(self._keyboard_listeners):
            listener.on_key_pressed(key, x, y)

    def on_key_released(self, key: int, x: int, y: int) -> None:
        for listener in list(self._keyboard_listeners):
            listener.on_key_released(key, x, y)

    def on_special_key_pressed(self, key: int, x: int, y: int) -> None:
        if key == KEY_F1:
            self.set_fullscreen(not self.fullscreen)
        for listener in list(self._keyboard_listeners):
            listener.on_special_key_pressed(key, x, y)

    def on_special_key_released(self, key: int, x: int, y: int) -> None:
        for listener in list(self._keyboard_listeners):
            listener.on_special_key_released(key, x, y)

    def on_mouse_dragged(self, x: int, y: int) -> None:
        for listener in list(self._mouse_listeners):
            listener.on_mouse_dragged(x, y)

    def on_mouse_button(self, button: int, state: int, x: int, y: int) -> None:
        for listener in list(self._mouse_listeners):
            listener.on_mouse_button(button, state, x, y)

    def on_mouse_moved(self, x: int, y: int) -> None:
        for listener in list(self._mouse_listeners):
            listener.on_mouse_moved(x, y)

    def on_window_reshaped(self, width: int, height: int) -> None:
        """Record the new size and tell the window listeners."""
        self.width = width
        self.height = height
        for listener in list(self._window_listeners):
            listener.on_window_reshaped(width, height)

    def on_window_visible(self, visible: int) -> None:
        for listener in list(self._window_listeners):
            listener.on_window_visible(visible)

    def set_fullscreen(self, fullscreen: bool) -> None:
        """Enter or leave fullscreen; leaving restores the saved size and position."""
        if fullscreen == self.fullscreen:
            return
        self.fullscreen = fullscreen
        if fullscreen:
            self._saved = (self.width, self.height, self.x, self.y)
        else:
            self.width, self.height, self.x, self.y = self._saved

    def add_keyboard_listener(self, listener: _KeyboardListener) -> None:
        self._keyboard_listeners.append(listener)

    def remove_keyboard_listener(self, listener: _KeyboardListener) -> None:
        self._keyboard_listeners = _without(self._keyboard_listeners, listener)

    def add_mouse_listener(self, listener: _MouseListener) -> None:
        self._mouse_listeners.append(listener)

    def remove_mouse_listener(self, listener: _MouseListener) -> None:
        self._mouse_listeners = _without(self._mouse_listeners, listener)

    def add_window_listener(self, listener: _WindowListener) -> None:
        self._window_listeners.append(listener)

    def remove_window_listener(self, listener: _WindowListener) -> None:
        self._window_listeners = _without(self._window_listeners, listener)


class GameWindow(Window):
    """A window that updates a game world and a display and keeps them sized.

    The world is sized to the window divided by ``ZOOM_LEVEL``; the display
    is expected to provide ``reshape(width, height)`` and ``update(dt)``.
    """

    ZOOM_LEVEL = 3

    def __init__(self, width: int, height: int, x: int, y: int, title: str) -> None:
        super().__init__(width, height, x, y, title)
        self.world: Optional[Any] = None
        self.display: Optional[Any] = None

    def on_idle(self, dt: int) -> None:
        """Advance the world and the display by ``dt`` milliseconds."""
        super().on_idle(dt)
        if self.world is not None:
            self.world.update(dt)
        if self.display is not None:
            self.display.update(dt)

    def on_window_reshaped(self, width: int, height: int) -> None:
        super().on_window_reshaped(width, height)
        self.update_world_size()
        self.update_display_size()

    def set_world(self, world: Any) -> None:
        self.world = world
        self.update_world_size()

    def set_display(self, display: Any) -> None:
        self.display = display
        self.update_display_size()

    def update_world_size(self) -> None:
        if self.world is not None:
            self.world.width = self.width // self.ZOOM_LEVEL
            self.world.height = self.height // self.ZOOM_LEVEL

    def update_display_size(self) -> None:
        if self.display is not None:
            self.display.reshape(self.width, self.height)