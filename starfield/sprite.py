"""Frame-by-frame animation timing for sprites."""

from __future__ import annotations

_MILLIS_PER_FRAME = 1000 // 12


class Sprite:
    """A ``width`` by ``height`` sprite cycling through ``frames`` frames at 12 per second."""

    def __init__(self, width: int, height: int, frames: int, loop: bool = True) -> None:
        if frames <= 0:
            raise ValueError("a sprite needs at least one frame")
        self.width = width
        self.height = height
        self.offset_x = width // 2
        self.offset_y = height // 2
        self.frames = frames
        self.loop = loop
        self.animating = True
        self.frame_millis = 0
        self.millis_per_frame = _MILLIS_PER_FRAME
        self._current_frame = 0

    @property
    def current_frame(self) -> int:
        return self._current_frame

    @current_frame.setter
    def current_frame(self, frame: int) -> None:
        self._current_frame = frame % self.frames

    def update(self, t: int) -> None:
        """Advance the animation clock by ``t`` milliseconds, at most one frame per call."""
        self.frame_millis += t
        if self.frame_millis < self.millis_per_frame:
            return
        self.frame_millis %= self.millis_per_frame
        self._current_frame += 1
        if self._current_frame >= self.frames:
            if self.loop:
                self._current_frame %= self.frames
            else:
                self._current_frame = 0
                self.animating = False