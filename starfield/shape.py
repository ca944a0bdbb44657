"""Line shapes described by a colour and a list of 2D points."""

from __future__ import annotations

from typing import List, Optional, Tuple

Point = Tuple[float, float]
Colour = Tuple[float, float, float]


def _parse(text: str) -> Tuple[bool, Colour, List[Point]]:
    tokens = text.split()
    if len(tokens) < 4:
        raise ValueError("shape needs a mode and an RGB colour")
    loop = tokens[0] == "loop"
    r, g, b = (float(tok) for tok in tokens[1:4])
    coords = [float(tok) for tok in tokens[4:]]
    if len(coords) % 2:
        raise ValueError("shape has an unpaired coordinate")
    points = list(zip(coords[0::2], coords[1::2]))
    return loop, (r, g, b), points


def parse_shape(text: str) -> Shape:
    """Build a shape from text: ``loop`` or another word, an RGB colour, then x y pairs."""
    shape = Shape()
    shape.loop, shape.rgb, shape.points = _parse(text)
    return shape


class Shape:
    """A closed loop or open strip of points drawn in one colour."""

    def __init__(self, filename: Optional[str] = None) -> None:
        self.loop = False
        self.rgb: Colour = (0.0, 0.0, 0.0)
        self.points: List[Point] = []
        if filename is not None:
            self.load_shape(filename)

    def load_shape(self, filename: str) -> None:
        """Read a shape file; its points are appended to those already held."""
        with open(filename, encoding="utf-8") as handle:
            loop, rgb, points = _parse(handle.read())
        self.loop = loop
        self.rgb = rgb
        self.points.extend(points)