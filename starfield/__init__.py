"""Game logic for 2D arcade games: world, collisions, scoring, images, shapes, sprites, timers and input routing."""

__version__ = "0.1.0"