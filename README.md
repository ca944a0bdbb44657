# starfield

Game logic for small 2D arcade games in the style of an asteroids shooter.
It supplies the world, collision, scoring, animation and event-routing
pieces that sit behind a window toolkit, without depending on one.

## Modules

- `starfield.gametype` — `hash_name(type_name)` computes a 32-bit checksum
  of a name (`None` gives 0); whole 16-byte blocks of the name are folded to
  lower case before summing, the remaining bytes are summed as they are.
  `GameObjectType` holds a `type_name` and its `type_id`, and compares,
  orders and hashes by `type_id`.
- `starfield.quaternion` — `Quaternion`, an immutable real part `w` and
  vector `v`, with `+`, `-`, `*` (Hamilton product, also `cross`), division
  by a number, `dot`, `conjugate`, `inverse`, `norm`, `unit`,
  `from_axis_angle`, `from_vector` and `rotate_vector`.
- `starfield.bounding` — `BoundingShape`, which holds a weak reference to
  its `game_object`, and `BoundingSphere`, whose `collision_test` is true
  when two spheres touch or overlap. The game object must have a
  `position` of three numbers.
- `starfield.world` — `GameWorld` (200 × 200 by default). `update(t)`
  calls `update(t)` on every object, records collisions found with each
  object's `collision_test`, calls `on_collision(objects)` on objects that
  collided, removes objects passed to `flag_for_removal`, then notifies
  listeners. `get_collisions`, `add_object`, `remove_object`,
  `add_listener`/`remove_listener` and `wrap_xy(x, y)` complete it.
  `GameWorldListener` is the listener protocol.
- `starfield.scoring` — `Player` counts `lives` and loses one when an
  object whose `type` equals `GameObjectType("Spaceship")` is removed;
  `ScoreKeeper` adds 10 to `score` when an `"Asteroid"` is removed. Both
  are world listeners and notify their own listeners
  (`on_player_killed(lives)`, `on_score_changed(score)`).
- `starfield.movement` — `MovementController` sets an object's
  `acceleration` along its heading (`angle` in degrees) and its `rotation`.
- `starfield.image` — `Image`, RGBA bytes in memory, with `from_region`
  and `set_transparent_colour`; `ImageManager` keeps regions cut out by
  `create_image_from_image` under a name (the first one registered wins)
  and returns them from `get_image_by_name`.
- `starfield.shape` — `Shape` and `parse_shape(text)`: the word `loop` (or
  any other word for an open strip), an RGB colour, then x y pairs.
  `Shape(filename)` and `load_shape` read the same format from a file.
- `starfield.sprite` — `Sprite`, frame timing at 12 frames per second,
  looping or stopping after the last frame.
- `starfield.timers` — `TimerSession` hands out rolling integer keys from
  `set_timer(msecs, listener, value)`, lists them with `pending()`, and
  `on_timer(key)` delivers `value` to the listener's `on_timer` once.
  `TimerListener` is the abstract listener.
- `starfield.window` — `Window` routes keyboard, mouse and window events to
  listeners; Escape raises `SystemExit(0)` and F1 toggles `fullscreen`.
  `GameWindow` updates a world and a display in `on_idle(dt)` and sizes
  the world to the window divided by `ZOOM_LEVEL` (3).

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Example

```python
from starfield.world import GameWorld
from starfield.scoring import ScoreKeeper

world = GameWorld()
keeper = ScoreKeeper()
world.add_listener(keeper)

x, y = world.wrap_xy(150.0, -120.0)   # (-50.0, 80.0) in a 200 x 200 world
```

## What it does not do

- It draws nothing: there is no rendering, no window toolkit binding and
  no display class; `GameWindow` only calls `update` and `reshape` on
  whatever display object it is given.
- `Image` does not load image files; images are built in memory.
- `TimerSession` keeps no clock; the caller decides when a timer is due
  and calls `on_timer(key)`.
- It has no spaceship, asteroid or bullet classes and no command to start
  a game; game objects are supplied by the program using the package.