import math

import pytest

from starfield.world import GameWorld, GameWorldListener


class Thing:
    def __init__(self, x=0.0, y=0.0, radius=1.0):
        self.position = (x, y, 0.0)
        self.radius = radius
        self.world = None
        self.updates = []
        self.collided_with = []

    def update(self, t):
        self.updates.append(t)

    def collision_test(self, other):
        d = math.dist(self.position, other.position)
        return d <= self.radius + other.radius

    def on_collision(self, objects):
        self.collided_with.append(list(objects))


class SelfRemover(Thing):
    def on_collision(self, objects):
        super().on_collision(objects)
        self.world.remove_object(self)


class Recorder(GameWorldListener):
    def __init__(self):
        self.events = []

    def on_world_updated(self, world):
        self.events.append(("updated", None))

    def on_object_added(self, world, obj):
        self.events.append(("added", obj))

    def on_object_removed(self, world, obj):
        self.events.append(("removed", obj))


def test_add_object_sets_world_and_notifies():
    world = GameWorld()
    rec = Recorder()
    world.add_listener(rec)
    obj = Thing()
    world.add_object(obj)
    assert obj.world is world
    assert world.objects == [obj]
    assert rec.events == [("added", obj)]


def test_remove_object_clears_world_and_notifies():
    world = GameWorld()
    rec = Recorder()
    world.add_listener(rec)
    obj = Thing()
    world.add_object(obj)
    world.remove_object(obj)
    assert obj.world is None
    assert world.objects == []
    assert rec.events[-1] == ("removed", obj)


def test_remove_none_is_ignored():
    world = GameWorld()
    rec = Recorder()
    world.add_listener(rec)
    world.remove_object(None)
    assert rec.events == []


def test_update_passes_time_to_objects_and_fires_update():
    world = GameWorld()
    rec = Recorder()
    a, b = Thing(0, 0), Thing(50, 50)
    world.add_object(a)
    world.add_object(b)
    world.add_listener(rec)
    world.update(16)
    assert a.updates == [16]
    assert b.updates == [16]
    assert rec.events == [("updated", None)]


def test_collisions_are_recorded_for_both_objects():
    world = GameWorld()
    a, b, far = Thing(0, 0), Thing(1, 0), Thing(100, 100)
    for o in (a, b, far):
        world.add_object(o)
    world.update(1)
    assert set(map(id, world.get_collisions(a))) == {id(b)}
    assert set(map(id, world.get_collisions(b))) == {id(a)}
    assert world.get_collisions(far) == []
    assert a.collided_with and all(b in hits for hits in a.collided_with)
    assert far.collided_with == []


def test_collision_pairs_are_visited_in_both_directions():
    world = GameWorld()
    a, b = Thing(0, 0), Thing(1, 0)
    world.add_object(a)
    world.add_object(b)
    world.update(1)
    assert world.get_collisions(a) == [b, b]
    assert world.get_collisions(b) == [a, a]


def test_collisions_are_cleared_each_update():
    world = GameWorld()
    a, b = Thing(0, 0), Thing(1, 0)
    world.add_object(a)
    world.add_object(b)
    world.update(1)
    b.position = (100.0, 100.0, 0.0)
    world.update(1)
    assert world.get_collisions(a) == []


def test_get_collisions_of_unknown_object_registers_it():
    world = GameWorld()
    a = Thing(0, 0)
    stranger = Thing(0.5, 0)
    world.add_object(a)
    assert world.get_collisions(stranger) == []
    world.update(1)
    assert stranger in world.get_collisions(a)


def test_object_may_remove_itself_during_collision():
    world = GameWorld()
    rec = Recorder()
    world.add_listener(rec)
    a, b = SelfRemover(0, 0), Thing(1, 0)
    world.add_object(a)
    world.add_object(b)
    world.update(1)
    assert a not in world.objects
    assert a.world is None
    assert ("removed", a) in rec.events


def test_flagged_objects_removed_before_update_notification():
    world = GameWorld()
    rec = Recorder()
    a = Thing()
    world.add_object(a)
    world.add_listener(rec)
    world.flag_for_removal(a)
    assert a in world.objects
    world.update(1)
    assert a not in world.objects
    assert rec.events == [("removed", a), ("updated", None)]


def test_flagged_object_that_no_longer_exists_is_skipped():
    world = GameWorld()
    rec = Recorder()
    world.add_listener(rec)
    gone = Thing()
    world.flag_for_removal(gone)
    del gone
    world.update(1)
    assert rec.events == [("updated", None)]


def test_remove_listener_stops_notifications():
    world = GameWorld()
    rec = Recorder()
    world.add_listener(rec)
    world.remove_listener(rec)
    world.add_object(Thing())
    world.update(1)
    assert rec.events == []


def test_wrap_xy_leaves_inside_points_alone():
    world = GameWorld()
    assert world.wrap_xy(10.0, -20.0) == (10.0, -20.0)


@pytest.mark.parametrize("x,y", [(150.0, -130.0), (-450.0, 999.0), (101.0, -101.0)])
def test_wrap_xy_brings_points_inside_by_whole_widths(x, y):
    world = GameWorld()
    wx, wy = world.wrap_xy(x, y)
    assert -world.width / 2 <= wx <= world.width / 2
    assert -world.height / 2 <= wy <= world.height / 2
    assert (x - wx) % world.width == 0
    assert (y - wy) % world.height == 0


def test_wrap_xy_rejects_empty_world():
    world = GameWorld()
    world.width = 0
    with pytest.raises(ValueError):
        world.wrap_xy(5.0, 5.0)