import math

import pytest

from islandsim.vectors import Vector3
from islandsim.world import (
    BallData,
    GameWorld,
    ObjectType,
    TreeData,
    WorldFullError,
)


def test_ids_start_at_one_and_increase():
    world = GameWorld()
    ids = [world.create_object(ObjectType.STATIC) for _ in range(3)]
    assert ids == [1, 2, 3]
    assert len(world) == 3


def test_new_object_defaults():
    world = GameWorld()
    obj = world.get(world.create_object(ObjectType.STATIC))
    assert obj.active is True
    assert obj.scale == Vector3(1.0, 1.0, 1.0)
    assert obj.type is ObjectType.STATIC


def test_world_full_raises():
    world = GameWorld(max_objects=2)
    world.create_object(ObjectType.STATIC)
    world.create_object(ObjectType.STATIC)
    with pytest.raises(WorldFullError):
        world.create_object(ObjectType.BALL)
    assert len(world) == 2


def test_invalid_capacity():
    with pytest.raises(ValueError):
        GameWorld(max_objects=0)


def test_get_ignores_inactive_and_missing():
    world = GameWorld()
    oid = world.create_object(ObjectType.STATIC)
    world.get(oid).active = False
    assert world.get(oid) is None
    assert world.get(99) is None


def test_destroy_moves_last_into_slot():
    world = GameWorld()
    for _ in range(3):
        world.create_object(ObjectType.STATIC)
    world.destroy(1)
    assert [o.id for o in world] == [3, 2]
    world.destroy(2)
    assert [o.id for o in world] == [3]


def test_destroy_unknown_is_noop():
    world = GameWorld()
    world.create_object(ObjectType.STATIC)
    world.destroy(42)
    assert [o.id for o in world] == [1]


def test_reset_restarts_ids():
    world = GameWorld()
    world.create_object(ObjectType.STATIC)
    world.create_object(ObjectType.STATIC)
    world.reset()
    assert len(world) == 0
    assert world.create_object(ObjectType.TREE) == 1


def test_create_ball_fields():
    world = GameWorld()
    model = object()
    oid = world.create_ball(Vector3(5, 1, 1), model, 0.5, 1.0, 0.7, 0.95)
    obj = world.get(oid)
    assert obj.type is ObjectType.BALL
    assert obj.model is model
    assert obj.position == Vector3(5, 1, 1)
    assert obj.data == BallData(Vector3(0, 0, 0), 0.5, 0.7, 0.95, 1.0, True)


def test_create_tree_and_static():
    world = GameWorld()
    tid = world.create_tree(Vector3(1, 0, 1), "tree", 2.0, 0.3)
    sid = world.create_static_object(Vector3(0, 0, 0), "rock")
    assert world.get(tid).data == TreeData(0.0, 2.0, 0.3, 1.0)
    assert world.get(sid).data is None
    assert world.get(sid).model == "rock"


def test_falling_ball_accelerates_down():
    world = GameWorld()
    oid = world.create_ball(Vector3(0, 5, 0), None, 0.5, 1.0, 0.7, 0.0)
    world.update_physics(0.1)
    obj = world.get(oid)
    assert obj.data.velocity.y < 0
    assert obj.position.y < 5


def test_ball_bounces_off_ground():
    world = GameWorld()
    oid = world.create_ball(Vector3(0, 0.5, 0), None, 0.5, 1.0, 0.7, 0.0)
    world.get(oid).data.velocity = Vector3(2.0, 0.0, 0.0)
    world.update_physics(0.1)
    obj = world.get(oid)
    assert obj.position.y == 0.5
    assert obj.data.velocity.y > 0
    assert obj.data.velocity.x == 2.0


def test_friction_slows_on_ground_contact():
    world = GameWorld()
    oid = world.create_ball(Vector3(0, 0.5, 0), None, 0.5, 1.0, 0.0, 0.95)
    world.get(oid).data.velocity = Vector3(2.0, 0.0, -2.0)
    world.update_physics(0.1)
    vel = world.get(oid).data.velocity
    assert 0 < vel.x < 2.0
    assert -2.0 < vel.z < 0
    assert vel.y == 0


def test_ball_without_gravity_stays_still():
    world = GameWorld()
    oid = world.create_ball(Vector3(1, 3, 1), None, 0.5, 1.0, 0.7, 0.5)
    world.get(oid).data.use_gravity = False
    world.update_physics(0.5)
    assert world.get(oid).position == Vector3(1, 3, 1)


def test_trees_sway():
    world = GameWorld()
    oid = world.create_tree(Vector3(0, 0, 0), None, math.pi, 0.25)
    world.update_trees(0.5)
    obj = world.get(oid)
    assert obj.data.sway_phase == pytest.approx(math.pi / 2)
    assert obj.rotation.z == pytest.approx(0.25)


def test_physics_ignores_trees_and_trees_ignore_balls():
    world = GameWorld()
    tid = world.create_tree(Vector3(0, 4, 0), None, 1.0, 1.0)
    bid = world.create_ball(Vector3(0, 4, 0), None, 0.5, 1.0, 0.5, 0.5)
    world.update_physics(0.1)
    world.update_trees(0.1)
    assert world.get(tid).position == Vector3(0, 4, 0)
    assert world.get(bid).rotation == Vector3(0, 0, 0)