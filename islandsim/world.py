"""Game objects held in a bounded world, with ball physics and tree sway."""

from __future__ import annotations

import math
from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, Union

from islandsim.vectors import WHITE, Color, Vector3

MAX_OBJECTS = 500
GRAVITY = -9.81
GROUND_Y = 0.0


class WorldFullError(Exception):
    """Raised when creating an object in a world that is at capacity."""


class ObjectType(IntEnum):
    STATIC = 0
    BALL = 1
    TREE = 2


@dataclass
class BallData:
    velocity: Vector3 = field(default_factory=Vector3)
    radius: float = 0.0
    bounce_factor: float = 0.0
    friction: float = 0.0
    mass: float = 0.0
    use_gravity: bool = False


@dataclass
class TreeData:
    sway_phase: float = 0.0
    sway_speed: float = 0.0
    sway_amount: float = 0.0
    height: float = 0.0


@dataclass
class GameObject:
    id: int
    type: ObjectType
    position: Vector3 = field(default_factory=Vector3)
    rotation: Vector3 = field(default_factory=Vector3)
    rotation_axis: float = 0.0
    scale: Vector3 = field(default_factory=lambda: Vector3(1.0, 1.0, 1.0))
    model: Any = None
    tint: Color = WHITE
    active: bool = True
    data: Union[BallData, TreeData, None] = None


class GameWorld:
    """A bounded collection of game objects with stable, increasing ids."""

    def __init__(self, max_objects: int = MAX_OBJECTS) -> None:
        if max_objects <= 0:
            raise ValueError(f"max_objects must be positive, got {max_objects}")
        self.max_objects = max_objects
        self._objects: list[GameObject] = []
        self._next_id = 1

    def reset(self) -> None:
        """Remove every object and restart ids at 1."""
        self._objects.clear()
        self._next_id = 1

    def create_object(self, object_type: ObjectType) -> int:
        """Create an active object of the given type and return its id."""
        if len(self._objects) >= self.max_objects:
            raise WorldFullError(f"cannot create object: world holds {self.max_objects}")
        obj = GameObject(id=self._next_id, type=ObjectType(object_type))
        self._next_id += 1
        self._objects.append(obj)
        return obj.id

    def get(self, object_id: int) -> GameObject | None:
        """Return the active object with this id, or None."""
        return next(
            (obj for obj in self._objects if obj.id == object_id and obj.active), None
        )

    def destroy(self, object_id: int) -> None:
        """Remove the object with this id; the last object takes its slot."""
        for index, obj in enumerate(self._objects):
            if obj.id == object_id:
                last = self._objects.pop()
                if index < len(self._objects):
                    self._objects[index] = last
                return

    def create_ball(
        self,
        position: Vector3,
        model: Any,
        radius: float,
        mass: float,
        bounce: float,
        friction: float,
    ) -> int:
        object_id = self.create_object(ObjectType.BALL)
        obj = self._objects[-1]
        obj.position = position
        obj.model = model
        obj.data = BallData(
            velocity=Vector3(0.0, 0.0, 0.0),
            radius=radius,
            bounce_factor=bounce,
            friction=friction,
            mass=mass,
            use_gravity=True,
        )
        return object_id

    def create_tree(
        self, position: Vector3, model: Any, sway_speed: float, sway_amount: float
    ) -> int:
        object_id = self.create_object(ObjectType.TREE)
        obj = self._objects[-1]
        obj.position = position
        obj.model = model
        obj.data = TreeData(
            sway_phase=0.0, sway_speed=sway_speed, sway_amount=sway_amount, height=1.0
        )
        return object_id

    def create_static_object(self, position: Vector3, model: Any) -> int:
        object_id = self.create_object(ObjectType.STATIC)
        obj = self._objects[-1]
        obj.position = position
        obj.model = model
        return object_id

    def _active(self, object_type: ObjectType) -> Iterator[GameObject]:
        return (o for o in self._objects if o.active and o.type == object_type)

    def update_physics(self, dt: float) -> None:
        """Apply gravity, integrate positions and bounce balls off the ground."""
        for obj in self._active(ObjectType.BALL):
            ball = obj.data
            if not isinstance(ball, BallData):
                continue
            vel = ball.velocity
            if ball.use_gravity:
                vel = Vector3(vel.x, vel.y + GRAVITY * dt, vel.z)
            pos = obj.position + vel * dt
            if pos.y - ball.radius <= GROUND_Y:
                pos = Vector3(pos.x, GROUND_Y + ball.radius, pos.z)
                damping = 1.0 - ball.friction * dt
                vel = Vector3(
                    vel.x * damping, -vel.y * ball.bounce_factor, vel.z * damping
                )
            ball.velocity = vel
            obj.position = pos

    def update_trees(self, dt: float) -> None:
        """Advance each tree's sway and set its z rotation from it."""
        for obj in self._active(ObjectType.TREE):
            tree = obj.data
            if not isinstance(tree, TreeData):
                continue
            tree.sway_phase += tree.sway_speed * dt
            rot = obj.rotation
            obj.rotation = Vector3(
                rot.x, rot.y, math.sin(tree.sway_phase) * tree.sway_amount
            )

    def __len__(self) -> int:
        return len(self._objects)

    def __iter__(self) -> Iterator[GameObject]:
        return iter(self._objects)