"""A bounded list of placed model instances."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any

from islandsim.vectors import WHITE, Color, Vector3

MAX_INSTANCES = 1024


class SceneFullError(Exception):
    """Raised when adding an instance to a scene that is at capacity."""


@dataclass(frozen=True)
class Instance:
    asset: Any
    pos: Vector3
    scale: Vector3 = field(default_factory=lambda: Vector3(1.0, 1.0, 1.0))
    rot_axis: Vector3 = field(default_factory=lambda: Vector3(0.0, 1.0, 0.0))
    rot_angle_deg: float = 0.0
    tint: Color = WHITE


class Scene:
    """Holds up to `capacity` instances in insertion order."""

    def __init__(self, capacity: int = MAX_INSTANCES) -> None:
        if capacity <= 0:
            raise ValueError(f"capacity must be positive, got {capacity}")
        self.capacity = capacity
        self._instances: list[Instance] = []

    def reset(self) -> None:
        self._instances.clear()

    def add(
        self,
        asset: Any,
        pos: Vector3,
        scale: Vector3 = Vector3(1.0, 1.0, 1.0),
        rot_axis: Vector3 = Vector3(0.0, 1.0, 0.0),
        rot_angle_deg: float = 0.0,
        tint: Color = WHITE,
    ) -> int:
        """Place an instance and return its index."""
        if len(self._instances) >= self.capacity:
            raise SceneFullError(f"scene already holds {self.capacity} instances")
        self._instances.append(Instance(asset, pos, scale, rot_axis, rot_angle_deg, tint))
        return len(self._instances) - 1

    def __len__(self) -> int:
        return len(self._instances)

    def __iter__(self) -> Iterator[Instance]:
        return iter(self._instances)