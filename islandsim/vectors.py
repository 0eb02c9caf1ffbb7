"""Small value types shared by the simulation: vectors, colours and animals."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Vector3:
    """An immutable three-component vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __add__(self, other: Vector3) -> Vector3:
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector3) -> Vector3:
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, factor: float | Vector3) -> Vector3:
        """Scale by a number, or multiply component-wise by another vector."""
        if isinstance(factor, Vector3):
            return Vector3(self.x * factor.x, self.y * factor.y, self.z * factor.z)
        if isinstance(factor, (int, float)) and not isinstance(factor, bool):
            return Vector3(self.x * factor, self.y * factor, self.z * factor)
        return NotImplemented


@dataclass(frozen=True)
class Color:
    """An 8-bit-per-channel RGBA colour."""

    r: int
    g: int
    b: int
    a: int = 255

    def __post_init__(self) -> None:
        for name in ("r", "g", "b", "a"):
            value = getattr(self, name)
            if not 0 <= value <= 255:
                raise ValueError(f"colour channel {name}={value} is outside 0..255")

    def normalized(self) -> tuple[float, float, float, float]:
        """Return the channels scaled to the range 0.0..1.0."""
        return (self.r / 255, self.g / 255, self.b / 255, self.a / 255)


WHITE = Color(255, 255, 255, 255)
RAYWHITE = Color(245, 245, 245, 255)


@dataclass
class Animal:
    """A moving creature with a speed limit and a collision radius."""

    pos: Vector3 = field(default_factory=Vector3)
    vel: Vector3 = field(default_factory=Vector3)
    max_speed: float = 0.0
    radius: float = 0.0