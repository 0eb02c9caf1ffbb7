"""Light sources and the shader uniform values that describe them."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any

from islandsim.vectors import Color, Vector3

MAX_LIGHTS = 4
VERTEX_SHADER = "shaders/lighting.vs"
FRAGMENT_SHADER = "shaders/lighting.fs"
POINT_LIGHT_POSITION = Vector3(3.0, 2.0, 3.0)
POINT_LIGHT_COLOR = Color(255, 200, 150, 255)


class LightType(IntEnum):
    DIRECTIONAL = 0
    POINT = 1


@dataclass
class Light:
    """A light bound to a shader slot; index is None when no slot was free."""

    type: LightType = LightType.DIRECTIONAL
    enabled: bool = False
    position: Vector3 = field(default_factory=Vector3)
    target: Vector3 = field(default_factory=Vector3)
    color: Color = field(default_factory=lambda: Color(0, 0, 0, 0))
    attenuation: float = 0.0
    index: int | None = None

    def uniform_values(self) -> dict[str, Any]:
        """Return the shader uniforms for this light, keyed by uniform name."""
        if self.index is None:
            return {}
        prefix = f"lights[{self.index}]"
        return {
            f"{prefix}.enabled": int(self.enabled),
            f"{prefix}.type": int(self.type),
            f"{prefix}.position": (self.position.x, self.position.y, self.position.z),
            f"{prefix}.target": (self.target.x, self.target.y, self.target.z),
            f"{prefix}.color": self.color.normalized(),
        }


class LightRegistry:
    """Hands out shader light slots until the shader's limit is reached."""

    def __init__(self, max_lights: int = MAX_LIGHTS) -> None:
        if max_lights <= 0:
            raise ValueError(f"max_lights must be positive, got {max_lights}")
        self.max_lights = max_lights
        self.count = 0

    def create_light(
        self, light_type: LightType, position: Vector3, target: Vector3, color: Color
    ) -> Light:
        """Create an enabled light in the next slot, or a disabled unbound one if full."""
        if self.count >= self.max_lights:
            return Light()
        light = Light(
            type=LightType(light_type),
            enabled=True,
            position=position,
            target=target,
            color=color,
            index=self.count,
        )
        self.count += 1
        return light


class Lighting:
    """A directional light, a warm point light and an ambient term."""

    vertex_shader = VERTEX_SHADER
    fragment_shader = FRAGMENT_SHADER

    def __init__(self, ambient, direction: Vector3, color: Color) -> None:
        ambient = tuple(float(v) for v in ambient)
        if len(ambient) != 4:
            raise ValueError(f"ambient must have 4 components, got {len(ambient)}")
        self.ambient: tuple[float, float, float, float] = ambient
        self.registry = LightRegistry()
        self.directional = self.registry.create_light(
            LightType.DIRECTIONAL, Vector3(0.0, 0.0, 0.0), direction, color
        )
        self.point = self.registry.create_light(
            LightType.POINT, POINT_LIGHT_POSITION, Vector3(0.0, 0.0, 0.0), POINT_LIGHT_COLOR
        )

    @property
    def lights(self) -> tuple[Light, Light]:
        return (self.directional, self.point)

    def uniforms(self, view_pos: Vector3) -> dict[str, Any]:
        """Return every uniform value the lighting shader needs for a view position."""
        values: dict[str, Any] = {
            "viewPos": (view_pos.x, view_pos.y, view_pos.z),
            "ambient": self.ambient,
        }
        for light in self.lights:
            values.update(light.uniform_values())
        return values