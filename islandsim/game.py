"""The island game state, its fixed-timestep loop and a headless runner."""

from __future__ import annotations

import argparse
import logging
from dataclasses import dataclass, field

from islandsim.events import ActionEvent, ActionId, EventQueue, EventType, KeyEvent
from islandsim.events import WindowResizeEvent
from islandsim.input import InputCollector, InputState, Key
from islandsim.lighting import Lighting
from islandsim.resources import search_and_set_resource_dir
from islandsim.scene import Scene
from islandsim.vectors import WHITE, Color, Vector3
from islandsim.world import GameWorld

log = logging.getLogger(__name__)

WINDOW_WIDTH = 1280
WINDOW_HEIGHT = 960
WINDOW_TITLE = "The Island"

TICK_RATE = 60
TICK_DURATION = 1.0 / TICK_RATE
MAX_FRAME_TIME = 0.25

ROOM_SIZE = 18
ATLAS_PATH = "Textures/PolygonPrototype_Texture_01.png"
FLOOR_MODEL = "Glb/floor.glb"
WALL_MODEL = "Glb/wall.glb"
TREE_MODEL = "Glb/tree.glb"
BALL_MODEL = "Glb/ball.glb"

FLOOR_TINT = Color(210, 180, 140, 255)
WALL_TINT = Color(222, 184, 135, 255)
TREE_TINT = Color(222, 184, 135, 255)
BALL_TINT = Color(150, 175, 220, 255)

AMBIENT = (0.15, 0.15, 0.18, 1.0)
SUN_DIRECTION = Vector3(-0.4, -1.0, -0.3)

_UP = Vector3(0.0, 1.0, 0.0)


@dataclass(frozen=True)
class BoundingBox:
    """An axis-aligned box given by its minimum and maximum corners."""

    min: Vector3
    max: Vector3


def transformed_bbox(box: BoundingBox, pos: Vector3, scale: Vector3) -> BoundingBox:
    """Scale a model-space box component-wise and move it to pos."""
    return BoundingBox(pos + box.min * scale, pos + box.max * scale)


def build_room(
    scene: Scene,
    floor,
    wall,
    tree,
    width: int,
    height: int,
    tile_scale: Vector3,
) -> int:
    """Lay out a floor grid, three walls and a tree; return how many instances were added."""
    before = len(scene)
    half_z = height / 2
    half_x = width / 2.25

    for z in range(height):
        for x in range(width):
            scene.add(floor, Vector3(x - half_x, 0.0, z - half_z), tile_scale, _UP, 0.0, WHITE)

    for x in range(width):
        scene.add(wall, Vector3(x - half_x, 0.0, -half_z), tile_scale, _UP, 0.0, WHITE)
        scene.add(
            wall,
            Vector3(x - half_x, 0.0, height - half_z - 0.1),
            tile_scale,
            _UP,
            0.0,
            WHITE,
        )

    for z in range(height):
        scene.add(
            wall, Vector3(-(half_x + 1), 0.0, z - half_z), tile_scale, _UP, 90.0, WHITE
        )

    scene.add(tree, Vector3(-1.0, 0.0, 1.0), tile_scale, _UP, 0.0, WHITE)
    return len(scene) - before


@dataclass
class _Camera:
    position: Vector3 = field(default_factory=lambda: Vector3(10.0, 15.0, 10.0))
    target: Vector3 = field(default_factory=lambda: Vector3(0.0, 0.0, 0.0))
    up: Vector3 = field(default_factory=lambda: Vector3(0.0, 1.0, 0.0))
    fovy: float = 45.0


class Game:
    """Everything the island simulation holds between ticks."""

    def __init__(self, queue: EventQueue | None = None) -> None:
        self.queue = queue if queue is not None else EventQueue()
        self.input = InputCollector(self.queue)
        self.input_state = InputState()
        self.should_quit = False
        self.accumulator = 0.0
        self.camera = _Camera()

        self.atlas = ATLAS_PATH
        self.floor = FLOOR_MODEL
        self.wall = WALL_MODEL
        self.tree = TREE_MODEL
        self.ball = BALL_MODEL
        self.generated_colors = {"floor_gen": FLOOR_TINT, "wall_gen": WALL_TINT}

        self.scene = Scene()
        self.world = GameWorld()
        build_room(
            self.scene,
            self.floor,
            self.wall,
            self.tree,
            ROOM_SIZE,
            ROOM_SIZE,
            Vector3(1.0, 1.0, 1.0),
        )
        self.ball_id = self.world.create_ball(
            Vector3(5.0, 1.0, 1.0), self.ball, 0.5, 1.0, 0.7, 0.95
        )

        self.lights = Lighting(AMBIENT, SUN_DIRECTION, WHITE)
        self.model_tints = {
            self.floor: FLOOR_TINT,
            self.wall: WALL_TINT,
            self.tree: TREE_TINT,
            self.ball: BALL_TINT,
        }
        self.shader_uniforms = self.lights.uniforms(self.camera.position)

    def update(self, dt: float) -> None:
        """Handle every pending event, refresh the lights and step the physics."""
        for event in self.queue:
            data = event.data
            if event.type == EventType.QUIT:
                self.should_quit = True
            elif event.type == EventType.KEY_DOWN and isinstance(data, KeyEvent):
                if data.key == Key.SPACE and not data.repeat:
                    log.info(
                        "SPACE pressed at tick %d (alt=%d ctrl=%d shift=%d)",
                        event.tick,
                        data.alt,
                        data.ctrl,
                        data.shift,
                    )
            elif event.type == EventType.WINDOW_RESIZED and isinstance(
                data, WindowResizeEvent
            ):
                log.info(
                    "resized to %dx%d at tick %d", data.width, data.height, event.tick
                )
            elif event.type == EventType.ACTION and isinstance(data, ActionEvent):
                if data.id == ActionId.JUMP and data.pressed:
                    log.info("action: fly up at tick %d", event.tick)

        self.shader_uniforms = self.lights.uniforms(self.camera.position)
        self.world.update_physics(dt)

    def advance(self, frame_time: float) -> int:
        """Run as many fixed ticks as frame_time allows; return how many completed."""
        self.accumulator += min(frame_time, MAX_FRAME_TIME)
        ticks = 0
        while self.accumulator >= TICK_DURATION:
            self.input.collect(self.input_state)
            self.update(TICK_DURATION)
            if self.should_quit:
                break
            self.queue.increment_tick()
            self.accumulator -= TICK_DURATION
            ticks += 1
        return ticks


def main(argv: list[str] | None = None) -> int:
    """Run the simulation headless for a number of seconds of frames."""
    parser = argparse.ArgumentParser(prog="islandsim", description=WINDOW_TITLE)
    parser.add_argument("--seconds", type=float, default=5.0, help="simulated time to run")
    parser.add_argument(
        "--frame-time", type=float, default=1.0 / 60, help="time between frames"
    )
    args = parser.parse_args(argv)
    if args.seconds < 0 or args.frame_time <= 0:
        parser.error("--seconds must be non-negative and --frame-time positive")

    logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")
    search_and_set_resource_dir("assets")

    game = Game()
    elapsed = 0.0
    while elapsed < args.seconds and not game.should_quit:
        game.advance(args.frame_time)
        elapsed += args.frame_time

    ball = game.world.get(game.ball_id)
    if ball is not None:
        log.info(
            "stopped at tick %d, ball at (%.3f, %.3f, %.3f)",
            game.queue.current_tick,
            ball.position.x,
            ball.position.y,
            ball.position.z,
        )
    return 0