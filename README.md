# islandsim

The simulation core of a small 3D island scene. It runs on a fixed 60 Hz tick
and needs nothing beyond the Python standard library.

## Modules

- `islandsim.vectors`: `Vector3` (immutable, with `+`, `-`, and `*` by a
  number or component-wise by another vector), `Color` (RGBA channels checked
  to lie in 0..255, `normalized()` gives floats in 0.0..1.0) and `Animal`.
- `islandsim.events`: `Event` with its `EventType` and payload classes
  (`KeyEvent`, `MouseButtonEvent`, `MouseMoveEvent`, `MouseWheelEvent`,
  `WindowResizeEvent`, `ActionEvent`), and `EventQueue`, a bounded FIFO whose
  capacity must be a power of two (default 256). When full, `push` drops the
  oldest event and counts it in `dropped`. `poll()` returns the oldest event
  or `None`; iterating the queue drains it. The queue also keeps
  `current_tick`, advanced by `increment_tick()`; `make_event(type)` stamps a
  new event with it.
- `islandsim.input`: `InputCollector.collect(state)` compares an
  `InputState` snapshot (pressed/released/held keys, mouse buttons, mouse
  position, wheel, screen size) with the previous one and pushes key, quit
  (Escape), mouse, wheel, resize and jump-action (Space) events. It returns
  the events in the order pushed.
- `islandsim.replay`: `TickScheduler` builds action events dated a number of
  ticks ahead and pushes an interact action on every multiple of its interval
  (default 180 ticks). `EventRecorder` records up to `limit` events (default
  1000) and replays them with their original tick spacing, restamped with the
  current tick.
- `islandsim.scene`: `Scene`, a list of `Instance` placements holding at most
  `capacity` entries (default 1024); `add` raises `SceneFullError` beyond it.
- `islandsim.world`: `GameWorld` of `GameObject`s (static, ball, tree) with
  increasing ids, a default limit of 500 objects (`WorldFullError` beyond
  that), ball physics under gravity with ground bounce and friction
  (`update_physics`) and tree sway (`update_trees`).
- `islandsim.lighting`: `Light`, `LightRegistry` (at most 4 light slots) and
  `Lighting`, a directional light plus a warm point light. Its
  `uniforms(view_pos)` returns the shader uniform values by name.
- `islandsim.resources`: `search_and_set_resource_dir(folder_name, app_dir=None)`
  looks for a folder in the working directory, then in the application
  directory and up to three levels above it. It changes into the folder it
  finds and returns it, or returns `None`.
- `islandsim.game`: `build_room` lays out an 18×18 floor, three walls and a
  tree in a `Scene`. `transformed_bbox` scales and moves a `BoundingBox`.
  `Game` holds the scene, the world with one ball, and the lighting.
  `Game.update(dt)` handles pending events and steps the physics.
  `Game.advance(frame_time)` runs as many fixed ticks as the frame time allows,
  capping a frame at 0.25 s, and returns how many ticks it completed.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Usage

```python
from islandsim.events import EventQueue, EventType
from islandsim.game import Game

queue = EventQueue(256)
game = Game(queue)

queue.push(queue.make_event(EventType.QUIT))
game.advance(1 / 60)
print(game.should_quit)  # True
```

The command

```
islandsim --seconds 5 --frame-time 0.0166667
```

first changes into an `assets` directory if it finds one. It then runs the
fixed-timestep loop headless for the given simulated time, or until a quit
event arrives, and logs the final tick and the ball's position. Both options
are optional. The defaults are 5 seconds and 1/60 s per frame.

## What it does not do

The package opens no window and draws nothing. It loads no models, textures or
shaders: `Game` keeps the asset paths only as names, and `Lighting` produces
uniform values without sending them anywhere. Input comes from `InputState`
snapshots that the caller builds, not from a real keyboard or mouse.