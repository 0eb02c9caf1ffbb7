import pytest

from islandsim.scene import Instance, Scene, SceneFullError
from islandsim.vectors import WHITE, Color, Vector3


def test_default_capacity_is_max_instances():
    assert Scene().capacity == 1024


def test_add_returns_consecutive_indices():
    scene = Scene()
    indices = [scene.add("floor", Vector3(float(i), 0.0, 0.0)) for i in range(3)]
    assert indices == [0, 1, 2]
    assert len(scene) == 3


def test_iteration_preserves_insertion_order_and_fields():
    scene = Scene()
    tint = Color(210, 180, 140)
    scene.add("wall", Vector3(1.0, 0.0, 2.0), Vector3(1.0, 1.0, 1.0), Vector3(0.0, 1.0, 0.0), 90.0, tint)
    scene.add("tree", Vector3(-1.0, 0.0, 1.0))
    items = list(scene)
    assert items[0] == Instance(
        "wall", Vector3(1.0, 0.0, 2.0), Vector3(1.0, 1.0, 1.0), Vector3(0.0, 1.0, 0.0), 90.0, tint
    )
    assert items[1].asset == "tree"
    assert items[1].tint == WHITE
    assert items[1].rot_angle_deg == 0.0


def test_full_scene_raises():
    scene = Scene(capacity=2)
    scene.add("a", Vector3())
    scene.add("b", Vector3())
    with pytest.raises(SceneFullError):
        scene.add("c", Vector3())
    assert len(scene) == 2


def test_reset_empties_scene_and_allows_reuse():
    scene = Scene(capacity=1)
    scene.add("a", Vector3())
    scene.reset()
    assert len(scene) == 0
    assert scene.add("b", Vector3()) == 0


def test_capacity_must_be_positive():
    with pytest.raises(ValueError):
        Scene(0)