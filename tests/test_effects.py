import pytest

from catshooter.effects import Effect, Effect3D
from catshooter.geometry import SCREEN_WIDTH, Vec3
from catshooter.scene import Scene, SceneObject


def test_create_rejects_non_positive_life():
    scene = Scene()
    assert Effect.create(scene, Vec3(10.0, 10.0, 0.0), Vec3(), 50.0, 0, 0.97) is None
    assert scene.count() == 0


def test_create_rejects_when_full():
    scene = Scene(capacity=1)
    scene.add(SceneObject())
    assert Effect.create(scene, Vec3(10.0, 10.0, 0.0), Vec3(), 50.0, 20, 0.97) is None
    assert scene.count() == 1


def test_create_sets_fields():
    scene = Scene()
    effect = Effect.create(scene, Vec3(10.0, 10.0, 0.0), Vec3(1.0, 2.0, 0.0), 50.0, 20, 0.97)
    assert effect.alive
    assert (effect.width, effect.height) == (50.0, 50.0)
    assert effect.life == 20
    assert effect.texture == "data/TEXTURE/effect000.jpg"
    assert effect.priority == 2


def test_update_moves_and_shrinks():
    scene = Scene()
    effect = Effect.create(scene, Vec3(10.0, 10.0, 0.0), Vec3(1.0, 2.0, 0.0), 50.0, 20, 0.5)
    effect.update()
    assert effect.pos == Vec3(11.0, 12.0, 0.0)
    assert effect.width == pytest.approx(25.0)
    assert effect.height == effect.width
    assert effect.life == 19


def test_zero_shrink_keeps_size():
    scene = Scene()
    effect = Effect.create(scene, Vec3(10.0, 10.0, 0.0), Vec3(), 50.0, 5, 0.0)
    effect.update()
    assert effect.width == 50.0


def test_effect_expires():
    scene = Scene()
    effect = Effect.create(scene, Vec3(10.0, 10.0, 0.0), Vec3(), 50.0, 2, 0.97)
    effect.update()
    assert effect.alive
    effect.update()
    assert not effect.alive
    assert scene.count() == 0


def test_effect_off_screen_released():
    scene = Scene()
    effect = Effect.create(scene, Vec3(float(SCREEN_WIDTH), 10.0, 0.0), Vec3(), 50.0, 20, 0.97)
    effect.update()
    assert not effect.alive


def test_effect3d_ignores_screen_bounds():
    scene = Scene()
    effect = Effect3D.create(scene, Vec3(-500.0, -500.0, 0.0), Vec3(0.0, 1.0, 0.0), 10.0, 3, 0.5)
    effect.update()
    assert effect.alive
    assert effect.pos == Vec3(-500.0, -499.0, 0.0)
    assert effect.width == pytest.approx(5.0)


def test_effect3d_origin_and_expiry():
    scene = Scene()
    effect = Effect3D.create(scene, Vec3(), Vec3(), 10.0, 1, 0.0)
    assert effect.origin == Vec3(5.0, 5.0, 0.0)
    effect.update()
    assert not effect.alive