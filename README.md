# catshooter

The game logic of a small side-scrolling shooter, written so that it needs
no graphics device. Cats are the enemies and fish are the bullets. Everything
a renderer would need is kept as plain data: vertex positions, texture
coordinates, colours and matrices.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## What is inside

- `catshooter.geometry`: `Vec3`, `Color`, `Vertex` and 4x4 row-major matrix
  helpers (`matrix_identity`, `matrix_multiply`, `matrix_translation`,
  `matrix_rotation_yaw_pitch_roll`), plus the screen size constants.
- `catshooter.input`: `Keyboard` and `Mouse` state. Each is fed one snapshot
  per frame through `update` and answers press, trigger, release and repeat
  queries. The `Key` enum names the key codes.
- `catshooter.key`: motion key data: `KeyPose`, `KeyFrame`, `MotionInfo`.
- `catshooter.textreader`: `TextReader`, a token reader over a text stream.
  It reads ints, floats and paths and skips `#` comments.
- `catshooter.mesh`: `MeshField` and `MeshCylinder` vertex grids, and the
  `strip_indices` triangle-strip index builder.
- `catshooter.camera`: `Camera` with normal and follow modes
  (`CameraMode`), plus `look_at_lh` and `perspective_fov_lh`.
- `catshooter.light`: `DirectionalLight` and `LightRig`.
- `catshooter.model`: `Model`, a hierarchical part with a parent and a world
  matrix.
- `catshooter.scene`: `Scene` (a prioritised object registry with a fixed
  capacity), `SceneObject`, `Sprite`, `ObjectType` and `Enemy`.
- `catshooter.effects`: `Effect` and `Effect3D`, glows that shrink, move and
  disappear when their life runs out.
- `catshooter.background`: `Background` and `BackgroundLayers`, parallax
  layers whose texture scrolls.
- `catshooter.explosion`: `Explosion`, an animated sprite sheet that releases
  itself after its last frame.
- `catshooter.bullet`: `Bullet`, with its lifetime, trail and collision with
  enemies.
- `catshooter.number`: `Digit`, a score digit that shows its value through
  texture coordinates.

## Example

```python
from catshooter.bullet import Bullet
from catshooter.geometry import Vec3
from catshooter.scene import Enemy, ObjectType, Scene

scene = Scene()
Enemy.create(scene, Vec3(500.0, 300.0, 0.0), 100.0, 100.0)
bullet = Bullet.create(scene, Vec3(520.0, 300.0, 0.0), 30.0, 60)

scene.update()
print(scene.objects(ObjectType.ENEMY))  # [] - the bullet hit the enemy
```

## What this package does not do

There is no game loop, window or command to start a game: the package has no
object that ties the scene, input, camera and lights together frame by frame,
and nothing draws to the screen or loads texture and model files. Callers
build a `Scene`, feed input snapshots to `Keyboard` or `Mouse`, and call
`update` themselves.