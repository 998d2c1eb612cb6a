# scenekit3d

A small, dependency-free toolkit for the CPU side of a 3D engine: vector and
matrix math, transform builders, splines, material file parsing, collision
shapes, light parameter blocks, a debug line buffer and a scene manager.

## Modules

- `scenekit3d.vectors` — `Vector2`, `Vector3`, `Vector4` dataclasses that
  unpack like tuples. `Vector3` supports `+`, `-`, `*`, `/` component-wise
  with another `Vector3` or with a scalar (a scalar on the left acts the same
  as on the right, so `1 - v` equals `v - 1`), unary `-`, `length`,
  `length_squared`, `normalize`, the static `dot`, and the static
  `transform(vector, matrix)`, which applies a row-vector matrix and divides
  by the resulting `w`.
- `scenekit3d.matrix` — `Matrix4x4` (rows in `m`, zeros by default) with
  `multiply`, `identity`, `inverse` (raises `ZeroDivisionError` for a
  singular matrix) and the `a @ b` operator; `Mat3`; `cot`. Both matrix
  classes raise `ValueError` when given rows of the wrong shape.
- `scenekit3d.transforms` — `make_translate_matrix`, `make_scale_matrix`,
  `make_rotate_x_matrix`, `make_rotate_y_matrix`, `make_rotate_z_matrix`,
  `euler_to_matrix` (X, then Y, then Z), `make_affine_matrix` (scale, rotate,
  translate), `make_orthographic_matrix` and `transform_normal`, which uses
  only the upper 3x3 part.
- `scenekit3d.spline` — `catmull_rom_interpolation` for one segment and
  `catmull_rom_position` along a list of at least four control points with
  `t` in `[0, 1]` (fewer points raise `ValueError`).
- `scenekit3d.material` — `load_material_template_file(directory, filename)`
  reads `map_Kd` lines, including the `-s`, `-o` and `-t` options, into a
  `MaterialData` (`texture_file_path`, `uv_scale`, `uv_offset`,
  `uv_translate`). When no texture is named, the path is `white1x1.png`.
- `scenekit3d.primitives` — `PrimitiveDrawer` queues coloured line segments
  as `LineVertex` pairs, up to `MAX_LINE_COUNT` (4096) lines; further lines
  are dropped. `draw_line_3d`, `draw_obb` (full extents) and `draw_sphere`
  (latitude/longitude wireframe, 8 subdivisions and red by default) add
  lines; `render(submit)` hands the queued vertices to `submit`, clears the
  queue and returns the vertex count; `reset` clears it. `get_instance()`
  returns a shared drawer.
- `scenekit3d.shapes` — `AABB` (`update` orders min and max per axis,
  `contains` includes the surface), `is_collision(aabb, point)`, `OBB`
  (`vertices()` takes `size` as half extents; `draw()` queues the edges with
  `size` as full extents) and `Sphere` (`draw()`). Drawing uses the shared
  `PrimitiveDrawer` unless one is passed in.
- `scenekit3d.lights` — `LightingMode`, `DirectionalLightData` and
  `PointLightData` with their default values, and `pack()` to little-endian
  32-bit float bytes (the point light block carries two padding floats).
- `scenekit3d.scenes` — an abstract `Scene` (`initialize`, `update`, `draw`,
  `clean_up`, optional `model_pre_draw`) and a `SceneManager` that builds the
  first scene from a factory, switches to a scene reserved with
  `set_next_scene` at the start of the next `update`, and cleans up the
  current scene on `close` or when leaving a `with` block.
- `scenekit3d.text` — `decode_utf8`, `encode_utf8` (invalid input is
  replaced), `ordering_name` (`"equal"`, `"greater"` or `"less"` for a
  comparison result) and `log`, which writes to the `scenekit3d` logger at
  debug level.
- `scenekit3d.rand` — `generate(minimum, maximum)`: an integer from the closed
  range for integer bounds, otherwise a float from `[minimum, maximum)`.
  Non-numeric bounds raise `TypeError`; `minimum > maximum` raises
  `ValueError`.

## Installation

```
pip install scenekit3d
```

## Example

```python
from scenekit3d.vectors import Vector3
from scenekit3d.transforms import make_affine_matrix
from scenekit3d.spline import catmull_rom_position

world = make_affine_matrix(Vector3(1, 1, 1), Vector3(0, 0, 0), Vector3(2, 0, 0))
print(Vector3.transform(Vector3(1, 2, 3), world))  # Vector3(x=3.0, y=2.0, z=3.0)

points = [Vector3(0, 0, 0), Vector3(1, 1, 0), Vector3(2, 0, 0), Vector3(3, 1, 0)]
print(catmull_rom_position(points, 0.5))
```

Debug lines are collected and handed to whatever draws them:

```python
from scenekit3d.primitives import PrimitiveDrawer
from scenekit3d.shapes import Sphere
from scenekit3d.vectors import Vector3

drawer = PrimitiveDrawer()
Sphere(center=Vector3(0, 0, 0), radius=1.0).draw(drawer, subdivision=4)
count = drawer.render(lambda vertices: print(len(vertices), "vertices"))
```

Scenes subclass `Scene` and are driven by a `SceneManager`:

```python
from scenekit3d.scenes import Scene, SceneManager

class Title(Scene):
    def initialize(self): ...
    def update(self): ...
    def draw(self): ...
    def clean_up(self): ...

with SceneManager(lambda core: Title(core, name="title")) as manager:
    manager.initialize()
    manager.update()
    manager.draw()
```

## What it does not do

The package does no GPU work and opens no window. It does not load meshes or
textures and has no shaders; `PrimitiveDrawer.render` only passes vertices to
a callback, and `pack()` only produces the bytes a constant buffer would hold.
There is no command-line program.

## Tests

```
pip install scenekit3d[test]
pytest
```