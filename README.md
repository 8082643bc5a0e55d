# wireframe3d

wireframe3d is a small software 3D renderer. It loads a triangle mesh from a
Wavefront OBJ file, or uses a built-in unit cube, and lets you move a camera
around it in a pygame window. Faces are filled in grey with flat directional
shading and outlined in red.

The whole pipeline runs in Python: world transform, back-face culling,
painter's ordering (farthest first), view transform, clipping against a near
plane, perspective projection, clipping against the four screen edges and
scanline triangle filling. pygame only opens the window and draws the
resulting spans and lines.

## Installation

```
pip install .
```

## Running

```
wireframe3d path/to/model.obj
```

With no model argument the command tries `SpaceShip.obj` in the current
directory. Options:

| Option          | Meaning                                   |
|-----------------|-------------------------------------------|
| `--cube`        | show the built-in unit cube instead       |
| `--width N`     | window width in pixels (default 1920)     |
| `--height N`    | window height in pixels (default 1080)    |

If the model cannot be read or is malformed, the command prints a message to
standard error and exits with status 1.

The mesh is placed 10 units along the z axis, in front of the camera, which
starts at the origin looking along +z.

Controls:

| Key | Action                              |
|-----|-------------------------------------|
| W   | move forward along the view         |
| S   | move backward along the view        |
| A   | turn left                           |
| D   | turn right                          |
| Q   | increase the camera's y coordinate  |
| E   | decrease the camera's y coordinate  |

Forward, backward and turning movement scale with the frame time; Q and E
move a fixed step each frame. Close the window to quit.

## OBJ support

`parse_obj` reads `v x y z` vertex lines and `f a b c` face lines and ignores
every other line. Face indices are 1-based and may carry `/texture/normal`
parts, which are dropped. Only the first three values of a line are used, so
a polygon with more corners contributes just its first triangle. Too few
values, unparsable numbers or out-of-range indices raise `ObjFormatError`
(a `ValueError`) naming the line.

## Using it as a library

```python
from wireframe3d.geometry import example_cube, rotation_x, rotation_z
from wireframe3d.render import Camera, RenderSettings, render_mesh

mesh = example_cube()
camera = Camera()
settings = RenderSettings(width=640, height=480)
world = rotation_x(0.0) @ rotation_z(0.0)

for screen_triangle in render_mesh(mesh, camera, settings, world):
    print(screen_triangle.triangle, screen_triangle.shade)
```

Modules:

- `wireframe3d.geometry`: the immutable `Vec3d` (with `+`, `-`, `*`, `/`,
  `dot`, `cross`, `normalized`), `Matrix` (`@`, `transform`,
  `quick_inverse`, `Matrix.identity()`), `Triangle` (`transformed`,
  `translated_z`, `normal`, `depth`) and `Mesh`; the matrix builders
  `rotation_x`, `rotation_y`, `rotation_z`, `projection` and `point_at`;
  `example_cube`; and `intersect_plane`, `plane_distance` and
  `clip_against_plane`, which returns zero, one or two triangles.
  `rotation_x` turns by half of the given angle, and `projection` takes its
  field of view in radians. Normalizing a zero-length vector raises
  `ZeroDivisionError`.
- `wireframe3d.raster`: `fill_triangle(x1, y1, x2, y2, x3, y3)` yields the
  horizontal `Span(y, x_start, x_end)` runs that cover a triangle, top row
  first. Coordinates are truncated to integers.
- `wireframe3d.objfile`: `parse_obj(lines)`, `load_obj(path)` and
  `ObjFormatError`.
- `wireframe3d.render`: `Camera` (`position`, `yaw`, `look_direction`,
  `view_matrix`, `move(keys, delta)`), `RenderSettings` (screen size, near and
  far planes, field of view, light direction, z offset, near clip depth, and
  `projection_matrix`), `ScreenTriangle`, `light_level`, `clip_to_screen` and
  `render_mesh`. `light_level` never returns less than 50.
- `wireframe3d.game`: `Game`, which holds a mesh, settings, camera and an
  optional spin (`spin_rate`, per millisecond, 0 by default), with
  `update(keys, delta)` and `frame()`; and `main`, the `wireframe3d` command.

## Limitations

There is no depth buffer: overlapping faces are resolved only by drawing them
farthest first. Shading is a single grey level per face; there are no
colours from the model, textures or materials.

## Tests

```
pip install .[test]
pytest
```