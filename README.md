# panoview

Building blocks for a 360-degree panorama viewer: a free-look camera with
damped quaternion motion, a textured UV-sphere mesh, view-frustum culling,
shader file helpers, readable names for OpenGL enumerants and a byte ring
buffer for streaming frame data.

Everything is plain Python on top of NumPy. Nothing here opens a window or
needs a GL context.

## Installation

    pip install .

The `test` extra installs pytest for running the test suite.

## Modules

- `panoview.ringbuffer`: `RingBuffer(size)`, a fixed-size byte ring.
  `put(data)` stores as many bytes as fit in one contiguous stretch and
  returns how many it took. `get(size)` returns up to `size` contiguous bytes.
  `skip(size)` discards up to `size` bytes, across the wrap if needed, and
  returns how many it skipped. `free_space()` is what one `put` can accept,
  and `buffered_bytes()` (also `len()`) is the total held. Data that wraps
  around the end may need two `put` or `get` calls.
- `panoview.transforms`: `normalize`, `perspective`, `ortho`, `look_at`
  (4x4 NumPy matrices indexed `[row, column]`), and quaternion helpers
  `angle_axis`, `quat_cross`, `quat_normalize`, `quat_rotate` (quaternions
  ordered w, x, y, z). Angles are in radians. Degenerate input raises
  `ValueError`.
- `panoview.camera`: `Camera`, with the modes in `CameraType` (`ORTHO`,
  `FREE`) and the directions in `CameraDirection` (`UP`, `DOWN`, `LEFT`,
  `RIGHT`, `FORWARD`, `BACK`). Set `position`, `look_at` and `up`, then call
  `update()` to recompute `direction`, `projection`, `projection_zoom`,
  `view`, `model`, `mv` and `mvp`. In free mode each `update` applies the
  pending pitch, heading and translation and then damps them. `move`
  accumulates a translation step (free mode only). `change_pitch` and
  `change_heading` add rate-limited turns. `move_2d(x, y)` turns the camera
  from mouse motion while `move_camera` is true. `set_mode` and
  `set_viewport` configure the camera. `viewport()` returns
  `(x, y, width, height)` and `matrices()` returns
  `(projection, view, model)`.
- `panoview.mesh`: `Vertex` (position, normal, uv) and `Mesh` (`vertexes`,
  `indices`, `wireframe`, `model_matrix`, and `move_to(position)`).
  `generate_sphere(radius, slices, stacks)` returns raw positions, normals,
  texture coordinates and triangle indices, and `sphere(...)` builds a
  `Mesh` from them.
- `panoview.frustum`: `get_frustum(matrix)` takes a column-major 4x4 matrix as
  16 floats and returns six normalized planes (left, right, bottom, top,
  near, far). `count_in_front(plane, box)` counts the corners of a box given
  as `(x0, y0, z0, x1, y1, z1)` that lie in front of a plane.
  `classify_box(planes, box)` returns -1 when the box is outside, 0 when it
  straddles, and 1 when it is fully inside. `get_time()` gives wall-clock
  milliseconds wrapped to 32 bits.
- `panoview.shaders`: `ShaderType` (stages valued by their GL enumerants),
  `ShaderError`, `file_extension`, `shader_type_for` (stage from `.vs`,
  `.vert`, `.gs`, `.geom`, `.tcs`, `.tes`, `.fs`, `.frag`, `.cs`),
  `read_shader_source` and `uniform_type_name`.
- `panoview.glnames`: `debug_message` formats a GL debug report,
  `error_message` describes an error code, `texture_unit` maps an index to a
  texture unit, `texture_format` gives the formats for a channel count, and
  `material_shader_files` names the shader pair for the `"image"`, `"video"`
  and `"ss"` materials.

## Example

```python
from panoview.camera import Camera, CameraDirection
from panoview.mesh import sphere
from panoview.frustum import get_frustum, classify_box

camera = Camera()
camera.set_viewport(0, 0, 1920, 768)
camera.position = (0.0, 0.0, 0.0)
camera.look_at = (0.0, -2.0, 0.0)
camera.up = (0.0, 0.0, 1.0)
camera.update()
camera.move(CameraDirection.FORWARD)
camera.update()

dome = sphere(500, 80, 50)
print(len(dome.vertexes), len(dome.indices))

projection, view, model = camera.matrices()
planes = get_frustum(camera.mvp.flatten(order="F"))
print(classify_box(planes, (-1, -1, -1, 1, 1, 1)))
```

`Camera.update` raises `ValueError` if `position` and `look_at` are the same
point, which is the case for a freshly made camera.

## What it does not do

panoview computes geometry, matrices and names only. It makes no OpenGL calls:
it does not compile or link shaders (`panoview.shaders` only identifies and
reads shader files), upload textures or meshes, or draw anything. It does not
decode video or images, open windows or handle input events, and it ships no
viewer command. Those are left to the application and the GL binding it
uses.