# glmath

Small, dependency-free math for 3D graphics: fixed-size vectors, a vector
of arbitrary size, quaternions, homogeneous transform and camera matrices,
coordinate-system conversions, and Bézier curves, surfaces and splines.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Conventions

- Angles are in radians throughout. `glmath.conv.deg_to_rad` and
  `rad_to_deg` convert.
- Matrices are flat tuples of floats in column-major order, as OpenGL
  expects: the element at row `r`, column `c` of a 4x4 matrix is at index
  `c * 4 + r`.
- Values are ordinary Python floats (double precision).

## Modules

- `glmath.util` – tolerant float comparison (`float_equal`,
  `float_equal_threshold`, `float_equal_func`), `absolute`, `clamp`,
  `clamp_func`, `is_clamped` and `round_half_up`. The default tolerance is
  the module attribute `EPSILON` (`1e-10`), read at call time; the module
  also defines `MIN_NORMAL`, `MIN_VALUE`, `MAX_VALUE`, `INF_POS`,
  `INF_NEG` and `NAN`.
- `glmath.vector` – `Vec2`, `Vec3`, `Vec4`: immutable named tuples with
  fields `x`, `y`, `z`, `w`. Methods `add`, `sub`, `mul`, `dot`, `length`,
  `len_sqr`, `normalize`, `elem`, `approx_equal`,
  `approx_equal_threshold`, `approx_func_equal`, conversions between sizes
  (`vec2`, `vec3`, `vec4`), `Vec3.cross`, and `outer_prod2/3/4`, which
  return the outer product as a flat column-major tuple. The operators
  `+`, `-`, unary `-` and `*` (by a number) are supported.
- `glmath.vecn` – `VecN`, a vector of any size. Build one with `VecN(n)`
  (zeroed) or `VecN.from_data(values)`. It supports indexing, `len`,
  iteration, `add`, `sub` (over the shorter length), `cross` (3 elements
  only), `dot` (NaN when lengths differ), `length`, `len_sqr`, `mul`,
  `normalize`, `resize`, `zero`, `size`, `cap`, `raw`,
  `set_backing_slice`, the `approx_equal*` comparisons and `vec2`/`vec3`/`vec4`.
  Arithmetic returns a new vector.
- `glmath.mempool` – the power-of-two sized buffers `VecN` draws from:
  `FloatBuffer`, `FloatPool`, `bin_log`, `get_pool`, `grab_from_pool`,
  `return_to_pool`, `pool_count`, `reset_pools`, `pooling_enabled` and
  `disable_memory_pooling`. With pooling disabled, `VecN` buffers are
  sized exactly.
- `glmath.quat` – `Quat(w, v)` with `x`, `y`, `z` properties, `add`, `sub`,
  `mul` (also `+`, `-`, `*`), `scale`, `conjugate`, `length`, `norm`,
  `normalize`, `inverse`, `rotate`, `mat4`, `dot`, approximate and
  orientation equality; plus `quat_ident`, `quat_rotate`, `quat_lerp`,
  `quat_nlerp`, `quat_slerp`, `angles_to_quat` with a `RotationOrder`,
  `mat4_to_quat`, `quat_look_at_v` and `quat_between_vectors`.
- `glmath.transform` – `ident4`, `rotate_2d`, `rotate_3d_x/y/z`,
  `homog_rotate_2d`, `homog_rotate_3d_x/y/z`, `homog_rotate_3d`,
  `translate_2d`, `translate_3d`, `scale_2d`, `scale_3d`, the shear
  matrices, `extract_3d_scale`, `extract_max_scale`, `mat4_normal`,
  `transform_coordinate` and `transform_normal`.
- `glmath.project` – `ortho`, `ortho_2d`, `perspective`, `frustum`,
  `look_at`, `look_at_v`, `project` and `un_project`.
- `glmath.conv` – `cartesian_to_spherical`, `cartesian_to_cylindrical`,
  `spherical_to_cartesian`, `spherical_to_cylindrical`,
  `cylindrical_to_spherical`, `cylindrical_to_cartesian`, `deg_to_rad`,
  `rad_to_deg`.
- `glmath.shapes` – `circle` and `rect` (triangle vertex lists),
  quadratic, cubic and n-point Bézier curves in 2D and 3D,
  `make_bezier_curve_2d/3d`, `bezier_surface`,
  `bezier_spline_interpolate_2d/3d`, `choose`, `screen_to_gl_coords`,
  `gl_to_screen_coords` and `reticulate_splines`, which only prints a remark.

## Example

```python
from glmath.conv import deg_to_rad
from glmath.project import look_at_v, perspective, project, un_project
from glmath.vector import Vec3

proj = perspective(deg_to_rad(45), 800 / 600, 0.1, 10)
view = look_at_v(Vec3(0, 0.1, 10), Vec3(0, 0, 0), Vec3(0, 1, 0))
win = project(Vec3(5, 0, 0), view, proj, 0, 0, 800, 600)
obj = un_project(win, view, proj, 0, 0, 800, 600)
print(win, obj)
```

## Errors

Operations that cannot succeed raise `ValueError`: `un_project` when
`projection * modelview` has no inverse, the Bézier functions for a
parameter outside `[0, 1]` or a spline `t` outside every range,
`angles_to_quat` for an unknown order, `VecN.cross` for vectors that do
not have three elements, fixed-size vector operations on vectors of
different sizes, and `circle` for fewer than one slice.

## What it does not do

There is no matrix type. Matrices are plain tuples, and the package offers
no public matrix multiplication, transpose or inversion; it builds
matrices and applies them inside its own functions only.