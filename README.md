# roadkit

Geometry building blocks for laying out roads: clothoid (Euler spiral)
positions evaluated through Fresnel integrals, polylines that track arc
distance and heading, ground patch points, and OpenStreetMap element
records. Pure Python, no dependencies.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `roadkit.aux_sine`: `auxiliary_sin(x)`, the Fresnel auxiliary sine
  integral g(x) for x >= 0, and `chebyshev_series(x, coefficients)`, which
  evaluates a Chebyshev series with Clenshaw's recursion (an empty
  coefficient sequence gives 0.0).
- `roadkit.aux_cosine`: `auxiliary_cos(x)`, the Fresnel auxiliary cosine
  integral f(x) for x >= 0.
- `roadkit.spiral`:
  - `fresnel_sin(x)`, `fresnel_cos(x)`: integrals from 0 to x of
    sqrt(2/pi) sin(t^2) and sqrt(2/pi) cos(t^2).
  - `fresnel_sin_integral(x)`, `fresnel_cos_integral(x)`: the normalised
    forms, integrals of sin(pi t^2 / 2) and cos(pi t^2 / 2).
  - `spiral_pos(x0, y0, theta, curv, dcurv, length)`: the (x, y) point
    reached after `length` along a clothoid with start heading `theta`,
    start curvature `curv` and curvature rate `dcurv`. Straight lines and
    circular arcs are handled as the special cases `dcurv == 0`.
  - `spiral_radian(theta, curv, dcurv, length)`: heading at `length`, not
    wrapped.
  - `spiral_length(theta0, theta1, k0, k1)`: length of a clothoid turning
    from `theta0` to `theta1` while curvature goes from `k0` to `k1`.
- `roadkit.polyline`:
  - `Polyline` of `PolyPoint`s (position, heading, distance), with
    `get_point`, `insert_point`, `add_point`, `append`, direction helpers
    (`get_dir`, `get_right`, `get_straight_dir`, `get_straight_radian`,
    `get_straight_right`), `bounds`, `segment_bounds`, `positions`,
    `redist`, `resample`, `resample_length`, `sub_curve`, `offset`,
    `has_overlapped_points`, `contains_nan` and `check_zig`.
    `get_point` raises `ValueError` if distances do not increase.
  - `Box`: axis-aligned box with `add`, `intersects` and `size`.
  - `CurveOffset`: lateral offset key with `value_at` and `radian_at`,
    interpolated by cubic Hermite towards the next key.
  - Helpers: `wrap_radian` (into (-pi, pi], `ValueError` on NaN),
    `lerp_radian`, `calc_abcd`, `is_uv_valid`, `element_index`,
    `point_index`, `clamp_dist`, `cubic_interp`,
    `cubic_interp_derivative`.
- `roadkit.ground`: `GroundPoint` (frozen, hashable; `segment_start`,
  `segment_end`) and `Ground` (`is_end_point`, `is_expired`,
  `mark_expired`, `renew`).
- `roadkit.osm`: `OSMElement` (id and tags; `get_int` reads the leading
  integer of a tag, 0 if absent), `OSMNode`, `OSMWay`, `OSMRelation`,
  and `tile_bounds(tile, tile_size=51200.0)`.

## Example

```python
from roadkit.spiral import spiral_pos, spiral_radian
from roadkit.polyline import Polyline, wrap_radian

# A point 100 units along a straight segment heading along +X: (100.0, 0.0).
x, y = spiral_pos(0.0, 0.0, 0.0, 0.0, 0.0, 100.0)

# Heading after 50 units of a spiral starting straight and tightening.
heading = wrap_radian(spiral_radian(0.0, 0.0, 0.001, 50.0))

line = Polyline()
line.add_point((0.0, 0.0, 0.0), 0.0)
line.add_point((10.0, 0.0, 0.0), 0.0)
piece = line.sub_curve(2.0, 8.0)
```

Distances are plain floats and angles are in radians throughout.

## What it does not do

roadkit is a set of geometry primitives and plain records. It does not
build road meshes, lanes, lane markings or junctions, does not read or
parse OpenStreetMap files (the OSM classes only hold data), does not
write any road-network file format, and has no command-line tool.