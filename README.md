# screwkin

Small numerical toolkit for rigid-body motion and sampling:

- **`screwkin.geometry`**: `hat`/`vee` operators, `adjoint`, exponential and
  logarithm maps between twists and homogeneous transforms
  (`twist_to_transform`, `transform_to_twist`, `so3_exp`, `se3_exp`,
  `rotation_to_w`, ...), relative poses and screw twists between poses
  (`pose_to_rel_transform`, `pose_to_twist` and their `_pq` variants taking a
  position and a `(w, x, y, z)` quaternion). Twists are ordered `[v, w]`.
- **`screwkin.matrix_ops`**: dictionary-order row sorting (`sort_rows`),
  removal of consecutive duplicate rows (`unique_rows`), removal of duplicate
  or linearly redundant constraint rows (`remove_redundant_constrs`,
  `remove_linear_redundant_constrs`), column-space bases by pivoted QR
  (`col_space_span`), and uniform sampling in a 3-D box
  (`uniform_sample_3d`).
- **`screwkin.trajectory`**: `ScrewPoseTrajectory`, `ScrewPositionTrajectory`,
  `LinearPositionTrajectory`, `SimpleSinusoidTrajectory` and
  `LinearVectorTrajectory`, each with `interpolate(t)`; pose trajectories also
  have `twist(t)` and position trajectories `velocity(t)`.
- **`screwkin.numeric`**: the seeded `ParkMillerRandom` generator
  (`uniform_01`, `uniform_int`), binomial coefficients, double factorials,
  Horner evaluation, polynomial and vector formatting, and simple vector
  statistics.
- **`screwkin.normal`**: the standard and general normal distribution (PDF,
  CDF, inverse CDF, mean, variance, moments, sampling).
- **`screwkin.truncated_ab`** and **`screwkin.truncated_one_sided`**: the
  normal distribution truncated to `[a, b]`, `[a, +inf)` or `(-inf, b]`.
  Functions that take a probability raise `ValueError` when it lies outside
  `[0, 1]`.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Examples

Twists and transforms:

```python
import numpy as np
from screwkin.geometry import twist_to_transform, transform_to_twist

unit_twist = np.array([1.0, 0.0, 0.0, 0.0, 0.0, 1.0])  # [v, w]
t = twist_to_transform(unit_twist, np.pi / 6)
twist, theta = transform_to_twist(t)
```

Interpolating between two poses along a screw:

```python
import numpy as np
from screwkin.trajectory import ScrewPoseTrajectory

start = np.eye(4)
goal = np.eye(4)
goal[:3, 3] = [1.0, 2.0, 0.0]
traj = ScrewPoseTrajectory.from_poses(start, goal)
halfway = traj.interpolate(0.5)
```

Truncated normal distribution with a reproducible generator:

```python
from screwkin.numeric import ParkMillerRandom
from screwkin.truncated_ab import truncated_normal_ab_cdf, truncated_normal_ab_sample

p = truncated_normal_ab_cdf(100.0, 100.0, 25.0, 50.0, 150.0)  # about 0.5
rng = ParkMillerRandom(123456789)
x = truncated_normal_ab_sample(100.0, 25.0, 50.0, 150.0, rng)
```

## What it does not do

- There is no spline or knot interpolation: values can only be interpolated
  along the trajectory classes above.
- The package is a library only; it installs no command-line program.