"""Rigid-body geometry: hat/vee maps, exponentials and logarithms on SO(3) and SE(3).

Twists are ordered ``[v, w]``: linear part first, angular part last.
Quaternions are ordered ``(w, x, y, z)``.
"""

from __future__ import annotations

from typing import Sequence

import numpy as np

__all__ = [
    "hat",
    "vee",
    "adjoint",
    "pos_mat_to_transform",
    "quat_to_rotation",
    "pos_quat_to_transform",
    "rot_to_axis_angle",
    "twist_to_unit_twist",
    "so3_exp",
    "se3_exp",
    "w_to_rotation",
    "twist_to_transform",
    "rotation_to_w",
    "rotation_to_so3",
    "transform_to_twist",
    "transform_to_se3",
    "pose_to_rel_transform",
    "pose_to_rel_transform_pq",
    "pose_to_twist",
    "pose_to_twist_pq",
]


def _vector(a, size: int | None = None) -> np.ndarray:
    vec = np.asarray(a, dtype=float).reshape(-1)
    if size is not None and vec.size != size:
        raise ValueError(f"expected a vector of length {size}, got {vec.size}")
    return vec


def _matrix(m, shape: tuple[int, int]) -> np.ndarray:
    mat = np.asarray(m, dtype=float)
    if mat.shape != shape:
        raise ValueError(f"expected a matrix of shape {shape}, got {mat.shape}")
    return mat


def hat(a) -> np.ndarray:
    """Skew matrix of a 3-vector, or the 4x4 se(3) matrix of a twist ``[v, w]``."""
    vec = _vector(a)
    if vec.size == 3:
        x, y, z = vec
        return np.array([[0.0, -z, y], [z, 0.0, -x], [-y, x, 0.0]])
    if vec.size == 6:
        res = np.zeros((4, 4))
        res[:3, :3] = hat(vec[3:])
        res[:3, 3] = vec[:3]
        return res
    raise ValueError(f"hat expects a vector of length 3 or 6, got {vec.size}")


def vee(m) -> np.ndarray:
    """Inverse of :func:`hat`: a 3x3 skew matrix gives ``w``, a 4x4 gives ``[v, w]``."""
    mat = np.asarray(m, dtype=float)
    if mat.shape == (3, 3):
        return np.array([mat[2, 1], mat[0, 2], mat[1, 0]])
    if mat.shape == (4, 4):
        return np.concatenate([mat[:3, 3], vee(mat[:3, :3])])
    raise ValueError(f"vee expects a 3x3 or 4x4 matrix, got shape {mat.shape}")


def adjoint(g) -> np.ndarray:
    """6x6 adjoint of a homogeneous transform, acting on twists ``[v, w]``."""
    g = _matrix(g, (4, 4))
    rot = g[:3, :3]
    res = np.zeros((6, 6))
    res[:3, :3] = rot
    res[:3, 3:] = hat(g[:3, 3]) @ rot
    res[3:, 3:] = rot
    return res


def pos_mat_to_transform(pos, mat) -> np.ndarray:
    """Transform from a position (3) and a row-major rotation matrix (9)."""
    pos = _vector(pos, 3)
    rot = _vector(mat, 9).reshape(3, 3)
    res = np.zeros((4, 4))
    res[:3, :3] = rot
    res[:3, 3] = pos
    res[3, 3] = 1.0
    return res


def quat_to_rotation(quat) -> np.ndarray:
    """Rotation matrix of a unit quaternion ``(w, x, y, z)``."""
    w, x, y, z = _vector(quat, 4)
    tx, ty, tz = 2.0 * x, 2.0 * y, 2.0 * z
    twx, twy, twz = tx * w, ty * w, tz * w
    txx, txy, txz = tx * x, ty * x, tz * x
    tyy, tyz, tzz = ty * y, tz * y, tz * z
    return np.array(
        [
            [1.0 - (tyy + tzz), txy - twz, txz + twy],
            [txy + twz, 1.0 - (txx + tzz), tyz - twx],
            [txz - twy, tyz + twx, 1.0 - (txx + tyy)],
        ]
    )


def pos_quat_to_transform(pos, quat) -> np.ndarray:
    """Transform from a position and a quaternion ``(w, x, y, z)``."""
    res = np.zeros((4, 4))
    res[:3, :3] = quat_to_rotation(quat)
    res[:3, 3] = _vector(pos, 3)
    res[3, 3] = 1.0
    return res


def _rotation_to_quat(r: np.ndarray) -> tuple[float, np.ndarray]:
    trace = r[0, 0] + r[1, 1] + r[2, 2]
    vec = np.zeros(3)
    if trace > 0.0:
        t = np.sqrt(trace + 1.0)
        w = 0.5 * t
        t = 0.5 / t
        vec[0] = (r[2, 1] - r[1, 2]) * t
        vec[1] = (r[0, 2] - r[2, 0]) * t
        vec[2] = (r[1, 0] - r[0, 1]) * t
        return w, vec
    i = 0
    if r[1, 1] > r[0, 0]:
        i = 1
    if r[2, 2] > r[i, i]:
        i = 2
    j = (i + 1) % 3
    k = (j + 1) % 3
    t = np.sqrt(r[i, i] - r[j, j] - r[k, k] + 1.0)
    vec[i] = 0.5 * t
    t = 0.5 / t
    w = (r[k, j] - r[j, k]) * t
    vec[j] = (r[j, i] + r[i, j]) * t
    vec[k] = (r[k, i] + r[i, k]) * t
    return w, vec


def rot_to_axis_angle(r) -> tuple[float, np.ndarray]:
    """Return ``(angle, axis)`` of a rotation matrix, with ``angle`` in ``[0, pi]``.

    For the identity the angle is zero and the axis is ``(1, 0, 0)``.
    """
    r = _matrix(r, (3, 3))
    w, vec = _rotation_to_quat(r)
    n = float(np.linalg.norm(vec))
    if n == 0.0:
        return 0.0, np.array([1.0, 0.0, 0.0])
    angle = 2.0 * np.arctan2(n, abs(w))
    axis = -vec / n if w < 0.0 else vec / n
    return float(angle), axis


def twist_to_unit_twist(twist) -> tuple[np.ndarray, float]:
    """Split a twist into ``(unit_twist, theta)``.

    The angular part is normalised when non-zero; otherwise the linear part is.
    A zero twist gives a zero unit twist and ``theta == 0``.
    """
    twist = _vector(twist, 6)
    unit = np.zeros(6)
    norm = float(np.linalg.norm(twist[3:]))
    if norm == 0.0:
        theta = float(np.linalg.norm(twist[:3]))
        if theta != 0.0:
            unit[:3] = twist[:3] / theta
        return unit, theta
    return twist / norm, norm


def so3_exp(unit_so3, theta: float) -> np.ndarray:
    """Rodrigues' formula: ``exp(unit_so3 * theta)``."""
    k = _matrix(unit_so3, (3, 3))
    return np.eye(3) + k * np.sin(theta) + k @ k * (1.0 - np.cos(theta))


def se3_exp(unit_se3, theta: float) -> np.ndarray:
    """``exp(unit_se3 * theta)`` for a unit se(3) matrix."""
    unit_se3 = _matrix(unit_se3, (4, 4))
    so3 = unit_se3[:3, :3]
    w = vee(so3)
    v = unit_se3[:3, 3]
    res = np.zeros((4, 4))
    res[3, 3] = 1.0
    if np.all(w == 0.0):
        res[:3, :3] = np.eye(3)
        res[:3, 3] = v * theta
        return res
    rot = so3_exp(so3, theta)
    res[:3, :3] = rot
    res[:3, 3] = (np.eye(3) - rot) @ np.cross(w, v) + np.outer(w, w) @ v * theta
    return res


def w_to_rotation(unit_w, theta: float) -> np.ndarray:
    """Rotation ``exp([w]_x * theta)``; ``unit_w`` may be zero."""
    return so3_exp(hat(_vector(unit_w, 3)), theta)


def twist_to_transform(unit_twist, theta: float) -> np.ndarray:
    """Transform ``exp([v, w]^ * theta)`` for a unit twist."""
    return se3_exp(hat(_vector(unit_twist, 6)), theta)


def rotation_to_w(r) -> tuple[np.ndarray, float]:
    """Return ``(unit_w, theta)`` of a rotation; ``unit_w`` is zero when ``theta`` is."""
    theta, axis = rot_to_axis_angle(r)
    if theta == 0.0:
        axis = np.zeros(3)
    return axis, theta


def rotation_to_so3(r) -> tuple[np.ndarray, float]:
    """Return ``(hat(unit_w), theta)`` of a rotation."""
    w, theta = rotation_to_w(r)
    return hat(w), theta


def transform_to_twist(t) -> tuple[np.ndarray, float]:
    """Logarithm of a transform as ``(unit_twist, theta)`` with twist ``[v, w]``."""
    t = _matrix(t, (4, 4))
    rot = t[:3, :3]
    d = t[:3, 3]
    unit = np.zeros(6)
    theta, w = rot_to_axis_angle(rot)
    if theta == 0.0:
        theta = float(np.linalg.norm(d))
        if theta != 0.0:
            unit[:3] = d / theta
        return unit, theta
    g = (np.eye(3) - rot) @ hat(w) + np.outer(w, w) * theta
    unit[:3] = np.linalg.solve(g, d)
    unit[3:] = w
    return unit, theta


def transform_to_se3(t) -> tuple[np.ndarray, float]:
    """Logarithm of a transform as ``(unit_se3, theta)``."""
    unit_twist, theta = transform_to_twist(t)
    return hat(unit_twist), theta


def pose_to_rel_transform(start, goal) -> np.ndarray:
    """World-frame transform ``dT`` with ``dT @ start == goal``."""
    start = _matrix(start, (4, 4))
    goal = _matrix(goal, (4, 4))
    return goal @ np.linalg.inv(start)


def pose_to_rel_transform_pq(start_p, start_q, goal_p, goal_q) -> np.ndarray:
    """Relative transform between poses given as position and quaternion."""
    return pose_to_rel_transform(
        pos_quat_to_transform(start_p, start_q), pos_quat_to_transform(goal_p, goal_q)
    )


def pose_to_twist(start, goal) -> tuple[np.ndarray, float]:
    """World-frame ``(unit_twist, theta)`` taking ``start`` to ``goal``."""
    return transform_to_twist(pose_to_rel_transform(start, goal))


def pose_to_twist_pq(start_p, start_q, goal_p, goal_q) -> tuple[np.ndarray, float]:
    """Like :func:`pose_to_twist`, for poses given as position and quaternion."""
    return pose_to_twist(
        pos_quat_to_transform(start_p, start_q), pos_quat_to_transform(goal_p, goal_q)
    )


def _as_sequence(values: Sequence[float]) -> np.ndarray:
    return np.asarray(values, dtype=float)