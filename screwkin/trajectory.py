"""Trajectories over a time parameter, usually in ``[0, 1]``.

Screw motions are expressed in the world frame with twists ordered ``[v, w]``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

import numpy as np

from screwkin.geometry import (
    pose_to_rel_transform,
    transform_to_twist,
    twist_to_transform,
    twist_to_unit_twist,
)

__all__ = [
    "Trajectory",
    "PoseTrajectory",
    "ScrewPoseTrajectory",
    "PositionTrajectory",
    "LinearPositionTrajectory",
    "ScrewPositionTrajectory",
    "SimpleSinusoidTrajectory",
    "LinearVectorTrajectory",
]


def _vec(a, size: int | None = None) -> np.ndarray:
    vec = np.array(a, dtype=float).reshape(-1)
    if size is not None and vec.size != size:
        raise ValueError(f"expected a vector of length {size}, got {vec.size}")
    return vec


class Trajectory(ABC):
    """A value that can be interpolated at time ``t``."""

    @abstractmethod
    def interpolate(self, t: float) -> np.ndarray:
        """Value of the trajectory at time ``t``."""


class PoseTrajectory(Trajectory):
    """Trajectory of 4x4 homogeneous transforms."""

    @abstractmethod
    def twist(self, t: float) -> np.ndarray:
        """World-frame twist ``[v, w]`` at time ``t``."""


class ScrewPoseTrajectory(PoseTrajectory):
    """Pose moving along a constant screw from ``start``."""

    def __init__(self, start, unit_screw, theta: float) -> None:
        self.start = np.array(start, dtype=float).reshape(4, 4)
        self.unit_screw = _vec(unit_screw, 6)
        self.theta = float(theta)

    @classmethod
    def from_poses(cls, start, goal) -> "ScrewPoseTrajectory":
        """Screw motion reaching ``goal`` at ``t == 1``."""
        unit, theta = transform_to_twist(pose_to_rel_transform(start, goal))
        return cls(start, unit, theta)

    def interpolate(self, t: float) -> np.ndarray:
        """Pose at ``t``; values outside ``[0, 1]`` extrapolate along the screw."""
        return twist_to_transform(self.unit_screw, t * self.theta) @ self.start

    def twist(self, t: float) -> np.ndarray:
        return self.unit_screw * self.theta


class PositionTrajectory(Trajectory):
    """Trajectory of 3-D positions."""

    @abstractmethod
    def velocity(self, t: float) -> np.ndarray:
        """Velocity at time ``t``."""


class LinearPositionTrajectory(PositionTrajectory):
    """Straight-line motion at constant speed."""

    def __init__(self, start, unit_vec, distance: float) -> None:
        self.start = _vec(start, 3)
        self.unit_vec = _vec(unit_vec, 3)
        self.distance = float(distance)

    @classmethod
    def between(cls, start, goal) -> "LinearPositionTrajectory":
        """Line from ``start`` at ``t == 0`` to ``goal`` at ``t == 1``."""
        start = _vec(start, 3)
        dx = _vec(goal, 3) - start
        distance = float(np.linalg.norm(dx))
        unit = np.zeros(3) if distance == 0.0 else dx / distance
        return cls(start, unit, distance)

    def interpolate(self, t: float) -> np.ndarray:
        return self.start + t * self.distance * self.unit_vec

    def velocity(self, t: float) -> np.ndarray:
        return self.unit_vec * self.distance


class ScrewPositionTrajectory(PositionTrajectory):
    """Point carried by a world-frame screw motion; ``t == 1`` applies the full screw."""

    def __init__(self, start, unit_screw, theta: float) -> None:
        self.start = _vec(start, 3)
        self.unit_screw = _vec(unit_screw, 6)
        self.theta = float(theta)

    @classmethod
    def from_screw(cls, start, screw) -> "ScrewPositionTrajectory":
        """Build from an unnormalised screw ``[v, w]``."""
        unit, theta = twist_to_unit_twist(screw)
        return cls(start, unit, theta)

    def interpolate(self, t: float) -> np.ndarray:
        tf = twist_to_transform(self.unit_screw, t * self.theta)
        return tf[:3, :3] @ self.start + tf[:3, 3]

    def velocity(self, t: float) -> np.ndarray:
        """``w x r + v`` at the position reached at time ``t``."""
        pos = self.interpolate(t)
        screw = self.unit_screw * self.theta
        return np.cross(screw[3:], pos) + screw[:3]


class SimpleSinusoidTrajectory(PositionTrajectory):
    """Sine wave along ``unit_vec``, oscillating in the horizontal plane."""

    def __init__(self, start, unit_vec, period: float, t_scale: float, y_scale: float) -> None:
        self.start = _vec(start, 3)
        self.unit_x_vec = _vec(unit_vec, 3)
        z = np.cross(np.array([0.0, 0.0, 1.0]), self.unit_x_vec)
        norm = float(np.linalg.norm(z))
        if norm == 0.0:
            raise ValueError("unit_vec must not be parallel to the z axis")
        self.unit_z_vec = z / norm
        self.unit_y_vec = np.cross(self.unit_z_vec, self.unit_x_vec)
        self.period = float(period)
        self.t_scale = float(t_scale)
        self.y_scale = float(y_scale)

    def interpolate(self, t: float) -> np.ndarray:
        scaled_t = t * self.t_scale
        y = self.y_scale * np.sin(2.0 * np.pi / self.period * scaled_t)
        return self.start + self.unit_x_vec * scaled_t + self.unit_y_vec * y

    def velocity(self, t: float) -> np.ndarray:
        omega = 2.0 * np.pi / self.period
        dy = self.y_scale * np.cos(omega * t * self.t_scale) * omega * self.t_scale
        return self.unit_x_vec * self.t_scale + self.unit_y_vec * dy

    def x_vec(self) -> np.ndarray:
        """Direction of travel."""
        return self.unit_x_vec.copy()

    def y_vec(self) -> np.ndarray:
        """Direction of oscillation."""
        return self.unit_y_vec.copy()

    def z_vec(self) -> np.ndarray:
        """Normal of the plane of motion."""
        return self.unit_z_vec.copy()


class LinearVectorTrajectory(Trajectory):
    """Straight-line motion of a vector of any length."""

    def __init__(self, start, unit_vec, distance: float) -> None:
        self.start = _vec(start)
        self.unit_vec = _vec(unit_vec, self.start.size)
        self.distance = float(distance)

    @classmethod
    def between(cls, start, goal) -> "LinearVectorTrajectory":
        """Line from ``start`` at ``t == 0`` to ``goal`` at ``t == 1``."""
        start = _vec(start)
        dx = _vec(goal, start.size) - start
        distance = float(np.linalg.norm(dx))
        unit = np.zeros(start.size) if distance == 0.0 else dx / distance
        return cls(start, unit, distance)

    def interpolate(self, t: float) -> np.ndarray:
        return self.start + t * self.distance * self.unit_vec