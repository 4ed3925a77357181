"""Screw-theory kinematics, trajectories, matrix helpers and (truncated) normal distributions."""

__version__ = "0.1.0"