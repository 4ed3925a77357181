[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "screwkin"
version = "0.1.0"
description = "Screw-theory rigid-body kinematics, trajectories and normal/truncated-normal distributions"
requires-python = ">=3.10"
keywords = ["screw theory", "SE3", "twist", "trajectory", "truncated normal", "robotics"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Mathematics",
]
dependencies = [
    "numpy",
    "scipy",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["screwkin"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
