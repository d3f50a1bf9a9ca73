[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "motionkit"
version = "0.1.0"
description = "Planar motion primitives: angle utilities, unicycle and Dubins motions, an intrusive binary heap and a small console logger."
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["motion planning", "dubins", "unicycle", "angles", "heap", "robotics"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["motionkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
