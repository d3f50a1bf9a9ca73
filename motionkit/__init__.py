"""Planar motion primitives: angles, transforms, unicycle and Dubins motions, a mutable heap, console logging and a CPU clock."""

__version__ = "0.1.0"

__all__ = [
    "angles",
    "spatial",
    "clock",
    "pose",
    "console",
    "unicycle",
    "heap",
    "dubins_geometry",
    "dubins",
]