# motionkit

This package provides building blocks for planar motion planning. It is plain Python and uses numpy.

- `motionkit.angles` converts between degrees and radians with `to_degrees` and `to_radians`. It normalises angles with `normalize_angle` and `normalize_angle_positive`. It gives shortest, minor-arc and major-arc differences and distances, and `unwind`. For Z-Y-X Euler angles it has `get_euler_zyx`, `from_euler_zyx` and `normalize_euler_zyx`. For quaternions, which are `(w, x, y, z)` tuples, it has `quaternion_from_euler_zyx`, `quaternion_to_matrix`, `get_euler_zyx_from_quaternion` and `get_nearest_planar_rotation`.
- `motionkit.spatial` returns rotations and homogeneous transforms as numpy arrays:
  - `rotation2d(theta)`, a 2x2 rotation;
  - `angle_axis(angle, axis)`, a 3x3 rotation;
  - `make_affine2(x, y, theta)`, a 3x3 transform;
  - `make_affine(x, y, z, yaw, pitch, roll)`, a 4x4 transform.
- `motionkit.pose` has the frozen `Pose2D(x, y, theta)` dataclass with `Pose2D.from_vector`, and `pos(pose)`, which returns the position as a 2-vector.
- `motionkit.unicycle` has `UnicycleMotion`, a straight segment followed by a constant-radius arc. Build one with `make_unicycle_motion` or `make_unicycle_motion_from_poses`. Sample it with `motion(t)` or `motion.at(t)` for `t` in [0, 1]. It also has `length()` and `is_valid()`.
- `motionkit.dubins` has `DubinsMotion`, which is two turns joined by a straight segment. `make_dubins_paths(start, goal, radius)` returns the RR, LL, LR and RL paths that exist, in that order.
- `motionkit.dubins_geometry` holds the geometry that the Dubins paths are built from:
  - turning circles, with `compute_turning_circles`;
  - inner and outer tangents, with `compute_inner_tangent` and `compute_outer_tangent`;
  - arc lengths, with `compute_arc_length`;
  - angle interpolation, with `interp_angle`;
  - sampled turn and straight segments, with `generate_turn_path` and `generate_straight_path`.
- `motionkit.heap` has `IntrusiveHeap`, a mutable binary min-heap whose `HeapElement` items keep track of their own position.
- `motionkit.console` has `Console`, a set of dotted hierarchical `Logger`s with `Level`s that can be read from a config file, and `emit` for writing formatted messages.
- `motionkit.clock` gives process CPU time as a `timedelta` through `now()`. It also has `to_seconds(duration)` and `to_duration(seconds)`, which truncates to whole microseconds.

## Install

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Examples

Unicycle motion:

```python
from motionkit.unicycle import make_unicycle_motion

motion = make_unicycle_motion(0.0, 0.0, 0.0, 2.0, 1.0, 1.5707963, 1e-9)
if motion.is_valid():
    print(motion.length())
    print(motion(0.5))  # pose halfway along the motion
```

A motion is marked invalid in two cases:

- The headings are the same, but the goal does not lie along the start heading.
- The headings differ, but the goal lies along the start heading, so reaching it would need a turn in place.

Dubins paths:

```python
from motionkit.pose import Pose2D
from motionkit.dubins import make_dubins_paths

paths = make_dubins_paths(Pose2D(0.0, 0.0, 0.0), Pose2D(10.0, 5.0, 0.0), 1.0)
shortest = min(paths, key=lambda p: p.length())
print(shortest(0.0), shortest(1.0))
```

Mutable heap:

```python
from motionkit.heap import HeapElement, IntrusiveHeap

class Node(HeapElement):
    def __init__(self, key):
        super().__init__()
        self.key = key

heap = IntrusiveHeap(lambda a, b: a.key < b.key)
a, b = Node(5), Node(3)
heap.push(a)
heap.push(b)
a.key = 1
heap.decrease(a)
assert heap.min() is a
```

How the heap behaves:

- `pop()` removes and returns the first element. On an empty heap, `pop()` and `min()` raise `IndexError`.
- `update`, `increase`, `decrease` and `erase` raise `ValueError` for an element that is not in the heap.
- `make()` reorders the whole heap after many priorities have changed.

Console logging:

```python
import io
from motionkit.console import Console, Level, LogLocation

out = io.StringIO()
console = Console(stdout=out)
console.initialize()  # reads SMPL_CONSOLE_CONFIG_FILE if it is set

site = LogLocation()
console.init_log_location(site, "planner.search", Level.DEBUG)
if site.enabled:
    console.emit(Level.DEBUG, "search.py", 42, "expanding")
console.emit(Level.INFO, "search.py", 43, "done")
print(out.getvalue())  # "[INFO]  done\n"
```

The configuration file is INI-style, and `#` starts a comment.

- A `[format]` section takes the booleans `unbuffered`, `colored` and `show_locations`.
- Every other `key = LEVEL` entry sets the level of the logger with that qualified name, where `LEVEL` is one of `DEBUG`, `INFO`, `WARN`, `ERROR` or `FATAL`. Keys inside a section are qualified as `section.key`.
- Messages at `ERROR` and above go to the error stream.

## What it does not do

- There is no command-line program. The package is a library only.
- There is no planner or graph search. The modules give motions, geometry, a heap and logging, which a planner can be built on.
- `Console.emit` writes every message it is given. Filtering by level is left to the caller, through `LogLocation.enabled`.