# meshkit

Small building blocks for polygon mesh processing. The package uses only the
standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `meshkit.core`: the exception types used across the package:
  `InvalidInputException` (a `ValueError`), `SolverException`,
  `AllocationException`, `TopologyException`, `IOException` (an `OSError`)
  and `GLException`. It also defines `MAX_INDEX`, the largest index a mesh
  element handle may hold (2**32 - 1).
- `meshkit.properties`: `PropertyContainer`, `PropertyArray` and `Property`.
  A container stores per-element attributes by name and keeps every array
  the same length. `add(name, default)` returns a `Property` handle. If the
  name is already taken, it logs a warning and returns an invalid handle,
  which is falsy. `get`, `get_or_add`, `remove`, `resize`, `push_back`,
  `swap` and `copy` (a deep copy) work on all arrays together. Reading or
  writing through an invalid handle raises `InvalidInputException`.
- `meshkit.stop_watch`: `StopWatch` measures wall-clock time. `start()`
  resets the watch, `resume()` keeps adding to the time measured so far,
  `stop()` returns the watch, and `elapsed()` gives milliseconds. It can be
  used as a context manager, and `str(watch)` reads like `"1.23 ms"`.
- `meshkit.memory_usage`: `max_size()` reports the peak resident memory of
  the process in bytes, on Linux and macOS. `current_size()` reports the
  current resident memory in bytes, on Linux. On other platforms, or when
  the query fails, both return 0.
- `meshkit.barycentric`: `barycentric_coordinates(p, u, v, w)` returns a
  3-tuple. The triangle is projected onto the coordinate plane that is
  orthogonal to the largest component of its normal. A degenerate triangle
  gives `(1/3, 1/3, 1/3)`.
- `meshkit.tesselation`: `tesselate(points)` returns index triples into
  `points`. Triangles are returned as they are. A quad gets whichever of its
  two diagonals gives the smaller sum of squared triangle areas. Larger
  polygons are split by dynamic programming to minimise that sum. An empty
  point list raises `InvalidInputException`. `squared_area(p0, p1, p2)` is
  the squared norm of the edge cross product. `clamp_crease_angle(angle)`
  clamps degrees to the range [0, 180].
- `meshkit.textures`: `cold_warm_texture()` returns a 256x1 RGB color map as
  768 bytes. `checkerboard_texture(resolution=512)` returns a square RGB
  checkerboard as bytes, and the pattern flips every 32 pixels. A negative
  resolution raises `InvalidInputException`.

## Examples

```python
from meshkit.properties import PropertyContainer

container = PropertyContainer()
weight = container.add("v:weight", 0.0)
container.push_back()
container.push_back()
weight[1] = 2.5
print(container.properties())   # ['v:weight']
print(weight[1])                 # 2.5
```

```python
from meshkit.tesselation import tesselate

square = [(0, 0, 0), (1, 0, 0), (1, 1, 0), (0, 1, 0)]
print(tesselate(square))         # [(0, 1, 3), (1, 2, 3)]
```

```python
from meshkit.stop_watch import StopWatch

with StopWatch() as watch:
    sum(range(100_000))
print(watch)                     # e.g. "1.23 ms"
```

## What this package does not do

The package has no mesh data structure of its own, no file readers or
writers for mesh formats, and no viewer or OpenGL rendering. The textures
are returned as raw bytes for the caller to upload or save. Tessellation
returns index triples and does not build render buffers. The package has no
command-line program.