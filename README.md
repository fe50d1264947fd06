# huzlip

A small toolkit for CAD-style work in Python. It has three parts:

- **Geometry**: 3D vectors, axis-aligned bounding boxes, a bounding volume
  hierarchy over point sets, polygon meshes with vertex adjacency, abstract
  curves and surfaces, and curve tessellation.
- **Templates**: typed parameters, components with string properties,
  component trees, assemblies, parametric templates and a simple
  event/listener mechanism.
- **Utilities**: an in-memory key/value config, file helpers, logging, a
  labelled profiler, a timer and a thread-safe random number source.

The package needs no third-party libraries.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Geometry

```python
from huzlip.vector3d import Vector3D
from huzlip.aabb import AABB
from huzlip.mesh import Mesh

a = Vector3D(1, 2, 3)
b = Vector3D(4, 5, 6)
print(a + b)                 # Vector3D(x=5, y=7, z=9)
print(2 * b)                 # Vector3D(x=8, y=10, z=12)
print(a.dot(b))              # 32
print(a.cross(b))            # Vector3D(x=-3, y=6, z=-3)
print(a[0], list(a))         # 1 [1, 2, 3]

box = AABB()                 # starts empty
box.expand(a)
box.expand(b)
print(box.contains(Vector3D(2, 3, 4)))  # True

mesh = Mesh()
mesh.vertices = [Vector3D(0, 0, 0), Vector3D(1, 0, 0), Vector3D(0, 1, 0)]
mesh.faces = [[0, 1, 2]]
mesh.compute_adjacency()
print(mesh.vertex_adjacency)  # [[1, 2], [0, 2], [1, 0]]
```

- `Vector3D` supports `+`, `-`, scalar `*` (either side) and `/`, indexing
  with 0, 1, 2 (other indices raise `IndexError`), iteration, `dot`,
  `cross`, `norm` and `normalized` (a zero vector is returned unchanged).
- `AABB(lower, upper)` is a box; `AABB()` is empty until expanded.
  `expand` accepts a point or another box. `overlaps` and `contains` count
  touching as inside.
- `Mesh.compute_adjacency()` rebuilds the neighbour list of each vertex from
  the face edges, ignoring edges that refer to vertices outside the mesh.
  `Mesh.clear()` empties the mesh.
- `huzlip.bvh.BVH(points)` bounds all the points in a single root node
  (`BVH.root`, a `BVHNode`, or `None` for no points).
  `query(lower, upper)` returns the indices of all points when the query box
  overlaps their bounds, and an empty list otherwise.
- Curves and surfaces are defined by subclassing `huzlip.curves.Curve`
  (`eval(t)`, `discretize(segments)`) or `huzlip.curves.Surface`
  (`eval(u, v)`, `discretize(u_segments, v_segments)`).
  `tessellate_curve(curve, segments)` turns a curve into a polyline mesh
  whose faces are consecutive point pairs.

## Templates

```python
from huzlip.parameter import Parameter
from huzlip.component import Component
from huzlip.assembly import Assembly, ComponentTreeNode

p = Parameter("width", 42)
print(p.get_as(int))      # 42
print(p.get_as(str))      # None

class Part(Component):
    def clone(self):
        copy = Part(self.name)
        for key in self.property_keys():
            copy.set_property(key, self.get_property(key))
        return copy

root = Part("root")
root.set_property("material", "steel")
print(root.get_property("colour"))   # "" (unset properties are empty)

assembly = Assembly(root)
bolt = ComponentTreeNode(Part("bolt"))
assembly.root.add_child(bolt)
print(bolt.parent is assembly.root)                 # True
print([c.name for c in assembly.all_components()])  # ['root', 'bolt']
```

`Parameter.get_as(kind)` returns the value only when it is held as exactly
that type, so a `bool` value is not returned for `int`.

`huzlip.template.Template` is built from a list of parameters and exposes
them as `parameters`. `set_parameter(name, value)` updates the first
parameter with that name and ignores unknown names. Subclasses implement
`build()`, which returns a component.

`huzlip.event.Event` keeps a list of connected callables. `emit(*args)` calls
each of them in the order they were connected.

## Utilities

```python
from huzlip.config import Config
from huzlip import filesystem, log
from huzlip.profiler import Profiler
from huzlip.timer import Timer
from huzlip.rng import Random

cfg = Config()
cfg.set("units", "mm")
print(cfg.get("units"), cfg.get("missing", "def"), "units" in cfg)

filesystem.write_file("notes.txt", "abc")
print(filesystem.exists("notes.txt"), filesystem.read_file("notes.txt"))
print(filesystem.list_files(".", recursive=False))

log.info("loaded")        # [INFO] loaded      (stdout)
log.warn("careful")       # [WARNING] careful  (stdout)
log.error("failed")       # [ERROR] failed     (stderr)

prof = Profiler()
prof.start("build")
prof.stop()
print(prof.counts)        # {'build': 1}
prof.report()

t = Timer()
print(t.elapsed_str())    # e.g. "0.000012 s"

rng = Random(seed=1)
print(rng.uniform(0.0, 1.0), rng.randint(1, 6))
```

- `filesystem.read_file` returns an empty string for a file it cannot read;
  `list_files` returns an empty list for a directory it cannot open.
- `Profiler.stop()` without a matching `start()` raises `RuntimeError`.
  `times` and `counts` give the totals per label; `report()` prints them
  sorted by label, with averages.
- `Random` is safe to share between threads. `uniform(low, high)` draws from
  `[low, high)`, `randint(low, high)` includes both ends. Without a seed it
  is seeded from the clock and the operating system.

## What the package does not do

It has no mesh file import or export, and no remeshing, subdivision,
topology repair or boolean operations on meshes. The bounding volume
hierarchy does not split its root node, so queries do not narrow the result
down below the bounds of the whole point set. There is no command-line tool.