# minirt

Building blocks for a small ray tracer: a parser and validator for `.rt`
scene files, a 3D vector type, colour helpers, viewport setup and a
`printf`-style formatter.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
minirt scene.rt
```

The command takes exactly one argument, a file whose name ends in `.rt`.
It reads the scene and prints `Parsing Success !` (in bold green) or
`Parsing Error !` (in bold red) to standard output. A wrong number of
arguments (`Invalid number of arguments !`), a name without the `.rt`
suffix (`Invalid format !`) or a file that cannot be opened
(`Invalid file !`, after the reason) is reported on standard error.

The command always exits with status 1, including when the scene parses.

## What this package does not do

It does not render images and does not open a window: the command only
checks and reads the scene file. The vector, colour and viewport helpers
are there for a renderer to build on, but no ray casting is done.

## Scene files

Each non-empty line describes one element; fields are separated by spaces.

| Id   | Element          | Fields                                               |
|------|------------------|------------------------------------------------------|
| `A`  | ambient lighting | ratio (0–1), colour                                  |
| `C`  | camera           | position, orientation axis, field of view (0–128)    |
| `L`  | light            | position, brightness ratio (0–1), colour             |
| `sp` | sphere           | centre, diameter, colour                             |
| `pl` | plane            | point, normal axis, colour                           |
| `cy` | cylinder         | centre, axis, diameter, height, colour               |

Vectors are written `x,y,z`, colours `r,g,b` with each channel in 0–255.
`A`, `C` and `L` may each appear only once. A file with no lines at all is
rejected.

```
A 0.2 255,255,255
C -50,0,20 0,0,1 70
L -40,0,30 0.7 255,255,255
pl 0,0,0 0,1.0,0 255,0,225
sp 0,0,20 20 255,0,0
cy 50.0,0.0,20.6 0,0,1.0 14.2 21.42 10,0,255
```

## Library use

```python
from minirt.scene import load_scene, read_scene, SceneError

try:
    elements = load_scene("scene.rt")
except SceneError as exc:
    print("invalid scene:", exc)
else:
    for element in elements:
        print(element)
```

`read_scene` takes either the scene text as one string or an iterable of
lines. `SceneParser` gives line-by-line control: `parse_line` takes the
fields of one line and returns the element it added, and `parse_lines`
parses an iterable of lines. Errors are raised as `SceneError` (a
`ValueError`), prefixed with the line number.

The parsed elements are collected in an `ElementList` (from
`minirt.elements`) holding frozen `Ambient`, `Camera`, `Light`, `Sphere`,
`Plane` and `Cylinder` records, each tagged with an `ElementType` in its
`type` attribute. The list keeps insertion order and supports `len()` and
iteration.

Single values can be checked and converted with `minirt.values`:
`parse_float` (strict; raises `ValueError`), `is_vec`, `get_vec`,
`is_color` and `get_color`.

### Vectors and colours

```python
from minirt.vec3 import Vec3
from minirt.color import rgb_to_hex, split_color, format_color

v = Vec3(1.0, 2.0, 2.0)
v.magnitude()          # 3.0
v.normalized()
(v + v) * 0.5 - v
Vec3(1.0, 0.0, 0.0).to_color_int()   # 0xFF0000

rgb_to_hex(255, 128, 0)              # 0xFF8000
split_color(0xFF8000)                # (255, 128, 0)
print(format_color(0xFF8000))
```

### Viewport

```python
from minirt.display import init_display
from minirt.vec3 import Vec3

display = init_display(70, Vec3(0.0, 0.0, 0.0))
display.width, display.height        # (500, 500)
display.vp_width, display.vp_height
```

### Formatting

`minirt.printf` provides a `printf`-style formatter supporting the
conversions `c s p d i u x X f %`, the flags `- 0 . # + space` and an `l`
length modifier. Floating-point digits are truncated rather than rounded,
and a `%` that does not start a valid specification is copied as is.

```python
from minirt.printf import format_string, printf, fprintf

format_string("%-5d|%05.2f|%#x", 42, 3.14159, 255)
printf("%s has %d elements\n", "scene.rt", 6)
```

`printf` and `fprintf` return the number of characters written. The
specification parser itself is in `minirt.format_spec` (`parse_spec`,
`FormatSpec`, `Flags`).