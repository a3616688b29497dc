"""Reading scene descriptions into an element list.

Each non-empty line holds an identifier followed by space-separated
fields.  The ambient light ("A"), camera ("C") and light ("L") may each
appear once; planes ("pl"), spheres ("sp") and cylinders ("cy") any
number of times.
"""

from __future__ import annotations

import os
from collections import Counter
from typing import Iterable, Iterator, Sequence, Union

from minirt.elements import Ambient, Camera, Cylinder, Element, ElementList, Light, Plane, Sphere
from minirt.values import INT_MAX, _atof, _atol, get_color, get_vec, is_color, is_vec, parse_float
from minirt.vec3 import Vec3

_UNIQUE = ("A", "C", "L")


class SceneError(ValueError):
    """Raised when a scene description is invalid."""


def _expect_count(fields: Sequence[str], count: int) -> None:
    if len(fields) != count:
        raise SceneError(f"'{fields[0]}' expects {count - 1} fields, got {len(fields) - 1}")


def _vector(field: str) -> Vec3:
    if not is_vec(field):
        raise SceneError(f"invalid vector: {field!r}")
    return get_vec(field)


def _color(field: str) -> int:
    if not is_color(field):
        raise SceneError(f"invalid colour: {field!r}")
    return get_color(field)


def _ratio(field: str) -> float:
    ratio = _atof(field)
    if not 0.0 <= ratio <= 1.0:
        raise SceneError(f"ratio out of range: {field!r}")
    return ratio


def _size(value: float, field: str) -> float:
    if not 0 <= value <= INT_MAX:
        raise SceneError(f"size out of range: {field!r}")
    return value


def _strict_size(field: str) -> float:
    try:
        value = parse_float(field)
    except ValueError as exc:
        raise SceneError(f"invalid size: {field!r}") from exc
    return _size(value, field)


def _split_lines(text: str) -> Iterator[str]:
    """Yield the lines of ``text``, each keeping its newline."""
    pieces = text.split("\n")
    for piece in pieces[:-1]:
        yield piece + "\n"
    if pieces[-1]:
        yield pieces[-1]


class SceneParser:
    """Parses scene lines and collects their elements."""

    def __init__(self, elements: ElementList | None = None) -> None:
        self.elements = elements if elements is not None else ElementList()
        self._seen: Counter[str] = Counter()

    def _ambient(self, fields: Sequence[str]) -> Ambient:
        _expect_count(fields, 3)
        ratio = _ratio(fields[1])
        color = _color(fields[2])
        return self.elements.add_ambient_lighting(ratio, color)

    def _camera(self, fields: Sequence[str]) -> Camera:
        _expect_count(fields, 4)
        pos = _vector(fields[1])
        axis = _vector(fields[2])
        fov = _atol(fields[3])
        if not 0 <= fov <= 128:
            raise SceneError(f"field of view out of range: {fields[3]!r}")
        return self.elements.add_camera(pos, axis, fov)

    def _light(self, fields: Sequence[str]) -> Light:
        _expect_count(fields, 4)
        pos = _vector(fields[1])
        ratio = _ratio(fields[2])
        color = _color(fields[3])
        return self.elements.add_light(pos, ratio, color)

    def _sphere(self, fields: Sequence[str]) -> Sphere:
        _expect_count(fields, 4)
        pos = _vector(fields[1])
        diameter = _size(_atof(fields[2]), fields[2])
        color = _color(fields[3])
        return self.elements.add_sphere(pos, diameter, color)

    def _plane(self, fields: Sequence[str]) -> Plane:
        _expect_count(fields, 4)
        pos = _vector(fields[1])
        axis = _vector(fields[2])
        color = _color(fields[3])
        return self.elements.add_plane(pos, axis, color)

    def _cylinder(self, fields: Sequence[str]) -> Cylinder:
        _expect_count(fields, 6)
        pos = _vector(fields[1])
        axis = _vector(fields[2])
        diameter = _strict_size(fields[3])
        height = _strict_size(fields[4])
        color = _color(fields[5])
        return self.elements.add_cylinder(
            Cylinder(pos=pos, axis=axis, diameter=diameter, height=height, color=color)
        )

    _HANDLERS = {
        "A": _ambient,
        "C": _camera,
        "L": _light,
        "pl": _plane,
        "sp": _sphere,
        "cy": _cylinder,
    }

    def parse_line(self, fields: Sequence[str]) -> Element:
        """Parse the fields of one line, add the element and return it."""
        fields = list(fields)
        if not fields:
            raise SceneError("line has no identifier")
        ident = fields[0]
        if ident in _UNIQUE:
            earlier = self._seen[ident]
            self._seen[ident] += 1
            if earlier:
                raise SceneError(f"element '{ident}' may appear only once")
        handler = self._HANDLERS.get(ident)
        if handler is None:
            raise SceneError(f"unknown identifier: {ident!r}")
        return handler(self, fields)

    def parse_lines(self, lines: Iterable[str]) -> ElementList:
        """Parse every line and return the element list.

        Raises SceneError on the first invalid line, or if there are no lines.
        """
        number = 0
        for number, line in enumerate(lines, 1):
            fields = [field for field in line.split(" ") if field]
            if not fields:
                continue
            try:
                self.parse_line(fields)
            except SceneError as exc:
                raise SceneError(f"line {number}: {exc}") from exc
        if number == 0:
            raise SceneError("scene is empty")
        return self.elements


def read_scene(lines: Union[str, Iterable[str]]) -> ElementList:
    """Parse a scene given as text or as an iterable of lines."""
    if isinstance(lines, str):
        lines = _split_lines(lines)
    return SceneParser().parse_lines(lines)


def load_scene(path: Union[str, os.PathLike]) -> ElementList:
    """Read and parse the scene file at ``path``."""
    with open(path, encoding="utf-8", errors="surrogateescape", newline="") as handle:
        text = handle.read()
    return read_scene(text)