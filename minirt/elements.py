"""Scene elements and the ordered collection that holds them."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import ClassVar, Iterator, Union

from minirt.vec3 import Vec3


class ElementType(IntEnum):
    """Kinds of scene element."""

    INVALID_ELEM = 0
    AMBIENT_LIGHTING = 1
    CAMERA = 2
    LIGHT = 3
    SPHERE = 4
    PLANE = 5
    CYLINDER = 6


@dataclass(frozen=True)
class Ambient:
    """Ambient lighting: a ratio in [0, 1] and a colour."""

    type: ClassVar[ElementType] = ElementType.AMBIENT_LIGHTING
    ratio: float
    color: int


@dataclass(frozen=True)
class Camera:
    """Camera position, view direction and field of view in degrees."""

    type: ClassVar[ElementType] = ElementType.CAMERA
    pos: Vec3
    axis: Vec3
    fov: int


@dataclass(frozen=True)
class Light:
    """Point light with brightness ratio and colour."""

    type: ClassVar[ElementType] = ElementType.LIGHT
    pos: Vec3
    ratio: float
    color: int


@dataclass(frozen=True)
class Sphere:
    """Sphere given by centre, diameter and colour."""

    type: ClassVar[ElementType] = ElementType.SPHERE
    pos: Vec3
    diameter: float
    color: int


@dataclass(frozen=True)
class Plane:
    """Plane given by a point, a normal and a colour."""

    type: ClassVar[ElementType] = ElementType.PLANE
    pos: Vec3
    axis: Vec3
    color: int


@dataclass(frozen=True)
class Cylinder:
    """Cylinder given by centre, axis, diameter, height and colour."""

    type: ClassVar[ElementType] = ElementType.CYLINDER
    pos: Vec3
    axis: Vec3
    diameter: float
    height: float
    color: int


Element = Union[Ambient, Camera, Light, Sphere, Plane, Cylinder]

_ELEMENT_CLASSES = (Ambient, Camera, Light, Sphere, Plane, Cylinder)


class ElementList:
    """Scene elements kept in the order they were added."""

    def __init__(self) -> None:
        self._elements: list[Element] = []

    def add(self, element: Element) -> Element:
        """Append an element and return it."""
        if not isinstance(element, _ELEMENT_CLASSES):
            raise TypeError(f"not a scene element: {element!r}")
        self._elements.append(element)
        return element

    def add_ambient_lighting(self, ratio: float, color: int) -> Ambient:
        return self.add(Ambient(ratio=ratio, color=color))

    def add_camera(self, pos: Vec3, axis: Vec3, fov: int) -> Camera:
        return self.add(Camera(pos=pos, axis=axis, fov=fov))

    def add_light(self, pos: Vec3, ratio: float, color: int) -> Light:
        return self.add(Light(pos=pos, ratio=ratio, color=color))

    def add_sphere(self, pos: Vec3, diameter: float, color: int) -> Sphere:
        return self.add(Sphere(pos=pos, diameter=diameter, color=color))

    def add_plane(self, pos: Vec3, axis: Vec3, color: int) -> Plane:
        return self.add(Plane(pos=pos, axis=axis, color=color))

    def add_cylinder(self, cylinder: Cylinder) -> Cylinder:
        if not isinstance(cylinder, Cylinder):
            raise TypeError(f"not a cylinder: {cylinder!r}")
        return self.add(cylinder)

    def __iter__(self) -> Iterator[Element]:
        return iter(self._elements)

    def __len__(self) -> int:
        return len(self._elements)

    def __repr__(self) -> str:
        return f"ElementList({self._elements!r})"