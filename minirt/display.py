"""Viewport geometry derived from the camera field of view."""

from __future__ import annotations

import math
from dataclasses import dataclass

from minirt.vec3 import Vec3

WIDTH = 500
ASPECT_RATIO = 1


@dataclass(frozen=True)
class Display:
    """Image size in pixels and viewport size in scene units."""

    width: int
    height: int
    vp_width: float
    vp_height: float
    camera: Vec3


def init_display(fov: float, camera: Vec3) -> Display:
    """Build the display for a horizontal field of view given in degrees."""
    fov_rad = math.radians(fov)
    width = WIDTH
    height = int(WIDTH / ASPECT_RATIO)
    vp_width = 2 * math.tan(fov_rad / 2)
    # The ratio is taken between integer pixel counts.
    vp_height = vp_width * (height // width)
    return Display(
        width=width,
        height=height,
        vp_width=vp_width,
        vp_height=vp_height,
        camera=camera,
    )