#!/usr/bin/env python3
"""
Camera utilities for 2D world-to-screen transforms.
"""
import math
from typing import Optional, Tuple

from .constants import (
    DEFAULT_METERS_PER_PIXEL,
    MIN_DISPLAY_RADIUS,
    MIN_METERS_PER_PIXEL,
    MAX_METERS_PER_PIXEL,
    VIEW_WIDTH,
    VIEW_HEIGHT,
    ZOOM_FACTOR,
)
from .vector import Vector2, clamp


class Camera2D:
    """
    Simple 2D camera that maps world coordinates (meters) to screen pixels.

    The camera looks at `center`, or at the anchor position when one is given
    to the transform, so the view can follow a moving body. Screen y grows
    downwards, as in the world frame the physics uses.
    """

    def __init__(self, center=(0.0, 0.0), meters_per_pixel=DEFAULT_METERS_PER_PIXEL):
        self.center = Vector2.of(center)
        self.mpp = meters_per_pixel
        self.viewport_size = (VIEW_WIDTH, VIEW_HEIGHT)

    def set_viewport_size(self, w: int, h: int) -> None:
        self.viewport_size = (w, h)

    def _origin(self, anchor: Optional[Vector2]) -> Vector2:
        return anchor if anchor is not None else self.center

    def world_to_screen(self, pos: Vector2, anchor: Optional[Vector2] = None) -> Tuple[int, int]:
        origin = self._origin(anchor)
        px = (pos.x - origin.x) / self.mpp + self.viewport_size[0] / 2
        py = (pos.y - origin.y) / self.mpp + self.viewport_size[1] / 2
        return (int(px), int(py))

    def screen_to_world(self, screen: Tuple[int, int], anchor: Optional[Vector2] = None) -> Vector2:
        origin = self._origin(anchor)
        wx = (screen[0] - self.viewport_size[0] / 2) * self.mpp + origin.x
        wy = (screen[1] - self.viewport_size[1] / 2) * self.mpp + origin.y
        return Vector2(wx, wy)

    def zoom(self, units: float) -> None:
        """Zoom in for positive scroll units, out for negative ones."""
        self.mpp = clamp(self.mpp / ZOOM_FACTOR ** units, MIN_METERS_PER_PIXEL, MAX_METERS_PER_PIXEL)

    def display_radius(self, radius: float, minimal_radius: float, visual_scale: float = 1.0) -> float:
        """
        On-screen radius in pixels.

        Bodies are drawn at least MIN_DISPLAY_RADIUS pixels wide, growing with
        the logarithm of their size relative to the smallest body, so that both
        the Sun and the Moon stay visible at solar-system scale.
        """
        logarithmic = MIN_DISPLAY_RADIUS * (1 + math.log(radius / minimal_radius))
        return max(logarithmic, radius * visual_scale / self.mpp)
