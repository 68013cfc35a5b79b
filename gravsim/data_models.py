#!/usr/bin/env python3
"""
Data models for Gravity Simulator.

This module defines the Body dataclass shared between physics, rendering, and
the frame controller.

Units and usage
- position is in meters [m], velocity in meters per second [m/s], radius in meters [m], mass in kg.
- position and velocity are replaced with new vectors on every update; they are never mutated in place.
- display_tag is an opaque payload for the renderer (the bundled viewer uses an RGB tuple).
"""
from dataclasses import dataclass, field
from typing import Any

from .vector import Vector2


@dataclass(eq=False)
class Body:
    """
    Represents a celestial body in the simulation.

    Bodies compare by identity: two bodies with identical fields are still
    distinct participants in the simulation.

    Fields:
    - name: Identifier for the body
    - radius: Physical radius in meters
    - mass: Mass in kilograms
    - display_tag: Rendering payload, ignored by the physics
    - position: 2D position in meters
    - velocity: 2D velocity in meters/second
    - visual_scale: Multiplier applied to the radius when drawing
    """
    name: str
    radius: float
    mass: float
    display_tag: Any = None
    position: Vector2 = field(default_factory=Vector2)
    velocity: Vector2 = field(default_factory=Vector2)
    visual_scale: float = 1.0

    def update(self, delta_time: float) -> None:
        """Move along the current velocity for delta_time seconds."""
        self.position = self.position + self.velocity * delta_time

    def momentum(self) -> Vector2:
        return self.velocity * self.mass

    def kinetic_energy(self) -> float:
        return 0.5 * self.mass * self.velocity.squared_magnitude()

    def __str__(self) -> str:
        return self.name
