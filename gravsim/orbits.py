#!/usr/bin/env python3
"""
Orbital helpers used to derive initial states.

EllipticOrbit is a transient descriptor: it is consumed once by
UniverseModel.add_orbiting_body to place a secondary body at its apoapsis with
the velocity the vis-viva equation prescribes, then discarded.

Conventions
- The secondary starts on the primary's positive x-axis, so the velocity at
  apoapsis is purely along y: -y for prograde, +y for retrograde.
- circular_orbital_velocity works from any relative position: the result is
  the radius vector turned 90 degrees counter-clockwise, scaled to sqrt(GM/r).
"""
import math
from dataclasses import dataclass

from .constants import G
from .data_models import Body
from .errors import DegenerateConfigurationError
from .vector import Vector2, ieee_div


def _sqrt(value: float) -> float:
    # math.sqrt raises on negative input; the physics core lets nan propagate
    if value < 0 or math.isnan(value):
        return math.nan
    return math.sqrt(value)


@dataclass(frozen=True)
class EllipticOrbit:
    """
    Simplified elliptic orbit of a secondary body around a primary body.

    Fields:
    - primary: Body being orbited
    - secondary: Orbiting body
    - apoapsis: Farthest distance from the primary, in meters
    - periapsis: Nearest distance from the primary, in meters
    - prograde: True for a prograde orbit, False for retrograde
    """
    primary: Body
    secondary: Body
    apoapsis: float
    periapsis: float
    prograde: bool = True

    @property
    def semi_major_axis(self) -> float:
        return (self.apoapsis + self.periapsis) / 2

    @property
    def eccentricity(self) -> float:
        return ieee_div(self.apoapsis - self.periapsis, self.apoapsis + self.periapsis)

    def validate(self) -> None:
        """Raise DegenerateConfigurationError unless apoapsis >= periapsis > 0."""
        if not self.periapsis > 0:
            raise DegenerateConfigurationError(
                f"periapsis of {self.secondary} must be positive, got {self.periapsis}")
        if self.apoapsis < self.periapsis:
            raise DegenerateConfigurationError(
                f"apoapsis of {self.secondary} ({self.apoapsis}) is below its periapsis ({self.periapsis})")

    def velocity_at_apoapsis(self) -> Vector2:
        """
        Velocity of the secondary body at its apoapsis, relative to the primary.

        Vis-viva at r = apoapsis: v = sqrt(mu * (2/r - 1/a)).
        """
        standard_gravitational_parameter = G * self.primary.mass
        semi_major_axis = self.semi_major_axis

        magnitude = _sqrt(standard_gravitational_parameter
                          * (ieee_div(2, self.apoapsis) - ieee_div(1, semi_major_axis)))
        return Vector2(0.0, -magnitude if self.prograde else magnitude)

    def period(self) -> float:
        """Orbital period in seconds (Kepler's third law)."""
        mu = G * self.primary.mass
        a = self.semi_major_axis
        return 2 * math.pi * _sqrt(ieee_div(a * a * a, mu))


def circular_orbit_speed(central_mass: float, orbital_radius: float) -> float:
    """
    Speed needed for a circular orbit of the given radius.

    Gravity provides exactly the centripetal force: G * M / r = v^2 / r,
    therefore v = sqrt(G * M / r).
    """
    return _sqrt(ieee_div(G * central_mass, orbital_radius))


def orbital_period(central_mass: float, orbital_radius: float) -> float:
    """Period of a circular orbit, T = 2 * pi * sqrt(r^3 / (G * M))."""
    return 2 * math.pi * _sqrt(ieee_div(orbital_radius * orbital_radius * orbital_radius, G * central_mass))


def circular_orbital_velocity(primary: Body, secondary: Body) -> Vector2:
    """
    Velocity, relative to the primary, that puts the secondary on a circular orbit.

    The direction is tangential, 90 degrees counter-clockwise from the
    primary-to-secondary radius vector.
    """
    relative_position = secondary.position - primary.position
    distance = relative_position.magnitude()

    direction = relative_position.normalize().rotate(math.pi / 2)
    return direction * circular_orbit_speed(primary.mass, distance)
