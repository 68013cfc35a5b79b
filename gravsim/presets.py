#!/usr/bin/env python3
"""
Built-in scenarios.

Each preset builds a fresh UniverseModel. Bodies carry an RGB tuple as
display tag and a visual scale so the viewer can exaggerate their size.

Presets
- solar_system: Sun, Mercury, Venus, Earth, Moon, Mars, Jupiter on circular
  orbits, every planet starting on the Sun's positive x-axis.
- elliptic_solar_system: the same bodies released at aphelion on their real
  (approximate) elliptic orbits, built through EllipticOrbit.
"""
import logging
from typing import Callable, Dict

from .constants import (
    BLUE,
    BROWN,
    DARKGRAY,
    EARTH_MASS,
    EARTH_MOON_DISTANCE,
    EARTH_RADIUS,
    GRAY,
    JUPITER_MASS,
    JUPITER_RADIUS,
    MARS_MASS,
    MARS_RADIUS,
    MERCURY_MASS,
    MERCURY_RADIUS,
    MOON_MASS,
    MOON_RADIUS,
    ORANGE,
    RED,
    SUN_EARTH_DISTANCE,
    SUN_JUPITER_DISTANCE,
    SUN_MARS_DISTANCE,
    SUN_MASS,
    SUN_MERCURY_DISTANCE,
    SUN_RADIUS,
    SUN_VENUS_DISTANCE,
    VENUS_MASS,
    VENUS_RADIUS,
    YELLOW,
)
from .data_models import Body
from .orbits import EllipticOrbit, circular_orbital_velocity
from .physics import UniverseModel
from .vector import Vector2

logger = logging.getLogger(__name__)

# (apoapsis, periapsis) in meters
MERCURY_APSIDES = (6.9817e10, 4.6001e10)
VENUS_APSIDES = (1.08939e11, 1.07477e11)
EARTH_APSIDES = (1.52100e11, 1.47095e11)
MOON_APSIDES = (4.05400e8, 3.62600e8)
MARS_APSIDES = (2.49261e11, 2.06650e11)
JUPITER_APSIDES = (8.16363e11, 7.40595e11)


def _catalog():
    """Fresh Body instances for every body of the catalog, in display order."""
    return {
        "Sun": Body("Sun", SUN_RADIUS, SUN_MASS, YELLOW, visual_scale=50),
        "Mercury": Body("Mercury", MERCURY_RADIUS, MERCURY_MASS, DARKGRAY, visual_scale=1000),
        "Venus": Body("Venus", VENUS_RADIUS, VENUS_MASS, ORANGE, visual_scale=1000),
        "Earth": Body("Earth", EARTH_RADIUS, EARTH_MASS, BLUE, visual_scale=1000),
        "Moon": Body("Moon", MOON_RADIUS, MOON_MASS, GRAY, visual_scale=1000),
        "Mars": Body("Mars", MARS_RADIUS, MARS_MASS, RED, visual_scale=1000),
        "Jupiter": Body("Jupiter", JUPITER_RADIUS, JUPITER_MASS, BROWN, visual_scale=200),
    }


def solar_system(strict: bool = False) -> UniverseModel:
    """Inner solar system plus Jupiter, on circular orbits."""
    universe = UniverseModel(strict=strict)
    bodies = _catalog()
    sun = bodies["Sun"]
    earth = bodies["Earth"]
    moon = bodies["Moon"]

    distances = {
        "Mercury": SUN_MERCURY_DISTANCE,
        "Venus": SUN_VENUS_DISTANCE,
        "Earth": SUN_EARTH_DISTANCE,
        "Mars": SUN_MARS_DISTANCE,
        "Jupiter": SUN_JUPITER_DISTANCE,
    }
    for name, distance in distances.items():
        planet = bodies[name]
        planet.position = Vector2(distance, 0.0)
        planet.velocity = circular_orbital_velocity(sun, planet)

    moon.position = Vector2(SUN_EARTH_DISTANCE + EARTH_MOON_DISTANCE, 0.0)
    moon.velocity = earth.velocity + circular_orbital_velocity(earth, moon)

    for body in bodies.values():
        universe.add_body(body)

    logger.info("built solar system preset with %d bodies", len(universe.bodies))
    return universe


def elliptic_solar_system(strict: bool = False) -> UniverseModel:
    """Same bodies as solar_system, released at aphelion on elliptic orbits."""
    universe = UniverseModel(strict=strict)
    bodies = _catalog()
    sun = bodies["Sun"]
    earth = bodies["Earth"]

    universe.add_body(sun)

    orbits = [
        EllipticOrbit(sun, bodies["Mercury"], *MERCURY_APSIDES),
        EllipticOrbit(sun, bodies["Venus"], *VENUS_APSIDES),
        EllipticOrbit(sun, earth, *EARTH_APSIDES),
        EllipticOrbit(earth, bodies["Moon"], *MOON_APSIDES),
        EllipticOrbit(sun, bodies["Mars"], *MARS_APSIDES),
        EllipticOrbit(sun, bodies["Jupiter"], *JUPITER_APSIDES),
    ]
    for orbit in orbits:
        universe.add_orbiting_body(orbit)

    logger.info("built elliptic solar system preset with %d bodies", len(universe.bodies))
    return universe


PRESETS: Dict[str, Callable[..., UniverseModel]] = {
    "solar-system": solar_system,
    "elliptic-solar-system": elliptic_solar_system,
}


def load_preset(name: str, strict: bool = False) -> UniverseModel:
    try:
        builder = PRESETS[name]
    except KeyError:
        raise KeyError(f"unknown preset {name!r}, expected one of: {', '.join(sorted(PRESETS))}") from None
    return builder(strict=strict)
