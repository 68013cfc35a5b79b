#!/usr/bin/env python3
"""
Core Physics Engine for Gravity Simulator

Responsibilities
- Own the ordered collection of bodies making up the universe.
- Compute pairwise Newtonian gravitational forces (no softening).
- Advance body states with a first-order explicit Euler step.
- Place orbiting bodies from an EllipticOrbit descriptor.

Units and conventions
- World space positions are in meters [m].
- Velocities are in meters per second [m/s].
- Masses are in kilograms [kg].
- Time steps are in seconds [s].
- The gravitational constant G is expressed in SI: m^3 kg^-1 s^-2.

Numerical notes
- Each step has three phases that never interleave: forces for every body are
  collected from the positions at the start of the step, then all velocities
  are updated, then all positions. No body sees another body's updated state
  within the same step.
- Complexity: force collection is O(N^2) per step (direct summation), fine at
  solar-system scale.
- Euler is neither symplectic nor accurate over long horizons; callers bound
  the step size (see SimulationController.advance).
- Degenerate configurations (coincident bodies, zero mass) produce inf/nan
  that silently propagate through the state. With strict=True the model raises
  DegenerateConfigurationError instead.
"""
import logging
from typing import List, Optional

from .constants import G
from .data_models import Body
from .errors import DegenerateConfigurationError
from .orbits import EllipticOrbit
from .vector import Vector2, ieee_div

logger = logging.getLogger(__name__)


class UniverseModel:
    """
    Collection of bodies interacting through gravity only.

    Bodies are kept in insertion order; the physics does not depend on it but
    the viewer cycles its anchor through this order.
    """

    def __init__(self, strict: bool = False):
        """
        Args:
            strict: Raise DegenerateConfigurationError on undefined configurations
                instead of letting inf/nan propagate.
        """
        self.bodies: List[Body] = []
        self.strict = strict
        self._warned_non_finite = False

    def add_body(self, body: Body) -> None:
        """Add a body to this universe (no duplicate check)."""
        if self.strict and not body.mass > 0:
            raise DegenerateConfigurationError(f"{body} has non-positive mass {body.mass}")
        self.bodies.append(body)
        logger.debug("added %s at %s", body, body.position)

    def add_orbiting_body(self, orbit: EllipticOrbit) -> None:
        """
        Add a body that revolves around another body.

        The secondary is placed at apoapsis on the primary's positive x-axis and
        given the primary's velocity plus its velocity at apoapsis. The primary
        itself must be added separately.
        """
        if self.strict:
            orbit.validate()

        primary = orbit.primary
        secondary = orbit.secondary

        secondary.position = primary.position + Vector2(orbit.apoapsis, 0.0)
        secondary.velocity = primary.velocity + orbit.velocity_at_apoapsis()

        self.add_body(secondary)

    def find(self, name: str) -> Optional[Body]:
        for body in self.bodies:
            if body.name == name:
                return body
        return None

    def gravitational_force(self, body: Body, other: Body) -> Vector2:
        """Gravitational force exerted by other on body, in newtons."""
        delta_position = other.position - body.position
        squared_distance = delta_position.squared_magnitude()

        if self.strict and squared_distance == 0:
            raise DegenerateConfigurationError(f"{body} and {other} occupy the same position")

        direction = delta_position.normalize()
        magnitude = ieee_div(G * body.mass * other.mass, squared_distance)
        return direction * magnitude

    def resulting_force(self, body: Body) -> Vector2:
        """Sum of the gravitational forces every other body exerts on body."""
        resulting_force = Vector2()
        for other in self.bodies:
            if other is not body:
                resulting_force.accumulate(self.gravitational_force(body, other))
        return resulting_force

    def apply(self, force: Vector2, body: Body, delta_time: float) -> None:
        """Apply force on body during delta_time (velocity only)."""
        if self.strict and body.mass == 0:
            raise DegenerateConfigurationError(f"cannot accelerate massless {body}")
        acceleration = force / body.mass
        body.velocity = body.velocity + acceleration * delta_time

    def step(self, delta_time: float) -> None:
        """
        Compute the next state of this universe after delta_time seconds.

        Phases:
        1) collect the resulting force on every body from the current positions
        2) apply the collected forces to the velocities
        3) move every body along its new velocity
        """
        forces = [self.resulting_force(body) for body in self.bodies]

        for body, force in zip(self.bodies, forces):
            self.apply(force, body, delta_time)

        for body in self.bodies:
            body.update(delta_time)

        if not self._warned_non_finite:
            for body in self.bodies:
                if not (body.position.is_finite() and body.velocity.is_finite()):
                    logger.warning("state of %s is no longer finite; the simulation is corrupted", body)
                    self._warned_non_finite = True
                    break

    # Diagnostics

    def total_momentum(self) -> Vector2:
        momentum = Vector2()
        for body in self.bodies:
            momentum.accumulate(body.momentum())
        return momentum

    def kinetic_energy(self) -> float:
        return sum(body.kinetic_energy() for body in self.bodies)

    def potential_energy(self) -> float:
        """Gravitational potential energy, counting each pair once."""
        energy = 0.0
        n = len(self.bodies)
        for i in range(n):
            bi = self.bodies[i]
            for j in range(i + 1, n):
                bj = self.bodies[j]
                distance = (bj.position - bi.position).magnitude()
                energy -= ieee_div(G * bi.mass * bj.mass, distance)
        return energy

    def total_energy(self) -> float:
        return self.kinetic_energy() + self.potential_energy()
