import math
import unittest

from gravsim.constants import EARTH_MASS, EARTH_MOON_DISTANCE, G, MOON_MASS
from gravsim.data_models import Body
from gravsim.errors import DegenerateConfigurationError
from gravsim.orbits import EllipticOrbit, circular_orbital_velocity
from gravsim.physics import UniverseModel
from gravsim.vector import Vector2


def earth_moon(strict=False):
    universe = UniverseModel(strict=strict)
    earth = Body("Earth", 6.371e6, EARTH_MASS)
    moon = Body("Moon", 1.7374e6, MOON_MASS, position=Vector2(EARTH_MOON_DISTANCE, 0.0))
    moon.velocity = circular_orbital_velocity(earth, moon)
    universe.add_body(earth)
    universe.add_body(moon)
    return universe, earth, moon


class TestForces(unittest.TestCase):

    def test_gravitational_force(self):
        universe = UniverseModel()
        a = Body("a", 1.0, 5.0)
        b = Body("b", 1.0, 7.0, position=Vector2(3.0, 4.0))

        force = universe.gravitational_force(a, b)

        magnitude = G * 5.0 * 7.0 / 25.0
        self.assertTrue(math.isclose(force.magnitude(), magnitude, rel_tol=1e-12))
        self.assertTrue(math.isclose(force.x / force.magnitude(), 0.6, rel_tol=1e-12))
        self.assertTrue(math.isclose(force.y / force.magnitude(), 0.8, rel_tol=1e-12))

    def test_newton_third_law(self):
        universe = UniverseModel()
        a = Body("a", 1.0, 5.0e10, position=Vector2(-2.0, 1.0))
        b = Body("b", 1.0, 7.0e3, position=Vector2(13.0, -7.5))
        universe.add_body(a)
        universe.add_body(b)

        on_a = universe.resulting_force(a)
        on_b = universe.resulting_force(b)

        self.assertTrue(math.isclose(on_a.x, -on_b.x, rel_tol=1e-12))
        self.assertTrue(math.isclose(on_a.y, -on_b.y, rel_tol=1e-12))

    def test_resulting_force_skips_self(self):
        universe = UniverseModel()
        lonely = Body("lonely", 1.0, 1.0)
        universe.add_body(lonely)
        self.assertEqual(Vector2(), universe.resulting_force(lonely))

    def test_resulting_force_is_sum(self):
        universe = UniverseModel()
        center = Body("center", 1.0, 1.0)
        left = Body("left", 1.0, 3.0, position=Vector2(-2.0, 0.0))
        right = Body("right", 1.0, 3.0, position=Vector2(2.0, 0.0))
        for body in (center, left, right):
            universe.add_body(body)

        self.assertEqual(Vector2(), universe.resulting_force(center))


class TestStep(unittest.TestCase):

    def test_phases_use_start_of_step_state(self):
        universe = UniverseModel()
        bodies = [
            Body("a", 1.0, 2.0e12, position=Vector2(0.0, 0.0), velocity=Vector2(1.0, 0.0)),
            Body("b", 1.0, 3.0e11, position=Vector2(40.0, 10.0), velocity=Vector2(0.0, -2.0)),
            Body("c", 1.0, 5.0e11, position=Vector2(-25.0, 30.0), velocity=Vector2(0.5, 0.5)),
        ]
        for body in bodies:
            universe.add_body(body)

        dt = 2.0
        forces = [universe.resulting_force(body) for body in bodies]
        positions = [body.position for body in bodies]
        velocities = [body.velocity for body in bodies]

        universe.step(dt)

        for body, force, position, velocity in zip(bodies, forces, positions, velocities):
            expected_velocity = velocity + force / body.mass * dt
            self.assertEqual(expected_velocity, body.velocity)
            self.assertEqual(position + expected_velocity * dt, body.position)

    def test_free_body_moves_linearly(self):
        universe = UniverseModel()
        body = Body("drifter", 1.0, 1.0, velocity=Vector2(3.0, -1.0))
        universe.add_body(body)

        universe.step(2.0)

        self.assertEqual(Vector2(6.0, -2.0), body.position)
        self.assertEqual(Vector2(3.0, -1.0), body.velocity)

    def test_momentum_conserved(self):
        universe, _, _ = earth_moon()
        initial = universe.total_momentum()

        for _ in range(100):
            universe.step(60.0)

        drift = (universe.total_momentum() - initial).magnitude()
        self.assertLess(drift, initial.magnitude() * 1e-9)

    def test_energy_roughly_conserved(self):
        universe, _, _ = earth_moon()
        initial = universe.total_energy()
        self.assertLess(initial, 0.0)

        for _ in range(1000):
            universe.step(60.0)

        self.assertLess(abs(universe.total_energy() - initial), abs(initial) * 1e-3)

    def test_coincident_bodies_corrupt_state(self):
        universe = UniverseModel()
        a = Body("a", 1.0, 1.0)
        b = Body("b", 1.0, 1.0)
        universe.add_body(a)
        universe.add_body(b)

        with self.assertLogs("gravsim.physics", level="WARNING"):
            universe.step(1.0)

        self.assertFalse(a.velocity.is_finite())
        self.assertFalse(b.position.is_finite())

    def test_strict_coincident_bodies(self):
        universe = UniverseModel(strict=True)
        universe.add_body(Body("a", 1.0, 1.0))
        universe.add_body(Body("b", 1.0, 1.0))

        with self.assertRaises(DegenerateConfigurationError):
            universe.step(1.0)

    def test_strict_rejects_massless_body(self):
        universe = UniverseModel(strict=True)
        with self.assertRaises(DegenerateConfigurationError):
            universe.add_body(Body("ghost", 1.0, 0.0))


class TestAddBodies(unittest.TestCase):

    def test_add_body_keeps_order_and_duplicates(self):
        universe = UniverseModel()
        a = Body("a", 1.0, 1.0)
        b = Body("a", 1.0, 1.0)
        universe.add_body(a)
        universe.add_body(b)
        universe.add_body(a)
        self.assertEqual([a, b, a], universe.bodies)

    def test_add_orbiting_body(self):
        universe = UniverseModel()
        primary = Body("primary", 10.0, 1.0e24, position=Vector2(10.0, 20.0), velocity=Vector2(1.0, 2.0))
        secondary = Body("secondary", 1.0, 1.0e20)
        orbit = EllipticOrbit(primary, secondary, 100.0, 50.0)

        universe.add_orbiting_body(orbit)

        self.assertEqual(Vector2(110.0, 20.0), secondary.position)
        self.assertEqual(Vector2(1.0, 2.0) + orbit.velocity_at_apoapsis(), secondary.velocity)
        self.assertEqual(1, len(universe.bodies))
        self.assertIs(secondary, universe.bodies[0])

    def test_strict_rejects_invalid_orbit(self):
        universe = UniverseModel(strict=True)
        primary = Body("primary", 10.0, 1.0e24)
        secondary = Body("secondary", 1.0, 1.0e20)
        with self.assertRaises(DegenerateConfigurationError):
            universe.add_orbiting_body(EllipticOrbit(primary, secondary, 50.0, 100.0))
        self.assertEqual([], universe.bodies)

    def test_find(self):
        universe, earth, moon = earth_moon()
        self.assertIs(moon, universe.find("Moon"))
        self.assertIsNone(universe.find("Pluto"))


class TestDiagnostics(unittest.TestCase):

    def test_energy_terms(self):
        universe = UniverseModel()
        universe.add_body(Body("a", 1.0, 2.0, velocity=Vector2(1.0, 0.0)))
        universe.add_body(Body("b", 1.0, 4.0, position=Vector2(2.0, 0.0), velocity=Vector2(0.0, 1.0)))

        self.assertEqual(3.0, universe.kinetic_energy())
        self.assertEqual(-G * 2.0 * 4.0 / 2.0, universe.potential_energy())
        self.assertEqual(universe.kinetic_energy() + universe.potential_energy(), universe.total_energy())
        self.assertEqual(Vector2(2.0, 4.0), universe.total_momentum())


if __name__ == '__main__':
    unittest.main()
