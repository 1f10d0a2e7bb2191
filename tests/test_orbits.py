"""Tests for orbit snapshots and 4-velocity conversions."""

from __future__ import annotations

import math
import unittest

from puncture import (
    Coordinate,
    EquatorialOrbit,
    FourVelocity,
    KerrBackground,
    circular_constants,
    circular_frequency,
    constants_from_velocity,
    radial_velocity_squared,
    turning_point_constants,
    velocity_from_constants,
)


def _norm(background: KerrBackground, r: float, u: FourVelocity) -> float:
    """``g_{mu nu} u^mu u^nu`` on the equatorial plane."""

    M, a = background.mass, background.spin
    g_tt = -(1.0 - 2.0 * M / r)
    g_tphi = -2.0 * M * a / r
    g_phiphi = r * r + a * a + 2.0 * M * a * a / r
    g_rr = r * r / background.delta(r)
    return g_tt * u.t ** 2 + 2.0 * g_tphi * u.t * u.phi + g_phiphi * u.phi ** 2 + g_rr * u.r ** 2


class OrbitConversionTests(unittest.TestCase):
    """Conserved quantities and 4-velocities are mutually consistent."""

    def setUp(self) -> None:
        self.background = KerrBackground(1.0, 0.5)
        self.radius = 9.0

    def test_circular_velocity_is_normalised(self) -> None:
        e, l = circular_constants(self.background, self.radius)
        u = velocity_from_constants(self.background, self.radius, e, l)
        self.assertAlmostEqual(_norm(self.background, self.radius, u), -1.0, places=12)

    def test_circular_velocity_rotates_at_orbital_frequency(self) -> None:
        e, l = circular_constants(self.background, self.radius)
        u = velocity_from_constants(self.background, self.radius, e, l)
        omega = circular_frequency(self.background, self.radius)
        self.assertAlmostEqual(u.phi / u.t, omega, places=14)

    def test_circular_constants_have_no_radial_motion(self) -> None:
        e, l = circular_constants(self.background, self.radius)
        self.assertAlmostEqual(radial_velocity_squared(self.background, self.radius, e, l), 0.0, places=12)

    def test_constants_round_trip_through_velocity(self) -> None:
        e, l = 0.96, 3.7
        u = velocity_from_constants(self.background, self.radius, e, l, radial_velocity=0.01)
        e_back, l_back = constants_from_velocity(self.background, self.radius, u)
        self.assertAlmostEqual(e_back, e, places=12)
        self.assertAlmostEqual(l_back, l, places=12)
        self.assertEqual(u.r, 0.01)

    def test_schwarzschild_circular_constants(self) -> None:
        background = KerrBackground(1.0, 0.0)
        r = 10.0
        e, l = circular_constants(background, r)
        self.assertAlmostEqual(e, (1.0 - 2.0 / r) / math.sqrt(1.0 - 3.0 / r), places=14)
        self.assertAlmostEqual(l, math.sqrt(r) / math.sqrt(1.0 - 3.0 / r), places=12)

    def test_equatorial_orbit_recognises_circular_snapshot(self) -> None:
        orbit = EquatorialOrbit.circular(self.background, self.radius)
        self.assertTrue(orbit.is_circular(self.background))
        self.assertAlmostEqual(
            orbit.frequency(self.background),
            circular_frequency(self.background, self.radius),
            places=14,
        )

        eccentric = EquatorialOrbit(self.radius, orbit.energy * 1.001, orbit.angular_momentum)
        self.assertFalse(eccentric.is_circular(self.background))
        self.assertIsNone(eccentric.frequency(self.background))

    def test_from_velocity_keeps_radial_component(self) -> None:
        e, l = circular_constants(self.background, self.radius)
        u = velocity_from_constants(self.background, self.radius, e, l, radial_velocity=-0.02)
        orbit = EquatorialOrbit.from_velocity(self.background, self.radius, u)
        self.assertEqual(orbit.radial_velocity, -0.02)
        self.assertFalse(orbit.is_circular(self.background))


class TurningPointTests(unittest.TestCase):
    """Constants of an eccentric orbit bounded by two radii."""

    def test_matches_closed_form_for_nine_to_eleven(self) -> None:
        a = 0.5
        a2, a4 = a * a, a ** 4
        root = math.sqrt(6237.0 + 162.0 * a2 + a4)
        e_exact = math.sqrt(
            (-434070.0 + 2471.0 * a2 + 6.0 * math.sqrt(110.0) * a * root) / (-474721.0 + 3960.0 * a2)
        )
        l_exact = (261.0 * a + a ** 3 - 3.0 * math.sqrt(110.0) * root) * e_exact / (-630.0 + a2)

        background = KerrBackground(1.0, a)
        e, l = turning_point_constants(background, 9.0, 11.0)
        self.assertAlmostEqual(e, e_exact, places=10)
        self.assertAlmostEqual(l, l_exact, places=9)
        for r in (9.0, 11.0):
            self.assertAlmostEqual(radial_velocity_squared(background, r, e, l), 0.0, places=12)
        self.assertGreater(radial_velocity_squared(background, 10.0, e, l), 0.0)

    def test_equal_radii_give_circular_constants(self) -> None:
        background = KerrBackground(1.0, 0.3)
        self.assertEqual(turning_point_constants(background, 8.0, 8.0), circular_constants(background, 8.0))
        with self.assertRaises(ValueError):
            turning_point_constants(background, 11.0, 9.0)


class ValidationTests(unittest.TestCase):
    """Invalid inputs are rejected with ``ValueError``."""

    def test_background_requires_positive_mass(self) -> None:
        with self.assertRaises(ValueError):
            KerrBackground(0.0, 0.1)

    def test_orbit_requires_positive_radius(self) -> None:
        with self.assertRaises(ValueError):
            EquatorialOrbit(-1.0, 0.9, 3.0)

    def test_coordinate_from_sequence(self) -> None:
        point = Coordinate.from_sequence([10.0, 1.2, 0.3])
        self.assertEqual(point.as_tuple(), (10.0, 1.2, 0.3, 0.0))
        with self.assertRaises(ValueError):
            Coordinate.from_sequence([1.0, 2.0])

    def test_outer_horizon(self) -> None:
        self.assertAlmostEqual(KerrBackground(1.0, 0.6).outer_horizon, 1.8, places=14)
        self.assertTrue(math.isnan(KerrBackground(1.0, 1.2).outer_horizon))


if __name__ == "__main__":
    unittest.main()
