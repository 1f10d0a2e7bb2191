"""Tests for the local-expansion and effective-source evaluators."""

from __future__ import annotations

import math
import unittest

import numpy as np

from puncture import (
    Coordinate,
    DerivativesUnsupportedError,
    EffectiveSourceEvaluator,
    EquatorialOrbit,
    FourVelocity,
    KerrBackground,
    LocalExpansionEvaluator,
    OrbitContext,
    UnsupportedOrbitError,
    circular_frequency,
    wave_operator,
)

HALF_PI = 0.5 * math.pi


def _contexts(background: KerrBackground, rp: float = 9.0) -> dict[str, OrbitContext]:
    particle = Coordinate(rp, HALF_PI, 0.0)
    orbit = EquatorialOrbit.circular(background, rp)
    return {
        "circular": OrbitContext.circular(background, particle),
        "equatorial": OrbitContext.equatorial(
            background, particle, orbit.energy, orbit.angular_momentum
        ),
    }


class SingularFieldTests(unittest.TestCase):
    """Value-only evaluation of the singular field."""

    def setUp(self) -> None:
        self.background = KerrBackground(1.0, 0.5)
        self.contexts = _contexts(self.background)

    def test_reference_point_is_positive_and_finite(self) -> None:
        point = Coordinate(10.0, HALF_PI, 0.0)
        for name, ctx in self.contexts.items():
            with self.subTest(orbit_class=name):
                value = LocalExpansionEvaluator(ctx).singular_field(point)
                self.assertTrue(math.isfinite(value))
                self.assertGreater(value, 0.0)
                # leading order is the inverse proper radial distance
                leading = 1.0 / math.sqrt(81.0 / self.background.delta(9.0))
                self.assertLess(abs(value / leading - 1.0), 0.5)

    def test_value_is_even_in_dphi(self) -> None:
        for name, ctx in self.contexts.items():
            evaluator = LocalExpansionEvaluator(ctx)
            for dphi in (0.05, 0.4, 1.3):
                with self.subTest(orbit_class=name, dphi=dphi):
                    plus = evaluator.singular_field(Coordinate(9.3, HALF_PI + 0.02, dphi))
                    minus = evaluator.singular_field(Coordinate(9.3, HALF_PI + 0.02, -dphi))
                    self.assertAlmostEqual(plus, minus, places=12)

    def test_cutoff_forces_exact_zero(self) -> None:
        for name, ctx in self.contexts.items():
            evaluator = LocalExpansionEvaluator(ctx)
            inside = Coordinate(9.0 + 0.5 * ctx.cutoff, HALF_PI, 0.0)
            with self.subTest(orbit_class=name):
                self.assertEqual(evaluator.singular_field(inside), 0.0)
                derivs = evaluator.field_and_derivatives(inside)
                self.assertEqual(derivs.as_tuple(), (0.0,) * 6)

    def test_cutoff_uses_wrapped_azimuth(self) -> None:
        ctx = self.contexts["circular"]
        point = Coordinate(9.0, HALF_PI, 2.0 * math.pi - 0.01)
        self.assertTrue(ctx.within_cutoff(point))
        self.assertEqual(LocalExpansionEvaluator(ctx).singular_field(point), 0.0)

    def test_cutoff_is_tunable(self) -> None:
        particle = Coordinate(9.0, HALF_PI, 0.0)
        ctx = OrbitContext.circular(self.background, particle, cutoff=0.0)
        point = Coordinate(9.05, HALF_PI, 0.0)
        self.assertGreater(LocalExpansionEvaluator(ctx).singular_field(point), 0.0)
        self.assertEqual(self.contexts["circular"].cutoff, 0.1)
        self.assertEqual(self.contexts["equatorial"].cutoff, 0.02)

    def test_orbit_classes_agree_near_particle(self) -> None:
        point = Coordinate(9.2, HALF_PI + 0.01, 0.02)
        circ = LocalExpansionEvaluator(self.contexts["circular"]).singular_field(point)
        eq = LocalExpansionEvaluator(self.contexts["equatorial"]).singular_field(point)
        self.assertLess(abs(circ / eq - 1.0), 0.1)

    def test_evaluate_from_arrays(self) -> None:
        evaluator = LocalExpansionEvaluator(self.contexts["equatorial"])
        r = np.array([9.5, 10.0, 10.5])
        out = evaluator.evaluate_from_arrays(r, HALF_PI, 0.3)
        self.assertEqual(out.shape, (3,))
        for value, radius in zip(out, r):
            self.assertAlmostEqual(value, evaluator(Coordinate(float(radius), HALF_PI, 0.3)), places=12)

    def test_evaluate_many_matches_single_calls(self) -> None:
        evaluator = EffectiveSourceEvaluator(self.contexts["circular"])
        points = [Coordinate(9.5, HALF_PI, 0.3), Coordinate(10.5, HALF_PI + 0.2, -0.4)]
        self.assertEqual(evaluator.evaluate_many(points), [evaluator(p) for p in points])


class DerivativeTests(unittest.TestCase):
    """Derivative bundle and effective source."""

    def setUp(self) -> None:
        self.background = KerrBackground(1.0, 0.5)
        self.contexts = _contexts(self.background)
        self.point = Coordinate(9.6, HALF_PI + 0.05, 0.3)

    def test_time_derivative_follows_corotation(self) -> None:
        omega = circular_frequency(self.background, 9.0)
        for name, ctx in self.contexts.items():
            with self.subTest(orbit_class=name):
                self.assertAlmostEqual(ctx.frequency, omega, places=14)
                d = LocalExpansionEvaluator(ctx).field_and_derivatives(self.point)
                self.assertAlmostEqual(d.dphis_dt, -omega * d.dphis_dphi, places=14)
                self.assertAlmostEqual(d.d2phis_dt2, omega * omega * d.d2phis_dphi2, places=14)
                self.assertAlmostEqual(d.d2phis_dtdphi, -omega * d.d2phis_dphi2, places=14)

    def test_derivatives_match_finite_differences(self) -> None:
        h = 1.0e-5
        for name, ctx in self.contexts.items():
            evaluator = LocalExpansionEvaluator(ctx)
            d = evaluator.field_and_derivatives(self.point)
            p = self.point
            with self.subTest(orbit_class=name):
                self.assertAlmostEqual(d.phis, evaluator.singular_field(p), places=12)
                dr = (
                    evaluator.singular_field(Coordinate(p.r + h, p.theta, p.phi))
                    - evaluator.singular_field(Coordinate(p.r - h, p.theta, p.phi))
                ) / (2.0 * h)
                dth = (
                    evaluator.singular_field(Coordinate(p.r, p.theta + h, p.phi))
                    - evaluator.singular_field(Coordinate(p.r, p.theta - h, p.phi))
                ) / (2.0 * h)
                np.testing.assert_allclose(d.dphis_dr, dr, rtol=1.0e-6)
                np.testing.assert_allclose(d.dphis_dtheta, dth, rtol=1.0e-6)

    def test_effective_source_matches_bundle(self) -> None:
        for name, ctx in self.contexts.items():
            with self.subTest(orbit_class=name):
                box = LocalExpansionEvaluator(ctx).field_and_derivatives(self.point).box_phis
                source = EffectiveSourceEvaluator(ctx).effective_source(self.point)
                self.assertTrue(math.isfinite(source))
                self.assertEqual(source, box)

    def test_non_stationary_equatorial_orbit_has_no_time_derivatives(self) -> None:
        particle = Coordinate(9.0, HALF_PI, 0.0)
        orbit = EquatorialOrbit.circular(self.background, 9.0)
        ctx = OrbitContext.equatorial(
            self.background, particle, orbit.energy, orbit.angular_momentum, -0.01
        )
        self.assertFalse(ctx.stationary)
        evaluator = LocalExpansionEvaluator(ctx)
        self.assertGreater(evaluator.singular_field(self.point), 0.0)
        bundle = evaluator.field_and_derivatives(self.point)
        self.assertIsNone(bundle.dphis_dt)
        self.assertIsNone(bundle.box_phis)
        self.assertIsNone(bundle.d2phis_dt2)
        self.assertIsNone(bundle.d2phis_dtdphi)
        with self.assertRaises(DerivativesUnsupportedError):
            EffectiveSourceEvaluator(ctx).effective_source(self.point)

    def test_non_stationary_snapshot_keeps_spatial_derivatives(self) -> None:
        particle = Coordinate(9.0, HALF_PI, 0.0)
        orbit = EquatorialOrbit.circular(self.background, 9.0)
        moving = OrbitContext.equatorial(
            self.background, particle, orbit.energy, orbit.angular_momentum, -0.01
        )
        still = OrbitContext.equatorial(
            self.background, particle, orbit.energy, orbit.angular_momentum
        )
        got = LocalExpansionEvaluator(moving).field_and_derivatives(self.point)
        want = LocalExpansionEvaluator(still).field_and_derivatives(self.point)
        for name in ("phis", "dphis_dr", "dphis_dtheta", "dphis_dphi", "d2phis_dr2", "d2phis_dphi2"):
            with self.subTest(component=name):
                self.assertEqual(getattr(got, name), getattr(want, name))
        inside = Coordinate(9.001, HALF_PI, 0.0)
        self.assertEqual(
            LocalExpansionEvaluator(moving).field_and_derivatives(inside).as_tuple(),
            (0.0, 0.0, 0.0, 0.0, None, None),
        )

    def test_circular_context_rejects_radial_motion(self) -> None:
        particle = Coordinate(9.0, HALF_PI, 0.0)
        with self.assertRaises(UnsupportedOrbitError):
            OrbitContext.circular(self.background, particle, FourVelocity(1.2, 0.01, 0.0, 0.03))
        with self.assertRaises(UnsupportedOrbitError):
            OrbitContext.circular(self.background, particle, FourVelocity(1.2, 0.0, 0.02, 0.03))
        ctx = OrbitContext.circular(self.background, particle, FourVelocity(1.2, 0.0, 0.0, 0.03))
        self.assertEqual(ctx.orbit_class, "kerr_circular")


class WaveOperatorTests(unittest.TestCase):
    """The Kerr wave operator on fields with known d'Alembertian."""

    def test_static_monopole_solution(self) -> None:
        background = KerrBackground(1.0, 0.6)
        for r, theta in ((5.0, 0.7), (12.0, HALF_PI)):
            delta = background.delta(r)
            value = wave_operator(
                background, r, theta,
                d_r=1.0 / delta,
                d_theta=0.0,
                d_rr=-(2.0 * r - 2.0) / delta ** 2,
                d_thetatheta=0.0,
                d_phiphi=0.0,
                d_tt=0.0,
                d_tphi=0.0,
            )
            self.assertAlmostEqual(value, 0.0, places=14)

    def test_angular_dipole(self) -> None:
        background = KerrBackground(1.0, 0.3)
        r, theta = 7.0, 1.1
        value = wave_operator(
            background, r, theta,
            d_r=0.0,
            d_theta=-math.sin(theta),
            d_rr=0.0,
            d_thetatheta=-math.cos(theta),
            d_phiphi=0.0,
            d_tt=0.0,
            d_tphi=0.0,
        )
        self.assertAlmostEqual(value, -2.0 * math.cos(theta) / background.sigma(r, theta), places=14)

    def test_corotating_terms_match_schwarzschild_limit(self) -> None:
        background = KerrBackground(1.0, 0.0)
        r, theta, omega, d_phiphi = 8.0, HALF_PI, 0.04, 0.7
        value = wave_operator(
            background, r, theta,
            d_r=0.0,
            d_theta=0.0,
            d_rr=0.0,
            d_thetatheta=0.0,
            d_phiphi=d_phiphi,
            d_tt=omega * omega * d_phiphi,
            d_tphi=-omega * d_phiphi,
        )
        f = 1.0 - 2.0 / r
        expected = d_phiphi / (r * r) - omega * omega * d_phiphi / f
        self.assertAlmostEqual(value, expected, places=14)


if __name__ == "__main__":
    unittest.main()
