"""Tests for the closed-form and quadrature mode decompositions."""

from __future__ import annotations

import math
import unittest
from fractions import Fraction

import numpy as np
from scipy.integrate import quad

from puncture import (
    COUNTERS,
    MAX_MODE,
    MODE_TABLE,
    Coordinate,
    EffectiveSourceEvaluator,
    EquatorialOrbit,
    KerrBackground,
    LocalExpansionEvaluator,
    OrbitContext,
    UnsupportedModeError,
    circular_frequency,
    closed_form_mode,
    closed_form_mode_derivatives,
    elliptic_integrals,
    lm_decompose,
    m_decompose,
    spherical_legendre,
)
from puncture.elliptic import MAX_C_DERIVATIVE, cosine_in_sine_squared, moment_table
from puncture.modes import DEFAULT_EPSABS, DEFAULT_EPSREL

HALF_PI = 0.5 * math.pi


def _polyval(coefficients: list[Fraction], x: float) -> float:
    return sum(float(c) * x ** i for i, c in enumerate(coefficients))


class EllipticTableTests(unittest.TestCase):
    """The generated table reproduces the underlying integrals."""

    def test_cosine_polynomials(self) -> None:
        self.assertEqual(cosine_in_sine_squared(0), [1])
        self.assertEqual(cosine_in_sine_squared(2), [1, -2])
        self.assertEqual(cosine_in_sine_squared(4), [1, -8, 8])
        for m in (6, 12, 20):
            coeffs = cosine_in_sine_squared(m)
            for u in (0.2, 0.9, 1.4):
                s = math.sin(u) ** 2
                value = sum(c * s ** j for j, c in enumerate(coeffs))
                self.assertAlmostEqual(value, math.cos(m * u), places=7)
        with self.assertRaises(ValueError):
            cosine_in_sine_squared(3)

    def test_moments_match_quadrature(self) -> None:
        moments = moment_table(6)
        for C in (0.05, 0.3, 2.0):
            K, E = elliptic_integrals(C)
            norm = C ** 3 * (1.0 + C) ** 3.5
            for j in range(-3, 7):
                pair = moments[j]
                closed = (E * _polyval(pair.e, C) + K * _polyval(pair.k, C)) / norm
                numeric, _ = quad(
                    lambda u: (C + math.sin(u) ** 2) ** (j - 0.5),
                    0.0, HALF_PI, epsabs=0.0, epsrel=1.0e-12, limit=200,
                )
                with self.subTest(C=C, j=j):
                    np.testing.assert_allclose(closed, numeric, rtol=1.0e-9)

    def test_table_covers_even_modes(self) -> None:
        self.assertEqual(sorted(MODE_TABLE), list(range(0, MAX_MODE + 1, 2)))
        record = MODE_TABLE[20]
        self.assertEqual(len(record.e_coefficients), 5)
        self.assertEqual(len(record.k_coefficients), 5)
        self.assertEqual(len(record.e_derivatives), MAX_C_DERIVATIVE)
        with self.assertRaises(ValueError):
            record.kernels(0.3, *elliptic_integrals(0.3), order=MAX_C_DERIVATIVE + 1)

    def test_kernel_derivative_matches_moment(self) -> None:
        # for m = 0 the n = 0 kernel is W_{-3}, whose C-derivative is -7/2 W_{-4}
        record = MODE_TABLE[0]
        for C in (0.01, 0.3, 2.0):
            K, E = elliptic_integrals(C)
            numeric, _ = quad(
                lambda u: (C + math.sin(u) ** 2) ** -4.5,
                0.0, HALF_PI, epsabs=0.0, epsrel=1.0e-12, limit=200,
            )
            with self.subTest(C=C):
                np.testing.assert_allclose(record.kernels(C, K, E, 1)[0], -3.5 * numeric, rtol=1.0e-9)

    def test_kernel_derivatives_match_finite_differences(self) -> None:
        for m in (0, 8, 20):
            record = MODE_TABLE[m]
            for C in (0.05, 0.4, 2.0):
                h = 1.0e-5 * C

                def kernels(c: float, order: int) -> np.ndarray:
                    return record.kernels(c, *elliptic_integrals(c), order)

                for order in (1, 2):
                    slope = (kernels(C + h, order - 1) - kernels(C - h, order - 1)) / (2.0 * h)
                    exact = kernels(C, order)
                    with self.subTest(m=m, C=C, order=order):
                        np.testing.assert_allclose(
                            exact, slope, rtol=1.0e-6, atol=1.0e-8 * np.max(np.abs(exact))
                        )


class ClosedFormModeTests(unittest.TestCase):
    """Closed-form m-modes of the equatorial singular field."""

    def setUp(self) -> None:
        self.background = KerrBackground(1.0, 0.5)
        orbit = EquatorialOrbit.circular(self.background, 9.0)
        self.orbit = orbit
        self.context = OrbitContext.equatorial(
            self.background,
            Coordinate(9.0, HALF_PI, 0.0),
            orbit.energy,
            orbit.angular_momentum,
        )
        self.point = Coordinate(9.05, HALF_PI + 0.03, 0.0)

    def test_odd_and_unsupported_modes_vanish(self) -> None:
        for m in (1, 3, 7, 21, 22, 40, -2, -1):
            with self.subTest(m=m):
                self.assertEqual(closed_form_mode(self.context, m, self.point).as_tuple(), (0.0, 0.0))

    def test_strict_mode_distinguishes_unsupported_from_odd(self) -> None:
        self.assertEqual(
            closed_form_mode(self.context, 5, self.point, strict=True).as_tuple(), (0.0, 0.0)
        )
        for m in (22, -2):
            with self.subTest(m=m):
                with self.assertRaises(UnsupportedModeError):
                    closed_form_mode(self.context, m, self.point, strict=True)

    def test_circular_class_uses_sine_basis_table(self) -> None:
        ctx = OrbitContext.circular(self.background, Coordinate(9.0, HALF_PI, 0.0))
        self.assertTrue(ctx.supports_closed_form_modes)
        for m in (0, 2, 12):
            with self.subTest(m=m):
                self.assertEqual(
                    closed_form_mode(ctx, m, self.point).as_tuple(),
                    closed_form_mode(self.context, m, self.point).as_tuple(),
                )
        modal = ctx.mode_context()
        self.assertIs(modal.table, ctx.mode_table)
        self.assertEqual(modal.cutoff, ctx.cutoff)
        self.assertIs(self.context.mode_context(), self.context)

    def test_world_line_raises(self) -> None:
        with self.assertRaises(ValueError):
            closed_form_mode(self.context, 2, Coordinate(9.0, HALF_PI, 0.7))
        with self.assertRaises(ValueError):
            closed_form_mode_derivatives(self.context, 2, Coordinate(9.0, HALF_PI, 0.7))

    def test_inside_cutoff_gives_uncut_mode(self) -> None:
        point = Coordinate(9.01, HALF_PI + 0.005, 0.0)
        dr, dtheta, _ = self.context.offset(point)
        self.assertLess(math.hypot(dr, dtheta), self.context.cutoff)
        uncut = OrbitContext.equatorial(
            self.background,
            Coordinate(9.0, HALF_PI, 0.0),
            self.orbit.energy,
            self.orbit.angular_momentum,
            cutoff=0.0,
        )
        width = math.sqrt(self.context.cutoff ** 2 - dr * dr - dtheta * dtheta)
        windowed = LocalExpansionEvaluator(self.context).singular_field
        for m in (0, 2, 8):
            with self.subTest(m=m):
                closed = closed_form_mode(self.context, m, point)
                self.assertNotEqual(closed.real, 0.0)
                self.assertEqual(closed.as_tuple(), closed_form_mode(uncut, m, point).as_tuple())

                full = m_decompose(
                    m, point, LocalExpansionEvaluator(uncut).singular_field, precise=True, points=(0.0,)
                )
                np.testing.assert_allclose(closed.real, full.real, rtol=1.0e-6)

                # the window removes |dphi| < width from the quadrature
                cut = m_decompose(m, point, windowed, precise=True, points=(-width, 0.0, width))
                excised, _ = quad(
                    lambda phi: self.context.table.value(dr, dtheta, phi) * math.cos(m * phi),
                    -width, width, points=(0.0,), epsabs=0.0, epsrel=1.0e-12, limit=200,
                )
                self.assertGreater(abs(closed.real - cut.real), 1.0e-3 * abs(closed.real))
                np.testing.assert_allclose(closed.real, cut.real + excised, rtol=1.0e-6)

    def test_matches_quadrature_for_every_supported_mode(self) -> None:
        field = LocalExpansionEvaluator(self.context).singular_field
        points = (
            self.point,
            Coordinate(9.3, HALF_PI - 0.1, 0.0),
            Coordinate(8.2, HALF_PI - 0.25, 0.0),
            Coordinate(11.5, HALF_PI + 0.6, 0.0),
        )
        for point in points:
            scale = abs(closed_form_mode(self.context, 0, point).real)
            for m in range(0, MAX_MODE + 1, 2):
                with self.subTest(r=point.r, theta=point.theta, m=m):
                    closed = closed_form_mode(self.context, m, point)
                    numeric = m_decompose(m, point, field, precise=True, points=(0.0,))
                    np.testing.assert_allclose(closed.real, numeric.real, rtol=1.0e-6, atol=1.0e-8 * scale + 1.0e-9)
                    self.assertAlmostEqual(closed.imag, 0.0, places=12)
                    self.assertAlmostEqual(numeric.imag, 0.0, places=6)

    def test_lm_decompose_matches_projected_modes(self) -> None:
        field = LocalExpansionEvaluator(self.context).singular_field
        r = 11.5
        for l, m, options in ((0, 0, {}), (2, 0, {}), (4, 0, {}), (2, 2, {"epsabs": 1.0e-12})):
            reference, _ = quad(
                lambda theta: spherical_legendre(l, m, math.cos(theta)) * math.sin(theta)
                * closed_form_mode(self.context, m, Coordinate(r, theta, 0.0)).real,
                0.0, math.pi, epsabs=0.0, epsrel=1.0e-10, limit=200,
            )
            with self.subTest(l=l, m=m):
                result = lm_decompose(l, m, r, field, **options)
                np.testing.assert_allclose(result.real, reference, rtol=1.0e-6)
                self.assertAlmostEqual(result.imag, 0.0, places=8)

    def test_phase_follows_particle_azimuth(self) -> None:
        phi_p = 0.3
        ctx = OrbitContext.equatorial(
            self.background,
            Coordinate(9.0, HALF_PI, phi_p),
            self.orbit.energy,
            self.orbit.angular_momentum,
        )
        field = LocalExpansionEvaluator(ctx).singular_field
        point = Coordinate(9.05, HALF_PI + 0.03, 1.0)
        closed = closed_form_mode(ctx, 2, point)
        numeric = m_decompose(2, point, field, precise=True, points=(phi_p,))
        np.testing.assert_allclose(closed.real, numeric.real, rtol=1.0e-6)
        np.testing.assert_allclose(closed.imag, numeric.imag, rtol=1.0e-6)
        aligned = closed_form_mode(self.context, 2, point)
        amplitude = math.hypot(closed.real, closed.imag)
        self.assertAlmostEqual(amplitude / aligned.real, 1.0, places=12)
        self.assertAlmostEqual(closed.imag / closed.real, -math.tan(2.0 * phi_p), places=10)


class ModeDerivativeTests(unittest.TestCase):
    """Closed-form m-modes of the derivatives and of the effective source."""

    def setUp(self) -> None:
        self.background = KerrBackground(1.0, 0.5)
        self.orbit = EquatorialOrbit.circular(self.background, 9.0)
        self.context = OrbitContext.equatorial(
            self.background,
            Coordinate(9.0, HALF_PI, 0.0),
            self.orbit.energy,
            self.orbit.angular_momentum,
        )
        self.point = Coordinate(9.3, HALF_PI + 0.1, 0.0)

    def test_value_is_the_closed_form_mode(self) -> None:
        for m in (0, 2, 10):
            with self.subTest(m=m):
                jet = closed_form_mode_derivatives(self.context, m, self.point)
                closed = complex(closed_form_mode(self.context, m, self.point))
                np.testing.assert_allclose(jet.phis, closed, rtol=1.0e-12)
                self.assertEqual(jet.m, m)

    def test_spatial_derivatives_match_finite_differences(self) -> None:
        h1, h2 = 1.0e-5, 1.0e-4
        p = self.point

        def mode(r: float, theta: float) -> float:
            return closed_form_mode(self.context, 4, Coordinate(r, theta, 0.0)).real

        jet = closed_form_mode_derivatives(self.context, 4, p)
        d_r = (mode(p.r + h1, p.theta) - mode(p.r - h1, p.theta)) / (2.0 * h1)
        d_th = (mode(p.r, p.theta + h1) - mode(p.r, p.theta - h1)) / (2.0 * h1)
        d_rr = (mode(p.r + h2, p.theta) - 2.0 * mode(p.r, p.theta) + mode(p.r - h2, p.theta)) / h2 ** 2
        d_thth = (
            mode(p.r, p.theta + h2) - 2.0 * mode(p.r, p.theta) + mode(p.r, p.theta - h2)
        ) / h2 ** 2
        np.testing.assert_allclose(jet.dphis_dr.real, d_r, rtol=1.0e-6)
        np.testing.assert_allclose(jet.dphis_dtheta.real, d_th, rtol=1.0e-6)
        np.testing.assert_allclose(jet.d2phis_dr2.real, d_rr, rtol=1.0e-4)
        np.testing.assert_allclose(jet.d2phis_dtheta2.real, d_thth, rtol=1.0e-4)

    def test_derivatives_match_quadrature_of_the_bundle(self) -> None:
        local = LocalExpansionEvaluator(self.context)

        def component(name: str):
            return lambda x: getattr(local.field_and_derivatives(x), name)

        for m in (0, 2, 6):
            jet = closed_form_mode_derivatives(self.context, m, self.point)
            scale = abs(jet.phis) + abs(jet.dphis_dr) + abs(jet.dphis_dtheta)
            for name in ("dphis_dr", "dphis_dtheta", "dphis_dphi", "dphis_dt"):
                numeric = complex(
                    m_decompose(m, self.point, component(name), precise=True, points=(0.0,))
                )
                with self.subTest(m=m, component=name):
                    np.testing.assert_allclose(
                        getattr(jet, name), numeric, rtol=1.0e-6, atol=1.0e-9 * scale
                    )

    def test_source_matches_quadrature_of_effective_source(self) -> None:
        source = EffectiveSourceEvaluator(self.context).effective_source
        for m in (0, 2, 6):
            jet = closed_form_mode_derivatives(self.context, m, self.point)
            # largest single term of the operator sets the cancellation floor
            floor = abs(jet.d2phis_dtheta2) / self.point.r ** 2
            numeric = complex(m_decompose(m, self.point, source, precise=True, points=(0.0,)))
            with self.subTest(m=m):
                np.testing.assert_allclose(jet.box_phis, numeric, rtol=1.0e-5, atol=1.0e-7 * floor + 1.0e-9)

    def test_time_derivative_uses_the_orbital_frequency(self) -> None:
        omega = self.context.frequency
        jet = closed_form_mode_derivatives(self.context, 2, self.point)
        self.assertAlmostEqual(jet.dphis_dphi, 2j * jet.phis, places=12)
        self.assertAlmostEqual(jet.dphis_dt, -omega * jet.dphis_dphi, places=12)

    def test_odd_unsupported_and_non_stationary_modes(self) -> None:
        zero = closed_form_mode_derivatives(self.context, 3, self.point)
        self.assertEqual(zero.as_tuple(), (0j, 0j, 0j, 0j, 0j, 0j))
        with self.assertRaises(UnsupportedModeError):
            closed_form_mode_derivatives(self.context, 24, self.point, strict=True)

        moving = OrbitContext.equatorial(
            self.background,
            Coordinate(9.0, HALF_PI, 0.0),
            self.orbit.energy,
            self.orbit.angular_momentum,
            -0.01,
        )
        jet = closed_form_mode_derivatives(moving, 2, self.point)
        still = closed_form_mode_derivatives(self.context, 2, self.point)
        self.assertIsNone(jet.dphis_dt)
        self.assertIsNone(jet.box_phis)
        self.assertEqual(jet.dphis_dr, still.dphis_dr)
        self.assertEqual(jet.d2phis_dtheta2, still.d2phis_dtheta2)
        self.assertEqual(closed_form_mode_derivatives(moving, 5, self.point).box_phis, None)

    def test_circular_context_agrees_with_equatorial_context(self) -> None:
        ctx = OrbitContext.circular(self.background, Coordinate(9.0, HALF_PI, 0.0))
        self.assertAlmostEqual(ctx.frequency, circular_frequency(self.background, 9.0), places=15)
        got = closed_form_mode_derivatives(ctx, 2, self.point)
        want = closed_form_mode_derivatives(self.context, 2, self.point)
        np.testing.assert_allclose(got.as_tuple(), want.as_tuple(), rtol=1.0e-10)


class QuadratureTests(unittest.TestCase):
    """Quadrature decompositions of simple fields."""

    def test_m_decompose_of_cosine(self) -> None:
        point = Coordinate(5.0, 1.0, 0.0)
        field = lambda x: 3.0 * math.cos(2.0 * x.phi) + math.sin(x.phi)
        two = m_decompose(2, point, field)
        one = m_decompose(1, point, field)
        self.assertAlmostEqual(two.real, 3.0 * math.pi, places=6)
        self.assertAlmostEqual(two.imag, 0.0, places=6)
        self.assertAlmostEqual(one.real, 0.0, places=6)
        self.assertAlmostEqual(one.imag, -math.pi, places=6)
        self.assertLess(two.real_error, 1.0e-6)
        self.assertAlmostEqual(complex(one).imag, -math.pi, places=6)

    def test_pi_periodic_odd_modes_are_exact_zero(self) -> None:
        COUNTERS.reset()
        result = m_decompose(1, Coordinate(5.0, 1.0, 0.0), lambda x: 1.0, pi_periodic=True)
        self.assertEqual(result.as_tuple(), (0.0, 0.0))
        self.assertEqual(COUNTERS.phi, 0)

    def test_lm_decompose_of_spherical_harmonic(self) -> None:
        field = lambda x: spherical_legendre(2, 0, math.cos(x.theta))
        result = lm_decompose(2, 0, 4.0, field)
        self.assertAlmostEqual(result.real, 1.0, places=6)
        self.assertAlmostEqual(result.imag, 0.0, places=6)

        field22 = lambda x: spherical_legendre(2, 2, math.cos(x.theta)) * math.cos(2.0 * x.phi)
        result22 = lm_decompose(2, 2, 4.0, field22, epsabs=1.0e-12)
        self.assertAlmostEqual(result22.real, 0.5, places=6)

    def test_default_tolerances_are_relative(self) -> None:
        self.assertEqual((DEFAULT_EPSABS, DEFAULT_EPSREL), (0.0, 1.0e-7))
        width = 1.0e-2
        peak = 1.0e-9 * (2.0 / width) * math.atan(math.pi / width)

        def narrow(x: Coordinate) -> float:
            return 1.0e-9 / (width ** 2 + (x.phi - math.pi) ** 2)

        centred = lambda x: narrow(x.with_angles(x.theta, x.phi + math.pi))
        result = m_decompose(0, Coordinate(5.0, 1.0, 0.0), centred)
        np.testing.assert_allclose(result.real, peak, rtol=1.0e-6)
        self.assertEqual(result.imag, 0.0)

        projected = lm_decompose(0, 0, 5.0, narrow)
        np.testing.assert_allclose(projected.real, peak * 2.0 / math.sqrt(4.0 * math.pi), rtol=1.0e-6)

    def test_counters_track_integrand_evaluations(self) -> None:
        COUNTERS.reset()
        m_decompose(0, Coordinate(5.0, 1.0, 0.0), lambda x: 1.0)
        self.assertGreater(COUNTERS.phi, 0)
        self.assertEqual(COUNTERS.theta, 0)
        lm_decompose(0, 0, 5.0, lambda x: 1.0)
        self.assertGreater(COUNTERS.theta, 0)
        COUNTERS.reset()
        self.assertEqual((COUNTERS.phi, COUNTERS.theta), (0, 0))

    def test_spherical_legendre_normalisation(self) -> None:
        for l, m in ((0, 0), (3, 1), (4, -2)):
            value, _ = quad(
                lambda x: spherical_legendre(l, m, x) ** 2, -1.0, 1.0, epsrel=1.0e-12
            )
            with self.subTest(l=l, m=m):
                self.assertAlmostEqual(2.0 * math.pi * value, 1.0, places=10)
        self.assertEqual(spherical_legendre(1, 2, 0.3), 0.0)
        values = spherical_legendre(2, 0, np.array([-1.0, 0.0, 1.0]))
        np.testing.assert_allclose(values, np.sqrt(5.0 / (4.0 * np.pi)) * np.array([1.0, -0.5, 1.0]))


if __name__ == "__main__":
    unittest.main()
