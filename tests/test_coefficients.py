"""Structural checks on the orbit-class coefficient tables."""

from __future__ import annotations

import unittest

import numpy as np

from puncture import EquatorialOrbit, KerrBackground, circular_table, equatorial_table


class CircularTableTests(unittest.TestCase):
    """Leading-order structure of the circular-orbit expansion."""

    def test_numerator_leads_with_squared_distance(self) -> None:
        table = circular_table(KerrBackground(1.0, 0.7), 8.0)
        for key in ((2, 0, 0), (0, 2, 0), (0, 0, 2)):
            self.assertAlmostEqual(
                table.numerator[key] / (24.0 * table.denominator[key]), 1.0, places=12
            )

    def test_schwarzschild_distance_coefficients(self) -> None:
        M, rp = 1.0, 10.0
        table = circular_table(KerrBackground(M, 0.0), rp)
        self.assertAlmostEqual(table.denominator[(2, 0, 0)], rp / (rp - 2.0 * M), places=12)
        self.assertAlmostEqual(table.denominator[(0, 2, 0)], rp * rp, places=12)
        self.assertAlmostEqual(
            table.denominator[(0, 0, 2)], rp * rp * (rp - 2.0 * M) / (rp - 3.0 * M), places=10
        )

    def test_basis_and_monomials(self) -> None:
        periodic = circular_table(KerrBackground(1.0, 0.5), 9.0)
        literal = circular_table(KerrBackground(1.0, 0.5), 9.0, periodic=False)
        self.assertEqual(periodic.phi_basis, "periodic")
        self.assertEqual(literal.phi_basis, "power")
        self.assertEqual(len(periodic.numerator), 18)
        self.assertEqual(set(periodic.numerator), set(periodic.denominator))
        self.assertEqual(periodic.phi_orders, (0, 2, 4))
        np.testing.assert_array_equal(periodic.as_array(), literal.as_array())

    def test_tables_are_deterministic(self) -> None:
        background = KerrBackground(1.0, 0.5)
        first = circular_table(background, 9.0).as_array()
        second = circular_table(background, 9.0).as_array()
        np.testing.assert_array_equal(first, second)
        self.assertTrue(np.all(np.isfinite(first)))


class EquatorialTableTests(unittest.TestCase):
    """The equatorial numerator starts as the cube of ``rho^2``."""

    def setUp(self) -> None:
        self.background = KerrBackground(1.0, 0.5)
        self.orbit = EquatorialOrbit.circular(self.background, 9.0)
        self.table = equatorial_table(self.background, self.orbit)

    def test_leading_terms_are_rho_cubed(self) -> None:
        shape = self.table.shape
        a20, a02, b = shape.alpha20, shape.alpha02, shape.beta
        expected = {
            (6, 0, 0): a20 ** 3,
            (0, 6, 0): a02 ** 3,
            (0, 0, 6): b ** 3,
            (2, 0, 4): 3.0 * a20 * b * b,
            (4, 0, 2): 3.0 * a20 * a20 * b,
        }
        for key, value in expected.items():
            self.assertAlmostEqual(self.table.numerator[key] / value, 1.0, places=12)

    def test_shape_parameters(self) -> None:
        M, a, rp = 1.0, 0.5, 9.0
        l = self.orbit.angular_momentum
        shape = self.table.shape
        self.assertAlmostEqual(shape.alpha20, rp * rp / (a * a + rp * (rp - 2.0 * M)), places=14)
        self.assertAlmostEqual(shape.alpha02, rp * rp, places=14)
        self.assertAlmostEqual(shape.beta, l * l + rp * rp + a * a * (rp + 2.0 * M) / rp, places=12)
        self.assertEqual(self.table.denominator[(0, 0, 2)], shape.beta)

    def test_table_layout(self) -> None:
        self.assertEqual(len(self.table.numerator), 50)
        self.assertEqual(self.table.phi_basis, "sine")
        self.assertEqual(self.table.phi_orders, (0, 2, 4, 6, 8))
        self.assertTrue(all(k % 2 == 0 for (_, _, k) in self.table.numerator))
        self.assertTrue(np.all(np.isfinite(self.table.as_array())))

    def test_coefficients_ignore_radial_velocity(self) -> None:
        moving = EquatorialOrbit(
            self.orbit.radius, self.orbit.energy, self.orbit.angular_momentum, 0.05
        )
        np.testing.assert_array_equal(
            equatorial_table(self.background, moving).as_array(), self.table.as_array()
        )

    def test_sine_order_coefficients(self) -> None:
        dr, dtheta = 0.05, 0.03
        grouped = self.table.sine_order_coefficients(dr, dtheta)
        self.assertEqual(sorted(grouped), [0, 1, 2, 3, 4])
        direct = sum(
            c * dr ** i * dtheta ** j
            for (i, j, k), c in self.table.numerator.items()
            if k == 6
        )
        self.assertAlmostEqual(grouped[3], direct, places=12)

    def test_sine_order_jets(self) -> None:
        dr, dtheta, h = 0.05, 0.03, 1.0e-6
        jets = self.table.sine_order_jets(dr, dtheta)
        values = self.table.sine_order_coefficients(dr, dtheta)
        shifted_r = self.table.sine_order_coefficients(dr + h, dtheta)
        back_r = self.table.sine_order_coefficients(dr - h, dtheta)
        shifted_t = self.table.sine_order_coefficients(dr, dtheta + h)
        back_t = self.table.sine_order_coefficients(dr, dtheta - h)
        for n, jet in jets.items():
            floor = 1.0e-7 * (1.0 + abs(values[n]))
            with self.subTest(n=n):
                np.testing.assert_allclose(jet.value, values[n], rtol=1.0e-10, atol=1.0e-12)
                np.testing.assert_allclose(
                    jet.d_r, (shifted_r[n] - back_r[n]) / (2.0 * h), rtol=1.0e-6, atol=floor
                )
                np.testing.assert_allclose(
                    jet.d_theta, (shifted_t[n] - back_t[n]) / (2.0 * h), rtol=1.0e-6, atol=floor
                )
                self.assertEqual(jet.d_phi, 0.0)


if __name__ == "__main__":
    unittest.main()
