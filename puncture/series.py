"""Coefficient tables and their evaluation in the local offset.

A table stores two truncated series in ``(dr, dtheta, sigma_k(dphi))``
keyed by the monomial degrees ``(i, j, k)``::

    phis = prefactor * N(dr, dtheta, dphi) / D(dr, dtheta, dphi) ** power

``sigma_k`` is either a literal power ``dphi**k``, a bounded periodic
surrogate matching ``dphi**k`` to the expansion order, or ``sin(dphi)**k``
depending on the orbit class.  Values and first/second partial derivatives
of the quotient are assembled generically from the table entries.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Callable, Iterable, Mapping, Optional

import math
import numpy as np


Monomial = tuple[int, int, int]


@dataclass(frozen=True)
class PhiTerm:
    """A ``dphi`` basis function together with its first two derivatives."""

    value: float
    first: float
    second: float


PhiTerms = dict[int, PhiTerm]

_ONE = PhiTerm(1.0, 0.0, 0.0)


def periodic_phi_terms(dphi: float, orders: Iterable[int]) -> PhiTerms:
    """Periodic surrogates for ``dphi**2`` and ``dphi**4``.

    Both agree with the powers through fourth order about ``dphi = 0`` and
    stay bounded on the far side of the black hole.
    """

    c1, c2 = math.cos(dphi), math.cos(2.0 * dphi)
    s1, s2 = math.sin(dphi), math.sin(2.0 * dphi)
    terms: PhiTerms = {}
    for k in orders:
        if k == 0:
            terms[k] = _ONE
        elif k == 2:
            terms[k] = PhiTerm(
                2.5 - 8.0 * c1 / 3.0 + c2 / 6.0,
                8.0 * s1 / 3.0 - s2 / 3.0,
                8.0 * c1 / 3.0 - 2.0 * c2 / 3.0,
            )
        elif k == 4:
            terms[k] = PhiTerm(
                6.0 - 8.0 * c1 + 2.0 * c2,
                8.0 * s1 - 4.0 * s2,
                8.0 * c1 - 8.0 * c2,
            )
        else:
            raise ValueError(f"No periodic surrogate for dphi**{k}.")
    return terms


def _power_triplet(x: float, n: int) -> tuple[float, float, float]:
    """Return ``(x**n, n x**(n-1), n (n-1) x**(n-2))`` without negative powers."""

    if n == 0:
        return 1.0, 0.0, 0.0
    if n == 1:
        return x, 1.0, 0.0
    return x ** n, n * x ** (n - 1), n * (n - 1) * x ** (n - 2)


def power_phi_terms(dphi: float, orders: Iterable[int]) -> PhiTerms:
    """Literal powers ``dphi**k``; only trustworthy close to ``dphi = 0``."""

    return {k: PhiTerm(*_power_triplet(dphi, k)) for k in orders}


def sine_phi_terms(dphi: float, orders: Iterable[int]) -> PhiTerms:
    """Powers of ``sin(dphi)`` with derivatives in ``dphi``."""

    s, c = math.sin(dphi), math.cos(dphi)
    terms: PhiTerms = {}
    for k in orders:
        value, ds, d2s = _power_triplet(s, k)
        # chain rule: ds/dphi = c, d2s/dphi2 = -s
        terms[k] = PhiTerm(value, ds * c, d2s * c * c - ds * s)
    return terms


PHI_BASES: dict[str, Callable[[float, Iterable[int]], PhiTerms]] = {
    "periodic": periodic_phi_terms,
    "power": power_phi_terms,
    "sine": sine_phi_terms,
}


@dataclass(frozen=True)
class SeriesJet:
    """Value and non-mixed partial derivatives of a function of the offset."""

    value: float
    d_r: float = 0.0
    d_theta: float = 0.0
    d_phi: float = 0.0
    d_rr: float = 0.0
    d_thetatheta: float = 0.0
    d_phiphi: float = 0.0


def evaluate_series(
    coefficients: Mapping[Monomial, float],
    dr: float,
    dtheta: float,
    phi_terms: PhiTerms,
    *,
    derivatives: bool = True,
) -> SeriesJet:
    """Evaluate ``sum c_ijk dr^i dtheta^j sigma_k`` and optionally its derivatives."""

    if not derivatives:
        total = 0.0
        for (i, j, k), c in coefficients.items():
            total += c * dr ** i * dtheta ** j * phi_terms[k].value
        return SeriesJet(total)

    r_pow: dict[int, tuple[float, float, float]] = {}
    t_pow: dict[int, tuple[float, float, float]] = {}
    acc = np.zeros(7, dtype=float)
    for (i, j, k), c in coefficients.items():
        if i not in r_pow:
            r_pow[i] = _power_triplet(dr, i)
        if j not in t_pow:
            t_pow[j] = _power_triplet(dtheta, j)
        R, R1, R2 = r_pow[i]
        T, T1, T2 = t_pow[j]
        P = phi_terms[k]
        acc += c * np.array(
            [
                R * T * P.value,
                R1 * T * P.value,
                R * T1 * P.value,
                R * T * P.first,
                R2 * T * P.value,
                R * T2 * P.value,
                R * T * P.second,
            ]
        )
    return SeriesJet(*(float(x) for x in acc))


def _quotient(
    n: float, dn: float, d2n: float, d: float, dd: float, d2d: float, power: float
) -> tuple[float, float, float]:
    """Value, first and second derivative of ``n * d**(-power)`` along one axis."""

    dp = d ** (-power)
    dp1 = dp / d
    dp2 = dp1 / d
    value = n * dp
    first = dn * dp - power * n * dd * dp1
    second = (
        d2n * dp
        - 2.0 * power * dn * dd * dp1
        - power * n * d2d * dp1
        + power * (power + 1.0) * n * dd * dd * dp2
    )
    return value, first, second


@dataclass(frozen=True)
class EllipticShape:
    """Quadratic-form coefficients of ``rho^2 = alpha + beta sin^2(dphi)``.

    ``alpha = alpha20 dr^2 + alpha02 dtheta^2``; the ratio ``C = alpha / beta``
    is the single parameter entering the closed-form m-modes.
    """

    alpha20: float
    alpha02: float
    beta: float

    def alpha(self, dr: float, dtheta: float) -> float:
        return self.alpha20 * dr * dr + self.alpha02 * dtheta * dtheta


@dataclass(frozen=True)
class CoefficientTable:
    """Orbit-dependent numerator/denominator series of the singular field."""

    numerator: Mapping[Monomial, float]
    denominator: Mapping[Monomial, float]
    prefactor: float
    power: float
    phi_basis: str
    shape: Optional[EllipticShape] = None
    phi_orders: tuple[int, ...] = field(init=False, default=())

    def __post_init__(self) -> None:
        if self.phi_basis not in PHI_BASES:
            raise ValueError(f"Unknown dphi basis '{self.phi_basis}'.")
        object.__setattr__(self, "numerator", MappingProxyType(dict(self.numerator)))
        object.__setattr__(self, "denominator", MappingProxyType(dict(self.denominator)))
        orders = {k for (_, _, k) in self.numerator} | {k for (_, _, k) in self.denominator}
        object.__setattr__(self, "phi_orders", tuple(sorted(orders)))

    def phi_terms(self, dphi: float) -> PhiTerms:
        return PHI_BASES[self.phi_basis](dphi, self.phi_orders)

    def value(self, dr: float, dtheta: float, dphi: float) -> float:
        """Singular-field value at the offset ``(dr, dtheta, dphi)``."""

        terms = self.phi_terms(dphi)
        n = evaluate_series(self.numerator, dr, dtheta, terms, derivatives=False).value
        d = evaluate_series(self.denominator, dr, dtheta, terms, derivatives=False).value
        return self.prefactor * n * d ** (-self.power)

    def jet(self, dr: float, dtheta: float, dphi: float) -> SeriesJet:
        """Singular field and its spatial partial derivatives at the offset."""

        terms = self.phi_terms(dphi)
        N = evaluate_series(self.numerator, dr, dtheta, terms)
        D = evaluate_series(self.denominator, dr, dtheta, terms)
        p = self.power
        value, d_r, d_rr = _quotient(N.value, N.d_r, N.d_rr, D.value, D.d_r, D.d_rr, p)
        _, d_th, d_thth = _quotient(
            N.value, N.d_theta, N.d_thetatheta, D.value, D.d_theta, D.d_thetatheta, p
        )
        _, d_ph, d_phph = _quotient(
            N.value, N.d_phi, N.d_phiphi, D.value, D.d_phi, D.d_phiphi, p
        )
        k = self.prefactor
        return SeriesJet(k * value, k * d_r, k * d_th, k * d_ph, k * d_rr, k * d_thth, k * d_phph)

    def as_array(self) -> np.ndarray:
        """Flatten both series into one array ordered by monomial."""

        num = [self.numerator[key] for key in sorted(self.numerator)]
        den = [self.denominator[key] for key in sorted(self.denominator)]
        return np.asarray(num + den, dtype=float)

    def sine_order_coefficients(self, dr: float, dtheta: float) -> dict[int, float]:
        """Collapse the numerator into ``a_n`` multiplying ``sin(dphi)**(2n)``."""

        self._require_sine_basis()
        grouped: dict[int, float] = {}
        for (i, j, k), c in self.numerator.items():
            grouped[k // 2] = grouped.get(k // 2, 0.0) + c * dr ** i * dtheta ** j
        return grouped

    def sine_order_jets(self, dr: float, dtheta: float) -> dict[int, SeriesJet]:
        """``a_n`` together with their ``dr`` and ``dtheta`` derivatives."""

        self._require_sine_basis()
        groups: dict[int, dict[Monomial, float]] = {}
        for key, c in self.numerator.items():
            groups.setdefault(key[2] // 2, {})[key] = c
        flat = {k: _ONE for k in self.phi_orders}
        return {n: evaluate_series(group, dr, dtheta, flat) for n, group in groups.items()}

    def _require_sine_basis(self) -> None:
        if self.phi_basis != "sine":
            raise ValueError("Only sine-power tables collapse by order in sin(dphi).")


__all__ = [
    "Monomial",
    "PhiTerm",
    "PHI_BASES",
    "periodic_phi_terms",
    "power_phi_terms",
    "sine_phi_terms",
    "SeriesJet",
    "evaluate_series",
    "EllipticShape",
    "CoefficientTable",
]
