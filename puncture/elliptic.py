"""Complete elliptic integrals and the closed-form m-mode lookup table.

The azimuthal integral of ``sin(dphi)^(2n) cos(m dphi) / rho2^(7/2)`` with
``rho2 = beta (C + sin^2 dphi)`` reduces to the moments::

    W_j(C) = int_0^{pi/2} (C + sin^2 u)^(j - 1/2) du

Every ``W_j`` is a combination ``(E(C) P_j(C) + K(C) Q_j(C))`` with
polynomial ``P_j``, ``Q_j`` divided by ``C^3 (1 + C)^(7/2)``, where ``K``
and ``E`` are complete elliptic integrals at parameter ``1 / (1 + C)``.
The moments obey::

    (2j + 3) W_{j+2} = (2j + 2)(2C + 1) W_{j+1} - (2j + 1) C (C + 1) W_j

The table below is generated once, in exact rational arithmetic, holding
one :class:`ModeRecord` per supported ``m``.  Evaluation is a lookup plus
Horner evaluation of polynomials in ``C``; supporting more modes only
means raising :data:`MAX_MODE`.
"""

from __future__ import annotations

from dataclasses import dataclass
from fractions import Fraction
from math import comb
from time import perf_counter

import numpy as np
import scipy.special as sp
from loguru import logger

MAX_MODE = 20
MAX_SINE_ORDER = 4
MAX_C_DERIVATIVE = 2

Poly = list[Fraction]


def _trim(p: Poly) -> Poly:
    while len(p) > 1 and p[-1] == 0:
        p.pop()
    return p


def _add(p: Poly, q: Poly) -> Poly:
    n = max(len(p), len(q))
    return _trim([(p[i] if i < len(p) else 0) + (q[i] if i < len(q) else 0) for i in range(n)])


def _scale(p: Poly, s: Fraction) -> Poly:
    return _trim([s * c for c in p])


def _mul(p: Poly, q: Poly) -> Poly:
    out = [Fraction(0)] * (len(p) + len(q) - 1)
    for i, a in enumerate(p):
        if a == 0:
            continue
        for j, b in enumerate(q):
            out[i + j] += a * b
    return _trim(out)


def _deriv(p: Poly) -> Poly:
    if len(p) == 1:
        return [Fraction(0)]
    return _trim([i * c for i, c in enumerate(p) if i > 0])


def _pow(p: Poly, n: int) -> Poly:
    out: Poly = [Fraction(1)]
    for _ in range(n):
        out = _mul(out, p)
    return out


_C: Poly = [Fraction(0), Fraction(1)]
_ONE_PLUS_C: Poly = [Fraction(1), Fraction(1)]
_TWO_C_PLUS_ONE: Poly = [Fraction(1), Fraction(2)]
_C_ONE_PLUS_C: Poly = [Fraction(0), Fraction(1), Fraction(1)]


@dataclass(frozen=True)
class _Pair:
    """Polynomial coefficients of ``E`` and ``K`` in one moment."""

    e: Poly
    k: Poly

    def __add__(self, other: "_Pair") -> "_Pair":
        return _Pair(_add(self.e, other.e), _add(self.k, other.k))

    def times(self, p: Poly) -> "_Pair":
        return _Pair(_mul(self.e, p), _mul(self.k, p))

    def scaled(self, s: Fraction) -> "_Pair":
        return _Pair(_scale(self.e, s), _scale(self.k, s))


def _seed_moments() -> dict[int, _Pair]:
    """``W_{-3} .. W_1`` in closed form, normalised by ``C^3 (1 + C)^(7/2)``."""

    zero: Poly = [Fraction(0)]
    third = Fraction(1, 3)
    c2 = _pow(_C, 2)
    opc = _ONE_PLUS_C
    tcp1 = _TWO_C_PLUS_ONE
    e_minus3 = _scale(
        _mul(
            opc,
            _add(
                _scale(_pow(tcp1, 2), Fraction(8, 3)),
                _scale(_C_ONE_PLUS_C, Fraction(-3)),
            ),
        ),
        Fraction(1, 5),
    )
    return {
        1: _Pair(_mul(_pow(_C, 3), _pow(opc, 4)), zero),
        0: _Pair(zero, _mul(_pow(_C, 3), _pow(opc, 3))),
        -1: _Pair(_mul(c2, _pow(opc, 3)), zero),
        -2: _Pair(
            _scale(_mul(_mul(tcp1, _C), _pow(opc, 2)), 2 * third),
            _scale(_mul(c2, _pow(opc, 2)), -third),
        ),
        -3: _Pair(
            e_minus3,
            _scale(_mul(_mul(tcp1, _C), opc), Fraction(-4, 15)),
        ),
    }


def moment_table(max_index: int) -> dict[int, _Pair]:
    """Return ``W_j`` for ``-3 <= j <= max_index`` by upward recursion."""

    moments = _seed_moments()
    for j in range(0, max_index - 1):
        moments[j + 2] = (
            moments[j + 1].times(_TWO_C_PLUS_ONE).scaled(Fraction(2 * j + 2))
            + moments[j].times(_C_ONE_PLUS_C).scaled(Fraction(-(2 * j + 1)))
        ).scaled(Fraction(1, 2 * j + 3))
    return moments


def cosine_in_sine_squared(m: int) -> list[int]:
    """Integer coefficients of ``cos(m u)`` as a polynomial in ``S = sin^2 u``.

    Only even ``m`` are polynomial: ``cos(m u) = T_{m/2}(1 - 2S)``.
    """

    if m < 0 or m % 2:
        raise ValueError("cos(m u) is a polynomial in sin^2 u only for even m >= 0.")
    x = [1, -2]
    prev: list[int] = [1]
    curr: list[int] = x
    if m == 0:
        return prev
    for _ in range(m // 2 - 1):
        twice_x_curr = [0] * (len(curr) + 1)
        for i, c in enumerate(curr):
            twice_x_curr[i] += 2 * c * x[0]
            twice_x_curr[i + 1] += 2 * c * x[1]
        nxt = [
            twice_x_curr[i] - (prev[i] if i < len(prev) else 0)
            for i in range(len(twice_x_curr))
        ]
        prev, curr = curr, nxt
    return curr


@dataclass(frozen=True)
class ModeRecord:
    """Closed-form coefficients for one azimuthal mode number.

    ``e_coefficients[n]`` and ``k_coefficients[n]`` hold ascending powers of
    ``C`` multiplying ``E`` and ``K`` in the contribution of the
    ``sin(dphi)^(2n)`` numerator term.  ``e_derivatives[d - 1]`` and
    ``k_derivatives[d - 1]`` hold the same for the ``d``-th derivative in
    ``C``, normalised by ``C^(3 + d) (1 + C)^(7/2 + d)``.
    """

    m: int
    e_coefficients: tuple[np.ndarray, ...]
    k_coefficients: tuple[np.ndarray, ...]
    e_derivatives: tuple[tuple[np.ndarray, ...], ...] = ()
    k_derivatives: tuple[tuple[np.ndarray, ...], ...] = ()

    def kernels(self, C: float, K: float, E: float, order: int = 0) -> np.ndarray:
        """Return ``d^order/dC^order`` of ``H_n(C)`` for every sine order ``n``.

        ``H_n = (E P_mn(C) + K Q_mn(C)) / (C^3 (1 + C)^(7/2))`` is the
        ``m``-mode of ``sin(dphi)^(2n) / (C + sin^2 dphi)^(7/2)`` up to the
        factor ``4``.
        """

        if order == 0:
            e_parts, k_parts = self.e_coefficients, self.k_coefficients
        else:
            if order > len(self.e_derivatives):
                raise ValueError(f"Derivatives in C are tabulated up to order {len(self.e_derivatives)}.")
            e_parts, k_parts = self.e_derivatives[order - 1], self.k_derivatives[order - 1]
        norm = C ** (3 + order) * (1.0 + C) ** (3.5 + order)
        polyval = np.polynomial.polynomial.polyval
        return np.array(
            [(E * polyval(C, p) + K * polyval(C, q)) / norm for p, q in zip(e_parts, k_parts)],
            dtype=float,
        )


def _differentiate(pair: _Pair, order: int) -> _Pair:
    """``d/dC`` of ``(E P + K Q) / (C^s (1 + C)^t)`` with ``s = 3 + order``.

    Uses ``dE/dC = (K - E) / (2 (1 + C))`` and
    ``dK/dC = K / (2 (1 + C)) - E / (2 C)``; the result is normalised by
    ``C^(s + 1) (1 + C)^(t + 1)``.
    """

    s = Fraction(3 + order)
    t = Fraction(7, 2) + order
    log_derivative: Poly = [s, s + t]
    half_c: Poly = [Fraction(0), Fraction(1, 2)]
    half_one_plus_c: Poly = [Fraction(1, 2), Fraction(1, 2)]

    def lift(p: Poly) -> Poly:
        return _add(_mul(_deriv(p), _C_ONE_PLUS_C), _scale(_mul(p, log_derivative), Fraction(-1)))

    e = _add(
        lift(pair.e),
        _scale(_add(_mul(pair.e, half_c), _mul(pair.k, half_one_plus_c)), Fraction(-1)),
    )
    k = _add(lift(pair.k), _mul(_add(pair.e, pair.k), half_c))
    return _Pair(e, k)


def _sine_power_integrals(moments: dict[int, _Pair], q: int) -> _Pair:
    """``int S^q (C + S)^(-7/2)`` with ``S^q = ((C + S) - C)^q`` expanded."""

    total = _Pair([Fraction(0)], [Fraction(0)])
    minus_c = [Fraction(0), Fraction(-1)]
    for i in range(q + 1):
        weight = _scale(_pow(minus_c, q - i), Fraction(comb(q, i)))
        total = total + moments[i - 3].times(weight)
    return total


def _as_array(p: Poly) -> np.ndarray:
    return np.array([float(c) for c in p], dtype=float)


def build_mode_table(
    max_mode: int = MAX_MODE,
    max_order: int = MAX_SINE_ORDER,
    max_derivative: int = MAX_C_DERIVATIVE,
) -> dict[int, ModeRecord]:
    """Generate the closed-form records for ``m = 0, 2, ..., max_mode``.

    Each record also carries the first ``max_derivative`` derivatives in
    ``C``, which the m-mode derivatives and sources need.
    """

    t0 = perf_counter()
    max_power = max_order + max_mode // 2
    moments = moment_table(max_power - 3)
    integrals = {q: _sine_power_integrals(moments, q) for q in range(max_power + 1)}
    table: dict[int, ModeRecord] = {}
    for m in range(0, max_mode + 1, 2):
        cheb = cosine_in_sine_squared(m)
        levels: list[list[_Pair]] = [[] for _ in range(max_derivative + 1)]
        for n in range(max_order + 1):
            acc = _Pair([Fraction(0)], [Fraction(0)])
            for j, t in enumerate(cheb):
                if t:
                    acc = acc + integrals[n + j].scaled(Fraction(t))
            levels[0].append(acc)
            for d in range(max_derivative):
                acc = _differentiate(acc, d)
                levels[d + 1].append(acc)
        e_parts = tuple(tuple(_as_array(p.e) for p in level) for level in levels)
        k_parts = tuple(tuple(_as_array(p.k) for p in level) for level in levels)
        table[m] = ModeRecord(m, e_parts[0], k_parts[0], e_parts[1:], k_parts[1:])
    dt = perf_counter() - t0
    logger.debug(f"build_mode_table: max_mode={max_mode} | records={len(table)} | {dt*1e3:.2f} ms")
    return table


def elliptic_integrals(C: float) -> tuple[float, float]:
    """Return ``(K, E)`` at parameter ``k^2 = 1 / (1 + C)``.

    ``K`` is taken from the complementary parameter ``C / (1 + C)`` to keep
    full precision as ``C -> 0``.
    """

    K = sp.ellipkm1(C / (1.0 + C))
    E = sp.ellipe(1.0 / (1.0 + C))
    return float(K), float(E)


MODE_TABLE: dict[int, ModeRecord] = build_mode_table()


__all__ = [
    "MAX_MODE",
    "MAX_SINE_ORDER",
    "MAX_C_DERIVATIVE",
    "ModeRecord",
    "MODE_TABLE",
    "build_mode_table",
    "cosine_in_sine_squared",
    "elliptic_integrals",
    "moment_table",
]
