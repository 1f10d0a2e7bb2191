"""Azimuthal and spherical-harmonic mode decompositions.

Two routes are provided:

``closed_form_mode`` / ``closed_form_mode_derivatives``
    Exact m-modes of the equatorial singular field, its derivatives and its
    effective source from complete elliptic integrals and the generated
    :data:`~puncture.elliptic.MODE_TABLE`.
``m_decompose`` / ``lm_decompose``
    Adaptive quadrature of an arbitrary field function over ``phi`` (and
    ``theta``), used to cross-check the closed forms.

Both conventions agree: the m-mode of ``f`` at fixed ``(r, theta)`` is
``int_{-pi}^{pi} f(phi) exp(-i m phi) dphi`` with no ``1 / (2 pi)``.
"""

from __future__ import annotations

from dataclasses import dataclass
from time import perf_counter
from typing import Callable, Optional, Sequence

import math

from loguru import logger
from scipy.integrate import quad

from .context import OrbitContext
from .elliptic import MAX_MODE, MODE_TABLE, ModeRecord, elliptic_integrals
from .errors import UnsupportedModeError, UnsupportedOrbitError
from .legendre import spherical_legendre
from .operators import corotating_time_derivatives, wave_operator
from .orbits import Coordinate
from .series import EllipticShape

FieldFunction = Callable[[Coordinate], float]

DEFAULT_EPSABS = 0.0
DEFAULT_EPSREL = 1.0e-7
PRECISE_EPSABS = 1.0e-10
PRECISE_EPSREL = 1.0e-10
DEFAULT_LIMIT = 1000


@dataclass
class ModeAmplitude:
    """Real and imaginary parts of a mode, with quadrature error estimates."""

    real: float
    imag: float
    real_error: float = 0.0
    imag_error: float = 0.0

    def as_tuple(self) -> tuple[float, float]:
        return (self.real, self.imag)

    def __complex__(self) -> complex:
        return complex(self.real, self.imag)


@dataclass
class EvaluationCounters:
    """Number of integrand evaluations in the ``phi`` and ``theta`` integrals."""

    phi: int = 0
    theta: int = 0

    def reset(self) -> None:
        self.phi = 0
        self.theta = 0


COUNTERS = EvaluationCounters()


def _mode_setup(context: OrbitContext, m: int, strict: bool) -> Optional[ModeRecord]:
    """Validate the context and return the record for ``m`` (``None`` for a zero mode)."""

    if not context.supports_closed_form_modes:
        raise UnsupportedOrbitError(
            f"Closed-form modes are not available for the {context.orbit_class} orbit class."
        )
    if m % 2:
        return None
    record = MODE_TABLE.get(m)
    if record is None and strict:
        raise UnsupportedModeError(f"No closed form for m={m}; supported even m in [0, {MAX_MODE}].")
    return record


def _modulus(shape: EllipticShape, dr: float, dtheta: float) -> float:
    alpha = shape.alpha(dr, dtheta)
    if alpha == 0.0:
        raise ValueError("The m-modes diverge on the particle's world line (dr = dtheta = 0).")
    return alpha / shape.beta


def closed_form_mode(
    context: OrbitContext, m: int, point: Coordinate, *, strict: bool = False
) -> ModeAmplitude:
    """Return the exact m-mode of the singular field at ``(point.r, point.theta)``.

    Odd ``m`` vanish by symmetry and are returned as zero.  Even ``m``
    outside ``0 .. MAX_MODE`` (including negative ``m``) are also zero
    unless ``strict`` is set, in which case
    :class:`~puncture.errors.UnsupportedModeError` is raised.

    The mode is that of the field without the near-particle cutoff, so it
    is finite everywhere except at ``dr = dtheta = 0``, where ``ValueError``
    is raised.  Inside the cutoff it differs from the quadrature of the windowed
    field by the m-mode integral of the field over the excised ``dphi``
    interval.
    """

    record = _mode_setup(context, m, strict)
    if record is None:
        return ModeAmplitude(0.0, 0.0)

    table = context.mode_table
    shape = table.shape
    dr, dtheta, _ = context.offset(point)
    C = _modulus(shape, dr, dtheta)
    K, E = elliptic_integrals(C)
    weights = table.sine_order_coefficients(dr, dtheta)
    kernels = record.kernels(C, K, E)
    total = sum(a * kernels[n] for n, a in weights.items())
    amplitude = 4.0 * table.prefactor * total / shape.beta ** 3.5
    phase = m * context.particle.phi
    return ModeAmplitude(float(amplitude * math.cos(phase)), float(-amplitude * math.sin(phase)))


@dataclass
class ModeDerivatives:
    """One m-mode of the singular field, its derivatives and of ``Box phis``.

    Entries are complex mode amplitudes.  ``dphis_dt`` and ``box_phis`` are
    ``None`` for a non-stationary snapshot.
    """

    m: int
    phis: complex
    dphis_dr: complex
    dphis_dtheta: complex
    dphis_dphi: complex
    dphis_dt: Optional[complex]
    box_phis: Optional[complex]
    d2phis_dr2: complex = 0j
    d2phis_dtheta2: complex = 0j

    @classmethod
    def zero(cls, m: int, stationary: bool = True) -> "ModeDerivatives":
        time = 0j if stationary else None
        return cls(m, 0j, 0j, 0j, 0j, time, time)

    def as_tuple(self) -> tuple:
        """Return ``(phis, dr, dtheta, dphi, dt, box)`` in the driver order."""

        return (
            self.phis,
            self.dphis_dr,
            self.dphis_dtheta,
            self.dphis_dphi,
            self.dphis_dt,
            self.box_phis,
        )


def closed_form_mode_derivatives(
    context: OrbitContext, m: int, point: Coordinate, *, strict: bool = False
) -> ModeDerivatives:
    """Return the m-mode of the singular field with its derivatives and source.

    The ``(dr, dtheta)`` dependence enters through the sine-order weights
    ``a_n`` and through ``C``; both are differentiated analytically, the
    latter via the tabulated ``C``-derivatives of the elliptic kernels.  In
    mode space ``d/dphi`` is ``i m`` and, in the co-rotating frame,
    ``d/dt`` is ``-i m Omega``, so the wave operator is applied with
    ``d2/dphi2 = -m^2``.
    """

    record = _mode_setup(context, m, strict)
    stationary = context.stationary
    if record is None:
        return ModeDerivatives.zero(m, stationary)

    t0 = perf_counter()
    table = context.mode_table
    shape = table.shape
    dr, dtheta, _ = context.offset(point)
    C = _modulus(shape, dr, dtheta)
    K, E = elliptic_integrals(C)
    h0, h1, h2 = (record.kernels(C, K, E, order) for order in range(3))
    jets = table.sine_order_jets(dr, dtheta)
    c_r = 2.0 * shape.alpha20 * dr / shape.beta
    c_rr = 2.0 * shape.alpha20 / shape.beta
    c_th = 2.0 * shape.alpha02 * dtheta / shape.beta
    c_thth = 2.0 * shape.alpha02 / shape.beta

    value = d_r = d_th = d_rr = d_thth = 0.0
    for n, a in jets.items():
        value += a.value * h0[n]
        d_r += a.d_r * h0[n] + a.value * h1[n] * c_r
        d_th += a.d_theta * h0[n] + a.value * h1[n] * c_th
        d_rr += (
            a.d_rr * h0[n]
            + 2.0 * a.d_r * h1[n] * c_r
            + a.value * (h2[n] * c_r * c_r + h1[n] * c_rr)
        )
        d_thth += (
            a.d_thetatheta * h0[n]
            + 2.0 * a.d_theta * h1[n] * c_th
            + a.value * (h2[n] * c_th * c_th + h1[n] * c_thth)
        )

    phase = m * context.particle.phi
    scale = 4.0 * table.prefactor / shape.beta ** 3.5 * complex(math.cos(phase), -math.sin(phase))
    phis, d_r, d_th, d_rr, d_thth = (scale * float(x) for x in (value, d_r, d_th, d_rr, d_thth))
    d_phi = 1j * m * phis
    d_phiphi = -(m * m) * phis
    d_t = box = None
    if stationary:
        time = corotating_time_derivatives(context.frequency, d_phi, d_phiphi)
        d_t = time.d_t
        box = wave_operator(
            context.background,
            point.r,
            point.theta,
            d_r=d_r,
            d_theta=d_th,
            d_rr=d_rr,
            d_thetatheta=d_thth,
            d_phiphi=d_phiphi,
            d_tt=time.d_tt,
            d_tphi=time.d_tphi,
        )
    dt = perf_counter() - t0
    logger.debug(
        f"closed_form_mode_derivatives: m={m} | r={point.r:.6g} theta={point.theta:.6g} | "
        f"C={C:.6g} | {dt*1e3:.2f} ms"
    )
    return ModeDerivatives(m, phis, d_r, d_th, d_phi, d_t, box, d_rr, d_thth)


def _tolerances(
    precise: bool, epsabs: Optional[float], epsrel: Optional[float]
) -> tuple[float, float]:
    if epsabs is None:
        epsabs = PRECISE_EPSABS if precise else DEFAULT_EPSABS
    if epsrel is None:
        epsrel = PRECISE_EPSREL if precise else DEFAULT_EPSREL
    return epsabs, epsrel


def m_decompose(
    m: int,
    point: Coordinate,
    field: FieldFunction,
    *,
    precise: bool = False,
    pi_periodic: bool = False,
    epsabs: Optional[float] = None,
    epsrel: Optional[float] = None,
    limit: int = DEFAULT_LIMIT,
    points: Optional[Sequence[float]] = None,
) -> ModeAmplitude:
    """Fourier m-mode of ``field`` over ``phi`` in ``[-pi, pi]`` at ``(r, theta)``.

    By default the target is a relative error of ``1e-7`` with no absolute
    floor; ``precise`` uses ``1e-10`` for both.  The imaginary part of the
    ``m = 0`` mode is zero without integration.  When the caller
    knows the field is ``pi``-periodic in ``phi`` (as the equatorial
    singular field is), ``pi_periodic`` returns exact zeros for odd ``m``.
    Non-convergence is not escalated: the best estimate and its error are
    returned.
    """

    if pi_periodic and m % 2:
        return ModeAmplitude(0.0, 0.0)
    epsabs, epsrel = _tolerances(precise, epsabs, epsrel)

    def integrand(phi: float, trig: Callable[[float], float], sign: float) -> float:
        COUNTERS.phi += 1
        return sign * field(point.with_angles(point.theta, phi)) * trig(m * phi)

    t0 = perf_counter()
    re, re_err = quad(
        integrand, -math.pi, math.pi, args=(math.cos, 1.0),
        epsabs=epsabs, epsrel=epsrel, limit=limit, points=points,
    )
    im, im_err = 0.0, 0.0
    if m:
        im, im_err = quad(
            integrand, -math.pi, math.pi, args=(math.sin, -1.0),
            epsabs=epsabs, epsrel=epsrel, limit=limit, points=points,
        )
    dt = perf_counter() - t0
    logger.debug(
        f"m_decompose: m={m} | r={point.r:.6g} theta={point.theta:.6g} | "
        f"re={re:.6g}±{re_err:.1e} im={im:.6g}±{im_err:.1e} | {dt*1e3:.2f} ms"
    )
    return ModeAmplitude(float(re), float(im), float(re_err), float(im_err))


def lm_decompose(
    l: int,
    m: int,
    r: float,
    field: FieldFunction,
    *,
    precise: bool = False,
    epsabs: Optional[float] = None,
    epsrel: Optional[float] = None,
    limit: int = DEFAULT_LIMIT,
) -> ModeAmplitude:
    """Project ``field`` on the sphere of radius ``r`` onto ``Y_lm``.

    The ``phi`` integral over ``[0, 2 pi]`` is nested inside the ``theta``
    integral over ``[0, pi]``, weighted by ``P~_lm(cos theta) sin(theta)``.
    Both integrals use the tolerances of :func:`m_decompose`.
    """

    epsabs, epsrel = _tolerances(precise, epsabs, epsrel)

    def phi_integral(theta: float, trig: Callable[[float], float], sign: float) -> float:
        weight = spherical_legendre(l, m, math.cos(theta)) * math.sin(theta)
        COUNTERS.theta += 1

        def integrand(phi: float) -> float:
            COUNTERS.phi += 1
            return field(Coordinate(r, theta, phi)) * trig(m * phi)

        value, _ = quad(integrand, 0.0, 2.0 * math.pi, epsabs=epsabs, epsrel=epsrel, limit=limit)
        return sign * weight * value

    t0 = perf_counter()
    re, re_err = quad(
        phi_integral, 0.0, math.pi, args=(math.cos, 1.0),
        epsabs=epsabs, epsrel=epsrel, limit=limit,
    )
    im, im_err = 0.0, 0.0
    if m:
        im, im_err = quad(
            phi_integral, 0.0, math.pi, args=(math.sin, -1.0),
            epsabs=epsabs, epsrel=epsrel, limit=limit,
        )
    dt = perf_counter() - t0
    logger.debug(
        f"lm_decompose: l={l} m={m} | r={r:.6g} | re={re:.6g}±{re_err:.1e} "
        f"im={im:.6g}±{im_err:.1e} | phi evals={COUNTERS.phi} theta evals={COUNTERS.theta} | {dt*1e3:.2f} ms"
    )
    return ModeAmplitude(float(re), float(im), float(re_err), float(im_err))


__all__ = [
    "ModeAmplitude",
    "EvaluationCounters",
    "COUNTERS",
    "FieldFunction",
    "closed_form_mode",
    "ModeDerivatives",
    "closed_form_mode_derivatives",
    "m_decompose",
    "lm_decompose",
    "DEFAULT_EPSABS",
    "DEFAULT_EPSREL",
    "PRECISE_EPSABS",
    "PRECISE_EPSREL",
    "DEFAULT_LIMIT",
]
