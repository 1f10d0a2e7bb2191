"""Scalar wave operator on the Kerr background in Boyer-Lindquist coordinates."""

from __future__ import annotations

from dataclasses import dataclass

import math

from .orbits import KerrBackground


@dataclass(frozen=True)
class MetricFunctions:
    """Metric combinations entering ``Box`` at a fixed ``(r, theta)``."""

    sigma: float
    delta: float
    sin_theta: float
    cos_theta: float

    @classmethod
    def at(cls, background: KerrBackground, r: float, theta: float) -> "MetricFunctions":
        return cls(
            sigma=background.sigma(r, theta),
            delta=background.delta(r),
            sin_theta=math.sin(theta),
            cos_theta=math.cos(theta),
        )


@dataclass(frozen=True)
class TimeDerivatives:
    """``d/dt``, ``d2/dt2`` and ``d2/dt dphi`` of a co-rotating field."""

    d_t: float
    d_tt: float
    d_tphi: float


def corotating_time_derivatives(omega: float, d_phi: float, d_phiphi: float) -> TimeDerivatives:
    """A field depending on ``phi - Omega t`` only has ``d/dt = -Omega d/dphi``."""

    return TimeDerivatives(-omega * d_phi, omega * omega * d_phiphi, -omega * d_phiphi)


def wave_operator(
    background: KerrBackground,
    r: float,
    theta: float,
    *,
    d_r: float,
    d_theta: float,
    d_rr: float,
    d_thetatheta: float,
    d_phiphi: float,
    d_tt: float,
    d_tphi: float,
) -> float:
    """Return ``Box Phi`` from the partial derivatives of ``Phi``.

    No guard is applied on the axis or at the horizons, where the metric
    functions vanish and the result is not finite.
    """

    M, a = background.mass, background.spin
    g = MetricFunctions.at(background, r, theta)
    a2 = a * a
    sin2 = g.sin_theta * g.sin_theta
    radial = (2.0 * r - 2.0 * M) * d_r + g.delta * d_rr
    polar = d_thetatheta + (g.cos_theta / g.sin_theta) * d_theta
    azimuthal = (1.0 / sin2 - a2 / g.delta) * d_phiphi
    temporal = -((r * r + a2) ** 2 / g.delta - a2 * sin2) * d_tt
    mixed = -(4.0 * M * a * r / g.delta) * d_tphi
    return (radial + polar + azimuthal + temporal + mixed) / g.sigma


__all__ = [
    "MetricFunctions",
    "TimeDerivatives",
    "corotating_time_derivatives",
    "wave_operator",
]
