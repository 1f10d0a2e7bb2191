"""Coordinates, the Kerr background and orbit descriptions.

Everything here is an immutable value: the particle state is supplied once
per orbit snapshot and never advanced in time.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

import math

from scipy.optimize import fsolve


@dataclass(frozen=True)
class Coordinate:
    """A Boyer-Lindquist point stored in the order ``(r, theta, phi, t)``."""

    r: float
    theta: float
    phi: float
    t: float = 0.0

    @classmethod
    def from_sequence(cls, values: Sequence[float]) -> "Coordinate":
        """Build a coordinate from ``(r, theta, phi[, t])``."""

        if len(values) not in (3, 4):
            raise ValueError("A coordinate needs three or four components.")
        return cls(*(float(v) for v in values))

    def as_tuple(self) -> tuple[float, float, float, float]:
        return (self.r, self.theta, self.phi, self.t)

    def with_angles(self, theta: float, phi: float) -> "Coordinate":
        """Return a copy sharing ``r`` and ``t`` but at new angles."""

        return Coordinate(self.r, theta, phi, self.t)

    def offset_from(self, other: "Coordinate") -> tuple[float, float, float]:
        """Return ``(dr, dtheta, dphi)`` of ``self`` relative to ``other``."""

        return (self.r - other.r, self.theta - other.theta, self.phi - other.phi)


@dataclass(frozen=True)
class FourVelocity:
    """Contravariant 4-velocity components ``u^mu``."""

    t: float
    r: float
    theta: float
    phi: float

    @classmethod
    def from_sequence(cls, values: Sequence[float]) -> "FourVelocity":
        if len(values) != 4:
            raise ValueError("A 4-velocity needs exactly four components.")
        return cls(*(float(v) for v in values))


@dataclass(frozen=True)
class KerrBackground:
    """Mass ``M`` and spin ``a`` of the background black hole.

    ``|a| <= M`` is the physical range but is deliberately not enforced.
    """

    mass: float
    spin: float = 0.0

    def __post_init__(self) -> None:
        if not self.mass > 0:
            raise ValueError("The black-hole mass must be positive.")
        if not math.isfinite(self.spin):
            raise ValueError("The spin parameter must be finite.")

    def delta(self, r: float) -> float:
        """``Delta = r^2 - 2 M r + a^2``, vanishing on the horizons."""

        return r * r - 2.0 * self.mass * r + self.spin * self.spin

    def sigma(self, r: float, theta: float) -> float:
        """``Sigma = r^2 + a^2 cos^2 theta``."""

        cos_theta = math.cos(theta)
        return r * r + self.spin * self.spin * cos_theta * cos_theta

    @property
    def outer_horizon(self) -> float:
        """Outer horizon radius ``r_+ = M + sqrt(M^2 - a^2)`` (NaN if naked)."""

        disc = self.mass * self.mass - self.spin * self.spin
        if disc < 0.0:
            return math.nan
        return self.mass + math.sqrt(disc)


def circular_frequency(background: KerrBackground, radius: float) -> float:
    """Angular frequency ``Omega = M / (a M + sqrt(M r^3))`` of a prograde orbit."""

    M, a = background.mass, background.spin
    return M / (a * M + math.sqrt(M * radius ** 3))


def circular_constants(background: KerrBackground, radius: float) -> tuple[float, float]:
    """Specific energy and angular momentum of a prograde circular equatorial orbit."""

    M, a = background.mass, background.spin
    root_mr = math.sqrt(M * radius)
    denom = root_mr * math.sqrt(radius * radius - 3.0 * M * radius + 2.0 * a * root_mr)
    energy = ((radius - 2.0 * M) * root_mr + a * M) / denom
    angular_momentum = M * (a * a + radius * radius - 2.0 * a * root_mr) / denom
    return energy, angular_momentum


def constants_from_velocity(
    background: KerrBackground, radius: float, velocity: FourVelocity
) -> tuple[float, float]:
    """Return ``(e, l) = (-u_t, u_phi)`` for an equatorial 4-velocity."""

    M, a = background.mass, background.spin
    r = radius
    energy = (1.0 - 2.0 * M / r) * velocity.t + (2.0 * M * a / r) * velocity.phi
    angular_momentum = -(2.0 * M * a / r) * velocity.t + (
        r * r + a * a + 2.0 * M * a * a / r
    ) * velocity.phi
    return energy, angular_momentum


def velocity_from_constants(
    background: KerrBackground,
    radius: float,
    energy: float,
    angular_momentum: float,
    radial_velocity: float = 0.0,
) -> FourVelocity:
    """Rebuild the equatorial 4-velocity from ``(e, l, u^r)``."""

    M, a = background.mass, background.spin
    r, e, l = radius, energy, angular_momentum
    delta = background.delta(r)
    u_t = (-2.0 * a * l * M + e * r ** 3 + a * a * e * (2.0 * M + r)) / (r * delta)
    u_phi = (2.0 * a * e * M - 2.0 * l * M + l * r) / (r * delta)
    return FourVelocity(u_t, radial_velocity, 0.0, u_phi)


def radial_velocity_squared(
    background: KerrBackground, radius: float, energy: float, angular_momentum: float
) -> float:
    """``(u^r)^2`` of an equatorial geodesic with constants ``(e, l)``."""

    a = background.spin
    r, e, l = radius, energy, angular_momentum
    potential = (e * (r * r + a * a) - a * l) ** 2 - background.delta(r) * (
        r * r + (l - a * e) ** 2
    )
    return potential / r ** 4


def turning_point_constants(
    background: KerrBackground, periapsis: float, apoapsis: float
) -> tuple[float, float]:
    """Prograde ``(e, l)`` of the bound equatorial orbit between two turning points.

    Solves ``(u^r)^2 = 0`` at both radii, starting from the circular constants
    at the mean radius.  Equal radii give the circular constants directly.
    """

    if not 0 < periapsis <= apoapsis:
        raise ValueError("Turning points must satisfy 0 < periapsis <= apoapsis.")
    if math.isclose(periapsis, apoapsis, rel_tol=1.0e-12):
        return circular_constants(background, periapsis)

    def residual(constants):
        e, l = constants
        return [
            radial_velocity_squared(background, periapsis, e, l) * periapsis ** 4,
            radial_velocity_squared(background, apoapsis, e, l) * apoapsis ** 4,
        ]

    guess = circular_constants(background, 0.5 * (periapsis + apoapsis))
    solution, info, ier, message = fsolve(residual, guess, xtol=1.0e-12, full_output=True)
    if ier != 1:
        raise ValueError(f"No bound orbit between r={periapsis:g} and r={apoapsis:g}: {message}")
    return float(solution[0]), float(solution[1])


@dataclass(frozen=True)
class CircularOrbit:
    """Circular equatorial orbit; the velocity follows from the radius."""

    radius: float

    def __post_init__(self) -> None:
        if not self.radius > 0:
            raise ValueError("The orbital radius must be positive.")


@dataclass(frozen=True)
class EquatorialOrbit:
    """Equatorial (possibly eccentric) orbit snapshot ``(r_p, e, l, u^r)``."""

    radius: float
    energy: float
    angular_momentum: float
    radial_velocity: float = 0.0

    def __post_init__(self) -> None:
        if not self.radius > 0:
            raise ValueError("The orbital radius must be positive.")
        values = (self.energy, self.angular_momentum, self.radial_velocity)
        if not all(math.isfinite(v) for v in values):
            raise ValueError("Orbital constants must be finite.")

    @classmethod
    def from_velocity(
        cls, background: KerrBackground, radius: float, velocity: FourVelocity
    ) -> "EquatorialOrbit":
        """Convert an equatorial 4-velocity into the ``(e, l, u^r)`` triple."""

        energy, angular_momentum = constants_from_velocity(background, radius, velocity)
        return cls(radius, energy, angular_momentum, velocity.r)

    @classmethod
    def circular(cls, background: KerrBackground, radius: float) -> "EquatorialOrbit":
        """Equatorial snapshot of the prograde circular orbit at ``radius``."""

        energy, angular_momentum = circular_constants(background, radius)
        return cls(radius, energy, angular_momentum, 0.0)

    def is_circular(self, background: KerrBackground, rel_tol: float = 1.0e-9) -> bool:
        """True when ``u^r = 0`` and ``(e, l)`` match the circular constants."""

        if self.radial_velocity != 0.0:
            return False
        e_circ, l_circ = circular_constants(background, self.radius)
        return math.isclose(self.energy, e_circ, rel_tol=rel_tol) and math.isclose(
            self.angular_momentum, l_circ, rel_tol=rel_tol
        )

    def frequency(self, background: KerrBackground) -> Optional[float]:
        """``Omega = u^phi / u^t`` for a circular snapshot, otherwise ``None``."""

        if not self.is_circular(background):
            return None
        velocity = velocity_from_constants(
            background, self.radius, self.energy, self.angular_momentum
        )
        return velocity.phi / velocity.t


__all__ = [
    "Coordinate",
    "FourVelocity",
    "KerrBackground",
    "CircularOrbit",
    "EquatorialOrbit",
    "circular_frequency",
    "circular_constants",
    "constants_from_velocity",
    "velocity_from_constants",
    "radial_velocity_squared",
    "turning_point_constants",
]
