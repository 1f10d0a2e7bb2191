"""Immutable orbit snapshots owning their coefficient tables."""

from __future__ import annotations

from dataclasses import dataclass, replace
from time import perf_counter
from typing import Callable, Optional, Union

import math

from loguru import logger

from .circular import circular_table
from .equatorial import equatorial_table
from .errors import DerivativesUnsupportedError, UnsupportedOrbitError
from .orbits import (
    CircularOrbit,
    Coordinate,
    EquatorialOrbit,
    FourVelocity,
    KerrBackground,
    circular_frequency,
)
from .series import CoefficientTable

Orbit = Union[CircularOrbit, EquatorialOrbit]


@dataclass(frozen=True)
class OrbitClassEntry:
    """Describe how an orbit class builds its table and what it supports."""

    default_cutoff: float
    table_factory: Callable[[KerrBackground, Orbit, bool], CoefficientTable]
    frequency: Callable[[KerrBackground, Orbit], Optional[float]]
    mode_table_factory: Callable[[KerrBackground, Orbit, CoefficientTable], CoefficientTable]


def _circular_factory(background: KerrBackground, orbit: Orbit, periodic: bool) -> CoefficientTable:
    return circular_table(background, orbit.radius, periodic=periodic)


def _equatorial_factory(background: KerrBackground, orbit: Orbit, periodic: bool) -> CoefficientTable:
    return equatorial_table(background, orbit)


def _circular_mode_table(
    background: KerrBackground, orbit: Orbit, table: CoefficientTable
) -> CoefficientTable:
    # sine-basis table of the same circular orbit, used for mode work
    return equatorial_table(background, EquatorialOrbit.circular(background, orbit.radius))


ORBIT_CLASSES: dict[str, OrbitClassEntry] = {
    "kerr_circular": OrbitClassEntry(
        default_cutoff=0.1,
        table_factory=_circular_factory,
        frequency=lambda bg, orbit: circular_frequency(bg, orbit.radius),
        mode_table_factory=_circular_mode_table,
    ),
    "kerr_equatorial": OrbitClassEntry(
        default_cutoff=0.02,
        table_factory=_equatorial_factory,
        frequency=lambda bg, orbit: orbit.frequency(bg),
        mode_table_factory=lambda bg, orbit, table: table,
    ),
}


def wrap_angle(angle: float) -> float:
    """Map ``angle`` into ``[-pi, pi)``."""

    return (angle + math.pi) % (2.0 * math.pi) - math.pi


@dataclass(frozen=True)
class OrbitContext:
    """Background, particle state and the coefficient table derived from them.

    A context is never mutated; setting a new particle state means building a
    new context.  ``frequency`` is ``None`` when the orbit is not stationary
    in a co-rotating frame, in which case time derivatives are unavailable.
    ``mode_table`` is the sine-basis table behind the closed-form m-modes;
    for equatorial orbits it is ``table`` itself.
    """

    background: KerrBackground
    particle: Coordinate
    orbit: Orbit
    orbit_class: str
    table: CoefficientTable
    frequency: Optional[float]
    cutoff: float
    mode_table: CoefficientTable

    @classmethod
    def build(
        cls,
        background: KerrBackground,
        particle: Coordinate,
        orbit: Orbit,
        *,
        periodic: bool = True,
        cutoff: Optional[float] = None,
    ) -> "OrbitContext":
        """Derive the coefficient table for ``orbit`` and wrap it in a context."""

        if isinstance(orbit, CircularOrbit):
            orbit_class = "kerr_circular"
        elif isinstance(orbit, EquatorialOrbit):
            orbit_class = "kerr_equatorial"
        else:
            raise UnsupportedOrbitError(f"Unsupported orbit description {type(orbit).__name__}.")
        if not math.isclose(orbit.radius, particle.r, rel_tol=1.0e-12):
            raise ValueError("The orbit radius must match the particle position.")

        entry = ORBIT_CLASSES[orbit_class]
        if cutoff is None:
            cutoff = entry.default_cutoff
        if cutoff < 0:
            raise ValueError("The near-particle cutoff must be non-negative.")

        t_start = perf_counter()
        table = entry.table_factory(background, orbit, periodic)
        mode_table = entry.mode_table_factory(background, orbit, table)
        frequency = entry.frequency(background, orbit)
        dt = perf_counter() - t_start
        logger.debug(
            f"OrbitContext.build: class={orbit_class} | r_p={particle.r:.6g} | "
            f"Omega={'n/a' if frequency is None else f'{frequency:.6g}'} | cutoff={cutoff:g} | {dt*1e3:.2f} ms"
        )
        return cls(background, particle, orbit, orbit_class, table, frequency, float(cutoff), mode_table)

    @classmethod
    def circular(
        cls,
        background: KerrBackground,
        particle: Coordinate,
        velocity: Optional[FourVelocity] = None,
        *,
        periodic: bool = True,
        cutoff: Optional[float] = None,
    ) -> "OrbitContext":
        """Circular-orbit context; a supplied velocity must have ``u^r = u^theta = 0``."""

        if velocity is not None and (velocity.r != 0.0 or velocity.theta != 0.0):
            raise UnsupportedOrbitError(
                "Circular orbits require u^r = u^theta = 0, "
                f"got u^r={velocity.r:g}, u^theta={velocity.theta:g}."
            )
        return cls.build(
            background, particle, CircularOrbit(particle.r), periodic=periodic, cutoff=cutoff
        )

    @classmethod
    def equatorial(
        cls,
        background: KerrBackground,
        particle: Coordinate,
        energy: float,
        angular_momentum: float,
        radial_velocity: float = 0.0,
        *,
        cutoff: Optional[float] = None,
    ) -> "OrbitContext":
        """Equatorial-orbit context from the ``(e, l, u^r)`` triple."""

        orbit = EquatorialOrbit(particle.r, energy, angular_momentum, radial_velocity)
        return cls.build(background, particle, orbit, cutoff=cutoff)

    @classmethod
    def equatorial_from_velocity(
        cls,
        background: KerrBackground,
        particle: Coordinate,
        velocity: FourVelocity,
        *,
        cutoff: Optional[float] = None,
    ) -> "OrbitContext":
        """Equatorial-orbit context from a full 4-velocity."""

        if velocity.theta != 0.0:
            raise UnsupportedOrbitError("Equatorial orbits require u^theta = 0.")
        orbit = EquatorialOrbit.from_velocity(background, particle.r, velocity)
        return cls.build(background, particle, orbit, cutoff=cutoff)

    @property
    def supports_closed_form_modes(self) -> bool:
        return self.mode_table.shape is not None

    def mode_context(self) -> "OrbitContext":
        """Return this snapshot with ``mode_table`` as its evaluation table.

        The singular field of the returned context is the one whose m-modes
        the closed forms give; it is ``pi``-periodic in ``dphi``.
        """

        if self.mode_table is self.table:
            return self
        return replace(self, table=self.mode_table)

    @property
    def stationary(self) -> bool:
        return self.frequency is not None

    def require_frequency(self) -> float:
        """Return ``Omega`` or raise when the orbit is not stationary."""

        if self.frequency is None:
            raise DerivativesUnsupportedError(
                "Time derivatives need a stationary (circular) orbit; "
                f"this {self.orbit_class} snapshot has u^r={self.orbit.radial_velocity:g}."
            )
        return self.frequency

    def offset(self, point: Coordinate) -> tuple[float, float, float]:
        """Return ``(dr, dtheta, dphi)`` of ``point`` relative to the particle."""

        return point.offset_from(self.particle)

    def within_cutoff(self, point: Coordinate) -> bool:
        """True when ``point`` lies inside the near-particle cutoff.

        The azimuthal offset is wrapped to ``[-pi, pi)`` first.
        """

        dr, dtheta, dphi = self.offset(point)
        dphi = wrap_angle(dphi)
        return math.sqrt(dr * dr + dtheta * dtheta + dphi * dphi) < self.cutoff


__all__ = ["OrbitContext", "OrbitClassEntry", "ORBIT_CLASSES", "wrap_angle"]
