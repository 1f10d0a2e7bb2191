"""Singular field and effective source for scalar charges orbiting Kerr black holes.

The :mod:`puncture` package is organised into focused submodules:

``puncture.orbits``
    Coordinates, the Kerr background, orbit snapshots and conversions
    between 4-velocities and conserved ``(e, l)``.
``puncture.series``
    Coefficient tables keyed by monomial degrees and their evaluation,
    including the periodic ``dphi`` surrogates.
``puncture.circular`` / ``puncture.equatorial``
    Orbit-class specific coefficient derivations.
``puncture.context``
    Immutable orbit contexts owning a coefficient table.
``puncture.evaluators`` / ``puncture.operators``
    Local-expansion and effective-source evaluators and the Kerr wave
    operator they rely on.
``puncture.elliptic`` / ``puncture.modes``
    Closed-form elliptic-integral m-modes with their derivatives and
    sources, and quadrature m / (l, m) decompositions.
``puncture.source``
    A stateful ``set_particle``/evaluate front end.
"""

from __future__ import annotations

from .errors import DerivativesUnsupportedError, UnsupportedModeError, UnsupportedOrbitError
from .orbits import (
    CircularOrbit,
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
from .series import CoefficientTable, EllipticShape, SeriesJet
from .circular import circular_table
from .equatorial import elliptic_shape, equatorial_table
from .context import ORBIT_CLASSES, OrbitContext
from .operators import wave_operator
from .evaluators import EffectiveSourceEvaluator, FieldDerivatives, LocalExpansionEvaluator
from .elliptic import MAX_MODE, MODE_TABLE, elliptic_integrals
from .legendre import spherical_legendre
from .modes import (
    COUNTERS,
    EvaluationCounters,
    ModeAmplitude,
    ModeDerivatives,
    closed_form_mode,
    closed_form_mode_derivatives,
    lm_decompose,
    m_decompose,
)
from .source import EffectiveSource

__all__ = [
    "UnsupportedOrbitError",
    "DerivativesUnsupportedError",
    "UnsupportedModeError",
    "Coordinate",
    "FourVelocity",
    "KerrBackground",
    "CircularOrbit",
    "EquatorialOrbit",
    "circular_constants",
    "circular_frequency",
    "constants_from_velocity",
    "velocity_from_constants",
    "radial_velocity_squared",
    "turning_point_constants",
    "CoefficientTable",
    "EllipticShape",
    "SeriesJet",
    "circular_table",
    "equatorial_table",
    "elliptic_shape",
    "OrbitContext",
    "ORBIT_CLASSES",
    "wave_operator",
    "FieldDerivatives",
    "LocalExpansionEvaluator",
    "EffectiveSourceEvaluator",
    "MAX_MODE",
    "MODE_TABLE",
    "elliptic_integrals",
    "spherical_legendre",
    "ModeAmplitude",
    "EvaluationCounters",
    "COUNTERS",
    "closed_form_mode",
    "ModeDerivatives",
    "closed_form_mode_derivatives",
    "m_decompose",
    "lm_decompose",
    "EffectiveSource",
]
