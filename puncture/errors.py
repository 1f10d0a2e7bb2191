"""Typed failures raised by the singular-field toolkit."""

from __future__ import annotations


class UnsupportedOrbitError(ValueError):
    """The orbit configuration is not covered by the requested orbit class."""


class DerivativesUnsupportedError(ValueError):
    """Time derivatives (and hence the effective source) are unavailable.

    Raised for equatorial orbits that are not stationary in a co-rotating
    frame, where ``d/dt`` cannot be traded for ``-Omega d/dphi``.
    """


class UnsupportedModeError(ValueError):
    """The closed-form decomposition has no entry for the requested ``m``."""


__all__ = [
    "UnsupportedOrbitError",
    "DerivativesUnsupportedError",
    "UnsupportedModeError",
]
