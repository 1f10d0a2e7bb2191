"""Normalised associated Legendre functions for spherical-harmonic projections."""

from __future__ import annotations

import numpy as np
import scipy.special as sp


def _to_output(value: np.ndarray | float) -> float | np.ndarray:
    """Return a Python float when ``value`` is scalar, otherwise an array."""

    arr = np.asarray(value, dtype=float)
    if arr.shape == ():
        return float(arr)
    return arr


def spherical_legendre(
    l: int | np.ndarray, m: int | np.ndarray, x: float | np.ndarray
) -> float | np.ndarray:
    """Return ``sqrt((2l+1)/(4 pi) (l-m)!/(l+m)!) P_l^m(x)``.

    ``Y_lm(theta, phi)`` is this function of ``cos(theta)`` times
    ``exp(i m phi)``.  The Condon-Shortley phase is included and negative
    ``m`` use ``P~_l^{-m} = (-1)^m P~_l^m``.  Entries with ``|m| > l`` vanish.
    """

    l_arr, m_arr, x_arr = np.broadcast_arrays(np.asarray(l), np.asarray(m), np.asarray(x))
    l_arr = l_arr.astype(int, copy=False)
    m_arr = m_arr.astype(int, copy=False)
    x_arr = x_arr.astype(float, copy=False)

    m_abs = np.abs(m_arr)
    result = np.zeros_like(x_arr, dtype=float)
    valid = (l_arr >= 0) & (m_abs <= l_arr)
    if np.any(valid):
        lv, mv, xv = l_arr[valid], m_abs[valid], x_arr[valid]
        log_norm = 0.5 * (
            np.log((2.0 * lv + 1.0) / (4.0 * np.pi))
            + sp.gammaln(lv - mv + 1)
            - sp.gammaln(lv + mv + 1)
        )
        values = np.exp(log_norm) * sp.lpmv(mv, lv, xv)
        sign = np.where(m_arr[valid] < 0, (-1.0) ** mv, 1.0)
        result[valid] = np.real_if_close(sign * values, tol=1.0e4)
    return _to_output(result)


__all__ = ["spherical_legendre"]
