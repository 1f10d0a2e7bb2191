"""Evaluators for the singular field, its derivatives and the effective source."""

from __future__ import annotations

from dataclasses import dataclass
from time import perf_counter
from typing import List, Optional, Sequence

import numpy as np
from loguru import logger

from .context import OrbitContext
from .operators import corotating_time_derivatives, wave_operator
from .orbits import Coordinate


@dataclass
class FieldDerivatives:
    """Singular field, its partial derivatives and ``Box phis`` at one point."""

    phis: float
    dphis_dr: float
    dphis_dtheta: float
    dphis_dphi: float
    dphis_dt: Optional[float]
    box_phis: Optional[float]
    d2phis_dr2: float = 0.0
    d2phis_dtheta2: float = 0.0
    d2phis_dphi2: float = 0.0
    d2phis_dt2: Optional[float] = 0.0
    d2phis_dtdphi: Optional[float] = 0.0

    @classmethod
    def zero(cls, stationary: bool = True) -> "FieldDerivatives":
        if stationary:
            return cls(0.0, 0.0, 0.0, 0.0, 0.0, 0.0)
        return cls(0.0, 0.0, 0.0, 0.0, None, None, d2phis_dt2=None, d2phis_dtdphi=None)

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


class BaseEvaluator:
    """Shared plumbing for evaluators bound to one :class:`OrbitContext`."""

    method_name: str = "base"

    def __init__(self, context: OrbitContext) -> None:
        self.context = context

    def evaluate(self, point: Coordinate) -> float:
        """Return the scalar produced by this evaluator at ``point``."""

        raise NotImplementedError

    def evaluate_many(self, points: Sequence[Coordinate]) -> List[float]:
        return [self.evaluate(point) for point in points]

    def evaluate_from_arrays(
        self,
        r: Sequence[float],
        theta: Sequence[float],
        phi: Sequence[float],
        t: Optional[Sequence[float]] = None,
    ) -> np.ndarray:
        """Evaluate on broadcast coordinate arrays and return an array of values."""

        r_b, th_b, ph_b = np.broadcast_arrays(
            np.asarray(r, dtype=float), np.asarray(theta, dtype=float), np.asarray(phi, dtype=float)
        )
        t_b = np.zeros_like(r_b) if t is None else np.broadcast_to(np.asarray(t, dtype=float), r_b.shape)
        t0 = perf_counter()
        out = np.empty(r_b.shape, dtype=float)
        for idx in np.ndindex(r_b.shape):
            out[idx] = self.evaluate(Coordinate(r_b[idx], th_b[idx], ph_b[idx], t_b[idx]))
        dt = perf_counter() - t0
        logger.debug(
            f"{type(self).__name__}.evaluate_from_arrays: points={out.size} | {dt*1e3:.2f} ms"
        )
        return out

    def __call__(self, point: Coordinate) -> float:
        return self.evaluate(point)


class LocalExpansionEvaluator(BaseEvaluator):
    """Evaluate the local expansion of the singular field."""

    method_name = "singular_field"

    def singular_field(self, point: Coordinate) -> float:
        """Return ``phis`` at ``point``; exactly zero inside the cutoff."""

        ctx = self.context
        if ctx.within_cutoff(point):
            return 0.0
        dr, dtheta, dphi = ctx.offset(point)
        return float(ctx.table.value(dr, dtheta, dphi))

    def evaluate(self, point: Coordinate) -> float:
        return self.singular_field(point)

    def field_and_derivatives(self, point: Coordinate) -> FieldDerivatives:
        """Return the field, its derivatives and ``Box phis`` at ``point``.

        Time derivatives follow from stationarity in the co-rotating frame.
        For a non-stationary equatorial snapshot the spatial derivatives are
        still returned while ``dphis_dt``, ``box_phis`` and the second time
        derivatives are ``None``.
        """

        ctx = self.context
        if ctx.within_cutoff(point):
            return FieldDerivatives.zero(ctx.stationary)

        dr, dtheta, dphi = ctx.offset(point)
        jet = ctx.table.jet(dr, dtheta, dphi)
        if not ctx.stationary:
            return FieldDerivatives(
                phis=jet.value,
                dphis_dr=jet.d_r,
                dphis_dtheta=jet.d_theta,
                dphis_dphi=jet.d_phi,
                dphis_dt=None,
                box_phis=None,
                d2phis_dr2=jet.d_rr,
                d2phis_dtheta2=jet.d_thetatheta,
                d2phis_dphi2=jet.d_phiphi,
                d2phis_dt2=None,
                d2phis_dtdphi=None,
            )

        time = corotating_time_derivatives(ctx.frequency, jet.d_phi, jet.d_phiphi)
        box = wave_operator(
            ctx.background,
            point.r,
            point.theta,
            d_r=jet.d_r,
            d_theta=jet.d_theta,
            d_rr=jet.d_rr,
            d_thetatheta=jet.d_thetatheta,
            d_phiphi=jet.d_phiphi,
            d_tt=time.d_tt,
            d_tphi=time.d_tphi,
        )
        return FieldDerivatives(
            phis=jet.value,
            dphis_dr=jet.d_r,
            dphis_dtheta=jet.d_theta,
            dphis_dphi=jet.d_phi,
            dphis_dt=time.d_t,
            box_phis=float(box),
            d2phis_dr2=jet.d_rr,
            d2phis_dtheta2=jet.d_thetatheta,
            d2phis_dphi2=jet.d_phiphi,
            d2phis_dt2=time.d_tt,
            d2phis_dtdphi=time.d_tphi,
        )


class EffectiveSourceEvaluator(BaseEvaluator):
    """Evaluate the effective source ``Box phis``."""

    method_name = "effective_source"

    def __init__(self, context: OrbitContext) -> None:
        super().__init__(context)
        self._local = LocalExpansionEvaluator(context)

    def effective_source(self, point: Coordinate) -> float:
        """Return ``Box phis`` at ``point``.

        A non-stationary snapshot raises
        :class:`~puncture.errors.DerivativesUnsupportedError`.
        """

        self.context.require_frequency()
        return self._local.field_and_derivatives(point).box_phis

    def evaluate(self, point: Coordinate) -> float:
        return self.effective_source(point)


__all__ = [
    "FieldDerivatives",
    "BaseEvaluator",
    "LocalExpansionEvaluator",
    "EffectiveSourceEvaluator",
]
