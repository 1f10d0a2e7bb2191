"""Stateful front end mirroring the ``init / set_particle / evaluate`` workflow.

:class:`EffectiveSource` holds the background and the current
:class:`~puncture.context.OrbitContext`.  Each :meth:`set_particle` call
replaces the context wholesale, so a context obtained earlier stays valid
and can be handed to another thread or evaluator independently.
"""

from __future__ import annotations

from typing import Optional, Sequence, Union

from loguru import logger

from .context import OrbitContext
from .evaluators import EffectiveSourceEvaluator, FieldDerivatives, LocalExpansionEvaluator
from .modes import (
    FieldFunction,
    ModeAmplitude,
    ModeDerivatives,
    closed_form_mode,
    closed_form_mode_derivatives,
    lm_decompose,
    m_decompose,
)
from .orbits import Coordinate, FourVelocity, KerrBackground

PointLike = Union[Coordinate, Sequence[float]]


def _as_coordinate(point: PointLike) -> Coordinate:
    if isinstance(point, Coordinate):
        return point
    return Coordinate.from_sequence(point)


class EffectiveSource:
    """Singular field and effective source for one background black hole."""

    def __init__(self, mass: float, spin: float = 0.0, *, cutoff: Optional[float] = None) -> None:
        self.background = KerrBackground(mass, spin)
        self.cutoff = cutoff
        self._context: Optional[OrbitContext] = None
        self._local: Optional[LocalExpansionEvaluator] = None
        self._source: Optional[EffectiveSourceEvaluator] = None
        self._modal: Optional[LocalExpansionEvaluator] = None

    @property
    def context(self) -> OrbitContext:
        if self._context is None:
            raise RuntimeError("set_particle must be called before evaluating the field.")
        return self._context

    @property
    def local(self) -> LocalExpansionEvaluator:
        if self._local is None:
            raise RuntimeError("set_particle must be called before evaluating the field.")
        return self._local

    @property
    def source(self) -> EffectiveSourceEvaluator:
        if self._source is None:
            raise RuntimeError("set_particle must be called before evaluating the source.")
        return self._source

    def _install(self, context: OrbitContext) -> OrbitContext:
        self._context = context
        self._local = LocalExpansionEvaluator(context)
        self._source = EffectiveSourceEvaluator(context)
        self._modal = LocalExpansionEvaluator(context.mode_context())
        logger.info(
            f"EffectiveSource.set_particle: {context.orbit_class} | M={self.background.mass:g} "
            f"a={self.background.spin:g} | r_p={context.particle.r:g}"
        )
        return context

    def set_particle(
        self,
        position: PointLike,
        velocity: Optional[Union[FourVelocity, Sequence[float]]] = None,
        *,
        periodic: bool = True,
    ) -> OrbitContext:
        """Place the particle on a circular orbit at ``position``.

        A supplied 4-velocity must have ``u^r = u^theta = 0``.
        """

        if velocity is not None and not isinstance(velocity, FourVelocity):
            velocity = FourVelocity.from_sequence(velocity)
        context = OrbitContext.circular(
            self.background,
            _as_coordinate(position),
            velocity,
            periodic=periodic,
            cutoff=self.cutoff,
        )
        return self._install(context)

    def set_particle_el(
        self,
        position: PointLike,
        energy: float,
        angular_momentum: float,
        radial_velocity: float = 0.0,
    ) -> OrbitContext:
        """Place the particle on an equatorial orbit given ``(e, l, u^r)``."""

        context = OrbitContext.equatorial(
            self.background,
            _as_coordinate(position),
            energy,
            angular_momentum,
            radial_velocity,
            cutoff=self.cutoff,
        )
        return self._install(context)

    def set_particle_velocity(
        self, position: PointLike, velocity: Union[FourVelocity, Sequence[float]]
    ) -> OrbitContext:
        """Place the particle on an equatorial orbit given its full 4-velocity."""

        if not isinstance(velocity, FourVelocity):
            velocity = FourVelocity.from_sequence(velocity)
        context = OrbitContext.equatorial_from_velocity(
            self.background, _as_coordinate(position), velocity, cutoff=self.cutoff
        )
        return self._install(context)

    def singular_field(self, point: PointLike) -> float:
        return self.local.singular_field(_as_coordinate(point))

    def field_and_derivatives(self, point: PointLike) -> FieldDerivatives:
        return self.local.field_and_derivatives(_as_coordinate(point))

    def effective_source(self, point: PointLike) -> float:
        return self.source.effective_source(_as_coordinate(point))

    def mode_amplitude(self, m: int, point: PointLike, *, strict: bool = False) -> ModeAmplitude:
        """Closed-form m-mode of the singular field."""

        return closed_form_mode(self.context, m, _as_coordinate(point), strict=strict)

    def mode_derivatives(self, m: int, point: PointLike, *, strict: bool = False) -> ModeDerivatives:
        """Closed-form m-mode of the singular field, its derivatives and source."""

        return closed_form_mode_derivatives(self.context, m, _as_coordinate(point), strict=strict)

    def modal_field(self, point: PointLike) -> float:
        """Singular field whose m-modes :meth:`mode_amplitude` returns.

        For circular orbits this is the sine-basis expansion of the same
        orbit rather than the periodic-surrogate field of
        :meth:`singular_field`.
        """

        if self._modal is None:
            raise RuntimeError("set_particle must be called before evaluating the field.")
        return self._modal.singular_field(_as_coordinate(point))

    def m_decompose(
        self, m: int, point: PointLike, field: Optional[FieldFunction] = None, **options
    ) -> ModeAmplitude:
        """Quadrature m-mode of ``field``.

        Without ``field`` the :meth:`modal_field` is decomposed; it is
        ``pi``-periodic in ``phi``, so odd ``m`` are exactly zero.
        """

        if field is None:
            field = self.modal_field
            options.setdefault("pi_periodic", True)
        return m_decompose(m, _as_coordinate(point), field, **options)

    def lm_decompose(
        self, l: int, m: int, r: float, field: Optional[FieldFunction] = None, **options
    ) -> ModeAmplitude:
        """Quadrature ``(l, m)`` projection of ``field`` (the :meth:`modal_field` by default)."""

        if field is None:
            field = self.modal_field
        return lm_decompose(l, m, r, field, **options)


__all__ = ["EffectiveSource"]
