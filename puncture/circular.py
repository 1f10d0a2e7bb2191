"""Series coefficients for circular equatorial orbits in Kerr.

The singular field of a particle on a prograde circular geodesic of radius
``r_p`` is expanded as ``A / (24 s2**1.5)`` where both ``A`` and the squared
distance ``s2`` are series in ``(dr, dtheta, dphi)`` truncated at total
order five.  The coefficients depend on ``(M, a, r_p)`` only; the orbital
velocity is fixed by the circular-orbit condition.
"""

from __future__ import annotations

from math import sqrt
from time import perf_counter

from loguru import logger

from .orbits import KerrBackground
from .series import CoefficientTable, Monomial

CIRCULAR_PREFACTOR = 1.0 / 24.0
CIRCULAR_POWER = 1.5


def _numerator_coefficients(M: float, a: float, rp: float) -> dict[Monomial, float]:
    """Coefficients of ``A`` keyed by powers of ``(dr, dtheta, dphi)``."""

    t0 = M**5
    t1 = a**5
    t2 = rp**4
    t3 = M**4
    t4 = a**6
    t5 = a**7
    t6 = M**3
    t7 = M**2
    t8 = 2*rp
    t9 = a**4
    t10 = 5*M
    t11 = rp**5
    t12 = rp**(-2)
    t13 = 3*M
    t14 = a**3
    t15 = rp**3
    t16 = a**2
    t17 = M*rp
    t18 = rp**2
    t19 = 1/rp
    t20 = 2*t6
    t21 = 2*t7
    t22 = -17*t7
    t23 = 8*t15
    t24 = rp**4.5
    t25 = rp**(-2.5)
    t26 = rp**5.5
    t27 = 9*t18
    t28 = M - rp
    t29 = -t18
    t30 = rp**2.5
    t31 = M**2.5
    t32 = -M + rp
    t33 = rp**3.5
    t34 = rp + t13
    t35 = sqrt(rp)
    t36 = M**1.5
    t37 = rp**1.5
    t38 = sqrt(M)
    t39 = rp**(-5.5)
    t40 = -2*M + rp
    t41 = M*t16
    t42 = 2*M*t18
    t43 = t17**2.5
    t44 = t17**1.5
    t45 = t13 + t8
    t46 = sqrt(t17)
    t47 = t16 + rp*t40
    t48 = 2*t30*t38
    t49 = t47**(-2)
    t50 = 1/t47
    t51 = 2*M*t45*t9
    t52 = -3*t17 + t18 + 2*a*t46
    t53 = t52**(-2)
    t54 = t15 + t41 + a*t46*t8
    t55 = 1/t52
    t56 = 1/(rp*t13 + t29 - 2*a*t46)
    return {
        (0, 0, 2): 24*t19*t47*t54*t55,
        (0, 0, 4): 2*(t37 + a*t38)**2*t39*(-(t33*t34) + 2*t14*t36 + 6*a*t18*t36 - 3*t34*t35*t41)*t47*t55,
        (0, 2, 0): 24*t18,
        (0, 2, 2): -12*t12*((rp + t10)*t15*t16 + t11*t32 + 2*a*(-4*M + rp)*t33*t38 + t14*(-8*t31*t35 - 4*t44 + t48) + t51)*t55,
        (0, 4, 0): 2*t56*(3*rp*(-rp + t10)*t16 - 6*t14*t46 + a*(-12*t44 + t48) + t18*(-3*t17 + t18 + 6*t7)),
        (1, 0, 2): -24*t19*t28*t54*t55,
        (1, 0, 4): (t39*(-60*a**9*M**3.5 + 12*a**8*(36*M - 5*rp)*t35*t6 - 3*t37*t4*t7*(-t15 - 4*M*t18 + 72*t6 + 125*rp*t7) + t26*t41*(143*M*t15 - 56*t2 + 306*t3 - 243*rp*t6 - 54*t18*t7) - 6*a*rp**7*t38*(4*M*t15 + 2*t2 + 2*t3 + 59*rp*t6 - 49*t18*t7) - 2*t14*t2*t36*(-181*M*t15 + 70*t2 + 168*t3 + 78*rp*t6 - 39*t18*t7) + rp**8.5*(-7*M*t15 - 2*t2 + 240*t3 - 309*rp*t6 + 114*t18*t7) + 2*t1*t18*t36*(-13*M*t15 - 12*t2 + 738*t3 - 558*rp*t6 + 169*t18*t7) + t31*t5*(227*t17 + t27 - 380*t7)*t8 - M*t30*(894*t0 + 9*t11 + 110*M*t2 - 1518*rp*t3 + 588*t18*t6 - 155*t15*t7)*t9))/t52**3,
        (1, 2, 0): 24*rp,
        (1, 2, 2): -3*t25*t53*(-6*(10*M + 3*rp)*t1*t36 + t37*t41*(33*t15 - 74*M*t18 + 42*t6 - 21*rp*t7) + 2*t24*(2*t15 + M*t29 + 12*t6 - 18*rp*t7) + 2*a*t15*t38*(-10*M*t18 + t23 + 6*t6 + 9*rp*t7) + t14*t36*(t17 + 21*t18 - 60*t7)*t8 + M*t35*(16*t17 - 9*t18 + 151*t7)*t9),
        (1, 4, 0): (t13*t16 + t18*t45 + 4*a*(-3*M + rp)*t46)*t56,
        (2, 0, 0): 24*t18*t50,
        (2, 0, 2): 12*t12*t50*t55*(2*M*t2*t40 - 2*a*(t33*t36 + t43) - 2*t14*(2*t31*t35 - t30*t38 + t44) + t51 + rp*t16*(t15 + t10*t18 - 7*t6 + rp*t7)),
        (2, 2, 0): 12*t16*t50,
        (3, 0, 0): 24*rp*(t16 - t17)*t49,
        (3, 0, 2): -3*t25*t49*t53*(6*(6*M + rp)*t36*t5 + M*t35*t4*(4*t17 + 3*t18 - 89*t7) - 2*a*t2*t36*(t15 + t42 + 24*t6 - 26*rp*t7) + M*t26*(t15 + t42 + 30*t6 - 23*rp*t7) + t16*t30*(-132*t0 + 4*t11 - 11*M*t2 + 236*rp*t3 - 155*t18*t6 + 20*t15*t7) + 2*t14*t18*t38*(-19*M*t15 + 8*t2 - 32*t3 + 8*rp*t6 + 26*t18*t7) + t1*t36*(22*t17 + t27 - 42*t7)*t8 + M*t37*(27*t15 - 26*M*t18 + 306*t6 - 197*rp*t7)*t9),
        (3, 2, 0): 3*t49*t55*(rp*t16*(17*t17 - 4*t18 + t22) + M*t18*(t17 + t21 + t29) + 8*t14*t28*t46 + 2*M*t9),
        (4, 0, 0): (6*t55*(-4*t16*t18*(-4*t17 + t18 + t21) - 8*t14*t30*t38 + 2*a*(2*t33*t36 + t43) + 2*t1*t46 + M*t15*(-13*t17 + 4*t18 + 5*t7) + rp*t32*t9))/t47**3,
        (5, 0, 0): (3*t55*(t13*t4 + 4*a*(-(t24*t36) + M*t43 - 2*rp*t43) + 4*t14*(4*t33*t38 + M*t44 - rp*t44) + 4*(M - 3*rp)*t1*t46 - M*t15*(6*t15 - 19*M*t18 + t20 + 6*rp*t7) + t16*t18*(-31*M*t18 + t20 + t23 + 14*rp*t7) + rp*(22*t17 - 6*t18 + t22)*t9))/t47**4,
    }


def _distance_coefficients(M: float, a: float, rp: float) -> dict[Monomial, float]:
    """Coefficients of the squared distance ``s2``."""

    t0 = -6*rp
    t1 = rp**(-3)
    t2 = 5*M
    t3 = a**5
    t4 = 19*M
    t5 = a**6
    t6 = M**3
    t7 = 9*rp
    t8 = 11*M
    t9 = rp**(-2)
    t10 = 3*rp
    t11 = a**3
    t12 = M**2
    t13 = rp**4
    t14 = 2*M
    t15 = a**4
    t16 = -2*M
    t17 = rp**3
    t18 = a**2
    t19 = M*rp
    t20 = rp**2
    t21 = 1/rp
    t22 = rp**1.5
    t23 = M**1.5
    t24 = 12*t12
    t25 = rp**4.5
    t26 = 3*t18
    t27 = sqrt(rp)
    t28 = M**2.5
    t29 = 3*t17
    t30 = 3*t20
    t31 = rp**2.5
    t32 = rp**3.5
    t33 = sqrt(M)
    t34 = 2*t12
    t35 = M*t18
    t36 = t19**1.5
    t37 = -rp + t14
    t38 = sqrt(t19)
    t39 = 5*t36
    t40 = rp*(rp + t16) + t18
    t41 = -3*t31*t33
    t42 = 8*t27*t28
    t43 = t40**(-2)
    t44 = 1/t40
    t45 = t17 + t35 + 2*a*rp*t38
    t46 = 1/(-3*t19 + t20 + 2*a*t38)
    return {
        (0, 0, 2): t21*t40*t45*t46,
        (0, 0, 4): ((M*t15 - rp*t18*(-t19 + t20 + t34) + t13*t37)*((M + rp)*t13 + (-5*M + t10)*t18*t19 + a*(2*t32*t33 - 4*rp*t36) + t11*t14*t38)*t46)/(12.*rp**6),
        (0, 2, 0): t20,
        (0, 2, 2): -(t46*(2*a*t31*t33*(-11*t19 + t30 + t34) + t13*(-5*t19 + t30 + t34) - 2*t11*(t39 + t41 + t42) + rp*t18*(-3*rp*t12 + 10*M*t20 + t29 + 2*t6) + M*t15*(t7 + t8))*t9)/6.,
        (0, 4, 0): (t26 + rp*t37)/12.,
        (1, 0, 2): (-M + rp)*t21*t45*t46,
        (1, 0, 4): (t46*(-(rp**7.5*(-9*t12 + 4*t19 + t20)) - 2*t11*t17*(6*t12 + rp*t16 + t20)*t23 - 6*a**7*t28 + 2*rp*(2*rp + t2)*t28*t3 + (rp*t2 - 9*t20 + t24)*t25*t35 + 2*a*rp**7*t33*t37 + t12*t27*(-3*rp + t4)*t5 - M*t15*t22*(-17*rp*t12 + 9*M*t20 + t29 + 33*t6)))/(12.*rp**6.5),
        (1, 2, 0): rp,
        (1, 2, 2): (t1*t46*(t18*t19*(M*t10 - 17*t20 + t24) - 2*t13*(-3*t12 + rp*t14 + t30) - 2*t11*(16*t27*t28 + t39) + M*t15*(29*M + t7) + 2*a*t32*t33*(t0 + t8)))/12.,
        (1, 4, 0): (M - rp)/12.,
        (2, 0, 0): t20*t44,
        (2, 0, 2): (t44*t46*(M*(-11*M + 5*rp)*t13 - 2*a*(5*t19**2.5 + t23*t32) - 2*t11*(4*t27*t28 + t36 + t41) + M*t15*(13*M + t7) + rp*t18*(t10*t12 + t29 - 17*t6 + t20*t8))*t9)/6.,
        (2, 2, 0): ((-t19 + t26)*t44)/6.,
        (3, 0, 0): rp*(t18 - t19)*t43,
        (3, 0, 2): (t1*t43*t46*(t15*t19*(70*t12 - 27*t19 - 11*t20) + M*rp**5*(8*t12 - 5*t19 + t20) + a*(-20*t19**3.5 + 20*t25*t28 + 2*t13*t36) + 2*t3*(t36 + t42) - M*(t10 + t4)*t5 - 4*t11*t22*t33*(t0*t12 - 4*M*t20 + t29 + 12*t6) + t18*t20*(-46*M**4 - 6*t13 + t17*t2 - 25*t12*t20 + 58*rp*t6)))/12.,
        (3, 2, 0): ((t18*(t0 + t2) + M*t20)*t43)/12.,
        (4, 0, 0): (3*t15 + 2*rp*(M + t0)*t18 - M*(M - 8*rp)*t20)/(12.*t40**3),
        (5, 0, 0): ((4*M - 9*rp)*t15 - M*t20*(t12 + rp*t16 + 6*t20) + rp*t18*(3*t12 - 5*t19 + 12*t20))/(12.*t40**4),
    }


def circular_table(
    background: KerrBackground, radius: float, *, periodic: bool = True
) -> CoefficientTable:
    """Return the coefficient table for a circular orbit at ``radius``.

    With ``periodic`` the powers of ``dphi`` are replaced by bounded
    trigonometric surrogates so the field may be evaluated at any azimuth.
    """

    t_start = perf_counter()
    M, a = background.mass, background.spin
    table = CoefficientTable(
        numerator=_numerator_coefficients(M, a, radius),
        denominator=_distance_coefficients(M, a, radius),
        prefactor=CIRCULAR_PREFACTOR,
        power=CIRCULAR_POWER,
        phi_basis="periodic" if periodic else "power",
    )
    dt = perf_counter() - t_start
    logger.debug(
        f"circular_table: M={M:.6g} a={a:.6g} r_p={radius:.6g} | "
        f"periodic={periodic} | terms={len(table.numerator)}+{len(table.denominator)} | {dt*1e3:.2f} ms"
    )
    return table


__all__ = ["CIRCULAR_PREFACTOR", "CIRCULAR_POWER", "circular_table"]
