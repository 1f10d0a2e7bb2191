"""Series coefficients for equatorial orbits in Kerr.

For an equatorial snapshot with specific energy ``e`` and angular momentum
``l`` the singular field takes the form::

    phis = A(dr, dtheta, sin(dphi)) / rho2 ** 3.5
    rho2 = alpha20 dr^2 + alpha02 dtheta^2 + beta sin^2(dphi)

``A`` is a polynomial whose coefficients ``A_ijk`` multiply
``dr^i dtheta^j sin(dphi)^k`` with ``k`` even.  The coefficients depend on
``(e, l)`` but not on the radial velocity.  The quadratic form ``rho2`` is
exactly the structure the closed-form m-mode decomposition relies on.
"""

from __future__ import annotations

from time import perf_counter

from loguru import logger

from .orbits import EquatorialOrbit, KerrBackground
from .series import CoefficientTable, EllipticShape, Monomial

EQUATORIAL_PREFACTOR = 1.0
EQUATORIAL_POWER = 3.5


def _numerator_coefficients(
    M: float, a: float, rp: float, e: float, l: float
) -> dict[Monomial, float]:
    """Coefficients ``A_ijk`` of the numerator polynomial."""

    return {
        (0, 0, 6): (l**2 + rp**2 + (a**2*(2*M + rp))/rp)**3,
        (0, 0, 8): -((a**2*(2*M + rp)
            + rp*(l**2 + rp**2))**2*(-(a**8*M**2) + 4*a**7*e*l*M**2 +
            4*a*e*l*M*(2*M - 3*rp)*rp**6 - 4*a**3*e*l*M*rp**3*(22*M**2 + 3*M*rp +
            4*rp**2) - 4*a**5*e*l*M*(16*M**3 + 18*M**2*rp + rp**3) +
            2*a**6*M*(-2*l**2*M + 2*e**2*(2*M + rp)**3 + rp*(2*M**2 - M*rp +
            rp**2)) + rp**6*(8*l**2*M*(-2*M + rp) + rp**2*(-4*M**2 + 4*(-1 +
            e**2)*M*rp + 3*rp**2)) + 2*a**2*rp**3*(4*l**2*M*(4*M**2 - 3*M*rp +
            2*rp**2) + rp**2*(4*M**3 + 12*(-1 + e**2)*M**2*rp + 3*(1 +
            2*e**2)*M*rp**2 + 3*rp**3)) + a**4*(4*l**2*M*(8*M**3 +
            6*M**2*rp - 3*M*rp**2 + 2*rp**3) + rp**2*(-4*M**4 + 3*(-3 +
            16*e**2)*M**2*rp**2 + 12*(1 + e**2)*M*rp**3 + 3*rp**4 +
            4*M**3*(rp + 12*e**2*rp)))))/(24.*rp**8*(a**2 + rp*(-2*M + rp))),
        (0, 2, 4): 3*(a**2*(2*M + rp) + rp*(l**2 + rp**2))**2,
        (0, 2, 6): -((a**2*(2*M + rp) +
            rp*(l**2 + rp**2))*(-2*a**7*e*l*M*(24*M**2 + 16*M*rp + 3*rp**2) +
            2*a*e*l*M*rp**5*(l**2*(10*M - 9*rp) + (14*M - 15*rp)*rp**2) -
            2*a**5*e*l*M*rp*(16*M**3 + 56*M**2*rp + 50*M*rp**2 + 17*rp**3 +
            3*l**2*(4*M + rp)) + a**8*M*(6*e**2*(2*M + rp)**2 - rp*(7*M + 3*rp)) +
            rp**5*(4*M*rp**4*(-2*M + rp + 2*e**2*rp) + l**2*rp**2*(-36*M**2 +
            4*(9 + e**2)*M*rp - 9*rp**2) - 2*l**4*(8*M**2 - 10*M*rp + 3*rp**2)) +
            2*a**3*e*l*M*rp**2*(2*l**2*(4*M**2 - 7*M*rp - 6*rp**2) -
            rp**2*(16*M**2 + 28*M*rp + 29*rp**2)) +
            a**2*rp**2*(l**2*rp**2*(-4*M**3 + 4*(6 + e**2)*M**2*rp + (33 +
            14*e**2)*M*rp**2 - 18*rp**3) + l**4*(-8*M**3 + 12*M**2*rp +
            8*M*rp**2 - 6*rp**3) + rp**4*(4*M**3 + 36*e**2*M**2*rp + 3*(3 +
            10*e**2)*M*rp**2 - 3*rp**3)) + a**4*rp*(12*l**4*M**2 +
            l**2*(16*M**4 - 8*(-5 + e**2)*M**3*rp + 16*(2 +
            e**2)*M**2*rp**2 + 2*(-3 + 8*e**2)*M*rp**3 - 9*rp**4) +
            rp**2*(4*M**4 + 16*(2 + 3*e**2)*M**3*rp + 3*(3 +
            32*e**2)*M**2*rp**2 + 3*(-3 + 14*e**2)*M*rp**3 - 6*rp**4)) +
            a**6*(l**2*M*(24*M**2 + 4*(2 + 3*e**2)*M*rp + 3*(-1 +
            2*e**2)*rp**2) + rp*(-(rp*(-12*M**3 + 18*M**2*rp + 17*M*rp**2 +
            3*rp**3)) + 2*e**2*M*(8*M**3 + 36*M**2*rp + 42*M*rp**2 +
            13*rp**3)))))/(12.*rp**6*(a**2 + rp*(-2*M + rp))),
        (0, 4, 2): 3*rp**3*(a**2*(2*M + rp) + rp*(l**2 + rp**2)),
        (0, 4, 4): -(-4*a**7*e*l*M*(72*M**2 + 59*M*rp + 12*rp**2) +
            4*a*e*l*M*rp**3*(l**4*(8*M - 6*rp) + 6*l**2*(6*M - 5*rp)*rp**2 + 3*(10*M
            - 9*rp)*rp**4) + a**8*(-13*M**2*rp + 3*rp**3 + 36*e**2*M*(2*M +
            rp)**2) - 4*a**5*e*l*M*rp*(-48*M**3 + 50*M**2*rp + 140*M*rp**2 +
            49*rp**3 + 6*l**2*(8*M + 3*rp)) + rp**3*(8*l**6*M*(-2*M + rp) +
            l**4*rp**2*(-100*M**2 + 4*(25 + e**2)*M*rp - 25*rp**2) +
            2*rp**6*(-12*M**2 + 4*(4 + 3*e**2)*M*rp - 5*rp**2) -
            2*l**2*rp**4*(60*M**2 - 4*(17 + 3*e**2)*M*rp + 19*rp**2)) -
            4*a**3*e*l*M*rp**2*(6*l**4 + l**2*(-48*M**2 + 36*M*rp +
            48*rp**2) + rp**2*(-66*M**2 + 55*M*rp + 64*rp**2)) +
            2*a**2*rp**2*(6*l**6*M + l**2*rp**2*(-96*M**3 + 88*M**2*rp +
            6*(9 + 8*e**2)*M*rp**2 - 35*rp**3) + rp**4*(-12*M**3 + 4*(10 +
            9*e**2)*M**2*rp + 9*(1 + 6*e**2)*M*rp**2 - 15*rp**3) +
            l**4*(-48*M**3 - 8*(-3 + e**2)*M**2*rp + 2*(17 + 4*e**2)*M*rp**2
            - 11*rp**3)) + a**4*rp*(3*l**4*(32*M**2 + 4*(2 + e**2)*M*rp +
            rp**2) + rp**2*(12*M**4 + 116*M**3*rp + (55 +
            288*e**2)*M**2*rp**2 + 36*(-2 + 5*e**2)*M*rp**3 - 27*rp**4) -
            2*l**2*(48*M**4 + 4*(-7 + 12*e**2)*M**3*rp - 2*(53 +
            24*e**2)*M**2*rp**2 + 4*(2 - 15*e**2)*M*rp**3 + 13*rp**4)) +
            2*a**6*(l**2*(72*M**3 + 2*(23 + 24*e**2)*M**2*rp + 6*(1 +
            4*e**2)*M*rp**2 + 3*rp**3) + rp*(-(rp*(-10*M**3 + 37*M**2*rp +
            29*M*rp**2 + 2*rp**3)) + 6*e**2*M*(-8*M**3 + 12*M**2*rp +
            30*M*rp**2 + 11*rp**3))))/(24.*rp**3*(a**2 + rp*(-2*M + rp))),
        (0, 6, 0): rp**6,
        (0, 6, 2): (6*a**5*e*l*M*(12*M + 5*rp) + 4*a**3*e*l*M*rp*(6*l**2 -
            20*M**2 + 11*M*rp + 18*rp**2) - 3*a**6*(rp*(M + rp) + 6*e**2*M*(2*M + rp))
            + 2*a*e*l*M*rp**2*(-4*l**2*(4*M - 3*rp) + rp**2*(-26*M + 21*rp)) +
            rp**2*(8*l**4*M*(2*M - rp) + 4*rp**4*(2*M**2 - (3 + 2*e**2)*M*rp +
            rp**2) + l**2*rp**2*(36*M**2 - 4*(8 + e**2)*M*rp + 7*rp**2)) +
            a**2*rp*(-12*l**4*M + 4*l**2*(10*M**3 + (-3 + 4*e**2)*M**2*rp -
            2*(3 + 2*e**2)*M*rp**2 + rp**3) + rp**2*(4*M**3 + 4*(-4 +
            e**2)*M**2*rp + (1 - 34*e**2)*M*rp**2 + 5*rp**3)) -
            a**4*(3*l**2*(12*M**2 + 4*(1 + e**2)*M*rp + rp**2) +
            2*rp*(rp*(-2*M**2 - 5*M*rp + rp**2) + 2*e**2*M*(-10*M**2 + 8*M*rp +
            11*rp**2))))/(12.*(a**2 + rp*(-2*M + rp))),
        (0, 8, 0): (rp**3*(rp*(-3*a**2 +
            rp*(-2*M + rp)) + (4*M*(-3*a**4*e**2 + 6*a**3*e*l + 2*a*e*l*rp*(-4*M +
            3*rp) + a**2*(-3*l**2 + 4*e**2*(M - rp)*rp) - rp*(e**2*rp**3 +
            l**2*(-4*M + 2*rp))))/(a**2 + rp*(-2*M + rp))))/24.,
        (1, 0, 6): -((l**2 +
            rp**2 + (a**2*(2*M + rp))/rp)**2*(-(a**2*M) + rp**3 + (2*l*(a**3*e*M -
            a**2*l*M + 3*a*e*M*rp**2 + l*rp**2*(-2*M + rp)))/(a**2 + rp*(-2*M +
            rp))))/(2.*rp**2),
        (1, 0, 8): ((a**2*(2*M + rp) + rp*(l**2 +
            rp**2))*(-2*a**11*e*l*M**2*(80*M**2 + 73*M*rp + 12*rp**2) -
            2*a**9*e*l*M*rp*(32*(-1 + 6*e**2)*M**4 + 12*(23 + 24*e**2)*M**3*rp +
            (353 + 144*e**2)*M**2*rp**2 + 2*(11 + 12*e**2)*M*rp**3 - 12*rp**4
            + 4*l**2*M*(16*M + 3*rp)) - 2*a*e*l*M*rp**5*(rp**6*(-68*M**2 + 100*M*rp -
            33*rp**2) + 6*l**4*rp**2*(20*M**2 + 4*e**2*M*rp - 5*rp**2) +
            2*l**2*rp**4*(68*M**2 + 2*(-14 + 15*e**2)*M*rp - 3*rp**2) +
            12*l**6*(4*M**2 - rp**2)) + a**12*M**2*(-3*rp*(3*M + 2*rp) +
            8*e**2*(10*M**2 + 11*M*rp + 3*rp**2)) -
            2*a**3*e*l*M*rp**3*(12*l**6*(12*M**2 - 2*M*rp - rp**2) +
            rp**5*(-768*M**3 + 360*M**2*rp + 6*(29 + 4*e**2)*M*rp**2 -
            97*rp**3) + 12*l**4*rp*(20*M**3 + 4*(10 + e**2)*M**2*rp + 2*(-5 +
            2*e**2)*M*rp**2 - 5*rp**3) - 2*l**2*rp**3*(340*M**3 - 6*(61 +
            20*e**2)*M**2*rp + 10*(8 - 9*e**2)*M*rp**2 + 29*rp**3)) -
            2*a**5*e*l*M*rp**2*(6*l**4*(2*M + rp)*(60*M**2 + 2*(-5 +
            2*e**2)*M*rp - 5*rp**2) + rp**3*(-420*M**4 - 876*M**3*rp + (919 +
            144*e**2)*M**2*rp**2 + 6*(17 + 12*e**2)*M*rp**3 - 107*rp**4) +
            2*l**2*rp*(-304*M**4 + 4*(13 + 30*e**2)*M**3*rp + 24*(17 +
            10*e**2)*M**2*rp**2 + 18*(-7 + 5*e**2)*M*rp**3 - 41*rp**4)) +
            a**2*rp**3*(48*l**8*M**2*(2*M - rp) + 24*l**6*M*rp**2*(2*(5 +
            4*e**2)*M**2 + (-5 + 4*e**2)*M*rp - 2*e**2*rp**2) -
            4*l**4*M*rp**3*(116*M**3 - 18*(9 + 10*e**2)*M**2*rp + 4*(17 -
            15*e**2)*M*rp**2 + (-8 + 45*e**2)*rp**3) +
            8*l**2*rp**5*(-94*M**4 + (103 + 33*e**2)*M**3*rp + (-28 +
            11*e**2)*M**2*rp**2 - 6*(1 + 3*e**2)*M*rp**3 + 3*rp**4) +
            rp**7*(-120*M**4 - 4*(-47 + 50*e**2)*M**3*rp + 2*(-51 +
            86*e**2)*M**2*rp**2 + (1 - 46*e**2)*M*rp**3 + 9*rp**4)) -
            2*a**7*e*l*M*rp*(2*l**2*(288*M**4 + 8*(29 + 15*e**2)*M**3*rp + 2*(71
            + 60*e**2)*M**2*rp**2 + 2*(-26 + 15*e**2)*M*rp**3 - 15*rp**4) +
            rp*(-256*M**5 - 556*M**4*rp + 8*(-7 + 36*e**2)*M**3*rp**2 + (827 +
            288*e**2)*M**2*rp**3 + 2*(19 + 36*e**2)*M*rp**4 - 55*rp**5)) +
            a**4*rp**2*(24*l**6*M*(20*M**3 + 12*e**2*M**2*rp + (-5 +
            2*e**2)*M*rp**2 - e**2*rp**3) - 4*l**4*M*rp*(152*M**4 - 4*(11 +
            60*e**2)*M**3*rp - 30*(5 + 14*e**2)*M**2*rp**2 - 30*(-3 +
            e**2)*M*rp**3 + (-4 + 45*e**2)*rp**4) +
            2*l**2*rp**3*(-148*M**5 - 8*(50 + 57*e**2)*M**4*rp + (639 +
            452*e**2)*M**3*rp**2 + (-221 + 12*e**2)*M**2*rp**3 -
            114*e**2*M*rp**4 + 6*rp**5) + rp**5*(48*M**5 - 4*(37 +
            168*e**2)*M**4*rp - 4*(-71 + 42*e**2)*M**3*rp**2 + (-205 +
            448*e**2)*M**2*rp**3 + 3*(13 - 28*e**2)*M*rp**4 + 9*rp**5)) +
            a**6*rp*(4*l**4*M*(96*M**4 + 4*(11 + 90*e**2)*M**3*rp + 16*(2 +
            15*e**2)*M**2*rp**2 - 38*M*rp**3 - 15*e**2*rp**4) -
            2*l**2*M*rp*(128*M**5 + 4*(47 + 76*e**2)*M**4*rp - 4*(-3 +
            76*e**2)*M**3*rp**2 - (415 + 716*e**2)*M**2*rp**3 + (149 -
            8*e**2)*M*rp**4 + 4*(-1 + 20*e**2)*rp**5) + rp**3*(56*M**6 - 4*(9
            + 128*e**2)*M**5*rp - 2*(41 + 520*e**2)*M**4*rp**2 + (181 +
            464*e**2)*M**3*rp**3 + (-163 + 568*e**2)*M**2*rp**4 + (49 -
            76*e**2)*M*rp**5 + 3*rp**6)) + (2*M -
            rp)*rp**8*(2*e**2*M*(12*l**6 + 30*l**4*rp**2 + 17*l**2*rp**4
            + 5*rp**6) + (2*M - rp)*rp*(16*l**4*M + rp**4*(4*M + 3*rp) +
            2*l**2*rp**2*(M + 6*rp))) + a**10*M*(2*l**2*M*(40*M**2 + (29 +
            32*e**2)*M*rp + 3*(-1 + 4*e**2)*rp**2) + rp*(rp*(50*M**3 + 11*M**2*rp
            - 19*M*rp**2 + 6*rp**3) + e**2*(-32*M**4 + 336*M**3*rp +
            504*M**2*rp**2 + 156*M*rp**3 - 6*rp**4))) +
            a**8*M*rp*(64*l**4*M**2 + 2*l**2*(16*(-1 + 36*e**2)*M**4 + 4*(27
            + 166*e**2)*M**3*rp + (141 + 364*e**2)*M**2*rp**2 + 3*(-13 +
            6*e**2)*M*rp**3 + 3*(1 - 7*e**2)*rp**4) + rp*(rp*(-92*M**4 +
            20*M**3*rp + 65*M**2*rp**2 - 69*M*rp**3 + 25*rp**4) -
            2*e**2*(128*M**5 + 368*M**4*rp + 120*M**3*rp**2 -
            424*M**2*rp**3 - 202*M*rp**4 + 17*rp**5)))))/(48.*rp**10*(a**2 +
            rp*(-2*M + rp))**2),
        (1, 2, 4): -((a**2*(2*M + rp) + rp*(l**2 +
            rp**2))*(4*a**3*e*l*M + a**4*rp + 12*a*e*l*M*rp**2 - (2*M -
            rp)*rp**2*(5*l**2 + 3*rp**2) + a**2*(-2*(M - 2*rp)*rp**2 +
            l**2*(-4*M + rp))))/(2.*rp*(a**2 + rp*(-2*M + rp))),
        (1, 2, 6): (2*a**11*e*l*M**2*(16*(-16 + 9*e**2)*M**2 + (-293 + 144*e**2)*M*rp +
            6*(-13 + 6*e**2)*rp**2) - 2*a*e*l*M*rp**5*(rp**6*(-236*M**2 +
            232*M*rp - 57*rp**2) + 2*l**4*rp**2*(328*M**2 + 2*(-79 + 21*e**2)*M*rp
            - 3*rp**2) + 42*l**6*(4*M**2 - rp**2) + 24*l**2*rp**4*(16*M**2
            + 5*(-2 + e**2)*M*rp + rp**2)) + (2*M - rp)*rp**7*(8*M*rp**6*(4*M + (-2 +
            5*e**2)*rp) + l**2*rp**4*(20*M**2 + 4*(-4 + 33*e**2)*M*rp +
            3*rp**2) + 4*l**6*(16*M**2 + (-20 + 21*e**2)*M*rp + 6*rp**2) +
            4*l**4*rp**2*(22*M**2 + (-29 + 47*e**2)*M*rp + 9*rp**2)) -
            2*a**3*e*l*M*rp**3*(42*l**6*(12*M**2 - 2*M*rp - rp**2) +
            rp**5*(-2208*M**3 + 4*(155 + 54*e**2)*M**2*rp + 4*(154 -
            9*e**2)*M*rp**2 - 185*rp**3) + 4*l**4*rp*(256*M**3 + 2*(127 +
            21*e**2)*M**2*rp + 6*(-24 + 7*e**2)*M*rp**2 - 21*rp**3) +
            2*l**2*rp**3*(-204*M**3 + 4*(92 + 87*e**2)*M**2*rp + (-173 +
            150*e**2)*M*rp**2 - 16*rp**3)) + a**12*M*(-3*rp*(21*M**2 + 23*M*rp +
            6*rp**2) + 2*e**2*(128*M**3 + 172*M**2*rp + 72*M*rp**2 + 9*rp**3))
            + 2*a**9*e*l*M*(2*l**2*M*(216*M**2 + 4*(2 + 9*e**2)*M*rp + 3*(-17 +
            6*e**2)*rp**2) + rp*(-288*(1 + 3*e**2)*M**4 - 4*(275 +
            144*e**2)*M**3*rp + 3*(-403 + 72*e**2)*M**2*rp**2 + 6*(-43 +
            24*e**2)*M*rp**3 + 36*rp**4)) + a**2*rp**3*(168*l**8*M**2*(2*M
            - rp) + l**2*rp**5*(-2112*M**4 + 8*(223 + 162*e**2)*M**3*rp + 4*(-91 +
            4*e**2)*M**2*rp**2 + 2*(15 - 232*e**2)*M*rp**3 - 15*rp**4) +
            2*l**6*rp*(56*M**4 + 12*(23 + 28*e**2)*M**3*rp + 14*(-13 +
            12*e**2)*M**2*rp**2 + 3*(13 - 28*e**2)*M*rp**3 - 12*rp**4) +
            rp**7*(-264*M**4 + (444 - 512*e**2)*M**3*rp + 2*(-149 +
            246*e**2)*M**2*rp**2 + (65 - 158*e**2)*M*rp**3 + 3*rp**4) -
            2*l**4*rp**3*(592*M**4 - 4*(139 + 329*e**2)*M**3*rp + 4*(47 -
            11*e**2)*M**2*rp**2 + (-101 + 265*e**2)*M*rp**3 + 36*rp**4)) -
            2*a**5*e*l*M*rp**2*(2*l**4*(1224*M**3 + 28*(-1 + 3*e**2)*M**2*rp
            + 2*(-95 + 21*e**2)*M*rp**2 - 39*rp**3) + rp**3*(-3300*M**4 + 4*(-517 +
            216*e**2)*M**3*rp + (2423 + 504*e**2)*M**2*rp**2 + 6*(121 -
            24*e**2)*M*rp**3 - 235*rp**4) - 2*l**2*rp*(96*M**4 - 4*(169 +
            114*e**2)*M**3*rp - 36*(4 + 17*e**2)*M**2*rp**2 + (131 -
            102*e**2)*M*rp**3 + 64*rp**4)) - 2*a**7*e*l*M*rp*(-24*l**4*M*(9*M -
            rp) + 2*l**2*(1296*M**4 + 8*(35 + 51*e**2)*M**3*rp + 4*(-52 +
            57*e**2)*M**2*rp**2 - (19 + 6*e**2)*M*rp**3 - 36*rp**4) +
            rp*(-1600*M**5 + 4*(-515 + 216*e**2)*M**4*rp + 72*(13 +
            22*e**2)*M**3*rp**2 + 3*(857 + 72*e**2)*M**2*rp**3 + 18*(29 -
            12*e**2)*M*rp**4 - 143*rp**5)) +
            a**4*rp**2*(4*l**6*M*(408*M**3 + 4*(-32 + 63*e**2)*M**2*rp +
            2*(-26 + 21*e**2)*M*rp**2 - (5 + 21*e**2)*rp**3) +
            rp**5*(-384*M**5 - 24*(-9 + 106*e**2)*M**4*rp + 12*(35 -
            22*e**2)*M**3*rp**2 + 2*(-213 + 608*e**2)*M**2*rp**3 + (103 -
            214*e**2)*M*rp**4 + 9*rp**5) - 2*l**4*rp*(528*M**5 - 40*(12 +
            47*e**2)*M**4*rp - 4*(60 + 491*e**2)*M**3*rp**2 + 6*(12 +
            65*e**2)*M**2*rp**3 + (35 + 239*e**2)*M*rp**4 + 18*rp**5) -
            l**2*rp**3*(3096*M**5 + 12*(55 - 192*e**2)*M**4*rp - 2*(1355 +
            788*e**2)*M**3*rp**2 + (407 + 1116*e**2)*M**2*rp**3 + 12*(9 +
            47*e**2)*M*rp**4 + 21*rp**5)) - a**6*rp*(6*l**6*M*(24*M**2 -
            10*M*rp + 3*rp**2) - 2*l**4*M*(864*M**4 + 8*(-1 + 306*e**2)*M**3*rp +
            4*(-29 + 164*e**2)*M**2*rp**2 - 32*(-2 + 9*e**2)*M*rp**3 - (69 +
            59*e**2)*rp**4) - rp**3*(152*M**6 - 4*(23 + 800*e**2)*M**5*rp +
            2*(31 - 1672*e**2)*M**4*rp**2 + (163 + 1792*e**2)*M**3*rp**3 +
            (-181 + 1704*e**2)*M**2*rp**4 + (43 - 76*e**2)*M*rp**5 + 9*rp**6)
            + l**2*rp*(1600*M**6 - 8*(-167 + 300*e**2)*M**5*rp - 4*(243 +
            1228*e**2)*M**4*rp**2 + 6*(-333 + 40*e**2)*M**3*rp**3 + (47 +
            1196*e**2)*M**2*rp**4 + 4*(62 + 57*e**2)*M*rp**5 + 9*rp**6)) +
            a**10*M*(l**2*(-32*(-8 + 27*e**2)*M**3 + (242 - 448*e**2)*M**2*rp
            + 3*(-19 + 20*e**2)*M*rp**2 + 18*(-3 + 2*e**2)*rp**3) +
            rp*(rp*(290*M**3 + 165*M**2*rp - 141*M*rp**2 - 68*rp**3) +
            2*e**2*(144*M**4 + 680*M**3*rp + 864*M**2*rp**2 + 358*M*rp**3 +
            37*rp**4))) + a**8*(-2*l**4*M*(144*M**3 + 8*(-8 + 27*e**2)*M**2*rp
            + 6*(-6 + 7*e**2)*M*rp**2 - 9*(-3 + e**2)*rp**3) + l**2*M*rp*(288*(1
            + 18*e**2)*M**4 + 8*(105 + 286*e**2)*M**3*rp - 2*(-589 +
            516*e**2)*M**2*rp**2 + (15 - 268*e**2)*M*rp**3 + 2*(-93 +
            20*e**2)*rp**4) + rp**2*(-4*e**2*M*(400*M**5 + 696*M**4*rp -
            12*M**3*rp**2 - 732*M**2*rp**3 - 368*M*rp**4 - 19*rp**5) +
            rp*(-404*M**5 - 8*M**4*rp + 375*M**3*rp**2 - 61*M**2*rp**3 -
            61*M*rp**4 + 3*rp**5))))/(48.*rp**7*(a**2 + rp*(-2*M + rp))**2),
        (1, 4, 2): (rp**2*(a**2*M - rp**3 - (2*l*(a**3*e*M - a**2*l*M +
            3*a*e*M*rp**2 + l*rp**2*(-2*M + rp)))/(a**2 + rp*(-2*M + rp)) -
            2*(a**2*(2*M + rp) + rp*(l**2 + rp**2))))/2.,
        (1, 4, 4): (2*a**9*e*l*M*(16*(-16 + 9*e**2)*M**2 + 12*(-13 + 6*e**2)*M*rp -
            3*rp**2) + (2*M - rp)*rp**4*(16*l**6*M*(2*M - rp) + 2*rp**6*(24*M**2 +
            2*(-11 + 15*e**2)*M*rp + 5*rp**2) + 2*l**4*rp**2*(34*M**2 + (-33 +
            47*e**2)*M*rp + 8*rp**2) + l**2*rp**4*(-12*M**2 + 4*(-4 +
            33*e**2)*M*rp + 11*rp**2)) - 2*a*e*l*M*rp**4*(2*l**4*(200*M**2 -
            94*M*rp - 3*rp**2) + 3*l**2*rp**2*(188*M**2 + 4*(-27 + 5*e**2)*M*rp +
            7*rp**2) - 3*rp**4*(100*M**2 - 104*M*rp + 27*rp**2)) +
            a**10*M*(-9*rp*(13*M + 7*rp) + e**2*(256*M**2 + 264*M*rp + 66*rp**2)) -
            2*a**3*e*l*M*rp**2*(4*l**4*(180*M**2 - 92*M*rp - 3*rp**2) +
            l**2*rp*(768*M**3 + 4*(67 + 84*e**2)*M**2*rp + 4*(-149 +
            9*e**2)*M*rp**2 + 15*rp**3) - 4*rp**3*(426*M**3 - (85 +
            108*e**2)*M**2*rp + 9*(-17 + 4*e**2)*M*rp**2 + 46*rp**3)) -
            2*a**5*e*l*M*rp*(-6*l**4*(18*M + rp) + l**2*(1728*M**3 + 24*(-33 +
            10*e**2)*M**2*rp - 4*(83 + 15*e**2)*M*rp**2 - 9*rp**3) +
            2*rp*(-672*M**4 + 4*(-107 + 108*e**2)*M**3*rp + 6*(79 +
            36*e**2)*M**2*rp**2 + 2*(161 - 90*e**2)*M*rp**3 - 65*rp**4)) -
            a**2*rp**2*(-2*l**6*M*(240*M**2 - 154*M*rp + 17*rp**2) +
            2*l**4*rp*(48*M**4 - 4*(35 + 176*e**2)*M**3*rp + 8*(8 +
            15*e**2)*M**2*rp**2 + (-35 + 73*e**2)*M*rp**3 + 16*rp**4) +
            rp**5*(264*M**4 + 4*(-35 + 144*e**2)*M**3*rp + 2*(41 -
            222*e**2)*M**2*rp**2 + (-101 + 138*e**2)*M*rp**3 + 31*rp**4) +
            l**2*rp**3*(1656*M**4 - 12*(65 + 166*e**2)*M**3*rp + 2*(-149 +
            374*e**2)*M**2*rp**2 + (47 + 256*e**2)*M*rp**3 + 45*rp**4)) -
            a**4*rp*(6*l**6*M*(12*M + rp) + 2*l**4*(-576*M**4 - 36*(-9 +
            20*e**2)*M**3*rp + 2*(-19 + 137*e**2)*M**2*rp**2 + (47 +
            29*e**2)*M*rp**3 + 8*rp**4) + rp**3*(192*M**5 + 4*(85 +
            468*e**2)*M**4*rp + 228*(-1 + 2*e**2)*M**3*rp**2 - 3*(117 +
            268*e**2)*M**2*rp**3 - 12*(-8 + e**2)*M*rp**4 + 39*rp**5) +
            l**2*rp*(1344*M**5 + 32*(13 - 105*e**2)*M**4*rp - 4*(243 +
            280*e**2)*M**3*rp**2 + 28*(-29 + 75*e**2)*M**2*rp**3 + (379 +
            56*e**2)*M*rp**4 + 57*rp**5)) + 2*a**7*e*l*M*(4*rp*(-8*(5 +
            18*e**2)*M**3 + 3*(-59 + 12*e**2)*M**2*rp + (-121 +
            72*e**2)*M*rp**2 + 6*rp**3) + 3*l**2*(144*M**2 + rp**2 + 4*M*(rp +
            3*e**2*rp))) + a**8*(l**2*M*(-32*(-8 + 27*e**2)*M**2 + 12*(4 -
            19*e**2)*M*rp + 3*(-41 + 20*e**2)*rp**2) + rp*(-(rp*(-420*M**3 +
            115*M**2*rp + 256*M*rp**2 + 7*rp**3)) + 4*e**2*M*(40*M**3 +
            178*M**2*rp + 209*M*rp**2 + 60*rp**3))) - a**6*(6*l**4*M*(48*M**2 +
            2*(-5 + 18*e**2)*M*rp + (11 + e**2)*rp**2) + l**2*rp*(-32*(5 +
            108*e**2)*M**4 + 8*(-88 + 153*e**2)*M**3*rp + 2*(-247 +
            658*e**2)*M**2*rp**2 + (417 - 128*e**2)*M*rp**3 + 23*rp**4) +
            rp**2*(4*e**2*M*(336*M**4 + 324*M**3*rp - 128*M**2*rp**2 -
            263*M*rp**3 - 66*rp**4) + rp*(276*M**4 - 652*M**3*rp -
            323*M**2*rp**2 + 326*M*rp**3 + 25*rp**4))))/(48.*rp**4*(a**2 +
            rp*(-2*M + rp))**2),
        (1, 6, 0): -rp**5/2.,
        (1, 6, 2): (6*a**7*e*l*M*(12*(-4 + e**2)*M
            - 11*rp) + 3*a**8*(3*rp*(-3*M + rp) + 2*e**2*M*(24*M + 13*rp)) + 2*a*e*l*M*(2*M -
            rp)*rp**3*((82*M - 51*rp)*rp**2 + l**2*(-124*M + 30*rp)) + (2*M -
            rp)*rp**3*(8*l**4*M*(2*M - rp) + l**2*rp**2*(-36*M**2 + 4*(8 +
            11*e**2)*M*rp - 7*rp**2) + 8*rp**4*(4*M**2 + (-4 + 5*e**2)*M*rp +
            rp**2)) - 2*a**5*e*l*M*(-12*l**2*(9*M - 2*rp) + rp*(8*(-11 +
            15*e**2)*M**2 - 24*(-9 + 5*e**2)*M*rp + 63*rp**2)) -
            2*a**3*e*l*M*rp*(l**2*(360*M**2 - 352*M*rp + 54*rp**2) - rp*(400*M**3
            + 4*(19 - 54*e**2)*M**2*rp + 4*(-40 + 21*e**2)*M*rp**2 + 21*rp**3)) -
            a**2*rp*(-8*l**4*M*(30*M**2 - 29*M*rp + 7*rp**2) + rp**3*(88*M**4 +
            4*(27 + 64*e**2)*M**3*rp - 2*(57 + 50*e**2)*M**2*rp**2 + (-11 +
            26*e**2)*M*rp**3 + 15*rp**4) + l**2*rp*(400*M**4 + 8*(-26 +
            63*e**2)*M**2*rp**2 + 4*(17 + 4*e**2)*M*rp**3 + rp**4 -
            64*M**3*(rp + 14*e**2*rp))) + a**6*(-3*l**2*(24*(-2 +
            3*e**2)*M**2 + (4 - 8*e**2)*M*rp - 3*rp**2) + rp*(rp*(86*M**2 -
            139*M*rp + 19*rp**2) + 2*e**2*M*(-44*M**2 + 98*M*rp + 105*rp**2))) +
            a**4*(24*l**4*M*(-3*M + rp) + l**2*rp*(8*(-11 + 90*e**2)*M**3 + 4*(59
            - 178*e**2)*M**2*rp + 2*(-41 + 26*e**2)*M*rp**2 + rp**3) +
            rp**2*(rp*(-20*M**3 + 296*M**2*rp - 149*M*rp**2 + 3*rp**3) +
            2*e**2*M*(-200*M**3 - 108*M**2*rp + 36*M*rp**2 +
            73*rp**3))))/(48.*rp*(a**2 + rp*(-2*M + rp))**2),
        (1, 8, 0): -(rp**2*(60*a**3*e*l*M + 4*a*e*l*M*rp*(8*M + 3*rp) - 3*a**4*(10*e**2*M
            + 3*rp) + rp*(8*l**2*M*(-2*M + rp) + rp**2*(8*M**2 + 2*(-3 + 5*e**2)*M*rp
            + rp**2)) - 2*a**2*(15*l**2*M + rp*(rp*(-7*M + 4*rp) + 2*e**2*M*(4*M +
            5*rp)))))/(48.*(a**2 + rp*(-2*M + rp))),
        (2, 0, 4): (3*(a**2*(2*M + rp) +
            rp*(l**2 + rp**2))**2)/(a**2 + rp*(-2*M + rp)),
        (2, 0, 6): ((a**2*(2*M + rp) +
            rp*(l**2 + rp**2))*(-4*a**7*e*l*M*(12*M**2 + 23*M*rp + 3*rp**2) -
            4*a*e*l*M*rp**5*(l**2*(67*M - 36*rp) + (17*M - 15*rp)*rp**2) -
            4*a**5*e*l*M*rp*(-64*M**3 - 104*M**2*rp + 55*M*rp**2 + 7*rp**3 +
            3*l**2*(8*M + rp)) + a**8*M*(-(rp*(M + 6*rp)) + 12*e**2*(2*M**2 + 3*M*rp +
            rp**2)) + 4*a**3*e*l*M*rp**2*(l**2*(16*M**2 - 73*M*rp + 3*rp**2)
            + rp**2*(196*M**2 - 17*M*rp + 11*rp**2)) + rp**5*(8*l**4*(10*M**2 -
            11*M*rp + 3*rp**2) + rp**4*(40*M**2 - 2*(13 + 2*e**2)*M*rp + 3*rp**2) +
            2*l**2*rp**2*(54*M**2 + (-51 + 2*e**2)*M*rp + 12*rp**2)) -
            2*a**2*rp**2*(M*rp**4*(58*M**2 + 3*(-27 + 26*e**2)*M*rp + 33*rp**2)
            + 2*l**4*(8*M**3 - 33*M**2*rp + 10*M*rp**2 + 3*rp**3) -
            l**2*rp**2*(-194*M**3 + (171 + 104*e**2)*M**2*rp + (-57 +
            10*e**2)*M*rp**2 + 3*rp**3)) + a**4*rp*(48*l**4*M**2 +
            rp**2*(4*M**4 + 20*(1 - 18*e**2)*M**3*rp - 3*(-53 +
            76*e**2)*M**2*rp**2 + 24*(-4 + e**2)*M*rp**3 - 9*rp**4) -
            2*l**2*(64*M**4 + 8*(11 + 2*e**2)*M**3*rp - (109 +
            80*e**2)*M**2*rp**2 + (51 - 14*e**2)*M*rp**3 + 9*rp**4)) +
            2*a**6*(l**2*M*(12*M**2 + 4*(7 + 6*e**2)*M*rp + 3*(-1 +
            2*e**2)*rp**2) - rp*(rp**3*(31*M + 3*rp) + 2*e**2*M*(32*M**3 +
            60*M**2*rp + 9*M*rp**2 - 8*rp**3)))))/(24.*rp**6*(a**2 + rp*(-2*M +
            rp))**2),
        (2, 2, 2): (6*rp**3*(a**2*(2*M + rp) + rp*(l**2 + rp**2)))/(a**2 +
            rp*(-2*M + rp)),
        (2, 2, 4): (4*a**7*e*l*M*(24*M**2 + 19*M*rp + 9*rp**2) -
            4*a*e*l*M*rp**3*(4*l**4*M + 9*l**2*(12*M - 7*rp)*rp**2 + 6*(9*M -
            7*rp)*rp**4) + 4*a**5*e*l*M*rp*(48*M**3 + 142*M**2*rp + 76*M*rp**2 +
            50*rp**3 + l**2*(-6*M + 9*rp)) - a**8*(24*e**2*M**2*(2*M + rp) +
            rp*(49*M**2 + 42*M*rp + 6*rp**2)) + rp**3*(4*l**6*M*(2*M - rp) +
            3*rp**6*(40*M**2 - 2*(21 + 2*e**2)*M*rp + 11*rp**2) +
            6*l**2*rp**4*(56*M**2 - 62*M*rp + 17*rp**2) +
            2*l**4*rp**2*(118*M**2 + (-131 + 2*e**2)*M*rp + 36*rp**2)) +
            4*a**3*e*l*M*rp**3*(-6*l**2*(9*M - 8*rp) + rp*(114*M**2 + 23*M*rp +
            83*rp**2)) + 2*a**2*rp**3*(l**4*(4*(18 + e**2)*M**2 + (-71 +
            2*e**2)*M*rp + 15*rp**2) - 3*rp**3*(12*M**3 + 6*(-3 +
            8*e**2)*M**2*rp + (31 + 6*e**2)*M*rp**2 - 13*rp**3) +
            3*l**2*rp*(-32*M**3 + 2*(19 + 9*e**2)*M**2*rp - 61*M*rp**2 +
            24*rp**3)) + a**4*rp*(6*l**4*(2*M**2 - 6*M*rp - rp**2) -
            3*rp**2*(76*M**4 + 12*(-1 + 16*e**2)*M**3*rp + 3*(-19 +
            56*e**2)*M**2*rp**2 + 4*(8 + 3*e**2)*M*rp**3 - 17*rp**4) -
            2*l**2*(48*M**4 + 68*M**3*rp - 4*(13 + 9*e**2)*M**2*rp**2 +
            84*M*rp**3 - 15*rp**4)) - 2*a**6*(l**2*(24*M**3 + (26 -
            6*e**2)*M**2*rp + 39*M*rp**2 + 6*rp**3) + M*rp*(rp*(-106*M**2 - 37*M*rp
            + 39*rp**2) + 6*e**2*(8*M**3 + 36*M**2*rp + 20*M*rp**2 +
            rp**3))))/(24.*rp**3*(a**2 + rp*(-2*M + rp))**2),
        (2, 4, 0): (3*rp**6)/(a**2 + rp*(-2*M + rp)),
        (2, 4, 2): (24*a**5*e*l*M*(7*M + 4*rp) +
            12*a**3*e*l*M*rp*(4*l**2 - 16*M**2 + 9*M*rp + 23*rp**2) -
            12*a*e*l*M*rp**2*(l**2*(8*M - 4*rp) + (19*M - 13*rp)*rp**2) -
            3*a**6*(4*e**2*M*(7*M + 3*rp) + rp*(10*M + 3*rp)) + rp**2*(24*l**4*M*(2*M
            - rp) + rp**4*(120*M**2 - 2*(71 + 6*e**2)*M*rp + 41*rp**2) +
            l**2*rp**2*(228*M**2 - 232*M*rp + 59*rp**2)) + a**2*rp*(-24*l**4*M
            + rp**2*(-36*M**3 + (22 - 84*e**2)*M**2*rp - 6*(19 +
            10*e**2)*M*rp**2 + 67*rp**3) + 2*l**2*(48*M**3 - 6*(13 +
            2*e**2)*M*rp**2 + 25*rp**3 + 6*M**2*(rp + 4*e**2*rp))) -
            a**4*(3*l**2*(28*M**2 + 4*(5 + 2*e**2)*M*rp + 3*rp**2) +
            rp*(rp*(-78*M**2 + 14*M*rp - 17*rp**2) + 12*e**2*M*(-8*M**2 + 10*M*rp +
            7*rp**2))))/(24.*(a**2 + rp*(-2*M + rp))**2),
        (2, 6, 0): (rp**3*(48*a**3*e*l*M - 3*a**4*(8*e**2*M + rp) + 16*a*e*l*M*rp*(-5*M +
            3*rp) + rp*(20*l**2*M*(2*M - rp) + rp**2*(40*M**2 - 2*(21 + 2*e**2)*M*rp +
            11*rp**2)) - 2*a**2*(12*l**2*M + rp*((7*M - 4*rp)*rp + 2*e**2*M*(-10*M +
            7*rp)))))/(24.*(a**2 + rp*(-2*M + rp))**2),
        (3, 0, 4): -((a**2*(2*M + rp) +
            rp*(l**2 + rp**2))*(4*a**3*e*l*M + a**4*rp + 12*a*e*l*M*rp**2 +
            rp**2*(rp**2*(-5*M + 2*rp) + l**2*(-9*M + 4*rp)) + a**2*(l**2*(-4*M +
            rp) + rp*(2*M**2 - 3*M*rp + 3*rp**2))))/(2.*rp*(a**2 + rp*(-2*M + rp))**2),
        (3, 0, 6): (-4*a**11*e*l*M**2*(4*(35 + 9*e**2)*M**2 + (127 +
            54*e**2)*M*rp + 3*(5 + 6*e**2)*rp**2) -
            4*a*e*l*M*rp**5*(rp**6*(-92*M**2 + 3*(31 + 18*e**2)*M*rp - 24*rp**2)
            + 21*l**6*(4*M**2 - rp**2) + l**2*rp**4*(106*M**2 + (-55 +
            114*e**2)*M*rp + 3*rp**2) + l**4*rp**2*(486*M**2 + 2*(-170 +
            21*e**2)*M*rp + 51*rp**2)) -
            4*a**3*e*l*M*rp**3*(2*l**4*rp**2*((829 + 42*e**2)*M**2 + 2*(-107
            + 21*e**2)*M*rp - 84*rp**2) + 21*l**6*(12*M**2 - 2*M*rp - rp**2) +
            l**2*rp**3*(-3230*M**3 + 3*(895 + 224*e**2)*M**2*rp + 16*(-7 +
            24*e**2)*M*rp**2 - 208*rp**3) + rp**5*(-1722*M**3 + (943 -
            270*e**2)*M**2*rp + (209 + 270*e**2)*M*rp**2 - 118*rp**3)) +
            rp**7*(2*l**6*(2*M - rp)*(54*M**2 + (-71 + 42*e**2)*M*rp + 24*rp**2) +
            l**2*rp**4*(220*M**3 + 340*(-1 + e**2)*M**2*rp + (211 -
            184*e**2)*M*rp**2 - 48*rp**3) + 2*l**4*rp**2*(136*M**3 + 2*(-125 +
            111*e**2)*M**2*rp + (163 - 113*e**2)*M*rp**2 - 36*rp**3) +
            rp**6*(116*M**3 + 8*(-20 + 11*e**2)*M**2*rp + 3*(29 -
            18*e**2)*M*rp**2 - 18*rp**3)) + a**12*M*(3*rp*(-8*M**2 - 3*M*rp +
            2*rp**2) + e**2*(280*M**3 + 308*M**2*rp + 72*M*rp**2 - 6*rp**3)) -
            4*a**9*e*l*M*(l**2*M*(108*M**2 + 2*(137 + 24*e**2)*M*rp + 3*(13 +
            6*e**2)*rp**2) + rp*(24*(-1 + 12*e**2)*M**4 + 2*(215 +
            234*e**2)*M**3*rp + 12*(49 + 39*e**2)*M**2*rp**2 + 9*(-5 +
            18*e**2)*M*rp**3 - 30*rp**4)) -
            a**2*rp**3*(-168*l**8*M**2*(2*M - rp) + 2*l**6*rp*(240*M**4 -
            4*(233 + 84*e**2)*M**3*rp - 6*(-83 + 28*e**2)*M**2*rp**2 + (23 +
            84*e**2)*M*rp**3 - 36*rp**4) + l**2*rp**5*(3640*M**4 + 24*(-208 +
            29*e**2)*M**3*rp + 2*(1091 - 1004*e**2)*M**2*rp**2 + 8*(-27 +
            100*e**2)*M*rp**3 - 27*rp**4) + 4*l**4*rp**3*(1042*M**4 - (1441 +
            1086*e**2)*M**3*rp + 2*(293 + 3*e**2)*M**2*rp**2 + (-19 +
            183*e**2)*M*rp**3 - 21*rp**4) + rp**7*(696*M**4 + 8*(-165 +
            137*e**2)*M**3*rp + 4*(204 - 241*e**2)*M**2*rp**2 + (-181 +
            268*e**2)*M*rp**3 + 15*rp**4)) -
            4*a**5*e*l*M*rp**2*(l**4*(1008*M**3 + 4*(257 + 21*e**2)*M**2*rp
            + 2*(-104 + 21*e**2)*M*rp**2 - 87*rp**3) + l**2*rp*(-944*M**4 +
            10*(-161 + 24*e**2)*M**3*rp + 144*(21 + 8*e**2)*M**2*rp**2 + 6*(-89 +
            74*e**2)*M*rp**3 - 307*rp**4) - 2*rp**3*(192*M**4 + (823 +
            378*e**2)*M**3*rp + 2*(-544 + 9*e**2)*M**2*rp**2 -
            252*e**2*M*rp**3 + 97*rp**4)) - 4*a**7*e*l*M*rp*(24*l**4*M*(6*M +
            rp) + l**2*(864*M**4 + 4*(163 + 84*e**2)*M**3*rp + (1271 +
            624*e**2)*M**2*rp**2 + 2*(-101 + 96*e**2)*M*rp**3 - 96*rp**4) -
            2*rp*(224*M**5 + 460*M**4*rp + 9*(17 + 2*e**2)*M**3*rp**2 - (769 +
            324*e**2)*M**2*rp**3 + 8*(11 - 27*e**2)*M*rp**4 + 65*rp**5)) +
            a**4*rp**2*(2*l**6*M*(672*M**3 + 4*(101 + 126*e**2)*M**2*rp +
            28*(-11 + 3*e**2)*M*rp**2 - (31 + 42*e**2)*rp**3) +
            4*l**4*rp*(-472*M**5 + 2*(-239 + 180*e**2)*M**4*rp + 8*(163 +
            293*e**2)*M**3*rp**2 + 3*(-223 + 58*e**2)*M**2*rp**3 + (41 -
            198*e**2)*M*rp**4 + 39*rp**5) + rp**5*(180*M**5 - 12*(-9 +
            238*e**2)*M**4*rp + 3*(491 - 180*e**2)*M**3*rp**2 + 8*(-234 +
            287*e**2)*M**2*rp**3 + (403 - 538*e**2)*M*rp**4 + 63*rp**5) +
            l**2*rp**3*(-364*M**5 - 4*(763 + 2976*e**2)*M**4*rp + (6105 +
            4072*e**2)*M**3*rp**2 + 4*(-989 + 831*e**2)*M**2*rp**3 + 3*(181 -
            436*e**2)*M*rp**4 + 198*rp**5)) + a**6*rp*(6*l**6*M*(32*M**2 +
            2*M*rp + rp**2) + 4*l**4*M*(288*M**4 + 4*(23 + 252*e**2)*M**3*rp +
            (389 + 1450*e**2)*M**2*rp**2 + 2*(-125 + 69*e**2)*M*rp**3 - (6 +
            73*e**2)*rp**4) + rp**3*(184*M**6 - 4*(11 + 268*e**2)*M**5*rp -
            6*(37 + 632*e**2)*M**4*rp**2 + 5*(-11 + 416*e**2)*M**3*rp**3 +
            (-1303 + 2360*e**2)*M**2*rp**4 + 3*(219 - 184*e**2)*M*rp**5 +
            99*rp**6) + l**2*rp*(-896*M**6 - 32*(38 + 59*e**2)*M**5*rp - 16*(21 +
            292*e**2)*M**4*rp**2 + 2*(1643 + 4488*e**2)*M**3*rp**3 + (-1979 +
            2372*e**2)*M**2*rp**4 + 4*(154 - 241*e**2)*M*rp**5 + 123*rp**6)) +
            a**10*M*(l**2*(8*(35 + 54*e**2)*M**3 + 8*(25 + 109*e**2)*M**2*rp
            + 3*(-7 + 76*e**2)*M*rp**2 + 6*(3 - 2*e**2)*rp**3) + rp*(rp*(134*M**3
            - 21*M**2*rp - 69*M*rp**2 + 58*rp**3) + e**2*(-48*M**4 +
            1072*M**3*rp + 1704*M**2*rp**2 + 452*M*rp**3 - 76*rp**4))) +
            a**8*(2*l**4*M*(72*M**3 + 4*(55 + 72*e**2)*M**2*rp +
            78*e**2*M*rp**2 - 3*(-3 + e**2)*rp**3) + l**2*M*rp*(48*(-1 +
            72*e**2)*M**4 + 8*(81 + 514*e**2)*M**3*rp + (869 +
            5400*e**2)*M**2*rp**2 + 2*(-285 + 472*e**2)*M*rp**3 + 4*(24 -
            71*e**2)*rp**4) + rp**2*(rp*(-264*M**5 + 92*M**4*rp +
            135*M**3*rp**2 - 147*M**2*rp**3 + 400*M*rp**4 + 39*rp**5) -
            2*e**2*M*(448*M**5 + 1232*M**4*rp + 680*M**3*rp**2 -
            1460*M**2*rp**3 - 660*M*rp**4 + 149*rp**5))))/(48.*rp**7*(a**2 +
            rp*(-2*M + rp))**3),
        (3, 2, 2): -((rp**2*(2*a**3*e*l*M + 6*a*e*l*M*rp**2 +
            a**4*(3*M + 2*rp) + rp**2*(rp**2*(-5*M + 2*rp) + l**2*(-7*M + 3*rp)) -
            2*a**2*(l**2*(M - rp) + rp*(2*M**2 + M*rp - 2*rp**2))))/(a**2 +
            rp*(-2*M + rp))**2),
        (3, 2, 4): (4*a**9*e*l*M*(2*(-113 + 9*e**2)*M**2 - 57*M*rp +
            3*rp**2) - 4*a*e*l*M*rp**4*(l**4*(240*M**2 - 22*M*rp - 51*rp**2) +
            l**2*rp**2*(314*M**2 + (-83 + 114*e**2)*M*rp - 42*rp**2) +
            3*rp**4*(-84*M**2 + 4*(23 + 9*e**2)*M*rp - 27*rp**2)) +
            a**10*M*(-21*rp*(7*M + 2*rp) + 4*e**2*(113*M**2 + 81*M*rp + 9*rp**2)) -
            4*a**7*e*l*M*(3*l**2*(-18*M**2 + 8*M*rp + rp**2) + rp*(4*(31 +
            108*e**2)*M**3 + 9*(109 + 30*e**2)*M**2*rp + (37 +
            108*e**2)*M*rp**2 - 69*rp**3)) -
            4*a**3*e*l*M*rp**2*(l**4*(612*M**2 - 92*M*rp - 45*rp**2) +
            rp**3*(-2250*M**3 + (955 - 54*e**2)*M**2*rp + 3*(143 +
            108*e**2)*M*rp**2 - 187*rp**3) + l**2*rp*(16*M**3 + 2*(409 +
            114*e**2)*M**2*rp + 2*(-185 + 108*e**2)*M*rp**2 - 45*rp**3)) +
            rp**4*(2*l**6*M*(12*M**2 - 16*M*rp + 5*rp**2) +
            2*l**4*rp**2*(128*M**3 + 2*(-113 + 111*e**2)*M**2*rp + (129 -
            113*e**2)*M*rp**2 - 24*rp**3) + 4*l**2*rp**4*(76*M**3 + 2*(-66 +
            85*e**2)*M**2*rp + (77 - 92*e**2)*M*rp**2 - 15*rp**3) +
            3*rp**6*(116*M**3 + 8*(-21 + 11*e**2)*M**2*rp + (83 -
            54*e**2)*M*rp**2 - 14*rp**3)) - 4*a**5*e*l*M*rp*(6*l**4*rp +
            l**2*(1296*M**3 + 6*(47 + 34*e**2)*M**2*rp + (-371 +
            102*e**2)*M*rp**2 - 60*rp**3) + rp*(-1008*M**4 + 2*(-641 +
            216*e**2)*M**3*rp + 6*(335 + 63*e**2)*M**2*rp**2 + (209 +
            324*e**2)*M*rp**3 - 172*rp**4)) +
            a**2*rp**2*(2*l**6*M*(408*M**2 - 194*M*rp - 5*rp**2) -
            8*l**4*M*rp*(104*M**3 - 3*(73 + 77*e**2)*M**2*rp + (115 -
            101*e**2)*M*rp**2 + 17*(-1 + 3*e**2)*rp**3) +
            2*l**2*rp**3*(-2348*M**4 + 4*(672 + 127*e**2)*M**3*rp + 3*(-355 +
            324*e**2)*M**2*rp**2 + 3*(45 - 176*e**2)*M*rp**3 + 9*rp**4) -
            3*rp**5*(464*M**4 + 8*(-100 + 97*e**2)*M**3*rp + 4*(139 -
            166*e**2)*M**2*rp**2 + 4*(-39 + 49*e**2)*M*rp**3 + 11*rp**4)) +
            a**4*rp*(12*l**6*M*rp + 3*rp**3*(60*M**5 - 4*(23 +
            326*e**2)*M**4*rp + (751 - 436*e**2)*M**3*rp**2 + 4*(-208 +
            293*e**2)*M**2*rp**3 + (205 - 252*e**2)*M*rp**4 + 30*rp**5) +
            2*l**2*rp*(-1008*M**5 + 4*(-227 + 328*e**2)*M**4*rp + 2*(1325 +
            758*e**2)*M**3*rp**2 + 14*(-95 + 6*e**2)*M**2*rp**3 + 3*(43 -
            160*e**2)*M*rp**4 + 78*rp**5) + 2*l**4*(864*M**4 + 2*(-193 +
            107*e**2)*M**2*rp**2 + 17*(1 - 5*e**2)*M*rp**3 + 24*rp**4 +
            12*M**3*(rp + 102*e**2*rp))) + a**8*(2*l**2*M*((226 -
            108*e**2)*M**2 + 24*(-2 + e**2)*M*rp + 3*(-15 + 8*e**2)*rp**2) +
            rp*(2*e**2*M*(124*M**3 + 982*M**2*rp + 686*M*rp**2 + 3*rp**3) +
            3*rp*(179*M**3 - 70*M**2*rp + 30*M*rp**2 + 10*rp**3))) +
            a**6*(-12*l**4*M*(6*M**2 - 4*M*rp - (-3 + e**2)*rp**2) +
            2*l**2*rp*(4*(31 + 648*e**2)*M**4 + 28*(35 + 39*e**2)*M**3*rp - (361
            + 140*e**2)*M**2*rp**2 + (43 - 112*e**2)*M*rp**3 + 39*rp**4) +
            rp**2*(3*rp*(-192*M**4 + 210*M**3*rp - 381*M**2*rp**2 + 176*M*rp**3
            + 37*rp**4) - 4*e**2*M*(504*M**4 + 828*M**3*rp - 433*M**2*rp**2 -
            709*M*rp**3 + 90*rp**4))))/(48.*rp**4*(a**2 + rp*(-2*M + rp))**3),
        (3, 4, 0): -(rp**5*(3*a**2 + rp*(-5*M + 2*rp)))/(2.*(a**2 + rp*(-2*M + rp))**2),
        (3, 4, 2): (24*a**7*e*l*M*((-25 + 3*e**2)*M - 7*rp) + 3*a**8*(rp*(8*M + 9*rp) +
            2*e**2*M*(50*M + 19*rp)) - 4*a*e*l*M*rp**3*(3*rp**2*(-76*M**2 + (103 +
            18*e**2)*M*rp - 36*rp**2) + l**2*(208*M**2 - 64*M*rp - 27*rp**2)) -
            12*a**5*e*l*M*(l**2*(-18*M + 8*rp) + rp*((4 + 48*e**2)*M**2 + (71 -
            6*e**2)*M*rp + 20*rp**2)) - 12*a**3*e*l*M*rp*(l**2*(144*M**2 -
            64*M*rp - rp**2) + 2*rp*(-88*M**3 + 2*(-5 + 18*e**2)*M**2*rp + 9*(4 +
            e**2)*M*rp**2 - 13*rp**3)) + rp**3*(-8*l**4*M*(2*M**2 - 3*M*rp +
            rp**2) + rp**4*(348*M**3 + 8*(-64 + 33*e**2)*M**2*rp + (245 -
            162*e**2)*M*rp**2 - 38*rp**3) + l**2*rp**2*(-52*M**3 + 4*(19 +
            85*e**2)*M**2*rp - (33 + 184*e**2)*M*rp**2 + 4*rp**3)) -
            a**2*rp*(-12*l**4*M*(48*M**2 - 29*M*rp + rp**2) +
            l**2*rp*(1056*M**4 - 16*(33 + 107*e**2)*M**3*rp + 4*(-35 +
            16*e**2)*M**2*rp**2 + 4*(9 + 64*e**2)*M*rp**3 + 25*rp**4) +
            rp**3*(696*M**4 + 8*(-103 + 171*e**2)*M**3*rp + 4*(166 -
            273*e**2)*M**2*rp**2 + 3*(-111 + 124*e**2)*M*rp**3 + 57*rp**4)) +
            a**6*(l**2*((300 - 216*e**2)*M**2 + 6*(9 + 8*e**2)*M*rp +
            27*rp**2) + rp*(12*e**2*M*(2*M**2 + 61*M*rp + 15*rp**2) + rp*(-312*M**2
            - 25*M*rp + 61*rp**2))) + a**4*(24*l**4*M*(-3*M + 2*rp) + l**2*rp*(24*(1 +
            72*e**2)*M**3 + 12*(10 - 41*e**2)*M**2*rp - 3*(23 +
            8*e**2)*M*rp**2 - 2*rp**3) + rp**2*(-12*e**2*M*(88*M**3 +
            64*M**2*rp - 97*M*rp**2 + 12*rp**3) + rp*(876*M**3 - 512*M**2*rp +
            63*M*rp**2 + 15*rp**3))))/(48.*rp*(a**2 + rp*(-2*M + rp))**3),
        (3, 6, 0): (rp**2*(-144*a**5*e*l*M + 28*a**3*e*l*M*(4*M - 3*rp)*rp +
            3*a**6*(24*e**2*M + 7*rp) + 4*a*e*l*M*rp**2*(68*M**2 - 54*M*rp +
            15*rp**2) + rp**2*(-2*l**2*M*(68*M**2 - 76*M*rp + 21*rp**2) +
            rp**2*(116*M**3 + 8*(-21 + 11*e**2)*M**2*rp + (83 -
            54*e**2)*M*rp**2 - 14*rp**3)) + a**4*(72*l**2*M + rp*(rp*(-53*M +
            28*rp) + e**2*(-56*M**2 + 74*M*rp))) - a**2*rp*(2*l**2*M*(28*M - 5*rp) +
            rp*(rp*(36*M**2 - 30*M*rp + 7*rp**2) + 4*e**2*M*(34*M**2 - 16*M*rp +
            13*rp**2)))))/(48.*(a**2 + rp*(-2*M + rp))**3),
        (4, 0, 2): (3*rp**3*(a**2*(2*M
            + rp) + rp*(l**2 + rp**2)))/(a**2 + rp*(-2*M + rp))**2,
        (4, 0, 4): (-4*a**7*e*l*M*(48*M**2 + 40*M*rp + 3*rp**2) -
            4*a**5*e*l*M*rp*(-96*M**3 - 110*M**2*rp + 73*M*rp**2 + 8*rp**3 +
            9*l**2*(6*M + rp)) + a**8*(12*e**2*M*(8*M**2 + 10*M*rp + 3*rp**2) -
            rp*(62*M**2 + 42*M*rp + 3*rp**2)) + rp**3*(4*l**6*M*(-2*M + rp) +
            3*rp**6*(23*M**2 + 2*(-9 + 2*e**2)*M*rp + 2*rp**2) +
            6*l**2*rp**4*(21*M**2 + (-17 + 4*e**2)*M*rp + 2*rp**2) +
            l**4*rp**2*(73*M**2 + 4*(-17 + 2*e**2)*M*rp + 12*rp**2)) -
            4*a**3*e*l*M*rp**2*(6*l**4 + l**2*(-48*M**2 + 81*M*rp + 9*rp**2)
            + rp**2*(-234*M**2 + 50*M*rp + 17*rp**2)) +
            4*a*e*l*M*rp**3*(l**4*(4*M - 6*rp) + 3*(M - 4*rp)*rp**4 +
            l**2*(-45*M*rp**2 + 6*rp**3)) + 2*a**2*rp**2*(6*l**6*M +
            3*rp**4*(-16*M**3 - 4*(-7 + 9*e**2)*M**2*rp + (-25 +
            12*e**2)*M*rp**2 + 5*rp**3) + 3*l**2*rp**2*(-76*M**3 + 2*(35 +
            9*e**2)*M**2*rp + (-33 + 16*e**2)*M*rp**2 + 9*rp**3) +
            l**4*(-48*M**3 + (78 - 4*e**2)*M**2*rp + 5*(-5 + 2*e**2)*M*rp**2
            + 12*rp**3)) + a**4*rp*(3*l**4*(36*M**2 + 4*(-1 + e**2)*M*rp -
            rp**2) - 2*l**2*(96*M**4 + 4*(19 + 12*e**2)*M**3*rp - (143 +
            84*e**2)*M**2*rp**2 + 15*(3 - 4*e**2)*M*rp**3 - 18*rp**4) +
            3*rp**2*(-36*M**4 - 4*(-5 + 48*e**2)*M**3*rp - 9*(-5 +
            8*e**2)*M**2*rp**2 + 8*(-5 + 6*e**2)*M*rp**3 + 13*rp**4)) +
            2*a**6*(l**2*(48*M**3 + 2*(10 + 27*e**2)*M**2*rp + 3*(-11 +
            8*e**2)*M*rp**2 - 3*rp**3) + rp*(-12*e**2*M*(8*M**3 + 12*M**2*rp -
            5*M*rp**2 - 5*rp**3) + rp*(74*M**3 + 17*M**2*rp - 33*M*rp**2 +
            6*rp**3))))/(24.*rp**3*(a**2 + rp*(-2*M + rp))**3),
        (4, 2, 0): (3*rp**6)/(a**2 + rp*(-2*M + rp))**2,
        (4, 2, 2): (2*a**5*e*l*M*(-8*M + rp) -
            2*a**3*e*l*M*rp*(4*l**2 - 8*M**2 + M*rp - 7*rp**2) -
            2*a*e*l*M*rp**3*(4*l**2 + rp*(3*M + 4*rp)) + a**6*M*(-7*rp + e**2*(8*M +
            6*rp)) + rp**4*(rp**2*(23*M**2 + 2*(-11 + 2*e**2)*M*rp + 4*rp**2) +
            l**2*(25*M**2 + (-23 + 4*e**2)*M*rp + 4*rp**2)) +
            a**2*rp*(4*l**4*M + rp**2*(-16*M**3 - 4*(-5 + 8*e**2)*M**2*rp +
            7*(-5 + 2*e**2)*M*rp**2 + 14*rp**3) + l**2*(-8*M**3 + 10*M**2*rp +
            (-23 + 8*e**2)*M*rp**2 + 15*rp**3)) + a**4*(4*l**2*M*(2*M + (-2 +
            e**2)*rp) + rp*(-8*e**2*M*(M**2 + M*rp - 2*rp**2) + rp*(17*M**2 -
            8*M*rp + 10*rp**2))))/(4.*(a**2 + rp*(-2*M + rp))**3),
        (4, 4, 0): (rp**4*(9*a**4 - 48*a*e*l*M**2 + 12*l**2*M*(2*M - rp) +
            rp**2*(69*M**2 + 2*(-31 + 6*e**2)*M*rp + 10*rp**2) +
            2*a**2*(6*e**2*M*(2*M + rp) + rp*(-30*M + 17*rp))))/(24.*(a**2 + rp*(-2*M +
            rp))**3),
        (5, 0, 2): -(rp**2*(2*a**3*e*l*M + 6*a*e*l*M*rp**2 + a**4*(3*M +
            2*rp) + rp**2*(rp**2*(-4*M + rp) + l**2*(-6*M + 2*rp)) +
            a**2*(-2*l**2*(M - rp) + rp*(-2*M**2 - 3*M*rp +
            3*rp**2))))/(2.*(a**2 + rp*(-2*M + rp))**3),
        (5, 0, 4): (-2*a**9*e*l*M*(4*(49 +
            27*e**2)*M**2 + 6*(-7 + 12*e**2)*M*rp - 9*rp**2) +
            a**10*M*(3*rp*(-10*M + 7*rp) + 2*e**2*(98*M**2 + 30*M*rp - 15*rp**2)) -
            2*a*e*l*M*rp**4*(l**2*rp**2*(-725*M**2 + 8*(172 + 21*e**2)*M*rp -
            570*rp**2) + 3*rp**4*(-135*M**2 + 8*(23 + 9*e**2)*M*rp - 76*rp**2) +
            16*l**4*(2*M**2 + 15*M*rp - 9*rp**2)) -
            2*a**7*e*l*M*(l**2*(324*M**2 + 12*(5 + 3*e**2)*M*rp + 9*rp**2) +
            2*rp*(16*(2 + 9*e**2)*M**3 + 6*(94 + 57*e**2)*M**2*rp + 2*(-65 +
            126*e**2)*M*rp**2 - 39*rp**3)) + rp**4*(-2*l**6*M*(44*M**2 -
            52*M*rp + 15*rp**2) + 3*rp**6*(52*M**3 + (-67 + 44*e**2)*M**2*rp +
            2*(14 - 15*e**2)*M*rp**2 - 2*rp**3) + 2*l**4*rp**2*(-153*M**3 +
            (271 + 140*e**2)*M**2*rp - 2*(82 + 39*e**2)*M*rp**2 + 36*rp**3) +
            l**2*rp**4*(34*M**3 + (21 + 428*e**2)*M**2*rp - 2*(35 +
            124*e**2)*M*rp**2 + 36*rp**3)) -
            2*a**3*e*l*M*rp**2*(2*l**4*(252*M**2 + 116*M*rp - 63*rp**2) +
            l**2*rp*(-784*M**3 + 3*(219 + 40*e**2)*M**2*rp + 18*(39 +
            22*e**2)*M*rp**2 - 168*rp**3) - 2*rp**3*(765*M**3 + 2*(8 +
            135*e**2)*M**2*rp - 9*(29 + 44*e**2)*M*rp**2 + 107*rp**3)) -
            2*a**5*e*l*M*rp*(18*l**4*(6*M + rp) + l**2*(864*M**3 + 84*(15 +
            2*e**2)*M**2*rp + 2*(-145 + 132*e**2)*M*rp**2 - 123*rp**3) +
            rp*(-576*M**4 - 1390*M**3*rp + 3*(667 + 108*e**2)*M**2*rp**2 + 4*(89 +
            252*e**2)*M*rp**3 - 55*rp**4)) -
            a**2*rp**2*(4*l**6*M*(-84*M**2 + 8*M*rp + 23*rp**2) +
            3*rp**5*(210*M**4 + (-375 + 484*e**2)*M**3*rp - 4*(-71 +
            99*e**2)*M**2*rp**2 + 2*(-61 + 65*e**2)*M*rp**3 + 22*rp**4) +
            2*l**4*rp*(392*M**4 - (409 + 196*e**2)*M**3*rp - (39 +
            584*e**2)*M**2*rp**2 + (-41 + 167*e**2)*M*rp**3 + 84*rp**4) +
            l**2*rp**3*(1618*M**4 + (-1559 + 2272*e**2)*M**3*rp + (707 -
            4036*e**2)*M**2*rp**2 + 2*(-211 + 424*e**2)*M*rp**3 + 168*rp**4))
            + a**4*rp*(18*l**6*M*(4*M + rp) + 8*l**4*(72*M**4 + 18*(4 +
            7*e**2)*M**3*rp + (-91 + 128*e**2)*M**2*rp**2 - 4*(-4 +
            5*e**2)*M*rp**3 + 9*rp**4) + 3*rp**3*(44*M**5 - 56*(-1 +
            8*e**2)*M**4*rp + 2*(233 - 192*e**2)*M**3*rp**2 + (-525 +
            736*e**2)*M**2*rp**3 - 4*(-38 + 55*e**2)*M*rp**4 - 23*rp**5) -
            l**2*rp*(576*M**5 + 4*(263 + 196*e**2)*M**4*rp - 13*(215 +
            88*e**2)*M**3*rp**2 - 6*(-313 + 524*e**2)*M**2*rp**3 + 4*(-85 +
            241*e**2)*M*rp**4 + 87*rp**5)) + a**8*(l**2*M*(4*(49 +
            162*e**2)*M**2 + 12*(-12 + 23*e**2)*M*rp + 3*(11 - 4*e**2)*rp**2) +
            rp*(2*e**2*M*(32*M**3 + 608*M**2*rp + 286*M*rp**2 - 105*rp**3) +
            3*rp*(24*M**3 + 2*M**2*rp + 130*M*rp**2 + 15*rp**3))) +
            a**6*(6*l**4*M*(36*M**2 + 2*(-1 + 18*e**2)*M*rp + (5 +
            3*e**2)*rp**2) + l**2*rp*(64*(1 + 27*e**2)*M**4 + 16*(65 +
            207*e**2)*M**3*rp + 68*(-14 + 17*e**2)*M**2*rp**2 + (595 -
            376*e**2)*M*rp**3 + 117*rp**4) + rp**2*(3*rp*(-58*M**4 - 45*M**3*rp
            - 420*M**2*rp**2 + 181*M*rp**3 + 12*rp**4) - 4*e**2*M*(144*M**4 +
            432*M**3*rp - 218*M**2*rp**2 - 416*M*rp**3 +
            135*rp**4))))/(48.*rp**4*(a**2 + rp*(-2*M + rp))**4),
        (5, 2, 0): -(rp**5*(3*a**2 + rp*(-4*M + rp)))/(2.*(a**2 + rp*(-2*M + rp))**3),
        (5, 2, 2): (-6*a**7*e*l*M*(4*(14 + 3*e**2)*M + 23*rp) + 3*a**8*(2*e**2*M*(28*M -
            rp) + rp*(43*M + 9*rp)) - 2*a*e*l*M*rp**3*(l**2*(64*M**2 + 344*M*rp -
            222*rp**2) + 3*rp**2*(-199*M**2 + 4*(79 + 18*e**2)*M*rp - 134*rp**2)) -
            6*a**5*e*l*M*(4*l**2*(9*M + 2*rp) + rp*(12*(7 + 6*e**2)*M**2 + 6*(17 +
            16*e**2)*M*rp + 7*rp**2)) - 6*a**3*e*l*M*rp*(2*l**2*(108*M**2 +
            52*M*rp - 33*rp**2) + rp*(-272*M**3 + (-73 + 72*e**2)*M**2*rp + 2*(103 +
            78*e**2)*M*rp**2 - 116*rp**3)) + rp**3*(-4*l**4*M*(38*M**2 -
            45*M*rp + 13*rp**2) + 6*rp**4*(52*M**3 + (-63 + 44*e**2)*M**2*rp -
            6*(-3 + 5*e**2)*M*rp**2 + 2*rp**3) + l**2*rp**2*(-158*M**3 + (369
            + 428*e**2)*M**2*rp - 4*(73 + 62*e**2)*M*rp**2 + 84*rp**3)) +
            a**2*rp*(24*l**4*M*(18*M**2 + M*rp - 7*rp**2) + l**2*rp*(-816*M**4
            + 2*(213 + 356*e**2)*M**3*rp + (103 + 1444*e**2)*M**2*rp**2 + 4*(32 -
            125*e**2)*M*rp**3 - 156*rp**4) - 3*rp**3*(210*M**4 + (-295 +
            548*e**2)*M**3*rp + (313 - 488*e**2)*M**2*rp**2 + 2*(-97 +
            95*e**2)*M*rp**3 + 40*rp**4)) + 3*a**6*(l**2*(8*(7 +
            9*e**2)*M**2 + 8*(6 + e**2)*M*rp + 9*rp**2) +
            rp*(2*e**2*M*(42*M**2 + 148*M*rp - 37*rp**2) + rp*(-240*M**2 + 87*M*rp +
            11*rp**2))) + 3*a**4*(8*l**4*M*(3*M + rp) + l**2*rp*(12*(7 +
            36*e**2)*M**3 + 4*(-23 + 98*e**2)*M**2*rp + 4*(3 -
            19*e**2)*M*rp**2 - 13*rp**3) - rp**2*(rp*(-385*M**3 + 317*M**2*rp -
            120*M*rp**2 + 42*rp**3) + 2*e**2*M*(136*M**3 + 144*M**2*rp -
            312*M*rp**2 + 101*rp**3))))/(48.*rp*(a**2 + rp*(-2*M + rp))**4),
        (5, 4, 0): (rp**2*(-72*a**5*e*l*M + 9*a**6*(4*e**2*M + rp) +
            12*a**3*e*l*M*rp*(-12*M + 11*rp) + 12*a*e*l*M*rp**2*(32*M**2 - 42*M*rp +
            17*rp**2) + a**4*(36*l**2*M + rp*(18*e**2*M*(4*M - 3*rp) + (24*M -
            13*rp)*rp)) + rp**2*(-6*l**2*M*(32*M**2 - 38*M*rp + 11*rp**2) +
            rp**2*(156*M**3 + (-193 + 132*e**2)*M**2*rp + 2*(32 -
            45*e**2)*M*rp**2 + 2*rp**3)) - a**2*rp*(l**2*(-72*M**2 + 78*M*rp)
            + rp*(12*e**2*M*(16*M**2 - 23*M*rp + 15*rp**2) + rp*(183*M**2 - 196*M*rp +
            62*rp**2)))))/(48.*(a**2 + rp*(-2*M + rp))**4),
        (6, 0, 0): rp**6/(a**2 +
            rp*(-2*M + rp))**3,
        (6, 0, 2): (-24*a**5*e*l*M*(5*M + rp) -
            16*a**3*e*l*M*rp*(3*l**2 - 8*M**2 + 2*M*rp + 3*rp**2) +
            8*a*e*l*M*rp**2*(l**2*(4*M - 6*rp) + (11*M - 15*rp)*rp**2) +
            3*a**6*(rp*(-6*M + rp) + 4*e**2*M*(5*M + 3*rp)) + rp**2*(8*l**4*M*(-2*M +
            rp) + M*rp**4*(43*M + 4*(-8 + 5*e**2)*rp) + l**2*rp**2*(3*M**2 + 4*(3
            + 4*e**2)*M*rp - 12*rp**2)) + a**2*rp*(24*l**4*M + rp**2*(-34*M**3
            + (39 - 100*e**2)*M**2*rp + 2*(-47 + 38*e**2)*M*rp**2 + 36*rp**3) +
            l**2*(-64*M**3 - 8*(-3 + 2*e**2)*M**2*rp + 10*(-3 +
            4*e**2)*M*rp**2 + 48*rp**3)) + a**4*(3*l**2*(20*M**2 + 4*(-1 +
            2*e**2)*M*rp + rp**2) + rp*(rp*(32*M**2 - 14*M*rp + 39*rp**2) +
            e**2*(-64*M**3 + 8*M**2*rp + 92*M*rp**2))))/(24.*(a**2 + rp*(-2*M +
            rp))**4),
        (6, 2, 0): (rp**3*(-48*a**3*e*l*M + 16*a*e*l*M*(M - 3*rp)*rp +
            3*a**4*(8*e**2*M + 5*rp) + M*rp*(l**2*(-8*M + 4*rp) + rp**2*(43*M + 4*(-8
            + 5*e**2)*rp)) + a**2*(24*l**2*M + 2*rp*(rp*(-31*M + 18*rp) +
            e**2*(-4*M**2 + 22*M*rp)))))/(24.*(a**2 + rp*(-2*M + rp))**4),
        (7, 0, 0): (rp**5*(-a**2 + M*rp))/(2.*(a**2 + rp*(-2*M + rp))**4),
        (7, 0, 2): (-12*a**7*e*l*M*((2 + 6*e**2)*M + 3*rp) + 3*a**8*(2*e**2*M*(2*M - 7*rp)
            + rp*(26*M + 3*rp)) - 4*a*e*l*M*rp**3*(l**2*(-52*M**2 + 144*M*rp -
            69*rp**2) + rp**2*(-85*M**2 + 2*(61 + 27*e**2)*M*rp - 51*rp**2)) -
            8*a**5*e*l*M*(27*l**2*M + rp*((35 + 12*e**2)*M**2 + 3*(8 +
            17*e**2)*M*rp - 9*rp**2)) + M*rp**3*(-4*l**4*(26*M**2 - 31*M*rp +
            9*rp**2) + l**2*rp**2*(-25*M**2 + 4*(3 + 44*e**2)*M*rp + 2*(5 -
            54*e**2)*rp**2) + rp**4*(91*M**2 + 2*(-59 + 40*e**2)*M*rp + 2*(23 -
            29*e**2)*rp**2)) - 4*a**3*e*l*M*rp*(l**2*(72*M**2 + 172*M*rp -
            69*rp**2) + rp*(-80*M**3 - 65*M**2*rp + 2*(64 + 69*e**2)*M*rp**2 -
            84*rp**3)) + a**2*rp*(4*l**4*M*(24*M**2 + 35*M*rp - 31*rp**2) +
            l**2*rp*(-160*M**4 - 52*(-1 + 2*e**2)*M**3*rp + (27 +
            1004*e**2)*M**2*rp**2 + 2*(51 - 130*e**2)*M*rp**3 - 84*rp**4) -
            rp**3*(166*M**4 + (-289 + 532*e**2)*M**3*rp + (371 -
            472*e**2)*M**2*rp**2 + 16*(-17 + 14*e**2)*M*rp**3 + 72*rp**4)) +
            a**6*(3*l**2*((4 + 72*e**2)*M**2 + 26*M*rp + 3*rp**2) +
            rp*(4*e**2*M*(35*M**2 + 88*M*rp - 48*rp**2) + rp*(-322*M**2 + 147*M*rp -
            9*rp**2))) + a**4*(72*l**4*M**2 + l**2*rp*(4*(35 +
            72*e**2)*M**3 + 4*(-40 + 239*e**2)*M**2*rp + (23 -
            152*e**2)*M*rp**2 - 36*rp**3) - rp**2*(4*e**2*M*(40*M**3 +
            78*M**2*rp - 195*M*rp**2 + 79*rp**3) + rp*(-376*M**3 + 365*M**2*rp -
            205*M*rp**2 + 90*rp**3))))/(48.*rp*(a**2 + rp*(-2*M + rp))**5),
        (7, 2, 0): -(rp**2*(-48*a**5*e*l*M + 4*a**3*e*l*M*(68*M - 57*rp)*rp +
            3*a**6*(8*e**2*M + 3*rp) - 4*a*e*l*M*rp**2*(52*M**2 - 98*M*rp +
            45*rp**2) + M*rp**2*(2*l**2*(52*M**2 - 64*M*rp + 19*rp**2) +
            rp**2*(-91*M**2 + 2*(59 - 40*e**2)*M*rp + 2*(-23 + 29*e**2)*rp**2)) +
            a**4*(24*l**2*M + rp*(-2*e**2*M*(68*M - 65*rp) + rp*(-79*M + 42*rp))) +
            a**2*rp*(2*l**2*M*(-68*M + 49*rp) + rp*(4*e**2*M*(26*M**2 - 66*M*rp +
            41*rp**2) + rp*(187*M**2 - 212*M*rp + 72*rp**2)))))/(48.*(a**2 + rp*(-2*M
            + rp))**5),
        (8, 0, 0): (rp**3*(-12*a**3*e*l*M + 4*a*e*l*M*(2*M - 3*rp)*rp +
            3*a**4*(2*e**2*M + rp) + M*rp*(l**2*(-4*M + 2*rp) + rp**2*(5*M + 4*(-1 +
            e**2)*rp)) + 2*a**2*(3*l**2*M + rp*(rp*(-5*M + 3*rp) + e**2*M*(-2*M +
            5*rp)))))/(12.*(a**2 + rp*(-2*M + rp))**5),
        (9, 0, 0): -(rp**2*(-18*a**5*e*l*M +
            2*a**3*e*l*M*(26*M - 21*rp)*rp + 3*a**6*(3*e**2*M + rp) -
            8*a*e*l*M*rp**2*(2*M**2 - 6*M*rp + 3*rp**2) +
            M*rp**2*(l**2*(8*M**2 - 10*M*rp + 3*rp**2) + 2*rp**2*(-5*M**2 + (7
            - 4*e**2)*M*rp + 3*(-1 + e**2)*rp**2)) + a**4*(9*l**2*M +
            rp*(-26*e**2*M*(M - rp) + rp*(-17*M + 9*rp))) + a**2*rp*(2*l**2*M*(-13*M +
            8*rp) + rp*(rp*(30*M**2 - 35*M*rp + 12*rp**2) + e**2*M*(8*M**2 - 38*M*rp +
            23*rp**2)))))/(24.*(a**2 + rp*(-2*M + rp))**6),
    }


def elliptic_shape(background: KerrBackground, radius: float, angular_momentum: float) -> EllipticShape:
    """Return the ``(alpha20, alpha02, beta)`` quadratic-form coefficients."""

    M, a = background.mass, background.spin
    rp, l = radius, angular_momentum
    return EllipticShape(
        alpha20=rp * rp / (a * a + rp * (rp - 2.0 * M)),
        alpha02=rp * rp,
        beta=l * l + rp * rp + a * a * (rp + 2.0 * M) / rp,
    )


def equatorial_table(background: KerrBackground, orbit: EquatorialOrbit) -> CoefficientTable:
    """Return the coefficient table for the equatorial snapshot ``orbit``."""

    t_start = perf_counter()
    M, a = background.mass, background.spin
    rp, e, l = orbit.radius, orbit.energy, orbit.angular_momentum
    shape = elliptic_shape(background, rp, l)
    table = CoefficientTable(
        numerator=_numerator_coefficients(M, a, rp, e, l),
        denominator={
            (2, 0, 0): shape.alpha20,
            (0, 2, 0): shape.alpha02,
            (0, 0, 2): shape.beta,
        },
        prefactor=EQUATORIAL_PREFACTOR,
        power=EQUATORIAL_POWER,
        phi_basis="sine",
        shape=shape,
    )
    dt = perf_counter() - t_start
    logger.debug(
        f"equatorial_table: M={M:.6g} a={a:.6g} r_p={rp:.6g} e={e:.6g} l={l:.6g} | "
        f"beta={shape.beta:.6g} | terms={len(table.numerator)} | {dt*1e3:.2f} ms"
    )
    return table


__all__ = ["EQUATORIAL_PREFACTOR", "EQUATORIAL_POWER", "elliptic_shape", "equatorial_table"]
