"""Fresnel auxiliary sine integral g(x) and Chebyshev series evaluation."""

from __future__ import annotations

import math
import sys
from collections.abc import Sequence

__all__ = ["chebyshev_series", "auxiliary_sin"]

_EPSILON = sys.float_info.epsilon
_SQRT_2PI = 2.506628274631000502415765284811045253006
_NUM_ASYMPTOTIC_TERMS = 35

_SIN_0_1 = (
    +2.560134650043040830997e-1, -1.993005146464943284549e-1,
    +4.025503636721387266117e-2, -4.459600454502960250729e-3,
    +6.447097305145147224459e-5, +7.544218493763717599380e-5,
    -1.580422720690700333493e-5, +1.755845848573471891519e-6,
    -9.289769688468301734718e-8, -5.624033192624251079833e-9,
    +1.854740406702369495830e-9, -2.174644768724492443378e-10,
    +1.392899828133395918767e-11, -6.989216003725983789869e-14,
    -9.959396121060010838331e-14, +1.312085140393647257714e-14,
    -9.240470383522792593305e-16, +2.472168944148817385152e-17,
    +2.834615576069400293894e-18, -4.650983461314449088349e-19,
    +3.544083040732391556797e-20,
)

_SIN_1_3 = (
    +3.470341566046115476477e-2, -3.855580521778624043304e-2,
    +1.420604309383996764083e-2, -4.037349972538938202143e-3,
    +9.292478174580997778194e-4, -1.742730601244797978044e-4,
    +2.563352976720387343201e-5, -2.498437524746606551732e-6,
    -1.334367201897140224779e-8, +7.436854728157752667212e-8,
    -2.059620371321272169176e-8, +3.753674773239250330547e-9,
    -5.052913010605479996432e-10, +4.580877371233042345794e-11,
    -7.664740716178066564952e-13, -7.200170736686941995387e-13,
    +1.812701686438975518372e-13, -2.799876487275995466163e-14,
    +3.048940815174731772007e-15, -1.936754063718089166725e-16,
    -7.653673328908379651914e-18, +4.534308864750374603371e-18,
    -8.011054486030591219007e-19, +9.374587915222218230337e-20,
    -7.144943099280650363024e-21, +1.105276695821552769144e-22,
    +6.989334213887669628647e-23,
)

_SIN_3_5 = (
    +3.684922395955255848372e-3, -2.624595437764014386717e-3,
    +6.329162500611499391493e-4, -1.258275676151483358569e-4,
    +2.207375763252044217165e-5, -3.521929664607266176132e-6,
    +5.186211398012883705616e-7, -7.095056569102400546407e-8,
    +9.030550018646936241849e-9, -1.066057806832232908641e-9,
    +1.157128073917012957550e-10, -1.133877461819345992066e-11,
    +9.633572308791154852278e-13, -6.336675771012312827721e-14,
    +1.634407356931822107368e-15, +3.944542177576016972249e-16,
    -9.577486627424256130607e-17, +1.428772744117447206807e-17,
    -1.715342656474756703926e-18, +1.753564314320837957805e-19,
    -1.526125102356904908532e-20, +1.070275366865736879194e-21,
    -4.783978662888842165071e-23,
)

_SIN_5_7 = (
    +1.000801217561417083840e-3, -4.915205279689293180607e-4,
    +8.133163567827942356534e-5, -1.120758739236976144656e-5,
    +1.384441872281356422699e-6, -1.586485067224130537823e-7,
    +1.717840749804993618997e-8, -1.776373217323590289701e-9,
    +1.765399783094380160549e-10, -1.692470022450343343158e-11,
    +1.568238301528778401489e-12, -1.405356860742769958771e-13,
    +1.217377701691787512346e-14, -1.017697418261094517680e-15,
    +8.186068056719295045596e-17, -6.305153620995673221364e-18,
    +4.614110100197028845266e-19, -3.165914620159266813849e-20,
    +1.986716456911232767045e-21, -1.078418278174434671506e-22,
    +4.255983404468350776788e-24,
)


def chebyshev_series(x: float, coefficients: Sequence[float]) -> float:
    """Evaluate sum(a[k] * T_k(x)) with Clenshaw's recursion.

    An empty coefficient sequence evaluates to 0.0.
    """
    if not coefficients:
        return 0.0
    two_x = x + x
    yp1 = 0.0
    yp2 = 0.0
    for a in reversed(coefficients[1:]):
        yp1, yp2 = two_x * yp1 - yp2 + a, yp1
    return x * yp1 - yp2 + coefficients[0]


def _asymptotic_series(x: float) -> float:
    x2 = x * x
    x4 = -4.0 * x2 * x2
    xn = 1.0
    factorial = 1.0
    epsilon = _EPSILON / 4.0
    j = 5
    terms = [1.0]
    for _ in range(1, _NUM_ASYMPTOTIC_TERMS):
        factorial *= float(j) * float(j - 2)
        xn *= x4
        term = factorial / xn
        j += 4
        if abs(term) >= abs(terms[-1]):
            break
        terms.append(term)
        if abs(term) <= epsilon:
            break
    g = 0.0
    for term in reversed(terms):
        g += term
    g /= x * _SQRT_2PI
    return g / (x2 + x2)


def auxiliary_sin(x: float) -> float:
    """Fresnel auxiliary sine integral g(x) for x >= 0.

    g(x) is the integral from 0 to infinity of sqrt(2/pi) exp(-2xt) sin(t^2) dt.
    """
    if x == 0.0:
        return 0.5
    if x <= 1.0:
        return chebyshev_series((x - 0.5) / 0.5, _SIN_0_1)
    if x <= 3.0:
        return chebyshev_series(x - 2.0, _SIN_1_3)
    if x <= 5.0:
        return chebyshev_series(x - 4.0, _SIN_3_5)
    if x <= 7.0:
        return chebyshev_series(x - 6.0, _SIN_5_7)
    return _asymptotic_series(x)