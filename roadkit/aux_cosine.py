"""Fresnel auxiliary cosine integral f(x)."""

from __future__ import annotations

import sys

from roadkit.aux_sine import chebyshev_series

__all__ = ["auxiliary_cos"]

_EPSILON = sys.float_info.epsilon
_SQRT_2PI = 2.506628274631000502415765284811045253006
_NUM_ASYMPTOTIC_TERMS = 35

_COS_0_1 = (
    +4.200987560240514577713e-1, -9.358785913634965235904e-2,
    -7.642539415723373644927e-3, +4.958117751796130135544e-3,
    -9.750236036106120253456e-4, +1.075201474958704192865e-4,
    -4.415344769301324238886e-6, -7.861633919783064216022e-7,
    +1.919240966215861471754e-7, -2.175775608982741065385e-8,
    +1.296559541430849437217e-9, +2.207205095025162212169e-11,
    -1.479219615873704298874e-11, +1.821350127295808288614e-12,
    -1.228919312990171362342e-13, +2.227139250593818235212e-15,
    +5.734729405928016301596e-16, -8.284965573075354177016e-17,
    +6.067422701530157308321e-18, -1.994908519477689596319e-19,
    -1.173365630675305693390e-20,
)

_COS_1_3 = (
    +2.098677278318224971989e-1, -9.314234883154103266195e-2,
    +1.739905936938124979297e-2, -2.454274824644285136137e-3,
    +1.589872606981337312438e-4, +4.203943842506079780413e-5,
    -2.018022256093216535093e-5, +5.125709636776428285284e-6,
    -9.601813551752718650057e-7, +1.373989484857155846826e-7,
    -1.348105546577211255591e-8, +2.745868700337953872632e-10,
    +2.401655517097260106976e-10, -6.678059547527685587692e-11,
    +1.140562171732840809159e-11, -1.401526517205212219089e-12,
    +1.105498827380224475667e-13, +2.040731455126809208066e-16,
    -1.946040679213045143184e-15, +4.151821375667161733612e-16,
    -5.642257647205149369594e-17, +5.266176626521504829010e-18,
    -2.299025577897146333791e-19, -2.952226367506641078731e-20,
    +8.760405943193778149078e-21,
)

_COS_3_5 = (
    +1.025703371090289562388e-1, -2.569833023232301400495e-2,
    +3.160592981728234288078e-3, -3.776110718882714758799e-4,
    +4.325593433537248833341e-5, -4.668447489229591855730e-6,
    +4.619254757356785108280e-7, -3.970436510433553795244e-8,
    +2.535664754977344448598e-9, -2.108170964644819803367e-11,
    -2.959172018518707683013e-11, +6.727219944906606516055e-12,
    -1.062829587519902899001e-12, +1.402071724705287701110e-13,
    -1.619154679722651005075e-14, +1.651319588396970446858e-15,
    -1.461704569438083772889e-16, +1.053521559559583268504e-17,
    -4.760946403462515858756e-19, -1.803784084922403924313e-20,
    +7.873130866418738207547e-21,
)

_COS_5_7 = (
    +6.738667333400589274018e-2, -1.128146832637904868638e-2,
    +9.408843234170404670278e-4, -7.800074103496165011747e-5,
    +6.409101169623350885527e-6, -5.201350558247239981834e-7,
    +4.151668914650221476906e-8, -3.242202015335530552721e-9,
    +2.460339340900396789789e-10, -1.796823324763304661865e-11,
    +1.244108496436438952425e-12, -7.950417122987063540635e-14,
    +4.419142625999150971878e-15, -1.759082736751040110146e-16,
    -1.307443936270786700760e-18, +1.362484141039320395814e-18,
    -2.055236564763877250559e-19, +2.329142055084791308691e-20,
    -2.282438671525884861970e-21,
)


def _asymptotic_series(x: float) -> float:
    x2 = x * x
    x4 = -4.0 * x2 * x2
    xn = 1.0
    factorial = 1.0
    epsilon = _EPSILON / 4.0
    j = 3
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
    f = 0.0
    for term in reversed(terms):
        f += term
    return f / (x * _SQRT_2PI)


def auxiliary_cos(x: float) -> float:
    """Fresnel auxiliary cosine integral f(x) for x >= 0.

    f(x) is the integral from 0 to infinity of sqrt(2/pi) exp(-2xt) cos(t^2) dt.
    """
    if x == 0.0:
        return 0.5
    if x <= 1.0:
        return chebyshev_series((x - 0.5) / 0.5, _COS_0_1)
    if x <= 3.0:
        return chebyshev_series(x - 2.0, _COS_1_3)
    if x <= 5.0:
        return chebyshev_series(x - 4.0, _COS_3_5)
    if x <= 7.0:
        return chebyshev_series(x - 6.0, _COS_5_7)
    return _asymptotic_series(x)