"""Fresnel integrals and Euler spiral (clothoid) evaluation."""

from __future__ import annotations

import math
import sys

from roadkit.aux_cosine import auxiliary_cos
from roadkit.aux_sine import auxiliary_sin

__all__ = [
    "fresnel_sin",
    "fresnel_cos",
    "fresnel_sin_integral",
    "fresnel_cos_integral",
    "spiral_pos",
    "spiral_radian",
    "spiral_length",
]

_EPSILON = sys.float_info.epsilon
_SQRT_2_O_PI = 7.978845608028653558798921198687637369517e-1


def _power_series_s(x: float) -> float:
    """Sine integral near zero: x^3 sqrt(2/pi) sum (-x^4)^j / ((4j+3)(2j+1)!)."""
    if x == 0.0:
        return 0.0
    x2 = x * x
    x3 = x * x2
    x4 = -x2 * x2
    xn = 1.0
    total = 1.0 / 3.0
    previous = 0.0
    factorial = 1.0
    j = 0
    while abs(total - previous) > _EPSILON * abs(previous):
        previous = total
        j += 1
        factorial *= float(2 * j)
        factorial *= float(2 * j + 1)
        xn *= x4
        total += xn / factorial / float(4 * j + 3)
    return x3 * _SQRT_2_O_PI * total


def _power_series_c(x: float) -> float:
    """Cosine integral near zero: x sqrt(2/pi) sum (-x^4)^j / ((4j+1)(2j)!)."""
    if x == 0.0:
        return 0.0
    x2 = x * x
    x4 = -x2 * x2
    xn = 1.0
    total = 1.0
    previous = 0.0
    factorial = 1.0
    j = 0
    while abs(total - previous) > _EPSILON * abs(previous):
        previous = total
        j += 1
        factorial *= float(2 * j)
        factorial *= float(2 * j - 1)
        xn *= x4
        total += xn / factorial / float(4 * j + 1)
    return x * _SQRT_2_O_PI * total


def fresnel_sin(x: float) -> float:
    """Integral from 0 to x of sqrt(2/pi) sin(t^2) dt."""
    if abs(x) < 0.5:
        return _power_series_s(x)
    ax = abs(x)
    f = auxiliary_cos(ax)
    g = auxiliary_sin(ax)
    x2 = x * x
    s = 0.5 - math.cos(x2) * f - math.sin(x2) * g
    return -s if x < 0.0 else s


def fresnel_cos(x: float) -> float:
    """Integral from 0 to x of sqrt(2/pi) cos(t^2) dt."""
    if abs(x) < 0.5:
        return _power_series_c(x)
    ax = abs(x)
    f = auxiliary_cos(ax)
    g = auxiliary_sin(ax)
    x2 = x * x
    c = 0.5 + math.sin(x2) * f - math.cos(x2) * g
    return -c if x < 0.0 else c


def fresnel_sin_integral(x: float) -> float:
    """Normalised Fresnel sine integral: integral from 0 to x of sin(pi t^2 / 2) dt."""
    return fresnel_sin(x / _SQRT_2_O_PI)


def fresnel_cos_integral(x: float) -> float:
    """Normalised Fresnel cosine integral: integral from 0 to x of cos(pi t^2 / 2) dt."""
    return fresnel_cos(x / _SQRT_2_O_PI)


def spiral_pos(
    x0: float, y0: float, theta: float, curv: float, dcurv: float, length: float
) -> tuple[float, float]:
    """Position after travelling ``length`` along a clothoid.

    The curve starts at (x0, y0) with heading ``theta`` and curvature ``curv``,
    and its curvature changes at rate ``dcurv`` per unit length.
    """
    if dcurv == 0.0 and curv == 0.0:
        px = length * math.cos(theta)
        py = length * math.sin(theta)
    elif dcurv == 0.0:
        x = math.sin(curv * length) / curv
        y = (1.0 - math.cos(curv * length)) / curv
        px = x * math.cos(theta) - y * math.sin(theta)
        py = x * math.sin(theta) + y * math.cos(theta)
    else:
        a = 1.0 / math.sqrt(math.pi * abs(dcurv))
        end = (curv + dcurv * length) * a
        start = curv * a
        x = fresnel_cos_integral(end) - fresnel_cos_integral(start)
        y = fresnel_sin_integral(end) - fresnel_sin_integral(start)
        rot = theta - curv * curv * 0.5 / dcurv
        if dcurv < 0.0:
            x = -x
        px = math.pi * a * (x * math.cos(rot) - y * math.sin(rot))
        py = math.pi * a * (x * math.sin(rot) + y * math.cos(rot))
    return (px + x0, py + y0)


def spiral_radian(theta: float, curv: float, dcurv: float, length: float) -> float:
    """Heading after travelling ``length`` along a clothoid; not wrapped."""
    return dcurv * length * length / 2.0 + curv * length + theta


def spiral_length(theta0: float, theta1: float, k0: float, k1: float) -> float:
    """Length of a clothoid turning from theta0 to theta1 as curvature goes k0 to k1."""
    return (theta1 - theta0) / ((k1 - k0) / 2 + k0)