"""Lightweight numeric approximations: roots, trigonometry and angle helpers."""

from __future__ import annotations

PI = 3.14159265358979323846
"""Value of pi used throughout the approximations."""

INF = 1e34
"""Stand-in for infinity returned where a result is unbounded."""

DEG_TO_RAD = PI / 180

_SQRT_MAX_ITERATIONS = 25


def sqrt(x: float, tolerance: float = 0.00001) -> float:
    """Approximate the square root of ``x`` by Newton-Raphson iteration.

    Iteration stops once a step changes the estimate by less than
    ``tolerance``, or after a fixed number of steps.
    """
    if x < 0:
        raise ValueError(f"cannot take the square root of negative value {x}")
    if x == 0:
        return 0.0

    estimate = float(x)
    for _ in range(_SQRT_MAX_ITERATIONS):
        following = 0.5 * (estimate + x / estimate)
        if abs(estimate - following) < tolerance:
            return following
        estimate = following
    return estimate


def _wrap(x: float) -> float:
    """Shift ``x`` by multiples of 2*pi into the range [-pi, pi]."""
    value = float(x)
    while value > PI:
        value -= 2 * PI
    while value < -PI:
        value += 2 * PI
    return value


def sin(x: float) -> float:
    """Sine of ``x`` radians from the first five terms of its power series."""
    value = _wrap(x)
    square = value * value

    result = 0.0
    term = value
    factorial = 1.0
    sign = 1.0
    for power in (1, 3, 5, 7, 9):
        if power > 1:
            term *= square
            factorial *= (power - 1) * power
        result += sign * term / factorial
        sign = -sign
    return result


def cos(x: float) -> float:
    """Cosine of ``x`` radians from the first six terms of its power series."""
    value = _wrap(x)
    square = value * value

    result = 0.0
    term = 1.0
    factorial = 1.0
    sign = 1.0
    for power in (0, 2, 4, 6, 8, 10):
        if power > 0:
            term *= square
            factorial *= (power - 1) * power
        result += sign * term / factorial
        sign = -sign

    # Avoid reporting a tiny residue where the true value is zero.
    if abs(result) < 1e-6:
        return 0.0
    return result


def tan(x: float) -> float:
    """Tangent of ``x`` radians; returns +/-INF where the cosine vanishes."""
    value = _wrap(x)
    sine = sin(value)
    cosine = cos(value)
    if cosine == 0:
        return INF if sine > 0 else -INF
    return sine / cosine


def arctan(x: float) -> float:
    """Inverse tangent in radians.

    Arguments outside [-1, 1] are inverted first. Near zero the argument is
    returned as is, beyond +/-0.76 a fitted line is used, and in between a
    five-term power series.
    """
    value = float(x)
    inverted = abs(x) > 1
    if inverted:
        value = 1 / value

    if abs(value) < 0.05:
        result = value
    elif value < -0.76:
        result = 0.55 * value - 0.235
    elif value > 0.76:
        result = 0.55 * value + 0.235
    else:
        square = value * value
        result = 0.0
        term = value
        sign = 1.0
        for divisor in (1, 3, 5, 7, 9):
            if divisor > 1:
                term *= square
            result += sign * term / divisor
            sign = -sign

    if inverted:
        offset = PI / 2 if result > 0 else -(PI / 2)
        return offset - result
    return result


def arcsin(x: float) -> float:
    """Inverse sine in radians, via arctan(x / sqrt(1 - x^2))."""
    if abs(x) > 1:
        raise ValueError(f"arcsin is undefined for {x}, outside [-1, 1]")
    remainder = 1 - x * x
    if remainder == 0:
        return PI / 2 if x > 0 else -PI / 2
    return arctan(x / sqrt(remainder))


def arccos(x: float) -> float:
    """Inverse cosine in radians, via arctan(sqrt(1 - x^2) / x)."""
    if abs(x) > 1:
        raise ValueError(f"arccos is undefined for {x}, outside [-1, 1]")
    if x == 0:
        return PI / 2
    result = arctan(sqrt(1 - x * x) / x)
    # The identity lands pi too low on the negative side.
    return result + PI if (result < 0 or x < 0) else result


def distance2(x1: float, y1: float, x2: float = 0, y2: float = 0) -> float:
    """Distance between two points in the plane."""
    dx = x1 - x2
    dy = y1 - y2
    return sqrt(dx * dx + dy * dy)


def distance3(
    x1: float, y1: float, z1: float, x2: float = 0, y2: float = 0, z2: float = 0
) -> float:
    """Distance between two points in space."""
    dx = x1 - x2
    dy = y1 - y2
    dz = z1 - z2
    return sqrt(dx * dx + dy * dy + dz * dz)


def normalize(num: float, start: float, end: float) -> float:
    """Position of ``num`` relative to the range, 0 at ``start`` and 1 at ``end``.

    Values outside the range give results outside [0, 1].
    """
    return (num - start) / (end - start)


def in_range(num: float, start: float, end: float) -> float:
    """Like :func:`normalize`, but returns -1 for values outside the range."""
    if num < start or num > end:
        return -1.0
    return (num - start) / (end - start)


def get_angle(x1: float, y1: float, x2: float = 0, y2: float = 0) -> float:
    """Clockwise angle in degrees from the upward vertical through (x2, y2) to (x1, y1)."""
    if x1 == x2:
        return 0.0 if y1 >= y2 else 180.0
    if y1 == y2:
        return 90.0 if x1 >= x2 else 270.0

    radians = arctan(abs((x1 - x2) / (y1 - y2)))

    if y1 < y2:
        radians = PI - radians
    if x1 < x2:
        radians = 2 * PI - radians

    return to_degrees(radians)


def rollover_angle(angle: float) -> float:
    """Bring ``angle`` into [0, 360] by adding or subtracting whole turns."""
    while angle < 0:
        angle += 360
    while angle > 360:
        angle -= 360
    return angle


def to_radians(degrees: float) -> float:
    """Convert degrees to radians."""
    return degrees * DEG_TO_RAD


def to_degrees(radians: float) -> float:
    """Convert radians to degrees."""
    return radians / DEG_TO_RAD