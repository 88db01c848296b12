"""Waypoints → SVG path data.

Corners are rounded with a straight run into an axis-aligned point followed
by a quadratic into the corner; the final segment is a soft cubic.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from decimal import Decimal

from trace_routing.types import Position


def fmt_number(value: float) -> str:
    """Format a coordinate the way JavaScript's Number#toString does.

    Integral values print without a decimal point (50, not 50.0); the
    shortest round-trip digits are kept, and exponent form (1e-7, 1e+21)
    is used only outside the range [1e-6, 1e21).
    """
    v = float(value)
    if v == 0:
        return "0"
    if math.isnan(v):
        return "NaN"
    if math.isinf(v):
        return "Infinity" if v > 0 else "-Infinity"

    sign = "-" if v < 0 else ""
    _, digit_tuple, exponent = Decimal(repr(abs(v))).normalize().as_tuple()
    digits = "".join(str(d) for d in digit_tuple)
    k = len(digits)
    n = exponent + k  # position of the decimal point relative to the digits

    if k <= n <= 21:
        return sign + digits + "0" * (n - k)
    if 0 < n <= 21:
        return sign + digits[:n] + "." + digits[n:]
    if -6 < n <= 0:
        return sign + "0." + "0" * -n + digits
    e = n - 1
    mantissa = digits[0] + ("." + digits[1:] if k > 1 else "")
    return f"{sign}{mantissa}e{'+' if e >= 0 else '-'}{abs(e)}"


def fmt_point(x: float, y: float) -> str:
    return f"{fmt_number(x)},{fmt_number(y)}"


def to_path(waypoints: Sequence[Position]) -> str:
    """Render an ordered waypoint sequence as path data (M, L, Q, C commands).

    Returns an empty string when fewer than two waypoints are given or the
    route starts and ends at the same point.
    """
    if len(waypoints) < 2 or waypoints[0] == waypoints[-1]:
        return ""

    first = waypoints[0]
    parts = [f"M {fmt_point(first.x, first.y)}"]
    last = len(waypoints) - 1

    for i in range(1, len(waypoints)):
        prev = waypoints[i - 1]
        curr = waypoints[i]
        dx = curr.x - prev.x
        dy = curr.y - prev.y
        end = fmt_point(curr.x, curr.y)

        if i == last:
            mid = fmt_point(prev.x + dx * 0.5, prev.y + dy * 0.5)
            parts.append(f"C {mid} {end} {end}")
        elif abs(dx) > abs(dy):
            parts.append(f"L {fmt_point(curr.x, prev.y)} Q {end} {end}")
        else:
            parts.append(f"L {fmt_point(prev.x, curr.y)} Q {end} {end}")

    return " ".join(parts)
