"""Rounding helpers for cash flow values."""

from __future__ import annotations

import math

_HALF_EPSILON = 1e-8


def gauss_round(value: float, precision: int = 0) -> float:
    """
    Round half to even ("banker's" rounding) at the given number of decimals.

    Ordinary rounding carries an upward bias when applied repeatedly; sending
    exact halves to the nearest even digit removes it.

    The scaled value is first trimmed to 8 decimals so binary representation
    noise does not hide a half, e.g. ``1.535 * 100 == 153.49999999999997``.

    Parameters
    ----------
    value : float
        The number to round
    precision : int
        Number of decimal places (sign is ignored)

    Returns
    -------
    float
        The rounded value

    Examples
    --------
    >>> gauss_round(2.5)
    2.0
    >>> gauss_round(1.535, 2)
    1.54
    """
    scale = 10.0 ** abs(precision)
    scaled = round(value * scale, 8)
    whole = math.floor(scaled)
    fraction = scaled - whole

    if 0.5 - _HALF_EPSILON < fraction < 0.5 + _HALF_EPSILON:
        rounded = whole if whole % 2 == 0 else whole + 1
    else:
        rounded = math.floor(scaled + 0.5)

    return rounded / scale
