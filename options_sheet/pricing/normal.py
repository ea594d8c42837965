"""
Standard normal distribution functions.

normal_cdf uses the Zelen & Severo polynomial approximation
(Abramowitz & Stegun 26.2.17), absolute error below 7.5e-8.
"""

import numpy as np
from typing import Union

ArrayLike = Union[float, np.ndarray]

# Abramowitz & Stegun 26.2.17
_P = 0.2316419
_B = (0.319381530, -0.356563782, 1.781477937, -1.821255978, 1.330274429)
_INV_SQRT_2PI = 1.0 / np.sqrt(2.0 * np.pi)


def normal_pdf(x: ArrayLike) -> ArrayLike:
    """Standard normal density φ(x)."""
    x = np.asarray(x, dtype=float)
    pdf = _INV_SQRT_2PI * np.exp(-0.5 * x**2)
    return float(pdf) if pdf.ndim == 0 else pdf


def normal_cdf(x: ArrayLike) -> ArrayLike:
    """
    Standard normal cumulative distribution function Φ(x).

    Args:
        x: Point(s) at which to evaluate; scalars and numpy arrays are accepted

    Returns:
        Φ(x) in [0, 1], a float for scalar input and an array otherwise
    """
    x = np.asarray(x, dtype=float)
    t = 1.0 / (1.0 + _P * np.abs(x))
    b1, b2, b3, b4, b5 = _B
    poly = t * (b1 + t * (b2 + t * (b3 + t * (b4 + t * b5))))
    tail = _INV_SQRT_2PI * np.exp(-0.5 * x**2) * poly

    cdf = np.where(x > 0, 1.0 - tail, tail)
    return float(cdf) if cdf.ndim == 0 else cdf
