"""Complex amplitude arithmetic.

Scalar-or-array helpers used by every kernel. All three accept Python
complex numbers or complex numpy arrays and broadcast like numpy does.
"""

from __future__ import annotations

import numpy as np


def complex_multiply(a, b):
    """(a.re*b.re - a.im*b.im) + (a.re*b.im + a.im*b.re)i"""
    return np.multiply(a, b)


def complex_add(a, b):
    """Componentwise sum."""
    return np.add(a, b)


def magnitude_squared(a):
    """|a|^2 = a.re^2 + a.im^2, returned as float (or float array)."""
    a = np.asarray(a)
    return a.real * a.real + a.imag * a.imag
