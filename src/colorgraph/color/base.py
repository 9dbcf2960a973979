from __future__ import annotations

import numpy as np


# Substituted for exactly-zero denominators in xy <-> XYZ conversions.
XY_EPSILON = 1e-10


class ColorimetryError(Exception):
    pass


class IlluminantMismatchError(ColorimetryError, TypeError):
    pass


def apply_matrix(m: np.ndarray, v: np.ndarray) -> np.ndarray:
    """Multiply a 3x3 matrix by one vector or a stack of vectors (..., 3)."""

    x = np.asarray(v, dtype=np.float64)
    if x.shape[-1] != 3:
        raise ValueError(f"expected last dimension 3, got {x.shape[-1]}")
    return np.einsum("ij,...j->...i", m, x, optimize=True)


def guard_zero(value: float, eps: float = XY_EPSILON) -> float:
    return eps if value == 0.0 else value


def as_vector3(v: np.ndarray) -> np.ndarray:
    arr = np.asarray(v, dtype=np.float64)
    if arr.shape != (3,):
        raise ValueError(f"expected shape (3,), got {arr.shape}")
    return arr
