from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from .base import apply_matrix, as_vector3
from .cie1931 import CieXyzD65, require_illuminant


# CIECAM02 CAT02.
XYZ_TO_LMS = np.array(
    [
        [0.7328, 0.4296, -0.1624],
        [-0.7036, 1.6975, 0.0061],
        [0.0030, 0.0136, 0.9834],
    ],
    dtype=np.float64,
)

LMS_TO_XYZ = np.array(
    [
        [1.0961238, -0.278869, 0.18274519],
        [0.45436904, 0.47353318, 0.07209781],
        [-0.0096276095, -0.0056980313, 1.0153257],
    ],
    dtype=np.float64,
)


@dataclass
class Lms:
    """Cone response space, used when moving between white points."""

    l: float  # noqa: E741
    m: float
    s: float

    def __post_init__(self) -> None:
        self.l = float(self.l)
        self.m = float(self.m)
        self.s = float(self.s)

    @classmethod
    def from_array(cls, v: np.ndarray) -> Lms:
        arr = as_vector3(v)
        return cls(float(arr[0]), float(arr[1]), float(arr[2]))

    def as_array(self) -> np.ndarray:
        return np.array([self.l, self.m, self.s], dtype=np.float64)

    @classmethod
    def from_xyz(cls, xyz: CieXyzD65) -> Lms:
        require_illuminant(xyz, CieXyzD65)
        return cls.from_array(apply_matrix(XYZ_TO_LMS, xyz.as_array()))

    def to_xyz(self) -> CieXyzD65:
        return CieXyzD65.from_array(apply_matrix(LMS_TO_XYZ, self.as_array()))
