from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from .base import apply_matrix, as_vector3
from .cie1931 import CieXyzD60, require_illuminant


# ACES2065-1 (AP0) <-> CIE XYZ under the ACES white (D60), SMPTE ST 2065-1.
XYZ_TO_AP0 = np.array(
    [
        [1.0498110175, 0.0000000000, -0.0000974845],
        [-0.4959030231, 1.3733130458, 0.0982400361],
        [0.0000000000, 0.0000000000, 0.9912520182],
    ],
    dtype=np.float64,
)

AP0_TO_XYZ = np.array(
    [
        [0.9525523959, 0.0000000000, 0.0000936786],
        [0.3439664498, 0.7281660966, -0.0721325464],
        [0.0000000000, 0.0000000000, 1.0088251844],
    ],
    dtype=np.float64,
)


@dataclass
class Aces:
    """ACES2065-1 linear RGB in AP0 primaries.

    Photometrically linear and scene referred: a perfect white diffuser is
    (1, 1, 1), 18% grey is (0.18, 0.18, 0.18) and values outside [0, 1] are
    valid.
    """

    r: float
    g: float
    b: float

    def __post_init__(self) -> None:
        self.r = float(self.r)
        self.g = float(self.g)
        self.b = float(self.b)

    @classmethod
    def from_array(cls, v: np.ndarray) -> Aces:
        arr = as_vector3(v)
        return cls(float(arr[0]), float(arr[1]), float(arr[2]))

    def as_array(self) -> np.ndarray:
        return np.array([self.r, self.g, self.b], dtype=np.float64)

    @classmethod
    def from_xyz(cls, xyz: CieXyzD60) -> Aces:
        require_illuminant(xyz, CieXyzD60)
        return cls.from_array(apply_matrix(XYZ_TO_AP0, xyz.as_array()))

    def to_xyz(self) -> CieXyzD60:
        return CieXyzD60.from_array(apply_matrix(AP0_TO_XYZ, self.as_array()))
