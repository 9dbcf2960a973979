from __future__ import annotations

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class Chromaticity:
    """Primaries and white point of a gamut as CIE 1931 (x, y) pairs."""

    red: tuple[float, float]
    green: tuple[float, float]
    blue: tuple[float, float]
    white: tuple[float, float]

    def primaries(self) -> np.ndarray:
        return np.array([self.red, self.green, self.blue], dtype=np.float64)

    def white_xy(self) -> np.ndarray:
        return np.array(self.white, dtype=np.float64)


# CIE standard illuminant white points (2 degree observer).
D50_WHITE = (0.34567, 0.35850)
D60_WHITE = (0.32168, 0.33767)  # ACES white
D65_WHITE = (0.3127, 0.3290)

# ACES2065-1 (SMPTE ST 2065-1). Covers the whole spectral locus.
ACES_AP0_CHROMATICITIES = Chromaticity(
    red=(0.73470, 0.26530),
    green=(0.00000, 1.00000),
    blue=(0.00010, -0.07700),
    white=D60_WHITE,
)

# ACEScg / ACEScct working gamut.
ACES_AP1_CHROMATICITIES = Chromaticity(
    red=(0.713, 0.293),
    green=(0.165, 0.830),
    blue=(0.128, 0.044),
    white=D60_WHITE,
)

# ITU-R BT.2020.
REC2020_CHROMATICITIES = Chromaticity(
    red=(0.708, 0.292),
    green=(0.170, 0.797),
    blue=(0.131, 0.046),
    white=(0.3217, 0.3290),
)
