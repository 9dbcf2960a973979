from __future__ import annotations

from dataclasses import dataclass
import math

import numpy as np


# 100 (cm/m) * 100 (cm/m) * 1e-7 (J/erg) / (c / 550nm), i.e. AB flux density
# per Hz turned into W/m^2 at green.
AB_IRRADIANCE_FACTOR = 5.45077e16


def _pow10(exponent: float) -> float:
    # Very bright magnitudes overflow to inf instead of raising.
    with np.errstate(over="ignore"):
        return float(np.power(10.0, exponent))


@dataclass(frozen=True)
class StarMagnitude:
    magnitude: float

    def to_brightness(self) -> float:
        return _pow10(-0.4 * self.magnitude)

    @classmethod
    def from_brightness(cls, brightness: float) -> StarMagnitude:
        if brightness <= 0.0:
            raise ValueError(f"brightness must be positive, got {brightness}")
        return cls(-2.5 * math.log10(brightness))

    def irradiance(self) -> float:
        """Irradiance in W/m^2 from the AB magnitude definition.

        m(AB) = -2.5 log10(f) - 48.60 with f in erg s^-1 cm^-2 Hz^-1.
        """

        with np.errstate(over="ignore"):
            return float(AB_IRRADIANCE_FACTOR * np.float64(_pow10((self.magnitude + 48.60) / -2.5)))
