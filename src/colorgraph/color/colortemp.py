from __future__ import annotations

from dataclasses import dataclass
import logging

from .cie1931 import Cie1931xy


logger = logging.getLogger(__name__)

MIN_KELVIN = 1667
MAX_KELVIN = 25000


@dataclass(frozen=True)
class ColorTemp:
    """Blackbody color temperature in Kelvin."""

    kelvin: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "kelvin", int(self.kelvin))

    def is_valid(self) -> bool:
        return MIN_KELVIN <= self.kelvin <= MAX_KELVIN

    def to_cie1931xy(self) -> Cie1931xy | None:
        """Chromaticity on the Planckian locus.

        Uses the cubic spline approximation of Kim et al. (as given on the
        Wikipedia "Planckian locus" page). The fit is only valid between
        1667K and 25000K; outside that range ``None`` is returned.
        """

        if not self.is_valid():
            logger.debug("color temperature %dK outside [%d, %d]", self.kelvin, MIN_KELVIN, MAX_KELVIN)
            return None

        ct = float(self.kelvin)

        if ct < 4000.0:
            x = (
                -0.2661239 * 10.0**9 / ct**3
                - 0.2343580 * 10.0**6 / ct**2
                + 0.8776956 * 10.0**3 / ct
                + 0.179910
            )
        else:
            x = (
                -3.0258469 * 10.0**9 / ct**3
                + 2.1070379 * 10.0**6 / ct**2
                + 0.2226347 * 10.0**3 / ct
                + 0.240390
            )

        if ct < 2222.0:
            y = -1.1063814 * x**3 - 1.34811020 * x**2 + 2.18444832 * x - 0.20219683
        elif ct < 4000.0:
            y = -0.9549476 * x**3 - 1.37418593 * x**2 + 2.09137015 * x - 0.16748867
        else:
            y = 3.0817580 * x**3 - 5.87338670 * x**2 + 3.75112997 * x - 0.37001483

        return Cie1931xy(x, y)
