from .aces import Aces
from .adaptation import adapt, adapt_d50_to_d65, adapt_d60_to_d65, adapt_d65_to_d50, adapt_d65_to_d60
from .base import ColorimetryError, IlluminantMismatchError
from .chromaticities import (
    ACES_AP0_CHROMATICITIES,
    ACES_AP1_CHROMATICITIES,
    REC2020_CHROMATICITIES,
    Chromaticity,
)
from .cie1931 import D50, D60, D65, Cie1931xy, Cie1931xyY, CieXyz, CieXyzD50, CieXyzD60, CieXyzD65
from .colortemp import ColorTemp
from .display import color_level
from .lms import Lms
from .srgb import LinearSrgb, Srgb, Srgb24, decode_srgb, encode_srgb
from .star_magnitude import StarMagnitude

__all__ = [
    "ACES_AP0_CHROMATICITIES",
    "ACES_AP1_CHROMATICITIES",
    "REC2020_CHROMATICITIES",
    "Aces",
    "Chromaticity",
    "Cie1931xy",
    "Cie1931xyY",
    "CieXyz",
    "CieXyzD50",
    "CieXyzD60",
    "CieXyzD65",
    "ColorTemp",
    "ColorimetryError",
    "D50",
    "D60",
    "D65",
    "IlluminantMismatchError",
    "LinearSrgb",
    "Lms",
    "Srgb",
    "Srgb24",
    "StarMagnitude",
    "adapt",
    "adapt_d50_to_d65",
    "adapt_d60_to_d65",
    "adapt_d65_to_d50",
    "adapt_d65_to_d60",
    "color_level",
    "decode_srgb",
    "encode_srgb",
]
