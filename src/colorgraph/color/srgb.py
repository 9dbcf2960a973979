from __future__ import annotations

from dataclasses import dataclass
import logging
import re

import numpy as np

from .base import apply_matrix, as_vector3
from .cie1931 import CieXyzD65, require_illuminant


logger = logging.getLogger(__name__)

# IEC 61966-2-1, D65, 2 degree observer (Lindbloom precision).
LINEAR_SRGB_TO_XYZ = np.array(
    [
        [0.4124564, 0.3575761, 0.1804375],
        [0.2126729, 0.7151522, 0.0721750],
        [0.0193339, 0.1191920, 0.9503041],
    ],
    dtype=np.float64,
)

XYZ_TO_LINEAR_SRGB = np.array(
    [
        [3.2404542, -1.5371385, -0.4985314],
        [-0.9692660, 1.8760108, 0.0415560],
        [0.0556434, -0.2040259, 1.0572252],
    ],
    dtype=np.float64,
)

# Legacy NTSC-style weighting, not the sRGB luminance row.
BRIGHTNESS_WEIGHTS = np.array([0.299, 0.587, 0.114], dtype=np.float64)
LUMINANCE_WEIGHTS = LINEAR_SRGB_TO_XYZ[1].copy()

_ENCODE_CUT = 0.0031308
_DECODE_CUT = 0.04045
_HEX_RE = re.compile(r"^#?([0-9a-fA-F]{2})([0-9a-fA-F]{2})([0-9a-fA-F]{2})$")


def encode_srgb(linear: np.ndarray) -> np.ndarray:
    """Apply the sRGB transfer function (linear -> gamma encoded).

    Results above 1.0 are clamped to 1.0. Nothing is clamped below: negative
    input stays on the linear segment, so callers wanting display values must
    clip first.
    """

    x = np.asarray(linear, dtype=np.float64)
    with np.errstate(invalid="ignore"):
        high = 1.055 * np.power(x, 1.0 / 2.4) - 0.055
    y = np.where(x <= _ENCODE_CUT, 12.92 * x, high)
    return np.minimum(y, 1.0)


def decode_srgb(encoded: np.ndarray) -> np.ndarray:
    """Inverse of encode_srgb, clamped to 1.0 on overflow."""

    y = np.asarray(encoded, dtype=np.float64)
    with np.errstate(invalid="ignore"):
        high = np.power((y + 0.055) / 1.055, 2.4)
    x = np.where(y <= _DECODE_CUT, y / 12.92, high)
    return np.minimum(x, 1.0)


def quantize_8bit(encoded: np.ndarray) -> np.ndarray:
    x = np.asarray(encoded, dtype=np.float64)
    return np.clip(np.floor(x * 255.0 + 0.5), 0, 255).astype(np.uint8)


def dequantize_8bit(values: np.ndarray) -> np.ndarray:
    return np.asarray(values, dtype=np.float64) / 255.0


def _rescale(rgb: np.ndarray, current: float, target: float, what: str) -> np.ndarray:
    if current == 0.0:
        logger.debug("zero %s left unchanged by rescale", what)
        return rgb
    return rgb * (float(target) / current)


@dataclass
class LinearSrgb:
    """Physically linear sRGB (D65). Scene referred, no clamping."""

    r: float
    g: float
    b: float

    def __post_init__(self) -> None:
        self.r = float(self.r)
        self.g = float(self.g)
        self.b = float(self.b)

    @classmethod
    def from_array(cls, v: np.ndarray) -> LinearSrgb:
        arr = as_vector3(v)
        return cls(float(arr[0]), float(arr[1]), float(arr[2]))

    def as_array(self) -> np.ndarray:
        return np.array([self.r, self.g, self.b], dtype=np.float64)

    def _assign(self, v: np.ndarray) -> None:
        self.r, self.g, self.b = (float(c) for c in v)

    @classmethod
    def from_xyz(cls, xyz: CieXyzD65) -> LinearSrgb:
        require_illuminant(xyz, CieXyzD65)
        return cls.from_array(apply_matrix(XYZ_TO_LINEAR_SRGB, xyz.as_array()))

    def to_xyz(self) -> CieXyzD65:
        return CieXyzD65.from_array(apply_matrix(LINEAR_SRGB_TO_XYZ, self.as_array()))

    @classmethod
    def from_srgb(cls, srgb: Srgb) -> LinearSrgb:
        return cls.from_array(decode_srgb(srgb.as_array()))

    def to_srgb(self) -> Srgb:
        return Srgb.from_array(encode_srgb(self.as_array()))

    def get_brightness(self) -> float:
        return float(BRIGHTNESS_WEIGHTS @ self.as_array())

    def set_brightness(self, brightness: float) -> None:
        # May push channels above 1.0; see set_max_brightness.
        self._assign(_rescale(self.as_array(), self.get_brightness(), brightness, "brightness"))

    def get_luminance(self) -> float:
        return float(LUMINANCE_WEIGHTS @ self.as_array())

    def set_luminance(self, luminance: float) -> None:
        self._assign(_rescale(self.as_array(), self.get_luminance(), luminance, "luminance"))

    def set_max_brightness(self) -> None:
        """Scale so the largest channel is exactly 1.0, keeping channel ratios."""

        v = self.as_array()
        peak = float(np.max(v))
        if peak <= 0.0:
            logger.debug("no positive channel; set_max_brightness left value unchanged")
            return
        self._assign(v / peak)


@dataclass
class Srgb:
    """Gamma-encoded sRGB, display referred."""

    r: float
    g: float
    b: float

    def __post_init__(self) -> None:
        self.r = float(self.r)
        self.g = float(self.g)
        self.b = float(self.b)

    @classmethod
    def from_array(cls, v: np.ndarray) -> Srgb:
        arr = as_vector3(v)
        return cls(float(arr[0]), float(arr[1]), float(arr[2]))

    def as_array(self) -> np.ndarray:
        return np.array([self.r, self.g, self.b], dtype=np.float64)

    @classmethod
    def from_linear(cls, linear: LinearSrgb) -> Srgb:
        return linear.to_srgb()

    def to_linear(self) -> LinearSrgb:
        return LinearSrgb.from_srgb(self)

    @classmethod
    def from_srgb24(cls, srgb24: Srgb24) -> Srgb:
        return srgb24.to_srgb()

    def to_srgb24(self) -> Srgb24:
        return Srgb24.from_srgb(self)


@dataclass
class Srgb24:
    """8-bit sRGB. Quantization rounds to nearest on the 0..255 scale."""

    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        for name in ("r", "g", "b"):
            value = int(getattr(self, name))
            if not 0 <= value <= 255:
                raise ValueError(f"{name} must be in [0, 255], got {value}")
            setattr(self, name, value)

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)

    @classmethod
    def from_srgb(cls, srgb: Srgb) -> Srgb24:
        q = quantize_8bit(srgb.as_array())
        return cls(int(q[0]), int(q[1]), int(q[2]))

    def to_srgb(self) -> Srgb:
        return Srgb.from_array(dequantize_8bit(np.array(self.as_tuple())))

    def to_hex(self) -> str:
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"

    @classmethod
    def from_hex(cls, text: str) -> Srgb24:
        match = _HEX_RE.match(text.strip())
        if match is None:
            raise ValueError(f"invalid hex color: {text!r}")
        return cls(*(int(part, 16) for part in match.groups()))
