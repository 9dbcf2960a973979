from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import ClassVar, TypeVar

import numpy as np

from .base import XY_EPSILON, IlluminantMismatchError, as_vector3, guard_zero
from .chromaticities import D50_WHITE, D60_WHITE, D65_WHITE


logger = logging.getLogger(__name__)


class Illuminant:
    """Marker for the reference white an XYZ value is expressed against."""

    name: ClassVar[str]
    white: ClassVar[tuple[float, float]]


class D50(Illuminant):
    name = "D50"
    white = D50_WHITE


class D60(Illuminant):
    name = "D60"
    white = D60_WHITE


class D65(Illuminant):
    name = "D65"
    white = D65_WHITE


_XyzT = TypeVar("_XyzT", bound="CieXyz")


@dataclass
class CieXyz:
    """CIE 1931 XYZ tristimulus value relative to a reference white.

    The reference white is a property of the subclass (``CieXyzD50``,
    ``CieXyzD60``, ``CieXyzD65``), never of the instance. Values with
    different whites do not compare equal and every conversion checks the
    class of its input, so moving between whites always goes through
    ``colorgraph.color.adaptation``.
    """

    illuminant: ClassVar[type[Illuminant]]

    x: float
    y: float
    z: float

    def __post_init__(self) -> None:
        if not hasattr(type(self), "illuminant"):
            raise TypeError("CieXyz needs an illuminant; use CieXyzD50, CieXyzD60 or CieXyzD65")
        self.x = float(self.x)
        self.y = float(self.y)
        self.z = float(self.z)

    @classmethod
    def from_array(cls: type[_XyzT], v: np.ndarray) -> _XyzT:
        arr = as_vector3(v)
        return cls(float(arr[0]), float(arr[1]), float(arr[2]))

    def as_array(self) -> np.ndarray:
        return np.array([self.x, self.y, self.z], dtype=np.float64)

    def get_luminance(self) -> float:
        return self.y

    def set_luminance(self, luminance: float) -> None:
        """Rescale X, Y and Z so that Y becomes ``luminance``.

        Black has no chromaticity to preserve, so a value whose Y is exactly
        zero is left unchanged.
        """

        if self.y == 0.0:
            logger.debug("zero luminance %s left unchanged by set_luminance", type(self).__name__)
            return
        scale = float(luminance) / self.y
        self.x *= scale
        self.y *= scale
        self.z *= scale

    def to_xy(self) -> Cie1931xy:
        return Cie1931xy.from_xyz(self)

    def to_xyY(self) -> Cie1931xyY:
        return Cie1931xyY.from_xyz(self)

    @classmethod
    def from_xy(cls: type[_XyzT], xy: Cie1931xy, luminance: float = 1.0) -> _XyzT:
        return xy.to_xyz(cls, luminance=luminance)

    @classmethod
    def from_xyY(cls: type[_XyzT], xyY: Cie1931xyY) -> _XyzT:
        return xyY.to_xyz(cls)


@dataclass
class CieXyzD50(CieXyz):
    illuminant: ClassVar[type[Illuminant]] = D50


@dataclass
class CieXyzD60(CieXyz):
    illuminant: ClassVar[type[Illuminant]] = D60


@dataclass
class CieXyzD65(CieXyz):
    illuminant: ClassVar[type[Illuminant]] = D65


def require_illuminant(value: CieXyz, expected: type[CieXyz]) -> None:
    if not isinstance(value, expected):
        raise IlluminantMismatchError(
            f"expected {expected.__name__} ({expected.illuminant.name}), got {type(value).__name__}; "
            "adapt the value to the matching white first"
        )


def _chromaticity(x: float, y: float, z: float) -> tuple[float, float]:
    s = guard_zero(x + y + z, XY_EPSILON)
    return x / s, y / s


def _from_chromaticity(x: float, y: float, luminance: float) -> tuple[float, float, float]:
    yy = guard_zero(y, XY_EPSILON)
    return x * luminance / yy, luminance, (1.0 - x - y) * luminance / yy


@dataclass
class Cie1931xy:
    """Chromaticity coordinates without luminance.

    Not tied to a reference white: converting back to XYZ names the tagged
    class to produce. No renormalization is applied, so X or Z may exceed 1.0.
    """

    x: float
    y: float

    def __post_init__(self) -> None:
        self.x = float(self.x)
        self.y = float(self.y)

    @property
    def z(self) -> float:
        return 1.0 - self.x - self.y

    def as_array(self) -> np.ndarray:
        return np.array([self.x, self.y], dtype=np.float64)

    @classmethod
    def from_xyz(cls, xyz: CieXyz) -> Cie1931xy:
        x, y = _chromaticity(xyz.x, xyz.y, xyz.z)
        return cls(x, y)

    def to_xyz(self, target: type[_XyzT], luminance: float = 1.0) -> _XyzT:
        return target(*_from_chromaticity(self.x, self.y, float(luminance)))


@dataclass
class Cie1931xyY:
    """Chromaticity plus luminance.

    Unlike ``Cie1931xy`` this holds everything needed to rebuild X, Y and Z,
    so a value taken from an XYZ remembers that XYZ class in ``source`` and
    only converts back to it. ``source=None`` marks a value built from raw
    numbers, which needs an explicit target.
    """

    x: float
    y: float
    luminance: float
    source: type[CieXyz] | None = None

    def __post_init__(self) -> None:
        self.x = float(self.x)
        self.y = float(self.y)
        self.luminance = float(self.luminance)

    @property
    def z(self) -> float:
        return 1.0 - self.x - self.y

    @property
    def xy(self) -> Cie1931xy:
        return Cie1931xy(self.x, self.y)

    def as_array(self) -> np.ndarray:
        return np.array([self.x, self.y, self.luminance], dtype=np.float64)

    @classmethod
    def from_xyz(cls, xyz: CieXyz) -> Cie1931xyY:
        x, y = _chromaticity(xyz.x, xyz.y, xyz.z)
        return cls(x, y, xyz.y, source=type(xyz))

    def to_xyz(self, target: type[_XyzT] | None = None) -> _XyzT:
        if target is None:
            if self.source is None:
                raise TypeError("xyY value has no source illuminant; name the XYZ class to produce")
            target = self.source  # type: ignore[assignment]
        elif self.source is not None and target is not self.source:
            raise IlluminantMismatchError(
                f"xyY value came from {self.source.__name__} ({self.source.illuminant.name}), "
                f"not {target.__name__} ({target.illuminant.name}); adapt the XYZ value first"
            )
        return target(*_from_chromaticity(self.x, self.y, self.luminance))  # type: ignore[misc]
