from __future__ import annotations

from dataclasses import replace
from typing import TypeVar

import numpy as np

from .base import apply_matrix
from .chromaticities import D60_WHITE, D65_WHITE
from .cie1931 import CieXyz, CieXyzD50, CieXyzD60, CieXyzD65, require_illuminant


# Bradford chromatic adaptation, normalized XYZ (Lindbloom).
XYZ_D65_TO_D50 = np.array(
    [
        [1.0478112, 0.0228866, -0.0501270],
        [0.0295424, 0.9904844, -0.0170491],
        [-0.0092345, 0.0150436, 0.7521316],
    ],
    dtype=np.float64,
)

XYZ_D50_TO_D65 = np.array(
    [
        [0.9555766, -0.0230393, 0.0631636],
        [-0.0282895, 1.0099416, 0.0210077],
        [0.0122982, -0.0204830, 1.3299098],
    ],
    dtype=np.float64,
)

BRADFORD = np.array(
    [
        [0.8951, 0.2664, -0.1614],
        [-0.7502, 1.7135, 0.0367],
        [0.0389, -0.0685, 1.0296],
    ],
    dtype=np.float64,
)


def _white_xyz(white_xy: tuple[float, float]) -> np.ndarray:
    x, y = float(white_xy[0]), float(white_xy[1])
    return np.array([x / y, 1.0, (1.0 - x - y) / y], dtype=np.float64)


def bradford_matrix(src_white_xy: tuple[float, float], dst_white_xy: tuple[float, float]) -> np.ndarray:
    """von Kries scaling in Bradford cone space between two white points."""

    src_lms = BRADFORD @ _white_xyz(src_white_xy)
    dst_lms = BRADFORD @ _white_xyz(dst_white_xy)
    d = np.diag(dst_lms / src_lms)
    return np.linalg.inv(BRADFORD) @ d @ BRADFORD


XYZ_D65_TO_D60 = bradford_matrix(D65_WHITE, D60_WHITE)
XYZ_D60_TO_D65 = np.linalg.inv(XYZ_D65_TO_D60)


def adapt_d65_to_d50(xyz: CieXyzD65) -> CieXyzD50:
    require_illuminant(xyz, CieXyzD65)
    return CieXyzD50.from_array(apply_matrix(XYZ_D65_TO_D50, xyz.as_array()))


def adapt_d50_to_d65(xyz: CieXyzD50) -> CieXyzD65:
    require_illuminant(xyz, CieXyzD50)
    return CieXyzD65.from_array(apply_matrix(XYZ_D50_TO_D65, xyz.as_array()))


def adapt_d65_to_d60(xyz: CieXyzD65) -> CieXyzD60:
    require_illuminant(xyz, CieXyzD65)
    return CieXyzD60.from_array(apply_matrix(XYZ_D65_TO_D60, xyz.as_array()))


def adapt_d60_to_d65(xyz: CieXyzD60) -> CieXyzD65:
    require_illuminant(xyz, CieXyzD60)
    return CieXyzD65.from_array(apply_matrix(XYZ_D60_TO_D65, xyz.as_array()))


def _to_d65(xyz: CieXyz) -> CieXyzD65:
    if isinstance(xyz, CieXyzD65):
        return replace(xyz)
    if isinstance(xyz, CieXyzD50):
        return adapt_d50_to_d65(xyz)
    if isinstance(xyz, CieXyzD60):
        return adapt_d60_to_d65(xyz)
    raise TypeError(f"unsupported XYZ type {type(xyz).__name__}")


_XyzT = TypeVar("_XyzT", bound=CieXyz)


def adapt(xyz: CieXyz, target: type[_XyzT]) -> _XyzT:
    """Adapt ``xyz`` to the reference white of ``target``.

    Pairs without a direct matrix (D50 <-> D60) go through D65.
    """

    if type(xyz) is target:
        return replace(xyz)  # type: ignore[return-value]

    d65 = _to_d65(xyz)
    if target is CieXyzD65:
        return d65  # type: ignore[return-value]
    if target is CieXyzD50:
        return adapt_d65_to_d50(d65)  # type: ignore[return-value]
    if target is CieXyzD60:
        return adapt_d65_to_d60(d65)  # type: ignore[return-value]
    raise TypeError(f"unsupported XYZ target {target.__name__}")
