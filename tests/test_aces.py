from __future__ import annotations

import numpy as np
import pytest

from colorgraph.color.aces import AP0_TO_XYZ, XYZ_TO_AP0, Aces
from colorgraph.color.adaptation import adapt_d65_to_d60
from colorgraph.color.base import IlluminantMismatchError
from colorgraph.color.chromaticities import D60_WHITE
from colorgraph.color.cie1931 import CieXyzD60, CieXyzD65
from colorgraph.color.srgb import LinearSrgb


def test_matrices_are_inverses() -> None:
    assert np.allclose(XYZ_TO_AP0 @ AP0_TO_XYZ, np.eye(3), atol=1e-8)


def test_aces_to_from() -> None:
    a = Aces(0.123, 1.0, 0.234)
    c = Aces.from_xyz(a.to_xyz())
    assert np.allclose(c.as_array(), a.as_array(), atol=1e-6)


def test_xyz_d60_roundtrip() -> None:
    a = CieXyzD60(0.25, 0.40, 0.10)
    c = Aces.from_xyz(a).to_xyz()
    assert isinstance(c, CieXyzD60)
    assert np.allclose(c.as_array(), a.as_array(), atol=1e-5)


def test_aces_white_is_d60() -> None:
    xy = Aces(1.0, 1.0, 1.0).to_xyz().to_xy()
    assert np.allclose(xy.as_array(), D60_WHITE, atol=1e-5)


def test_aces_requires_d60() -> None:
    with pytest.raises(IlluminantMismatchError):
        Aces.from_xyz(CieXyzD65(0.25, 0.40, 0.10))  # type: ignore[arg-type]


def test_srgb_grey_reaches_aces_grey() -> None:
    grey = LinearSrgb(0.18, 0.18, 0.18)
    aces = Aces.from_xyz(adapt_d65_to_d60(grey.to_xyz()))
    assert np.allclose(aces.as_array(), [0.18, 0.18, 0.18], atol=1e-3)


def test_from_array_rejects_wrong_shape() -> None:
    with pytest.raises(ValueError):
        Aces.from_array(np.zeros(2))
