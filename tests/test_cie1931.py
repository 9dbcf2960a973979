from __future__ import annotations

import numpy as np
import pytest

from colorgraph.color.base import IlluminantMismatchError
from colorgraph.color.cie1931 import Cie1931xy, Cie1931xyY, CieXyz, CieXyzD50, CieXyzD65


def test_xyz_xyy_roundtrip() -> None:
    a = CieXyzD65(0.123, 1.0, 0.234)
    c = CieXyzD65.from_xyY(a.to_xyY())
    assert np.allclose(c.as_array(), a.as_array(), atol=1e-5)


def test_xy_roundtrip_with_luminance_reimposed() -> None:
    a = CieXyzD65(0.25, 0.40, 0.10)
    xy = a.to_xy()
    c = CieXyzD65.from_xy(xy, luminance=a.get_luminance())
    assert np.allclose(c.as_array(), a.as_array(), atol=1e-5)


def test_xy_to_xyz_does_not_renormalize() -> None:
    xyz = Cie1931xy(0.6, 0.3).to_xyz(CieXyzD65)
    assert xyz.y == 1.0
    assert xyz.x == pytest.approx(2.0)


def test_xy_components_sum_to_one() -> None:
    xy = CieXyzD65(0.3, 0.5, 0.2).to_xy()
    assert xy.x + xy.y + xy.z == pytest.approx(1.0)
    assert xy.x == pytest.approx(0.3)
    assert xy.y == pytest.approx(0.5)


def test_zero_xyz_to_xy_is_finite() -> None:
    xy = Cie1931xy.from_xyz(CieXyzD65(0.0, 0.0, 0.0))
    assert np.all(np.isfinite(xy.as_array()))
    assert xy.x == 0.0 and xy.y == 0.0


def test_zero_y_chromaticity_to_xyz_is_finite() -> None:
    xyz = Cie1931xy(0.3, 0.0).to_xyz(CieXyzD65)
    assert np.all(np.isfinite(xyz.as_array()))


def test_xyy_keeps_luminance() -> None:
    xyY = Cie1931xyY.from_xyz(CieXyzD50(0.2, 0.35, 0.1))
    assert xyY.luminance == pytest.approx(0.35)
    assert xyY.xy == Cie1931xy(xyY.x, xyY.y)
    assert isinstance(xyY.to_xyz(CieXyzD50), CieXyzD50)


def test_set_luminance_rescales_all_channels() -> None:
    xyz = CieXyzD65(0.2, 0.4, 0.1)
    xyz.set_luminance(0.8)
    assert np.allclose(xyz.as_array(), [0.4, 0.8, 0.2])
    assert xyz.get_luminance() == pytest.approx(0.8)


def test_set_luminance_on_black_is_noop() -> None:
    xyz = CieXyzD65(0.0, 0.0, 0.0)
    xyz.set_luminance(0.5)
    assert xyz == CieXyzD65(0.0, 0.0, 0.0)

    xyz = CieXyzD65(0.1, 0.0, 0.2)
    xyz.set_luminance(0.5)
    assert xyz == CieXyzD65(0.1, 0.0, 0.2)


def test_differently_tagged_values_are_not_equal() -> None:
    assert CieXyzD65(1.0, 1.0, 1.0) != CieXyzD50(1.0, 1.0, 1.0)
    assert CieXyzD65(1.0, 1.0, 1.0) == CieXyzD65(1.0, 1.0, 1.0)


def test_untagged_xyz_is_rejected() -> None:
    with pytest.raises(TypeError):
        CieXyz(1.0, 1.0, 1.0)


def test_from_array_checks_shape() -> None:
    with pytest.raises(ValueError):
        CieXyzD65.from_array(np.zeros(4))


def test_xyy_cannot_be_retagged_to_another_white() -> None:
    xyY = CieXyzD65(0.25, 0.40, 0.10).to_xyY()
    assert xyY.source is CieXyzD65
    with pytest.raises(IlluminantMismatchError):
        CieXyzD50.from_xyY(xyY)


def test_xyy_defaults_to_its_source_class() -> None:
    xyz = CieXyzD50(0.2, 0.35, 0.1)
    back = xyz.to_xyY().to_xyz()
    assert isinstance(back, CieXyzD50)
    assert np.allclose(back.as_array(), xyz.as_array())


def test_raw_xyy_needs_explicit_target() -> None:
    xyY = Cie1931xyY(0.3, 0.3, 1.0)
    with pytest.raises(TypeError):
        xyY.to_xyz()
    assert isinstance(xyY.to_xyz(CieXyzD65), CieXyzD65)
