from __future__ import annotations

import math

import numpy as np
import pytest

from colorgraph.color.star_magnitude import StarMagnitude


def test_magnitude_brightness_roundtrip() -> None:
    m = StarMagnitude(4.234)
    m2 = StarMagnitude.from_brightness(m.to_brightness())
    assert abs(m2.magnitude - 4.234) < 1e-7


def test_brightness_reference_points() -> None:
    assert StarMagnitude(0.0).to_brightness() == 1.0
    assert StarMagnitude(5.0).to_brightness() == pytest.approx(0.01)
    assert StarMagnitude.from_brightness(100.0).magnitude == pytest.approx(-5.0)


def test_brightness_strictly_decreasing_in_magnitude() -> None:
    mags = np.linspace(-30.0, 30.0, 601)
    brightness = [StarMagnitude(float(m)).to_brightness() for m in mags]
    assert all(b < a for a, b in zip(brightness, brightness[1:]))


def test_from_brightness_rejects_non_positive() -> None:
    with pytest.raises(ValueError):
        StarMagnitude.from_brightness(0.0)
    with pytest.raises(ValueError):
        StarMagnitude.from_brightness(-1.0)


def test_irradiance_ab_magnitude() -> None:
    assert StarMagnitude(0.0).irradiance() == pytest.approx(5.45077e16 * 10.0 ** (48.6 / -2.5), rel=1e-12)
    assert StarMagnitude(0.0).irradiance() == pytest.approx(1.979e-3, rel=1e-3)


def test_irradiance_scales_like_brightness() -> None:
    base = StarMagnitude(0.0).irradiance()
    m = StarMagnitude(2.5)
    assert m.irradiance() / base == pytest.approx(m.to_brightness(), rel=1e-12)


def test_very_bright_magnitudes_overflow_to_inf() -> None:
    assert math.isinf(StarMagnitude(-1000.0).to_brightness())
    assert math.isinf(StarMagnitude(-900.0).irradiance())
    assert StarMagnitude(1000.0).to_brightness() == 0.0
