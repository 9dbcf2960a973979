from __future__ import annotations

import json
from pathlib import Path

import pytest

from colorgraph import cli


def _run_json(capsys: pytest.CaptureFixture[str], argv: list[str]) -> dict:
    assert cli.main([*argv, "--json"]) == 0
    return json.loads(capsys.readouterr().out)


def test_temperature_json(capsys: pytest.CaptureFixture[str]) -> None:
    payload = _run_json(capsys, ["temperature", "10000"])
    assert payload["kelvin"] == 10000
    assert payload["x"] == pytest.approx(0.2806, abs=2e-4)
    assert payload["y"] == pytest.approx(0.2883, abs=2e-4)
    assert max(payload["srgb24"]) == 255
    assert payload["hex"].startswith("#")


def test_temperature_out_of_range(capsys: pytest.CaptureFixture[str]) -> None:
    assert cli.main(["temperature", "1666"]) == 2
    assert "outside" in capsys.readouterr().err


def test_xyz_to_srgb_json(capsys: pytest.CaptureFixture[str]) -> None:
    payload = _run_json(capsys, ["xyz-to-srgb", "0.25", "0.40", "0.10"])
    assert payload["srgb24"] == [106, 190, 55]
    assert payload["hex"] == "#6abe37"
    assert payload["input"]["illuminant"] == "D65"


def test_xyz_to_srgb_adapts_d50_input(capsys: pytest.CaptureFixture[str]) -> None:
    payload = _run_json(capsys, ["xyz-to-srgb", "0.9642", "1.0", "0.8252", "--illuminant", "d50"])
    assert payload["srgb24"] == [255, 255, 255]


def test_adapt_text_output(capsys: pytest.CaptureFixture[str]) -> None:
    assert cli.main(["adapt", "0.25", "0.40", "0.10", "--from", "d65", "--to", "d50"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("D65 (0.25, 0.4, 0.1) -> D50")


def test_magnitude_with_white_point(capsys: pytest.CaptureFixture[str]) -> None:
    payload = _run_json(capsys, ["magnitude", "0", "--white-point", "1e-3"])
    assert payload["brightness"] == 1.0
    assert payload["irradiance_w_m2"] == pytest.approx(1.979e-3, rel=1e-3)
    assert payload["color_level"] == 1.0


def test_magnitude_from_brightness(capsys: pytest.CaptureFixture[str]) -> None:
    payload = _run_json(capsys, ["magnitude", "--brightness", "0.01"])
    assert payload["magnitude"] == pytest.approx(5.0)
    assert "color_level" not in payload


def test_magnitude_needs_exactly_one_input(capsys: pytest.CaptureFixture[str]) -> None:
    assert cli.main(["magnitude"]) == 1
    assert "error:" in capsys.readouterr().err


def test_color_level_uses_config(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    cfg_file = tmp_path / "config.yaml"
    cfg_file.write_text("display:\n  white_point: 100.0\n  contrast_ratio: 10\n", encoding="utf-8")

    payload = _run_json(capsys, ["color-level", "55", "--config", str(cfg_file)])
    assert payload["color_level"] == pytest.approx(0.5)
    assert payload["contrast_ratio"] == 10.0


def test_color_level_requires_white_point(capsys: pytest.CaptureFixture[str]) -> None:
    assert cli.main(["color-level", "1.0"]) == 1
    assert "white-point" in capsys.readouterr().err
