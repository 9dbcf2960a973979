from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any

import numpy as np

from colorgraph import __version__
from colorgraph.color import (
    CieXyz,
    CieXyzD50,
    CieXyzD60,
    CieXyzD65,
    ColorTemp,
    LinearSrgb,
    StarMagnitude,
    adapt,
    color_level,
)
from colorgraph.color.colortemp import MAX_KELVIN, MIN_KELVIN
from colorgraph.config import AppConfig, default_config, load_config
from colorgraph.utils.formatting import format_float, format_scientific, format_triplet
from colorgraph.utils.logging_utils import configure_logging


logger = logging.getLogger(__name__)

_XYZ_TYPES: dict[str, type[CieXyz]] = {
    "d50": CieXyzD50,
    "d60": CieXyzD60,
    "d65": CieXyzD65,
}


def _add_common(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--config", default=None, help="Optional path to YAML config")
    parser.add_argument("--json", action="store_true", help="Emit machine-readable JSON")


def _add_xyz(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("X", type=float)
    parser.add_argument("Y", type=float)
    parser.add_argument("Z", type=float)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="colorgraph")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    sub = parser.add_subparsers(dest="command", required=True)

    temp = sub.add_parser("temperature", help="Blackbody chromaticity for a color temperature")
    temp.add_argument("kelvin", type=int, help=f"Color temperature in Kelvin ({MIN_KELVIN}..{MAX_KELVIN})")
    _add_common(temp)

    to_srgb = sub.add_parser("xyz-to-srgb", help="Convert CIE XYZ to linear, encoded and 8-bit sRGB")
    _add_xyz(to_srgb)
    to_srgb.add_argument(
        "--illuminant",
        choices=sorted(_XYZ_TYPES),
        default="d65",
        help="Reference white of the input XYZ (adapted to D65 first)",
    )
    _add_common(to_srgb)

    adapt_cmd = sub.add_parser("adapt", help="Bradford chromatic adaptation between reference whites")
    _add_xyz(adapt_cmd)
    adapt_cmd.add_argument("--from", dest="source", choices=sorted(_XYZ_TYPES), required=True)
    adapt_cmd.add_argument("--to", dest="target", choices=sorted(_XYZ_TYPES), required=True)
    _add_common(adapt_cmd)

    mag = sub.add_parser("magnitude", help="Star magnitude to brightness and irradiance")
    mag.add_argument("magnitude", nargs="?", type=float, default=None, help="Apparent magnitude")
    mag.add_argument("--brightness", type=float, default=None, help="Relative brightness instead of magnitude")
    mag.add_argument("--white-point", type=float, default=None, help="Irradiance mapped to display level 1.0")
    _add_common(mag)

    level = sub.add_parser("color-level", help="Map an irradiance to a [0, 1] display level")
    level.add_argument("irradiance", type=float)
    level.add_argument("--white-point", type=float, default=None, help="Irradiance mapped to 1.0")
    level.add_argument("--contrast-ratio", type=float, default=None, help="Simulated contrast ratio")
    _add_common(level)

    return parser


def _load(args: argparse.Namespace) -> AppConfig:
    config = load_config(args.config) if args.config else default_config()
    configure_logging(config.log_level, config.log_file)
    return config


def _emit(args: argparse.Namespace, payload: dict[str, Any], lines: list[str]) -> None:
    if args.json:
        print(json.dumps(payload, indent=2))
        return
    for line in lines:
        print(line)


def _cmd_temperature(args: argparse.Namespace) -> int:
    config = _load(args)
    p = config.output.precision

    temp = ColorTemp(args.kelvin)
    xy = temp.to_cie1931xy()
    if xy is None:
        print(f"error: {temp.kelvin}K is outside [{MIN_KELVIN}, {MAX_KELVIN}]", file=sys.stderr)
        return 2

    linear = LinearSrgb.from_xyz(CieXyzD65.from_xy(xy, luminance=1.0))
    # Out-of-gamut channels are negative; clip before normalizing for display.
    linear = LinearSrgb.from_array(np.maximum(linear.as_array(), 0.0))
    linear.set_max_brightness()
    preview = linear.to_srgb().to_srgb24()

    payload = {
        "kelvin": temp.kelvin,
        "x": xy.x,
        "y": xy.y,
        "srgb24": list(preview.as_tuple()),
        "hex": preview.to_hex(),
    }
    _emit(
        args,
        payload,
        [
            f"Temperature: {temp.kelvin}K",
            f"Chromaticity xy: {format_triplet((xy.x, xy.y), p)}",
            f"sRGB preview: {preview.to_hex()} {preview.as_tuple()}",
        ],
    )
    return 0


def _cmd_xyz_to_srgb(args: argparse.Namespace) -> int:
    config = _load(args)
    p = config.output.precision

    xyz = _XYZ_TYPES[args.illuminant](args.X, args.Y, args.Z)
    d65 = adapt(xyz, CieXyzD65)
    linear = LinearSrgb.from_xyz(d65)
    encoded = linear.to_srgb()
    srgb24 = encoded.to_srgb24()

    payload = {
        "input": {"illuminant": xyz.illuminant.name, "xyz": xyz.as_array().tolist()},
        "xyz_d65": d65.as_array().tolist(),
        "linear_srgb": linear.as_array().tolist(),
        "srgb": encoded.as_array().tolist(),
        "srgb24": list(srgb24.as_tuple()),
        "hex": srgb24.to_hex(),
        "luminance": linear.get_luminance(),
    }
    _emit(
        args,
        payload,
        [
            f"XYZ ({xyz.illuminant.name}): {format_triplet(xyz.as_array(), p)}",
            f"Linear sRGB: {format_triplet(linear.as_array(), p)}",
            f"sRGB: {format_triplet(encoded.as_array(), p)}",
            f"sRGB 8-bit: {srgb24.as_tuple()} {srgb24.to_hex()}",
        ],
    )
    return 0


def _cmd_adapt(args: argparse.Namespace) -> int:
    config = _load(args)
    p = config.output.precision

    xyz = _XYZ_TYPES[args.source](args.X, args.Y, args.Z)
    out = adapt(xyz, _XYZ_TYPES[args.target])

    payload = {
        "from": xyz.illuminant.name,
        "to": out.illuminant.name,
        "input": xyz.as_array().tolist(),
        "output": out.as_array().tolist(),
    }
    _emit(
        args,
        payload,
        [f"{xyz.illuminant.name} {format_triplet(xyz.as_array(), p)} -> {out.illuminant.name} {format_triplet(out.as_array(), p)}"],
    )
    return 0


def _cmd_magnitude(args: argparse.Namespace) -> int:
    config = _load(args)
    p = config.output.precision

    if (args.magnitude is None) == (args.brightness is None):
        raise ValueError("give either a magnitude or --brightness")
    if args.brightness is not None:
        mag = StarMagnitude.from_brightness(args.brightness)
    else:
        mag = StarMagnitude(args.magnitude)

    irradiance = mag.irradiance()
    payload: dict[str, Any] = {
        "magnitude": mag.magnitude,
        "brightness": mag.to_brightness(),
        "irradiance_w_m2": irradiance,
    }
    lines = [
        f"Magnitude: {format_float(mag.magnitude, p)}",
        f"Brightness: {format_scientific(mag.to_brightness(), p)}",
        f"Irradiance: {format_scientific(irradiance, p)} W/m^2",
    ]

    white_point = args.white_point if args.white_point is not None else config.display.white_point
    if white_point is not None:
        level = color_level(irradiance, white_point, config.display.contrast_ratio)
        payload["color_level"] = level
        lines.append(f"Display level: {format_float(level, p)}")

    _emit(args, payload, lines)
    return 0


def _cmd_color_level(args: argparse.Namespace) -> int:
    config = _load(args)
    p = config.output.precision

    white_point = args.white_point if args.white_point is not None else config.display.white_point
    if white_point is None:
        raise ValueError("--white-point is required unless display.white_point is set in the config")
    contrast_ratio = args.contrast_ratio if args.contrast_ratio is not None else config.display.contrast_ratio

    level = color_level(args.irradiance, white_point, contrast_ratio)
    payload = {
        "irradiance": args.irradiance,
        "white_point": white_point,
        "contrast_ratio": contrast_ratio,
        "color_level": level,
    }
    _emit(args, payload, [format_float(level, p)])
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    try:
        if args.command == "temperature":
            return _cmd_temperature(args)
        if args.command == "xyz-to-srgb":
            return _cmd_xyz_to_srgb(args)
        if args.command == "adapt":
            return _cmd_adapt(args)
        if args.command == "magnitude":
            return _cmd_magnitude(args)
        if args.command == "color-level":
            return _cmd_color_level(args)

        parser.error(f"unknown command: {args.command}")
        return 2
    except Exception as exc:
        logger.exception("fatal error")
        print(f"error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
