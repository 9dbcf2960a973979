from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from colorgraph.color.display import SIMULATED_CONTRAST_RATIO
from colorgraph.utils.logging_utils import resolve_level


@dataclass
class DisplayConfig:
    contrast_ratio: float = SIMULATED_CONTRAST_RATIO
    white_point: float | None = None


@dataclass
class OutputConfig:
    precision: int = 6


@dataclass
class AppConfig:
    display: DisplayConfig = field(default_factory=DisplayConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    log_level: str = "WARNING"
    log_file: Path | None = None


def _expand_path(value: str | None, base: Path) -> Path | None:
    if value in (None, ""):
        return None
    path = Path(value)
    if not path.is_absolute():
        path = (base / path).resolve()
    return path


def _section(raw: dict[str, Any], key: str) -> dict[str, Any]:
    value = raw.get(key) or {}
    if not isinstance(value, dict):
        raise ValueError(f"config section '{key}' must be a mapping")
    return value


def _as_float(value: Any, key: str) -> float:
    if value is None or isinstance(value, bool):
        raise ValueError(f"{key} must be a number, got {value!r}")
    try:
        return float(value)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"{key} must be a number, got {value!r}") from exc


def _as_int(value: Any, key: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{key} must be an integer, got {value!r}")
    return value


def default_config() -> AppConfig:
    return AppConfig()


def load_config(path: str | Path) -> AppConfig:
    try:
        import yaml  # type: ignore
    except Exception as exc:
        raise RuntimeError("PyYAML is required for config loading. Install with: pip install PyYAML") from exc

    cfg_path = Path(path).expanduser().resolve()
    with cfg_path.open("r", encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}
    if not isinstance(raw, dict):
        raise ValueError(f"config root must be a mapping: {cfg_path}")

    base = cfg_path.parent
    display_raw = _section(raw, "display")
    output_raw = _section(raw, "output")

    white_point = display_raw.get("white_point")
    contrast_ratio = display_raw.get("contrast_ratio", SIMULATED_CONTRAST_RATIO)
    display = DisplayConfig(
        contrast_ratio=_as_float(contrast_ratio, "display.contrast_ratio"),
        white_point=_as_float(white_point, "display.white_point") if white_point is not None else None,
    )
    if not display.contrast_ratio >= 1.0:
        raise ValueError("display.contrast_ratio must be >= 1")
    if display.white_point is not None and display.white_point <= 0.0:
        raise ValueError("display.white_point must be positive")

    output = OutputConfig(precision=_as_int(output_raw.get("precision", 6), "output.precision"))
    if output.precision < 0:
        raise ValueError("output.precision must be >= 0")

    app = AppConfig(
        display=display,
        output=output,
        log_level=str(raw.get("log_level", "WARNING")).upper(),
        log_file=_expand_path(raw.get("log_file"), base),
    )

    resolve_level(app.log_level)

    if app.log_file is not None:
        app.log_file.parent.mkdir(parents=True, exist_ok=True)
    return app
