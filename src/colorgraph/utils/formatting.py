from __future__ import annotations

from typing import Iterable


def format_float(value: float, precision: int = 6) -> str:
    text = f"{value:.{precision}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text in ("-0", ""):
        text = "0"
    return text


def format_triplet(values: Iterable[float], precision: int = 6) -> str:
    return "(" + ", ".join(format_float(float(v), precision) for v in values) + ")"


def format_scientific(value: float, digits: int = 6) -> str:
    return f"{value:.{digits}e}"
