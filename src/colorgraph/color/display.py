from __future__ import annotations


SIMULATED_CONTRAST_RATIO = 100000.0


def color_level(irradiance: float, white_point: float, contrast_ratio: float = SIMULATED_CONTRAST_RATIO) -> float:
    """Map an irradiance onto a [0, 1] display level.

    ``white_point`` maps to 1.0 and ``white_point / contrast_ratio`` to 0.0.
    In between the mapping is linear, not logarithmic.
    """

    if white_point <= 0.0:
        raise ValueError(f"white_point must be positive, got {white_point}")
    if contrast_ratio < 1.0:
        raise ValueError(f"contrast_ratio must be >= 1, got {contrast_ratio}")

    black_point = white_point / contrast_ratio
    if irradiance >= white_point:
        return 1.0
    if irradiance <= black_point:
        return 0.0
    return (irradiance - black_point) / (white_point - black_point)
