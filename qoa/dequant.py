import math
from typing import Final

# Indexed by the 3 bit residual index
DEQUANT_TABLE: Final[tuple[float, ...]] = (0.75, -0.75, 2.5, -2.5, 4.5, -4.5, 7.0, -7.0)


def round_half_away(value: float) -> int:
    """Round to nearest int, ties away from zero

    Args:
        value (float): Value

    Returns:
        int: Rounded value
    """
    if value < 0:
        return math.ceil(value - 0.5)
    return math.floor(value + 0.5)


def dequant_scale_factor(index: int) -> int:
    """Dequantize Scale Factor

    Args:
        index (int): Scale factor index (0-15)

    Returns:
        int: Scale factor
    """
    return round_half_away((index + 1) ** 2.75)


def dequant_residual(index: int) -> float:
    """Dequantize Residual

    Args:
        index (int): Residual index (0-7)

    Returns:
        float: Dequantized residual
    """
    return DEQUANT_TABLE[index]


SCALE_FACTOR_TABLE: Final[tuple[int, ...]] = tuple(
    dequant_scale_factor(index) for index in range(16)
)

RESIDUAL_TABLE: Final[tuple[tuple[int, ...], ...]] = tuple(
    tuple(
        round_half_away(scale_factor * dequant_residual(index))
        for index in range(len(DEQUANT_TABLE))
    )
    for scale_factor in SCALE_FACTOR_TABLE
)


def residual_contribution(scale_factor_index: int, residual_index: int) -> int:
    """Residual contribution of a sample

    Args:
        scale_factor_index (int): Scale factor index (0-15)
        residual_index (int): Residual index (0-7)

    Returns:
        int: Scaled and rounded residual
    """
    return RESIDUAL_TABLE[scale_factor_index][residual_index]
