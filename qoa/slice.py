from typing import BinaryIO, Final

from .utils import be_uint, read_exact

SLICE_LENGTH: Final[int] = 20
SLICE_SIZE: Final[int] = 8

SLICE_BITS: Final[int] = SLICE_SIZE * 8
SCALE_FACTOR_BITS: Final[int] = 4
RESIDUAL_BITS: Final[int] = 3

SCALE_FACTOR_MASK: Final[int] = (1 << SCALE_FACTOR_BITS) - 1
RESIDUAL_MASK: Final[int] = (1 << RESIDUAL_BITS) - 1


def read_slice(stream: BinaryIO) -> int:
    """Read Slice

    Args:
        stream (BinaryIO): Input stream

    Raises:
        TruncatedStream: Too less read bytes.

    Returns:
        int: Slice as unsigned 64 bit int
    """
    return be_uint(read_exact(stream, SLICE_SIZE))


def scale_factor_index(slice: int) -> int:
    """Scale factor index, the top 4 bits of a slice

    Args:
        slice (int): Slice

    Returns:
        int: Scale factor index (0-15)
    """
    return (slice >> (SLICE_BITS - SCALE_FACTOR_BITS)) & SCALE_FACTOR_MASK


def residual_index(slice: int, index: int) -> int:
    """Residual index

    Residuals follow the scale factor from the high bits to the low bits,
    in playback order.

    Args:
        slice (int): Slice
        index (int): Residual number (0-19)

    Raises:
        IndexError: Residual number out of range.

    Returns:
        int: Residual index (0-7)
    """
    if not 0 <= index < SLICE_LENGTH:
        raise IndexError(f"Residual number out of range. index={index}")
    offset = SCALE_FACTOR_BITS + RESIDUAL_BITS * (index + 1)
    return (slice >> (SLICE_BITS - offset)) & RESIDUAL_MASK


def unpack_slice(slice: int) -> tuple[int, list[int]]:
    """Unpack Slice

    Args:
        slice (int): Slice

    Returns:
        tuple[int, list[int]]: Scale factor index and residual indices
    """
    return scale_factor_index(slice), [
        residual_index(slice, i) for i in range(SLICE_LENGTH)
    ]
