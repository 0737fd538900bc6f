from typing import BinaryIO

from .errors import TruncatedStream

INT16_MIN = -32768
INT16_MAX = 32767


def read_exact(stream: BinaryIO, size: int) -> bytes:
    """Read exact number of bytes

    Args:
        stream (BinaryIO): Input stream
        size (int): Number of bytes

    Raises:
        TruncatedStream: Too less read bytes.

    Returns:
        bytes: Read bytes
    """
    buffer = stream.read(size)
    if len(buffer) < size:
        raise TruncatedStream(
            f"Too less read bytes. expected={size} actual={len(buffer)}"
        )
    return buffer


def be_uint(buffer: bytes) -> int:
    """Assemble big-endian unsigned int

    Args:
        buffer (bytes): Big-endian bytes

    Returns:
        int: Unsigned value
    """
    value = 0
    for byte in buffer:
        value = (value << 8) | byte
    return value


def be_int16(buffer: bytes) -> int:
    """Assemble big-endian signed 16 bit int

    Args:
        buffer (bytes): 2 bytes

    Returns:
        int: Signed value
    """
    return to_int16(be_uint(buffer[0:2]))


def to_int16(value: int) -> int:
    """Wrap int to signed 16 bit int

    Args:
        value (int): int value

    Returns:
        int: Wrapped value
    """
    return ((value + 0x8000) & 0xFFFF) - 0x8000


def clamp16(value: int) -> int:
    """Clamp int to signed 16 bit int

    Args:
        value (int): int value

    Returns:
        int: Clamped value
    """
    if value > INT16_MAX:
        return INT16_MAX
    elif value < INT16_MIN:
        return INT16_MIN
    else:
        return value
