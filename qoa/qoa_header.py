from dataclasses import dataclass
import math
from typing import BinaryIO, Final, Self

import numpy as np

from .errors import MalformedContainer
from .slice import SLICE_LENGTH
from .utils import be_uint, read_exact

SLICES_PER_FRAME: Final[int] = 256


def frame_count(sample_count: int) -> int:
    """Frame count of a stream

    Evaluated in 32-bit float as `round(sample_count / 256 / 20 + 0.5)`.
    This is not a ceiling: an exact multiple of 5120 gets an extra frame.

    Args:
        sample_count (int): Total sample count per channel

    Returns:
        int: Frame count
    """
    value = (
        np.float32(sample_count)
        / np.float32(SLICES_PER_FRAME)
        / np.float32(SLICE_LENGTH)
        + np.float32(0.5)
    )
    # Half away from zero, value is never negative
    return math.floor(float(value) + 0.5)


@dataclass
class QoaHeader:
    """QOA Container Header"""

    MAGIC_BYTES = b"qoaf"
    LENGTH = 8

    magic_bytes: bytes
    sample_count: int

    @classmethod
    def read(cls, stream: BinaryIO) -> Self:
        """Read

        Args:
            stream (BinaryIO): Input stream

        Raises:
            TruncatedStream: Too less read bytes.
            MalformedContainer: Invalid `magic_bytes`.

        Returns:
            Self: Instance of this class
        """
        buffer = read_exact(stream, QoaHeader.LENGTH)

        magic_bytes = buffer[0:4]
        if magic_bytes != QoaHeader.MAGIC_BYTES:
            raise MalformedContainer(
                f"Invalid `magic_bytes`. expected={QoaHeader.MAGIC_BYTES!r} actual={magic_bytes!r}"
            )
        sample_count = be_uint(buffer[4:8])
        return cls(magic_bytes, sample_count)

    @property
    def frame_count(self) -> int:
        return frame_count(self.sample_count)

    def write(self, stream: BinaryIO) -> None:
        """Write

        Args:
            stream (BinaryIO): Output stream
        """
        stream.write(QoaHeader.MAGIC_BYTES)
        stream.write(self.sample_count.to_bytes(4, "big"))
