from dataclasses import dataclass
import math
from typing import BinaryIO, Self

from .slice import SLICE_LENGTH
from .utils import be_uint, read_exact


@dataclass
class QoaFrameHeader:
    """QOA Frame Header"""

    LENGTH = 8

    channel_count: int
    sample_rate: int
    sample_count: int
    size: int

    @classmethod
    def read(cls, stream: BinaryIO) -> Self:
        """Read

        Args:
            stream (BinaryIO): Input stream

        Raises:
            TruncatedStream: Too less read bytes.

        Returns:
            Self: Instance of this class
        """
        buffer = read_exact(stream, QoaFrameHeader.LENGTH)

        channel_count = buffer[0]
        # u24, taken as the upper 3 bytes of a big-endian u32
        sample_rate = be_uint(buffer[1:4] + b"\x00") >> 8
        sample_count = be_uint(buffer[4:6])
        size = be_uint(buffer[6:8])
        return cls(channel_count, sample_rate, sample_count, size)

    @property
    def slice_count(self) -> int:
        """Slices per channel in this frame"""
        return math.ceil(self.sample_count / SLICE_LENGTH)

    def write(self, stream: BinaryIO) -> None:
        """Write

        Args:
            stream (BinaryIO): Output stream
        """
        stream.write(self.channel_count.to_bytes(1, "big"))
        stream.write(self.sample_rate.to_bytes(3, "big"))
        stream.write(self.sample_count.to_bytes(2, "big"))
        stream.write(self.size.to_bytes(2, "big"))
