from dataclasses import dataclass
from io import BytesIO
from logging import getLogger
from typing import BinaryIO

import numpy as np

from .dequant import residual_contribution
from .errors import ChannelCountMismatch, ChannelLengthMismatch
from .frame_header import QoaFrameHeader
from .lms import LmsState
from .qoa_header import QoaHeader
from .slice import SLICE_SIZE, read_slice, unpack_slice


@dataclass(frozen=True)
class QoaAudio:
    """Decoded QOA Audio"""

    samples: list[int]
    sample_rate: int
    channel_count: int

    def to_numpy(self) -> np.ndarray:
        """To NumPy array

        Returns:
            np.ndarray: int16 array shaped (frames, channels)
        """
        samples = np.array(self.samples, dtype="int16")
        if self.channel_count == 0:
            return samples.reshape(0, 0)
        return samples.reshape(-1, self.channel_count)


def interleave(channels: list[list[int]]) -> list[int]:
    """Interleave channels

    Args:
        channels (list[list[int]]): Samples of each channel

    Raises:
        ChannelLengthMismatch: Channel lengths differ.

    Returns:
        list[int]: Interleaved samples
    """
    if len(channels) == 0:
        return []

    length = len(channels[0])
    for channel, samples in enumerate(channels):
        if len(samples) != length:
            raise ChannelLengthMismatch(
                f"Channel lengths differ. channel={channel} expected={length} actual={len(samples)}"
            )

    interleaved: list[int] = []
    for i in range(length):
        for samples in channels:
            interleaved.append(samples[i])
    return interleaved


class QoaDecoder:
    """QOA Decoder"""

    def __init__(self):
        """Constructor"""

        self.__logger = getLogger(__name__)
        self.channel_count: int | None = None
        self.last_frame_header: QoaFrameHeader | None = None

    @staticmethod
    def __decode_slice(lms: LmsState, slice: int) -> list[int]:
        """Decode Slice

        Args:
            lms (LmsState): LMS state of the channel
            slice (int): Slice

        Returns:
            list[int]: Decoded samples
        """
        sf_index, residual_indices = unpack_slice(slice)
        return [
            lms.decode_sample(residual_contribution(sf_index, residual_index))
            for residual_index in residual_indices
        ]

    def __read_frame_header(self, stream: BinaryIO) -> QoaFrameHeader:
        """Read Frame Header and check channel count

        Args:
            stream (BinaryIO): Input stream

        Raises:
            ChannelCountMismatch: Channel count changed.

        Returns:
            QoaFrameHeader: Frame header
        """
        frame_header = QoaFrameHeader.read(stream)
        if self.channel_count is None:
            self.channel_count = frame_header.channel_count
        elif self.channel_count != frame_header.channel_count:
            raise ChannelCountMismatch(
                f"Channel count changed. expected={self.channel_count} actual={frame_header.channel_count}"
            )
        self.last_frame_header = frame_header
        return frame_header

    def __decode_frame(self, stream: BinaryIO, frame_index: int) -> list[list[int]]:
        """Decode Frame

        Args:
            stream (BinaryIO): Input stream
            frame_index (int): Frame index

        Returns:
            list[list[int]]: Decoded samples of each channel
        """
        frame_header = self.__read_frame_header(stream)
        channel_count = frame_header.channel_count
        lms_states = LmsState.read_channels(stream, channel_count)

        decoded: list[list[int]] = [[] for _ in range(channel_count)]
        for _ in range(frame_header.slice_count):
            for channel in range(channel_count):
                slice = read_slice(stream)
                decoded[channel] += QoaDecoder.__decode_slice(
                    lms_states[channel], slice
                )

        # The last slice may be padded
        decoded = [samples[: frame_header.sample_count] for samples in decoded]

        consumed = (
            QoaFrameHeader.LENGTH
            + channel_count * LmsState.LENGTH
            + frame_header.slice_count * channel_count * SLICE_SIZE
        )
        if consumed != frame_header.size:
            self.__logger.debug(
                f"Frame size differs. frame_index={frame_index} size={frame_header.size} consumed={consumed}"
            )
        return decoded

    def decode(self, stream: BinaryIO) -> QoaAudio:
        """Decode

        Args:
            stream (BinaryIO): Input stream

        Raises:
            MalformedContainer: Invalid `magic_bytes`.
            TruncatedStream: Too less read bytes.
            ChannelCountMismatch: Channel count changed.

        Returns:
            QoaAudio: Decoded audio
        """
        self.channel_count = None
        self.last_frame_header = None

        header = QoaHeader.read(stream)
        frame_count = header.frame_count
        self.__logger.info(
            f"File contains {header.sample_count} samples across {frame_count} frames."
        )

        decoded: list[list[int]] = []
        for frame_index in range(frame_count):
            frame = self.__decode_frame(stream, frame_index)
            if len(decoded) == 0:
                decoded = frame
            else:
                for channel, samples in enumerate(frame):
                    decoded[channel] += samples

        samples = interleave(decoded)
        self.__logger.info(f"Samples read. samples={len(samples)}")
        return QoaAudio(
            samples,
            self.last_frame_header.sample_rate,
            self.last_frame_header.channel_count,
        )


def decode(stream: BinaryIO) -> QoaAudio:
    """Decode QOA stream

    Args:
        stream (BinaryIO): Input stream

    Returns:
        QoaAudio: Decoded audio
    """
    decoder = QoaDecoder()
    return decoder.decode(stream)


def decode_bytes(data: bytes) -> QoaAudio:
    """Decode QOA bytes

    Args:
        data (bytes): QOA file content

    Returns:
        QoaAudio: Decoded audio
    """
    with BytesIO(data) as stream:
        return decode(stream)
