from dataclasses import dataclass, field
from typing import BinaryIO, Self

from .utils import be_int16, clamp16, read_exact, to_int16

LMS_LENGTH = 4
PREDICTION_SHIFT = 13
DELTA_SHIFT = 4


@dataclass
class LmsState:
    """LMS Predictor State

    Sign-sign least mean squares filter over the last 4 output samples of a
    channel. The state is sent in full at the start of every frame.
    """

    LENGTH = LMS_LENGTH * 2 * 2

    history: list[int] = field(default_factory=lambda: [0] * LMS_LENGTH)
    weights: list[int] = field(default_factory=lambda: [0] * LMS_LENGTH)

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
        buffer = read_exact(stream, LmsState.LENGTH)

        values = [be_int16(buffer[i : i + 2]) for i in range(0, LmsState.LENGTH, 2)]
        return cls(values[0:LMS_LENGTH], values[LMS_LENGTH:])

    @classmethod
    def read_channels(cls, stream: BinaryIO, channel_count: int) -> list[Self]:
        """Read states of all channels

        Args:
            stream (BinaryIO): Input stream
            channel_count (int): Channel count

        Returns:
            list[Self]: States in channel order
        """
        return [cls.read(stream) for _ in range(channel_count)]

    def predict(self) -> int:
        """Predict next sample

        Returns:
            int: Predicted sample
        """
        prediction = 0
        for history, weight in zip(self.history, self.weights):
            prediction += history * weight
        return prediction >> PREDICTION_SHIFT

    def reconstruct(self, residual: int) -> int:
        """Reconstruct sample

        Args:
            residual (int): Residual contribution

        Returns:
            int: Sample clamped to signed 16 bit
        """
        return clamp16(self.predict() + residual)

    def update(self, sample: int, residual: int) -> None:
        """Update

        Args:
            sample (int): Reconstructed sample
            residual (int): Residual contribution
        """
        delta = residual >> DELTA_SHIFT
        # Weights follow the history before it is shifted
        for i in range(LMS_LENGTH):
            adjustment = -delta if self.history[i] < 0 else delta
            self.weights[i] = to_int16(self.weights[i] + adjustment)

        self.history = self.history[1:] + [sample]

    def decode_sample(self, residual: int) -> int:
        """Decode Sample

        Args:
            residual (int): Residual contribution

        Returns:
            int: Decoded sample
        """
        sample = self.reconstruct(residual)
        self.update(sample, residual)
        return sample

    def write(self, stream: BinaryIO) -> None:
        """Write

        Args:
            stream (BinaryIO): Output stream
        """
        for value in self.history + self.weights:
            stream.write(value.to_bytes(2, "big", signed=True))
