from .errors import (
    QoaError,
    MalformedContainer,
    TruncatedStream,
    ChannelCountMismatch,
    ChannelLengthMismatch,
)
from .qoa_header import QoaHeader, frame_count
from .frame_header import QoaFrameHeader
from .lms import LmsState
from .slice import (
    SLICE_LENGTH,
    SLICE_SIZE,
    read_slice,
    scale_factor_index,
    residual_index,
    unpack_slice,
)
from .dequant import (
    DEQUANT_TABLE,
    round_half_away,
    dequant_scale_factor,
    dequant_residual,
    residual_contribution,
)
from .qoa_file import QoaAudio, QoaDecoder, interleave, decode, decode_bytes
