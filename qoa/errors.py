class QoaError(ValueError):
    """QOA decode error"""


class MalformedContainer(QoaError):
    """Container header is not a QOA header"""


class TruncatedStream(QoaError):
    """Stream ended in the middle of a field"""


class ChannelCountMismatch(QoaError):
    """Frame declares a different channel count than the first frame"""


class ChannelLengthMismatch(QoaError):
    """Decoded channels differ in length"""
