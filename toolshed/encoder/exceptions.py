class EncoderError(Exception):
    """Base exception for external encoder failures."""


class EncoderNotFoundError(EncoderError):
    """Raised when none of the configured encoders is installed."""


class EncodeError(EncoderError):
    """Raised when the encoder fails to produce an output file."""


class UnknownEncoderError(EncoderError):
    """Raised when the configured encoder name has no adapter."""
