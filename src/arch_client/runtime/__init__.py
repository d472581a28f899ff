"""Runtime helpers for the Arch Python SDK"""

from .errors import (
    ErrorCode,
    ArchError,
    ValidationError,
    InvalidLengthError,
    InvalidEncodingError,
    InvalidPrivateKeyError,
    EncodingError,
    ProtocolError,
    TransportError,
    error_from_response,
)

__all__ = [
    "ErrorCode",
    "ArchError",
    "ValidationError",
    "InvalidLengthError",
    "InvalidEncodingError",
    "InvalidPrivateKeyError",
    "EncodingError",
    "ProtocolError",
    "TransportError",
    "error_from_response",
]
