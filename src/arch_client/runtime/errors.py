"""
Arch Error Model

This module provides the error handling framework for the Arch Python SDK.
Every error raised by the codec, the signer or the RPC client derives from
ArchError and carries a structured error code.
"""

from __future__ import annotations
from typing import Optional, Dict, Any
from enum import IntEnum


class ErrorCode(IntEnum):
    """Arch SDK error codes."""

    # Success
    OK = 0

    # General errors (1-99)
    UNKNOWN = 1
    INTERNAL = 2

    # Validation errors (100-199)
    VALIDATION_ERROR = 100
    INVALID_LENGTH = 101
    INVALID_ENCODING = 102
    SIGNATURE_COUNT_MISMATCH = 103
    SIGNER_MISMATCH = 104

    # Key errors (200-299)
    INVALID_PRIVATE_KEY = 200
    INVALID_SIGNATURE = 201

    # Encoding errors (300-399)
    ENCODING_ERROR = 300
    LENGTH_OVERFLOW = 301
    TRUNCATED_BUFFER = 302
    TRAILING_BYTES = 303

    # Remote errors (400-499)
    PROTOCOL_ERROR = 400

    # Network errors (500-599)
    TRANSPORT_ERROR = 500
    HTTP_ERROR = 501
    INVALID_RESPONSE = 502


class ArchError(Exception):
    """
    Base class for all Arch SDK errors.

    Provides structured error information: a message, an error code,
    optional details and the underlying cause.
    """

    def __init__(self, message: str, code: ErrorCode = ErrorCode.UNKNOWN,
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        """
        Initialize an Arch error.

        Args:
            message: Error message
            code: Error code
            details: Additional error details
            cause: Underlying exception that caused this error
        """
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}
        self.cause = cause

    def __str__(self) -> str:
        """String representation of the error."""
        parts = [f"[{self.code.name}] {self.message}"]
        if self.details:
            parts.append(f"Details: {self.details}")
        if self.cause:
            parts.append(f"Caused by: {self.cause}")
        return " | ".join(parts)

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary representation."""
        result = {
            "code": self.code.value,
            "message": self.message,
        }
        if self.details:
            result["details"] = self.details
        if self.cause:
            result["cause"] = str(self.cause)
        return result


class ValidationError(ArchError):
    """Malformed input: bad public keys, mismatched signer/signature lists."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.VALIDATION_ERROR,
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, code, details, cause)


class InvalidLengthError(ValidationError):
    """A fixed-size value has the wrong number of bytes."""

    def __init__(self, message: str = "Invalid length",
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.INVALID_LENGTH, details, cause)


class InvalidEncodingError(ValidationError):
    """A textual value could not be decoded."""

    def __init__(self, message: str = "Invalid encoding",
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.INVALID_ENCODING, details, cause)


class InvalidPrivateKeyError(ArchError):
    """Signing key is not a valid secp256k1 scalar."""

    def __init__(self, message: str = "Invalid private key",
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.INVALID_PRIVATE_KEY, details, cause)


class EncodingError(ArchError):
    """Binary encoding/decoding errors."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.ENCODING_ERROR,
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, code, details, cause)


class ProtocolError(ArchError):
    """
    The node answered with a JSON-RPC error object.

    The server-supplied message is kept verbatim in both ``message`` and
    ``str(error)``; the JSON-RPC code and data are kept alongside.
    """

    def __init__(self, message: str, rpc_code: Optional[int] = None, data: Any = None):
        super().__init__(message, ErrorCode.PROTOCOL_ERROR)
        self.rpc_code = rpc_code
        self.data = data

    def __str__(self) -> str:
        return self.message

    def to_dict(self) -> Dict[str, Any]:
        result = super().to_dict()
        if self.rpc_code is not None:
            result["rpcCode"] = self.rpc_code
        if self.data is not None:
            result["data"] = self.data
        return result


class TransportError(ArchError):
    """Network or HTTP failure talking to the node."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.TRANSPORT_ERROR,
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, code, details, cause)


def error_from_response(response: Dict[str, Any]) -> Optional[ProtocolError]:
    """
    Create a ProtocolError from a JSON-RPC response.

    Args:
        response: Decoded JSON-RPC response body

    Returns:
        ProtocolError instance, or None if the response carries no error
    """
    error_data = response.get("error")
    if error_data is None:
        return None

    if isinstance(error_data, str):
        return ProtocolError(error_data)

    if not isinstance(error_data, dict):
        return ProtocolError(str(error_data))

    message = error_data.get("message")
    if message is None:
        message = str(error_data)

    return ProtocolError(message, rpc_code=error_data.get("code"), data=error_data.get("data"))


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
