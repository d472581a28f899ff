"""
Hash Functions

The signing digest of a message is a two-stage SHA-256 where the second stage
hashes the lowercase hex *text* of the first digest, not its raw bytes:

    digest = sha256(sha256(encode_message(m)).hexdigest().encode("ascii"))

The node verifies signatures against exactly this value.
"""

import hashlib

from ..types import Message
from .message_codec import encode_message


def sha256_bytes(input_bytes: bytes) -> bytes:
    """
    Compute SHA-256 hash of input bytes.

    Args:
        input_bytes: Input bytes to hash

    Returns:
        SHA-256 hash as bytes (32 bytes)
    """
    return hashlib.sha256(input_bytes).digest()


def hex_bridged_sha256(data: bytes) -> bytes:
    """Hash data, then hash the hex text of that hash."""
    first = hashlib.sha256(data).hexdigest()
    return sha256_bytes(first.encode("ascii"))


def message_digest(message: Message) -> bytes:
    """
    Compute the 32-byte digest that signers sign for a message.

    Args:
        message: Message to hash

    Returns:
        Signing digest (32 bytes)
    """
    return hex_bridged_sha256(encode_message(message))


def message_hash(message: Message) -> str:
    """Signing digest as lowercase hex."""
    return message_digest(message).hex()
