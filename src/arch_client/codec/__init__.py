"""
Arch Binary Codec Module

Canonical binary encoding of Arch messages, the two-stage signing digest and
the JSON wire format used by the node's RPC.

Key components:
- writer.py / reader.py: fixed-width primitive encoding and decoding
- message_codec.py: canonical message layout
- hashes.py: signing digest
- wire.py: JSON transport shape
"""

from .hashes import sha256_bytes, hex_bridged_sha256, message_digest, message_hash
from .message_codec import decode_message, encode_account_meta, encode_instruction, encode_message
from .reader import BinaryReader
from .wire import (
    serialize_account_meta,
    serialize_instruction,
    serialize_message,
    serialize_transaction,
    serialize_transactions,
)
from .writer import BinaryWriter

__all__ = [
    "BinaryReader",
    "BinaryWriter",
    "decode_message",
    "encode_account_meta",
    "encode_instruction",
    "encode_message",
    "hex_bridged_sha256",
    "message_digest",
    "message_hash",
    "serialize_account_meta",
    "serialize_instruction",
    "serialize_message",
    "serialize_transaction",
    "serialize_transactions",
    "sha256_bytes",
]
