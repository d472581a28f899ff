"""
Arch Python SDK

Client SDK for Arch nodes: canonical transaction encoding, BIP-340 Schnorr
signing and a JSON-RPC client.
"""

from .types import (
    PUBKEY_LENGTH,
    SIGNATURE_LENGTH,
    TRANSACTION_VERSION,
    SYSTEM_PROGRAM_ID,
    Pubkey,
    AccountMeta,
    Instruction,
    Message,
    RuntimeTransaction,
    Status,
    AccountInfoResult,
    ProcessedTransaction,
    Block,
)
from .runtime.errors import *
from .codec import (
    encode_message,
    decode_message,
    message_digest,
    message_hash,
    serialize_transaction,
)
from .crypto import SchnorrKeyPair, verify_signature
from .signers import SchnorrSigner, Signer, sign_message
from .tx import (
    TransactionBuilder,
    sign_transaction,
    verify_transaction,
    create_account_instruction,
    transfer_account_ownership_instruction,
)
from .client import ArchRpcClient, ClientConfig, RpcMethod, local_client

__version__ = "0.1.0"
__all__ = [
    # Data model
    "PUBKEY_LENGTH",
    "SIGNATURE_LENGTH",
    "TRANSACTION_VERSION",
    "SYSTEM_PROGRAM_ID",
    "Pubkey",
    "AccountMeta",
    "Instruction",
    "Message",
    "RuntimeTransaction",
    "Status",
    "AccountInfoResult",
    "ProcessedTransaction",
    "Block",

    # Errors
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

    # Codec
    "encode_message",
    "decode_message",
    "message_digest",
    "message_hash",
    "serialize_transaction",

    # Signing
    "SchnorrKeyPair",
    "verify_signature",
    "SchnorrSigner",
    "Signer",
    "sign_message",
    "TransactionBuilder",
    "sign_transaction",
    "verify_transaction",
    "create_account_instruction",
    "transfer_account_ownership_instruction",

    # Client
    "ArchRpcClient",
    "ClientConfig",
    "RpcMethod",
    "local_client",
]
