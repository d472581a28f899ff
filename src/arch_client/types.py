# Core type definitions for the Arch transaction model
# Value objects shared by the codec, the signer and the RPC client

from __future__ import annotations
import string
from enum import Enum
from typing import Any, List, Tuple, Union

from pydantic import BaseModel, GetCoreSchemaHandler, field_validator, model_validator
from pydantic_core import CoreSchema, core_schema

from .runtime.errors import (
    ErrorCode,
    InvalidEncodingError,
    InvalidLengthError,
    ValidationError,
)

PUBKEY_LENGTH = 32
SIGNATURE_LENGTH = 64
TRANSACTION_VERSION = 0


def _bytes_from_list(value: Union[List[int], Tuple[int, ...]], what: str) -> bytes:
    """Convert a JSON array of byte values into bytes."""
    try:
        return bytes(value)
    except (TypeError, ValueError) as e:
        raise InvalidEncodingError(f"{what} must be a list of byte values (0-255)", cause=e)


def decode_hex(value: str, what: str) -> bytes:
    """
    Decode hex text with an optional 0x prefix.

    Raises:
        InvalidEncodingError: If any character other than a hex digit is
            present (whitespace included) or the digit count is odd
    """
    text = value[2:] if value[:2] in ("0x", "0X") else value
    if not all(c in string.hexdigits for c in text):
        raise InvalidEncodingError(f"Invalid {what} hex string: {value!r}")
    try:
        return bytes.fromhex(text)
    except ValueError as e:
        raise InvalidEncodingError(f"Invalid {what} hex string: {value!r}", cause=e)


class Pubkey:
    """
    32-byte public key identifying an account or a program.

    Immutable; compares and hashes by its raw bytes. Works as a pydantic field
    type accepting a Pubkey, 32 raw bytes, a hex string or a list of byte values.
    """

    __slots__ = ("_bytes",)

    def __init__(self, value: bytes):
        if not isinstance(value, (bytes, bytearray, memoryview)):
            raise ValidationError(f"Pubkey must be bytes, got {type(value).__name__}")
        value = bytes(value)
        if len(value) != PUBKEY_LENGTH:
            raise InvalidLengthError(
                f"Pubkey must be {PUBKEY_LENGTH} bytes, got {len(value)}",
                details={"length": len(value)},
            )
        self._bytes = value

    @classmethod
    def from_bytes(cls, value: bytes) -> Pubkey:
        """Create a pubkey from exactly 32 raw bytes."""
        return cls(value)

    @classmethod
    def from_hex(cls, value: str) -> Pubkey:
        """
        Create a pubkey from its hex representation.

        Raises:
            InvalidEncodingError: If the string is not hex or does not decode
                to 32 bytes
        """
        if not isinstance(value, str):
            raise InvalidEncodingError(f"Pubkey hex must be a string, got {type(value).__name__}")
        raw = decode_hex(value, "pubkey")
        if len(raw) != PUBKEY_LENGTH:
            raise InvalidEncodingError(
                f"Pubkey hex must decode to {PUBKEY_LENGTH} bytes, got {len(raw)}",
                details={"length": len(raw)},
            )
        return cls(raw)

    @classmethod
    def system_program(cls) -> Pubkey:
        """The reserved system program id."""
        return SYSTEM_PROGRAM_ID

    @property
    def bytes(self) -> bytes:
        return self._bytes

    def to_hex(self) -> str:
        """Canonical lowercase hex, no prefix."""
        return self._bytes.hex()

    def serialize(self) -> List[int]:
        """Byte values as a JSON array, the shape the node expects in params."""
        return list(self._bytes)

    def __bytes__(self) -> bytes:
        return self._bytes

    def __str__(self) -> str:
        return self.to_hex()

    def __repr__(self) -> str:
        return f"Pubkey('{self.to_hex()}')"

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, Pubkey):
            return self._bytes == other._bytes
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._bytes)

    @classmethod
    def __get_pydantic_core_schema__(
        cls,
        source_type: Any,
        handler: GetCoreSchemaHandler,
    ) -> CoreSchema:
        """Return a Pydantic CoreSchema that validates the Pubkey."""
        return core_schema.no_info_before_validator_function(
            cls.parse,
            core_schema.is_instance_schema(cls),
            serialization=core_schema.to_string_ser_schema(),
        )

    @classmethod
    def parse(cls, value: Any) -> Pubkey:
        """Validate and convert the input to a Pubkey."""
        if isinstance(value, cls):
            return value
        if isinstance(value, (bytes, bytearray, memoryview)):
            return cls(value)
        if isinstance(value, str):
            return cls.from_hex(value)
        if isinstance(value, (list, tuple)):
            return cls(_bytes_from_list(value, "Pubkey"))
        raise ValidationError(f"Invalid Pubkey: {value!r}")


SYSTEM_PROGRAM_ID = Pubkey(bytes(PUBKEY_LENGTH - 1) + b"\x01")


def normalize_signature(value: Any) -> str:
    """
    Normalize a signature to 64-byte lowercase hex.

    Accepts hex text, raw bytes or a list of byte values.
    """
    if isinstance(value, str):
        raw = decode_hex(value, "signature")
    elif isinstance(value, (bytes, bytearray, memoryview)):
        raw = bytes(value)
    elif isinstance(value, (list, tuple)):
        raw = _bytes_from_list(value, "Signature")
    else:
        raise ValidationError(f"Invalid signature: {value!r}")

    if len(raw) != SIGNATURE_LENGTH:
        raise InvalidLengthError(
            f"Signature must be {SIGNATURE_LENGTH} bytes, got {len(raw)}",
            details={"length": len(raw)},
        )
    return raw.hex()


class AccountMeta(BaseModel):
    """An account referenced by an instruction."""
    pubkey: Pubkey
    is_signer: bool = False
    is_writable: bool = False

    model_config = {"frozen": True}


class Instruction(BaseModel):
    """
    A single directive: target program, involved accounts and opaque data.

    Account order is part of the signed content and is never changed.
    """
    program_id: Pubkey
    accounts: Tuple[AccountMeta, ...] = ()
    data: bytes = b""

    model_config = {"frozen": True}

    @field_validator("data", mode="before")
    @classmethod
    def coerce_data(cls, value: Any) -> Any:
        if isinstance(value, (list, tuple)):
            return _bytes_from_list(value, "Instruction data")
        if isinstance(value, (bytearray, memoryview)):
            return bytes(value)
        return value


class Message(BaseModel):
    """
    The signable unit: ordered signers and ordered instructions.

    Both lists are encoded in the order given; nothing is sorted or deduplicated.
    """
    signers: Tuple[Pubkey, ...] = ()
    instructions: Tuple[Instruction, ...] = ()

    model_config = {"frozen": True}


class RuntimeTransaction(BaseModel):
    """A message plus one signature per signer, ready for submission."""
    version: int = TRANSACTION_VERSION
    signatures: Tuple[str, ...] = ()
    message: Message

    model_config = {"frozen": True}

    @field_validator("signatures", mode="before")
    @classmethod
    def normalize_signatures(cls, value: Any) -> Any:
        if isinstance(value, (list, tuple)):
            return tuple(normalize_signature(sig) for sig in value)
        return value

    @model_validator(mode="after")
    def check_signature_count(self) -> RuntimeTransaction:
        if len(self.signatures) != len(self.message.signers):
            raise ValidationError(
                f"Transaction has {len(self.signatures)} signatures "
                f"for {len(self.message.signers)} signers",
                code=ErrorCode.SIGNATURE_COUNT_MISMATCH,
                details={
                    "signatures": len(self.signatures),
                    "signers": len(self.message.signers),
                },
            )
        return self

    def signature_bytes(self) -> List[bytes]:
        """Signatures as raw 64-byte values."""
        return [bytes.fromhex(sig) for sig in self.signatures]


# =============================================================================
# RPC response types
# =============================================================================

class Status(str, Enum):
    """Processing status of a submitted transaction."""
    PROCESSING = "Processing"
    PROCESSED = "Processed"


_STATUS_BY_ORDINAL = (Status.PROCESSING, Status.PROCESSED)


class AccountInfoResult(BaseModel):
    """Result of read_account_info."""
    owner: str
    data: bytes = b""
    utxo: str
    is_executable: bool = False

    model_config = {"frozen": True}

    @field_validator("owner", mode="before")
    @classmethod
    def coerce_owner(cls, value: Any) -> Any:
        if isinstance(value, (list, tuple)):
            return _bytes_from_list(value, "Account owner").hex()
        return value

    @field_validator("data", mode="before")
    @classmethod
    def coerce_data(cls, value: Any) -> Any:
        if isinstance(value, (list, tuple)):
            return _bytes_from_list(value, "Account data")
        return value


class ProcessedTransaction(BaseModel):
    """Result of get_processed_transaction."""
    runtime_transaction: RuntimeTransaction
    status: Status
    bitcoin_txids: List[str] = []

    model_config = {"frozen": True}

    @field_validator("status", mode="before")
    @classmethod
    def coerce_status(cls, value: Any) -> Any:
        if isinstance(value, int) and not isinstance(value, bool):
            if not 0 <= value < len(_STATUS_BY_ORDINAL):
                raise ValidationError(f"Unknown transaction status: {value}")
            return _STATUS_BY_ORDINAL[value]
        return value


class Block(BaseModel):
    """Result of get_block."""
    transactions: List[str] = []
    previous_block_hash: str
    transaction_count: int
    timestamp: int
    merkle_root: str

    model_config = {"frozen": True}


__all__ = [
    "PUBKEY_LENGTH",
    "SIGNATURE_LENGTH",
    "TRANSACTION_VERSION",
    "SYSTEM_PROGRAM_ID",
    "Pubkey",
    "AccountMeta",
    "Instruction",
    "Message",
    "RuntimeTransaction",
    "decode_hex",
    "normalize_signature",
    "Status",
    "AccountInfoResult",
    "ProcessedTransaction",
    "Block",
]
