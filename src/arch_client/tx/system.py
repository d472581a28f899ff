"""
System program instructions.

The system program (SYSTEM_PROGRAM_ID) owns account lifecycle: creating an
account anchored to a Bitcoin UTXO and handing ownership of an account to a
program. Instruction data starts with a one-byte tag.
"""

from __future__ import annotations
from enum import IntEnum
from typing import Union

from ..codec.writer import BinaryWriter
from ..runtime.errors import InvalidLengthError
from ..types import SYSTEM_PROGRAM_ID, AccountMeta, Instruction, Pubkey, decode_hex

TXID_LENGTH = 32


class SystemInstruction(IntEnum):
    """Instruction tags understood by the system program."""
    CREATE_ACCOUNT = 0
    TRANSFER_ACCOUNT_OWNERSHIP = 3


def _txid_bytes(txid: Union[str, bytes]) -> bytes:
    raw = decode_hex(txid, "txid") if isinstance(txid, str) else bytes(txid)
    if len(raw) != TXID_LENGTH:
        raise InvalidLengthError(f"Txid must be {TXID_LENGTH} bytes, got {len(raw)}")
    return raw


def encode_create_account_data(txid: Union[str, bytes], vout: int) -> bytes:
    """
    Data for CreateAccount: tag, 32 txid bytes, vout as u32 little-endian.

    The txid is used in the byte order given; it is not reversed.
    """
    writer = BinaryWriter()
    writer.u8(SystemInstruction.CREATE_ACCOUNT)
    writer.bytes(_txid_bytes(txid))
    writer.u32le(vout, "vout")
    return writer.to_bytes()


def encode_transfer_account_ownership_data(program_id: Pubkey) -> bytes:
    """Data for TransferAccountOwnership: tag, 32-byte new owner program id."""
    writer = BinaryWriter()
    writer.u8(SystemInstruction.TRANSFER_ACCOUNT_OWNERSHIP)
    writer.bytes(program_id.bytes)
    return writer.to_bytes()


def create_account_instruction(pubkey: Pubkey, txid: Union[str, bytes], vout: int) -> Instruction:
    """Create an account for ``pubkey`` anchored to UTXO ``txid:vout``."""
    return Instruction(
        program_id=SYSTEM_PROGRAM_ID,
        accounts=(AccountMeta(pubkey=pubkey, is_signer=True, is_writable=True),),
        data=encode_create_account_data(txid, vout),
    )


def transfer_account_ownership_instruction(account: Pubkey, program_id: Pubkey) -> Instruction:
    """Hand ownership of ``account`` to ``program_id``."""
    return Instruction(
        program_id=SYSTEM_PROGRAM_ID,
        accounts=(AccountMeta(pubkey=account, is_signer=True, is_writable=True),),
        data=encode_transfer_account_ownership_data(program_id),
    )


__all__ = [
    "SystemInstruction",
    "encode_create_account_data",
    "encode_transfer_account_ownership_data",
    "create_account_instruction",
    "transfer_account_ownership_instruction",
]
