"""
Message Codec

Canonical binary layout of an Arch message, the bytes that get hashed and
signed and that the node deserializes:

    u8   signer count
    [32] signer pubkey                  (per signer, in order)
    u8   instruction count
    per instruction, in order:
        [32] program id
        u8   account count
        per account: [32] pubkey, u8 is_signer, u8 is_writable
        u32  data length (little-endian)
        [n]  data

No padding, no alignment and no re-ordering of any list.
"""

from typing import List

from ..runtime.errors import EncodingError, ErrorCode
from ..types import AccountMeta, Instruction, Message, Pubkey, PUBKEY_LENGTH
from .reader import BinaryReader
from .writer import BinaryWriter


def _write_account_meta(writer: BinaryWriter, account: AccountMeta) -> None:
    writer.bytes(account.pubkey.bytes)
    writer.bool(account.is_signer)
    writer.bool(account.is_writable)


def _write_instruction(writer: BinaryWriter, instruction: Instruction) -> None:
    writer.bytes(instruction.program_id.bytes)
    writer.u8(len(instruction.accounts), "account count")
    for account in instruction.accounts:
        _write_account_meta(writer, account)
    writer.u32_prefixed_bytes(instruction.data, "instruction data length")


def encode_account_meta(account: AccountMeta) -> bytes:
    """Encode one account reference: pubkey, is_signer, is_writable (34 bytes)."""
    writer = BinaryWriter()
    _write_account_meta(writer, account)
    return writer.to_bytes()


def encode_instruction(instruction: Instruction) -> bytes:
    """Encode one instruction exactly as it appears inside a message."""
    writer = BinaryWriter()
    _write_instruction(writer, instruction)
    return writer.to_bytes()


def encode_message(message: Message) -> bytes:
    """
    Encode a message into its canonical byte sequence.

    Args:
        message: Message to encode

    Returns:
        Canonical bytes

    Raises:
        EncodingError: If a count exceeds 255 or instruction data exceeds
            the u32 length prefix
    """
    writer = BinaryWriter()
    writer.u8(len(message.signers), "signer count")
    for signer in message.signers:
        writer.bytes(signer.bytes)

    writer.u8(len(message.instructions), "instruction count")
    for instruction in message.instructions:
        _write_instruction(writer, instruction)

    return writer.to_bytes()


def _read_pubkey(reader: BinaryReader, what: str) -> Pubkey:
    return Pubkey(reader.bytes(PUBKEY_LENGTH, what))


def _read_instruction(reader: BinaryReader) -> Instruction:
    program_id = _read_pubkey(reader, "program id")
    account_count = reader.u8("account count")
    accounts: List[AccountMeta] = []
    for _ in range(account_count):
        pubkey = _read_pubkey(reader, "account pubkey")
        is_signer = reader.bool("is_signer")
        is_writable = reader.bool("is_writable")
        accounts.append(AccountMeta(pubkey=pubkey, is_signer=is_signer, is_writable=is_writable))
    data = reader.u32_prefixed_bytes("instruction data")
    return Instruction(program_id=program_id, accounts=tuple(accounts), data=data)


def decode_message(buf: bytes) -> Message:
    """
    Decode canonical bytes back into a Message.

    Raises:
        EncodingError: If the buffer is truncated, a flag byte is not 0/1,
            or bytes remain after the last instruction
    """
    reader = BinaryReader(buf)

    signer_count = reader.u8("signer count")
    signers = [_read_pubkey(reader, "signer") for _ in range(signer_count)]

    instruction_count = reader.u8("instruction count")
    instructions = [_read_instruction(reader) for _ in range(instruction_count)]

    if not reader.eof:
        raise EncodingError(
            f"{reader.remaining} trailing bytes after message",
            ErrorCode.TRAILING_BYTES,
            details={"offset": reader.offset, "remaining": reader.remaining},
        )

    return Message(signers=tuple(signers), instructions=tuple(instructions))


__all__ = [
    "encode_account_meta",
    "encode_instruction",
    "encode_message",
    "decode_message",
]
