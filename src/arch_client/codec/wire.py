"""
Wire Format

Converts transactions into the JSON shape accepted by the node's RPC: every
binary field becomes an array of byte values and signatures travel as raw
64-byte arrays. This is the transport form only; hashing always goes through
encode_message.
"""

from typing import Any, Dict, List

from ..types import AccountMeta, Instruction, Message, RuntimeTransaction


def serialize_account_meta(account: AccountMeta) -> Dict[str, Any]:
    return {
        "pubkey": account.pubkey.serialize(),
        "is_signer": account.is_signer,
        "is_writable": account.is_writable,
    }


def serialize_instruction(instruction: Instruction) -> Dict[str, Any]:
    """Wire form of one instruction."""
    return {
        "program_id": instruction.program_id.serialize(),
        "accounts": [serialize_account_meta(account) for account in instruction.accounts],
        "data": list(instruction.data),
    }


def serialize_message(message: Message) -> Dict[str, Any]:
    """Wire form of a message."""
    return {
        "signers": [signer.serialize() for signer in message.signers],
        "instructions": [serialize_instruction(inst) for inst in message.instructions],
    }


def serialize_transaction(transaction: RuntimeTransaction) -> Dict[str, Any]:
    """
    Wire form of a transaction, as passed in send_transaction params.

    Args:
        transaction: Signed transaction

    Returns:
        JSON-compatible dict with message, signatures and version
    """
    return {
        "message": serialize_message(transaction.message),
        "signatures": [list(sig) for sig in transaction.signature_bytes()],
        "version": transaction.version,
    }


def serialize_transactions(transactions: List[RuntimeTransaction]) -> List[Dict[str, Any]]:
    return [serialize_transaction(tx) for tx in transactions]
