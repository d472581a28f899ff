"""
Transaction building for the Arch network.

Provides message assembly, signing and the system program instructions.
"""

from .builder import TransactionBuilder, sign_transaction, verify_transaction
from .system import (
    SystemInstruction,
    create_account_instruction,
    encode_create_account_data,
    encode_transfer_account_ownership_data,
    transfer_account_ownership_instruction,
)

__all__ = [
    "TransactionBuilder",
    "sign_transaction",
    "verify_transaction",
    "SystemInstruction",
    "create_account_instruction",
    "encode_create_account_data",
    "encode_transfer_account_ownership_data",
    "transfer_account_ownership_instruction",
]
