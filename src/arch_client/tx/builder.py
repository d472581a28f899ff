"""
Transaction assembly and verification.

Signing checks every key against its positional signer before producing any
signature, so a transaction is either fully signed or not built at all.
"""

from __future__ import annotations
import logging
from typing import List, Optional, Sequence

from ..codec.hashes import message_digest
from ..crypto.secp256k1 import SchnorrKeyPair, verify_signature
from ..runtime.errors import ErrorCode, ValidationError
from ..signers.signer import PrivateKeyLike
from ..types import TRANSACTION_VERSION, Instruction, Message, Pubkey, RuntimeTransaction

logger = logging.getLogger(__name__)


def sign_transaction(
    message: Message,
    private_keys: Sequence[PrivateKeyLike],
    version: int = TRANSACTION_VERSION,
    aux_randomness: Optional[bytes] = None,
) -> RuntimeTransaction:
    """
    Sign a message and wrap it in a transaction.

    Args:
        message: Message to sign
        private_keys: One key per entry of ``message.signers``, same order
        version: Transaction version tag
        aux_randomness: Fixed BIP-340 auxiliary randomness (tests only)

    Returns:
        Signed RuntimeTransaction

    Raises:
        InvalidPrivateKeyError: If a key is not a valid scalar
        ValidationError: If the key count or a key's public key does not
            match ``message.signers``
    """
    key_pairs = [SchnorrKeyPair.coerce(key) for key in private_keys]

    if len(key_pairs) != len(message.signers):
        raise ValidationError(
            f"Got {len(key_pairs)} private keys for {len(message.signers)} signers",
            code=ErrorCode.SIGNATURE_COUNT_MISMATCH,
            details={"keys": len(key_pairs), "signers": len(message.signers)},
        )

    for index, (key_pair, signer) in enumerate(zip(key_pairs, message.signers)):
        if key_pair.pubkey() != signer:
            raise ValidationError(
                f"Private key {index} does not belong to signer {signer}",
                code=ErrorCode.SIGNER_MISMATCH,
                details={"index": index, "signer": signer.to_hex()},
            )

    digest = message_digest(message)
    logger.debug("Signing transaction digest %s for %d signer(s)", digest.hex(), len(key_pairs))
    signatures = [key_pair.sign(digest, aux_randomness).hex() for key_pair in key_pairs]
    return RuntimeTransaction(version=version, signatures=tuple(signatures), message=message)


def verify_transaction(transaction: RuntimeTransaction) -> bool:
    """True when every signature verifies against its positional signer."""
    digest = message_digest(transaction.message)
    return all(
        verify_signature(signature, digest, signer)
        for signature, signer in zip(transaction.signature_bytes(), transaction.message.signers)
    )


class TransactionBuilder:
    """
    Fluent builder for messages and signed transactions.

    Example:
        ```python
        tx = (TransactionBuilder()
              .add_signer(key_pair.pubkey())
              .add_instruction(instruction)
              .sign([key_pair]))
        ```
    """

    def __init__(self, version: int = TRANSACTION_VERSION):
        self.version = version
        self.signers: List[Pubkey] = []
        self.instructions: List[Instruction] = []

    def add_signer(self, pubkey: Pubkey) -> TransactionBuilder:
        """Append a signer; order determines signature positions."""
        self.signers.append(pubkey)
        return self

    def add_instruction(self, instruction: Instruction) -> TransactionBuilder:
        """Append an instruction; order is part of the signed content."""
        self.instructions.append(instruction)
        return self

    def build_message(self) -> Message:
        return Message(signers=tuple(self.signers), instructions=tuple(self.instructions))

    def sign(self, private_keys: Sequence[PrivateKeyLike],
             aux_randomness: Optional[bytes] = None) -> RuntimeTransaction:
        """Build the message and sign it with keys ordered like the signers."""
        return sign_transaction(self.build_message(), private_keys, self.version, aux_randomness)
