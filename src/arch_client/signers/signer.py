"""
Signer interface and Schnorr message signing for the Arch network.

Every signer signs the same message digest independently; there is no
signature aggregation. Signatures are returned in the order of the supplied
keys, which must follow ``message.signers`` positionally.
"""

from __future__ import annotations
import logging
from abc import ABC, abstractmethod
from typing import List, Optional, Sequence, Union

from ..codec.hashes import message_digest
from ..crypto.secp256k1 import SchnorrKeyPair, verify_signature
from ..types import Message, Pubkey, decode_hex

logger = logging.getLogger(__name__)

PrivateKeyLike = Union[SchnorrKeyPair, bytes, str]


class Signer(ABC):
    """Base signer interface."""

    @abstractmethod
    def sign(self, digest: bytes) -> bytes:
        """
        Sign a digest.

        Args:
            digest: 32-byte hash to sign

        Returns:
            Signature bytes
        """

    @abstractmethod
    def verify(self, signature: bytes, digest: bytes) -> bool:
        """Verify a signature against a digest."""

    @abstractmethod
    def get_public_key(self) -> Pubkey:
        """Get the signer's public key."""

    def sign_message(self, message: Message) -> str:
        """Sign a message's digest and return the signature as hex."""
        return self.sign(message_digest(message)).hex()


class SchnorrSigner(Signer):
    """BIP-340 Schnorr signer over secp256k1."""

    def __init__(self, key: PrivateKeyLike, aux_randomness: Optional[bytes] = None):
        """
        Initialize Schnorr signer.

        Args:
            key: Key pair, 32 raw secret bytes or secret hex
            aux_randomness: Fixed auxiliary randomness for deterministic
                signatures (tests); fresh randomness is used when omitted
        """
        self.key_pair = SchnorrKeyPair.coerce(key)
        self.aux_randomness = aux_randomness

    def sign(self, digest: bytes) -> bytes:
        return self.key_pair.sign(digest, self.aux_randomness)

    def verify(self, signature: bytes, digest: bytes) -> bool:
        return self.key_pair.verify(signature, digest)

    def get_public_key(self) -> Pubkey:
        return self.key_pair.pubkey()


def sign_message(message: Message, private_keys: Sequence[PrivateKeyLike]) -> List[str]:
    """
    Sign a message with each private key.

    Every key is validated before any signature is produced, so an invalid
    key fails the whole call with no partial output.

    Args:
        message: Message to sign
        private_keys: Keys in the same order as ``message.signers``

    Returns:
        Hex-encoded 64-byte signatures, one per key, in key order

    Raises:
        InvalidPrivateKeyError: If any key is not a valid secp256k1 scalar
    """
    signers = [SchnorrSigner(key) for key in private_keys]
    digest = message_digest(message)
    logger.debug("Signing message digest %s with %d key(s)", digest.hex(), len(signers))
    return [signer.sign(digest).hex() for signer in signers]


def verify_message_signature(message: Message, signature: Union[str, bytes], pubkey: Pubkey) -> bool:
    """
    Verify one signature over a message's digest.

    Raises:
        InvalidEncodingError: If a hex signature contains non-hex characters
    """
    raw = decode_hex(signature, "signature") if isinstance(signature, str) else signature
    return verify_signature(raw, message_digest(message), pubkey)
