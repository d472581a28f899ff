"""
SECP256K1 Schnorr operations for the Arch network.

Provides BIP-340 Schnorr signatures with x-only public keys, backed by
coincurve (libsecp256k1).
"""

from __future__ import annotations
from typing import Optional, Union

from coincurve.keys import PrivateKey, PublicKeyXOnly

from ..runtime.errors import InvalidLengthError, InvalidPrivateKeyError
from ..types import Pubkey, SIGNATURE_LENGTH

SECP256K1_ORDER = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141
PRIVATE_KEY_LENGTH = 32
DIGEST_LENGTH = 32


def validate_private_key(private_key_bytes: bytes) -> bytes:
    """
    Check that bytes form a valid secp256k1 secret scalar.

    Args:
        private_key_bytes: 32-byte big-endian scalar

    Returns:
        The same bytes

    Raises:
        InvalidPrivateKeyError: If the length is wrong or the scalar is not
            in [1, n-1]
    """
    if not isinstance(private_key_bytes, (bytes, bytearray)):
        raise InvalidPrivateKeyError(
            f"Private key must be bytes, got {type(private_key_bytes).__name__}"
        )
    if len(private_key_bytes) != PRIVATE_KEY_LENGTH:
        raise InvalidPrivateKeyError(
            f"Private key must be {PRIVATE_KEY_LENGTH} bytes, got {len(private_key_bytes)}",
            details={"length": len(private_key_bytes)},
        )
    scalar = int.from_bytes(private_key_bytes, "big")
    if not 0 < scalar < SECP256K1_ORDER:
        raise InvalidPrivateKeyError("Private key is not a valid secp256k1 scalar")
    return bytes(private_key_bytes)


class SchnorrKeyPair:
    """
    SECP256K1 key pair producing BIP-340 Schnorr signatures.

    The public key is the 32-byte x-only key, which is also the account's
    Pubkey on the Arch network.
    """

    def __init__(self, private_key_bytes: Optional[bytes] = None):
        """
        Initialize key pair.

        Args:
            private_key_bytes: 32-byte private key; a random key is generated
                when omitted

        Raises:
            InvalidPrivateKeyError: If the key is not a valid scalar
        """
        if private_key_bytes is None:
            self._private_key = PrivateKey()
        else:
            secret = validate_private_key(private_key_bytes)
            try:
                self._private_key = PrivateKey(secret)
            except ValueError as e:
                raise InvalidPrivateKeyError(str(e), cause=e) from e

        # Compressed SEC1 key minus its parity prefix is the x-only key.
        self._xonly = self._private_key.public_key.format(compressed=True)[1:]

    @classmethod
    def generate(cls) -> SchnorrKeyPair:
        """Generate a new random key pair."""
        return cls()

    @classmethod
    def from_hex(cls, private_key_hex: str) -> SchnorrKeyPair:
        """Create key pair from private key hex string."""
        try:
            private_key_bytes = bytes.fromhex(private_key_hex)
        except (TypeError, ValueError) as e:
            raise InvalidPrivateKeyError(f"Invalid private key hex: {e}", cause=e) from e
        return cls(private_key_bytes)

    @classmethod
    def coerce(cls, key: Union[SchnorrKeyPair, bytes, str]) -> SchnorrKeyPair:
        """Accept a key pair, raw 32 bytes or a hex string."""
        if isinstance(key, cls):
            return key
        if isinstance(key, str):
            return cls.from_hex(key)
        return cls(key)

    def pubkey(self) -> Pubkey:
        """The x-only public key as an Arch Pubkey."""
        return Pubkey(self._xonly)

    def public_key_bytes(self) -> bytes:
        return self._xonly

    def sign(self, digest: bytes, aux_randomness: Optional[bytes] = None) -> bytes:
        """
        Sign a 32-byte digest.

        Args:
            digest: 32-byte digest to sign
            aux_randomness: Optional 32 bytes of auxiliary randomness;
                fresh randomness is drawn when omitted

        Returns:
            64-byte BIP-340 signature
        """
        if len(digest) != DIGEST_LENGTH:
            raise InvalidLengthError(f"Digest must be {DIGEST_LENGTH} bytes, got {len(digest)}")
        if aux_randomness is None:
            return self._private_key.sign_schnorr(digest)
        return self._private_key.sign_schnorr(digest, aux_randomness)

    def verify(self, signature: bytes, digest: bytes) -> bool:
        """Verify a signature made by this key."""
        return verify_signature(signature, digest, self._xonly)

    def to_hex(self) -> str:
        """Get private key as hex string."""
        return self._private_key.secret.hex()

    def to_bytes(self) -> bytes:
        """Get private key as bytes."""
        return self._private_key.secret

    def __repr__(self) -> str:
        return f"SchnorrKeyPair(public={self._xonly.hex()[:16]}...)"


def verify_signature(signature: bytes, digest: bytes, pubkey: Union[Pubkey, bytes]) -> bool:
    """
    Verify a BIP-340 signature against a digest and an x-only public key.

    Returns False for malformed signatures or keys that are not on the curve.
    """
    key_bytes = pubkey.bytes if isinstance(pubkey, Pubkey) else bytes(pubkey)
    if len(signature) != SIGNATURE_LENGTH or len(digest) != DIGEST_LENGTH:
        return False
    try:
        public_key = PublicKeyXOnly(key_bytes)
    except ValueError:
        return False
    return public_key.verify(bytes(signature), bytes(digest))


__all__ = [
    "SECP256K1_ORDER",
    "SchnorrKeyPair",
    "validate_private_key",
    "verify_signature",
]
