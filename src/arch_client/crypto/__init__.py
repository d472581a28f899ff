"""
Cryptographic primitives for the Arch network.

Provides BIP-340 Schnorr signing over secp256k1.
"""

from .secp256k1 import SECP256K1_ORDER, SchnorrKeyPair, validate_private_key, verify_signature

__all__ = [
    "SECP256K1_ORDER",
    "SchnorrKeyPair",
    "validate_private_key",
    "verify_signature",
]
