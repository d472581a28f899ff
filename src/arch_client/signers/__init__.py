"""
Signers for the Arch network.
"""

from .signer import PrivateKeyLike, SchnorrSigner, Signer, sign_message, verify_message_signature

__all__ = [
    "PrivateKeyLike",
    "SchnorrSigner",
    "Signer",
    "sign_message",
    "verify_message_signature",
]
