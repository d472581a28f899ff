"""
BIP-340 Schnorr key pair tests.

Signing vectors are taken from the BIP-340 reference test vector set.
"""

import pytest

from arch_client.crypto import SECP256K1_ORDER, SchnorrKeyPair, validate_private_key, verify_signature
from arch_client.runtime.errors import ErrorCode, InvalidLengthError, InvalidPrivateKeyError
from arch_client.types import Pubkey

BIP340_VECTORS = [
    {
        "index": 0,
        "secret": "0000000000000000000000000000000000000000000000000000000000000003",
        "pubkey": "f9308a019258c31049344f85f89d5229b531c845836f99b08601f113bce036f9",
        "aux": "0000000000000000000000000000000000000000000000000000000000000000",
        "message": "0000000000000000000000000000000000000000000000000000000000000000",
        "signature": (
            "e907831f80848d1069a5371b402410364bdf1c5f8307b0084c55f1ce2dca8215"
            "25f66a4a85ea8b71e482a74f382d2ce5ebeee8fdb2172f477df4900d310536c0"
        ),
    },
    {
        "index": 1,
        "secret": "b7e151628aed2a6abf7158809cf4f3c762e7160f38b4da56a784d9045190cfef",
        "pubkey": "dff1d77f2a671c5f36183726db2341be58feae1da2deced843240f7b502ba659",
        "aux": "0000000000000000000000000000000000000000000000000000000000000001",
        "message": "243f6a8885a308d313198a2e03707344a4093822299f31d0082efa98ec4e6c89",
        "signature": (
            "6896bd60eeae296db48a229ff71dfe071bde413e6d43f917dc8dcf8c78de3341"
            "8906d11ac976abccb20b091292bff4ea897efcb639ea871cfa95f6de339e4b0a"
        ),
    },
]

# BIP-340 vector 5: x coordinate with no point on the curve
NOT_ON_CURVE_PUBKEY = "eefdea4cdb677750a420fee807eacf21eb9898ae79b9768766e4faa04a2d4a34"


@pytest.mark.parametrize("vector", BIP340_VECTORS, ids=lambda v: f"bip340-{v['index']}")
class TestBip340Vectors:

    def test_public_key(self, vector):
        key_pair = SchnorrKeyPair.from_hex(vector["secret"])
        assert key_pair.public_key_bytes().hex() == vector["pubkey"]
        assert key_pair.pubkey() == Pubkey.from_hex(vector["pubkey"])

    def test_signature(self, vector):
        key_pair = SchnorrKeyPair.from_hex(vector["secret"])
        signature = key_pair.sign(bytes.fromhex(vector["message"]), bytes.fromhex(vector["aux"]))
        assert signature.hex() == vector["signature"]

    def test_verify(self, vector):
        assert verify_signature(
            bytes.fromhex(vector["signature"]),
            bytes.fromhex(vector["message"]),
            Pubkey.from_hex(vector["pubkey"]),
        )


class TestVerification:

    def test_sign_then_verify(self, key_pair):
        digest = bytes(range(32))
        signature = key_pair.sign(digest)
        assert len(signature) == 64
        assert key_pair.verify(signature, digest)
        assert verify_signature(signature, digest, key_pair.pubkey())

    def test_wrong_digest_fails(self, key_pair):
        signature = key_pair.sign(bytes(32))
        assert not key_pair.verify(signature, b"\x01" + bytes(31))

    def test_wrong_key_fails(self, key_pair, second_key_pair):
        digest = bytes(32)
        signature = key_pair.sign(digest)
        assert not verify_signature(signature, digest, second_key_pair.pubkey())

    def test_flipped_signature_bit_fails(self, key_pair):
        digest = bytes(32)
        signature = bytearray(key_pair.sign(digest))
        signature[63] ^= 0x01
        assert not key_pair.verify(bytes(signature), digest)

    def test_pubkey_not_on_curve(self):
        vector = BIP340_VECTORS[0]
        assert verify_signature(
            bytes.fromhex(vector["signature"]),
            bytes.fromhex(vector["message"]),
            bytes.fromhex(NOT_ON_CURVE_PUBKEY),
        ) is False

    def test_malformed_lengths_return_false(self, key_pair):
        digest = bytes(32)
        signature = key_pair.sign(digest)
        assert verify_signature(signature[:63], digest, key_pair.pubkey()) is False
        assert verify_signature(signature, digest[:31], key_pair.pubkey()) is False

    def test_sign_rejects_non_digest(self, key_pair):
        with pytest.raises(InvalidLengthError):
            key_pair.sign(b"not a digest")

    def test_fixed_aux_is_deterministic(self, key_pair):
        digest = bytes(32)
        aux = bytes(32)
        assert key_pair.sign(digest, aux) == key_pair.sign(digest, aux)


class TestPrivateKeys:

    @pytest.mark.parametrize("secret", [
        bytes(32),
        SECP256K1_ORDER.to_bytes(32, "big"),
        (SECP256K1_ORDER + 1).to_bytes(32, "big"),
        b"\xff" * 32,
    ], ids=["zero", "order", "order-plus-one", "all-ff"])
    def test_out_of_range_scalar(self, secret):
        with pytest.raises(InvalidPrivateKeyError) as exc_info:
            SchnorrKeyPair(secret)
        assert exc_info.value.code == ErrorCode.INVALID_PRIVATE_KEY

    @pytest.mark.parametrize("length", [0, 31, 33, 64])
    def test_wrong_length(self, length):
        with pytest.raises(InvalidPrivateKeyError):
            SchnorrKeyPair(b"\x01" * length)

    def test_bad_hex(self):
        with pytest.raises(InvalidPrivateKeyError):
            SchnorrKeyPair.from_hex("zz" * 32)

    def test_largest_valid_scalar(self):
        secret = (SECP256K1_ORDER - 1).to_bytes(32, "big")
        assert validate_private_key(secret) == secret
        assert len(SchnorrKeyPair(secret).public_key_bytes()) == 32

    def test_hex_round_trip(self, key_pair):
        restored = SchnorrKeyPair.from_hex(key_pair.to_hex())
        assert restored.pubkey() == key_pair.pubkey()
        assert restored.to_bytes() == key_pair.to_bytes()

    def test_generate(self):
        first, second = SchnorrKeyPair.generate(), SchnorrKeyPair.generate()
        assert first.pubkey() != second.pubkey()

    def test_coerce(self, key_pair):
        assert SchnorrKeyPair.coerce(key_pair) is key_pair
        assert SchnorrKeyPair.coerce(key_pair.to_hex()).pubkey() == key_pair.pubkey()
        assert SchnorrKeyPair.coerce(key_pair.to_bytes()).pubkey() == key_pair.pubkey()

    def test_repr_hides_secret(self, key_pair):
        assert key_pair.to_hex() not in repr(key_pair)
