"""
Test bootstrap:
- Make tests/ importable so helper modules resolve at collection time
- Shared keys, messages and golden vectors for codec and signing tests
"""
import pathlib
import sys

import pytest

TESTS_DIR = pathlib.Path(__file__).parent

if str(TESTS_DIR) not in sys.path:
    sys.path.insert(0, str(TESTS_DIR))

from arch_client.crypto.secp256k1 import SchnorrKeyPair
from arch_client.types import SYSTEM_PROGRAM_ID, AccountMeta, Instruction, Message, Pubkey


# Fixed secp256k1 test key
PRIVATE_KEY_HEX = "04734278f0a035427c79b76726233aeb3832f45562f3980ec53d6aedf0f3d8df"


@pytest.fixture
def key_pair():
    """Deterministic Schnorr key pair."""
    return SchnorrKeyPair.from_hex(PRIVATE_KEY_HEX)


@pytest.fixture
def second_key_pair():
    return SchnorrKeyPair((7).to_bytes(32, "big"))


@pytest.fixture
def ones_pubkey():
    """Pubkey of 32 bytes of 0x01, the signer in the golden vector."""
    return Pubkey(b"\x01" * 32)


@pytest.fixture
def golden_message(ones_pubkey):
    """One signer, one system program instruction, empty data."""
    instruction = Instruction(
        program_id=SYSTEM_PROGRAM_ID,
        accounts=(AccountMeta(pubkey=ones_pubkey, is_signer=True, is_writable=True),),
        data=b"",
    )
    return Message(signers=(ones_pubkey,), instructions=(instruction,))


@pytest.fixture
def signed_message(key_pair):
    """Message whose only signer is ``key_pair``."""
    pubkey = key_pair.pubkey()
    instruction = Instruction(
        program_id=SYSTEM_PROGRAM_ID,
        accounts=(AccountMeta(pubkey=pubkey, is_signer=True, is_writable=True),),
        data=bytes(37),
    )
    return Message(signers=(pubkey,), instructions=(instruction,))
