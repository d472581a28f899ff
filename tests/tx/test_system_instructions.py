"""
System program instruction tests.
"""

import pytest

from arch_client.runtime.errors import EncodingError, InvalidEncodingError, InvalidLengthError
from arch_client.tx import (
    SystemInstruction,
    create_account_instruction,
    encode_create_account_data,
    encode_transfer_account_ownership_data,
    transfer_account_ownership_instruction,
)
from arch_client.types import SYSTEM_PROGRAM_ID, Pubkey

TXID_HEX = "ab" * 31 + "cd"


class TestCreateAccount:

    def test_data_layout(self):
        data = encode_create_account_data(TXID_HEX, 1)
        assert len(data) == 37
        assert data[0] == SystemInstruction.CREATE_ACCOUNT == 0
        assert data[1:33] == bytes.fromhex(TXID_HEX)
        assert data[33:] == b"\x01\x00\x00\x00"

    def test_txid_not_reversed(self):
        data = encode_create_account_data(bytes(range(32)), 0)
        assert data[1:33] == bytes(range(32))

    def test_vout_little_endian(self):
        data = encode_create_account_data(TXID_HEX, 0x01020304)
        assert data[33:] == bytes([0x04, 0x03, 0x02, 0x01])

    def test_vout_overflow(self):
        with pytest.raises(EncodingError):
            encode_create_account_data(TXID_HEX, 2 ** 32)

    @pytest.mark.parametrize("txid", [
        "not hex",
        " ".join(["ab"] * 32),
        TXID_HEX[:-2] + " d",
    ], ids=["words", "spaced", "inner-space"])
    def test_bad_txid_hex(self, txid):
        with pytest.raises(InvalidEncodingError):
            encode_create_account_data(txid, 0)

    @pytest.mark.parametrize("length", [0, 31, 33])
    def test_bad_txid_length(self, length):
        with pytest.raises(InvalidLengthError):
            encode_create_account_data(bytes(length), 0)

    def test_instruction(self, ones_pubkey):
        instruction = create_account_instruction(ones_pubkey, TXID_HEX, 3)
        assert instruction.program_id == SYSTEM_PROGRAM_ID
        assert len(instruction.accounts) == 1
        account = instruction.accounts[0]
        assert account.pubkey == ones_pubkey
        assert account.is_signer and account.is_writable
        assert instruction.data == encode_create_account_data(TXID_HEX, 3)


class TestTransferAccountOwnership:

    def test_data_layout(self):
        program = Pubkey(b"\x09" * 32)
        data = encode_transfer_account_ownership_data(program)
        assert len(data) == 33
        assert data[0] == SystemInstruction.TRANSFER_ACCOUNT_OWNERSHIP == 3
        assert data[1:] == program.bytes

    def test_instruction(self, ones_pubkey):
        program = Pubkey(b"\x09" * 32)
        instruction = transfer_account_ownership_instruction(ones_pubkey, program)
        assert instruction.program_id == SYSTEM_PROGRAM_ID
        assert [a.pubkey for a in instruction.accounts] == [ones_pubkey]
        assert instruction.accounts[0].is_signer
        assert instruction.accounts[0].is_writable
        assert instruction.data[1:] == program.bytes
