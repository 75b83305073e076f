"""Tests for building and serializing the withdrawal group."""

import base64

import pytest
from algosdk import encoding

from splitescrow import config
from splitescrow.address import derive_address
from splitescrow.errors import TransactionBuildError
from splitescrow.group import build_split_group, serialize_group, suggested_params, write_group


@pytest.fixture
def program():
    return config.SPLIT_TEMPLATE_BYTES


@pytest.fixture
def signed(program, receiver_one, receiver_two, genesis_hash):
    return build_split_group(
        derive_address(program), program, receiver_one, receiver_two,
        1000, 2000, 10, 10, 20, genesis_hash,
    )


class TestSuggestedParams:
    def test_raw_genesis_hash_is_base64_encoded(self, genesis_hash, genesis_hash_b64):
        params = suggested_params(10, 1, 2, genesis_hash)
        assert params.gh == genesis_hash_b64
        assert params.flat_fee

    def test_base64_genesis_hash_passes_through(self, genesis_hash_b64):
        assert suggested_params(10, 1, 2, genesis_hash_b64).gh == genesis_hash_b64


class TestBuildSplitGroup:
    def test_two_transactions_share_group(self, signed):
        txn_1, txn_2 = (stxn.transaction for stxn in signed)
        assert txn_1.group is not None
        assert txn_1.group == txn_2.group
        assert len(txn_1.group) == 32

    def test_payments_leave_contract(self, signed, program, receiver_one, receiver_two):
        address = derive_address(program)
        assert [stxn.transaction.sender for stxn in signed] == [address, address]
        assert [stxn.transaction.receiver for stxn in signed] == [receiver_one, receiver_two]
        assert [stxn.transaction.amt for stxn in signed] == [1000, 2000]

    def test_shared_fee_and_validity(self, signed):
        for stxn in signed:
            assert stxn.transaction.fee == 10
            assert stxn.transaction.first_valid_round == 10
            assert stxn.transaction.last_valid_round == 20

    def test_signed_by_program(self, signed, program):
        for stxn in signed:
            assert stxn.lsig.logic == program
            assert stxn.auth_addr is None

    def test_bad_receiver(self, program, receiver_two, genesis_hash):
        with pytest.raises(TransactionBuildError):
            build_split_group(
                derive_address(program), program, "not-an-address", receiver_two,
                1000, 2000, 10, 10, 20, genesis_hash,
            )


class TestSerializeGroup:
    def test_concatenates_in_order(self, signed):
        blob = serialize_group(signed)
        first = base64.b64decode(encoding.msgpack_encode(signed[0]))
        second = base64.b64decode(encoding.msgpack_encode(signed[1]))
        assert blob == first + second

    def test_unpacks_to_linked_pair(self, signed, program, unpack):
        stxn_1, stxn_2 = unpack(serialize_group(signed))
        assert stxn_1["txn"]["grp"] == stxn_2["txn"]["grp"]
        assert stxn_1["lsig"]["l"] == stxn_2["lsig"]["l"] == program
        sender = encoding.decode_address(derive_address(program))
        assert stxn_1["txn"]["snd"] == stxn_2["txn"]["snd"] == sender


class TestWriteGroup:
    def test_writes_serialized_group(self, signed, tmp_path):
        path = tmp_path / "split.stxn"
        write_group(path, signed)
        assert path.read_bytes() == serialize_group(signed)

