import base64

import msgpack
import pytest
from algosdk import encoding

from splitescrow import make_split


def _address(seed):
    return encoding.encode_address(bytes([seed]) * 32)


def unpack_group(blob):
    """Return the signed transaction dicts concatenated in `blob`."""
    unpacker = msgpack.Unpacker(raw=False)
    unpacker.feed(blob)
    return list(unpacker)


@pytest.fixture
def owner():
    return _address(1)


@pytest.fixture
def receiver_one():
    return _address(2)


@pytest.fixture
def receiver_two():
    return _address(3)


@pytest.fixture
def genesis_hash():
    return bytes(range(32))


@pytest.fixture
def genesis_hash_b64(genesis_hash):
    return base64.b64encode(genesis_hash).decode()


@pytest.fixture
def split(owner, receiver_one, receiver_two):
    """The 1/3 split used throughout the withdrawal tests."""
    return make_split(
        owner, receiver_one, receiver_two,
        ratn=1, ratd=3, expiry_round=100, min_pay=1000, max_fee=10,
    )


@pytest.fixture
def unpack():
    return unpack_group
