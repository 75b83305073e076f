"""Contract account addresses derived from program bytes."""

import logging

from algosdk import constants, encoding

logger = logging.getLogger(__name__)


def program_digest(bytecode):
    """Return the 32-byte SHA-512/256 digest identifying `bytecode`."""
    return encoding.checksum(constants.logic_prefix + bytes(bytecode))


def derive_address(bytecode):
    """Return the address of the contract account running `bytecode`.

    The same program always hashes to the same account, and this is the
    address a LogicSig built from `bytecode` signs for.
    """
    address = encoding.encode_address(program_digest(bytecode))
    logger.debug("program of %d bytes maps to %s", len(bytecode), address)
    return address
