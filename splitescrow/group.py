"""Atomic withdrawal groups signed by the split contract's program."""

import base64
import logging

from algosdk import encoding, transaction

from splitescrow.errors import TransactionBuildError

logger = logging.getLogger(__name__)


def suggested_params(fee, first_round, last_round, genesis_hash):
    """Return flat-fee transaction parameters for the provided validity window."""
    if isinstance(genesis_hash, (bytes, bytearray)):
        genesis_hash = base64.b64encode(genesis_hash).decode()
    return transaction.SuggestedParams(
        fee, first_round, last_round, genesis_hash, flat_fee=True
    )


def create_payment_transaction(escrow_address, params, receiver, amount):
    """Create and return payment transaction from provided arguments"""
    return transaction.PaymentTxn(escrow_address, params, receiver, amount)


def build_split_group(
    address, program, receiver_one, receiver_two, amount_one, amount_two,
    fee, first_round, last_round, genesis_hash,
):
    """Build the two grouped payments out of the contract account.

    Both payments are sent from `address`, share one group id and are
    authorized by a LogicSig over `program`.

    Returns:
        list: the two LogicSigTransaction objects, receiver one's first
    """
    try:
        params = suggested_params(fee, first_round, last_round, genesis_hash)
        txn_1 = create_payment_transaction(address, params, receiver_one, amount_one)
        txn_2 = create_payment_transaction(address, params, receiver_two, amount_two)

        group_id = transaction.calculate_group_id([txn_1, txn_2])
        txn_1.group = group_id
        txn_2.group = group_id

        logic_sig = transaction.LogicSigAccount(bytes(program))
        signed = [
            transaction.LogicSigTransaction(txn_1, logic_sig),
            transaction.LogicSigTransaction(txn_2, logic_sig),
        ]
    except Exception as exc:
        raise TransactionBuildError(
            "could not build split transactions: {}".format(exc)
        ) from exc

    logger.debug(
        "built group %s paying %d and %d from %s",
        base64.b64encode(group_id).decode(), amount_one, amount_two, address,
    )
    return signed


def serialize_group(signed_transactions):
    """Concatenate the msgpack encodings of `signed_transactions` in order.

    The result is what algod's raw transaction endpoint accepts for a group.
    """
    try:
        return b"".join(
            base64.b64decode(encoding.msgpack_encode(stxn))
            for stxn in signed_transactions
        )
    except Exception as exc:
        raise TransactionBuildError(
            "could not encode split transactions: {}".format(exc)
        ) from exc


def write_group(path, signed_transactions):
    """Write the signed group to `path` for `goal clerk rawsend`."""
    transaction.write_to_file(list(signed_transactions), str(path))
    logger.info("wrote %d signed transactions to %s", len(signed_transactions), path)
