"""PyTeal rendition of the split escrow logic.

The deployed program is always the compiled template in `config`; this is the
readable counterpart used to audit what a parameterized contract approves.
"""

from pyteal import Addr, And, Global, Gtxn, If, Int, Mode, Txn, TxnType, compileTeal

TEAL_VERSION = 2


def split_escrow(owner, receiver_one, receiver_two, ratn, ratd, expiry_round, min_pay, max_fee):
    """Return the PyTeal expression approving split withdrawals and the owner's refund.
    Args:
        owner (str): Base 32 Algorand address refunded after expiry_round.
        receiver_one (str): Base 32 Algorand address of the first receiver.
        receiver_two (str): Base 32 Algorand address of the second receiver.
    """

    # Checks the type of transaction and that the fee stays below max_fee
    split_core = And(
        Txn.type_enum() == TxnType.Payment,
        Txn.fee() < Int(max_fee),
    )

    # Both payments leave the same account, nothing is closed out and the
    # amounts follow the contract ratio
    split_transfer = And(
        Gtxn[0].sender() == Gtxn[1].sender(),
        Txn.close_remainder_to() == Global.zero_address(),
        Gtxn[0].receiver() == Addr(receiver_one),
        Gtxn[1].receiver() == Addr(receiver_two),
        Gtxn[0].amount() * Int(ratn) == Gtxn[1].amount() * Int(ratd),
        Gtxn[0].amount() >= Int(min_pay),
    )

    # Txn.first_valid() > expiry_round then remaining balance is closed to owner
    split_close = And(
        Txn.close_remainder_to() == Addr(owner),
        Txn.receiver() == Global.zero_address(),
        Txn.amount() == Int(0),
        Txn.first_valid() > Int(expiry_round),
    )

    return And(split_core, If(Global.group_size() == Int(2), split_transfer, split_close))


def split_teal(owner, receiver_one, receiver_two, ratn, ratd, expiry_round, min_pay, max_fee):
    """Compile and return TEAL source for the provided split parameters."""
    return compileTeal(
        split_escrow(owner, receiver_one, receiver_two, ratn, ratd, expiry_round, min_pay, max_fee),
        mode=Mode.Signature,
        version=TEAL_VERSION,
    )
