"""Split payment contract where a withdrawal is divided between two receivers at a fixed ratio.

The contract is a stateless escrow account: its address is the hash of the
program, so anyone holding the parameters can recompute both.
"""

import base64
import logging
from dataclasses import dataclass

from algosdk import encoding

from splitescrow import config, teal
from splitescrow.address import derive_address
from splitescrow.errors import DecodingError, EncodingError, TemplateInputError
from splitescrow.group import build_split_group, serialize_group
from splitescrow.ratio import split_amount, validate_ratio
from splitescrow.template import extract, inject

logger = logging.getLogger(__name__)


def _address_text(value):
    if isinstance(value, (bytes, bytearray)):
        return encoding.encode_address(bytes(value))
    return value


@dataclass(frozen=True)
class Split:
    """A parameterized split contract; build it with `make_split`."""

    address: str
    program: str
    ratn: int
    ratd: int
    receiver_one: str
    receiver_two: str
    owner: str
    expiry_round: int
    min_pay: int
    max_fee: int

    def get_address(self):
        """Return the contract account address."""
        return self.address

    def get_program(self):
        """Return the base64 encoded contract program."""
        return self.program

    def get_program_bytes(self):
        return base64.b64decode(self.program)

    def get_teal(self):
        """Return TEAL source describing what this contract approves."""
        return teal.split_teal(
            self.owner, self.receiver_one, self.receiver_two, self.ratn, self.ratd,
            self.expiry_round, self.min_pay, self.max_fee,
        )

    def get_split_funds_transactions(
        self, amount, precise, first_round, last_round, fee, genesis_hash
    ):
        """Return the two signed transactions withdrawing `amount` from the contract.

        Args:
            amount (int): total to withdraw, in microAlgos
            precise (bool): raise ImpreciseSplitError instead of giving the
                rounding leftover to receiver two
            first_round (int): first valid round of both transactions
            last_round (int): last valid round of both transactions
            fee (int): flat fee paid by each transaction
            genesis_hash (bytes | str): genesis hash, raw or base64
        """
        amount_one, amount_two = split_amount(amount, self.ratn, self.ratd, precise)
        return build_split_group(
            self.address, self.get_program_bytes(),
            self.receiver_one, self.receiver_two, amount_one, amount_two,
            fee, first_round, last_round, genesis_hash,
        )

    def get_send_funds_transaction(
        self, amount, precise, first_round, last_round, fee, genesis_hash
    ):
        """Return the signed withdrawal group as bytes ready for send_raw_transaction."""
        return serialize_group(
            self.get_split_funds_transactions(
                amount, precise, first_round, last_round, fee, genesis_hash
            )
        )

    @classmethod
    def from_program(cls, program):
        """Rebuild a split contract from its base64 program."""
        try:
            bytecode = base64.b64decode(program, validate=True)
        except (ValueError, TypeError) as exc:
            raise DecodingError("program is not valid base64") from exc

        values = extract(config.SPLIT_TEMPLATE_BYTES, config.SPLIT_FIELDS, bytecode)
        max_fee, expiry_round, ratn, ratd, min_pay, owner, receiver_one, receiver_two = values
        try:
            split = make_split(
                owner, receiver_one, receiver_two, ratn, ratd,
                expiry_round, min_pay, max_fee,
            )
        except (EncodingError, TemplateInputError) as exc:
            raise DecodingError("program is not a split contract: {}".format(exc)) from exc
        if split.get_program_bytes() != bytecode:
            raise DecodingError("program is not a split contract")
        return split


def make_split(
    owner, receiver_one, receiver_two,
    ratn=config.DEFAULT_RATN, ratd=config.DEFAULT_RATD,
    expiry_round=config.DEFAULT_EXPIRY_ROUND,
    min_pay=config.DEFAULT_MIN_PAY, max_fee=config.DEFAULT_MAX_FEE,
):
    """Create and return a split contract from the provided arguments.

    Withdrawals are a two-transaction group paying receiver_one and
    receiver_two at ratn/ratd, with at least min_pay going to receiver_one.
    After expiry_round the owner may close the account out to itself.

    Args:
        owner (str): address refunded on timeout
        receiver_one (str): first recipient
        receiver_two (str): second recipient
        ratn (int): numerator of receiver_one's share
        ratd (int): denominator of receiver_one's share
        expiry_round (int): round after which the owner can close the account
        min_pay (int): minimum payout to receiver_one
        max_fee (int): highest fee each grouped transaction may pay
    """
    validate_ratio(ratn, ratd)
    values = [max_fee, expiry_round, ratn, ratd, min_pay, owner, receiver_one, receiver_two]
    bytecode = inject(config.SPLIT_TEMPLATE_BYTES, config.SPLIT_FIELDS, values)
    split = Split(
        address=derive_address(bytecode),
        program=base64.b64encode(bytecode).decode(),
        ratn=ratn,
        ratd=ratd,
        receiver_one=_address_text(receiver_one),
        receiver_two=_address_text(receiver_two),
        owner=_address_text(owner),
        expiry_round=expiry_round,
        min_pay=min_pay,
        max_fee=max_fee,
    )
    logger.debug("split contract %s for %s/%s", split.address, ratn, ratd)
    return split
