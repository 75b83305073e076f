"""Command line helpers for split contracts.

Examples
--------
# Print the escrow address and program for a 1/3 split
splitescrow make OWNER RECEIVER_ONE RECEIVER_TWO --ratn 1 --ratd 3

# Write a signed withdrawal group for `goal clerk rawsend`
splitescrow withdraw PROGRAM 3000 --first-round 10 --last-round 1010 \
    --genesis-hash SGO1GKSzyE7IEPItTxCByw9x8FmnrCDexi9/cOUJOiI= --out split.stxn
"""

import json
import logging

import typer

from splitescrow import config
from splitescrow.contract import Split, make_split
from splitescrow.errors import SplitEscrowError
from splitescrow.group import write_group

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="splitescrow",
    add_completion=False,
    no_args_is_help=True,
    help="Build split escrow contracts and their withdrawal groups.",
)


@app.callback()
def _configure(
    log_level: str = typer.Option(config.LOG_LEVEL, "--log-level", help="Python logging level."),
):
    logging.basicConfig(level=log_level.upper(), format="%(levelname)s %(name)s: %(message)s")


def _fail(exc):
    typer.echo("error: {}".format(exc), err=True)
    raise typer.Exit(1)


@app.command("make")
def make(
    owner: str = typer.Argument(..., help="Address refunded after the expiry round."),
    receiver_one: str = typer.Argument(..., help="First receiver address."),
    receiver_two: str = typer.Argument(..., help="Second receiver address."),
    ratn: int = typer.Option(config.DEFAULT_RATN, "--ratn", help="Numerator of receiver one's share."),
    ratd: int = typer.Option(config.DEFAULT_RATD, "--ratd", help="Denominator of receiver one's share."),
    expiry_round: int = typer.Option(config.DEFAULT_EXPIRY_ROUND, "--expiry-round"),
    min_pay: int = typer.Option(config.DEFAULT_MIN_PAY, "--min-pay"),
    max_fee: int = typer.Option(config.DEFAULT_MAX_FEE, "--max-fee"),
    json_out: bool = typer.Option(False, "--json", help="Output as JSON."),
):
    """Print the address and program of a split contract."""
    try:
        split = make_split(
            owner, receiver_one, receiver_two, ratn, ratd, expiry_round, min_pay, max_fee
        )
    except SplitEscrowError as exc:
        _fail(exc)

    if json_out:
        typer.echo(json.dumps(
            {"address": split.get_address(), "program": split.get_program()},
            indent=2, sort_keys=True,
        ))
        return
    typer.echo("address: {}".format(split.get_address()))
    typer.echo("program: {}".format(split.get_program()))


@app.command("withdraw")
def withdraw(
    program: str = typer.Argument(..., help="Base64 program of the split contract."),
    amount: int = typer.Argument(..., help="Total microAlgos to withdraw."),
    first_round: int = typer.Option(..., "--first-round"),
    last_round: int = typer.Option(..., "--last-round"),
    genesis_hash: str = typer.Option(..., "--genesis-hash", help="Base64 genesis hash."),
    fee: int = typer.Option(config.DEFAULT_FEE, "--fee", help="Flat fee of each transaction."),
    precise: bool = typer.Option(True, "--precise/--imprecise", help="Refuse amounts that leave a remainder."),
    out: str = typer.Option(..., "--out", help="File receiving the signed group."),
):
    """Write the signed withdrawal group of a split contract to a file."""
    try:
        split = Split.from_program(program)
        signed = split.get_split_funds_transactions(
            amount, precise, first_round, last_round, fee, genesis_hash
        )
    except SplitEscrowError as exc:
        _fail(exc)

    write_group(out, signed)
    typer.echo("address: {}".format(split.get_address()))
    for stxn in signed:
        typer.echo("{} -> {}: {}".format(stxn.transaction.get_txid(), stxn.transaction.receiver, stxn.transaction.amt))


def main():
    app()
