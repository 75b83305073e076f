"""Errors raised while building split escrow contracts and their withdrawals."""


class SplitEscrowError(Exception):
    """Base class for every error raised by this package."""


class TemplateError(SplitEscrowError):
    """The program template or its field table is malformed."""


class TemplateInputError(SplitEscrowError, ValueError):
    """A contract or withdrawal argument is out of range."""


class DecodingError(SplitEscrowError):
    """Textual program, template or address input could not be decoded."""


class EncodingError(SplitEscrowError):
    """A value does not fit the template field reserved for it."""


class ImpreciseSplitError(SplitEscrowError):
    """The amount cannot be divided exactly at the contract's ratio."""

    def __init__(self, amount, ratn, ratd, remainder):
        self.amount = amount
        self.ratn = ratn
        self.ratd = ratd
        self.remainder = remainder
        super().__init__(
            "could not precisely divide {} at ratio {}/{} (remainder {})".format(
                amount, ratn, ratd, remainder
            )
        )


class TransactionBuildError(SplitEscrowError):
    """Building, grouping or signing the withdrawal transactions failed."""
