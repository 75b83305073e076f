"""Split payment escrow contracts for Algorand."""

from splitescrow.contract import Split, make_split
from splitescrow.errors import (
    DecodingError,
    EncodingError,
    ImpreciseSplitError,
    SplitEscrowError,
    TemplateError,
    TemplateInputError,
    TransactionBuildError,
)

__version__ = "0.1.0"

__all__ = [
    "Split",
    "make_split",
    "SplitEscrowError",
    "TemplateError",
    "TemplateInputError",
    "DecodingError",
    "EncodingError",
    "ImpreciseSplitError",
    "TransactionBuildError",
]
