"""Divide a withdrawal between the two receivers of a split."""

from splitescrow.errors import ImpreciseSplitError, TemplateInputError


def validate_ratio(ratn, ratd):
    """Reject ratios that are not a fraction in (0, 1]."""
    for name, value in (("ratn", ratn), ("ratd", ratd)):
        if isinstance(value, bool) or not isinstance(value, int):
            raise TemplateInputError("{} must be an integer, got {!r}".format(name, value))
    if ratd <= 0:
        raise TemplateInputError("ratd must be positive, got {}".format(ratd))
    if ratn <= 0 or ratn > ratd:
        raise TemplateInputError("ratn must be in 1..{}, got {}".format(ratd, ratn))


def split_amount(amount, ratn, ratd, precise=True):
    """Return the payouts `(amount_one, amount_two)` for `amount`.

    Receiver one gets floor(amount * ratn / ratd), receiver two gets
    floor(amount * (ratd - ratn) / ratd). Whatever integer division leaves
    over goes to receiver two unless `precise` is set, in which case a
    leftover raises ImpreciseSplitError.
    """
    validate_ratio(ratn, ratd)
    if isinstance(amount, bool) or not isinstance(amount, int) or amount < 0:
        raise TemplateInputError("amount must be a non-negative integer, got {!r}".format(amount))

    amount_one = amount * ratn // ratd
    amount_two = amount * (ratd - ratn) // ratd
    remainder = amount - amount_one - amount_two
    if remainder:
        if precise:
            raise ImpreciseSplitError(amount, ratn, ratd, remainder)
        amount_two += remainder
    return amount_one, amount_two
